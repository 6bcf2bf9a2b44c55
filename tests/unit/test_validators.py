"""
Test suite for entity validation rules.

Covers rule ordering (first failure wins), messages and boundaries for
users, sessions and the reflection update path.

System role: Verification of the validation gate
"""

from datetime import datetime, timedelta, timezone

import pytest

from mindfulness.core.exceptions import ValidationError
from mindfulness.core.validators import (
    validate_reflection_update,
    validate_session,
    validate_user,
    validate_user_update,
)
from mindfulness.models import MindfulnessSession, User


class TestValidateUser:
    """Test suite for validate_user()."""

    def test_valid_user_passes(self, sample_user: User) -> None:
        validate_user(sample_user)

    def test_missing_payload_is_rejected(self) -> None:
        with pytest.raises(ValidationError, match="User payload cannot be null"):
            validate_user(None)

    @pytest.mark.parametrize("full_name", [None, "", "   "])
    def test_blank_full_name_is_rejected(self, sample_user: User, full_name) -> None:
        sample_user.full_name = full_name
        with pytest.raises(ValidationError) as exc_info:
            validate_user(sample_user)
        assert exc_info.value.message == "Full name is mandatory"
        assert exc_info.value.field == "full_name"

    @pytest.mark.parametrize("email", [None, "", "asha.example.com"])
    def test_email_without_at_is_rejected(self, sample_user: User, email) -> None:
        sample_user.email = email
        with pytest.raises(ValidationError, match="A valid email is required"):
            validate_user(sample_user)

    def test_short_password_is_rejected(self, sample_user: User) -> None:
        sample_user.password = "abc"
        with pytest.raises(ValidationError) as exc_info:
            validate_user(sample_user)
        assert str(exc_info.value) == "Password must contain at least 6 characters"

    def test_six_character_password_is_accepted(self, sample_user: User) -> None:
        sample_user.password = "123456"
        validate_user(sample_user)

    def test_first_failing_rule_wins(self) -> None:
        user = User(full_name=" ", email="nope", password="x")
        with pytest.raises(ValidationError, match="Full name is mandatory"):
            validate_user(user)


class TestValidateUserUpdate:
    """Test suite for validate_user_update()."""

    def test_id_is_checked_before_fields(self) -> None:
        user = User(id=0, full_name="", email="bad", password="")
        with pytest.raises(ValidationError, match="User id is required for update"):
            validate_user_update(user)

    def test_field_rules_apply_after_id(self, sample_user: User) -> None:
        sample_user.id = 3
        sample_user.email = "bad"
        with pytest.raises(ValidationError, match="A valid email is required"):
            validate_user_update(sample_user)

    def test_missing_payload_is_rejected(self) -> None:
        with pytest.raises(ValidationError, match="User payload cannot be null"):
            validate_user_update(None)


class TestValidateSession:
    """Test suite for validate_session()."""

    def test_valid_session_passes(self, sample_session: MindfulnessSession) -> None:
        validate_session(sample_session)

    def test_missing_payload_is_rejected(self) -> None:
        with pytest.raises(ValidationError, match="Session payload cannot be null"):
            validate_session(None)

    @pytest.mark.parametrize("user_id", [0, -4])
    def test_non_positive_user_is_rejected(
        self, sample_session: MindfulnessSession, user_id: int
    ) -> None:
        sample_session.user_id = user_id
        with pytest.raises(ValidationError, match="Session must belong to a user"):
            validate_session(sample_session)

    def test_blank_title_is_rejected(self, sample_session: MindfulnessSession) -> None:
        sample_session.title = "  "
        with pytest.raises(ValidationError, match="Session title is required"):
            validate_session(sample_session)

    def test_missing_date_is_rejected(self, sample_session: MindfulnessSession) -> None:
        sample_session.scheduled_at = None
        with pytest.raises(ValidationError, match="date"):
            validate_session(sample_session)

    def test_date_with_utc_offset_is_rejected(
        self, sample_session: MindfulnessSession
    ) -> None:
        sample_session.scheduled_at = datetime.now(timezone.utc) + timedelta(hours=1)
        with pytest.raises(ValidationError, match="Session date looks incorrect"):
            validate_session(sample_session)

    def test_backdated_more_than_a_day_is_rejected(
        self, sample_session: MindfulnessSession
    ) -> None:
        now = datetime(2026, 10, 19, 12, 0)
        sample_session.scheduled_at = now - timedelta(days=1, seconds=1)
        with pytest.raises(ValidationError, match="Session date looks incorrect"):
            validate_session(sample_session, now=now)

    def test_backdated_exactly_a_day_is_accepted(
        self, sample_session: MindfulnessSession
    ) -> None:
        now = datetime(2026, 10, 19, 12, 0)
        sample_session.scheduled_at = now - timedelta(days=1)
        validate_session(sample_session, now=now)

    def test_two_days_in_the_past_is_rejected(
        self, sample_session: MindfulnessSession
    ) -> None:
        sample_session.scheduled_at = datetime.now() - timedelta(days=2)
        with pytest.raises(ValidationError, match="date"):
            validate_session(sample_session)

    @pytest.mark.parametrize("duration", [0, -15])
    def test_non_positive_duration_is_rejected(
        self, sample_session: MindfulnessSession, duration: int
    ) -> None:
        sample_session.duration_minutes = duration
        with pytest.raises(ValidationError, match="Duration must be positive"):
            validate_session(sample_session)

    def test_category_is_not_validated(self, sample_session: MindfulnessSession) -> None:
        sample_session.category = None
        validate_session(sample_session)


class TestValidateReflectionUpdate:
    """Test suite for validate_reflection_update()."""

    def test_valid_values_pass(self) -> None:
        validate_reflection_update(5, 20)

    def test_non_positive_id_is_rejected(self) -> None:
        with pytest.raises(ValidationError, match="Session id is required"):
            validate_reflection_update(0, 0)

    def test_non_positive_duration_is_rejected(self) -> None:
        with pytest.raises(ValidationError, match="Duration must be greater than zero"):
            validate_reflection_update(5, 0)
