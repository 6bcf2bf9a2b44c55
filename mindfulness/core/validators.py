"""
Entity validation rules.

Stateless checks run by the service layer before any write reaches the
database. Checks run in a fixed order and the first failure is raised;
errors are never aggregated.

Dependencies: mindfulness.core.exceptions, mindfulness.models
System role: Business validation gate for writes
"""

from datetime import datetime, timedelta

from mindfulness.core.exceptions import ValidationError
from mindfulness.models.activity import MindfulnessSession
from mindfulness.models.user import User

MIN_PASSWORD_LENGTH = 6
MAX_BACKDATE = timedelta(days=1)


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def validate_user(user: User | None) -> None:
    """
    Validate a user before insert or update.

    Args:
        user: User payload

    Raises:
        ValidationError: On the first failing rule
    """
    if user is None:
        raise ValidationError("User payload cannot be null")
    if _is_blank(user.full_name):
        raise ValidationError("Full name is mandatory", field="full_name")
    if user.email is None or "@" not in user.email:
        raise ValidationError("A valid email is required", field="email")
    if user.password is None or len(user.password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(
            f"Password must contain at least {MIN_PASSWORD_LENGTH} characters",
            field="password",
        )


def validate_user_update(user: User | None) -> None:
    """Require an existing id, then apply the regular user rules."""
    if user is not None and user.id <= 0:
        raise ValidationError("User id is required for update", field="id")
    validate_user(user)


def validate_session(session: MindfulnessSession | None, now: datetime | None = None) -> None:
    """
    Validate a session before it is scheduled.

    Sessions may not be backdated by more than one day relative to now.

    Args:
        session: Session payload
        now: Reference instant (defaults to the current local time)

    Raises:
        ValidationError: On the first failing rule
    """
    if session is None:
        raise ValidationError("Session payload cannot be null")
    if session.user_id <= 0:
        raise ValidationError("Session must belong to a user", field="user_id")
    if _is_blank(session.title):
        raise ValidationError("Session title is required", field="title")
    scheduled_at = session.scheduled_at
    # Only local wall-clock times are stored.
    if scheduled_at is None or scheduled_at.tzinfo is not None:
        raise ValidationError("Session date looks incorrect", field="scheduled_at")
    if now is None:
        now = datetime.now()
    if scheduled_at < now - MAX_BACKDATE:
        raise ValidationError("Session date looks incorrect", field="scheduled_at")
    if session.duration_minutes <= 0:
        raise ValidationError("Duration must be positive", field="duration_minutes")


def validate_reflection_update(session_id: int, duration_minutes: int) -> None:
    """Checks for the reflection update path; title and date rules do not apply."""
    if session_id <= 0:
        raise ValidationError("Session id is required", field="id")
    if duration_minutes <= 0:
        raise ValidationError(
            "Duration must be greater than zero", field="duration_minutes"
        )
