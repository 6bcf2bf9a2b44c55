"""
API error handling utilities.

A decorator mapping service-layer failures to HTTP responses. This is the
only place failures become status codes: validation failures become 400
with their message, anything else becomes 500 with a generic body so that
storage details never reach the client.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status
from fastapi.responses import JSONResponse

from mindfulness.core.exceptions import DataAccessError, ValidationError

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

INTERNAL_ERROR_MESSAGE = "Internal error"


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def handle_api_errors(func: F) -> F:
    """
    Decorator turning service exceptions into JSON error responses.

    HTTPException raised by the endpoint itself passes through unchanged.
    """
    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)

        except HTTPException:
            raise

        except ValidationError as e:
            logger.warning(
                "Invalid request",
                extra={"error": e.message, "field": e.field},
            )
            return error_response(status.HTTP_400_BAD_REQUEST, e.message)

        except DataAccessError as e:
            logger.error(
                "Data access failure",
                extra={"error": e.message, "cause": repr(e.cause)},
            )
            return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)

        except Exception:
            logger.exception("Unexpected failure handling request")
            return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)

    return wrapper  # type: ignore
