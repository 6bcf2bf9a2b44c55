"""Shared helpers for API routers."""

from .error_handling import error_response, handle_api_errors
from .form_parsing import parse_datetime, parse_int

__all__ = ["error_response", "handle_api_errors", "parse_datetime", "parse_int"]
