"""
Observability module.

Provides logging configuration and request logging middleware.
"""

from mindfulness.observability.logger import configure_logging
from mindfulness.observability.middleware import RequestLoggingMiddleware

__all__ = ["RequestLoggingMiddleware", "configure_logging"]
