"""Infrastructure - configuration, logging and request context."""

from .config import ClientConfig
from .logging import get_logger, reset_logging_for_tests
from .request_context import current_request_id

__all__ = [
    "ClientConfig",
    "get_logger",
    "reset_logging_for_tests",
    "current_request_id",
]
