"""Observability module for MedShare.

Provides structured logging, request correlation and metrics.
"""

from .logging_config import configure_logging, get_logger
from .request_id import current_request_id, new_request_id
from .middleware import RequestIDMiddleware

__all__ = [
    "configure_logging",
    "get_logger",
    "current_request_id",
    "new_request_id",
    "RequestIDMiddleware",
]
