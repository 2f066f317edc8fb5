"""
API middleware.
"""

from .request_id import RequestIdMiddleware
from .logging import LoggingMiddleware

__all__ = [
    "RequestIdMiddleware",
    "LoggingMiddleware",
]
