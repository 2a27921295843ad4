"""미들웨어 모듈"""

from app.core.middlewares.context import (
    get_request_id,
    get_webhook_id,
    log_context,
    set_request_id,
    set_webhook_id,
)
from app.core.middlewares.logging import LoggingMiddleware

__all__ = [
    "LoggingMiddleware",
    "get_request_id",
    "set_request_id",
    "get_webhook_id",
    "set_webhook_id",
    "log_context",
]
