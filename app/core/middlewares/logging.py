"""요청/응답 로깅 미들웨어"""

from typing import Callable, cast

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from app.core.logging import get_logger
from app.core.middlewares.context import set_request_id, set_webhook_id
from app.core.utils.time import measure_time

logger = get_logger(__name__)

# 로깅 제외 경로
EXCLUDE_PATHS = {"/health", "/docs", "/redoc", "/openapi.json", "/favicon.ico"}

REQUEST_ID_HEADER = "X-Request-ID"


class LoggingMiddleware(BaseHTTPMiddleware):
    """요청 ID 부여, 처리 시간 측정 및 요청/응답 로깅 미들웨어"""

    async def dispatch(
        self, request: Request, call_next: Callable
    ) -> Response:
        if request.url.path in EXCLUDE_PATHS:
            return cast(Response, await call_next(request))

        request_id = set_request_id(request.headers.get(REQUEST_ID_HEADER))
        set_webhook_id(None)
        route = f"{request.method} {request.url.path}"

        logger.info(
            f"[{request_id}] → {route} "
            f"| Client: {request.client.host if request.client else 'unknown'}"
        )

        with measure_time() as timer:
            try:
                response = await call_next(request)
            except Exception as e:
                logger.error(
                    f"[{request_id}] ✗ {route} | Error: {e} "
                    f"| Time: {timer['elapsed_ms']:.2f}ms"
                )
                raise

        elapsed_ms = timer["elapsed_ms"]
        response.headers[REQUEST_ID_HEADER] = request_id
        response.headers["X-Process-Time"] = f"{elapsed_ms:.2f}ms"

        failed = response.status_code >= 400
        log_method = logger.warning if failed else logger.info
        log_method(
            f"[{request_id}] {'✗' if failed else '✓'} {route} "
            f"| Status: {response.status_code} | Time: {elapsed_ms:.2f}ms"
        )

        return cast(Response, response)
