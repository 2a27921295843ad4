"""요청 단위 로그 컨텍스트 관리

요청 ID와 (웹훅 요청인 경우) 웹훅 메시지 ID를 contextvars로 보관하여
서비스 계층 로그에 함께 남길 수 있게 합니다.
"""

import contextvars
import uuid
from typing import Optional

request_id_ctx: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar(
    "request_id", default=None
)
webhook_id_ctx: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar(
    "webhook_id", default=None
)


def get_request_id() -> Optional[str]:
    """현재 요청 ID 반환"""
    return request_id_ctx.get()


def set_request_id(request_id: Optional[str] = None) -> str:
    """요청 ID 설정 (없으면 새로 생성)"""
    if not request_id:
        request_id = str(uuid.uuid4())
    request_id_ctx.set(request_id)
    return request_id


def get_webhook_id() -> Optional[str]:
    """현재 처리 중인 웹훅 메시지 ID (svix-id) 반환"""
    return webhook_id_ctx.get()


def set_webhook_id(webhook_id: Optional[str]) -> None:
    """웹훅 메시지 ID 설정"""
    webhook_id_ctx.set(webhook_id)


def log_context(**fields: Optional[str]) -> dict[str, Optional[str]]:
    """로그 extra 딕셔너리 생성

    Example::

        logger.info("User synced", extra=log_context(action="created"))
    """
    return {
        "request_id": get_request_id(),
        "webhook_id": get_webhook_id(),
        **fields,
    }
