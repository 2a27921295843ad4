"""Webhooks 도메인 모듈

Clerk 웹훅을 서명 검증 후 사용자 동기화로 연결합니다.
"""

from app.domains.webhooks.router import router
from app.domains.webhooks.schemas import (
    ClerkEventType,
    ClerkWebhookEvent,
    WebhookAction,
    WebhookResult,
)
from app.domains.webhooks.service import ClerkWebhookService

__all__ = [
    "router",
    "ClerkEventType",
    "ClerkWebhookEvent",
    "ClerkWebhookService",
    "WebhookAction",
    "WebhookResult",
]
