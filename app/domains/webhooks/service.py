"""Webhooks 도메인 서비스

검증된 Clerk 이벤트를 사용자 동기화 작업으로 분배합니다.
"""

from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from app.core.logging import get_logger
from app.core.middlewares.context import log_context
from app.domains.users.schemas import ClerkUserData
from app.domains.users.service import UserService
from app.domains.webhooks.schemas import (
    ClerkDeletedObject,
    ClerkEventType,
    ClerkWebhookEvent,
    WebhookAction,
    WebhookResult,
)

logger = get_logger(__name__)


class ClerkWebhookService:
    """Clerk 웹훅 이벤트 처리 서비스"""

    def __init__(self, user_service: UserService):
        self.user_service = user_service

    async def handle_event(self, event: ClerkWebhookEvent) -> WebhookResult:
        """이벤트 타입별 처리

        - user.created / user.updated: 사용자 Upsert
        - user.deleted: 사용자 삭제 (없으면 no-op)
        - 그 외: 무시
        """
        if event.type in (
            ClerkEventType.USER_CREATED,
            ClerkEventType.USER_UPDATED,
        ):
            data = self._parse(ClerkUserData, event)
            await self.user_service.upsert_from_clerk(data)
            return WebhookResult(
                type=event.type,
                action=WebhookAction.UPSERTED,
                clerk_user_id=data.id,
            )

        if event.type == ClerkEventType.USER_DELETED:
            deleted = self._parse(ClerkDeletedObject, event)
            if not deleted.id:
                logger.warning(
                    "user.deleted event without user id",
                    extra=log_context(action="noop"),
                )
                return WebhookResult(type=event.type, action=WebhookAction.NOOP)

            removed = await self.user_service.delete_from_clerk(deleted.id)
            return WebhookResult(
                type=event.type,
                action=WebhookAction.DELETED if removed else WebhookAction.NOOP,
                clerk_user_id=deleted.id,
            )

        logger.info(
            f"Ignored Clerk webhook event: {event.type}",
            extra=log_context(action="ignored"),
        )
        return WebhookResult(type=event.type, action=WebhookAction.IGNORED)

    @staticmethod
    def _parse(schema, event: ClerkWebhookEvent):
        try:
            return schema.model_validate(event.data)
        except ValidationError as e:
            raise RequestValidationError(e.errors()) from e
