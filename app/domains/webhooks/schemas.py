"""Webhooks 도메인 스키마 정의"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class ClerkEventType(str, Enum):
    """처리하는 Clerk 이벤트 타입"""

    USER_CREATED = "user.created"
    USER_UPDATED = "user.updated"
    USER_DELETED = "user.deleted"


class ClerkWebhookEvent(BaseModel):
    """서명 검증을 통과한 Clerk 웹훅 이벤트"""

    model_config = ConfigDict(extra="ignore")

    type: str = Field(..., description="이벤트 타입 (예: user.created)")
    object: str = "event"
    data: dict[str, Any] = Field(default_factory=dict)


class ClerkDeletedObject(BaseModel):
    """user.deleted 이벤트의 data"""

    model_config = ConfigDict(extra="ignore")

    id: Optional[str] = None
    deleted: bool = True


class WebhookAction(str, Enum):
    """웹훅 처리 결과"""

    UPSERTED = "upserted"
    DELETED = "deleted"
    NOOP = "noop"
    IGNORED = "ignored"


class WebhookResult(BaseModel):
    """웹훅 처리 결과 응답"""

    type: str
    action: WebhookAction
    clerk_user_id: Optional[str] = None
