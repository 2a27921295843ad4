"""Users 도메인 스키마 정의

Clerk UserJSON 페이로드(웹훅 data / 내부 동기화 요청)와 응답 스키마입니다.
Clerk 페이로드에는 여기 정의되지 않은 필드가 많으므로 무시합니다.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.core.schemas import BaseSchema, TimestampMixin
from app.core.utils.datetime import from_epoch_ms


class ClerkEmailAddress(BaseModel):
    """Clerk 이메일 주소 항목"""

    model_config = ConfigDict(extra="ignore")

    id: Optional[str] = None
    email_address: str = Field(..., min_length=1)


class ClerkUserData(BaseModel):
    """Clerk 사용자 페이로드 (user.created / user.updated 이벤트의 data)

    이메일은 email_addresses의 첫 항목을 대표 이메일로 사용하므로
    최소 1개가 있어야 합니다.
    """

    model_config = ConfigDict(extra="ignore")

    id: str = Field(..., min_length=1, description="Clerk 사용자 ID")
    email_addresses: list[ClerkEmailAddress] = Field(..., min_length=1)
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    image_url: Optional[str] = None
    updated_at: Optional[int] = Field(
        default=None, description="Clerk 측 수정 시각 (epoch ms)"
    )

    @property
    def primary_email(self) -> str:
        return self.email_addresses[0].email_address

    @property
    def provider_updated_at(self) -> Optional[datetime]:
        return from_epoch_ms(self.updated_at)

    def to_user_attributes(self) -> dict[str, Any]:
        """User 레코드에 반영할 필드 매핑

        페이로드에 없는 선택 필드는 None(값 없음)으로 매핑합니다.
        post_ids 등 매핑되지 않은 필드는 포함하지 않습니다.
        """
        return {
            "email": self.primary_email,
            "clerk_user_id": self.id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "image_url": self.image_url,
        }


class UserResponse(BaseSchema, TimestampMixin):
    """사용자 응답 스키마"""

    id: int
    email: str
    clerk_user_id: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    image_url: Optional[str] = None
    post_ids: Optional[list[int]] = None
    last_sync_at: Optional[datetime] = None


class UserDeleteResponse(BaseModel):
    """동기화 삭제 결과"""

    clerk_user_id: str
    deleted: bool = Field(..., description="실제로 삭제된 레코드가 있었는지 여부")
