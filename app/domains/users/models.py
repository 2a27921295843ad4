"""Users 도메인 모델 정의

Clerk 사용자와 1:1로 동기화되는 사용자 레코드입니다.
레코드는 Clerk 웹훅(또는 내부 동기화 API)으로만 생성/수정/삭제됩니다.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import ARRAY, DateTime, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database import Base


class User(Base):
    """사용자 모델 (Clerk 동기화용)"""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="사용자 ID (삽입 순서대로 증가)",
    )
    email: Mapped[str] = mapped_column(
        String(320),
        nullable=False,
        comment="대표 이메일 (Clerk email_addresses의 첫 항목)",
    )
    clerk_user_id: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
        comment="Clerk 사용자 ID (동기화 자연키)",
    )
    first_name: Mapped[Optional[str]] = mapped_column(
        String(255), nullable=True, comment="이름"
    )
    last_name: Mapped[Optional[str]] = mapped_column(
        String(255), nullable=True, comment="성"
    )
    image_url: Mapped[Optional[str]] = mapped_column(
        Text, nullable=True, comment="프로필 이미지 URL"
    )
    post_ids: Mapped[Optional[list[int]]] = mapped_column(
        ARRAY(Integer),
        nullable=True,
        comment="작성한 게시글 ID 목록 (동기화 대상 아님)",
    )
    clerk_updated_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        comment="마지막으로 반영한 Clerk 이벤트의 updated_at",
    )
    last_sync_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True, comment="마지막 동기화 일시"
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
        comment="생성 일시",
    )
    updated_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        onupdate=func.now(),
        nullable=True,
        comment="수정 일시",
    )

    def __repr__(self) -> str:
        return (
            f"<User(id={self.id}, clerk_user_id={self.clerk_user_id}, "
            f"email={self.email})>"
        )
