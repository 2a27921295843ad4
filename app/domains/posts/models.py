"""Posts 도메인 모델 정의"""

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database import Base


class Post(Base):
    """게시글 모델

    author_id는 users.id를 가리키지만 외래키 제약은 두지 않습니다.
    사용자가 삭제되어도 게시글은 남습니다.
    """

    __tablename__ = "posts"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="게시글 ID",
    )
    title: Mapped[str] = mapped_column(
        String(500), nullable=False, comment="제목"
    )
    slug: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
        comment="URL 슬러그 (유니크 조회 키)",
    )
    excerpt: Mapped[str] = mapped_column(Text, nullable=False, comment="요약")
    content: Mapped[str] = mapped_column(Text, nullable=False, comment="본문")
    cover_image_id: Mapped[Optional[str]] = mapped_column(
        String(255), nullable=True, comment="커버 이미지 오브젝트 키"
    )
    author_id: Mapped[int] = mapped_column(
        Integer, nullable=False, index=True, comment="작성자 사용자 ID"
    )
    likes: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        server_default="0",
        comment="좋아요 수",
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
        return f"<Post(id={self.id}, slug={self.slug}, author_id={self.author_id})>"
