"""Posts 도메인 스키마 정의"""

from typing import Optional

from pydantic import BaseModel, Field

from app.core.schemas import BaseSchema, TimestampMixin

SLUG_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"


class PostCreate(BaseModel):
    """게시글 생성 요청 스키마"""

    title: str = Field(..., min_length=1, max_length=500)
    slug: str = Field(
        ...,
        min_length=1,
        max_length=255,
        pattern=SLUG_PATTERN,
        description="소문자/숫자/하이픈으로 구성된 URL 슬러그",
    )
    excerpt: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)
    cover_image_id: Optional[str] = Field(default=None, max_length=255)


class PostResponse(BaseSchema, TimestampMixin):
    """게시글 응답 스키마"""

    id: int
    title: str
    slug: str
    excerpt: str
    content: str
    cover_image_id: Optional[str] = None
    author_id: int
    likes: int
