"""Posts 도메인 모듈

구조:
    - models.py: SQLAlchemy 모델 정의 (Post)
    - schemas.py: Pydantic 스키마 (PostCreate, PostResponse)
    - repository.py: 데이터 접근 계층
    - service.py: 비즈니스 로직 (작성, 좋아요, 삭제)
    - router.py: API 엔드포인트
    - exceptions.py: 도메인 예외
"""

from app.domains.posts.exceptions import (
    PostErrorCode,
    PostForbiddenException,
    PostNotFoundException,
    PostSlugAlreadyExistsException,
)
from app.domains.posts.models import Post
from app.domains.posts.router import router
from app.domains.posts.schemas import PostCreate, PostResponse
from app.domains.posts.service import PostService

__all__ = [
    "Post",
    "PostService",
    "PostCreate",
    "PostResponse",
    "router",
    "PostErrorCode",
    "PostNotFoundException",
    "PostSlugAlreadyExistsException",
    "PostForbiddenException",
]
