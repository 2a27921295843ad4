"""Posts 도메인 예외 정의"""

from enum import Enum

from app.core.exceptions import (
    ConflictException,
    ForbiddenException,
    NotFoundException,
)


class PostErrorCode(str, Enum):
    """게시글 도메인 에러 코드"""

    POST_NOT_FOUND = "POST_NOT_FOUND"
    POST_SLUG_ALREADY_EXISTS = "POST_SLUG_ALREADY_EXISTS"
    POST_FORBIDDEN = "POST_FORBIDDEN"


class PostNotFoundException(NotFoundException):
    """게시글을 찾을 수 없는 경우"""

    def __init__(self, slug: str | None = None):
        detail = {"slug": slug} if slug else {}
        super().__init__(
            message="게시글을 찾을 수 없습니다.",
            error_code=PostErrorCode.POST_NOT_FOUND,
            detail=detail,
        )


class PostSlugAlreadyExistsException(ConflictException):
    """이미 사용 중인 슬러그인 경우"""

    def __init__(self, slug: str):
        super().__init__(
            message="이미 사용 중인 슬러그입니다.",
            error_code=PostErrorCode.POST_SLUG_ALREADY_EXISTS,
            detail={"slug": slug},
        )


class PostForbiddenException(ForbiddenException):
    """작성자가 아닌 사용자가 게시글을 변경하려는 경우"""

    def __init__(self, slug: str | None = None):
        detail = {"slug": slug} if slug else {}
        super().__init__(
            message="게시글 작성자만 수행할 수 있습니다.",
            error_code=PostErrorCode.POST_FORBIDDEN,
            detail=detail,
        )
