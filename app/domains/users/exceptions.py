"""Users 도메인 예외 정의"""

from enum import Enum

from app.core.exceptions import NotFoundException, UnauthorizedException


class UserErrorCode(str, Enum):
    """사용자 도메인 에러 코드"""

    USER_NOT_FOUND = "USER_NOT_FOUND"
    AUTHENTICATION_REQUIRED = "AUTHENTICATION_REQUIRED"


class UserNotFoundException(NotFoundException):
    """사용자를 찾을 수 없는 경우"""

    def __init__(self, clerk_user_id: str | None = None):
        detail = {"clerk_user_id": clerk_user_id} if clerk_user_id else {}
        super().__init__(
            message="사용자를 찾을 수 없습니다.",
            error_code=UserErrorCode.USER_NOT_FOUND,
            detail=detail,
        )


class AuthenticationRequiredException(UnauthorizedException):
    """로그인한 사용자가 필요한 요청에 인증 정보가 없는 경우"""

    def __init__(self):
        super().__init__(
            message="로그인이 필요합니다.",
            error_code=UserErrorCode.AUTHENTICATION_REQUIRED,
        )
