"""Users 도메인 모듈

Clerk 사용자 동기화와 사용자 조회를 담당하는 도메인입니다.

구조:
    - models.py: SQLAlchemy 모델 정의 (User)
    - schemas.py: Pydantic 스키마 (ClerkUserData, UserResponse, etc.)
    - repository.py: 데이터 접근 계층
    - service.py: 비즈니스 로직 (조회, 동기화 Upsert/Delete)
    - dependencies.py: 서비스/현재 사용자 의존성
    - router.py: API 엔드포인트
    - exceptions.py: 도메인 예외
"""

from app.domains.users.exceptions import (
    AuthenticationRequiredException,
    UserErrorCode,
    UserNotFoundException,
)
from app.domains.users.models import User
from app.domains.users.router import router
from app.domains.users.schemas import (
    ClerkEmailAddress,
    ClerkUserData,
    UserDeleteResponse,
    UserResponse,
)
from app.domains.users.service import RECENT_USERS_LIMIT, UserService

__all__ = [
    "User",
    "UserService",
    "RECENT_USERS_LIMIT",
    "ClerkEmailAddress",
    "ClerkUserData",
    "UserResponse",
    "UserDeleteResponse",
    "router",
    "UserErrorCode",
    "UserNotFoundException",
    "AuthenticationRequiredException",
]
