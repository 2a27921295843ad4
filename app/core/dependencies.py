"""공통 의존성 함수 정의

이 모듈은 FastAPI 엔드포인트에서 사용되는 공통 의존성 함수들을 정의합니다.
"""

from functools import lru_cache
from typing import Optional

from fastapi import Depends, Header
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.core.config import settings
from app.core.exceptions import ErrorCode, UnauthorizedException
from app.core.identity import ClerkIdentityProvider, UserIdentity

# 토큰이 없어도 401을 내지 않고 None을 전달 (비로그인 호출 허용)
bearer_scheme = HTTPBearer(auto_error=False)


async def verify_internal_api_key(
    x_internal_api_key: str = Header(..., alias="X-Internal-Api-Key")
) -> None:
    """내부 API Key 검증 (신뢰된 동기화 호출용)

    Args:
        x_internal_api_key: 요청 헤더의 X-Internal-Api-Key 값

    Raises:
        UnauthorizedException: API Key가 유효하지 않은 경우

    Example:
        @router.post("/sync", dependencies=[Depends(verify_internal_api_key)])
        async def upsert_from_clerk():
            ...
    """
    if x_internal_api_key != settings.internal_api_key:
        raise UnauthorizedException(
            message="유효하지 않은 API 키입니다.",
            error_code=ErrorCode.INVALID_API_KEY,
        )


@lru_cache
def get_identity_provider() -> ClerkIdentityProvider:
    """Clerk 세션 토큰 검증기 의존성 (캐싱됨)"""
    return ClerkIdentityProvider.from_settings(settings)


async def get_current_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(
        bearer_scheme
    ),
    provider: ClerkIdentityProvider = Depends(get_identity_provider),
) -> Optional[UserIdentity]:
    """현재 호출자의 인증 주체 (비로그인/무효 토큰이면 None)"""
    token = credentials.credentials if credentials else None
    return provider.get_user_identity(token)
