"""Users 도메인 의존성"""

from typing import Optional

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.core.dependencies import get_current_identity
from app.core.identity import UserIdentity
from app.domains.users.models import User
from app.domains.users.service import UserService


def get_user_service(session: AsyncSession = Depends(get_db)) -> UserService:
    """UserService 의존성"""
    return UserService(session)


async def get_current_user_or_raise(
    identity: Optional[UserIdentity] = Depends(get_current_identity),
    service: UserService = Depends(get_user_service),
) -> User:
    """로그인 + 동기화 완료된 사용자가 필요한 엔드포인트용 의존성"""
    return await service.get_current_user_or_raise(identity)
