"""Users 도메인 리포지토리

Clerk 사용자 동기화를 위한 데이터 접근 계층입니다.
"""

from typing import Any, Optional, Sequence, cast

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.domains.users.models import User


class UserRepository:
    """사용자 리포지토리"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_clerk_user_id(self, clerk_user_id: str) -> Optional[User]:
        """Clerk 사용자 ID로 사용자 조회 (유니크 인덱스)

        Args:
            clerk_user_id: Clerk 사용자 ID

        Returns:
            사용자 객체 또는 None

        Raises:
            MultipleResultsFound: 같은 Clerk ID의 레코드가 둘 이상인 경우
        """
        query = select(User).where(User.clerk_user_id == clerk_user_id)
        result = await self.session.execute(query)
        return cast(Optional[User], result.scalar_one_or_none())

    async def get_all(self) -> Sequence[User]:
        """전체 사용자 조회 (삽입 순서)"""
        query = select(User).order_by(User.id.asc())
        result = await self.session.execute(query)
        return cast(Sequence[User], result.scalars().all())

    async def get_recent(self, limit: int) -> Sequence[User]:
        """최근 삽입된 사용자 조회 (최신순)

        Args:
            limit: 조회할 최대 레코드 수

        Returns:
            사용자 목록
        """
        query = select(User).order_by(User.id.desc()).limit(limit)
        result = await self.session.execute(query)
        return cast(Sequence[User], result.scalars().all())

    async def create(self, attributes: dict[str, Any]) -> User:
        """사용자 생성"""
        user = User(**attributes)
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user

    async def patch(self, user: User, attributes: dict[str, Any]) -> User:
        """전달된 필드만 덮어쓰기 (나머지 필드는 유지)"""
        for field, value in attributes.items():
            setattr(user, field, value)
        await self.session.flush()
        await self.session.refresh(user)
        return user

    async def delete(self, user: User) -> None:
        """사용자 삭제 (Hard Delete)"""
        await self.session.delete(user)
        await self.session.flush()
