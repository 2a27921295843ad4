"""Users 도메인 서비스

사용자 조회와 Clerk 사용자 동기화(Upsert/Delete) 비즈니스 로직 계층입니다.
"""

from typing import Any, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.identity import UserIdentity
from app.core.logging import get_logger
from app.core.middlewares.context import log_context
from app.core.utils.datetime import ensure_utc, now_utc
from app.domains.users.exceptions import (
    AuthenticationRequiredException,
    UserNotFoundException,
)
from app.domains.users.models import User
from app.domains.users.repository import UserRepository
from app.domains.users.schemas import ClerkUserData

logger = get_logger(__name__)

RECENT_USERS_LIMIT = 5


class UserService:
    """사용자 서비스"""

    def __init__(self, session: AsyncSession):
        self.repository = UserRepository(session)

    async def get_users(self) -> list[User]:
        """전체 사용자 목록 (페이지네이션 없음)"""
        return list(await self.repository.get_all())

    async def get_recent_users(self) -> list[User]:
        """가장 최근에 생성된 사용자 5명 (최신순)"""
        return list(await self.repository.get_recent(RECENT_USERS_LIMIT))

    async def get_user_by_clerk_user_id(
        self, clerk_user_id: str
    ) -> Optional[User]:
        """Clerk 사용자 ID로 사용자 조회 (없으면 None)"""
        return await self.repository.get_by_clerk_user_id(clerk_user_id)

    async def get_current_user(
        self, identity: Optional[UserIdentity]
    ) -> Optional[User]:
        """현재 로그인한 사용자 조회

        Args:
            identity: 인증 주체 (비로그인이면 None)

        Returns:
            사용자 객체. 비로그인이거나 아직 동기화되지 않았으면 None
        """
        if identity is None:
            return None
        return await self.get_user_by_clerk_user_id(identity.subject)

    async def get_current_user_or_raise(
        self, identity: Optional[UserIdentity]
    ) -> User:
        """현재 로그인한 사용자 조회 (없으면 예외)

        Raises:
            AuthenticationRequiredException: 인증 정보가 없는 경우
            UserNotFoundException: 인증은 되었으나 동기화된 레코드가 없는 경우
        """
        if identity is None:
            raise AuthenticationRequiredException()

        user = await self.get_current_user(identity)
        if user is None:
            raise UserNotFoundException(clerk_user_id=identity.subject)
        return user

    async def upsert_from_clerk(self, data: ClerkUserData) -> User:
        """Clerk 사용자 Upsert (생성 또는 업데이트)

        - 존재하지 않으면 생성
        - 이미 존재하면 매핑된 필드만 덮어쓰기 (post_ids 유지)
        - 저장된 이벤트보다 오래된 이벤트(updated_at 기준)는 무시
        - 저장된 값과 같은 페이로드는 쓰기 없이 그대로 반환
        - updated_at이 없는 페이로드는 저장된 clerk_updated_at을 유지

        Args:
            data: Clerk 사용자 페이로드

        Returns:
            생성, 업데이트 또는 (변경이 없어서) 그대로인 사용자 객체
        """
        attributes = data.to_user_attributes()
        if data.provider_updated_at is not None:
            attributes["clerk_updated_at"] = data.provider_updated_at

        existing = await self.repository.get_by_clerk_user_id(data.id)

        if existing is None:
            attributes["last_sync_at"] = now_utc()
            user = await self.repository.create(attributes)
            logger.info(
                "User synced",
                extra=log_context(clerk_user_id=data.id, action="created"),
            )
            return user

        if self._is_stale(existing, data):
            logger.info(
                "Stale user event ignored",
                extra=log_context(
                    clerk_user_id=data.id, action="skipped_stale"
                ),
            )
            return existing

        if self._is_unchanged(existing, attributes):
            logger.info(
                "User already in sync",
                extra=log_context(clerk_user_id=data.id, action="unchanged"),
            )
            return existing

        attributes["last_sync_at"] = now_utc()
        user = await self.repository.patch(existing, attributes)
        logger.info(
            "User synced",
            extra=log_context(clerk_user_id=data.id, action="updated"),
        )
        return user

    async def delete_from_clerk(self, clerk_user_id: str) -> bool:
        """Clerk 사용자 삭제

        존재하지 않는 사용자 삭제는 중복 전달 등으로 정상적으로 발생할 수
        있으므로 경고 로그만 남깁니다.

        Args:
            clerk_user_id: 삭제할 Clerk 사용자 ID

        Returns:
            실제로 삭제했으면 True
        """
        user = await self.repository.get_by_clerk_user_id(clerk_user_id)

        if user is None:
            logger.warning(
                f"Cannot delete user! No user with ID: {clerk_user_id}",
                extra=log_context(clerk_user_id=clerk_user_id, action="noop"),
            )
            return False

        await self.repository.delete(user)
        logger.info(
            "User deleted",
            extra=log_context(clerk_user_id=clerk_user_id, action="deleted"),
        )
        return True

    @staticmethod
    def _is_stale(existing: User, data: ClerkUserData) -> bool:
        incoming = data.provider_updated_at
        if incoming is None or existing.clerk_updated_at is None:
            return False
        return incoming < ensure_utc(existing.clerk_updated_at)

    @staticmethod
    def _is_unchanged(existing: User, attributes: dict[str, Any]) -> bool:
        for field, value in attributes.items():
            current = getattr(existing, field)
            if field == "clerk_updated_at" and current is not None:
                current = ensure_utc(current)
            if current != value:
                return False
        return True
