"""도메인 서비스 단위 테스트용 픽스처"""

import itertools
from typing import Any, Optional

import pytest

from app.domains.users.models import User


class InMemoryUserRepository:
    """UserRepository와 같은 인터페이스의 메모리 저장소"""

    def __init__(self):
        self.rows: list[User] = []
        self._ids = itertools.count(1)

    async def get_by_clerk_user_id(self, clerk_user_id: str) -> Optional[User]:
        matches = [u for u in self.rows if u.clerk_user_id == clerk_user_id]
        if len(matches) > 1:
            raise RuntimeError("Multiple rows were found")
        return matches[0] if matches else None

    async def get_all(self) -> list[User]:
        return list(self.rows)

    async def get_recent(self, limit: int) -> list[User]:
        return sorted(self.rows, key=lambda u: u.id, reverse=True)[:limit]

    async def create(self, attributes: dict[str, Any]) -> User:
        user = User(id=next(self._ids), **attributes)
        self.rows.append(user)
        return user

    async def patch(self, user: User, attributes: dict[str, Any]) -> User:
        for field, value in attributes.items():
            setattr(user, field, value)
        return user

    async def delete(self, user: User) -> None:
        self.rows.remove(user)


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()
