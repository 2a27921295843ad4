"""테스트 설정"""

import base64
import os
import time
from typing import Generator
from unittest.mock import MagicMock

import pytest
import pytest_asyncio
from docker import from_env
from docker.errors import DockerException
from httpx import ASGITransport, AsyncClient
from jose import jwt
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from testcontainers.postgres import PostgresContainer

from app.core.config import settings
from app.core.database import Base, get_db
from app.core.dependencies import get_identity_provider
from app.core.identity import ClerkIdentityProvider
from app.core.webhooks import sign_webhook_payload
from app.main import app

TEST_JWT_SECRET = "test-clerk-jwt-secret-with-enough-length"
TEST_WEBHOOK_SECRET = "whsec_" + base64.b64encode(
    b"test-clerk-webhook-signing-key"
).decode()


def _is_docker_available() -> bool:
    """로컬 환경에서 Docker 접근 가능 여부 확인"""
    if os.getenv("FORCE_DOCKER_TESTS", "").lower() in {"1", "true"}:
        return True
    if os.getenv("SKIP_DOCKER_TESTS", "").lower() in {"1", "true"}:
        return False

    try:
        client = from_env()
        client.ping()
        return True
    except DockerException:
        return False
    except Exception:
        return False


DOCKER_AVAILABLE = _is_docker_available()


def make_session_token(subject: str, **claims) -> str:
    """테스트용 Clerk 세션 토큰 (HS256)"""
    now = int(time.time())
    payload = {
        "sub": subject,
        "sid": f"sess_{subject}",
        "iat": now,
        "exp": now + 300,
        **claims,
    }
    return jwt.encode(payload, TEST_JWT_SECRET, algorithm="HS256")


def make_clerk_user_payload(
    clerk_user_id: str,
    email: str,
    first_name: str | None = None,
    last_name: str | None = None,
    image_url: str | None = None,
    updated_at: int | None = None,
) -> dict:
    """Clerk UserJSON 형태의 페이로드"""
    return {
        "object": "user",
        "id": clerk_user_id,
        "email_addresses": [
            {
                "id": f"idn_{clerk_user_id}",
                "object": "email_address",
                "email_address": email,
            }
        ],
        "first_name": first_name,
        "last_name": last_name,
        "image_url": image_url,
        "updated_at": updated_at,
    }


@pytest.fixture
def clerk_user_payload():
    return make_clerk_user_payload


@pytest.fixture
def session_token():
    return make_session_token


@pytest.fixture
def auth_header():
    """Bearer 세션 토큰 헤더 생성"""

    def _factory(subject: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {make_session_token(subject)}"}

    return _factory


@pytest.fixture
def test_identity_provider() -> ClerkIdentityProvider:
    return ClerkIdentityProvider(jwt_key=TEST_JWT_SECRET, algorithms=["HS256"])


@pytest.fixture
def webhook_secret(monkeypatch) -> str:
    """테스트용 웹훅 시크릿을 settings에 주입"""
    monkeypatch.setattr(settings, "clerk_webhook_secret", TEST_WEBHOOK_SECRET)
    return TEST_WEBHOOK_SECRET


@pytest.fixture
def signed_webhook(webhook_secret):
    """서명된 Clerk 웹훅 요청 (body, headers) 생성"""
    counter = iter(range(1, 1_000_000))

    def _factory(event: dict) -> tuple[bytes, dict[str, str]]:
        import json

        body = json.dumps(event).encode()
        msg_id = f"msg_{next(counter)}"
        timestamp = int(time.time())
        headers = {
            "svix-id": msg_id,
            "svix-timestamp": str(timestamp),
            "svix-signature": sign_webhook_payload(
                webhook_secret, msg_id, timestamp, body
            ),
            "content-type": "application/json",
        }
        return body, headers

    return _factory


@pytest.fixture
def api_key_header():
    """Internal API Key 헤더"""
    return {"X-Internal-Api-Key": settings.internal_api_key}


@pytest.fixture(scope="session")
def postgres_container() -> Generator[PostgresContainer, None, None]:
    """PostgreSQL 테스트 컨테이너"""
    if not DOCKER_AVAILABLE:
        pytest.skip("Docker is not available; skipping container-based tests.")

    with PostgresContainer("postgres:16-alpine") as postgres:
        yield postgres


@pytest.fixture(scope="session")
def test_database_url(postgres_container: PostgresContainer) -> str:
    """테스트 데이터베이스 URL (asyncpg)"""
    return str(
        postgres_container.get_connection_url().replace(
            "postgresql+psycopg2://", "postgresql+asyncpg://"
        )
    )


# NOTE:
# pytest-asyncio는 테스트마다 독립적인 event loop를 생성하므로
# async fixture는 모두 function 스코프로 유지
@pytest_asyncio.fixture
async def db_session(test_database_url: str):
    """테스트 데이터베이스 세션 (테스트마다 깨끗한 스키마)"""
    engine = create_async_engine(test_database_url, echo=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    async_session: async_sessionmaker[AsyncSession] = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()

    await engine.dispose()


@pytest_asyncio.fixture
async def client(db_session, test_identity_provider):
    """비동기 테스트 클라이언트 (테스트 DB 사용)"""

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_identity_provider] = (
        lambda: test_identity_provider
    )

    transport = ASGITransport(app=app)
    async with AsyncClient(
        transport=transport, base_url="http://test"
    ) as client:
        yield client

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def api_client(test_identity_provider):
    """DB 없이 동작하는 테스트 클라이언트

    인증/서명 검증처럼 저장소에 닿기 전에 끝나는 요청을 검증할 때 사용합니다.
    """

    async def override_get_db():
        yield MagicMock()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_identity_provider] = (
        lambda: test_identity_provider
    )

    transport = ASGITransport(app=app)
    async with AsyncClient(
        transport=transport, base_url="http://test"
    ) as client:
        yield client

    app.dependency_overrides.clear()
