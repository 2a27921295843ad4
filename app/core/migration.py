"""마이그레이션 자동 실행 유틸리티

서버 시작 시 Alembic 마이그레이션 상태를 확인하고 필요하면 head까지 올립니다.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from alembic import command
from alembic.config import Config
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory
from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError

from app.core.config import settings
from app.core.logging import get_logger

logger = get_logger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parents[2]


@dataclass(frozen=True)
class MigrationStatus:
    """마이그레이션 상태"""

    current: Optional[str]
    head: Optional[str]

    @property
    def is_up_to_date(self) -> bool:
        return self.current == self.head


def get_sync_database_url(database_url: str) -> str:
    """async 드라이버 URL을 Alembic용 sync(psycopg2) URL로 변환"""
    return database_url.replace("+asyncpg", "+psycopg2")


def get_alembic_config() -> Config:
    """Alembic 설정 객체 반환"""
    config = Config(str(PROJECT_ROOT / "alembic.ini"))
    config.set_main_option("script_location", str(PROJECT_ROOT / "migrations"))
    config.set_main_option(
        "sqlalchemy.url", get_sync_database_url(settings.database_url)
    )
    return config


def get_current_revision() -> Optional[str]:
    """현재 데이터베이스의 마이그레이션 버전 조회"""
    engine = create_engine(get_sync_database_url(settings.database_url))
    try:
        with engine.connect() as conn:
            rev = MigrationContext.configure(conn).get_current_revision()
            return str(rev) if rev else None
    finally:
        engine.dispose()


def get_head_revision() -> Optional[str]:
    """최신 마이그레이션 버전 조회"""
    script = ScriptDirectory.from_config(get_alembic_config())
    head = script.get_current_head()
    return str(head) if head else None


def check_migration_status() -> MigrationStatus:
    """마이그레이션 상태 확인"""
    return MigrationStatus(
        current=get_current_revision(), head=get_head_revision()
    )


def run_migrations_on_startup(auto_migrate: bool = True) -> None:
    """서버 시작 시 마이그레이션 확인 및 실행

    Args:
        auto_migrate: True면 head까지 자동 업그레이드, False면 상태만 로깅

    Raises:
        RuntimeError: 프로덕션 환경에서 마이그레이션 확인/실행에 실패한 경우
    """
    try:
        status = check_migration_status()

        if status.is_up_to_date:
            logger.info(f"✅ Migrations up to date (revision: {status.current})")
            return

        logger.warning(
            f"⚠️ Migrations pending ({status.current} → {status.head})"
        )
        if auto_migrate:
            command.upgrade(get_alembic_config(), "head")
            logger.info(f"✅ Migrated to revision {status.head}")

    except SQLAlchemyError as e:
        logger.error(f"❌ Migration check failed: {e}")
        # 개발 환경에서는 DB 없이도 서버를 띄울 수 있게 함
        if settings.is_production:
            raise RuntimeError("Migration check failed in production") from e
        logger.warning("⚠️ Continuing startup outside production")
