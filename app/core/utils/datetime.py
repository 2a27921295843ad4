"""날짜/시간 유틸리티"""

from datetime import datetime, timezone
from typing import Optional

UTC = timezone.utc


def now_utc() -> datetime:
    """현재 UTC 시간 반환"""
    return datetime.now(UTC)


def from_epoch_ms(value: Optional[int]) -> Optional[datetime]:
    """Unix epoch 밀리초를 UTC datetime으로 변환

    Clerk 페이로드의 created_at/updated_at은 밀리초 단위 정수입니다.
    """
    if value is None:
        return None
    return datetime.fromtimestamp(value / 1000, tz=UTC)


def ensure_utc(dt: datetime) -> datetime:
    """naive datetime은 UTC로 간주하여 tz 정보를 붙여 반환"""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)
