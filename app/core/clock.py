# app/core/clock.py
from datetime import datetime, timezone
from typing import Callable

# 현재 시각(UTC)을 돌려주는 함수 타입
Clock = Callable[[], datetime]

def utcnow() -> datetime:
    """기본 시계 (timezone-aware UTC)"""
    return datetime.now(timezone.utc)

def ensure_utc(value: datetime | None) -> datetime | None:
    """SQLite 등에서 tzinfo 없이 읽힌 값을 UTC로 보정"""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
