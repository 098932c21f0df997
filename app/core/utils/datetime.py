"""날짜/시간 유틸리티"""

from datetime import date, datetime, timezone

UTC = timezone.utc


def now_utc() -> datetime:
    """현재 UTC 시간 반환"""
    return datetime.now(UTC)


def today_utc() -> date:
    """UTC 기준 오늘 날짜 반환"""
    return now_utc().date()
