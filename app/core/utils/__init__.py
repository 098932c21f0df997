"""유틸리티 모듈"""

from app.core.utils.datetime import UTC, now_utc, today_utc
from app.core.utils.time import measure_time

__all__ = [
    "UTC",
    "now_utc",
    "today_utc",
    "measure_time",
]
