"""Core 모듈"""

from app.core.config import settings
from app.core.database import Base, get_db
from app.core.exceptions import (
    BaseAPIException,
    ErrorCode,
    NotFoundException,
)
from app.core.logging import get_logger, setup_logging
from app.core.messaging import KafkaNotifier, Notifier, get_notifier

__all__ = [
    "settings",
    "Base",
    "get_db",
    "ErrorCode",
    "BaseAPIException",
    "NotFoundException",
    "get_logger",
    "setup_logging",
    "Notifier",
    "KafkaNotifier",
    "get_notifier",
]
