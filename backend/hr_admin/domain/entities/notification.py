"""Domain entity for transient operator notifications (toasts)."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class NotificationLevel(str, Enum):
    INFO = "info"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class Notification:
    level: NotificationLevel
    message: str
    source: str = ""
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
