"""Notification center — in-process queue of transient operator messages."""

import logging
from collections import deque

from hr_admin.domain.entities import Notification, NotificationLevel

logger = logging.getLogger(__name__)


class NotificationCenter:
    """Collects toasts in arrival order until the front end drains them.

    The queue is bounded; when full the oldest message is discarded.
    """

    def __init__(self, max_pending: int = 100) -> None:
        self._pending: deque[Notification] = deque(maxlen=max_pending)

    def notify(self, level: NotificationLevel, message: str, source: str = "") -> Notification:
        notification = Notification(level=level, message=message, source=source)
        if len(self._pending) == self._pending.maxlen:
            logger.warning("Notification queue full — dropping oldest message")
        self._pending.append(notification)
        return notification

    def info(self, message: str, source: str = "") -> Notification:
        return self.notify(NotificationLevel.INFO, message, source)

    def success(self, message: str, source: str = "") -> Notification:
        return self.notify(NotificationLevel.SUCCESS, message, source)

    def error(self, message: str, source: str = "") -> Notification:
        return self.notify(NotificationLevel.ERROR, message, source)

    def drain(self) -> list[Notification]:
        """Return and clear every pending notification."""
        drained = list(self._pending)
        self._pending.clear()
        return drained

    @property
    def pending_count(self) -> int:
        return len(self._pending)
