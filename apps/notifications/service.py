import logging
from typing import List, Optional

from apps.notifications.schemas import NotificationOut

logger = logging.getLogger(__name__)


def _describe_error(error: object) -> str:
    """Best human-readable text for an error coming out of a collaborator."""
    detail = getattr(error, "detail", None)
    if isinstance(detail, str) and detail:
        return detail
    text = str(error)
    return text or type(error).__name__


class Notifications:
    """
    Collects the notifications raised by a view until the client picks them up.
    """

    def __init__(self) -> None:
        self._pending: List[NotificationOut] = []

    def success(self, message: str, subject: Optional[str] = None) -> None:
        logger.info("%s%s", message, f": {subject}" if subject else "")
        self._pending.append(NotificationOut(type="success", title=message, message=subject))

    def error(self, title: str, error: object, message: str) -> None:
        detail = _describe_error(error)
        logger.error("%s: %s (%s)", title, message, detail)
        self._pending.append(NotificationOut(type="error", title=title, message=message, detail=detail))

    @property
    def pending(self) -> List[NotificationOut]:
        return list(self._pending)

    def drain(self) -> List[NotificationOut]:
        """
        Return all pending notifications and forget them.
        """
        drained, self._pending = self._pending, []
        return drained
