"""User-facing notifications raised by studio operations."""
from __future__ import annotations

import logging
from collections import deque
from dataclasses import asdict, dataclass
from typing import Literal, Protocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Notification:
    level: Literal["success", "error"]
    message: str

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


class NotificationSink(Protocol):
    def success(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def latest(self) -> Notification | None: ...

    def history(self) -> list[Notification]: ...


class NotificationLog:
    """Default sink: keeps the most recent notifications and logs each one."""

    def __init__(self, max_history: int = 50) -> None:
        self._entries: deque[Notification] = deque(maxlen=max_history)

    def success(self, message: str) -> None:
        logger.info(message)
        self._entries.append(Notification("success", message))

    def error(self, message: str) -> None:
        logger.warning(message)
        self._entries.append(Notification("error", message))

    def latest(self) -> Notification | None:
        return self._entries[-1] if self._entries else None

    def history(self) -> list[Notification]:
        return list(self._entries)
