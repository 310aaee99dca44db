# windowquote/notify.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union


class ConfirmAction(str, Enum):
    DELETE_WINDOW_TYPE = "delete_window_type"
    LOAD_QUOTE = "load_quote"
    DELETE_QUOTE = "delete_quote"


@dataclass(frozen=True)
class Notice:
    message: str
    level: str = "info"  # info / success / error


@dataclass(frozen=True)
class PendingConfirmation:
    action: ConfirmAction
    payload: Any
    message: str


Message = Union[Notice, PendingConfirmation]


class NotificationChannel:
    """Holds the one message on screen; a new message replaces the old one."""

    def __init__(self):
        self.current: Optional[Message] = None

    @property
    def visible(self) -> bool:
        return self.current is not None

    @property
    def pending(self) -> Optional[PendingConfirmation]:
        return self.current if isinstance(self.current, PendingConfirmation) else None

    def notify(self, message: str, level: str = "info") -> Notice:
        self.current = Notice(message, level)
        return self.current

    def confirm(self, action: ConfirmAction, payload: Any, message: str) -> PendingConfirmation:
        self.current = PendingConfirmation(action, payload, message)
        return self.current

    def take_pending(self) -> Optional[PendingConfirmation]:
        pending = self.pending
        if pending is not None:
            self.current = None
        return pending

    def dismiss(self) -> None:
        self.current = None
