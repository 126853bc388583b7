"""Data models for the TUI.

Hides the internal representation of chat messages and styled text runs.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class Sender(str, Enum):
    """Who authored a chat message."""

    USER = "user"
    REMOTE = "remote"


class RunStyle(str, Enum):
    """Style tag attached to a run of text."""

    PLAIN = "plain"
    BOLD = "bold"


@dataclass(frozen=True)
class ChatMessage:
    """A chat message in the conversation."""

    content: str
    sender: Sender
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def is_user(self) -> bool:
        return self.sender is Sender.USER


@dataclass(frozen=True)
class StyledRun:
    """A contiguous fragment of text sharing one style."""

    text: str
    style: RunStyle = RunStyle.PLAIN
