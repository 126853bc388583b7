"""Application state for the chat TUI.

A single ``AppState`` is created at startup and owned by the event loop,
which is its only writer. Every edit operation is a no-op at its
boundaries instead of raising.
"""

from dataclasses import dataclass, field

from .config import ANIMATION_PERIOD, STATUS_READY
from .models import ChatMessage, Sender


@dataclass
class AppState:
    """Mutable model behind the chat screen."""

    messages: list[ChatMessage] = field(default_factory=list)
    input: str = ""
    input_cursor: int = 0
    scroll_offset: int = 0
    is_loading: bool = False
    status_message: str = STATUS_READY
    animation_frame: int = 0

    def append_message(self, content: str, sender: Sender) -> ChatMessage:
        """Append a message stamped with the current time and scroll to it."""
        message = ChatMessage(content=content, sender=sender)
        self.messages.append(message)
        self.scroll_offset = len(self.messages) - 1
        return message

    # Input buffer

    def insert_char(self, char: str) -> None:
        self.input = self.input[: self.input_cursor] + char + self.input[self.input_cursor :]
        self.input_cursor += 1

    def delete_char(self) -> None:
        """Remove the character before the cursor (backspace)."""
        if self.input_cursor > 0:
            self.input = self.input[: self.input_cursor - 1] + self.input[self.input_cursor :]
            self.input_cursor -= 1

    def move_cursor_left(self) -> None:
        if self.input_cursor > 0:
            self.input_cursor -= 1

    def move_cursor_right(self) -> None:
        if self.input_cursor < len(self.input):
            self.input_cursor += 1

    def clear_input(self) -> None:
        self.input = ""
        self.input_cursor = 0

    # Scrolling

    def scroll_up(self, count: int = 1) -> None:
        self.scroll_offset = max(self.scroll_offset - count, 0)

    def scroll_down(self, count: int = 1) -> None:
        last = max(len(self.messages) - 1, 0)
        self.scroll_offset = min(self.scroll_offset + count, last)

    # Animation

    def tick_animation(self) -> None:
        self.animation_frame = (self.animation_frame + 1) % ANIMATION_PERIOD

    @property
    def last_reply(self) -> str | None:
        """Content of the most recent remote message."""
        for message in reversed(self.messages):
            if message.sender is Sender.REMOTE:
                return message.content
        return None
