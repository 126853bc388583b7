"""Text formatting utilities for the TUI.

Hides timestamp formats, error message wording and the animated title.
"""

from datetime import datetime

from rich.style import Style
from rich.text import Text

from .config import RAINBOW_COLORS, TIMESTAMP_FORMAT, TITLE_TEXT


def format_timestamp(timestamp: datetime) -> str:
    """Format a message timestamp as ``HH:MM:SS``."""
    return timestamp.strftime(TIMESTAMP_FORMAT)


def format_error(detail: str) -> str:
    """Format a transport failure as chat message content."""
    return f"❌ Error: {detail}"


def title_color(frame: int) -> str:
    """Border color of the title banner for an animation frame."""
    return RAINBOW_COLORS[frame % len(RAINBOW_COLORS)]


def render_title(frame: int, title: str = TITLE_TEXT) -> Text:
    """Render the title with a rainbow that shifts every five frames."""
    text = Text(justify="center")
    for i, char in enumerate(title):
        color = RAINBOW_COLORS[(i + frame // 5) % len(RAINBOW_COLORS)]
        text.append(char, Style(color=color, bold=True))
    return text


def render_input(buffer: str, cursor: int, placeholder: str) -> Text:
    """Render the input buffer with the cursor cell in reverse video.

    An empty buffer shows the placeholder in dim grey instead.
    """
    if not buffer:
        return Text(placeholder, style="bright_black")

    text = Text(buffer, style="white")
    if cursor < len(buffer):
        text.stylize("reverse", cursor, cursor + 1)
    else:
        text.append(" ", style="reverse")
    return text
