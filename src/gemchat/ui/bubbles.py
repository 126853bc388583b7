"""Chat bubble rendering.

Hides how a message becomes a bordered block of display lines:
- wrapping budget and chrome reserved around the content
- header label placement in the top border
- padding arithmetic (always in display cells, never characters)
- alignment (user bubbles right, remote bubbles left)

Bubbles are recomputed on every redraw and never stored.
"""

from dataclasses import dataclass, field

from rich.cells import cell_len, set_cell_size
from rich.style import Style
from rich.text import Text

from .config import (
    LOADING_COLOR,
    LOADING_LABEL,
    LOADING_TEXT,
    REMOTE_CHROME_WIDTH,
    REMOTE_COLOR,
    REMOTE_LABEL,
    SPINNER_FRAMES,
    TEXT_COLOR,
    USER_CHROME_WIDTH,
    USER_COLOR,
    USER_LABEL,
    USER_PREFIX,
)
from .formatting import format_timestamp
from .markup import parse_markup, runs_to_text
from .models import ChatMessage
from .state import AppState
from .wrapping import wrap_text

# A space plus at least one "─" between the header label and the corner
LABEL_GAP = 2


@dataclass(frozen=True)
class LoadingIndicator:
    """Stand-in for the reply while a send is outstanding."""

    frame: int


@dataclass
class Bubble:
    """A rendered bubble: display lines of identical cell width."""

    lines: list[Text] = field(default_factory=list)

    @property
    def width(self) -> int:
        return max((line.cell_len for line in self.lines), default=0)

    @property
    def height(self) -> int:
        return len(self.lines)

    def plain_lines(self) -> list[str]:
        return [line.plain for line in self.lines]


@dataclass
class ConversationLayout:
    """All bubbles of a conversation stacked into one list of lines.

    ``anchors[i]`` is the index of the first line of message ``i``.
    """

    lines: list[Text] = field(default_factory=list)
    anchors: list[int] = field(default_factory=list)


def spinner_glyph(frame: int) -> str:
    """Spinner character for an animation frame."""
    return SPINNER_FRAMES[frame % len(SPINNER_FRAMES)]


def _top_border(label: str, interior: int, color: str) -> Text:
    label_width = max(min(cell_len(label), interior - LABEL_GAP), 0)
    label = set_cell_size(label, label_width)
    fill = "─" * (interior - 1 - label_width)
    return Text(f"╭─ {label} {fill}╮", style=Style(color=color))


def _bottom_border(interior: int, color: str) -> Text:
    return Text(f"╰{'─' * (interior + 2)}╯", style=Style(color=color))


def _body_line(content: Text, interior: int, color: str) -> Text:
    border_style = Style(color=color)
    line = Text()
    line.append("│ ", border_style)
    line.append_text(content)
    line.append(" " * max(interior - content.cell_len, 0))
    line.append(" │", border_style)
    return line


def _build(label: str, body: list[Text], max_interior: int, color: str) -> Bubble:
    content_width = max((line.cell_len for line in body), default=0)
    interior = max(content_width, cell_len(label) + LABEL_GAP)
    # Clamp to the budget, but never below the content itself
    interior = max(min(interior, max_interior), content_width, 1)

    lines = [_top_border(label, interior, color)]
    lines.extend(_body_line(content, interior, color) for content in body)
    lines.append(_bottom_border(interior, color))
    return Bubble(lines)


def _align_right(bubble: Bubble, area_width: int) -> Bubble:
    indent = max(area_width - bubble.width, 0)
    if not indent:
        return bubble
    return Bubble([Text(" " * indent) + line for line in bubble.lines])


def render_message(message: ChatMessage, area_width: int) -> Bubble:
    """Render one chat message as a bubble.

    Args:
        message: Message to render
        area_width: Width of the area the bubble is placed in

    Returns:
        The bubble, already aligned inside ``area_width``
    """
    timestamp = format_timestamp(message.timestamp)

    if message.is_user:
        color = USER_COLOR
        label = f"{USER_LABEL} {timestamp}"
        max_interior = max(area_width - USER_CHROME_WIDTH, 0)
        prefix_width = cell_len(USER_PREFIX)
        wrapped = wrap_text(message.content, max_interior - prefix_width)
        body = []
        for line in wrapped:
            content = Text()
            content.append(USER_PREFIX, Style(color=TEXT_COLOR, bold=True))
            content.append_text(runs_to_text(parse_markup(line)))
            body.append(content)
    else:
        color = REMOTE_COLOR
        label = f"{REMOTE_LABEL} {timestamp}"
        max_interior = max(area_width - REMOTE_CHROME_WIDTH, 0)
        wrapped = wrap_text(message.content, max_interior)
        body = [runs_to_text(parse_markup(line)) for line in wrapped]

    bubble = _build(label, body, max_interior, color)
    if message.is_user:
        bubble = _align_right(bubble, area_width)
    return bubble


def render_loading(frame: int, area_width: int) -> Bubble:
    """Render the spinner bubble shown while a reply is pending."""
    content = Text(
        f"{spinner_glyph(frame)} {LOADING_TEXT}",
        style=Style(color=LOADING_COLOR, bold=True),
    )
    max_interior = max(area_width - REMOTE_CHROME_WIDTH, content.cell_len)
    return _build(LOADING_LABEL, [content], max_interior, LOADING_COLOR)


def render_bubble(item: ChatMessage | LoadingIndicator, area_width: int) -> Bubble:
    """Render a message or the loading indicator."""
    if isinstance(item, LoadingIndicator):
        return render_loading(item.frame, area_width)
    return render_message(item, area_width)


def render_conversation(state: AppState, area_width: int) -> ConversationLayout:
    """Stack every message bubble, then the loading bubble when loading.

    Each bubble is followed by one blank separator line.
    """
    layout = ConversationLayout()
    items: list[ChatMessage | LoadingIndicator] = list(state.messages)
    if state.is_loading:
        items.append(LoadingIndicator(state.animation_frame))

    for item in items:
        if isinstance(item, ChatMessage):
            layout.anchors.append(len(layout.lines))
        layout.lines.extend(render_bubble(item, area_width).lines)
        layout.lines.append(Text(""))

    return layout
