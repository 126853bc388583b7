"""Custom Textual widgets for the TUI.

Hides widget implementation details:
- Title animation
- Bubble layout inside a scrolling view
- Input buffer display and key translation
- Status bar coloring
- Trace log rendering and filtering

Widgets never mutate AppState; they only paint it.
"""

from datetime import datetime

from rich.text import Text
from textual import events
from textual.containers import VerticalScroll
from textual.message import Message
from textual.widgets import RichLog, Static

from .bubbles import render_conversation
from .config import INPUT_PLACEHOLDER, LOG_TIMESTAMP_FORMAT, LogLevel
from .formatting import render_input, render_title, title_color
from .loop import InputAction, KeyInput
from .state import AppState

# Textual key names that map directly onto loop actions
KEY_ACTIONS = {
    "enter": InputAction.ENTER,
    "escape": InputAction.ESCAPE,
    "backspace": InputAction.BACKSPACE,
    "left": InputAction.LEFT,
    "right": InputAction.RIGHT,
    "up": InputAction.UP,
    "down": InputAction.DOWN,
    "pageup": InputAction.PAGE_UP,
    "pagedown": InputAction.PAGE_DOWN,
}


def translate_key(
    key: str,
    character: str | None,
    is_printable: bool,
    forward_all: bool = False,
) -> KeyInput | None:
    """Translate a Textual key event into a loop input, or None to ignore it.

    With ``forward_all`` every unmapped key becomes ``InputAction.OTHER``.
    """
    if key in KEY_ACTIONS:
        return KeyInput(KEY_ACTIONS[key])
    if is_printable and character:
        return KeyInput(InputAction.CHAR, character)
    if forward_all:
        return KeyInput(InputAction.OTHER)
    return None


class TitleBanner(Static):
    """Rainbow title whose colors shift with the animation frame."""

    def show_frame(self, frame: int) -> None:
        self.update(render_title(frame))
        self.styles.border = ("round", title_color(frame))


class ChatView(VerticalScroll):
    """Scrollable conversation made of pre-rendered bubbles."""

    BORDER_TITLE = "Chat"
    BORDER_SUBTITLE = "Conversation history"
    can_focus = False

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._last_key: tuple | None = None

    def compose(self):
        yield Static(id="chat-lines")

    def show_state(self, state: AppState) -> None:
        """Re-render the bubbles when anything visible has changed."""
        width = max(self.scrollable_content_region.width, 1)
        key = (
            len(state.messages),
            state.is_loading,
            state.animation_frame if state.is_loading else None,
            state.scroll_offset,
            width,
        )
        if key == self._last_key:
            return
        self._last_key = key

        layout = render_conversation(state, width)
        lines = self.query_one("#chat-lines", Static)
        lines.update(Text("\n", no_wrap=True).join(layout.lines))
        self.border_subtitle = f"{len(state.messages)} messages"

        if state.messages and state.scroll_offset < len(state.messages) - 1:
            self.scroll_to(y=layout.anchors[state.scroll_offset], animate=False)
        else:
            self.scroll_end(animate=False)


class InputLine(Static):
    """Single-line view of the input buffer that forwards key presses.

    The buffer itself lives in AppState; this widget only translates keys
    into ``KeyInput`` values and posts them for the event loop.
    """

    BORDER_TITLE = "Your Message"
    can_focus = True

    # Demo mode: every key reaches the loop so any key can exit
    forward_all_keys = False

    class KeyPressed(Message):
        """Posted for every key the event loop should see."""

        def __init__(self, key: KeyInput) -> None:
            super().__init__()
            self.key = key

    def show_state(self, state: AppState) -> None:
        self.update(render_input(state.input, state.input_cursor, INPUT_PLACEHOLDER))

    def on_key(self, event: events.Key) -> None:
        key = translate_key(
            event.key, event.character, event.is_printable, self.forward_all_keys
        )
        if key is None:
            return
        event.prevent_default()
        event.stop()
        self.post_message(self.KeyPressed(key))

    def on_paste(self, event: events.Paste) -> None:
        """Paste as a single line: newlines become spaces."""
        clean_text = " ".join(event.text.split())
        if clean_text:
            self.post_message(self.KeyPressed(KeyInput(InputAction.CHAR, clean_text)))
        event.prevent_default()
        event.stop()


class StatusBar(Static):
    """Status text, yellow while a reply is pending and green otherwise."""

    BORDER_TITLE = "Status"

    def show_state(self, state: AppState) -> None:
        self.set_class(state.is_loading, "-loading")
        color = "yellow" if state.is_loading else "green"
        self.update(Text(state.status_message, style=f"bold {color}"))


class DebugPanel(RichLog):
    """Log panel for real-time tracing with level filtering.

    Shows timestamped log messages from all components.
    Supports standard log levels: DEBUG < INFO < WARNING < ERROR.
    Hidden by default, shown with --log-level flag or toggled with Ctrl+D.
    """

    BORDER_TITLE = "Log"
    BORDER_SUBTITLE = "Trace log"

    LEVEL_COLORS = {
        LogLevel.DEBUG: "dim white",
        LogLevel.INFO: "cyan",
        LogLevel.WARNING: "yellow",
        LogLevel.ERROR: "red",
    }

    COMPONENT_COLORS = {
        "TUI": "cyan",
        "LOOP": "green",
        "NET": "magenta",
    }

    def __init__(self, *args, log_level: int = LogLevel.DEBUG, **kwargs) -> None:
        super().__init__(
            *args,
            markup=True,
            highlight=False,
            auto_scroll=True,
            wrap=False,
            **kwargs
        )
        self._log_level = log_level

    @property
    def log_level(self) -> int:
        """Current log level threshold."""
        return self._log_level

    @log_level.setter
    def log_level(self, level: int) -> None:
        self._log_level = level
        self._update_subtitle()

    def _update_subtitle(self) -> None:
        if self.display:
            self.border_subtitle = f"Level: {LogLevel.name(self._log_level)}"
        else:
            self.border_subtitle = "Hidden"

    def on_mount(self) -> None:
        """Hide by default."""
        self.display = False

    def log(self, component: str, message: str, level: int = LogLevel.DEBUG) -> None:
        """Add a log entry if it meets the current level threshold.

        Args:
            component: Component name (TUI, LOOP, NET)
            message: Log message
            level: Log level (LogLevel.DEBUG, INFO, WARNING, ERROR)
        """
        if level < self._log_level:
            return

        timestamp = datetime.now().strftime(LOG_TIMESTAMP_FORMAT)
        level_color = self.LEVEL_COLORS.get(level, "white")
        comp_color = self.COMPONENT_COLORS.get(component, "white")

        line = Text.from_markup(
            f"[dim]{timestamp}[/] [{level_color}]{LogLevel.name(level):<5}[/] "
            f"[{comp_color}]\\[{component}][/] "
        )
        # Message text may contain brackets from user input or errors
        line.append(message)
        self.write(line)

    def debug(self, component: str, message: str) -> None:
        self.log(component, message, LogLevel.DEBUG)

    def info(self, component: str, message: str) -> None:
        self.log(component, message, LogLevel.INFO)

    def warning(self, component: str, message: str) -> None:
        self.log(component, message, LogLevel.WARNING)

    def error(self, component: str, message: str) -> None:
        self.log(component, message, LogLevel.ERROR)

    def show(self) -> None:
        self.display = True
        self._update_subtitle()

    def hide(self) -> None:
        self.display = False
        self._update_subtitle()

    def toggle(self) -> bool:
        """Toggle visibility. Returns new state."""
        if self.display:
            self.hide()
            return False
        self.show()
        return True
