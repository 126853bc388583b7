"""Main Textual TUI application.

Hosts the event loop and paints its state. Textual provides the terminal
session (alternate screen, raw keys) and restores the terminal on every
exit path; the event loop runs as an async worker on the same asyncio
loop, so widget updates and state mutations never race.
"""

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding

from ..transport import ChatTransport
from .config import LogLevel
from .demo import build_demo_state
from .loop import EventLoop, InputAction, KeyInput
from .state import AppState
from .styles import APP_CSS
from .themes import TERMINAL_CLASSIC
from .widgets import ChatView, DebugPanel, InputLine, StatusBar, TitleBanner


class GeminiChatApp(App):
    """Textual TUI for chatting with Gemini."""

    CSS = APP_CSS
    TITLE = "Gemini Chat"

    BINDINGS = [
        Binding("ctrl+c", "interrupt", "Quit", priority=True),
        Binding("ctrl+r", "copy_last_reply", "Copy Reply"),
        Binding("ctrl+d", "toggle_debug", "Log"),
    ]

    def __init__(
        self,
        transport: ChatTransport | None = None,
        demo: bool = False,
        log_level: str | None = None,
    ) -> None:
        super().__init__()
        self._demo = demo
        self._log_level = log_level
        self.chat_loop = EventLoop(
            transport=None if demo else transport,
            state=build_demo_state() if demo else AppState(),
            exit_on_any_key=demo,
        )

    def compose(self) -> ComposeResult:
        yield TitleBanner(id="title")
        yield ChatView(id="chat-view")
        yield InputLine(id="input-line")
        yield StatusBar(id="status-bar")
        yield DebugPanel(id="debug-panel")

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.register_theme(TERMINAL_CLASSIC)
        self.theme = "terminal-classic"

        log_panel = self.query_one("#debug-panel", DebugPanel)
        if self._log_level is not None:
            log_panel.log_level = LogLevel.from_string(self._log_level)
            log_panel.show()
            log_panel.info("TUI", f"Log panel enabled with level: {self._log_level.upper()}")

        def debug_callback(level: str, component: str, message: str) -> None:
            """Route loop trace messages to the log panel."""
            if level == "debug":
                log_panel.debug(component, message)
            elif level == "info":
                log_panel.info(component, message)
            elif level == "warning":
                log_panel.warning(component, message)
            elif level == "error":
                log_panel.error(component, message)

        self.chat_loop.set_debug_callback(debug_callback)
        self.chat_loop.set_redraw_callback(self._paint)
        self.chat_loop.set_exit_callback(self.exit)

        input_line = self.query_one("#input-line", InputLine)
        input_line.forward_all_keys = self._demo
        input_line.focus()
        self._run_chat_loop()

    @work(exclusive=True, group="event-loop")
    async def _run_chat_loop(self) -> None:
        await self.chat_loop.run()

    def _paint(self, state: AppState) -> None:
        self.query_one("#title", TitleBanner).show_frame(state.animation_frame)
        self.query_one("#chat-view", ChatView).show_state(state)
        self.query_one("#input-line", InputLine).show_state(state)
        self.query_one("#status-bar", StatusBar).show_state(state)

    def on_input_line_key_pressed(self, event: InputLine.KeyPressed) -> None:
        self.chat_loop.submit(event.key)

    def action_interrupt(self) -> None:
        """Route Ctrl+C through the loop so it stops cleanly."""
        if self.chat_loop.running:
            self.chat_loop.submit(KeyInput(InputAction.INTERRUPT))
        else:
            self.exit()

    def action_toggle_debug(self) -> None:
        """Toggle the log panel visibility."""
        log_panel = self.query_one("#debug-panel", DebugPanel)
        is_visible = log_panel.toggle()
        self.notify(f"Log panel {'shown' if is_visible else 'hidden'}", timeout=2)

    def action_copy_last_reply(self) -> None:
        """Copy the last Gemini reply to the clipboard."""
        reply = self.chat_loop.state.last_reply
        if not reply:
            self.notify("No response to copy", severity="warning")
            return
        try:
            import pyperclip
            pyperclip.copy(reply)
            self.notify("Response copied", timeout=2)
        except Exception:
            self.copy_to_clipboard(reply)
            self.notify("Response copied (terminal)", timeout=2)


async def run_textual_tui(
    transport: ChatTransport | None = None,
    demo: bool = False,
    log_level: str | None = None,
) -> None:
    """Run the Textual TUI until the user quits.

    Args:
        transport: Transport for sends (ignored in demo mode)
        demo: Show the canned conversation; any key exits
        log_level: Log level for panel (debug/info/warning/error), None to hide
    """
    app = GeminiChatApp(transport=transport, demo=demo, log_level=log_level)
    try:
        await app.run_async()
    finally:
        if transport is not None:
            await transport.close()
