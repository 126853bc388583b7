"""Single-writer event loop for the chat TUI.

Owns the one ``AppState`` and is the only code that mutates it. Each
iteration redraws, waits for the next key (bounded by the tick interval),
then applies, in this fixed order:

1. the key, if any
2. every event queued by background sends
3. the animation tick, if the interval has elapsed

Network calls run in their own asyncio tasks. A task receives only the
message text and the transport, and reports back by queueing an
``AppEvent``; it never touches the state.
"""

import asyncio
import time
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from ..transport import ChatTransport
from .config import (
    STATUS_CANCELLED,
    STATUS_ERROR,
    STATUS_RECEIVED,
    STATUS_SENDING,
    TICK_INTERVAL,
)
from .formatting import format_error
from .models import Sender
from .state import AppState

STATUS_SEND_DISABLED = "Sending is disabled without a connection"


class InputAction(str, Enum):
    """Keyboard actions understood by the loop."""

    CHAR = "char"
    BACKSPACE = "backspace"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    ENTER = "enter"
    ESCAPE = "escape"
    INTERRUPT = "interrupt"
    OTHER = "other"


@dataclass(frozen=True)
class KeyInput:
    """One key press. ``char`` is set only for ``InputAction.CHAR``."""

    action: InputAction
    char: str = ""


class AppEventKind(str, Enum):
    REPLY = "reply"
    ERROR = "error"
    TICK = "tick"


@dataclass(frozen=True)
class AppEvent:
    """Result delivered from a background task to the loop."""

    kind: AppEventKind
    text: str = ""


async def deliver_reply(
    transport: ChatTransport,
    message: str,
    events: "asyncio.Queue[AppEvent]",
) -> None:
    """Send ``message`` and queue the outcome as a reply or error event."""
    try:
        reply = await transport.send_message(message)
    except Exception as e:
        events.put_nowait(AppEvent(AppEventKind.ERROR, str(e)))
    else:
        events.put_nowait(AppEvent(AppEventKind.REPLY, reply))


class EventLoop:
    """Merge keys, background replies and animation ticks into state changes.

    States are ``Idle`` (``is_loading`` false) and ``Awaiting`` (one send
    outstanding). Escape only hides a pending send: if its result arrives
    later, it is still appended.

    Example:
        loop = EventLoop(transport)
        loop.set_redraw_callback(view.refresh_from)
        await loop.run()
    """

    def __init__(
        self,
        transport: ChatTransport | None,
        state: AppState | None = None,
        tick_interval: float = TICK_INTERVAL,
        exit_on_any_key: bool = False,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the loop.

        Args:
            transport: Transport used for sends, None to disable sending
            state: Initial state (a fresh AppState by default)
            tick_interval: Seconds between animation ticks
            exit_on_any_key: Treat every key as the exit key (demo mode)
            clock: Monotonic time source
        """
        self.state = state if state is not None else AppState()
        self._transport = transport
        self._tick_interval = tick_interval
        self._exit_on_any_key = exit_on_any_key
        self._clock = clock
        self._last_tick = clock()
        self._running = False

        self._inputs: asyncio.Queue[KeyInput] = asyncio.Queue()
        self._events: asyncio.Queue[AppEvent] = asyncio.Queue()
        self._sends: set[asyncio.Task] = set()

        self._redraw_callback: Callable[[AppState], None] | None = None
        self._exit_callback: Callable[[], None] | None = None
        self._debug_callback: Callable[[str, str, str], None] | None = None

    def set_redraw_callback(self, callback: Callable[[AppState], None]) -> None:
        """Set the callback that paints the state, called once per iteration."""
        self._redraw_callback = callback

    def set_exit_callback(self, callback: Callable[[], None]) -> None:
        """Set the callback invoked when the exit key is pressed."""
        self._exit_callback = callback

    def set_debug_callback(self, callback: Callable[[str, str, str], None]) -> None:
        """Set the debug callback for execution tracing.

        Args:
            callback: Callable(level: str, component: str, message: str)
                      level: 'debug', 'info', 'warning', 'error'
        """
        self._debug_callback = callback

    def _debug(self, level: str, message: str, component: str = "LOOP") -> None:
        if self._debug_callback:
            self._debug_callback(level, component, message)

    @property
    def running(self) -> bool:
        return self._running

    @property
    def pending_sends(self) -> int:
        """Number of background sends that have not finished yet."""
        return len(self._sends)

    # Producers

    def submit(self, key: KeyInput) -> None:
        """Queue a key press for the next iteration."""
        self._inputs.put_nowait(key)

    def post_event(self, event: AppEvent) -> None:
        """Queue an event as if a background task had delivered it."""
        self._events.put_nowait(event)

    # Loop

    async def run(self) -> None:
        """Run until the exit key is pressed."""
        self._running = True
        self._last_tick = self._clock()
        self._debug("info", "Event loop started")
        while self._running:
            self.redraw()
            key = await self.next_input()
            self.step(key)
        self._debug("info", "Event loop stopped")

    def redraw(self) -> None:
        if self._redraw_callback:
            self._redraw_callback(self.state)

    async def next_input(self) -> KeyInput | None:
        """Wait for a key, at most until the next tick is due."""
        try:
            return self._inputs.get_nowait()
        except asyncio.QueueEmpty:
            pass

        elapsed = self._clock() - self._last_tick
        timeout = max(self._tick_interval - elapsed, 0.0)
        try:
            return await asyncio.wait_for(self._inputs.get(), timeout)
        except asyncio.TimeoutError:
            return None

    def step(self, key: KeyInput | None = None) -> bool:
        """Apply one iteration: key, then queued events, then tick.

        Returns:
            True while the loop should keep running
        """
        if key is not None:
            self.handle_key(key)
        self.drain_events()
        if self._clock() - self._last_tick >= self._tick_interval:
            self.state.tick_animation()
            self._last_tick = self._clock()
        return self._running

    def drain_events(self) -> int:
        """Apply every queued event. Returns how many were applied."""
        applied = 0
        while True:
            try:
                event = self._events.get_nowait()
            except asyncio.QueueEmpty:
                return applied
            self.apply_event(event)
            applied += 1

    def apply_event(self, event: AppEvent) -> None:
        state = self.state
        if event.kind is AppEventKind.REPLY:
            state.append_message(event.text, Sender.REMOTE)
            state.is_loading = False
            state.status_message = STATUS_RECEIVED
            self._debug("info", f"Reply received ({len(event.text)} chars)", component="NET")
        elif event.kind is AppEventKind.ERROR:
            state.append_message(format_error(event.text), Sender.REMOTE)
            state.is_loading = False
            state.status_message = STATUS_ERROR
            self._debug("error", f"Send failed: {event.text}", component="NET")
        elif event.kind is AppEventKind.TICK:
            state.tick_animation()

    # Key dispatch

    def handle_key(self, key: KeyInput) -> None:
        state = self.state
        action = key.action
        self._debug("debug", f"Key: {action.value}")

        if self._exit_on_any_key or action is InputAction.INTERRUPT:
            self.interrupt()
        elif action is InputAction.ENTER:
            self.send()
        elif action is InputAction.ESCAPE:
            self.cancel()
        elif action is InputAction.CHAR:
            for char in key.char:
                state.insert_char(char)
        elif action is InputAction.BACKSPACE:
            state.delete_char()
        elif action is InputAction.LEFT:
            state.move_cursor_left()
        elif action is InputAction.RIGHT:
            state.move_cursor_right()
        elif action is InputAction.UP:
            state.scroll_up()
        elif action is InputAction.DOWN:
            state.scroll_down()
        elif action is InputAction.PAGE_UP:
            state.scroll_up(5)
        elif action is InputAction.PAGE_DOWN:
            state.scroll_down(5)

    def send(self) -> bool:
        """Start a send for the current input.

        Refused while a send is pending, when the input is blank, or when
        no transport is configured.

        Returns:
            True if a background send was started
        """
        state = self.state
        if state.is_loading:
            self._debug("debug", "Send refused: a reply is still pending")
            return False
        if not state.input.strip():
            return False
        if self._transport is None:
            state.status_message = STATUS_SEND_DISABLED
            self._debug("warning", "Send refused: no transport configured")
            return False

        message = state.input
        state.append_message(message, Sender.USER)
        state.clear_input()
        state.is_loading = True
        state.status_message = STATUS_SENDING
        self._spawn_send(message)
        self._debug("info", f"Sending: '{message[:50]}'", component="NET")
        return True

    def _spawn_send(self, message: str) -> None:
        task = asyncio.create_task(deliver_reply(self._transport, message, self._events))
        self._sends.add(task)
        task.add_done_callback(self._sends.discard)

    def cancel(self) -> None:
        """Hide a pending send. The request itself keeps running."""
        if self.state.is_loading:
            self.state.is_loading = False
            self.state.status_message = STATUS_CANCELLED
            self._debug("warning", "Pending reply cancelled by user")

    def interrupt(self) -> None:
        """Stop the loop and ask the frontend to exit."""
        self._running = False
        self._debug("info", "Exit requested")
        if self._exit_callback:
            self._exit_callback()

    async def wait_for_sends(self) -> None:
        """Wait until every background send has queued its result."""
        if self._sends:
            await asyncio.gather(*list(self._sends))

