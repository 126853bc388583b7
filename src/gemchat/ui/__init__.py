"""Terminal UI module for gemchat.

Provides the chat rendering engine and a Textual-based TUI around it.

Module structure (each module hides a design decision):
- models.py: Data structures (messages, styled runs)
- wrapping.py: Display-width aware word wrapping
- markup.py: Bold emphasis parsing
- bubbles.py: Bubble borders, padding and alignment
- state.py: The mutable application state
- loop.py: Event loop merging keys, replies and ticks
- widgets.py / styles.py / themes.py: Textual presentation
- app.py: Application orchestration
"""

from .app import GeminiChatApp, run_textual_tui
from .bubbles import Bubble, LoadingIndicator, render_bubble, render_conversation
from .config import LogLevel
from .loop import AppEvent, AppEventKind, EventLoop, InputAction, KeyInput
from .markup import parse_markup
from .models import ChatMessage, RunStyle, Sender, StyledRun
from .state import AppState
from .wrapping import wrap_text

__all__ = [
    "AppEvent",
    "AppEventKind",
    "AppState",
    "Bubble",
    "ChatMessage",
    "EventLoop",
    "GeminiChatApp",
    "InputAction",
    "KeyInput",
    "LoadingIndicator",
    "LogLevel",
    "RunStyle",
    "Sender",
    "StyledRun",
    "parse_markup",
    "render_bubble",
    "render_conversation",
    "run_textual_tui",
    "wrap_text",
]
