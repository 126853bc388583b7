"""Canned conversation shown by ``--demo``."""

from .config import STATUS_DEMO
from .models import Sender
from .state import AppState

DEMO_CONVERSATION = [
    (Sender.USER, "Hello Gemini! How are you today?"),
    (
        Sender.REMOTE,
        "Hello! I'm doing great, thank you for asking! I'm here to help you with any "
        "questions or tasks you might have. The weather has been lovely lately, and "
        "I've been enjoying our conversations. How has your day been going so far?",
    ),
    (Sender.USER, "That's wonderful to hear! I've been working on a **TUI chat application** in Python."),
    (
        Sender.REMOTE,
        "That sounds like an exciting project! Python is an excellent choice for "
        "building TUI applications. The combination of **Textual** and **Rich** makes "
        "it easy to create responsive and beautiful terminal interfaces. Are you "
        "finding the development process enjoyable?",
    ),
    (Sender.USER, "Yes, very much! The bubble design looks much better now."),
]


def build_demo_state() -> AppState:
    """Create a state pre-filled with the demo conversation."""
    state = AppState()
    for sender, content in DEMO_CONVERSATION:
        state.append_message(content, sender)
    state.status_message = STATUS_DEMO
    return state
