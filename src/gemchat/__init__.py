"""
Gemchat: a terminal chat client for Google's Gemini.

This package follows Parnas's information hiding principles,
where each module hides a specific design decision:
- ui: rendering engine (wrapping, markup, bubbles) and the event loop
- transport: how messages reach the remote service
- cli: command line, persisted configuration
"""

__version__ = "0.1.0"

from .errors import ConfigError, GemchatError, TransportError

__all__ = [
    "ConfigError",
    "GemchatError",
    "TransportError",
]
