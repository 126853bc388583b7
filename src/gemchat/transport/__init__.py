from ..errors import TransportError
from .base import ChatTransport
from .factory import create_transport
from .gemini import DEFAULT_MODEL, GeminiTransport

__all__ = [
    "ChatTransport",
    "DEFAULT_MODEL",
    "GeminiTransport",
    "TransportError",
    "create_transport",
]
