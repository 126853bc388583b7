from abc import ABC, abstractmethod
from typing import Any


class ChatTransport(ABC):
    """Abstract base class for chat transports.

    This module hides the design decision of how a message reaches the
    remote conversational service. Implementations handle:
    - API client setup and authentication
    - Request/response format conversion
    - Mapping service failures to TransportError

    Supports async context manager protocol for proper resource cleanup:
        async with transport:
            reply = await transport.send_message("Hello")
    """

    @abstractmethod
    async def send_message(self, message: str) -> str:
        """Send one message and return the reply text.

        Args:
            message: Text typed by the user

        Returns:
            Reply text from the remote service

        Raises:
            TransportError: The request failed or the reply had no text
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections or resources."""
        pass

    async def __aenter__(self) -> "ChatTransport":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Close the transport, ignoring a loop that is already shut down."""
        try:
            await self.close()
        except RuntimeError as e:
            if "Event loop is closed" not in str(e):
                raise
