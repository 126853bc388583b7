"""Pytest configuration and shared fixtures."""
import asyncio
from datetime import datetime

import pytest

from gemchat.errors import TransportError
from gemchat.transport import ChatTransport
from gemchat.ui.models import ChatMessage, Sender


class FakeTransport(ChatTransport):
    """Transport double that records sends and replies on demand.

    When ``gate`` is set, every send blocks until the gate is opened, which
    lets tests observe the Awaiting state.
    """

    def __init__(self, reply: str = "Hi there", error: str | None = None, gated: bool = False):
        self.reply = reply
        self.error = error
        self.sent: list[str] = []
        self.gate = asyncio.Event() if gated else None
        self.closed = False

    async def send_message(self, message: str) -> str:
        self.sent.append(message)
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise TransportError(self.error)
        return self.reply

    async def close(self) -> None:
        self.closed = True


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def transport():
    """Transport that replies immediately."""
    return FakeTransport()


@pytest.fixture
def gated_transport():
    """Transport whose replies wait for ``transport.gate.set()``."""
    return FakeTransport(gated=True)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def fixed_time():
    return datetime(2024, 5, 17, 14, 3, 9)


@pytest.fixture
def user_message(fixed_time):
    return ChatMessage(content="Hello Gemini!", sender=Sender.USER, timestamp=fixed_time)


@pytest.fixture
def remote_message(fixed_time):
    return ChatMessage(
        content="Hello! I am **doing great**, thank you for asking.",
        sender=Sender.REMOTE,
        timestamp=fixed_time,
    )


@pytest.fixture
def config_path(tmp_path):
    """Config file location inside a temporary directory."""
    return tmp_path / "gemini-chat-tui" / "config.json"


@pytest.fixture
def make_transport():
    """Factory for FakeTransport with custom reply, error or gating."""
    return FakeTransport
