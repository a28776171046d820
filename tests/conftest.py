"""Shared fixtures for encoder tests."""

from typing import Optional

import pytest


class RecordingSink:
    """Sink that keeps every chunk it receives."""

    def __init__(self) -> None:
        self.chunks: list[bytes] = []

    def write(self, data: bytes) -> int:
        self.chunks.append(bytes(data))
        return len(data)

    def getvalue(self) -> bytes:
        return b"".join(self.chunks)


class FailingSink(RecordingSink):
    """Sink that raises ``error`` on the ``fail_on``-th write (1-based)."""

    def __init__(self, fail_on: int, error: Exception) -> None:
        super().__init__()
        self.fail_on = fail_on
        self.error = error
        self.calls = 0

    def write(self, data: bytes) -> int:
        self.calls += 1
        if self.calls == self.fail_on:
            raise self.error
        return super().write(data)


class NoneReturningSink(RecordingSink):
    """Sink whose write() returns None, like some file-likes."""

    def write(self, data: bytes) -> Optional[int]:  # type: ignore[override]
        super().write(data)
        return None


class ShortSink(RecordingSink):
    """Sink that accepts at most ``limit`` bytes per write."""

    def __init__(self, limit: int) -> None:
        super().__init__()
        self.limit = limit

    def write(self, data: bytes) -> int:
        return super().write(data[:self.limit])


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def image_data() -> bytes:
    """A tiny PNG-looking payload; the encoder never inspects it."""
    return b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x00\x01\x00\x00\x00\x01"


@pytest.fixture
def all_bytes() -> bytes:
    return bytes(range(256))


@pytest.fixture
def failing_sink():
    """Factory for sinks that fail on a given write."""
    return FailingSink


@pytest.fixture
def none_sink() -> NoneReturningSink:
    return NoneReturningSink()


@pytest.fixture
def short_sink():
    """Factory for sinks that truncate each write."""
    return ShortSink
