"""Shared pytest fixtures for secure-random tests.

Provides an isolated configuration and a scripted byte source that replays
pre-encoded chunks and checks that every read asks for exactly the size of
the next chunk.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Union

import pytest

from secure_random.config import SecureRandomConfig
from secure_random.generator import registry
from secure_random.generator.base import EntropySource
from secure_random.normalizer import SecureRandom

# An int is encoded big-endian in the fewest bytes (at least one), a
# (width, value) tuple in exactly ``width`` bytes, and bytes are used as is.
ScriptValue = Union[int, tuple[int, int], bytes]


def encode(value: ScriptValue) -> bytes:
    """Encode one scripted value into the bytes the source will return."""
    if isinstance(value, bytes):
        return value
    if isinstance(value, tuple):
        width, number = value
        return number.to_bytes(width, "big")
    return value.to_bytes(max(1, (value.bit_length() + 7) // 8), "big")


class ScriptedSource(EntropySource):
    """Test double: replays scripted chunks in order.

    Each read must request exactly the length of the next chunk. Once the
    script is exhausted the source returns no data, which the base class
    reports as a GenerationError.
    """

    def __init__(self, *values: ScriptValue) -> None:
        self._chunks = [encode(value) for value in values]
        self.requests: list[int] = []
        self.closed = False

    @property
    def name(self) -> str:
        return "scripted"

    @property
    def is_supported(self) -> bool:
        return True

    @property
    def exhausted(self) -> bool:
        """Whether every scripted chunk has been read."""
        return not self._chunks

    def _read_bytes(self, count: int) -> bytes:
        self.requests.append(count)
        if not self._chunks:
            return b""
        chunk = self._chunks.pop(0)
        assert len(chunk) == count, f"Expected a read of {len(chunk)} bytes, got {count}"
        return chunk

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def config() -> SecureRandomConfig:
    """Return a SecureRandomConfig with defaults, ignoring any .env file."""
    return SecureRandomConfig(_env_file=None)  # type: ignore[call-arg]


@pytest.fixture
def scripted_source() -> Callable[..., ScriptedSource]:
    """Return a factory for ScriptedSource instances."""
    return ScriptedSource


@pytest.fixture
def scripted_random() -> Callable[..., tuple[SecureRandom, ScriptedSource]]:
    """Return a factory building a SecureRandom over a ScriptedSource.

    Usage::

        rng, source = scripted_random(5, (3, 203))
        ...
        assert source.exhausted
    """

    def _make(*values: ScriptValue) -> tuple[SecureRandom, ScriptedSource]:
        source = ScriptedSource(*values)
        return SecureRandom(source), source

    return _make


@pytest.fixture
def isolated_registry(monkeypatch: pytest.MonkeyPatch) -> None:
    """Let a test register generators without leaking them to other tests.

    The built-in registrations are copied; plugin scanning is marked done so
    installed distributions cannot change the outcome.
    """
    monkeypatch.setattr(registry, "_factories", dict(registry._factories))
    monkeypatch.setattr(registry, "_plugins_scanned", True)
