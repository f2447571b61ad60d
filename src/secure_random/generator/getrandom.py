"""Entropy source using the ``getrandom()`` system call.

Available on Linux. In blocking mode the call is made with ``GRND_RANDOM``,
which draws from the same pool as ``/dev/random``.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from secure_random.exceptions import GenerationError
from secure_random.generator.base import EntropySource
from secure_random.generator.registry import register_generator

if TYPE_CHECKING:
    from secure_random.config import SecureRandomConfig


@register_generator("getrandom")
class GetRandomGenerator(EntropySource):
    """Generates bytes with ``os.getrandom()``.

    Args:
        urandom: ``True`` for the non-blocking pool, ``False`` to pass
            ``GRND_RANDOM``.
    """

    def __init__(self, urandom: bool = True) -> None:
        self._urandom = urandom

    @classmethod
    def from_config(cls, config: SecureRandomConfig) -> GetRandomGenerator:
        return cls(urandom=not config.random_device_blocking)

    @property
    def name(self) -> str:
        """Return ``'getrandom'``."""
        return "getrandom"

    @property
    def is_supported(self) -> bool:
        """Whether the platform exposes ``os.getrandom``."""
        return hasattr(os, "getrandom")

    def _read_bytes(self, count: int) -> bytes:
        flags = 0 if self._urandom else os.GRND_RANDOM
        chunks: list[bytes] = []
        remaining = count
        # The syscall may return fewer bytes than requested.
        while remaining:
            chunk = os.getrandom(remaining, flags)
            if not chunk:
                raise GenerationError("getrandom() returned no data")
            chunks.append(chunk)
            remaining -= len(chunk)
        return b"".join(chunks)
