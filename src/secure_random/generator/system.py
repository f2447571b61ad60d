"""System entropy source using ``os.urandom()``.

This is the last default candidate. It is cryptographically secure and
available on all platforms.
"""

from __future__ import annotations

import os

from secure_random.generator.base import EntropySource
from secure_random.generator.registry import register_generator


@register_generator("system")
class SystemGenerator(EntropySource):
    """``os.urandom()`` wrapper, always available, cryptographically secure."""

    @property
    def name(self) -> str:
        """Return ``'system'``."""
        return "system"

    @property
    def is_supported(self) -> bool:
        """Always returns ``True``."""
        return True

    def _read_bytes(self, count: int) -> bytes:
        return os.urandom(count)
