"""Native number generator backed by the ``secrets`` module.

Python's built-in CSPRNG can produce unbiased ranged integers on its own, so
this generator is used directly by SecureRandom without the rejection
sampling adapter.
"""

from __future__ import annotations

import secrets

from secure_random.generator.base import NumberGenerator
from secure_random.generator.registry import register_generator


@register_generator("internal")
class InternalGenerator(NumberGenerator):
    """``secrets`` wrapper: always available, cryptographically secure."""

    @property
    def name(self) -> str:
        """Return ``'internal'``."""
        return "internal"

    @property
    def is_supported(self) -> bool:
        """Always returns ``True``. The ``secrets`` module is part of the stdlib."""
        return True

    def _read_bytes(self, count: int) -> bytes:
        return secrets.token_bytes(count)

    def _read_number(self, minimum: int, maximum: int) -> int:
        return minimum + secrets.randbelow(maximum - minimum + 1)
