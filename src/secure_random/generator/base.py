"""Abstract base classes for random generators.

Every byte source (random device, platform CSPRNG, OpenSSL, or a test double)
implements :class:`EntropySource`. Sources that can natively produce an
unbiased integer in a range implement :class:`NumberGenerator` instead; any
other source is adapted by
:class:`~secure_random.generator.range.RangeNumberGenerator`.

The base classes own the contract checks so that concrete sources only have
to implement the raw read: ``get_bytes()`` validates the byte count and the
result of ``_read_bytes()``, and ``get_number()`` validates the limits before
delegating to ``_read_number()``.
"""

from __future__ import annotations

import operator
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from secure_random.exceptions import GenerationError, InvalidArgumentError

if TYPE_CHECKING:
    from types import TracebackType

    from secure_random.config import SecureRandomConfig

INT_SIZE: int = 8
"""Width of the native integer in bytes."""

INT_MAX: int = (1 << (INT_SIZE * 8 - 1)) - 1
"""Largest representable native signed integer."""

INT_MIN: int = -INT_MAX - 1
"""Smallest representable native signed integer."""


def as_integer(value: Any, label: str) -> int:
    """Return *value* as an ``int`` or raise :class:`InvalidArgumentError`.

    Accepts anything implementing ``__index__``. Floats and strings are
    rejected rather than truncated.
    """
    try:
        return operator.index(value)
    except TypeError:
        raise InvalidArgumentError(
            f"{label} must be an integer, got {type(value).__name__}"
        ) from None


class EntropySource(ABC):
    """Abstract base for all secure random byte sources.

    Implementations must return exactly the requested number of bytes or
    fail. A short read is never returned as valid data.
    """

    @classmethod
    def from_config(cls, config: SecureRandomConfig) -> EntropySource:
        """Build an instance from configuration.

        The default implementation ignores *config* and calls the no-argument
        constructor. Sources with configurable behaviour override this.
        """
        return cls()

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable source identifier (e.g., ``'random_reader'``)."""

    @property
    @abstractmethod
    def is_supported(self) -> bool:
        """Whether the source can be used on this system.

        Must be cheap and free of side effects; it is checked before any
        bytes are requested.
        """

    def get_bytes(self, count: int) -> bytes:
        """Return exactly *count* random bytes.

        Args:
            count: Number of bytes to return. ``0`` returns ``b""`` without
                touching the underlying source.

        Returns:
            Exactly *count* bytes.

        Raises:
            InvalidArgumentError: If *count* is negative or not an integer.
            GenerationError: If the source fails or returns the wrong amount
                of data.
        """
        count = as_integer(count, "Number of bytes")
        if count < 0:
            raise InvalidArgumentError("Number of bytes must be 0 or more")
        if count == 0:
            return b""

        try:
            data = self._read_bytes(count)
        except OSError as e:
            raise GenerationError(f"Random source {self.name!r} failed: {e}") from e

        if not isinstance(data, (bytes, bytearray, memoryview)) or len(data) != count:
            raise GenerationError(
                f"Random source {self.name!r} returned invalid number of bytes"
            )
        return bytes(data)

    @abstractmethod
    def _read_bytes(self, count: int) -> bytes:
        """Read *count* (> 0) bytes from the underlying source."""

    def close(self) -> None:
        """Release resources (file handles). No-op by default."""

    def health_check(self) -> dict[str, Any]:
        """Return a status dictionary for this source.

        Returns:
            Dictionary with at least ``'source'`` and ``'healthy'`` keys.
        """
        return {"source": self.name, "healthy": self.is_supported}

    def __enter__(self) -> EntropySource:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


class NumberGenerator(EntropySource):
    """A source that can produce an unbiased integer in an inclusive range."""

    def get_number(self, minimum: int, maximum: int) -> int:
        """Return a uniformly distributed integer in ``[minimum, maximum]``.

        Args:
            minimum: Lower limit (inclusive).
            maximum: Upper limit (inclusive).

        Returns:
            Random integer between the limits.

        Raises:
            InvalidArgumentError: If ``minimum > maximum`` or either limit is
                outside the native integer range.
            GenerationError: If ``maximum - minimum`` overflows the native
                integer range or the source fails.
        """
        minimum = as_integer(minimum, "Minimum")
        maximum = as_integer(maximum, "Maximum")

        if minimum > maximum:
            raise InvalidArgumentError("Invalid minimum and maximum value")
        if minimum < INT_MIN or maximum > INT_MAX:
            raise InvalidArgumentError("Limits must fit in the native integer range")
        if minimum == maximum:
            return minimum
        if maximum - minimum > INT_MAX:
            raise GenerationError("The range between minimum and maximum is too large")

        return self._read_number(minimum, maximum)

    @abstractmethod
    def _read_number(self, minimum: int, maximum: int) -> int:
        """Produce a number for already validated limits (``minimum < maximum``)."""
