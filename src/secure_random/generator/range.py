"""Unbiased integer generation over any byte source.

``RangeNumberGenerator`` adapts an :class:`EntropySource` into a
:class:`NumberGenerator` using minimal bit-mask rejection sampling:

1. Find the smallest contiguous low-bit mask covering the limit.
2. Read the fewest bytes that cover the mask width.
3. Pack the bytes big-endian, apply the mask, and retry while the result is
   above the limit.

Modulo reduction is never used, so every value in the range is equally
likely. Each draw is expected to need fewer than two reads.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from secure_random.exceptions import GenerationError, InvalidArgumentError
from secure_random.generator.base import INT_MAX, INT_SIZE, NumberGenerator

if TYPE_CHECKING:
    from secure_random.generator.base import EntropySource

logger = logging.getLogger("secure_random")


def unpack_integer(data: bytes) -> int:
    """Pack big-endian *data* into an unsigned integer.

    Args:
        data: Between 1 and ``INT_SIZE`` bytes.

    Returns:
        The unsigned integer value of *data*.

    Raises:
        GenerationError: If the byte count is outside ``1..INT_SIZE``.
    """
    if not 1 <= len(data) <= INT_SIZE:
        raise GenerationError(
            f"Cannot pack {len(data)} bytes into a {INT_SIZE}-byte integer"
        )
    return int.from_bytes(data, "big")


class RangeNumberGenerator(NumberGenerator):
    """Number generator that wraps a byte source.

    Holds no state besides the wrapped source; every call is independent.

    Args:
        source: The byte source used for all reads.
    """

    def __init__(self, source: EntropySource) -> None:
        self._source = source

    @property
    def source(self) -> EntropySource:
        """The wrapped byte source."""
        return self._source

    @property
    def name(self) -> str:
        """Return the name of the wrapped source."""
        return self._source.name

    @property
    def is_supported(self) -> bool:
        """Tells if the wrapped source is supported by the system."""
        return self._source.is_supported

    def _read_bytes(self, count: int) -> bytes:
        return self._source.get_bytes(count)

    def _read_number(self, minimum: int, maximum: int) -> int:
        return minimum + self.sample(maximum - minimum)

    def sample(self, limit: int) -> int:
        """Return a uniformly distributed integer in ``[0, limit]``.

        Args:
            limit: Inclusive upper bound, ``0 <= limit <= INT_MAX``.

        Returns:
            The accepted sample. Rejected candidates are never returned.

        Raises:
            InvalidArgumentError: If *limit* is negative.
            GenerationError: If *limit* exceeds ``INT_MAX`` or the source
                fails. Source failures are not retried.
        """
        if limit < 0:
            raise InvalidArgumentError("Limit must be 0 or more")
        if limit > INT_MAX:
            raise GenerationError("Limit exceeds the native integer range")
        if limit == 0:
            return 0

        bits = limit.bit_length()
        mask = (1 << bits) - 1
        byte_count = (bits + 7) // 8

        while True:
            result = unpack_integer(self._source.get_bytes(byte_count)) & mask
            if result <= limit:
                return result
            logger.debug("Rejected sample %d above limit %d", result, limit)

    def close(self) -> None:
        """Close the wrapped source."""
        self._source.close()

    def health_check(self) -> dict[str, Any]:
        """Return the wrapped source's status, tagged as range-adapted."""
        health = self._source.health_check()
        health["adapter"] = "range"
        return health
