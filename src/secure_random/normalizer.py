"""SecureRandom: unbiased random values from secure random generators.

SecureRandom takes the bytes produced by a secure random generator and
normalizes them (i.e. provides an even distribution) for common usages such
as integers, floats, selecting and shuffling elements, random sequences and
UUIDs.

Every operation is written against the two primitives of
:class:`~secure_random.generator.base.NumberGenerator`: ``get_bytes()`` and
``get_number()``. The generator is chosen once, when the instance is created,
and is never replaced afterwards. A generator that fails mid-life fails the
call; there is no fallback to another source.
"""

from __future__ import annotations

import logging
import struct
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any, TypeVar, overload

from secure_random.config import SecureRandomConfig
from secure_random.exceptions import (
    ConfigValidationError,
    InvalidArgumentError,
    UnsupportedSourceError,
)
from secure_random.generator.base import INT_MAX, NumberGenerator, as_integer
from secure_random.generator.range import RangeNumberGenerator
from secure_random.generator.registry import generator_factory

if TYPE_CHECKING:
    from collections.abc import Iterable
    from types import TracebackType

    from secure_random.generator.base import EntropySource

logger = logging.getLogger("secure_random")

K = TypeVar("K")
V = TypeVar("V")
T = TypeVar("T")


def _build_default_generator(config: SecureRandomConfig) -> EntropySource:
    """Return the first supported generator from ``config.default_generators``.

    Args:
        config: Configuration providing the ordered candidate names.

    Returns:
        The first candidate that reports it is supported.

    Raises:
        ConfigValidationError: If a candidate name is not registered.
        UnsupportedSourceError: If none of the candidates is supported.
    """
    for name in config.default_generators:
        try:
            factory = generator_factory(name)
        except KeyError as e:
            raise ConfigValidationError(e.args[0]) from e

        generator = factory(config)
        if generator.is_supported:
            return generator

        logger.debug("Generator %r is not supported on this system, skipping", name)
        generator.close()

    raise UnsupportedSourceError(
        "Default secure random generators are not supported by the system"
    )


def _values(collection: Iterable[T] | Mapping[Any, T]) -> Sequence[T]:
    """Return the values of *collection* as an indexable sequence."""
    if isinstance(collection, Mapping):
        return list(collection.values())
    if isinstance(collection, Sequence):
        return collection
    return list(collection)


class SecureRandom:
    """Library for normalizing bytes returned by secure random generators.

    If no generator is given, the registry names in
    ``config.default_generators`` are tried in order and the first supported
    generator is used. Byte-only sources are wrapped in
    :class:`RangeNumberGenerator`; number generators are used as is.

    The default candidates read the non-blocking ``/dev/urandom`` pool. Set
    ``random_device_blocking`` in the configuration, or pass an explicit
    ``RandomReader(urandom=False)``, to use ``/dev/random`` instead.

    Instances are not thread safe.

    Args:
        generator: Random generator to use, or ``None`` for the defaults.
        config: Configuration for default generator selection. Loaded from the
            environment when omitted.

    Raises:
        UnsupportedSourceError: If the provided or default generators are not
            supported.
        ConfigValidationError: If the configuration names an unknown generator.
    """

    def __init__(
        self,
        generator: EntropySource | None = None,
        config: SecureRandomConfig | None = None,
    ) -> None:
        if generator is None:
            generator = _build_default_generator(
                config if config is not None else SecureRandomConfig()
            )
        elif not generator.is_supported:
            raise UnsupportedSourceError(
                "The provided secure random generator is not supported by the system"
            )

        if not isinstance(generator, NumberGenerator):
            generator = RangeNumberGenerator(generator)

        self._generator: NumberGenerator = generator
        logger.info("Using secure random generator %r", generator.name)

    @property
    def generator(self) -> NumberGenerator:
        """The number generator used for all operations."""
        return self._generator

    def get_bytes(self, count: int) -> bytes:
        """Return a number of random bytes.

        Raises:
            InvalidArgumentError: If the count is negative.
        """
        count = as_integer(count, "Number of bytes")
        if count < 0:
            raise InvalidArgumentError("Number of bytes must be 0 or more")

        return self._generator.get_bytes(count)

    def get_integer(self, minimum: int, maximum: int) -> int:
        """Return a random integer between two non-negative integers (inclusive).

        Raises:
            InvalidArgumentError: If ``minimum`` is negative, greater than
                ``maximum``, or ``maximum`` exceeds ``INT_MAX``.
        """
        minimum = as_integer(minimum, "Minimum")
        maximum = as_integer(maximum, "Maximum")

        if not 0 <= minimum <= maximum <= INT_MAX:
            raise InvalidArgumentError("Invalid minimum or maximum value")

        return self._generator.get_number(minimum, maximum)

    def get_random(self) -> float:
        """Return a random float between 0 and 1, excluding 1.

        Seven bytes are read. The first six are folded in as base 256 digits
        and the low five bits of the last byte as a final base 32 digit, which
        gives 53 bits of randomness.
        """
        *head, last = self._generator.get_bytes(7)
        result = 0.0

        for byte in head:
            result = (byte + result) / 256

        return ((last & 0b00011111) + result) / 32

    def get_float(self) -> float:
        """Return a random float between 0 and 1, including both.

        Unlike :meth:`get_random`, this may return exactly ``1.0``.
        """
        return self._generator.get_number(0, INT_MAX) / INT_MAX

    @overload
    def get_array(self, collection: Mapping[K, V], count: int) -> dict[K, V]: ...

    @overload
    def get_array(self, collection: Iterable[T], count: int) -> list[T]: ...

    def get_array(self, collection: Any, count: int) -> Any:
        """Return a number of randomly selected elements from the collection.

        Elements are returned in random order and no element is selected
        twice. For a mapping, the selected keys keep their values and a
        ``dict`` is returned in selection order. Any other collection returns
        a ``list`` of the selected elements.

        Raises:
            InvalidArgumentError: If the count is negative or larger than the
                collection.
        """
        count = as_integer(count, "Number of elements")

        if isinstance(collection, Mapping):
            keys = list(collection)
            return {keys[i]: collection[keys[i]] for i in self._select(len(keys), count)}

        values = list(collection)
        return [values[i] for i in self._select(len(values), count)]

    def _select(self, size: int, count: int) -> list[int]:
        """Pick *count* distinct positions out of *size* by partial Fisher-Yates."""
        if not 0 <= count <= size:
            raise InvalidArgumentError("Invalid number of elements")

        positions = list(range(size))
        selected: list[int] = []

        for i in range(count):
            index = self._generator.get_number(i, size - 1)
            selected.append(positions[index])
            positions[index], positions[i] = positions[i], positions[index]

        return selected

    def choose(self, collection: Iterable[T] | Mapping[Any, T]) -> T:
        """Return one randomly selected value from the collection.

        For a mapping, a value (not a key) is returned.

        Raises:
            InvalidArgumentError: If the collection is empty.
        """
        values = _values(collection)
        if len(values) < 1:
            raise InvalidArgumentError("Collection must have at least one value")

        return values[self._generator.get_number(0, len(values) - 1)]

    @overload
    def shuffle(self, collection: Mapping[K, V]) -> dict[K, V]: ...

    @overload
    def shuffle(self, collection: Iterable[T]) -> list[T]: ...

    def shuffle(self, collection: Any) -> Any:
        """Return the elements of the collection in a random order.

        The input is not modified. Mapping keys keep their values.
        """
        if not isinstance(collection, Mapping):
            collection = list(collection)
        return self.get_array(collection, len(collection))

    @overload
    def get_sequence(self, choices: str, length: int) -> str: ...

    @overload
    def get_sequence(self, choices: bytes | bytearray, length: int) -> bytes: ...

    @overload
    def get_sequence(self, choices: Iterable[T] | Mapping[Any, T], length: int) -> list[T]: ...

    def get_sequence(self, choices: Any, length: int) -> Any:
        """Return a random sequence of values.

        If a string is provided, a string of characters selected from it is
        returned; bytes give bytes. Any other collection gives a list of its
        elements (the values, for a mapping).

        Unlike :meth:`get_array`, the same element can be selected multiple
        times. An element that appears multiple times in *choices* has a
        proportionally higher chance of being selected.

        Raises:
            InvalidArgumentError: If the length is negative, or the choices
                are empty while the length is not zero.
        """
        length = as_integer(length, "Sequence length")
        if length < 0:
            raise InvalidArgumentError("Invalid sequence length")

        if isinstance(choices, str):
            return "".join(self._sequence_values(choices, length))
        if isinstance(choices, (bytes, bytearray)):
            return bytes(self._sequence_values(choices, length))

        return self._sequence_values(_values(choices), length)

    def _sequence_values(self, values: Sequence[T], length: int) -> list[T]:
        """Select *length* values with replacement."""
        if length < 1:
            return []
        if len(values) < 1:
            raise InvalidArgumentError("Cannot generate sequence from empty value set")

        last = len(values) - 1
        return [values[self._generator.get_number(0, last)] for _ in range(length)]

    def get_uuid(self) -> str:
        """Return a random version 4 UUID in the canonical 8-4-4-4-12 form."""
        words = list(struct.unpack(">8H", self._generator.get_bytes(16)))

        words[3] &= 0x0FFF
        words[4] = words[4] & 0x3FFF | 0x8000

        return "{:04x}{:04x}-{:04x}-4{:03x}-{:04x}-{:04x}{:04x}{:04x}".format(*words)

    def health_check(self) -> dict[str, Any]:
        """Return the status dictionary of the held generator."""
        return self._generator.health_check()

    def close(self) -> None:
        """Close the held generator, releasing any open device handle."""
        self._generator.close()

    def __enter__(self) -> SecureRandom:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
