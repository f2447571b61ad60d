"""Entropy source reading directly from a random device.

``RandomReader`` reads from ``/dev/urandom`` by default, or from the blocking
``/dev/random``. Reading ``/dev/random`` may block the caller until the kernel
has gathered enough entropy.

The device is opened on the first read and kept open for the lifetime of the
reader. It is closed by :meth:`RandomReader.close`, on context-manager exit,
or when the reader is garbage collected.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Any, BinaryIO

from secure_random.exceptions import GenerationError
from secure_random.generator.base import EntropySource
from secure_random.generator.registry import register_generator

if TYPE_CHECKING:
    from secure_random.config import SecureRandomConfig

logger = logging.getLogger("secure_random")


@register_generator("random_reader")
class RandomReader(EntropySource):
    """Generates bytes by reading a random device.

    Args:
        urandom: ``True`` to read ``/dev/urandom``, ``False`` for ``/dev/random``.
        path: Explicit device path. Overrides *urandom* when given.
    """

    def __init__(self, urandom: bool = True, path: str | None = None) -> None:
        if path is None:
            path = "/dev/urandom" if urandom else "/dev/random"
        self._path = Path(path)
        self._handle: BinaryIO | None = None

    @classmethod
    def from_config(cls, config: SecureRandomConfig) -> RandomReader:
        return cls(path=config.device_path())

    @property
    def name(self) -> str:
        """Return ``'random_reader'``."""
        return "random_reader"

    @property
    def path(self) -> Path:
        """The device path this reader reads from."""
        return self._path

    @property
    def is_open(self) -> bool:
        """Whether the device handle is currently open."""
        return self._handle is not None

    @property
    def is_supported(self) -> bool:
        """Whether the device exists and is readable."""
        return os.access(self._path, os.R_OK)

    def _read_bytes(self, count: int) -> bytes:
        if self._handle is None:
            logger.debug("Opening random device %s", self._path)
            self._handle = self._path.open("rb", buffering=0)

        chunks: list[bytes] = []
        remaining = count
        while remaining:
            chunk = self._handle.read(remaining)
            if not chunk:
                raise GenerationError(f"Random device {self._path} returned no data")
            chunks.append(chunk)
            remaining -= len(chunk)
        return b"".join(chunks)

    def close(self) -> None:
        """Close the device handle if it is open (idempotent)."""
        handle = getattr(self, "_handle", None)
        if handle is None:
            return
        try:
            handle.close()
        finally:
            self._handle = None
            logger.debug("Closed random device %s", self._path)

    def health_check(self) -> dict[str, Any]:
        """Return status including the device path and whether it is open."""
        health = super().health_check()
        health["path"] = str(self._path)
        health["open"] = self.is_open
        return health

    def __del__(self) -> None:
        self.close()
