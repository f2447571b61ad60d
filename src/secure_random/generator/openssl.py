"""Entropy source using OpenSSL's ``RAND_bytes`` through the ``ssl`` module.

``ssl`` is imported on use, so interpreters built without OpenSSL can still
import the package and simply report this generator as unsupported.
"""

from __future__ import annotations

from secure_random.exceptions import GenerationError
from secure_random.generator.base import EntropySource
from secure_random.generator.registry import register_generator


@register_generator("openssl")
class OpenSSLGenerator(EntropySource):
    """Generates bytes using the OpenSSL CSPRNG linked into the interpreter.

    Supported when the interpreter was built with ``ssl`` and the OpenSSL
    generator reports that it has been seeded with enough entropy.
    """

    @property
    def name(self) -> str:
        """Return ``'openssl'``."""
        return "openssl"

    @property
    def is_supported(self) -> bool:
        """Whether ``RAND_bytes`` exists and the OpenSSL PRNG is seeded."""
        try:
            import ssl
        except ImportError:
            return False
        return hasattr(ssl, "RAND_bytes") and bool(ssl.RAND_status())

    def _read_bytes(self, count: int) -> bytes:
        try:
            import ssl
        except ImportError as e:
            raise GenerationError("OpenSSL is not available in this interpreter") from e

        try:
            return ssl.RAND_bytes(count)
        except ssl.SSLError as e:
            raise GenerationError(f"OpenSSL failed to generate random bytes: {e}") from e
