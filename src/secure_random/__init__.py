"""secure-random: unbiased random values from secure random byte sources.

Normalizes the bytes produced by pluggable cryptographically secure
generators into integers in an inclusive range, floats, random selections,
shuffles, sequences and version 4 UUIDs, without modulo bias.
"""

from __future__ import annotations

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("secure-random")
except PackageNotFoundError:
    __version__ = "0.0.0"

from secure_random.config import SecureRandomConfig
from secure_random.exceptions import (
    ConfigValidationError,
    GenerationError,
    InvalidArgumentError,
    SecureRandomError,
    UnsupportedSourceError,
)
from secure_random.generator import (
    INT_MAX,
    EntropySource,
    NumberGenerator,
    RangeNumberGenerator,
    available_generators,
    generator_factory,
    register_generator,
)
from secure_random.normalizer import SecureRandom

__all__ = [
    "INT_MAX",
    "ConfigValidationError",
    "EntropySource",
    "GenerationError",
    "InvalidArgumentError",
    "NumberGenerator",
    "RangeNumberGenerator",
    "SecureRandom",
    "SecureRandomConfig",
    "SecureRandomError",
    "UnsupportedSourceError",
    "__version__",
    "available_generators",
    "generator_factory",
    "register_generator",
]
