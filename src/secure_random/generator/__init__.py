"""Random generator subsystem for secure-random.

Re-exports the ABCs, registry functions, the rejection sampling adapter and all
built-in generator implementations for convenient access::

    from secure_random.generator import EntropySource, NumberGenerator
    from secure_random.generator import RandomReader, RangeNumberGenerator
"""

from secure_random.generator.base import (
    INT_MAX,
    INT_MIN,
    INT_SIZE,
    EntropySource,
    NumberGenerator,
)
from secure_random.generator.getrandom import GetRandomGenerator
from secure_random.generator.internal import InternalGenerator
from secure_random.generator.openssl import OpenSSLGenerator
from secure_random.generator.random_reader import RandomReader
from secure_random.generator.range import RangeNumberGenerator, unpack_integer
from secure_random.generator.registry import (
    available_generators,
    generator_factory,
    register_generator,
)
from secure_random.generator.system import SystemGenerator

__all__ = [
    "INT_MAX",
    "INT_MIN",
    "INT_SIZE",
    "EntropySource",
    "GetRandomGenerator",
    "InternalGenerator",
    "NumberGenerator",
    "OpenSSLGenerator",
    "RandomReader",
    "RangeNumberGenerator",
    "SystemGenerator",
    "available_generators",
    "generator_factory",
    "register_generator",
    "unpack_integer",
]
