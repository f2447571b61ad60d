"""Exception hierarchy for secure-random.

All exceptions derive from SecureRandomError, enabling broad catch patterns
at the application boundary while allowing fine-grained handling internally.
"""


class SecureRandomError(Exception):
    """Base exception for all secure-random errors."""


class UnsupportedSourceError(SecureRandomError):
    """No usable random generator is available.

    Raised at construction when an explicitly supplied generator reports
    that it is not supported, or when none of the default candidates is
    supported by the system.
    """


class GenerationError(SecureRandomError):
    """Random data could not be generated.

    Raised when a source returns a byte count different from the one
    requested, returns no data, fails with an I/O error, or when a range
    computation would overflow the native integer width.
    """


class InvalidArgumentError(SecureRandomError, ValueError):
    """A caller supplied an out-of-contract argument.

    Raised for negative counts, inverted or negative limits, limits beyond
    the native integer maximum, out-of-bounds selection counts and empty
    collections where at least one element is required.
    """


class ConfigValidationError(SecureRandomError):
    """Configuration field validation failed.

    Raised when the configuration names a generator that is not present
    in the generator registry.
    """
