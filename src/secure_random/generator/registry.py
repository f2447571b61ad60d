"""Name-to-factory lookup for secure random generators.

Every generator module decorates its class with :func:`register_generator`,
which records ``cls.from_config`` as the factory for that name. Names listed
in ``SecureRandomConfig.default_generators`` are resolved to factories with
:func:`generator_factory`; calling the factory with the configuration
builds the generator.

Packages can contribute their own generators through the
``secure_random.generators`` entry-point group, e.g. in ``pyproject.toml``::

    [project.entry-points."secure_random.generators"]
    hardware = "my_package.hw:HardwareSource"

Plugins are only imported the first time a name cannot be resolved from the
built-in generators.
"""

from __future__ import annotations

import importlib.metadata
import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, TypeVar

from secure_random.generator.base import EntropySource

if TYPE_CHECKING:
    from secure_random.config import SecureRandomConfig

logger = logging.getLogger("secure_random")

ENTRY_POINT_GROUP = "secure_random.generators"

GeneratorFactory = Callable[["SecureRandomConfig"], EntropySource]
S = TypeVar("S", bound=type[EntropySource])

_factories: dict[str, GeneratorFactory] = {}
_plugins_scanned = False


def register_generator(name: str) -> Callable[[S], S]:
    """Class decorator recording ``cls.from_config`` under *name*.

    A later registration under the same name replaces the earlier one.
    """

    def decorator(generator_cls: S) -> S:
        _factories[name] = generator_cls.from_config
        return generator_cls

    return decorator


def generator_factory(name: str) -> GeneratorFactory:
    """Return the factory registered under *name*.

    Raises:
        KeyError: If neither a built-in generator nor a plugin uses *name*.
    """
    if name not in _factories:
        _scan_plugins()
    try:
        return _factories[name]
    except KeyError:
        known = ", ".join(available_generators()) or "(none)"
        raise KeyError(f"Unknown generator: {name!r}. Available: {known}") from None


def available_generators() -> list[str]:
    """Sorted names of all built-in and plugin generators."""
    _scan_plugins()
    return sorted(_factories)


def _scan_plugins() -> None:
    global _plugins_scanned
    if _plugins_scanned:
        return
    _plugins_scanned = True

    for ep in importlib.metadata.entry_points(group=ENTRY_POINT_GROUP):
        if ep.name in _factories:
            logger.debug("Generator plugin %r shadowed by a built-in, ignoring", ep.name)
            continue
        try:
            target = ep.load()
        except Exception:  # a broken plugin must not hide the others
            logger.warning("Cannot load generator plugin %r (%s)", ep.name, ep.value, exc_info=True)
            continue
        if not (isinstance(target, type) and issubclass(target, EntropySource)):
            logger.warning(
                "Generator plugin %r (%s) is not an EntropySource subclass, ignoring",
                ep.name,
                ep.value,
            )
            continue
        _factories[ep.name] = target.from_config
        logger.debug("Registered generator plugin %r from %s", ep.name, ep.value)


def _reset() -> None:
    """Forget every registration and plugin scan (tests only)."""
    global _plugins_scanned
    _factories.clear()
    _plugins_scanned = False
