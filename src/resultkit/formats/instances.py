# topmark:header:start
#
#   project      : ResultKit
#   file         : instances.py
#   file_relpath : src/resultkit/formats/instances.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Bootstrap of the result format registry of a `World`.

Builds a `FormatRegistry` from the built-in plugin modules and, optionally,
from plugin entry points.

Notes:
    * Built-ins are imported lazily, in `_BUILTIN_MODULES` order; the first
      format registered (``xml``) is the registry default.
    * Plugins are discovered via the ``resultkit.formats`` entry point group and
      registered after the built-ins. An entry point may reference a module
      (its ``REGISTRARS`` list is used), a list of registration functions, or
      a single registration function.
    * A plugin that fails to register is logged and skipped; the others are
      still registered.
"""

from __future__ import annotations

from collections.abc import Iterable as IterABC
from importlib import import_module
from importlib.metadata import entry_points
from types import ModuleType
from typing import TYPE_CHECKING, Any, Final, cast

from resultkit.config.logging import get_logger
from resultkit.constants import FORMATS_ENTRYPOINT_GROUP
from resultkit.errors import RegistrationError
from resultkit.formats.registry import FormatRegistry

if TYPE_CHECKING:
    from collections.abc import Iterable
    from importlib.metadata import EntryPoints

    from resultkit.config.logging import ResultKitLogger
    from resultkit.formats.base import FormatFactory, RegisterFactory
    from resultkit.world import World

logger: ResultKitLogger = get_logger(__name__)

_BUILTIN_MODULES: Final[tuple[str, ...]] = (
    "resultkit.formats.builtins.sparql_xml",
    "resultkit.formats.builtins.sparql_json",
    "resultkit.formats.builtins.table",
    "resultkit.formats.builtins.sv",
    "resultkit.formats.builtins.html",
    "resultkit.formats.builtins.turtle",
)


def _registrars_of(origin: str, provided: Any) -> list[RegisterFactory]:
    """Normalize a module, a list of callables or a callable to a list of registrars."""
    if isinstance(provided, ModuleType):
        provided = getattr(provided, "REGISTRARS", None)
        if provided is None:
            logger.warning("Module %s has no REGISTRARS list; skipping", origin)
            return []
    if callable(provided):
        return [cast("RegisterFactory", provided)]
    if isinstance(provided, IterABC) and not isinstance(provided, (str, bytes)):
        registrars: list[RegisterFactory] = []
        for obj in cast("IterABC[object]", provided):
            if callable(obj):
                registrars.append(cast("RegisterFactory", obj))
            else:
                logger.warning("Non-callable registrar in %s: %r", origin, obj)
        return registrars
    logger.warning("%s did not provide result format registrars: %r", origin, provided)
    return []


def _iter_builtin_registrars() -> Iterable[tuple[str, RegisterFactory]]:
    """Yield ``(origin, registrar)`` pairs from the built-in modules."""
    for modname in _BUILTIN_MODULES:
        try:
            mod: ModuleType = import_module(modname)
        except Exception:
            logger.exception("Failed to import built-in result formats from %s", modname)
            continue
        for registrar in _registrars_of(modname, mod):
            yield modname, registrar


def _iter_plugin_registrars() -> Iterable[tuple[str, RegisterFactory]]:
    """Yield ``(origin, registrar)`` pairs provided by entry points."""
    try:
        candidates: EntryPoints = entry_points().select(group=FORMATS_ENTRYPOINT_GROUP)
    except Exception:
        logger.exception("Failed to read entry points")
        return

    for ep in candidates:
        origin = f"entry point {ep.name}"
        try:
            provided: Any = ep.load()
        except Exception:
            logger.exception("Failed loading result formats from %s", origin)
            continue
        for registrar in _registrars_of(origin, provided):
            yield origin, registrar


def build_registry(
    registrars: Iterable[tuple[str, RegisterFactory]],
    disabled: Iterable[str] = (),
) -> tuple[FormatRegistry, int]:
    """Register every registrar into a fresh registry.

    Args:
        registrars (Iterable[tuple[str, RegisterFactory]]): ``(origin, registrar)``
            pairs, in registration order.
        disabled (Iterable[str]): Format names to leave out. A format is left out
            when any of its names is disabled.

    Returns:
        tuple[FormatRegistry, int]: The registry and the number of registrars
            that failed.
    """
    skip: frozenset[str] = frozenset(disabled)
    registry = FormatRegistry()
    failures = 0
    for origin, registrar in registrars:
        try:
            factory: FormatFactory = registry.register(registrar)
        except RegistrationError as exc:
            failures += 1
            logger.error("Skipping result format from %s: %s", origin, exc)
            continue
        if skip.intersection(factory.names):
            registry.remove(factory.name)
            logger.info("Result format %s is disabled by configuration", factory.name)
    return registry, failures


def init_result_formats(world: World) -> int:
    """Build the format registry of ``world`` (no-op if already built).

    Honors the ``[formats]`` settings of ``world.config``.

    Returns:
        int: Number of plugins that failed to register (0 on success).
    """
    if world.formats is not None:
        return 0

    def _all() -> Iterable[tuple[str, RegisterFactory]]:
        yield from _iter_builtin_registrars()
        if world.config.load_plugins:
            yield from _iter_plugin_registrars()

    registry, failures = build_registry(_all(), world.config.disabled_formats)
    world.formats = registry
    logger.debug("Loaded %d result formats (%d failed)", len(registry), failures)
    return failures


def finish_result_formats(world: World) -> None:
    """Tear down the format registry of ``world`` (no-op if absent)."""
    if world.formats is not None:
        world.formats.clear()
        world.formats = None
