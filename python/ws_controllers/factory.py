r"""Controller factory: resolves symbolic controller names to classes.

The factory formats a symbolic name into a class name using the
configured mapping rules, validates the class through a TypeRegistry and
caches the result. Names whose casing differs from the registered class
are accepted and corrected, with a warning.

Resolution Contract:
1. Cached names are returned without touching the registry
2. Names must start with a letter and contain only letters, digits and ``:``
3. The formatted class must exist, implement the capability and be concrete
4. The canonical name is rebuilt from the registered class name; a
   differing input is reported through ``Resolution.correction``

Example:
    >>> registry = ClassRegistry()
    >>> registry.discover("myapp.controllers")
    >>> factory = ControllerFactory(registry)
    >>>
    >>> resolution = factory.resolve("admin:users")
    >>> resolution.controller_class
    'AdminModule\\UsersController'
    >>> resolution.name
    'Admin:Users'
    >>>
    >>> controller = factory.create_controller("Admin:Users")
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any

from .controller import Controller
from .event_bridge import EventBridge, EventNames
from .exceptions import ControllerError, InvalidNameError, ResolutionError
from .logging import log_debug, log_warn
from .mapping import ControllerMapping
from .types import LogContext, NameCorrection, Resolution

if TYPE_CHECKING:
    from .config import FactoryConfig
    from .registry import TypeRegistry

# A letter first, then letters, digits and module separators
NAME_PATTERN = re.compile(r"^[^\W\d_](?:[^\W_]|:)*\Z")


class ControllerFactory:
    """Resolves controller names and creates controller instances.

    The name cache is a plain dict without a lock: concurrent first
    resolutions of the same name may validate twice and store equal
    values, which is harmless.

    Attributes:
        registry: Type registry consulted for class checks.
        mapping: Mapping rules used to format and unformat names.
        capability: Base class resolved controllers must implement.
    """

    def __init__(
        self,
        registry: TypeRegistry,
        config: FactoryConfig | None = None,
        factory: Callable[[str], Any] | None = None,
        events: EventBridge | None = None,
        capability: type = Controller,
    ) -> None:
        """Initialize the factory.

        Args:
            registry: Type registry answering existence and capability checks.
            config: Mapping configuration applied over the default rules.
            factory: Callable constructing an instance from a class name.
                Defaults to ``registry.construct``.
            events: Event bridge for resolution events. Defaults to the
                EventBridge singleton.
            capability: Base class resolved controllers must implement.

        Raises:
            ConfigurationError: If the config contains a malformed mask.
        """
        self.registry = registry
        self.mapping = ControllerMapping(config.mapping if config else None)
        self.capability = capability
        self._factory = factory or registry.construct
        self._events = events if events is not None else EventBridge.instance()
        self._cache: dict[str, Resolution] = {}

    def create_controller(self, name: str) -> Any:
        """Resolve a controller name and construct the controller.

        Args:
            name: Symbolic controller name.

        Returns:
            The controller instance built by the instance factory.

        Raises:
            InvalidNameError: If the name is malformed.
            ResolutionError: If the name does not resolve to a usable class.
        """
        return self._factory(self.resolve(name).controller_class)

    def get_controller_class(self, name: str) -> str:
        """Resolve a controller name to its class name.

        Args:
            name: Symbolic controller name.

        Returns:
            The fully-qualified controller class name.
        """
        return self.resolve(name).controller_class

    def resolve(self, name: str) -> Resolution:
        """Resolve a controller name.

        Args:
            name: Symbolic controller name, e.g. ``Admin:Users``.

        Returns:
            Resolution with the class name and the canonical name.

        Raises:
            InvalidNameError: If the name is malformed.
            ResolutionError: If the class is missing, does not implement
                the capability or is abstract.
        """
        if not isinstance(name, str):
            raise InvalidNameError(name)

        cached = self._cache.get(name)
        if cached is not None:
            return cached

        try:
            resolution = self._resolve_uncached(name)
        except ControllerError as e:
            self._events.publish(EventNames.CONTROLLER_RESOLUTION_FAILED, name, e)
            raise

        self._cache[name] = resolution
        if resolution.correction is not None:
            self._cache[resolution.name] = resolution.model_copy(
                update={"requested_name": resolution.name, "correction": None}
            )

        self._events.publish(EventNames.CONTROLLER_RESOLVED, resolution)
        return resolution

    def _resolve_uncached(self, name: str) -> Resolution:
        if not NAME_PATTERN.match(name):
            raise InvalidNameError(name)

        class_name = self.mapping.format(name)
        log_debug(
            f"Resolving controller '{name}'",
            LogContext(controller_name=name, controller_class=class_name, operation="resolve"),
        )

        if not self.registry.exists(class_name):
            raise ResolutionError(
                f'Cannot load controller "{name}", class "{class_name}" was not found.',
                name,
                class_name,
            )

        class_name = self.registry.real_name(class_name)

        if not self.registry.satisfies_capability(class_name, self.capability):
            capability_name = f"{self.capability.__module__}.{self.capability.__qualname__}"
            raise ResolutionError(
                f'Cannot load controller "{name}", class "{class_name}" '
                f"is not {capability_name} implementor.",
                name,
                class_name,
            )

        if self.registry.is_abstract(class_name):
            raise ResolutionError(
                f'Cannot load controller "{name}", class "{class_name}" is abstract.',
                name,
                class_name,
            )

        canonical = self.mapping.unformat(class_name)

        if canonical is None:
            log_debug(
                f"No canonical name for controller class '{class_name}'",
                LogContext(controller_name=name, controller_class=class_name),
            )
            return Resolution(name=name, requested_name=name, controller_class=class_name)

        if canonical == name:
            return Resolution(name=name, requested_name=name, controller_class=class_name)

        correction = NameCorrection(original_name=name, canonical_name=canonical)
        log_warn(
            f'Case mismatch on controller name "{name}", correct name is "{canonical}".',
            {"controller_name": name, "canonical_name": canonical, "controller_class": class_name},
        )
        self._events.publish(EventNames.CONTROLLER_NAME_CORRECTED, correction)

        return Resolution(
            name=canonical,
            requested_name=name,
            controller_class=class_name,
            correction=correction,
        )

    def set_mapping(self, mapping: Mapping[str, Any]) -> None:
        """Set mapping masks as pairs of ``module -> mask``.

        Clears the name cache, since cached classes may no longer match
        the new rules.

        Args:
            mapping: Module keys to compact mask strings or triples.

        Raises:
            ConfigurationError: If any mask is malformed.
        """
        self.mapping.set_mapping(mapping)
        self.clear_cache()

    def format_controller_class(self, name: str) -> str:
        """Format a controller class name from a symbolic name."""
        return self.mapping.format(name)

    def unformat_controller_class(self, class_name: str) -> str | None:
        """Rebuild the canonical symbolic name from a class name."""
        return self.mapping.unformat(class_name)

    def clear_cache(self) -> None:
        """Forget all resolved names."""
        self._cache.clear()

    def cached_names(self) -> list[str]:
        """List names currently held in the cache."""
        return list(self._cache.keys())

    def __repr__(self) -> str:
        return (
            f"ControllerFactory(registry={self.registry!r}, "
            f"modules={self.mapping.modules()!r}, cached={len(self._cache)})"
        )


__all__ = ["NAME_PATTERN", "ControllerFactory"]
