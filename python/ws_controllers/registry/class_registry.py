r"""In-process controller class registry.

ClassRegistry keeps controller classes keyed by their fully-qualified
type name and answers the factory's type queries. Keys are compared
case-insensitively, while the registered spelling is preserved so the
factory can detect mis-cased controller names.

Example:
    >>> registry = ClassRegistry()
    >>> registry.register(UsersController)  # namespace = "AdminModule"
    >>> registry.exists("adminmodule\\userscontroller")
    True
    >>> registry.real_name("adminmodule\\userscontroller")
    'AdminModule\\UsersController'
    >>>
    >>> # Register every controller found in a package
    >>> count = registry.discover("myapp.controllers")
"""

from __future__ import annotations

import importlib
import inspect
import pkgutil
import threading
from typing import TYPE_CHECKING, Any

from ..controller import Controller
from ..logging import log_debug, log_error, log_info, log_warn
from .base_registry import TypeRegistry

if TYPE_CHECKING:
    from ..event_bridge import EventBridge


class ClassRegistry(TypeRegistry):
    """Registry of controller classes.

    Thread-safe for concurrent registration and lookup.
    """

    def __init__(self, events: EventBridge | None = None) -> None:
        """Initialize an empty registry.

        Args:
            events: Optional event bridge notified of registrations.
        """
        self._classes: dict[str, tuple[str, type]] = {}
        self._lock = threading.RLock()
        self._events = events

    def register(self, cls: type, name: str | None = None) -> str:
        """Register a class.

        Args:
            cls: The class to register.
            name: Fully-qualified type name. Defaults to
                ``cls.type_name()`` for controllers, else ``cls.__name__``.

        Returns:
            The name the class was registered under.

        Raises:
            ValueError: If cls is not a class.
        """
        if not isinstance(cls, type):
            raise ValueError(f"Expected a class, got {cls!r}")

        if name is None:
            name = cls.type_name() if issubclass(cls, Controller) else cls.__name__

        with self._lock:
            key = name.lower()
            if key in self._classes:
                log_warn(f"Overwriting existing controller class: {name}")
            self._classes[key] = (name, cls)

        log_debug(f"Registered controller class: {name} -> {cls.__module__}.{cls.__qualname__}")

        if self._events is not None:
            from ..event_bridge import EventNames

            self._events.publish(EventNames.CONTROLLER_REGISTERED, name, cls)
        return name

    def unregister(self, name: str) -> bool:
        """Unregister a class.

        Args:
            name: Type name to remove.

        Returns:
            True if the class was removed, False if not found.
        """
        with self._lock:
            if self._classes.pop(name.lower(), None) is None:
                return False
        log_debug(f"Unregistered controller class: {name}")
        return True

    def get(self, name: str) -> type | None:
        """Get a registered class by name.

        Args:
            name: Type name, compared case-insensitively.

        Returns:
            The class, or None if not registered.
        """
        entry = self._classes.get(name.lower())
        return entry[1] if entry else None

    def clear(self) -> None:
        """Remove all registered classes."""
        with self._lock:
            self._classes.clear()
        log_debug("Cleared all controller classes from registry")

    def exists(self, name: str) -> bool:
        """Check if a class is registered under this name."""
        return name.lower() in self._classes

    def real_name(self, name: str) -> str:
        """Return the registered spelling of a name."""
        return self._classes[name.lower()][0]

    def satisfies_capability(self, name: str, capability: type) -> bool:
        """Check if the registered class derives from the capability."""
        return issubclass(self._require(name), capability)

    def is_abstract(self, name: str) -> bool:
        """Check if the registered class has unimplemented abstract methods."""
        return inspect.isabstract(self._require(name))

    def construct(self, name: str) -> Any:
        """Instantiate the registered class without arguments."""
        return self._require(name)()

    def registered_types(self) -> list[str]:
        """List registered type names in their registered spelling."""
        return [entry[0] for entry in self._classes.values()]

    def discover(
        self,
        package_name: str,
        base_class: type | None = None,
    ) -> int:
        """Discover and register controllers from a package.

        Scans the package and all subpackages for subclasses of the base
        class defined in the scanned modules. Abstract classes are
        registered too; the factory rejects them at resolution time.

        Args:
            package_name: Package to scan (e.g., "myapp.controllers").
            base_class: Base class to filter by (default: Controller).

        Returns:
            Number of classes discovered and registered.
        """
        base = base_class or Controller
        discovered = 0

        try:
            package = importlib.import_module(package_name)
        except ImportError as e:
            log_error(f"Failed to import package {package_name}: {e}")
            return 0

        discovered += self._scan_module(package, base)

        if not hasattr(package, "__path__"):
            log_info(f"Discovered {discovered} controllers in {package_name}")
            return discovered

        for _importer, module_name, _is_pkg in pkgutil.walk_packages(
            package.__path__,
            prefix=f"{package_name}.",
        ):
            try:
                module = importlib.import_module(module_name)
            except Exception as e:
                log_warn(f"Failed to scan module {module_name}: {e}")
                continue
            discovered += self._scan_module(module, base)

        log_info(f"Discovered {discovered} controllers in {package_name}")
        return discovered

    def _scan_module(self, module: Any, base: type) -> int:
        discovered = 0

        for _name, obj in inspect.getmembers(module, inspect.isclass):
            # Skip classes merely imported into this module
            if obj.__module__ != module.__name__:
                continue
            if obj is base or not issubclass(obj, base):
                continue

            self.register(obj)
            discovered += 1

        return discovered

    def _require(self, name: str) -> type:
        cls = self.get(name)
        if cls is None:
            raise KeyError(name)
        return cls

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.exists(name)

    def __len__(self) -> int:
        return len(self._classes)

    def __repr__(self) -> str:
        return f"ClassRegistry(classes={len(self._classes)})"
