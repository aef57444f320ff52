"""Abstract base class for controller type registries.

A type registry is the host-side capability the controller factory
consults once it has formatted a class name. The factory never inspects
classes itself; it only asks the registry.

Registry Contract:
1. exists() - Is a type with this name known (case-insensitive)?
2. real_name() - The registered spelling of that name
3. satisfies_capability() - Does it fulfil the required role?
4. is_abstract() - Is it non-instantiable?
5. construct() - Build an instance of a confirmed type

Example Implementation:
    class ContainerRegistry(TypeRegistry):
        def __init__(self, container):
            self._container = container

        def exists(self, name: str) -> bool:
            return self._container.has_type(name)

        ...
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class TypeRegistry(ABC):
    """Abstract base class for controller type registries.

    Name lookups are case-insensitive; ``real_name`` reports the spelling
    the type was registered with.
    """

    @abstractmethod
    def exists(self, name: str) -> bool:
        """Check if a type with this fully-qualified name exists.

        Args:
            name: Fully-qualified type name, compared case-insensitively.

        Returns:
            True if the type is known.
        """
        ...

    @abstractmethod
    def real_name(self, name: str) -> str:
        """Return the registered spelling of a type name.

        Args:
            name: Fully-qualified type name of an existing type.

        Returns:
            The name as the type was registered.

        Raises:
            KeyError: If the type does not exist.
        """
        ...

    @abstractmethod
    def satisfies_capability(self, name: str, capability: type) -> bool:
        """Check if a type fulfils the required capability.

        Args:
            name: Fully-qualified type name of an existing type.
            capability: Base class or protocol the type must implement.

        Returns:
            True if the type implements the capability.
        """
        ...

    @abstractmethod
    def is_abstract(self, name: str) -> bool:
        """Check if a type cannot be instantiated.

        Args:
            name: Fully-qualified type name of an existing type.

        Returns:
            True if the type is abstract.
        """
        ...

    @abstractmethod
    def construct(self, name: str) -> Any:
        """Construct an instance of a type.

        Args:
            name: Fully-qualified type name of a validated type.

        Returns:
            The new instance.
        """
        ...

    def registered_types(self) -> list[str]:
        """Return all type names this registry knows about.

        Used for debugging and introspection.

        Returns:
            List of registered type names.
        """
        return []
