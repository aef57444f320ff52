"""Controller type registries.

The controller factory asks a TypeRegistry whether a formatted class
name exists, whether it implements the controller capability and
whether it is abstract, and delegates instance construction to it by
default.

Built-in Registries:
- ClassRegistry: in-process classes, registered explicitly or discovered
  from a package

Custom Registries:
Extend TypeRegistry to resolve against a DI container or service locator:

    from ws_controllers.registry import TypeRegistry

    class ContainerRegistry(TypeRegistry):
        def exists(self, name):
            ...
"""

from __future__ import annotations

from .base_registry import TypeRegistry
from .class_registry import ClassRegistry

__all__ = [
    "TypeRegistry",
    "ClassRegistry",
]
