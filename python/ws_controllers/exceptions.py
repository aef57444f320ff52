"""Custom exceptions for ws-controllers.

This module provides the exception hierarchy raised while configuring
controller mappings and resolving controller names.
"""

from __future__ import annotations

from typing import Any


class ControllerError(Exception):
    """Base exception for all ws-controllers errors.

    All exceptions raised by ws-controllers inherit from this class,
    making it easy to catch all controller-related errors.

    Example:
        >>> try:
        ...     controller = factory.create_controller("Admin:Users")
        ... except ControllerError as e:
        ...     print(f"Controller error: {e}")
    """

    pass


class InvalidNameError(ControllerError):
    """Raised when a controller name is not a valid symbolic name.

    Names must start with a letter and contain only letters, digits
    and the ``:`` module separator.

    Attributes:
        name: The rejected name.

    Example:
        >>> try:
        ...     factory.resolve("123abc")
        ... except InvalidNameError as e:
        ...     print(e.name)
        123abc
    """

    def __init__(self, name: Any) -> None:
        self.name = name
        super().__init__(f'Controller name must be alphanumeric string, "{name}" is invalid.')


class ConfigurationError(ControllerError):
    """Raised when a mapping mask is malformed.

    Configuration errors must halt startup; masks are never skipped.

    Attributes:
        module: Module key the mask was registered for.
        mask: The rejected mask.
    """

    def __init__(self, message: str, module: str | None = None, mask: Any = None) -> None:
        self.module = module
        self.mask = mask
        super().__init__(message)


class ResolutionError(ControllerError):
    """Raised when a controller name cannot be resolved to a usable class.

    Common causes:
    - No class with the formatted name is registered
    - The class does not implement the controller capability
    - The class is abstract

    Attributes:
        name: The symbolic controller name.
        class_name: The class name computed from it.
    """

    def __init__(self, message: str, name: str, class_name: str) -> None:
        self.name = name
        self.class_name = class_name
        super().__init__(message)


__all__ = [
    "ControllerError",
    "InvalidNameError",
    "ConfigurationError",
    "ResolutionError",
]
