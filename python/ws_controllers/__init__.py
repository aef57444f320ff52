r"""
ws-controllers

This package resolves symbolic WebSocket controller names such as
``Admin:Users`` to controller classes such as ``AdminModule\UsersController``
using configurable mapping masks, and recovers the canonical name from a
class name to correct mis-cased input.

Example:
    >>> from ws_controllers import ClassRegistry, Controller, ControllerFactory
    >>>
    >>> class UsersController(Controller):
    ...     namespace = "AdminModule"
    ...     def run(self, request):
    ...         return {"users": []}
    ...
    >>> registry = ClassRegistry()
    >>> registry.register(UsersController)
    'AdminModule\\UsersController'
    >>> factory = ControllerFactory(registry)
    >>> factory.get_controller_class("Admin:Users")
    'AdminModule\\UsersController'

    >>> # Mis-cased names resolve, with a warning and a correction record
    >>> factory.resolve("admin:users").name
    'Admin:Users'

    >>> # Custom masks, per module
    >>> factory.set_mapping({"Shop": "ShopModule\\*\\*Controller"})
"""

from __future__ import annotations

from ws_controllers.config import FactoryConfig, find_config_file, load_config
from ws_controllers.controller import Controller
from ws_controllers.event_bridge import EventBridge, EventNames
from ws_controllers.exceptions import (
    ConfigurationError,
    ControllerError,
    InvalidNameError,
    ResolutionError,
)
from ws_controllers.factory import ControllerFactory
from ws_controllers.logging import (
    log_debug,
    log_error,
    log_info,
    log_trace,
    log_warn,
)
from ws_controllers.mapping import DEFAULT_MAPPING, ControllerMapping, compile_mask
from ws_controllers.registry import ClassRegistry, TypeRegistry
from ws_controllers.types import LogContext, MappingRule, NameCorrection, Resolution

__version__ = "0.1.0"


def version() -> str:
    """Return the package version."""
    return __version__


__all__ = [
    # Version
    "__version__",
    "version",
    # Factory
    "ControllerFactory",
    "Controller",
    # Mapping
    "ControllerMapping",
    "DEFAULT_MAPPING",
    "compile_mask",
    # Registries
    "TypeRegistry",
    "ClassRegistry",
    # Configuration
    "FactoryConfig",
    "find_config_file",
    "load_config",
    # Events
    "EventBridge",
    "EventNames",
    # Types
    "MappingRule",
    "NameCorrection",
    "Resolution",
    "LogContext",
    # Exceptions
    "ControllerError",
    "InvalidNameError",
    "ConfigurationError",
    "ResolutionError",
    # Logging
    "log_error",
    "log_warn",
    "log_info",
    "log_debug",
    "log_trace",
]
