r"""Controller base class.

This module provides the Controller abstract base class. A class must
derive from it (or from the capability configured on the factory) to be
resolvable by name.

Example:
    >>> from ws_controllers import Controller
    >>>
    >>> class UsersController(Controller):
    ...     namespace = "AdminModule"
    ...
    ...     def run(self, request):
    ...         return {"users": []}
    ...
    >>> UsersController.type_name()
    'AdminModule\\UsersController'
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from .types import NAMESPACE_SEPARATOR


class Controller(ABC):
    """Abstract base class for WebSocket controllers.

    Class Attributes:
        namespace: Backslash-separated namespace the class is registered
            under, e.g. ``"AdminModule\\SettingsModule"``. Empty for
            top-level controllers.
    """

    namespace: str = ""

    @classmethod
    def type_name(cls) -> str:
        """Return the fully-qualified type name of this controller class."""
        namespace = cls.namespace.strip(NAMESPACE_SEPARATOR)
        if not namespace:
            return cls.__name__
        return f"{namespace}{NAMESPACE_SEPARATOR}{cls.__name__}"

    @abstractmethod
    def run(self, request: Any) -> Any:
        """Handle a request routed to this controller.

        Args:
            request: The incoming request.

        Returns:
            The controller response.
        """
        ...

    @property
    def name(self) -> str:
        """Return the fully-qualified type name."""
        return self.type_name()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(type_name={self.type_name()!r})"


__all__ = ["Controller"]
