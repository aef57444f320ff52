"""Controller lifecycle events.

Registries and factories report what happens to controller names on an
EventBridge, a thin pyee EventEmitter wrapper shared process-wide:

================================  ======================================
Event                             Listener arguments
================================  ======================================
``controller.registered``         ``(name: str, cls: type)``
``controller.resolved``           ``(resolution: Resolution)``
``controller.name_corrected``     ``(correction: NameCorrection)``
``controller.resolution_failed``  ``(name: str, error: ControllerError)``
================================  ======================================

Only these events exist; subscribing to or publishing any other name is
a programming error.

Example:
    >>> bridge = EventBridge.instance()
    >>> bridge.start()
    >>> bridge.subscribe(
    ...     EventNames.CONTROLLER_NAME_CORRECTED,
    ...     lambda c: print(f"{c.original_name} -> {c.canonical_name}"),
    ... )
    >>> factory.resolve("admin:users")
    admin:users -> Admin:Users
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from pyee.base import EventEmitter

from .logging import log_debug, log_info


class EventNames:
    """Names of the controller events."""

    CONTROLLER_REGISTERED = "controller.registered"
    CONTROLLER_RESOLVED = "controller.resolved"
    CONTROLLER_NAME_CORRECTED = "controller.name_corrected"
    CONTROLLER_RESOLUTION_FAILED = "controller.resolution_failed"

    ALL = frozenset(
        {
            CONTROLLER_REGISTERED,
            CONTROLLER_RESOLVED,
            CONTROLLER_NAME_CORRECTED,
            CONTROLLER_RESOLUTION_FAILED,
        }
    )


def _check_event(event: str) -> None:
    if event not in EventNames.ALL:
        raise ValueError(f"Unknown controller event: {event!r}")


class EventBridge:
    """Process-wide bus for controller events.

    The bridge starts inactive. Events published before ``start()`` or
    after ``stop()`` reach no listener.
    """

    _instance: EventBridge | None = None

    def __init__(self) -> None:
        self._emitter = EventEmitter()
        self._active = False

    @classmethod
    def instance(cls) -> EventBridge:
        """Return the shared bridge, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Stop and forget the shared bridge."""
        if cls._instance is not None:
            cls._instance.stop()
        cls._instance = None

    @property
    def is_active(self) -> bool:
        return self._active

    def start(self) -> None:
        """Begin delivering events. Safe to call repeatedly."""
        if not self._active:
            self._active = True
            log_info("Controller event bridge started")

    def stop(self) -> None:
        """Stop delivering events and drop every listener."""
        if self._active:
            self._active = False
            self._emitter.remove_all_listeners()
            log_info("Controller event bridge stopped")

    def subscribe(self, event: str, handler: Callable[..., Any]) -> None:
        """Call ``handler`` with the event's arguments each time it is published.

        Raises:
            ValueError: If ``event`` is not a controller event.
        """
        _check_event(event)
        self._emitter.on(event, handler)
        log_debug(f"Listener added for {event}")

    def unsubscribe(self, event: str, handler: Callable[..., Any]) -> None:
        """Remove a listener added with ``subscribe``.

        Raises:
            ValueError: If ``event`` is not a controller event.
        """
        _check_event(event)
        self._emitter.remove_listener(event, handler)
        log_debug(f"Listener removed for {event}")

    def publish(self, event: str, *args: Any) -> None:
        """Deliver a controller event to its listeners.

        Raises:
            ValueError: If ``event`` is not a controller event.
        """
        _check_event(event)
        if not self._active:
            log_debug(f"Controller event bridge inactive, dropped {event}")
            return
        self._emitter.emit(event, *args)


__all__ = ["EventBridge", "EventNames"]
