"""pytest configuration and fixtures for ws_controllers tests.

This module provides shared fixtures for testing the controller factory,
including a fresh EventBridge, a populated ClassRegistry and a factory
wired to both.
"""

from __future__ import annotations

from collections.abc import Generator
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from ws_controllers import ClassRegistry, ControllerFactory, EventBridge


@pytest.fixture
def event_bridge() -> Generator[EventBridge, None, None]:
    """Provide a fresh, started EventBridge for each test."""
    from ws_controllers import EventBridge

    EventBridge.reset_instance()
    bridge = EventBridge.instance()
    bridge.start()
    yield bridge
    bridge.stop()
    EventBridge.reset_instance()


@pytest.fixture
def class_registry() -> ClassRegistry:
    """Provide a registry populated from the example controllers package."""
    from ws_controllers import ClassRegistry

    registry = ClassRegistry()
    registry.discover("tests.controllers")
    return registry


@pytest.fixture
def controller_factory(
    class_registry: ClassRegistry, event_bridge: EventBridge
) -> ControllerFactory:
    """Provide a factory with the default mapping over the example controllers."""
    from ws_controllers import ControllerFactory

    return ControllerFactory(class_registry, events=event_bridge)


@pytest.fixture
def recorded_events(event_bridge: EventBridge) -> dict[str, list[tuple]]:
    """Record every factory event published on the bridge."""
    from ws_controllers import EventNames

    events: dict[str, list[tuple]] = {
        EventNames.CONTROLLER_RESOLVED: [],
        EventNames.CONTROLLER_NAME_CORRECTED: [],
        EventNames.CONTROLLER_RESOLUTION_FAILED: [],
    }
    for name, received in events.items():
        event_bridge.subscribe(name, lambda *args, _received=received: _received.append(args))
    return events
