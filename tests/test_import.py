"""Basic import tests for ws_controllers."""

from __future__ import annotations


def test_import_module():
    """Test that the module can be imported."""
    import ws_controllers

    assert ws_controllers is not None


def test_version():
    """Test that version is accessible."""
    import ws_controllers

    version = ws_controllers.version()
    assert isinstance(version, str)
    assert "." in version
    assert ws_controllers.__version__ == version


class TestModuleExports:
    """Test that expected symbols are exported."""

    def test_all_exports_resolve(self):
        """Test every name in __all__ is defined."""
        import ws_controllers

        for name in ws_controllers.__all__:
            assert hasattr(ws_controllers, name), name

    def test_core_exports(self):
        """Test the main entry points are exported."""
        import ws_controllers

        for name in [
            "ControllerFactory",
            "ControllerMapping",
            "ClassRegistry",
            "Controller",
            "FactoryConfig",
            "EventBridge",
            "InvalidNameError",
            "ConfigurationError",
            "ResolutionError",
        ]:
            assert name in ws_controllers.__all__
