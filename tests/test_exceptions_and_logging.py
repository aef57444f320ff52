"""Exception hierarchy and logging tests.

These tests verify:
- ControllerError is the base exception class
- Exceptions carry the offending name, class name or mask
- Logging functions attach structured fields to records
"""

from __future__ import annotations

import logging

import pytest

from ws_controllers import (
    ConfigurationError,
    ControllerError,
    InvalidNameError,
    LogContext,
    ResolutionError,
    log_debug,
    log_error,
    log_info,
    log_trace,
    log_warn,
)
from ws_controllers.logging import LOGGER_NAME, TRACE, get_logger


class TestExceptionHierarchy:
    """Test exception class hierarchy."""

    def test_controller_error_is_base(self):
        """Test ControllerError is the base class."""
        assert issubclass(InvalidNameError, ControllerError)
        assert issubclass(ConfigurationError, ControllerError)
        assert issubclass(ResolutionError, ControllerError)
        assert issubclass(ControllerError, Exception)

    def test_can_catch_by_base_class(self):
        """Test exceptions can be caught by base class."""
        with pytest.raises(ControllerError):
            raise ResolutionError("missing", "Admin:Users", "AdminModule\\UsersController")

    def test_invalid_name_error(self):
        """Test the rejected name is kept and quoted in the message."""
        error = InvalidNameError("123abc")

        assert error.name == "123abc"
        assert str(error) == 'Controller name must be alphanumeric string, "123abc" is invalid.'

    def test_configuration_error(self):
        """Test the module key and mask are kept."""
        error = ConfigurationError("bad mask", module="Shop", mask="Shop")

        assert str(error) == "bad mask"
        assert error.module == "Shop"
        assert error.mask == "Shop"

    def test_configuration_error_defaults(self):
        """Test module and mask are optional."""
        error = ConfigurationError("bad config")

        assert error.module is None
        assert error.mask is None

    def test_resolution_error(self):
        """Test the symbolic and class names are kept."""
        error = ResolutionError("not found", "Admin:Users", "AdminModule\\UsersController")

        assert error.name == "Admin:Users"
        assert error.class_name == "AdminModule\\UsersController"


class TestLogging:
    """Test logging functions."""

    def test_logger_name(self):
        """Test records go to the package logger."""
        assert get_logger().name == LOGGER_NAME == "ws_controllers"

    def test_trace_level_registered(self):
        """Test TRACE sits below DEBUG."""
        assert TRACE < logging.DEBUG
        assert logging.getLevelName(TRACE) == "TRACE"

    @pytest.mark.parametrize(
        ("log_fn", "level"),
        [
            (log_error, logging.ERROR),
            (log_warn, logging.WARNING),
            (log_info, logging.INFO),
            (log_debug, logging.DEBUG),
            (log_trace, TRACE),
        ],
    )
    def test_levels(self, caplog: pytest.LogCaptureFixture, log_fn, level):
        """Test each helper logs at its own level."""
        with caplog.at_level(TRACE, logger=LOGGER_NAME):
            log_fn("Test message")

        assert [r.levelno for r in caplog.records] == [level]
        assert caplog.records[0].fields == {}

    def test_fields_are_stringified(self, caplog: pytest.LogCaptureFixture):
        """Test dict fields are attached with string values."""
        with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
            log_info("Discovered controllers", {"package": "app.controllers", "count": 3})

        assert caplog.records[0].fields == {"package": "app.controllers", "count": "3"}

    def test_log_context_fields(self, caplog: pytest.LogCaptureFixture):
        """Test LogContext fields are attached without empty values."""
        context = LogContext(controller_name="Admin:Users", operation="resolve")

        with caplog.at_level(logging.WARNING, logger=LOGGER_NAME):
            log_warn("Something odd", context)

        assert caplog.records[0].fields == {
            "controller_name": "Admin:Users",
            "operation": "resolve",
        }

    def test_disabled_level_is_skipped(self, caplog: pytest.LogCaptureFixture):
        """Test nothing is recorded below the logger's level."""
        with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
            log_debug("hidden")
            log_trace("hidden")

        assert caplog.records == []
