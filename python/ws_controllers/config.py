"""Controller factory configuration.

The factory is configured with an explicit FactoryConfig rather than
process-wide defaults. Configs can be built in code or loaded from a
YAML file with a top-level ``mapping`` key:

.. code-block:: yaml

    mapping:
      "*": 'App\\Controllers\\*Module\\*Controller'
      Shop: [ShopModule, '*', '*Controller']

The config file is located with this priority:
1. WS_CONTROLLERS_CONFIG environment variable (explicit override)
2. WORKSPACE_PATH/config/controllers.yaml
3. ./config/controllers.yaml

Example:
    >>> from ws_controllers.config import load_config
    >>>
    >>> config = load_config()
    >>> factory = ControllerFactory(registry, config=config)
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError

from .exceptions import ConfigurationError
from .logging import log_debug, log_info, log_warn

CONFIG_ENV_VAR = "WS_CONTROLLERS_CONFIG"
CONFIG_FILE_NAME = "controllers.yaml"


class FactoryConfig(BaseModel):
    """Configuration for a ControllerFactory.

    Mask syntax is validated when the config is applied to a factory,
    which raises ConfigurationError for malformed masks.

    Example:
        >>> config = FactoryConfig(mapping={"Shop": ["ShopModule", "*", "*Controller"]})
    """

    model_config = {"extra": "forbid"}

    mapping: dict[str, str | list[str]] = Field(
        default_factory=dict,
        description="Module key to mapping mask, applied over the default rules.",
    )

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> FactoryConfig:
        """Create a FactoryConfig from parsed configuration data.

        Args:
            data: Configuration dictionary, or None for defaults.

        Returns:
            FactoryConfig instance.

        Raises:
            ConfigurationError: If the data does not match the schema.
        """
        try:
            return cls.model_validate(data or {})
        except ValidationError as e:
            raise ConfigurationError(f"Invalid controller configuration: {e}") from e

    @classmethod
    def from_yaml(cls, path: str | Path) -> FactoryConfig:
        """Load a FactoryConfig from a YAML file.

        Args:
            path: Path to the YAML file.

        Returns:
            FactoryConfig instance.

        Raises:
            ConfigurationError: If the file cannot be read or parsed.
        """
        path = Path(path)
        try:
            with path.open(encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise ConfigurationError(f"Cannot read controller configuration {path}: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e

        if data is not None and not isinstance(data, dict):
            raise ConfigurationError(f"Controller configuration {path} must be a mapping")

        log_debug(f"Loaded controller configuration from {path}")
        return cls.from_dict(data)


def find_config_file() -> Path | None:
    """Find the controller configuration file.

    Returns:
        Path to the config file, or None if not found.
    """
    # 1. Explicit override via environment variable
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        path = Path(env_path)
        if path.is_file():
            log_debug(f"Using {CONFIG_ENV_VAR}: {path}")
            return path
        log_warn(f"{CONFIG_ENV_VAR} does not exist: {env_path}")

    # 2. WORKSPACE_PATH environment variable
    workspace_path = os.environ.get("WORKSPACE_PATH")
    if workspace_path:
        path = Path(workspace_path) / "config" / CONFIG_FILE_NAME
        if path.is_file():
            log_debug(f"Using WORKSPACE_PATH config: {path}")
            return path

    # 3. Fallback to current directory
    path = Path.cwd() / "config" / CONFIG_FILE_NAME
    if path.is_file():
        log_debug(f"Using fallback config path: {path}")
        return path

    return None


def load_config() -> FactoryConfig:
    """Load the controller configuration, or defaults if none is found.

    Returns:
        FactoryConfig instance.
    """
    path = find_config_file()
    if path is None:
        log_info("No controller configuration found, using default mapping")
        return FactoryConfig()

    return FactoryConfig.from_yaml(path)


__all__ = [
    "CONFIG_ENV_VAR",
    "CONFIG_FILE_NAME",
    "FactoryConfig",
    "find_config_file",
    "load_config",
]
