#!/usr/bin/env python3
"""Controller name resolution helper.

Discovers controllers in a package, applies the mapping configuration
and prints the class each symbolic name resolves to.

Usage:
    resolve.py Admin:Users Homepage --package myapp.controllers
    resolve.py admin:users --package myapp.controllers --config config/controllers.yaml
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

# Add the python source directory to the path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "python"))

from ws_controllers import (
    ClassRegistry,
    ControllerError,
    ControllerFactory,
    FactoryConfig,
    load_config,
)

log_level = os.environ.get("WS_CONTROLLERS_LOG", "warning").upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.WARNING),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%S%z",
)
logger = logging.getLogger("ws-controllers")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Resolve controller names to classes.")
    parser.add_argument("names", nargs="+", help="Symbolic controller names")
    parser.add_argument(
        "--package",
        required=True,
        help="Package to discover controllers in (e.g. myapp.controllers)",
    )
    parser.add_argument(
        "--config",
        help="Mapping configuration YAML (default: discovered controllers.yaml)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Resolve the requested names and report the results."""
    args = parse_args(argv)

    try:
        config = FactoryConfig.from_yaml(args.config) if args.config else load_config()
        registry = ClassRegistry()
        registry.discover(args.package)
        factory = ControllerFactory(registry, config=config)
    except ControllerError as e:
        logger.error(f"Configuration failed: {e}")
        return 1

    failed = 0
    for name in args.names:
        try:
            resolution = factory.resolve(name)
        except ControllerError as e:
            print(f"{name} -> ERROR: {e}")
            failed += 1
            continue

        line = f"{name} -> {resolution.controller_class}"
        if resolution.was_corrected:
            line += f" (canonical name: {resolution.name})"
        print(line)

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
