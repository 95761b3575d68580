"""
================================================================================
Fixture Common Utilities
================================================================================

Shared settings management and logging setup.

Exports:
    - ConfigLoader: YAML + environment settings loader
    - FixtureSettings: explicit per-fixture settings
    - init_logger: Function to initialize loguru logger with standard settings

Usage:
    from webfixture.common import ConfigLoader, FixtureSettings, init_logger

    loader = ConfigLoader("config/fixture.yaml")
    init_logger(config=loader)
    settings = FixtureSettings.from_loader(loader)

================================================================================
"""

from .config_loader import ConfigLoader, DEFAULT_CONFIG_PATH
from .log_setup import init_logger, reset_logger
from .settings import FixtureSettings

__all__ = [
    "ConfigLoader",
    "DEFAULT_CONFIG_PATH",
    "FixtureSettings",
    "init_logger",
    "reset_logger",
]
