"""
================================================================================
Configuration Loader
================================================================================

Reads fixture settings from a YAML file and lets environment variables
override individual keys.

A dotted key maps onto an environment variable by upper-casing it and
replacing dots with underscores:

    fixture.base_url   -> FIXTURE_BASE_URL
    browser.headless   -> BROWSER_HEADLESS
    logging.level      -> LOGGING_LEVEL

Environment values are strings; they are coerced to the type of the default
passed to `get()` (bool, int or float) when one is given.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Union

import yaml
from loguru import logger

from webfixture.errors import ConfigurationError


# Repo-level settings file
DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "fixture.yaml"

_MISSING = object()

_TRUE_STRINGS = frozenset({"true", "1", "yes", "on"})


def env_name(key: str) -> str:
    """Environment variable that overrides a dotted settings key."""
    return key.upper().replace(".", "_")


def _coerce(raw: str, reference: Any) -> Any:
    # bool first: bool is a subclass of int
    if isinstance(reference, bool):
        return raw.strip().lower() in _TRUE_STRINGS

    converters: Dict[type, Callable[[str], Any]] = {int: int, float: float}
    for kind, convert in converters.items():
        if isinstance(reference, kind):
            try:
                return convert(raw)
            except ValueError:
                logger.warning(f"Cannot read '{raw}' as {kind.__name__}; using the raw string")
                return raw
    return raw


class ConfigLoader:
    """
    One settings file plus environment overrides.

    Loaders are plain instances rather than a process-wide singleton, so two
    fixtures can run side by side with different settings files.

    Usage:
        >>> config = ConfigLoader("config/fixture.yaml")
        >>> config.get("browser.timeout_ms", 30000)
        30000
        >>> config.get_section("fixture")["default_company"]
        'SAMINC'
    """

    def __init__(self, config_path: Optional[Union[str, Path]] = None) -> None:
        """
        Args:
            config_path: YAML settings file; DEFAULT_CONFIG_PATH when omitted.
                A file that does not exist leaves only environment overrides
                and the defaults passed to `get()`.

        Raises:
            ConfigurationError: The file is not valid YAML or not a mapping
        """
        self._config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
        self._config: Dict[str, Any] = {}
        self._load_config()

    @property
    def config_path(self) -> Path:
        return self._config_path

    def _load_config(self) -> None:
        if not self._config_path.is_file():
            logger.warning(
                f"Settings file not found: {self._config_path}; "
                f"only environment overrides and defaults apply."
            )
            self._config = {}
            return

        try:
            loaded = yaml.safe_load(self._config_path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in settings file {self._config_path}: {e}"
            ) from e

        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise ConfigurationError(
                f"Settings file {self._config_path} must contain a mapping at its top level."
            )

        self._config = loaded
        logger.debug(f"Loaded settings from: {self._config_path}")

    def _lookup(self, key: str) -> Any:
        node: Any = self._config
        for part in key.split("."):
            if not isinstance(node, dict) or node.get(part) is None:
                return _MISSING
            node = node[part]
        return node

    def get(self, key: str, default: Any = None) -> Any:
        """
        Resolve a dotted key: environment variable, then file, then `default`.

        Args:
            key: Dotted path such as "fixture.base_url"
            default: Returned when neither source has the key; its type also
                drives coercion of environment values
        """
        raw = os.environ.get(env_name(key))
        if raw is not None:
            return raw if default is None else _coerce(raw, default)

        value = self._lookup(key)
        return default if value is _MISSING else value

    def get_section(self, section: str) -> Dict[str, Any]:
        """Top-level mapping from the file (environment overrides not applied)."""
        value = self._config.get(section)
        return dict(value) if isinstance(value, dict) else {}

    def reload(self) -> None:
        """Re-read the settings file."""
        self._load_config()
        logger.info(f"Settings reloaded from: {self._config_path}")


__all__ = [
    "ConfigLoader",
    "DEFAULT_CONFIG_PATH",
    "env_name",
]
