"""
Repository-level pytest configuration.

Sets environment defaults for local runs (existing values win) and routes
loguru output through the project's logger setup.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Generator

import pytest

from webfixture.common import init_logger


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent


@pytest.fixture(scope="session", autouse=True)
def _env_defaults() -> Generator[None, None, None]:
    """
    Set environment defaults if not already provided by the user/CI.

    Browser tests stay off unless explicitly requested.
    """
    defaults = {
        "RUN_UI_TESTS": "0",
        "LOGGING_LEVEL": "DEBUG",
    }

    for k, v in defaults.items():
        os.environ.setdefault(k, v)

    init_logger(level=os.environ["LOGGING_LEVEL"])
    yield
