"""pytest plugin for mockwright.

Provides fixtures:
    mockwright: Default Facade, static mock state reset after each test
    mockwright_config: Configuration read from ini options

Configuration (pytest.ini or pyproject.toml):
    mockwright_default_answer: "smart" (default) or "none"
    mockwright_suppress_warnings_for: Qualified target names (one per line)
        whose mock classes are assembled with warnings ignored
"""

from __future__ import annotations

from typing import TYPE_CHECKING

# Register fixtures from fixtures module
from mockwright.presentation.api.dsl import set_facade
from mockwright.presentation.api.facade import Facade
from mockwright.presentation.pytest_plugin.fixtures import (
    config_from_ini,
    mockwright,
    mockwright_config,
)

if TYPE_CHECKING:
    import pytest

# Export fixtures for pytest discovery
__all__ = [
    "mockwright",
    "mockwright_config",
]


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register ini options."""
    parser.addini(
        "mockwright_default_answer",
        "Answer for unstubbed calls: smart or none",
        default="smart",
    )
    parser.addini(
        "mockwright_suppress_warnings_for",
        "Qualified target names assembled with warnings ignored",
        type="linelist",
        default=[],
    )


def pytest_configure(config: pytest.Config) -> None:
    """Install a default facade configured from ini options."""
    set_facade(Facade(config_from_ini(config)))
