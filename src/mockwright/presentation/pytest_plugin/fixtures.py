"""pytest fixtures for mockwright.

Every test using the ``mockwright`` fixture starts from clean static state
and leaves none behind.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from mockwright.domain.model.configuration import MockwrightConfig
from mockwright.domain.model.enums import DefaultAnswerMode
from mockwright.presentation.api.dsl import get_facade

if TYPE_CHECKING:
    from collections.abc import Iterator

    from mockwright.presentation.api.facade import Facade


def _get_ini_value(config: pytest.Config, name: str, default: str) -> str:
    """Get ini value from pytest config with fallback.

    Args:
        config: pytest Config object
        name: ini option name
        default: default value if not set

    Returns:
        String value of ini option
    """
    value = config.getini(name)
    if value:
        return str(value)
    return default


def config_from_ini(config: pytest.Config) -> MockwrightConfig:
    """Build MockwrightConfig from mockwright_* ini options.

    Raises:
        ValueError: If mockwright_default_answer is not 'smart' or 'none'
    """
    mode = _get_ini_value(config, "mockwright_default_answer", DefaultAnswerMode.SMART.value)
    suppressed = config.getini("mockwright_suppress_warnings_for") or []
    return MockwrightConfig(
        default_answer=DefaultAnswerMode(mode.strip().lower()),
        suppress_warnings_for=frozenset(str(s) for s in suppressed),
    )


@pytest.fixture(scope="session")
def mockwright_config(pytestconfig: pytest.Config) -> MockwrightConfig:
    """Configuration read from ini options.

    Returns:
        MockwrightConfig
    """
    return config_from_ini(pytestconfig)


@pytest.fixture
def mockwright() -> Iterator[Facade]:
    """Default facade; static mock state is reset after the test.

    Returns:
        Facade used by the module-level DSL
    """
    facade = get_facade()
    yield facade
    facade.reset_static_info()
