"""Tests for presentation/pytest_plugin."""

import pytest

from mockwright.domain.model.configuration import MockwrightConfig
from mockwright.domain.model.enums import DefaultAnswerMode
from mockwright.presentation.api.dsl import get_facade
from mockwright.presentation.api.facade import Facade
from mockwright.presentation.pytest_plugin.fixtures import _get_ini_value, config_from_ini


class FakeConfig:
    """Stand-in for pytest.Config exposing getini()."""

    def __init__(self, **ini: object) -> None:
        self._ini = ini

    def getini(self, name: str) -> object:
        return self._ini.get(name, "")


class TestGetIniValue:
    """Ini lookup with fallback."""

    def test_set(self) -> None:
        assert _get_ini_value(FakeConfig(option="x"), "option", "d") == "x"

    def test_unset_uses_default(self) -> None:
        assert _get_ini_value(FakeConfig(), "option", "d") == "d"


class TestConfigFromIni:
    """mockwright_* ini options -> MockwrightConfig."""

    def test_defaults(self) -> None:
        assert config_from_ini(FakeConfig()) == MockwrightConfig()

    def test_default_answer(self) -> None:
        config = config_from_ini(FakeConfig(mockwright_default_answer=" None "))
        assert config.default_answer is DefaultAnswerMode.NONE

    def test_invalid_default_answer(self) -> None:
        with pytest.raises(ValueError):
            config_from_ini(FakeConfig(mockwright_default_answer="loud"))

    def test_suppress_warnings_for(self) -> None:
        config = config_from_ini(
            FakeConfig(mockwright_suppress_warnings_for=["pkg.mod.Legacy", "pkg.mod.Old"])
        )
        assert config.suppress_warnings_for == frozenset({"pkg.mod.Legacy", "pkg.mod.Old"})


class TestFixtures:
    """Fixtures registered through the plugin entry point."""

    def test_mockwright_config_from_project_ini(self, mockwright_config: MockwrightConfig) -> None:
        assert mockwright_config.default_answer is DefaultAnswerMode.SMART

    def test_mockwright_is_default_facade(self, mockwright: Facade) -> None:
        assert mockwright is get_facade()
