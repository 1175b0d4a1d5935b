"""Tests for domain/model/parameter.py and return_contract.py."""

import pytest

from mockwright.domain.model.enums import ParameterKind, ReturnKind
from mockwright.domain.model.parameter import NO_DEFAULT, Parameter
from mockwright.domain.model.return_contract import ReturnContract


class TestParameter:
    """Tests for Parameter value object."""

    def test_defaults(self) -> None:
        param = Parameter(name="x")
        assert param.kind is ParameterKind.POSITIONAL_OR_KEYWORD
        assert param.annotation is None
        assert param.nullable is True
        assert param.is_reference is False
        assert param.default is NO_DEFAULT
        assert param.has_default is False

    def test_none_is_a_real_default(self) -> None:
        param = Parameter(name="x", default=None)
        assert param.has_default is True

    def test_empty_name_raises(self) -> None:
        with pytest.raises(ValueError, match="must not be empty"):
            Parameter(name="")

    @pytest.mark.parametrize("kind", [ParameterKind.VAR_POSITIONAL, ParameterKind.VAR_KEYWORD])
    def test_variadic(self, kind: ParameterKind) -> None:
        assert Parameter(name="rest", kind=kind).is_variadic is True

    def test_variadic_with_default_raises(self) -> None:
        with pytest.raises(ValueError, match="variadic"):
            Parameter(name="args", kind=ParameterKind.VAR_POSITIONAL, default=())

    def test_frozen(self) -> None:
        param = Parameter(name="x")
        with pytest.raises(AttributeError):
            param.name = "y"  # type: ignore[misc]

    def test_no_default_repr(self) -> None:
        assert repr(NO_DEFAULT) == "NO_DEFAULT"


class TestReturnContract:
    """Tests for ReturnContract."""

    def test_value(self) -> None:
        contract = ReturnContract.value("int", nullable=False)
        assert contract.kind is ReturnKind.VALUE
        assert contract.annotation == "int"
        assert contract.nullable is False

    def test_void(self) -> None:
        assert ReturnContract.void().kind is ReturnKind.VOID

    def test_never_is_not_nullable(self) -> None:
        contract = ReturnContract.never()
        assert contract.kind is ReturnKind.NEVER
        assert contract.nullable is False

    def test_void_with_annotation_raises(self) -> None:
        with pytest.raises(ValueError, match="cannot carry annotation"):
            ReturnContract(ReturnKind.VOID, "int")
