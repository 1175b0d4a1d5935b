"""Tests for domain/exceptions.py."""

import pytest

from mockwright.domain.exceptions import (
    FrozenMockError,
    InvalidAnswerError,
    InvalidTargetError,
    MockwrightError,
    MultipleBaseTypesError,
    NeverReturnInvokedError,
    NoParentImplementationError,
    NotAMockError,
    UnsupportedTypeConstraintError,
    VerificationError,
)


class TestHierarchy:
    """Every error is a MockwrightError and the matching builtin."""

    @pytest.mark.parametrize(
        ("error", "builtin"),
        [
            (InvalidTargetError("pkg.A", "final"), TypeError),
            (MultipleBaseTypesError("pkg.A", "pkg.B"), TypeError),
            (UnsupportedTypeConstraintError("pkg.A.run", 42), TypeError),
            (FrozenMockError("A", "run"), RuntimeError),
            (NeverReturnInvokedError("pkg.A.stop"), RuntimeError),
            (NoParentImplementationError("pkg.A.run"), TypeError),
            (InvalidAnswerError(expected="callable", got=int), TypeError),
            (NotAMockError(int), TypeError),
            (VerificationError("expected", "history"), AssertionError),
        ],
    )
    def test_builtin_base(self, error: MockwrightError, builtin: type[Exception]) -> None:
        assert isinstance(error, MockwrightError)
        assert isinstance(error, builtin)

    def test_catch_all(self) -> None:
        with pytest.raises(MockwrightError):
            raise FrozenMockError("A", "run")


class TestMessages:
    """Messages are built from stored attributes."""

    def test_invalid_target(self) -> None:
        err = InvalidTargetError("pkg.A", "final classes cannot be mocked")
        assert err.target == "pkg.A"
        assert err.reason == "final classes cannot be mocked"
        assert str(err) == "Cannot mock 'pkg.A': final classes cannot be mocked"

    def test_multiple_base_types(self) -> None:
        err = MultipleBaseTypesError("pkg.A", "pkg.B")
        assert (err.first, err.second) == ("pkg.A", "pkg.B")
        assert "pkg.A, pkg.B" in str(err)

    def test_unsupported_type_constraint(self) -> None:
        err = UnsupportedTypeConstraintError("pkg.A.run", 42)
        assert err.annotation == 42
        assert str(err) == "pkg.A.run: unsupported type constraint 42"

    def test_frozen_mock(self) -> None:
        err = FrozenMockError("Calculator", "add")
        assert str(err) == "Received unexpected call add() on frozen mock of Calculator"

    def test_never_return(self) -> None:
        assert "pkg.A.stop()" in str(NeverReturnInvokedError("pkg.A.stop"))

    def test_invalid_answer(self) -> None:
        err = InvalidAnswerError(expected="callback must be callable", got=int)
        assert str(err) == "callback must be callable, got int"

    def test_not_a_mock(self) -> None:
        assert str(NotAMockError(str)) == "expected a mockwright mock, got str"

    def test_verification(self) -> None:
        err = VerificationError("Expected A->run()", "Other invocations: none")
        assert str(err) == "Expected A->run()\nOther invocations: none"
        assert err.expectation == "Expected A->run()"
