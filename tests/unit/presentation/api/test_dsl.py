"""Tests for presentation/api/dsl.py.

End-to-end usage through the module-level DSL.
"""

import asyncio

import pytest

from mockwright import (
    FrozenMockError,
    InvalidAnswerError,
    NeverReturnInvokedError,
    NoParentImplementationError,
    NotAMockError,
    Ref,
    VerificationError,
    any_parameters,
    anything,
    calls,
    dynamic_calls,
    equal_to,
    get_info,
    mock,
    mock_class,
    partial_mock,
    reset,
    reset_static_info,
    verify,
    verify_method,
    verify_no_further_interaction,
    verify_no_interaction,
    verify_static,
    when,
    when_method,
    when_static,
)
from mockwright.presentation.api.dsl import get_facade, set_facade
from mockwright.presentation.api.facade import Facade
from tests.fixtures_targets import (
    Calculator,
    Countable,
    Dispatcher,
    Items,
    Service,
)


@pytest.fixture(autouse=True)
def fresh_facade():
    """Isolated default facade per test."""
    previous = get_facade()
    set_facade(Facade())
    yield
    set_facade(previous)


class TestStubbing:
    """when(...).method(...).then_*()."""

    def test_stub_by_arguments(self) -> None:
        calculator = mock(Calculator, Countable)
        when(calculator).add(1, 2).then_return(42)

        assert calculator.add(1, 2) == 42
        assert calculator.add(3, 4) == 0
        assert calculator.count() == 0

    def test_last_registered_stub_wins(self) -> None:
        calculator = mock(Calculator)
        when(calculator).add(anything(), anything()).then_return(1)
        when(calculator).add(1, anything()).then_return(2)

        assert calculator.add(1, 5) == 2
        assert calculator.add(7, 5) == 1

    def test_answer_sequence_repeats_last(self) -> None:
        calculator = mock(Calculator)
        when(calculator).add(1, 2).then_return(1, 2).then_return(3)

        assert [calculator.add(1, 2) for _ in range(5)] == [1, 2, 3, 3, 3]

    def test_keyword_and_positional_match_alike(self) -> None:
        calculator = mock(Calculator)
        when(calculator).add(1, y=2).then_return(9)
        assert calculator.add(1, 2) == 9

    def test_any_parameters(self) -> None:
        calculator = mock(Calculator)
        when(calculator).total(any_parameters()).then_return(5)
        assert calculator.total() == 5
        assert calculator.total(1, 2, scale=3, mode="x") == 5

    def test_equal_to(self) -> None:
        calculator = mock(Calculator)
        when(calculator).label().then_return("x")
        when(calculator).add(equal_to(1), 2).then_return(3)
        assert calculator.add(1, 2) == 3

    def test_then_raise(self) -> None:
        calculator = mock(Calculator)
        when(calculator).add(1, 2).then_raise(ValueError("boom"))
        with pytest.raises(ValueError, match="boom"):
            calculator.add(1, 2)

    def test_then_raise_rejects_non_exception(self) -> None:
        calculator = mock(Calculator)
        with pytest.raises(InvalidAnswerError):
            when(calculator).add(1, 2).then_raise("boom")

    def test_then_call(self) -> None:
        calculator = mock(Calculator)
        when(calculator).add(anything(), anything()).then_call(lambda x, y: x * y)
        assert calculator.add(3, 4) == 12

    def test_then_call_parent(self) -> None:
        calculator = mock(Calculator)
        when(calculator).label().then_call_parent()
        assert calculator.label() == "calculator"

    def test_then_do_nothing(self) -> None:
        calculator = mock(Calculator)
        when(calculator).add(1, 2).then_return(5).then_do_nothing()
        assert calculator.add(1, 2) == 5
        assert calculator.add(1, 2) is None

    def test_void_method_discards_stub(self) -> None:
        calculator = mock(Calculator)
        when(calculator).reset().then_return(5)
        assert calculator.reset() is None

    def test_unknown_method(self) -> None:
        calculator = mock(Calculator)
        with pytest.raises(AttributeError, match="no method 'missing'"):
            when(calculator).missing()

    def test_arguments_checked_against_signature(self) -> None:
        calculator = mock(Calculator)
        with pytest.raises(TypeError):
            when(calculator).add(1, 2, 3)

    def test_protected_method(self) -> None:
        calculator = mock(Calculator)
        when(calculator)._helper().then_return(99)
        assert calculator._helper() == 99

    def test_dunder_through_when_method(self) -> None:
        items = mock(Items)
        when_method(items, "__next__").then_return(1, 2).then_raise(StopIteration)
        assert list(items) == [1, 2]

    def test_string_conversions(self) -> None:
        calculator = mock(Calculator)
        assert str(calculator) == "Mock for Calculator"
        assert repr(calculator) == "<Mock for Calculator>"
        when_method(calculator, "__repr__").then_return("custom")
        assert repr(calculator) == "custom"


class TestReturnContracts:
    """VOID, NEVER and Self."""

    def test_never_returning(self) -> None:
        calculator = mock(Calculator)
        with pytest.raises(NeverReturnInvokedError, match="fail"):
            calculator.fail("x")
        assert [c.method for c in calls(calculator)] == ["fail"]

    def test_never_returning_with_exception_stub(self) -> None:
        calculator = mock(Calculator)
        when(calculator).fail(anything()).then_raise(KeyError)
        with pytest.raises(KeyError):
            calculator.fail("x")

    def test_self_return_stub(self) -> None:
        calculator = mock(Calculator)
        when(calculator).clone().then_return(calculator)
        assert calculator.clone() is calculator


class TestReferences:
    """By-reference arguments."""

    def test_callback_writes_through_ref(self) -> None:
        calculator = mock(Calculator)
        when(calculator).swap(anything()).then_call(lambda target: target.set(7))

        cell = Ref(1)
        calculator.swap(cell)

        assert cell.value == 7
        assert calls(calculator)[0].arguments.args[0] is cell

    def test_matcher_compares_ref_value(self) -> None:
        calculator = mock(Calculator)
        when(calculator).swap(3).then_call(lambda target: target.set(0))
        cell = Ref(3)
        calculator.swap(cell)
        assert cell.value == 0


class TestStaticAndClassMethods:
    """Class-wide MockInfo."""

    def test_static_method(self) -> None:
        calculator = mock(Calculator)
        when_static(calculator).version().then_return("2.0")

        assert calculator.version() == "2.0"
        assert type(calculator).version() == "2.0"
        verify_static(calculator, 2).version()

    def test_class_method(self) -> None:
        cls = mock_class(Calculator)
        sentinel = object()
        when_static(cls).create(5).then_return(sentinel)
        assert cls.create(5) is sentinel

    def test_static_calls_not_on_instance_channel(self) -> None:
        calculator = mock(Calculator)
        calculator.version()
        assert calls(calculator) == ()

    def test_shared_between_instances(self) -> None:
        first, second = mock(Calculator), mock(Calculator)
        when_static(first).version().then_return("shared")
        assert second.version() == "shared"

    def test_reset_static_info(self) -> None:
        calculator = mock(Calculator)
        when_static(calculator).version().then_return("2.0")
        when(calculator).add(1, 2).then_return(3)

        reset_static_info()

        assert calculator.version() == ""
        assert calculator.add(1, 2) == 0


class TestAsync:
    """Coroutine methods."""

    def test_default(self) -> None:
        calculator = mock(Calculator)
        assert asyncio.run(calculator.fetch("k")) == ""

    def test_stub(self) -> None:
        calculator = mock(Calculator)
        when(calculator).fetch("k").then_return("v")
        assert asyncio.run(calculator.fetch("k")) == "v"

    def test_async_callback_awaited(self) -> None:
        async def load(key: str) -> str:
            return key.upper()

        calculator = mock(Calculator)
        when(calculator).fetch(anything()).then_call(load)
        assert asyncio.run(calculator.fetch("k")) == "K"

    def test_parent(self) -> None:
        calculator = partial_mock(Calculator)
        assert asyncio.run(calculator.fetch("k")) == "real k"


class TestPartialMock:
    """Real behaviour unless stubbed."""

    def test_real_unless_stubbed(self) -> None:
        calculator = partial_mock(Calculator, 1)
        when(calculator).label().then_return("stubbed")

        assert calculator.add(1, 2) == 4
        assert calculator.label() == "stubbed"

    def test_abstract_method_has_no_parent(self) -> None:
        calculator = mock(Calculator, Countable)
        when(calculator).count().then_call_parent()
        with pytest.raises(NoParentImplementationError):
            calculator.count()

    def test_real_static_method(self) -> None:
        service = partial_mock(Service, "svc")
        when_static(service).kind().then_call_parent()
        assert service.kind() == "service"


class TestDynamicDispatch:
    """Name-based dispatch channel."""

    def test_getattr_recorded_by_dynamic_name(self) -> None:
        dispatcher = mock(Dispatcher)
        dispatcher.__getattr__("ping")
        assert [c.method for c in calls(dispatcher)] == ["__getattr__"]
        assert [c.method for c in dynamic_calls(dispatcher)] == ["ping"]

    def test_attribute_access_goes_through_getattr(self) -> None:
        dispatcher = mock(Dispatcher)
        when_method(dispatcher, "__getattr__", "ping").then_return("pong")
        assert dispatcher.ping == "pong"
        assert [c.method for c in dynamic_calls(dispatcher)] == ["ping"]

    def test_dunder_lookup_fails_normally(self) -> None:
        dispatcher = mock(Dispatcher)
        with pytest.raises(AttributeError):
            dispatcher.__missing_dunder__  # noqa: B018
        assert dynamic_calls(dispatcher) == ()

    def test_dispatch_method_params(self) -> None:
        dispatcher = mock(Dispatcher)
        dispatcher._dispatch("ping", (1, 2))
        [call] = dynamic_calls(dispatcher)
        assert call.method == "ping"
        assert call.arguments.args == (1, 2)


class TestVerification:
    """verify(...) and friends."""

    def test_verify_once(self) -> None:
        calculator = mock(Calculator)
        calculator.add(1, 2)
        [call] = verify(calculator).add(1, 2)
        assert call.method == "add"

    def test_verify_times(self) -> None:
        calculator = mock(Calculator)
        calculator.add(1, 2)
        calculator.add(1, 2)
        verify(calculator, 2).add(1, anything())
        verify(calculator, 0).add(3, 4)

    def test_verify_at_least_once(self) -> None:
        calculator = mock(Calculator)
        calculator.add(1, 2)
        calculator.add(1, 2)
        assert len(verify(calculator, None).add(1, 2)) == 2

    def test_verify_failure_message(self) -> None:
        calculator = mock(Calculator)
        calculator.add(3, 4)
        with pytest.raises(VerificationError) as excinfo:
            verify(calculator).add(1, 2)

        message = str(excinfo.value)
        assert (
            "Expected Calculator->add(equal_to(1), equal_to(2)) to be called exactly <1> times, "
            "actually called <0> times." in message
        )
        assert "Other invocations (1)" in message
        assert "Calculator->add(3, 4)" in message

    def test_verify_at_least_once_failure(self) -> None:
        calculator = mock(Calculator)
        with pytest.raises(VerificationError, match="at least <1> time"):
            verify(calculator, None).add(1, 2)

    def test_negative_times(self) -> None:
        with pytest.raises(ValueError, match="times"):
            verify(mock(Calculator), -1)

    def test_verify_method(self) -> None:
        calculator = mock(Calculator)
        calculator.scaled(1, shift=3)
        verify_method(calculator, "scaled", 1, shift=3)
        with pytest.raises(VerificationError):
            verify_method(calculator, "scaled", 1, 0, 3)

    def test_verify_no_interaction(self) -> None:
        calculator = mock(Calculator)
        verify_no_interaction(calculator)
        calculator.label()
        with pytest.raises(VerificationError, match="Expected no interaction with Calculator"):
            verify_no_interaction(calculator)

    def test_verify_no_further_interaction_freezes(self) -> None:
        calculator = mock(Calculator)
        calculator.add(1, 2)
        verify_no_further_interaction(calculator)

        with pytest.raises(FrozenMockError):
            calculator.add(1, 2)
        assert len(calls(calculator)) == 1

        reset(calculator)
        assert calculator.add(1, 2) == 0


class TestInspection:
    """reset, calls, get_info and mock checks."""

    def test_reset(self) -> None:
        calculator = mock(Calculator)
        when(calculator).add(1, 2).then_return(3)
        calculator.add(1, 2)

        reset(calculator)

        assert calls(calculator) == ()
        assert calculator.add(1, 2) == 0

    def test_get_info(self) -> None:
        calculator = mock(Calculator)
        assert get_info(calculator).name == "Calculator"

    def test_not_a_mock(self) -> None:
        with pytest.raises(NotAMockError, match="Calculator"):
            when(Calculator())
        with pytest.raises(NotAMockError):
            verify_static(Calculator)
        with pytest.raises(NotAMockError):
            calls(object())

    def test_detached_instance_not_a_mock(self) -> None:
        with pytest.raises(NotAMockError):
            when(mock_class(Calculator)())
