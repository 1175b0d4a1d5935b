"""Stubbing and verification DSL.

Operates on a process-wide default facade (replaceable with set_facade()).

Example:
    calculator = mock(Calculator)
    when(calculator).add(1, anything()).then_return(3, 4)

    assert calculator.add(1, 2) == 3
    verify(calculator).add(1, 2)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from mockwright.application.reporters.call_history import CallHistoryReporter
from mockwright.application.stubbing.answers import (
    AnswerCollection,
    ExceptionAnswer,
    LambdaAnswer,
    NoAnswer,
    ParentDelegate,
    StaticAnswer,
)
from mockwright.application.stubbing.matchers import ANY_PARAMETERS, ANYTHING, EqualTo
from mockwright.domain.exceptions import VerificationError
from mockwright.presentation.api._helpers import build_matcher, instance_info, static_info, surface_of
from mockwright.presentation.api.facade import Facade

if TYPE_CHECKING:
    from collections.abc import Callable

    from mockwright.application.mock.info import MockInfo
    from mockwright.application.stubbing.matchers import AnyParameters, Anything, MethodMatcher
    from mockwright.domain.model.recorded_call import CallArguments, RecordedCall
    from mockwright.domain.model.surface import SynthesizedSurface
    from mockwright.domain.ports.answer import AnswerProtocol

_facade: Facade | None = None


def get_facade() -> Facade:
    """Default facade, created on first use."""
    global _facade
    if _facade is None:
        _facade = Facade()
    return _facade


def set_facade(facade: Facade) -> None:
    """Replace the default facade (pytest plugin applies ini configuration)."""
    global _facade
    _facade = facade


# --- mock creation ---


def mock(
    *targets: type | str,
    default_answer: AnswerProtocol | None = None,
    constructor_args: CallArguments | None = None,
) -> object:
    """Mock implementing every target. See Facade.mock()."""
    return get_facade().mock(
        *targets, default_answer=default_answer, constructor_args=constructor_args
    )


def partial_mock(target: type | str, *args: object, **kwargs: object) -> object:
    """Mock running the real constructor and real methods unless stubbed."""
    return get_facade().partial_mock(target, *args, **kwargs)


def mock_class(*targets: type | str) -> type:
    """Generated class for the target set."""
    return get_facade().mock_class(*targets)


def reset_static_info() -> None:
    get_facade().reset_static_info()


# --- stubbing ---


class PendingStub:
    """Stub under construction.

    Registered on the first then_*() call; further then_*() calls append
    to the same answer sequence. The last answer repeats.
    """

    __slots__ = ("_answers", "_info", "_matcher")

    def __init__(self, info: MockInfo, matcher: MethodMatcher) -> None:
        self._info = info
        self._matcher = matcher
        self._answers: AnswerCollection | None = None

    def then_answer(self, answer: AnswerProtocol) -> PendingStub:
        if self._answers is None:
            self._answers = AnswerCollection(answer)
            self._info.stub_mapper.map_stub_to_matcher(self._answers, self._matcher)
        else:
            self._answers.add_answer(answer)
        return self

    def then_return(self, *values: object) -> PendingStub:
        """Return each value in turn (None if no value is given)."""
        for value in values or (None,):
            self.then_answer(StaticAnswer(value))
        return self

    def then_raise(self, exception: BaseException | type[BaseException]) -> PendingStub:
        return self.then_answer(ExceptionAnswer(exception))

    def then_call(self, callback: Callable[..., object]) -> PendingStub:
        """Call ``callback`` with the call's arguments and return its result."""
        return self.then_answer(LambdaAnswer(callback))

    def then_call_parent(self) -> PendingStub:
        return self.then_answer(ParentDelegate())

    def then_do_nothing(self) -> PendingStub:
        return self.then_answer(NoAnswer())

    def __repr__(self) -> str:
        return f"PendingStub({self._info.name}->{self._matcher})"


class StubBuilder:
    """when(mock).method(*args) -> PendingStub."""

    __slots__ = ("_info", "_surface")

    def __init__(self, info: MockInfo, surface: SynthesizedSurface) -> None:
        self._info = info
        self._surface = surface

    def method(self, name: str, *args: object, **kwargs: object) -> PendingStub:
        """Stub by method name (needed for dunder methods)."""
        return PendingStub(self._info, build_matcher(self._surface, name, args, kwargs))

    def __getattr__(self, name: str) -> Callable[..., PendingStub]:
        if name.startswith("__"):
            raise AttributeError(name)
        if self._surface.method(name) is None:
            raise AttributeError(f"mock for {self._surface.mocked_name} has no method {name!r}")
        return lambda *args, **kwargs: self.method(name, *args, **kwargs)


def when(mock: object) -> StubBuilder:
    """Stub instance methods of ``mock``.

    Raises:
        NotAMockError: If mock is not a generated mock
    """
    return StubBuilder(instance_info(mock), surface_of(mock))


def when_static(mock_or_class: object) -> StubBuilder:
    """Stub static and class methods of a mock class."""
    return StubBuilder(static_info(mock_or_class), surface_of(mock_or_class))


def when_method(mock: object, name: str, *args: object, **kwargs: object) -> PendingStub:
    """Stub ``mock.name(*args, **kwargs)``."""
    return when(mock).method(name, *args, **kwargs)


# --- verification ---


def _times_text(times: int) -> str:
    return f"exactly <{times}> times"


class Verifier:
    """verify(mock, times).method(*args) -> matching calls."""

    __slots__ = ("_info", "_reporter", "_surface", "_times")

    def __init__(
        self,
        info: MockInfo,
        surface: SynthesizedSurface,
        times: int | None,
        reporter: CallHistoryReporter | None = None,
    ) -> None:
        if times is not None and times < 0:
            raise ValueError(f"times must be >= 0, got {times}")
        self._info = info
        self._surface = surface
        self._times = times
        self._reporter = reporter or CallHistoryReporter()

    def method(self, name: str, *args: object, **kwargs: object) -> tuple[RecordedCall, ...]:
        """Verify calls to ``name`` by method name.

        Returns:
            Matching calls in call order

        Raises:
            VerificationError: If the number of matching calls is wrong
        """
        matcher = build_matcher(self._surface, name, args, kwargs)
        history = self._info.recorder.history()
        matched = tuple(c for c in history if matcher.matches(c.method, c.arguments))

        if self._times is None:
            if matched:
                return matched
            expected = "at least <1> time"
        elif len(matched) == self._times:
            return matched
        else:
            expected = _times_text(self._times)

        raise VerificationError(
            f"Expected {self._info.name}->{matcher} to be called {expected}, "
            f"actually called <{len(matched)}> times.",
            self._reporter.report(history, "Other invocations"),
        )

    def __getattr__(self, name: str) -> Callable[..., tuple[RecordedCall, ...]]:
        if name.startswith("__"):
            raise AttributeError(name)
        if self._surface.method(name) is None:
            raise AttributeError(f"mock for {self._surface.mocked_name} has no method {name!r}")
        return lambda *args, **kwargs: self.method(name, *args, **kwargs)


def verify(mock: object, times: int | None = 1) -> Verifier:
    """Verify instance calls of ``mock``.

    Args:
        mock: Generated mock
        times: Expected number of matching calls. None = at least once.
    """
    return Verifier(instance_info(mock), surface_of(mock), times)


def verify_static(mock_or_class: object, times: int | None = 1) -> Verifier:
    """Verify static and class method calls of a mock class."""
    return Verifier(static_info(mock_or_class), surface_of(mock_or_class), times)


def verify_method(
    mock: object, name: str, *args: object, times: int | None = 1, **kwargs: object
) -> tuple[RecordedCall, ...]:
    """Verify ``mock.name(*args, **kwargs)`` was called ``times`` times."""
    return verify(mock, times).method(name, *args, **kwargs)


def verify_no_interaction(mock: object) -> None:
    """No call was made on ``mock``.

    Raises:
        VerificationError: If any call was recorded
    """
    info = instance_info(mock)
    history = info.recorder.history()
    if history:
        raise VerificationError(
            f"Expected no interaction with {info.name}",
            CallHistoryReporter().report(history, "Invocations"),
        )


def verify_no_further_interaction(mock: object) -> None:
    """Freeze ``mock``: any later call raises FrozenMockError. reset() undoes it."""
    instance_info(mock).freeze()


# --- inspection ---


def reset(mock: object) -> None:
    """Forget calls and stubs of ``mock`` and unfreeze it."""
    instance_info(mock).reset_info()


def calls(mock: object) -> tuple[RecordedCall, ...]:
    return instance_info(mock).recorder.history()


def dynamic_calls(mock: object) -> tuple[RecordedCall, ...]:
    """Calls made through name-based dispatch methods, by dynamic name."""
    return instance_info(mock).recorder.dynamic_history()


def get_info(mock: object) -> MockInfo:
    return instance_info(mock)


# --- matchers ---


def anything() -> Anything:
    return ANYTHING


def any_parameters() -> AnyParameters:
    """Accept any argument list (pass as the only argument)."""
    return ANY_PARAMETERS


def equal_to(value: object) -> EqualTo:
    return EqualTo(value)
