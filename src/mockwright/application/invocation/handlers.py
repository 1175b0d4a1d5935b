"""Handler chain stages.

Every call runs FrozenObjectCheck -> CallRecorderHandler -> MagicCallRecorder
-> StubCaller through a CompositeHandler. Stages reject by raising and
resolve by returning an answer.
"""

from __future__ import annotations

import time
from collections.abc import Mapping
from typing import TYPE_CHECKING

from mockwright.application.recording.recorder import next_sequence
from mockwright.domain.exceptions import FrozenMockError
from mockwright.domain.model.recorded_call import CallArguments, RecordedCall

if TYPE_CHECKING:
    from collections.abc import Sequence

    from mockwright.application.mock.info import MockInfo
    from mockwright.application.recording.recorder import CallRecorder
    from mockwright.application.stubbing.stub_mapper import StubMapper
    from mockwright.domain.ports.answer import AnswerProtocol
    from mockwright.domain.ports.invocation_handler import InvocationHandlerProtocol


class FrozenObjectCheck:
    """Rejects every call while the mock is frozen."""

    __slots__ = ("_info",)

    def __init__(self, info: MockInfo) -> None:
        self._info = info

    def invoke(self, context: object, method: str, arguments: CallArguments) -> None:
        if self._info.is_frozen:
            raise FrozenMockError(self._info.name, method)


class CallRecorderHandler:
    """Appends the call to the regular channel."""

    __slots__ = ("_name", "_recorder")

    def __init__(self, recorder: CallRecorder, name: str) -> None:
        self._recorder = recorder
        self._name = name

    def invoke(self, context: object, method: str, arguments: CallArguments) -> None:
        self._recorder.record(
            RecordedCall(next_sequence(), self._name, method, arguments, time.monotonic_ns())
        )


def _dynamic_arguments(raw: object) -> CallArguments:
    if isinstance(raw, Mapping):
        return CallArguments((), raw)
    if isinstance(raw, (list, tuple)):
        return CallArguments(tuple(raw))
    return CallArguments((raw,))


class MagicCallRecorder:
    """Records name-based dispatch calls under the dynamic method name.

    For a dispatch method ``m(name, params=...)`` the dynamic channel gets
    ``name(*params)``; a mapping as params is recorded by key.
    """

    __slots__ = ("_methods", "_name", "_recorder")

    def __init__(self, recorder: CallRecorder, name: str, methods: frozenset[str]) -> None:
        self._recorder = recorder
        self._name = name
        self._methods = methods

    def invoke(self, context: object, method: str, arguments: CallArguments) -> None:
        if method not in self._methods or not arguments.args:
            return
        dynamic_name = arguments.args[0]
        if not isinstance(dynamic_name, str) or not dynamic_name:
            return

        params = _dynamic_arguments(arguments.args[1]) if len(arguments.args) > 1 else CallArguments()
        self._recorder.record_dynamic(
            RecordedCall(next_sequence(), self._name, dynamic_name, params, time.monotonic_ns())
        )


class StubCaller:
    """Resolves the call to the matching stub, else the default answer."""

    __slots__ = ("_default_answer", "_mapper")

    def __init__(self, mapper: StubMapper, default_answer: AnswerProtocol) -> None:
        self._mapper = mapper
        self._default_answer = default_answer

    def invoke(self, context: object, method: str, arguments: CallArguments) -> AnswerProtocol:
        answers = self._mapper.get_stub_by_call(method, arguments)
        return self._default_answer if answers is None else answers


class CompositeHandler:
    """Runs stages in order; the last answer produced wins."""

    __slots__ = ("_handlers",)

    def __init__(self, handlers: Sequence[InvocationHandlerProtocol]) -> None:
        self._handlers = tuple(handlers)

    @property
    def handlers(self) -> tuple[InvocationHandlerProtocol, ...]:
        return self._handlers

    def invoke(
        self, context: object, method: str, arguments: CallArguments
    ) -> AnswerProtocol | None:
        answer: AnswerProtocol | None = None
        for handler in self._handlers:
            result = handler.invoke(context, method, arguments)
            if result is not None:
                answer = result
        return answer
