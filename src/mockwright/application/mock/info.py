"""Mock info: per-mock state bundle and the registry of all infos."""

from __future__ import annotations

import logging
import weakref
from typing import TYPE_CHECKING

from mockwright.application.stubbing.answers import AnswerCollection, StaticAnswer
from mockwright.application.stubbing.matchers import ArgumentsMatcher, MethodMatcher

if TYPE_CHECKING:
    from collections.abc import Iterator

    from mockwright.application.recording.recorder import CallRecorder
    from mockwright.application.stubbing.stub_mapper import StubMapper
    from mockwright.domain.ports.answer import AnswerProtocol
    from mockwright.domain.ports.invocation_handler import InvocationHandlerProtocol

logger = logging.getLogger(__name__)


class MockInfo:
    """State of one mock instance, or the class-wide state of a mock class.

    Attributes:
        name: Name of the mocked target (used in recorded calls)
        recorder: Call log
        stub_mapper: Stub registry
        default_answer: Answer for calls no stub matches
        handler_chain: Composite handler run for every call
        is_frozen: Calls are rejected
    """

    __slots__ = (
        "_default_answer",
        "_frozen",
        "_handler_chain",
        "_name",
        "_recorder",
        "_stub_mapper",
        "__weakref__",
    )

    def __init__(
        self,
        name: str,
        recorder: CallRecorder,
        stub_mapper: StubMapper,
        default_answer: AnswerProtocol,
    ) -> None:
        self._name = name
        self._recorder = recorder
        self._stub_mapper = stub_mapper
        self._default_answer = default_answer
        self._frozen = False
        self._handler_chain: InvocationHandlerProtocol | None = None
        self.install_default_stubs()

    @property
    def name(self) -> str:
        return self._name

    @property
    def recorder(self) -> CallRecorder:
        return self._recorder

    @property
    def stub_mapper(self) -> StubMapper:
        return self._stub_mapper

    @property
    def default_answer(self) -> AnswerProtocol:
        return self._default_answer

    @property
    def handler_chain(self) -> InvocationHandlerProtocol:
        if self._handler_chain is None:
            raise RuntimeError(f"handler chain of mock for {self._name} is not set")
        return self._handler_chain

    def set_handler_chain(self, chain: InvocationHandlerProtocol) -> None:
        self._handler_chain = chain

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        self._frozen = True

    def thaw(self) -> None:
        self._frozen = False

    def install_default_stubs(self) -> None:
        """String conversions describe the mock instead of the default answer."""
        no_args = ArgumentsMatcher()
        self._stub_mapper.map_stub_to_matcher(
            AnswerCollection(StaticAnswer(f"Mock for {self._name}")),
            MethodMatcher("__str__", no_args),
        )
        self._stub_mapper.map_stub_to_matcher(
            AnswerCollection(StaticAnswer(f"<Mock for {self._name}>")),
            MethodMatcher("__repr__", no_args),
        )

    def reset_info(self) -> None:
        """Forget calls and stubs, thaw, reinstall default stubs."""
        self._recorder.clear()
        self._stub_mapper.remove_all_answers()
        self._frozen = False
        self.install_default_stubs()

    def __repr__(self) -> str:
        state = "frozen" if self._frozen else "active"
        return f"MockInfo({self._name!r}, calls={len(self._recorder)}, {state})"


class InfoRegistry:
    """Weak set of live MockInfos.

    Infos die with their mock (instance infos) or class (static infos).
    """

    __slots__ = ("_infos",)

    def __init__(self) -> None:
        self._infos: weakref.WeakSet[MockInfo] = weakref.WeakSet()

    def add_info(self, info: MockInfo) -> None:
        self._infos.add(info)

    def reset_all(self) -> None:
        infos = list(self._infos)
        for info in infos:
            info.reset_info()
        logger.debug("reset %d mock infos", len(infos))

    def __iter__(self) -> Iterator[MockInfo]:
        return iter(list(self._infos))

    def __len__(self) -> int:
        return len(self._infos)
