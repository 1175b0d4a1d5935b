"""MockInfo construction with its handler chain."""

from __future__ import annotations

from typing import TYPE_CHECKING

from mockwright.application.invocation.handlers import (
    CallRecorderHandler,
    CompositeHandler,
    FrozenObjectCheck,
    MagicCallRecorder,
    StubCaller,
)
from mockwright.application.mock.info import MockInfo

if TYPE_CHECKING:
    from collections.abc import Iterable

    from mockwright.application.recording.recorder import CallRecorder
    from mockwright.application.stubbing.stub_mapper import StubMapper
    from mockwright.domain.ports.answer import AnswerProtocol


def create_mock_info(
    name: str,
    recorder: CallRecorder,
    mapper: StubMapper,
    default_answer: AnswerProtocol,
    dynamic_dispatch_methods: Iterable[str],
) -> MockInfo:
    """Build MockInfo wired to the fixed handler chain.

    Chain order: freeze gate -> recorder -> dynamic-channel recorder -> stubs.
    A frozen mock therefore never records.
    """
    info = MockInfo(name, recorder, mapper, default_answer)
    info.set_handler_chain(
        CompositeHandler(
            (
                FrozenObjectCheck(info),
                CallRecorderHandler(recorder, name),
                MagicCallRecorder(recorder, name, frozenset(dynamic_dispatch_methods)),
                StubCaller(mapper, default_answer),
            )
        )
    )
    return info
