"""Invocation pipeline: argument capture, handler chain, dispatcher."""

from mockwright.application.invocation.arguments import capture_arguments
from mockwright.application.invocation.dispatcher import (
    InterceptedMethod,
    MockClassRef,
    apply_return_contract,
    dispatch,
    dispatch_async,
)
from mockwright.application.invocation.handlers import (
    CallRecorderHandler,
    CompositeHandler,
    FrozenObjectCheck,
    MagicCallRecorder,
    StubCaller,
)

__all__ = [
    "CallRecorderHandler",
    "CompositeHandler",
    "FrozenObjectCheck",
    "InterceptedMethod",
    "MagicCallRecorder",
    "MockClassRef",
    "StubCaller",
    "apply_return_contract",
    "capture_arguments",
    "dispatch",
    "dispatch_async",
]
