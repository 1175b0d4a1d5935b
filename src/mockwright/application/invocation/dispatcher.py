"""Generic dispatcher behind every synthesized method.

Per call: capture arguments -> resolve MockInfo -> handler chain ->
answer callback (or real parent implementation) -> process_answer ->
return contract.
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import TYPE_CHECKING

from mockwright.application.invocation.arguments import capture_arguments
from mockwright.application.stubbing.answers import NoAnswer, ParentDelegateCallback
from mockwright.domain.exceptions import NeverReturnInvokedError, NoParentImplementationError
from mockwright.domain.model.enums import ReturnKind

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from mockwright.application.mock.info import MockInfo
    from mockwright.domain.model.method_signature import MethodSignature
    from mockwright.domain.ports.answer import AnswerProtocol

_NO_ANSWER = NoAnswer()


class MockClassRef:
    """Late-bound reference to the generated class.

    Methods are built before the class exists; the assembler fills ``cls``.
    """

    __slots__ = ("cls",)

    def __init__(self) -> None:
        self.cls: type | None = None

    def get(self) -> type:
        if self.cls is None:
            raise RuntimeError("mock class is not assembled yet")
        return self.cls


@dataclass(frozen=True, slots=True)
class InterceptedMethod:
    """Everything the dispatcher needs about one synthesized method.

    Attributes:
        signature: Method signature on the surface
        binder: inspect.Signature used to bind call arguments (receiver excluded)
        owner: Reference to the generated class (for parent delegation)
    """

    signature: MethodSignature
    binder: inspect.Signature
    owner: MockClassRef


def apply_return_contract(signature: MethodSignature, result: object) -> object:
    """NEVER raises, VOID discards the value, VALUE passes it through.

    Raises:
        NeverReturnInvokedError: If the method is declared to never return
    """
    if signature.returns.kind is ReturnKind.NEVER:
        raise NeverReturnInvokedError(signature.qualified_name)
    if signature.returns.kind is ReturnKind.VOID:
        return None
    return result


def _info_for(context: object, signature: MethodSignature) -> MockInfo | None:
    if signature.is_static:
        mock_class = context if isinstance(context, type) else type(context)
        return getattr(mock_class, "_mock_static_info", None)
    return getattr(context, "_mock_info", None)


def _resolve(
    intercepted: InterceptedMethod,
    context: object,
    args: tuple[object, ...],
    kwargs: Mapping[str, object],
) -> tuple[AnswerProtocol, Callable[..., object]] | None:
    """Run the handler chain. None when no MockInfo is attached."""
    signature = intercepted.signature
    arguments = capture_arguments(intercepted.binder, args, kwargs)

    info = _info_for(context, signature)
    if info is None:
        return None

    answer = info.handler_chain.invoke(context, signature.name, arguments)
    if answer is None:
        answer = _NO_ANSWER
    return answer, answer.get_answer_callback(context, signature.name)


def _call(
    intercepted: InterceptedMethod,
    context: object,
    callback: Callable[..., object],
    args: tuple[object, ...],
    kwargs: Mapping[str, object],
) -> object:
    if not isinstance(callback, ParentDelegateCallback):
        return callback(*args, **kwargs)

    signature = intercepted.signature
    if not signature.delegable:
        raise NoParentImplementationError(signature.qualified_name)
    parent = getattr(super(intercepted.owner.get(), context), signature.name)  # type: ignore[arg-type]
    return parent(*args, **kwargs)


def dispatch(
    intercepted: InterceptedMethod,
    context: object,
    args: tuple[object, ...],
    kwargs: Mapping[str, object],
) -> object:
    """Handle one synchronous call.

    Args:
        intercepted: Called method
        context: Mock instance, or mock class for static/class methods
        args: Positional arguments (receiver excluded)
        kwargs: Keyword arguments

    Returns:
        Value after the return contract

    Raises:
        TypeError: If the arguments do not fit the signature
        FrozenMockError: If the mock is frozen
        NeverReturnInvokedError: If the method never returns
        NoParentImplementationError: If delegating without a real implementation
    """
    resolved = _resolve(intercepted, context, args, kwargs)
    if resolved is None:
        return apply_return_contract(intercepted.signature, None)

    answer, callback = resolved
    result = _call(intercepted, context, callback, args, kwargs)
    answer.process_answer(result)
    return apply_return_contract(intercepted.signature, result)


async def dispatch_async(
    intercepted: InterceptedMethod,
    context: object,
    args: tuple[object, ...],
    kwargs: Mapping[str, object],
) -> object:
    """Handle one call of an async method. Awaitable results are awaited."""
    resolved = _resolve(intercepted, context, args, kwargs)
    if resolved is None:
        return apply_return_contract(intercepted.signature, None)

    answer, callback = resolved
    result = _call(intercepted, context, callback, args, kwargs)
    if inspect.isawaitable(result):
        result = await result
    answer.process_answer(result)
    return apply_return_contract(intercepted.signature, result)
