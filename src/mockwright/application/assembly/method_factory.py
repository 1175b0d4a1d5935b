"""Builds the intercepting functions placed on generated classes."""

from __future__ import annotations

import inspect
from typing import TYPE_CHECKING

from mockwright.application.assembly.marker import MockObject
from mockwright.application.invocation.dispatcher import (
    InterceptedMethod,
    dispatch,
    dispatch_async,
)
from mockwright.domain.model.enums import DispatchKind

if TYPE_CHECKING:
    from collections.abc import Callable

    from mockwright.application.invocation.dispatcher import MockClassRef
    from mockwright.domain.model.method_signature import MethodSignature

_RECEIVER_NAMES = {DispatchKind.INSTANCE: "self", DispatchKind.CLASS: "cls"}
_STRING_CONVERSIONS = frozenset({"__str__", "__repr__"})


def _is_dunder(name: object) -> bool:
    return isinstance(name, str) and name.startswith("__") and name.endswith("__")


def _public_signature(signature: MethodSignature, binder: inspect.Signature) -> inspect.Signature:
    """Signature as seen on the class: receiver first for instance/class methods."""
    receiver = _RECEIVER_NAMES.get(signature.dispatch)
    if receiver is None:
        return binder
    while receiver in binder.parameters:
        receiver = f"_{receiver}"
    first = inspect.Parameter(receiver, inspect.Parameter.POSITIONAL_ONLY)
    return binder.replace(parameters=[first, *binder.parameters.values()])


def _instance_function(intercepted: InterceptedMethod) -> Callable[..., object]:
    if intercepted.signature.is_async:

        async def method(receiver: object, /, *args: object, **kwargs: object) -> object:
            return await dispatch_async(intercepted, receiver, args, kwargs)

    elif intercepted.signature.name == "__getattr__":

        def method(receiver: object, /, *args: object, **kwargs: object) -> object:
            # dunder lookups (copy, pickle, pytest introspection) must fail normally
            if args and _is_dunder(args[0]):
                raise AttributeError(args[0])
            return dispatch(intercepted, receiver, args, kwargs)

    elif intercepted.signature.name in _STRING_CONVERSIONS:

        def method(receiver: object, /, *args: object, **kwargs: object) -> object:
            # detached mocks have no stubs but must stay printable
            if getattr(receiver, "_mock_info", None) is None:
                return MockObject.__repr__(receiver)  # type: ignore[arg-type]
            return dispatch(intercepted, receiver, args, kwargs)

    else:

        def method(receiver: object, /, *args: object, **kwargs: object) -> object:
            return dispatch(intercepted, receiver, args, kwargs)

    return method


def _static_function(intercepted: InterceptedMethod) -> Callable[..., object]:
    owner = intercepted.owner
    if intercepted.signature.is_async:

        async def method(*args: object, **kwargs: object) -> object:
            return await dispatch_async(intercepted, owner.get(), args, kwargs)

    else:

        def method(*args: object, **kwargs: object) -> object:
            return dispatch(intercepted, owner.get(), args, kwargs)

    return method


def build_method(signature: MethodSignature, owner: MockClassRef, class_name: str) -> object:
    """Intercepting class attribute for one surface method.

    Returns:
        Function, staticmethod or classmethod object
    """
    binder = signature.to_signature()
    intercepted = InterceptedMethod(signature, binder, owner)

    if signature.dispatch is DispatchKind.STATIC:
        func = _static_function(intercepted)
    else:
        # classmethods receive the class as receiver
        func = _instance_function(intercepted)

    func.__name__ = signature.name
    func.__qualname__ = f"{class_name}.{signature.name}"
    func.__doc__ = signature.doc
    func.__signature__ = _public_signature(signature, binder)  # type: ignore[attr-defined]

    if signature.dispatch is DispatchKind.STATIC:
        return staticmethod(func)
    if signature.dispatch is DispatchKind.CLASS:
        return classmethod(func)
    return func


def build_constructor(
    owner: MockClassRef, class_name: str, *, real_constructor: bool
) -> Callable[..., None]:
    """Constructor override.

    Runs the real constructor only with arguments stored on the instance by
    the instance builder, then clears them. Its own arguments are ignored.
    """

    def __init__(self: object, /, *args: object, **kwargs: object) -> None:
        stored = getattr(self, "_mock_constructor_args", None)
        if stored is None:
            return
        object.__setattr__(self, "_mock_constructor_args", None)
        if real_constructor:
            super(owner.get(), self).__init__(*stored.args, **stored.kwargs)  # type: ignore[misc]

    __init__.__qualname__ = f"{class_name}.__init__"
    return __init__
