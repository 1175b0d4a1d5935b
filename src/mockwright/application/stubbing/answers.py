"""Answers: how a resolved call produces its value.

Every answer hands out a callback for one call and sees the produced
value afterwards (process_answer). AnswerCollection chains answers into
a sequence with an answer cursor.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from mockwright.domain.exceptions import InvalidAnswerError
from mockwright.domain.model.enums import ReturnKind

if TYPE_CHECKING:
    from collections.abc import Callable

    from mockwright.domain.model.method_signature import MethodSignature
    from mockwright.domain.ports.answer import AnswerProtocol


class ParentDelegateCallback:
    """Marker callback: run the real ancestor implementation instead.

    The dispatcher never calls it; it detects the marker and calls the
    parent method with the same arguments.
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return "<parent delegate>"


PARENT_DELEGATE = ParentDelegateCallback()


def _return_none(*args: object, **kwargs: object) -> None:
    return None


class _ResultlessAnswer:
    """Answers with nothing to post-process."""

    __slots__ = ()

    def process_answer(self, result: object) -> None:
        return None


class StaticAnswer(_ResultlessAnswer):
    """Returns a constant value."""

    __slots__ = ("value",)

    def __init__(self, value: object) -> None:
        self.value = value

    def get_answer_callback(self, context: object, method: str) -> Callable[..., object]:
        value = self.value
        return lambda *args, **kwargs: value

    def __repr__(self) -> str:
        return f"StaticAnswer({self.value!r})"


class ExceptionAnswer(_ResultlessAnswer):
    """Raises an exception (instance or class)."""

    __slots__ = ("exception",)

    def __init__(self, exception: BaseException | type[BaseException]) -> None:
        # FAIL-FIRST: reject non-exceptions at stubbing time, not at call time
        is_class = isinstance(exception, type) and issubclass(exception, BaseException)
        if not is_class and not isinstance(exception, BaseException):
            raise InvalidAnswerError(expected="exception instance or class", got=type(exception))
        self.exception = exception

    def get_answer_callback(self, context: object, method: str) -> Callable[..., object]:
        exception = self.exception

        def _raise(*args: object, **kwargs: object) -> object:
            raise exception

        return _raise

    def __repr__(self) -> str:
        return f"ExceptionAnswer({self.exception!r})"


class LambdaAnswer(_ResultlessAnswer):
    """Calls a user callback with the call's arguments."""

    __slots__ = ("callback",)

    def __init__(self, callback: Callable[..., object]) -> None:
        if not callable(callback):
            raise InvalidAnswerError(expected="callback must be callable", got=type(callback))
        self.callback = callback

    def get_answer_callback(self, context: object, method: str) -> Callable[..., object]:
        return self.callback


class NoAnswer(_ResultlessAnswer):
    """Always None."""

    __slots__ = ()

    def get_answer_callback(self, context: object, method: str) -> Callable[..., object]:
        return _return_none


class ParentDelegate(_ResultlessAnswer):
    """Delegates to the real implementation of the mocked method."""

    __slots__ = ()

    def get_answer_callback(self, context: object, method: str) -> Callable[..., object]:
        return PARENT_DELEGATE  # type: ignore[return-value]


def _raise_stop_iteration(*args: object, **kwargs: object) -> object:
    raise StopIteration


def _raise_stop_async_iteration(*args: object, **kwargs: object) -> object:
    raise StopAsyncIteration


def _constant(value: object) -> Callable[..., object]:
    return lambda *args, **kwargs: value


def _factory(factory: Callable[[], object]) -> Callable[..., object]:
    return lambda *args, **kwargs: factory()


# Protocol methods whose empty answer does not depend on annotations
_METHOD_DEFAULTS: dict[str, Callable[..., object]] = {
    "__len__": _constant(0),
    "__length_hint__": _constant(0),
    "__bool__": _constant(True),
    "__contains__": _constant(False),
    "__int__": _constant(0),
    "__index__": _constant(0),
    "__float__": _constant(0.0),
    "__complex__": _constant(0j),
    "__bytes__": _constant(b""),
    "__iter__": _factory(lambda: iter(())),
    "__reversed__": _factory(lambda: iter(())),
    "__next__": _raise_stop_iteration,
    "__anext__": _raise_stop_async_iteration,
}

_SELF_ITERATING = {"__iter__": "__next__", "__aiter__": "__anext__"}

_SCALAR_DEFAULTS: dict[str, object] = {
    "int": 0,
    "float": 0.0,
    "complex": 0j,
    "str": "",
    "bytes": b"",
    "bool": False,
}

_CONTAINER_FACTORIES: dict[str, Callable[[], object]] = {
    "list": list,
    "List": list,
    "Sequence": list,
    "MutableSequence": list,
    "dict": dict,
    "Dict": dict,
    "Mapping": dict,
    "MutableMapping": dict,
    "set": set,
    "Set": set,
    "AbstractSet": set,
    "MutableSet": set,
    "frozenset": frozenset,
    "FrozenSet": frozenset,
    "tuple": tuple,
    "Tuple": tuple,
    "bytearray": bytearray,
    "Iterator": lambda: iter(()),
    "Iterable": lambda: iter(()),
}


def _surface_method(context: object, method: str) -> MethodSignature | None:
    mock_class = context if isinstance(context, type) else type(context)
    surface = getattr(mock_class, "_mock_surface", None)
    if surface is None:
        return None
    return surface.method(method)


def _annotation_base(annotation: str) -> str:
    """'typing.List[int]' -> 'List'"""
    head = annotation.split("[", 1)[0].strip()
    return head.rsplit(".", 1)[-1]


class SmartDefaultAnswer(_ResultlessAnswer):
    """Type-appropriate empty value derived from the return annotation.

    int -> 0, str -> '', list[...] -> [], ...; optional or unknown types -> None.
    Container protocol methods get protocol-correct answers (__len__ -> 0,
    __next__ raises StopIteration, ...); an iterator mock iterates over itself.
    """

    __slots__ = ()

    def get_answer_callback(self, context: object, method: str) -> Callable[..., object]:
        # iterators are their own iterables
        step = _SELF_ITERATING.get(method)
        if step is not None and _surface_method(context, step) is not None:
            return _constant(context)
        if method in _METHOD_DEFAULTS:
            return _METHOD_DEFAULTS[method]

        signature = _surface_method(context, method)
        if signature is None or signature.returns.kind is not ReturnKind.VALUE:
            return _return_none
        if signature.returns.nullable or signature.returns.annotation is None:
            return _return_none

        base = _annotation_base(signature.returns.annotation)
        if base in _SCALAR_DEFAULTS:
            return _constant(_SCALAR_DEFAULTS[base])
        if base in _CONTAINER_FACTORIES:
            return _factory(_CONTAINER_FACTORIES[base])
        return _return_none


class AnswerCollection:
    """Sequence of answers behind one stub mapping.

    The cursor advances once per resolved call, when the callback is handed
    out; after the last answer, the last answer repeats.
    """

    __slots__ = ("_answers", "_cursor", "_current")

    def __init__(self, answer: AnswerProtocol) -> None:
        self._answers: list[AnswerProtocol] = [answer]
        self._cursor = 0
        self._current: AnswerProtocol = answer

    def add_answer(self, answer: AnswerProtocol) -> None:
        self._answers.append(answer)

    @property
    def answers(self) -> tuple[AnswerProtocol, ...]:
        return tuple(self._answers)

    def get_answer_callback(self, context: object, method: str) -> Callable[..., object]:
        self._current = self._answers[self._cursor]
        if self._cursor < len(self._answers) - 1:
            self._cursor += 1
        return self._current.get_answer_callback(context, method)

    def process_answer(self, result: object) -> None:
        self._current.process_answer(result)

    def __len__(self) -> int:
        return len(self._answers)
