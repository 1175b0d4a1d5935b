"""Annotation -> type constraint conversion.

Annotations may be live objects or strings (PEP 563, or evaluation failed).
Both forms are handled; string forms are inspected textually.
"""

from __future__ import annotations

import inspect
import re
import types
import typing

from mockwright.domain.exceptions import UnsupportedTypeConstraintError
from mockwright.domain.model.ref import Ref
from mockwright.domain.model.return_contract import ReturnContract

_TYPING_MODULES = frozenset(
    {"typing", "types", "typing_extensions", "collections.abc", "_collections_abc"}
)
_VOID_NAMES = frozenset({"None", "NoneType"})
_NEVER_NAMES = frozenset(
    {
        "NoReturn",
        "Never",
        "typing.NoReturn",
        "typing.Never",
        "typing_extensions.NoReturn",
        "typing_extensions.Never",
    }
)
_ANY_NAMES = frozenset({"Any", "typing.Any"})

_SELF_PATTERN = re.compile(r"\b(?:typing(?:_extensions)?\.)?Self\b")
_OPTIONAL_PATTERN = re.compile(r"^(?:typing\.)?Optional\[")
_NONE_MEMBER_PATTERN = re.compile(r"(?:^|\|)\s*None\s*(?:\||$)")
_REF_PATTERN = re.compile(r"^(?:[\w.]+\.)?Ref(?:\[|$)")


def is_representable(annotation: object) -> bool:
    """Annotation is a form the synthesizer can carry.

    Classes, strings, None and typing/types constructs are representable.
    Arbitrary objects used as annotations (numbers, lambdas, ...) are not.
    """
    if annotation is None or isinstance(annotation, (str, type)):
        return True
    return type(annotation).__module__ in _TYPING_MODULES


def format_annotation(annotation: object, owner: type, where: str) -> str | None:
    """Render annotation as type constraint text.

    Self is resolved to the owning class name.

    Args:
        annotation: Annotation object or string (inspect.Parameter.empty = untyped)
        owner: Class declaring the method
        where: Qualified method name for error reporting

    Returns:
        Constraint text, None if untyped

    Raises:
        UnsupportedTypeConstraintError: If annotation is not representable
    """
    if annotation is inspect.Parameter.empty:
        return None
    if not is_representable(annotation):
        raise UnsupportedTypeConstraintError(where, annotation)

    text = annotation if isinstance(annotation, str) else inspect.formatannotation(annotation)
    return _SELF_PATTERN.sub(owner.__qualname__, text)


def allows_none(annotation: object) -> bool:
    """Optional union, None itself, Any, or untyped."""
    if annotation is inspect.Parameter.empty or annotation is None:
        return True
    if annotation is type(None) or annotation is typing.Any:
        return True

    if isinstance(annotation, str):
        text = annotation.strip()
        if text in _ANY_NAMES or text in _VOID_NAMES:
            return True
        return bool(_OPTIONAL_PATTERN.match(text) or _NONE_MEMBER_PATTERN.search(text))

    origin = typing.get_origin(annotation)
    if origin is typing.Union or origin is types.UnionType:
        return type(None) in typing.get_args(annotation)
    if origin is typing.Annotated:
        return allows_none(typing.get_args(annotation)[0])
    return False


def is_reference(annotation: object) -> bool:
    """Annotated as a by-reference slot (Ref or Ref[T])."""
    if isinstance(annotation, str):
        return bool(_REF_PATTERN.match(annotation.strip()))
    return annotation is Ref or typing.get_origin(annotation) is Ref


def return_contract(annotation: object, owner: type, where: str) -> ReturnContract:
    """Derive return contract from a return annotation.

    None -> VOID, NoReturn/Never -> NEVER, anything else -> VALUE.

    Raises:
        UnsupportedTypeConstraintError: If annotation is not representable
    """
    if annotation is inspect.Signature.empty:
        return ReturnContract.value()

    if annotation is None or annotation is type(None):
        return ReturnContract.void()
    if annotation is typing.NoReturn or annotation is typing.Never:
        return ReturnContract.never()

    if isinstance(annotation, str):
        text = annotation.strip()
        if text in _VOID_NAMES:
            return ReturnContract.void()
        if text in _NEVER_NAMES:
            return ReturnContract.never()

    return ReturnContract.value(
        format_annotation(annotation, owner, where),
        nullable=allows_none(annotation),
    )
