"""Allocation of instances without running __init__."""

from __future__ import annotations

from typing import TypeVar

T = TypeVar("T")


def allocate(cls: type[T]) -> T:
    """Create an instance of ``cls`` without calling its constructor.

    object.__new__ refuses classes with a builtin layout (dict, Exception
    subclasses, ...); their own __new__ is used instead.
    """
    try:
        return object.__new__(cls)
    except TypeError:
        return cls.__new__(cls)
