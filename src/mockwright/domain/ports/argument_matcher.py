"""Argument matcher protocol."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ArgumentMatcher(Protocol):
    """Predicate over one argument value.

    Any object with matches() can be passed to when()/verify() in place
    of a plain value. Plain values are compared by equality.
    """

    def matches(self, value: object) -> bool:
        """True if value is accepted."""
        ...
