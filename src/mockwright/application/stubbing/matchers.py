"""Argument and method matchers (equality/wildcard contract)."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from mockwright.domain.model.ref import Ref
from mockwright.domain.ports.argument_matcher import ArgumentMatcher

if TYPE_CHECKING:
    from mockwright.domain.model.recorded_call import CallArguments


class EqualTo:
    """Accepts values equal to ``expected``.

    Ref arguments are compared by their current value unless a Ref is expected.
    """

    __slots__ = ("expected",)

    def __init__(self, expected: object) -> None:
        self.expected = expected

    def matches(self, value: object) -> bool:
        if isinstance(value, Ref) and not isinstance(self.expected, Ref):
            value = value.value
        return bool(value == self.expected)

    def __repr__(self) -> str:
        return f"equal_to({self.expected!r})"


class Anything:
    """Accepts any value."""

    __slots__ = ()

    def matches(self, value: object) -> bool:
        return True

    def __repr__(self) -> str:
        return "anything()"


class AnyParameters:
    """Stands for the whole argument list: accepts any arguments."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "any_parameters()"


ANYTHING = Anything()
ANY_PARAMETERS = AnyParameters()


def to_matcher(value: object) -> ArgumentMatcher:
    """Wrap plain values in EqualTo; matchers pass through."""
    if isinstance(value, ArgumentMatcher):
        return value
    return EqualTo(value)


def _empty_named() -> Mapping[str, ArgumentMatcher]:
    return MappingProxyType({})


@dataclass(frozen=True, slots=True)
class ArgumentsMatcher:
    """Ordered positional predicates plus named predicates.

    Matches when both lengths and key sets agree and every predicate accepts.

    Attributes:
        positional: One matcher per positional argument
        named: One matcher per named argument
    """

    positional: tuple[ArgumentMatcher, ...] = ()
    named: Mapping[str, ArgumentMatcher] = field(default_factory=_empty_named)

    @classmethod
    def from_arguments(cls, arguments: CallArguments) -> ArgumentsMatcher:
        """Build from an argument snapshot whose values are values or matchers."""
        return cls(
            tuple(to_matcher(v) for v in arguments.args),
            MappingProxyType({k: to_matcher(v) for k, v in arguments.kwargs.items()}),
        )

    def matches(self, arguments: CallArguments) -> bool:
        if len(arguments.args) != len(self.positional):
            return False
        if set(arguments.kwargs) != set(self.named):
            return False
        if not all(m.matches(v) for m, v in zip(self.positional, arguments.args, strict=True)):
            return False
        return all(self.named[k].matches(v) for k, v in arguments.kwargs.items())

    def format(self) -> str:
        parts = [repr(m) for m in self.positional]
        parts.extend(f"{k}={m!r}" for k, m in self.named.items())
        return ", ".join(parts)


@dataclass(frozen=True, slots=True)
class MethodMatcher:
    """Method name equality plus optional argument predicates.

    Attributes:
        method: Expected method name
        arguments: Argument predicates, None accepts any arguments
    """

    method: str
    arguments: ArgumentsMatcher | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.method:
            raise ValueError("method must not be empty")

    def matches(self, method: str, arguments: CallArguments) -> bool:
        if method != self.method:
            return False
        return self.arguments is None or self.arguments.matches(arguments)

    def __str__(self) -> str:
        args = "<any parameters>" if self.arguments is None else self.arguments.format()
        return f"{self.method}({args})"
