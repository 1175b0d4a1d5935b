"""Recorded call value objects."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


def _empty_kwargs() -> Mapping[str, object]:
    return MappingProxyType({})


@dataclass(frozen=True, slots=True)
class CallArguments:
    """Argument snapshot of one call.

    Positional parameters in declaration order followed by *args entries;
    keyword-only parameters and **kwargs entries by key.

    Attributes:
        args: Positional values
        kwargs: Named values (read-only view)
    """

    args: tuple[object, ...] = ()
    kwargs: Mapping[str, object] = field(default_factory=_empty_kwargs)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.args, tuple):
            raise TypeError(f"args must be a tuple, got {type(self.args).__name__}")
        if not isinstance(self.kwargs, MappingProxyType):
            object.__setattr__(self, "kwargs", MappingProxyType(dict(self.kwargs)))

    @classmethod
    def of(cls, *args: object, **kwargs: object) -> CallArguments:
        """Snapshot from plain call syntax."""
        return cls(args, kwargs)

    def __len__(self) -> int:
        return len(self.args) + len(self.kwargs)

    def format(self) -> str:
        """Render as call syntax: 1, 'a', key=2"""
        parts = [repr(a) for a in self.args]
        parts.extend(f"{k}={v!r}" for k, v in self.kwargs.items())
        return ", ".join(parts)


@dataclass(frozen=True, slots=True)
class RecordedCall:
    """One intercepted call. Append-only log entry, never mutated.

    Attributes:
        sequence: Process-wide call index (orders calls across mocks)
        target: Name of the mocked target
        method: Called method name
        arguments: Argument snapshot; Ref cells stay shared (late-bound)
        timestamp_ns: time.monotonic_ns() at recording
    """

    sequence: int
    target: str
    method: str
    arguments: CallArguments
    timestamp_ns: int = 0

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.sequence < 0:
            raise ValueError(f"sequence must be >= 0, got {self.sequence}")
        if not self.method:
            raise ValueError("method must not be empty")

    def __str__(self) -> str:
        """Format as Target->method(args)."""
        return f"{self.target}->{self.method}({self.arguments.format()})"
