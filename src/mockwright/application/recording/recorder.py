"""Call recorder: append-only call log of one MockInfo."""

from __future__ import annotations

import itertools
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mockwright.domain.model.recorded_call import RecordedCall

# Process-wide: orders calls across all mocks
_SEQUENCE = itertools.count()


def next_sequence() -> int:
    """Next process-wide call index."""
    return next(_SEQUENCE)


class CallRecorder:
    """Ordered log of intercepted calls.

    Two channels:
        regular: every call that passed the freeze gate
        dynamic: calls made through a name-based dispatch method,
            recorded under the dynamic method name
    """

    __slots__ = ("_calls", "_dynamic_calls")

    def __init__(self) -> None:
        self._calls: list[RecordedCall] = []
        self._dynamic_calls: list[RecordedCall] = []

    def record(self, call: RecordedCall) -> None:
        self._calls.append(call)

    def record_dynamic(self, call: RecordedCall) -> None:
        self._dynamic_calls.append(call)

    def history(self) -> tuple[RecordedCall, ...]:
        """Regular channel, in call order."""
        return tuple(self._calls)

    def dynamic_history(self) -> tuple[RecordedCall, ...]:
        """Dynamic channel, in call order."""
        return tuple(self._dynamic_calls)

    def calls_for(self, method: str) -> tuple[RecordedCall, ...]:
        return tuple(c for c in self._calls if c.method == method)

    def clear(self) -> None:
        self._calls.clear()
        self._dynamic_calls.clear()

    def __len__(self) -> int:
        return len(self._calls)
