"""Stub mapper: (matcher, answers) registry of one MockInfo."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mockwright.application.stubbing.answers import AnswerCollection
    from mockwright.application.stubbing.matchers import MethodMatcher
    from mockwright.domain.model.recorded_call import CallArguments


@dataclass(frozen=True, slots=True)
class StubMapping:
    """One registered stub.

    Attributes:
        matcher: Accepts {method name, arguments}
        answers: Answer sequence used when the matcher accepts
    """

    matcher: MethodMatcher
    answers: AnswerCollection


class StubMapper:
    """Stub mappings in registration order.

    Resolution: the most recently registered matching mapping wins, so later
    stubs shadow earlier ones for overlapping matchers.
    """

    __slots__ = ("_mappings",)

    def __init__(self) -> None:
        self._mappings: list[StubMapping] = []

    def map_stub_to_matcher(self, answers: AnswerCollection, matcher: MethodMatcher) -> None:
        self._mappings.append(StubMapping(matcher, answers))

    def get_stub_by_call(self, method: str, arguments: CallArguments) -> AnswerCollection | None:
        """Answers of the newest mapping accepting the call, None if none does."""
        for mapping in reversed(self._mappings):
            if mapping.matcher.matches(method, arguments):
                return mapping.answers
        return None

    def remove_all_answers(self) -> None:
        self._mappings.clear()

    @property
    def mappings(self) -> tuple[StubMapping, ...]:
        return tuple(self._mappings)
