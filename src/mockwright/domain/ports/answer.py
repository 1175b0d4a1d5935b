"""Answer protocol for stubbed and default call outcomes."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Callable


class AnswerProtocol(Protocol):
    """Contract for answers.

    An answer resolves one intercepted call: it hands out the callback that
    produces the value (or raises), then sees the produced value in
    process_answer(). Stateful answers (sequences) advance there.

    Example:
        class CountingAnswer:
            def __init__(self) -> None:
                self.calls = 0

            def get_answer_callback(self, context: object, method: str) -> Callable[..., object]:
                return lambda *args, **kwargs: self.calls

            def process_answer(self, result: object) -> None:
                self.calls += 1
    """

    def get_answer_callback(self, context: object, method: str) -> Callable[..., object]:
        """Return the callable invoked with the call's arguments.

        Args:
            context: Mock instance, or mock class for static/class methods
            method: Called method name

        Returns:
            Callback, or a ParentDelegateCallback marker
        """
        ...

    def process_answer(self, result: object) -> None:
        """Post-process the value produced for one call."""
        ...
