"""Invocation handler protocol."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from mockwright.domain.model.recorded_call import CallArguments
    from mockwright.domain.ports.answer import AnswerProtocol


class InvocationHandlerProtocol(Protocol):
    """One stage of a mock's handler chain.

    Stages run in fixed order for every call. A stage rejects a call by
    raising; it resolves the call by returning an answer. Stages with
    nothing to resolve return None.
    """

    def invoke(
        self,
        context: object,
        method: str,
        arguments: CallArguments,
    ) -> AnswerProtocol | None:
        """Handle one call.

        Args:
            context: Mock instance, or mock class for static/class methods
            method: Called method name
            arguments: Argument snapshot

        Returns:
            Answer resolving the call, or None
        """
        ...
