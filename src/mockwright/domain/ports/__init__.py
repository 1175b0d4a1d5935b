"""Domain ports: contracts users may implement to extend mockwright."""

from mockwright.domain.ports.answer import AnswerProtocol
from mockwright.domain.ports.argument_matcher import ArgumentMatcher
from mockwright.domain.ports.invocation_handler import InvocationHandlerProtocol

__all__ = [
    "AnswerProtocol",
    "ArgumentMatcher",
    "InvocationHandlerProtocol",
]
