"""Stub registry, matchers and answers."""

from mockwright.application.stubbing.answers import (
    PARENT_DELEGATE,
    AnswerCollection,
    ExceptionAnswer,
    LambdaAnswer,
    NoAnswer,
    ParentDelegate,
    ParentDelegateCallback,
    SmartDefaultAnswer,
    StaticAnswer,
)
from mockwright.application.stubbing.matchers import (
    ANY_PARAMETERS,
    ANYTHING,
    AnyParameters,
    Anything,
    ArgumentsMatcher,
    EqualTo,
    MethodMatcher,
    to_matcher,
)
from mockwright.application.stubbing.stub_mapper import StubMapper, StubMapping

__all__ = [
    "ANYTHING",
    "ANY_PARAMETERS",
    "PARENT_DELEGATE",
    "AnswerCollection",
    "AnyParameters",
    "Anything",
    "ArgumentsMatcher",
    "EqualTo",
    "ExceptionAnswer",
    "LambdaAnswer",
    "MethodMatcher",
    "NoAnswer",
    "ParentDelegate",
    "ParentDelegateCallback",
    "SmartDefaultAnswer",
    "StaticAnswer",
    "StubMapper",
    "StubMapping",
    "to_matcher",
]
