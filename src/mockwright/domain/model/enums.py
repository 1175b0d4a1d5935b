"""Domain enumerations."""

from enum import Enum, auto


class Visibility(Enum):
    """Method visibility by naming convention.

    Private (name-mangled) methods are never part of a mock surface.
    """

    PUBLIC = auto()  # name, __dunder__
    PROTECTED = auto()  # _name


class TargetKind(Enum):
    """Role a target type plays in a mock."""

    CONCRETE = auto()  # at most one per mock, becomes the base class
    CAPABILITY = auto()  # Protocol or pure ABC, any number per mock


class ReturnKind(Enum):
    """Return contract of a synthesized method."""

    VALUE = auto()  # returns the resolved value
    VOID = auto()  # annotated -> None, value discarded
    NEVER = auto()  # annotated -> NoReturn/Never, always raises


class DispatchKind(Enum):
    """How a method receives its context."""

    INSTANCE = auto()  # plain method, instance MockInfo
    CLASS = auto()  # @classmethod, static MockInfo
    STATIC = auto()  # @staticmethod, static MockInfo


class ParameterKind(Enum):
    """Python function parameter kind.

    Maps to inspect.Parameter.kind values.
    """

    POSITIONAL_ONLY = "POSITIONAL_ONLY"
    POSITIONAL_OR_KEYWORD = "POSITIONAL_OR_KEYWORD"
    VAR_POSITIONAL = "VAR_POSITIONAL"
    KEYWORD_ONLY = "KEYWORD_ONLY"
    VAR_KEYWORD = "VAR_KEYWORD"


class DefaultAnswerMode(Enum):
    """Answer used for unstubbed calls when none is given explicitly."""

    SMART = "smart"  # type-appropriate empty value from the return annotation
    NONE = "none"  # always None
