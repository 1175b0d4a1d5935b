"""Helpers for the DSL: mock lookup and matcher building."""

from __future__ import annotations

from typing import TYPE_CHECKING

from mockwright.application.assembly.marker import is_mock, is_mock_class
from mockwright.application.invocation.arguments import capture_arguments
from mockwright.application.stubbing.matchers import AnyParameters, ArgumentsMatcher, MethodMatcher
from mockwright.domain.exceptions import NotAMockError

if TYPE_CHECKING:
    from mockwright.application.mock.info import MockInfo
    from mockwright.domain.model.surface import SynthesizedSurface


def instance_info(mock: object) -> MockInfo:
    """MockInfo of a mock instance.

    Raises:
        NotAMockError: If mock is not a generated mock with attached info
    """
    info = getattr(mock, "_mock_info", None) if is_mock(mock) else None
    if info is None:
        raise NotAMockError(type(mock))
    return info


def static_info(mock_or_class: object) -> MockInfo:
    """Class-wide MockInfo of a mock or mock class.

    Raises:
        NotAMockError: If the argument is neither a mock nor a mock class
    """
    cls = mock_or_class if isinstance(mock_or_class, type) else type(mock_or_class)
    info = cls._mock_static_info if is_mock_class(cls) else None  # type: ignore[attr-defined]
    if info is None:
        raise NotAMockError(cls)
    return info


def surface_of(mock_or_class: object) -> SynthesizedSurface:
    cls = mock_or_class if isinstance(mock_or_class, type) else type(mock_or_class)
    return cls._mock_surface  # type: ignore[attr-defined, no-any-return]


def build_matcher(
    surface: SynthesizedSurface,
    method: str,
    args: tuple[object, ...],
    kwargs: dict[str, object],
) -> MethodMatcher:
    """Matcher for a call expressed in the method's own call syntax.

    Arguments are bound like a real call, so a value passed by keyword
    matches the same value passed positionally. A lone any_parameters()
    accepts any argument list.

    Raises:
        AttributeError: If the method is not on the mock's surface
        TypeError: If the arguments do not fit the method signature
    """
    signature = surface.method(method)
    if signature is None:
        raise AttributeError(f"mock for {surface.mocked_name} has no method {method!r}")

    if len(args) == 1 and not kwargs and isinstance(args[0], AnyParameters):
        return MethodMatcher(method)

    arguments = capture_arguments(signature.to_signature(), args, kwargs)
    return MethodMatcher(method, ArgumentsMatcher.from_arguments(arguments))
