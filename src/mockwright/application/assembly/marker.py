"""MockObject: marker base of every generated mock class."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from mockwright.application.mock.info import MockInfo
    from mockwright.domain.model.recorded_call import CallArguments
    from mockwright.domain.model.surface import SynthesizedSurface


class MockObject:
    """Marker capability identifying generated mocks.

    Class-level defaults make an unattached mock (class instantiated
    directly, or a static method before assembly completes) behave as
    detached: calls return None without recording.
    """

    __slots__ = ()

    _mock_info: MockInfo | None = None
    _mock_constructor_args: CallArguments | None = None
    _mock_static_info: ClassVar[MockInfo | None] = None
    _mock_surface: ClassVar[SynthesizedSurface | None] = None
    _mock_name: ClassVar[str] = "MockObject"

    def __repr__(self) -> str:
        return f"<Mock for {type(self)._mock_name}>"


def is_mock(obj: object) -> bool:
    """Generated mock instance."""
    return isinstance(obj, MockObject)


def is_mock_class(obj: object) -> bool:
    """Generated mock class."""
    return isinstance(obj, type) and issubclass(obj, MockObject) and obj is not MockObject
