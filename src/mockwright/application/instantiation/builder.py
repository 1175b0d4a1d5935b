"""Instance builder: allocates mock instances and attaches their state."""

from __future__ import annotations

from typing import TYPE_CHECKING

from mockwright.application.mock.factory import create_mock_info
from mockwright.domain.model.configuration import DEFAULT_DYNAMIC_DISPATCH_METHODS
from mockwright.infrastructure.instantiator import allocate

if TYPE_CHECKING:
    from collections.abc import Iterable

    from mockwright.application.recording.recorder import CallRecorder
    from mockwright.application.stubbing.stub_mapper import StubMapper
    from mockwright.domain.model.recorded_call import CallArguments
    from mockwright.domain.ports.answer import AnswerProtocol


class InstanceBuilder:
    """Creates instances of generated mock classes.

    The real constructor runs only when constructor arguments are given
    and the mocked base type has one.
    """

    def __init__(
        self, dynamic_dispatch_methods: Iterable[str] = DEFAULT_DYNAMIC_DISPATCH_METHODS
    ) -> None:
        self._dynamic_dispatch_methods = frozenset(dynamic_dispatch_methods)

    def instantiate(
        self,
        mock_class: type,
        recorder: CallRecorder,
        mapper: StubMapper,
        default_answer: AnswerProtocol,
        constructor_args: CallArguments | None = None,
    ) -> object:
        """Allocate a mock and attach a fresh MockInfo.

        Args:
            mock_class: Generated mock class
            recorder: Call log of the new mock
            mapper: Stub registry of the new mock
            default_answer: Answer for unstubbed calls
            constructor_args: Arguments for the real constructor, None to skip it;
                ignored when the base type has no constructor

        Returns:
            Mock instance
        """
        instance = allocate(mock_class)
        info = create_mock_info(
            mock_class._mock_name,  # type: ignore[attr-defined]
            recorder,
            mapper,
            default_answer,
            self._dynamic_dispatch_methods,
        )
        object.__setattr__(instance, "_mock_info", info)

        # capability-only mocks have no constructor to run; arguments are ignored
        surface = mock_class._mock_surface  # type: ignore[attr-defined]
        if constructor_args is not None and surface.real_constructor:
            object.__setattr__(instance, "_mock_constructor_args", constructor_args)
            instance.__init__(*constructor_args.args, **constructor_args.kwargs)  # type: ignore[misc]
            # without an override the real __init__ ran directly
            object.__setattr__(instance, "_mock_constructor_args", None)

        return instance
