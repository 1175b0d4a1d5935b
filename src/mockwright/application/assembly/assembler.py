"""Type assembler: synthesized surface -> live mock class."""

from __future__ import annotations

import logging
import types
import warnings
from typing import TYPE_CHECKING

from mockwright.application.assembly.marker import MockObject
from mockwright.application.assembly.method_factory import build_constructor, build_method
from mockwright.application.invocation.dispatcher import MockClassRef
from mockwright.application.mock.factory import create_mock_info
from mockwright.application.recording.recorder import CallRecorder
from mockwright.application.stubbing.stub_mapper import StubMapper
from mockwright.domain.exceptions import InvalidTargetError

if TYPE_CHECKING:
    from mockwright.application.mock.info import InfoRegistry
    from mockwright.domain.model.configuration import MockwrightConfig
    from mockwright.domain.model.surface import SynthesizedSurface
    from mockwright.domain.ports.answer import AnswerProtocol

logger = logging.getLogger(__name__)

GENERATED_MODULE = "mockwright.generated"

# Pinned to object's so mocks stay usable as dict keys and set members
_IDENTITY_HOOKS = {
    "__eq__": object.__eq__,
    "__ne__": object.__ne__,
    "__hash__": object.__hash__,
}


class TypeAssembler:
    """Creates generated mock classes.

    Bases are (base?, *capabilities, MockObject). Each class gets one
    intercepting function per surface method and a class-wide static
    MockInfo registered with the info registry.
    """

    def __init__(self, info_registry: InfoRegistry, config: MockwrightConfig) -> None:
        self._registry = info_registry
        self._config = config

    def assemble(
        self,
        surface: SynthesizedSurface,
        class_name: str,
        default_answer: AnswerProtocol,
    ) -> type:
        """Assemble the class for ``surface``.

        Args:
            surface: Merged method surface
            class_name: Generated class name
            default_answer: Default answer of the static MockInfo

        Returns:
            New class, subclass of every target and of MockObject

        Raises:
            InvalidTargetError: If the bases cannot be combined (metaclass
                conflict, inconsistent MRO, failing __init_subclass__)
        """
        owner = MockClassRef()
        static_info = create_mock_info(
            surface.mocked_name,
            CallRecorder(),
            StubMapper(),
            default_answer,
            self._config.dynamic_dispatch_methods,
        )
        namespace = self._namespace(surface, class_name, owner)
        namespace["_mock_static_info"] = static_info
        bases = (*(t.type_ for t in surface.targets), MockObject)

        with warnings.catch_warnings():
            if any(t.name in self._config.suppress_warnings_for for t in surface.targets):
                warnings.simplefilter("ignore")
            try:
                cls = types.new_class(class_name, bases, {}, lambda ns: ns.update(namespace))
            except TypeError as e:
                target = ", ".join(t.name for t in surface.targets)
                raise InvalidTargetError(target, f"cannot be subclassed together: {e}") from e

        # Non-intercepted abstract members (properties) must not block allocation
        if getattr(cls, "__abstractmethods__", None):
            cls.__abstractmethods__ = frozenset()

        owner.cls = cls
        self._registry.add_info(static_info)

        logger.debug(
            "assembled %s for %s (%d methods)",
            class_name,
            ", ".join(t.name for t in surface.targets),
            len(surface.methods),
        )
        return cls

    def _namespace(
        self, surface: SynthesizedSurface, class_name: str, owner: MockClassRef
    ) -> dict[str, object]:
        namespace: dict[str, object] = {
            m.name: build_method(m, owner, class_name) for m in surface.methods
        }
        if surface.override_constructor:
            namespace["__init__"] = build_constructor(
                owner, class_name, real_constructor=surface.real_constructor
            )
        namespace.update(_IDENTITY_HOOKS)
        namespace["_mock_surface"] = surface
        namespace["_mock_name"] = surface.mocked_name
        namespace["__module__"] = GENERATED_MODULE
        namespace["__qualname__"] = class_name
        namespace["__doc__"] = f"Mock for {surface.mocked_name}."
        return namespace
