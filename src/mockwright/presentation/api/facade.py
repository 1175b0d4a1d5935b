"""Facade: wires extraction, synthesis, assembly and instantiation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from mockwright.application.assembly.assembler import TypeAssembler
from mockwright.application.assembly.cache import MockClassCache, generate_class_name
from mockwright.application.instantiation.builder import InstanceBuilder
from mockwright.application.mock.info import InfoRegistry
from mockwright.application.recording.recorder import CallRecorder
from mockwright.application.stubbing.answers import NoAnswer, ParentDelegate, SmartDefaultAnswer
from mockwright.application.stubbing.stub_mapper import StubMapper
from mockwright.application.synthesis.normalization import DEFAULT_RULES
from mockwright.application.synthesis.synthesizer import SignatureSynthesizer
from mockwright.domain.model.configuration import MockwrightConfig
from mockwright.domain.model.enums import DefaultAnswerMode
from mockwright.domain.model.recorded_call import CallArguments
from mockwright.infrastructure.reflection.extractor import TypeDescriptorExtractor

if TYPE_CHECKING:
    from collections.abc import Sequence

    from mockwright.domain.model.target import TargetDescriptor
    from mockwright.domain.ports.answer import AnswerProtocol


class Facade:
    """Creates mocks.

    One facade owns a class cache and an info registry. Mocks of the same
    target set created through one facade share their generated class.

    Attributes:
        config: Mock generation configuration
        registry: Registry of all live MockInfos
    """

    def __init__(
        self,
        config: MockwrightConfig | None = None,
        *,
        info_registry: InfoRegistry | None = None,
        extractor: TypeDescriptorExtractor | None = None,
        cache: MockClassCache | None = None,
    ) -> None:
        """Initialize facade.

        Args:
            config: Configuration. Uses defaults if None.
            info_registry: Registry of infos. New registry if None.
            extractor: Descriptor extractor. New extractor if None.
            cache: Generated class cache. New cache if None.
        """
        self._config = config or MockwrightConfig()
        self._registry = InfoRegistry() if info_registry is None else info_registry
        self._extractor = extractor or TypeDescriptorExtractor()
        self._cache = MockClassCache() if cache is None else cache

        rules = self._config.normalization_rules
        self._synthesizer = SignatureSynthesizer(
            self._extractor.extract,
            DEFAULT_RULES if rules is None else rules,
        )
        self._assembler = TypeAssembler(self._registry, self._config)
        self._builder = InstanceBuilder(self._config.dynamic_dispatch_methods)

    @property
    def config(self) -> MockwrightConfig:
        return self._config

    @property
    def registry(self) -> InfoRegistry:
        return self._registry

    def default_answer(self) -> AnswerProtocol:
        """Fresh default answer for the configured mode."""
        if self._config.default_answer is DefaultAnswerMode.NONE:
            return NoAnswer()
        return SmartDefaultAnswer()

    def mock_class(self, *targets: type | str) -> type:
        """Generated class for the target set (cached).

        Raises:
            ValueError: If no target is given
            InvalidTargetError: If a target cannot be mocked
            MultipleBaseTypesError: If more than one concrete class is given
            UnsupportedTypeConstraintError: If an annotation cannot be represented
        """
        if not targets:
            raise ValueError("at least one target is required")
        descriptors = tuple(self._extractor.extract(t) for t in targets)
        return self._cache.get_or_create(descriptors, lambda: self._assemble(descriptors))

    def _assemble(self, descriptors: Sequence[TargetDescriptor]) -> type:
        surface = self._synthesizer.synthesize(descriptors)
        return self._assembler.assemble(
            surface, generate_class_name(descriptors), self.default_answer()
        )

    def mock(
        self,
        *targets: type | str,
        default_answer: AnswerProtocol | None = None,
        constructor_args: CallArguments | None = None,
    ) -> object:
        """Create a mock implementing every target.

        Args:
            targets: At most one concrete class plus any number of capabilities
            default_answer: Answer for unstubbed calls. Config default if None.
            constructor_args: Arguments for the real constructor. None skips it.

        Returns:
            Mock instance
        """
        mock_class = self.mock_class(*targets)
        instance = self._builder.instantiate(
            mock_class,
            CallRecorder(),
            StubMapper(),
            self.default_answer() if default_answer is None else default_answer,
            constructor_args,
        )
        self._registry.add_info(instance._mock_info)  # type: ignore[attr-defined]
        return instance

    def partial_mock(self, target: type | str, *args: object, **kwargs: object) -> object:
        """Mock running the real constructor and real methods unless stubbed."""
        return self.mock(
            target,
            default_answer=ParentDelegate(),
            constructor_args=CallArguments(args, kwargs),
        )

    def reset_static_info(self) -> None:
        """Reset calls and stubs of every live mock and mock class."""
        self._registry.reset_all()
