"""Synthesized (merged) method surface."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mockwright.domain.model.method_signature import MethodSignature
    from mockwright.domain.model.target import TargetDescriptor


@dataclass(frozen=True, slots=True)
class SynthesizedSurface:
    """Merged, deduplicated method surface for one target set.

    Attributes:
        mocked_name: Name reported by mocks of this surface (base name if any,
            else first capability name)
        base: The single concrete target, None for capability-only mocks
        capabilities: Capability targets after normalization, in bases order
        methods: Merged methods, each name exactly once
        override_constructor: Generated class gets a constructor override
        real_constructor: The base has a real constructor to chain to
    """

    mocked_name: str
    base: TargetDescriptor | None
    capabilities: tuple[TargetDescriptor, ...]
    methods: tuple[MethodSignature, ...]
    override_constructor: bool = False
    real_constructor: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.mocked_name:
            raise ValueError("mocked_name must not be empty")

        if self.base is None and not self.capabilities:
            raise ValueError("surface needs a base or at least one capability")

        if self.base is not None and self.base.is_capability:
            raise ValueError(f"base '{self.base.name}' must be a concrete target")

        for capability in self.capabilities:
            if not capability.is_capability:
                raise ValueError(f"'{capability.name}' is not a capability")

        names = [m.name for m in self.methods]
        if len(names) != len(set(names)):
            raise ValueError("each method name must appear exactly once in a surface")

        if self.real_constructor and self.base is None:
            raise ValueError("real_constructor requires a base")

    @property
    def targets(self) -> tuple[TargetDescriptor, ...]:
        """Base (if any) followed by capabilities."""
        if self.base is None:
            return self.capabilities
        return (self.base, *self.capabilities)

    @property
    def method_names(self) -> frozenset[str]:
        return frozenset(m.name for m in self.methods)

    def method(self, name: str) -> MethodSignature | None:
        """Find method by name."""
        for method in self.methods:
            if method.name == name:
                return method
        return None
