"""Capability normalization rule."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class NormalizationRule:
    """Adds a refining capability when a broad one is requested alone.

    A capability that subclasses ``trigger`` but none of ``refinements``
    gets ``replacement`` inserted before it. When the capability *is*
    ``trigger`` it is replaced outright.

    Example:
        Iterable without Iterator/Collection -> Iterator is added, so the
        mock exposes __next__ instead of claiming iterability with no
        iteration method.

    Attributes:
        trigger: Broad capability
        refinements: Capabilities that already provide the refinement
        replacement: Capability to add
    """

    trigger: type
    refinements: tuple[type, ...]
    replacement: type

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not issubclass(self.replacement, self.trigger):
            raise ValueError(
                f"replacement {self.replacement.__name__} must refine {self.trigger.__name__}"
            )
        if self.replacement not in self.refinements:
            raise ValueError(f"{self.replacement.__name__} must be listed in refinements")

    def applies_to(self, capability: type) -> bool:
        """Capability nominally extends trigger and no refinement."""
        # nominal ancestry: collections.abc issubclass is structural
        ancestry = capability.__mro__
        if self.trigger not in ancestry:
            return False
        return not any(r in ancestry for r in self.refinements)

    def apply(self, capability: type) -> tuple[type, ...]:
        """Capabilities to use instead of ``capability``."""
        if not self.applies_to(capability):
            return (capability,)
        if capability is self.trigger:
            return (self.replacement,)
        return (self.replacement, capability)
