"""Return contract value object."""

from __future__ import annotations

from dataclasses import dataclass

from mockwright.domain.model.enums import ReturnKind


@dataclass(frozen=True, slots=True)
class ReturnContract:
    """What a synthesized method hands back to its caller.

    Attributes:
        kind: VALUE, VOID or NEVER
        annotation: Return type text for VALUE, None if untyped
        nullable: VALUE may be None (optional union, Any or untyped)
    """

    kind: ReturnKind
    annotation: str | None = None
    nullable: bool = True

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.kind is not ReturnKind.VALUE and self.annotation is not None:
            raise ValueError(f"{self.kind.name} contract cannot carry annotation {self.annotation!r}")

    @classmethod
    def value(cls, annotation: str | None = None, *, nullable: bool = True) -> ReturnContract:
        """Contract returning the resolved value."""
        return cls(ReturnKind.VALUE, annotation, nullable)

    @classmethod
    def void(cls) -> ReturnContract:
        """Contract discarding the resolved value."""
        return cls(ReturnKind.VOID, None, True)

    @classmethod
    def never(cls) -> ReturnContract:
        """Contract that never returns normally."""
        return cls(ReturnKind.NEVER, None, False)
