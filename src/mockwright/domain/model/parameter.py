"""Method parameter value object (argument slot)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from mockwright.domain.model.enums import ParameterKind


class _Sentinel(Enum):
    NO_DEFAULT = "NO_DEFAULT"

    def __repr__(self) -> str:
        return self.value


NO_DEFAULT = _Sentinel.NO_DEFAULT
"""Marks a parameter without a default value (None is a valid default)."""


@dataclass(frozen=True, slots=True)
class Parameter:
    """One argument slot of a synthesized method.

    Attributes:
        name: Parameter name
        kind: Positional/keyword/variadic kind
        annotation: Type constraint text, None if untyped
        nullable: Accepts None (optional union, None default, Any or untyped)
        is_reference: By-reference slot (annotated Ref[...]); the caller's Ref
            cell is shared with callbacks instead of a plain value
        default: Default value object, NO_DEFAULT if required
    """

    name: str
    kind: ParameterKind = ParameterKind.POSITIONAL_OR_KEYWORD
    annotation: str | None = None
    nullable: bool = True
    is_reference: bool = False
    default: object = NO_DEFAULT

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("parameter name must not be empty")

        if self.is_variadic and self.has_default:
            raise ValueError(f"variadic parameter '{self.name}' cannot have a default")

    @property
    def is_variadic(self) -> bool:
        """*args or **kwargs."""
        return self.kind in (ParameterKind.VAR_POSITIONAL, ParameterKind.VAR_KEYWORD)

    @property
    def has_default(self) -> bool:
        """Parameter carries a default value."""
        return self.default is not NO_DEFAULT
