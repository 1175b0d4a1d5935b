"""Synthesized method signature."""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import TYPE_CHECKING

from mockwright.domain.model.enums import DispatchKind, ParameterKind, ReturnKind, Visibility

if TYPE_CHECKING:
    from mockwright.domain.model.parameter import Parameter
    from mockwright.domain.model.return_contract import ReturnContract


_INSPECT_KINDS = {
    ParameterKind.POSITIONAL_ONLY: inspect.Parameter.POSITIONAL_ONLY,
    ParameterKind.POSITIONAL_OR_KEYWORD: inspect.Parameter.POSITIONAL_OR_KEYWORD,
    ParameterKind.VAR_POSITIONAL: inspect.Parameter.VAR_POSITIONAL,
    ParameterKind.KEYWORD_ONLY: inspect.Parameter.KEYWORD_ONLY,
    ParameterKind.VAR_KEYWORD: inspect.Parameter.VAR_KEYWORD,
}


@dataclass(frozen=True, slots=True)
class MethodSignature:
    """One method of a mock surface.

    Attributes:
        name: Method name
        parameters: Argument slots, receiver (self/cls) excluded
        returns: Return contract
        dispatch: INSTANCE, CLASS or STATIC
        visibility: PUBLIC or PROTECTED
        origin: Qualified name of the declaring target class
        is_abstract: Declared abstract (no real body to delegate to)
        is_async: Declared with async def
        delegable: A real ancestor implementation can be called
        doc: Original docstring
    """

    name: str
    parameters: tuple[Parameter, ...]
    returns: ReturnContract
    origin: str
    dispatch: DispatchKind = DispatchKind.INSTANCE
    visibility: Visibility = Visibility.PUBLIC
    is_abstract: bool = False
    is_async: bool = False
    delegable: bool = True
    doc: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("method name must not be empty")

        if not self.origin:
            raise ValueError(f"origin of method '{self.name}' must not be empty")

        if self.is_abstract and self.delegable:
            raise ValueError(f"abstract method '{self.name}' cannot be delegable")

        names = [p.name for p in self.parameters]
        if len(names) != len(set(names)):
            raise ValueError(f"method '{self.name}' has duplicate parameter names: {names}")

    @property
    def qualified_name(self) -> str:
        """origin.name"""
        return f"{self.origin}.{self.name}"

    @property
    def is_static(self) -> bool:
        """Dispatched through the class-wide MockInfo."""
        return self.dispatch is not DispatchKind.INSTANCE

    @property
    def never_returns(self) -> bool:
        return self.returns.kind is ReturnKind.NEVER

    def to_signature(self) -> inspect.Signature:
        """Build inspect.Signature used for argument binding (receiver excluded)."""
        params = [
            inspect.Parameter(
                p.name,
                _INSPECT_KINDS[p.kind],
                default=p.default if p.has_default else inspect.Parameter.empty,
                annotation=p.annotation if p.annotation is not None else inspect.Parameter.empty,
            )
            for p in self.parameters
        ]

        if self.returns.kind is ReturnKind.VOID:
            return_annotation: object = None
        elif self.returns.kind is ReturnKind.NEVER:
            return_annotation = "NoReturn"
        elif self.returns.annotation is not None:
            return_annotation = self.returns.annotation
        else:
            return_annotation = inspect.Signature.empty

        return inspect.Signature(params, return_annotation=return_annotation)
