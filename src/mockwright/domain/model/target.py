"""Target type descriptor."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from mockwright.domain.model.enums import TargetKind

if TYPE_CHECKING:
    from mockwright.domain.model.method_signature import MethodSignature


@dataclass(frozen=True, slots=True)
class ConstructorInfo:
    """Constructor facts needed for constructor-override eligibility.

    Attributes:
        declared_by: Qualified name of the class whose __init__ resolves,
            None when only object.__init__ is inherited
        is_final: Resolved __init__ decorated with typing.final
        declared_in_capability: Resolved __init__ comes from a capability, or
            its declaring class inherits one from a capability ancestor
    """

    declared_by: str | None = None
    is_final: bool = False
    declared_in_capability: bool = False

    @property
    def exists(self) -> bool:
        """A real (non-object) constructor is present."""
        return self.declared_by is not None


@dataclass(frozen=True, slots=True)
class TargetDescriptor:
    """Normalized description of one class a mock must satisfy.

    Immutable once read. Final/readonly flags are informational here:
    the extractor refuses such targets before building a descriptor.

    Attributes:
        name: Qualified name (module.QualName)
        type_: The class object
        kind: CONCRETE or CAPABILITY
        methods: Overridable methods, most-derived first, each name once
        parent: Qualified name of the first concrete ancestor, None if none
        capabilities: Qualified names of all capability ancestors
        constructor: Constructor facts
        is_final: Marked final
        is_readonly: Marked readonly (frozen dataclass)
    """

    name: str
    type_: type
    kind: TargetKind
    methods: tuple[MethodSignature, ...] = ()
    parent: str | None = None
    capabilities: frozenset[str] = field(default_factory=frozenset)
    constructor: ConstructorInfo = field(default_factory=ConstructorInfo)
    is_final: bool = False
    is_readonly: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("target name must not be empty")

        if not isinstance(self.type_, type):
            raise TypeError(f"type_ must be a class, got {type(self.type_).__name__}")

        names = [m.name for m in self.methods]
        if len(names) != len(set(names)):
            raise ValueError(f"target '{self.name}' lists a method more than once")

    @property
    def is_capability(self) -> bool:
        return self.kind is TargetKind.CAPABILITY

    @property
    def short_name(self) -> str:
        """Class name without module and outer classes."""
        return self.type_.__name__

    def method(self, name: str) -> MethodSignature | None:
        """Find method by name."""
        for method in self.methods:
            if method.name == name:
                return method
        return None
