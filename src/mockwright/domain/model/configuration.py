"""Mock generation configuration."""

from __future__ import annotations

from dataclasses import dataclass, field

from mockwright.domain.model.enums import DefaultAnswerMode
from mockwright.domain.model.normalization_rule import NormalizationRule

DEFAULT_DYNAMIC_DISPATCH_METHODS = frozenset({"__getattr__", "_dispatch"})


@dataclass(frozen=True, slots=True)
class MockwrightConfig:
    """Configuration DTO.

    Immutable configuration object with FAIL-FIRST validation.
    None = use built-in defaults.

    Attributes:
        default_answer: Answer mode for unstubbed calls.
        dynamic_dispatch_methods: Methods implementing name-based dispatch
            (first argument is the dynamic method name). Calls to them are
            also recorded on the dynamic channel.
        normalization_rules: Capability normalization rules. None = defaults.
        suppress_warnings_for: Qualified target names whose mock classes are
            assembled with all warnings ignored (legacy compatibility hook).
    """

    default_answer: DefaultAnswerMode = DefaultAnswerMode.SMART
    dynamic_dispatch_methods: frozenset[str] = DEFAULT_DYNAMIC_DISPATCH_METHODS
    normalization_rules: tuple[NormalizationRule, ...] | None = None
    suppress_warnings_for: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.default_answer, DefaultAnswerMode):
            raise TypeError(
                f"default_answer must be DefaultAnswerMode, got {type(self.default_answer).__name__}"
            )

        for name in self.dynamic_dispatch_methods:
            if not name.isidentifier():
                raise ValueError(f"dynamic dispatch method {name!r} is not an identifier")

        for target in self.suppress_warnings_for:
            if not target:
                raise ValueError("suppress_warnings_for must not contain empty names")
