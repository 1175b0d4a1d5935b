"""Signature synthesizer: target descriptors -> one merged surface."""

from __future__ import annotations

from typing import TYPE_CHECKING

from mockwright.application.synthesis.normalization import DEFAULT_RULES
from mockwright.domain.exceptions import MultipleBaseTypesError
from mockwright.domain.model.method_signature import MethodSignature
from mockwright.domain.model.return_contract import ReturnContract
from mockwright.domain.model.surface import SynthesizedSurface

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from mockwright.domain.model.normalization_rule import NormalizationRule
    from mockwright.domain.model.target import TargetDescriptor

# Every mock describes itself; targets may declare their own
_STRING_CONVERSIONS = tuple(
    MethodSignature(
        name=name,
        parameters=(),
        returns=ReturnContract.value("str", nullable=False),
        origin="builtins.object",
    )
    for name in ("__str__", "__repr__")
)


class SignatureSynthesizer:
    """Merges the method surfaces of a target set.

    Steps: partition -> normalize capabilities -> deduplicate -> merge.
    String conversions (__str__, __repr__) are always part of the surface.

    Args:
        describe: Builds a descriptor for capabilities added by normalization
        rules: Capability normalization rules
    """

    def __init__(
        self,
        describe: Callable[[type], TargetDescriptor],
        rules: Sequence[NormalizationRule] = DEFAULT_RULES,
    ) -> None:
        self._describe = describe
        self._rules = tuple(rules)

    def synthesize(self, targets: Sequence[TargetDescriptor]) -> SynthesizedSurface:
        """Build the surface a mock of ``targets`` must implement.

        Raises:
            MultipleBaseTypesError: If more than one concrete target is given
            ValueError: If targets is empty
        """
        if not targets:
            raise ValueError("at least one target is required")

        base, requested = self._partition(targets)
        capabilities = self._deduplicate(base, self._normalize(requested))

        mocked = base if base is not None else requested[0]
        eligible = base is not None and not any(
            t.constructor.is_final or t.constructor.declared_in_capability
            for t in (base, *capabilities)
        )

        return SynthesizedSurface(
            mocked_name=mocked.type_.__qualname__,
            base=base,
            capabilities=capabilities,
            methods=self._merge(base, capabilities),
            override_constructor=eligible,
            real_constructor=base is not None and base.constructor.exists,
        )

    def _partition(
        self, targets: Sequence[TargetDescriptor]
    ) -> tuple[TargetDescriptor | None, list[TargetDescriptor]]:
        base: TargetDescriptor | None = None
        capabilities: list[TargetDescriptor] = []
        seen: set[type] = set()

        for target in targets:
            if target.type_ in seen:
                continue
            seen.add(target.type_)

            if target.is_capability:
                capabilities.append(target)
            elif base is None:
                base = target
            else:
                raise MultipleBaseTypesError(base.name, target.name)

        return base, capabilities

    def _normalize(self, capabilities: list[TargetDescriptor]) -> list[TargetDescriptor]:
        """Apply every rule to each capability, keeping request order."""
        result: list[TargetDescriptor] = []
        for capability in capabilities:
            expanded = [capability]
            for rule in self._rules:
                if rule.applies_to(capability.type_):
                    expanded = [
                        capability if t is capability.type_ else self._describe(t)
                        for t in rule.apply(capability.type_)
                    ]
                    break
            result.extend(expanded)
        return result

    def _deduplicate(
        self, base: TargetDescriptor | None, capabilities: list[TargetDescriptor]
    ) -> tuple[TargetDescriptor, ...]:
        """First occurrence wins; capabilities already inherited are dropped.

        An inherited capability stays reachable through the subclass, and
        listing it again as a base could make the MRO inconsistent.
        """
        unique: list[TargetDescriptor] = []
        for capability in capabilities:
            if all(c.type_ is not capability.type_ for c in unique):
                unique.append(capability)

        others = [c.type_ for c in unique]
        if base is not None:
            others.append(base.type_)

        return tuple(
            c for c in unique if not any(o is not c.type_ and c.type_ in o.__mro__ for o in others)
        )

    def _merge(
        self, base: TargetDescriptor | None, capabilities: tuple[TargetDescriptor, ...]
    ) -> tuple[MethodSignature, ...]:
        """Base methods first, then capabilities in order; first name wins."""
        targets = capabilities if base is None else (base, *capabilities)
        methods: dict[str, MethodSignature] = {}
        for target in targets:
            for method in target.methods:
                methods.setdefault(method.name, method)
        for method in _STRING_CONVERSIONS:
            methods.setdefault(method.name, method)
        return tuple(methods.values())
