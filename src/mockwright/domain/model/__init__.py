"""Domain model entities."""

from mockwright.domain.model.configuration import MockwrightConfig
from mockwright.domain.model.enums import (
    DefaultAnswerMode,
    DispatchKind,
    ParameterKind,
    ReturnKind,
    TargetKind,
    Visibility,
)
from mockwright.domain.model.method_signature import MethodSignature
from mockwright.domain.model.normalization_rule import NormalizationRule
from mockwright.domain.model.parameter import NO_DEFAULT, Parameter
from mockwright.domain.model.recorded_call import CallArguments, RecordedCall
from mockwright.domain.model.ref import Ref
from mockwright.domain.model.return_contract import ReturnContract
from mockwright.domain.model.surface import SynthesizedSurface
from mockwright.domain.model.target import ConstructorInfo, TargetDescriptor

__all__ = [
    "NO_DEFAULT",
    "CallArguments",
    "ConstructorInfo",
    "DefaultAnswerMode",
    "DispatchKind",
    "MethodSignature",
    "MockwrightConfig",
    "NormalizationRule",
    "Parameter",
    "ParameterKind",
    "RecordedCall",
    "Ref",
    "ReturnContract",
    "ReturnKind",
    "SynthesizedSurface",
    "TargetDescriptor",
    "TargetKind",
    "Visibility",
]
