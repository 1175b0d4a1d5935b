"""Mock class assembly and caching."""

from mockwright.application.assembly.assembler import GENERATED_MODULE, TypeAssembler
from mockwright.application.assembly.cache import MockClassCache, generate_class_name
from mockwright.application.assembly.marker import MockObject, is_mock, is_mock_class

__all__ = [
    "GENERATED_MODULE",
    "MockClassCache",
    "MockObject",
    "TypeAssembler",
    "generate_class_name",
    "is_mock",
    "is_mock_class",
]
