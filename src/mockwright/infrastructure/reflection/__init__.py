"""Reflection adapters: live class -> domain descriptors."""

from mockwright.infrastructure.reflection.extractor import (
    TypeDescriptorExtractor,
    is_capability,
    qualified_name,
    resolve_target,
)

__all__ = [
    "TypeDescriptorExtractor",
    "is_capability",
    "qualified_name",
    "resolve_target",
]
