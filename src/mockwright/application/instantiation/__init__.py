"""Mock instance creation."""

from mockwright.application.instantiation.builder import InstanceBuilder

__all__ = ["InstanceBuilder"]
