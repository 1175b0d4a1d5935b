"""Reporters: recorded calls -> text."""

from mockwright.application.reporters.call_history import CallHistoryConfig, CallHistoryReporter

__all__ = [
    "CallHistoryConfig",
    "CallHistoryReporter",
]
