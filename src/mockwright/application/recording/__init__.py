"""Call recording."""

from mockwright.application.recording.recorder import CallRecorder, next_sequence

__all__ = ["CallRecorder", "next_sequence"]
