"""Surface synthesis: partition, normalization, merge."""

from mockwright.application.synthesis.normalization import DEFAULT_RULES
from mockwright.application.synthesis.synthesizer import SignatureSynthesizer

__all__ = [
    "DEFAULT_RULES",
    "SignatureSynthesizer",
]
