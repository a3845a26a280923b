"""
Marking Module.

Deterministic detection of the four rubric dimensions and verdict building.
"""

from prompt_marker.marking.detectors import DimensionDetector, SignalDetector
from prompt_marker.marking.engine import MarkingEngine
from prompt_marker.marking.text import clamp_text, count_words

__all__ = [
    "DimensionDetector",
    "MarkingEngine",
    "SignalDetector",
    "clamp_text",
    "count_words",
]
