"""
Rubric dimension detectors.

A detector is a pure predicate over lower-cased submission text: it is
true when any of its dimension's patterns occurs anywhere in the text.
Detectors never look at each other's results.
"""

import re

from prompt_marker.models import RubricSignal
from prompt_marker.rubric import DIMENSION_ORDER, Dimension, DimensionSpec, PatternRubric


class DimensionDetector:
    """Substring pattern detector for one rubric dimension."""

    def __init__(self, spec: DimensionSpec):
        self.spec = spec
        self._patterns: tuple[re.Pattern[str], ...] = tuple(re.compile(p) for p in spec.patterns)

    @property
    def dimension(self) -> Dimension:
        return self.spec.dimension

    def matches(self, normalized: str) -> bool:
        """Return True if any pattern occurs in the lower-cased text."""
        return any(pattern.search(normalized) for pattern in self._patterns)


class SignalDetector:
    """Runs the four dimension detectors and collects a RubricSignal."""

    def __init__(self, rubric: PatternRubric):
        self._detectors = {
            spec.dimension: DimensionDetector(spec) for spec in rubric.dimensions
        }

    def detector(self, dimension: Dimension) -> DimensionDetector:
        return self._detectors[dimension]

    def detect(self, normalized: str) -> RubricSignal:
        """
        Detect all four dimensions in lower-cased text.

        Args:
            normalized: Trimmed, lower-cased submission text.

        Returns:
            RubricSignal with one boolean per dimension.
        """
        found = {d: self._detectors[d].matches(normalized) for d in DIMENSION_ORDER}
        return RubricSignal(
            has_role=found[Dimension.ROLE],
            has_task=found[Dimension.TASK],
            has_context=found[Dimension.CONTEXT],
            has_format=found[Dimension.FORMAT],
        )
