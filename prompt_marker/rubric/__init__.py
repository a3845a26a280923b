"""
Rubric Module.

Pattern data for the four rubric dimensions and its validation.
"""

from prompt_marker.rubric.dimensions import (
    DEFAULT_RUBRIC,
    DIMENSION_ORDER,
    Dimension,
    DimensionSpec,
    PatternRubric,
)
from prompt_marker.rubric.validator import RubricValidationError, RubricValidator

__all__ = [
    "DEFAULT_RUBRIC",
    "DIMENSION_ORDER",
    "Dimension",
    "DimensionSpec",
    "PatternRubric",
    "RubricValidationError",
    "RubricValidator",
]
