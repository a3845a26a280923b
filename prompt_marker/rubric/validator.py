"""
Pattern rubric validation.

Checks that a pattern rubric can be used for marking: four dimensions
in the fixed order, usable patterns, and feedback for every outcome.
"""

import re

from prompt_marker.rubric.dimensions import DIMENSION_ORDER, DimensionSpec, PatternRubric


class RubricValidationError(Exception):
    """Raised when rubric validation fails."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        message = "Rubric validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        super().__init__(message)


class RubricValidator:
    """
    Validates pattern rubrics before an engine is built on them.

    Checks:
    1. Exactly the four dimensions, in Role, Task, Context, Format order
    2. Every dimension has at least one pattern
    3. Every pattern is a non-empty, compilable regular expression
    4. Every feedback text is non-blank
    """

    def validate(self, rubric: PatternRubric) -> tuple[bool, list[str]]:
        """
        Validate a rubric and return any issues found.

        Args:
            rubric: The rubric to validate.

        Returns:
            Tuple of (is_valid, list of issues).
        """
        issues: list[str] = []

        issues.extend(self._validate_order(rubric))

        for i, spec in enumerate(rubric.dimensions, start=1):
            issues.extend(self._validate_dimension(spec, i))

        if not rubric.filler_strength.strip():
            issues.append("Filler strength text is empty")

        return len(issues) == 0, issues

    def validate_or_raise(self, rubric: PatternRubric) -> None:
        """
        Validate a rubric and raise if invalid.

        Raises:
            RubricValidationError: If validation fails.
        """
        is_valid, issues = self.validate(rubric)
        if not is_valid:
            raise RubricValidationError(issues)

    def _validate_order(self, rubric: PatternRubric) -> list[str]:
        found = tuple(spec.dimension for spec in rubric.dimensions)
        if found == DIMENSION_ORDER:
            return []
        expected = ", ".join(d.value for d in DIMENSION_ORDER)
        actual = ", ".join(d.value for d in found) or "none"
        return [f"Dimensions must be exactly {expected} in that order (found: {actual})"]

    def _validate_dimension(self, spec: DimensionSpec, index: int) -> list[str]:
        issues: list[str] = []
        prefix = f"Dimension {index} ({spec.label})"

        if not spec.patterns:
            issues.append(f"{prefix}: No detection patterns")

        for pattern in spec.patterns:
            if not pattern:
                # an empty pattern would match every submission
                issues.append(f"{prefix}: Empty pattern")
                continue
            try:
                re.compile(pattern)
            except re.error as e:
                issues.append(f"{prefix}: Invalid pattern {pattern!r}: {e}")

        for field in ("strength", "secure_detail", "missing_detail"):
            if not getattr(spec, field).strip():
                issues.append(f"{prefix}: {field} text is empty")

        return issues
