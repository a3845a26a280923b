"""
Pattern rubric definitions.

Each rubric dimension is described by data only: the pattern sources its
detector searches for, plus the feedback lines used when it is satisfied
or missing. Tuning the rubric means editing this module, never the
scoring code.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Dimension(str, Enum):
    """Rubric dimensions, in the order every view reports them."""

    ROLE = "Role"
    TASK = "Task"
    CONTEXT = "Context"
    FORMAT = "Format"


DIMENSION_ORDER: tuple[Dimension, ...] = (
    Dimension.ROLE,
    Dimension.TASK,
    Dimension.CONTEXT,
    Dimension.FORMAT,
)


class DimensionSpec(BaseModel):
    """
    Detection patterns and feedback for one rubric dimension.

    Patterns are regular expression sources matched anywhere in the
    lower-cased submission. They are substring searches, not whole-word
    matches, so "plan" also matches "planner".
    """

    model_config = ConfigDict(frozen=True)

    dimension: Dimension
    patterns: tuple[str, ...] = Field(..., description="Regex sources searched in lower-cased text")
    strength: str = Field(..., description="Affirmation shown when the dimension is present")
    secure_detail: str = Field(..., description="Grid detail when the dimension is present")
    missing_detail: str = Field(..., description="Grid remediation hint when it is missing")

    @property
    def label(self) -> str:
        return self.dimension.value


class PatternRubric(BaseModel):
    """An ordered set of dimension specs plus the shared feedback texts."""

    model_config = ConfigDict(frozen=True)

    title: str
    dimensions: tuple[DimensionSpec, ...]
    filler_strength: str = Field(
        ..., description="Appended to strengths when fewer than two dimensions are present"
    )

    def spec_for(self, dimension: Dimension) -> DimensionSpec:
        """Look up the spec for a dimension."""
        for spec in self.dimensions:
            if spec.dimension == dimension:
                return spec
        raise KeyError(dimension)


ROLE_PATTERNS = (r"role:", r"you are a", r"act as", r"as a ")

TASK_PATTERNS = (r"task:", r"give me", r"create", r"produce", r"generate", r"write", r"build", r"plan")

CONTEXT_PATTERNS = (
    r"context:",
    r"i am",
    r"we are",
    r"for me",
    r"for a",
    r"audience",
    r"staff",
    r"team",
    r"colleagues",
    r"workplace",
    r"social",
    r"event",
    r"budget",
    r"london",
    r"accessibility",
    r"dietary",
    r"remote",
)

FORMAT_PATTERNS = (
    r"format:",
    r"bullet",
    r"table",
    r"include",
    r"ensure",
    r"constraints",
    r"tone",
    r"structure",
    r"distance",
    r"fees",
    r"costs",
    r"how long",
)


DEFAULT_RUBRIC = PatternRubric(
    title="FEthink prompt formula",
    dimensions=(
        DimensionSpec(
            dimension=Dimension.ROLE,
            patterns=ROLE_PATTERNS,
            strength="You clearly set a role for the AI.",
            secure_detail="Role is present.",
            missing_detail="Add a role (e.g., tour guide / travel planner).",
        ),
        DimensionSpec(
            dimension=Dimension.TASK,
            patterns=TASK_PATTERNS,
            strength="You specify what you want the AI to do.",
            secure_detail="Task is present.",
            missing_detail="State what you want AI to produce.",
        ),
        DimensionSpec(
            dimension=Dimension.CONTEXT,
            patterns=CONTEXT_PATTERNS,
            strength="You include context about who/what the plan is for.",
            secure_detail="Context is present.",
            missing_detail="Add who it’s for / when / where / constraints.",
        ),
        DimensionSpec(
            dimension=Dimension.FORMAT,
            patterns=FORMAT_PATTERNS,
            strength="You set useful formatting constraints for the output.",
            secure_detail="Format constraints are present.",
            missing_detail="Add format details (bullets, costs, distances, timing, tone).",
        ),
    ),
    filler_strength="You’ve started shaping the prompt — add the missing stages for more control.",
)
