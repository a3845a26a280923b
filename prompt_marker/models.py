"""
Pydantic models for the Prompt Marker system.

These models define the strict schemas for:
- Rubric signals detected in a submission
- Tags and grid rows derived from those signals
- Gated and full verdicts returned to callers
- Session token payloads and task metadata

Wire-facing models serialize with camelCase keys (``wordCount``,
``frameworkText``...) and are built in Python with snake_case names.
"""

from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt, computed_field
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Base for models that are returned to HTTP callers."""

    model_config = ConfigDict(
        frozen=True,
        strict=True,
        alias_generator=to_camel,
        populate_by_name=True,
        protected_namespaces=(),
    )

    def to_wire(self) -> dict:
        """Serialize with camelCase keys, as sent over the wire."""
        return self.model_dump(mode="json", by_alias=True)


# ==============================================================================
# Rubric Signal
# ==============================================================================


class RubricSignal(BaseModel):
    """
    The four detector outcomes for one submission.

    Score, message, strengths, tags and grid are all projections
    of this object, so they can never disagree with each other.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    has_role: bool
    has_task: bool
    has_context: bool
    has_format: bool

    def flags(self) -> tuple[bool, bool, bool, bool]:
        """Detector outcomes in the fixed Role, Task, Context, Format order."""
        return (self.has_role, self.has_task, self.has_context, self.has_format)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def present_count(self) -> int:
        """Number of satisfied dimensions (0-4)."""
        return sum(self.flags())


# ==============================================================================
# Verdict Models
# ==============================================================================


class Tag(WireModel):
    """Binary status of one rubric dimension."""

    label: str
    status: Literal["ok", "bad"]


class GridRow(WireModel):
    """One row of the feedback grid: status plus a short detail line."""

    label: str
    status: Literal["✓ Secure", "✗ Missing"]
    detail: str = Field(..., min_length=1)


class GatedVerdict(WireModel):
    """
    Minimal verdict for submissions below the word gate.

    Carries no score and no rubric feedback of any kind.
    """

    gated: Literal[True] = True
    word_count: StrictInt = Field(..., ge=0)
    message: str = Field(..., min_length=1)


class FullVerdict(WireModel):
    """Complete rubric verdict for submissions at or above the word gate."""

    gated: Literal[False] = False
    word_count: StrictInt = Field(..., ge=0)
    score: Literal[4, 6, 8, 10]
    message: str = Field(..., min_length=1)
    strengths: tuple[str, ...] = Field(..., min_length=1, max_length=3)
    tags: tuple[Tag, ...] = Field(..., min_length=4, max_length=4)
    grid: tuple[GridRow, ...] = Field(..., min_length=4, max_length=4)
    framework_text: str = Field(..., min_length=1)
    model_answer: str = Field(..., min_length=1)


Verdict = Union[GatedVerdict, FullVerdict]


# ==============================================================================
# Session Models
# ==============================================================================


class SessionPayload(BaseModel):
    """Signed content of a session token."""

    model_config = ConfigDict(frozen=True, strict=True)

    exp: StrictInt = Field(..., description="Expiry instant in epoch seconds")

    def is_live(self, now: int) -> bool:
        """A session is live strictly before its expiry instant."""
        return now < self.exp


# ==============================================================================
# Task Metadata
# ==============================================================================


class TaskConfig(WireModel):
    """Read-only task metadata shown to learners before they submit."""

    question_text: str
    template_text: str
    target_words: str
    min_words_gate: StrictInt = Field(..., ge=1)
    max_words: StrictInt = Field(..., ge=1)
    course_back_url: str = ""
    next_lesson_url: str = ""
