"""
Marking engine - the core classifier.

Maps submission text to a verdict: a gated verdict for short answers,
otherwise a full rubric verdict whose score, message, strengths, tags
and grid are all derived from one RubricSignal.
"""

import logging

from prompt_marker.config import Settings
from prompt_marker.content import TASK_CONTENT, TaskContent
from prompt_marker.marking.detectors import SignalDetector
from prompt_marker.marking.text import clamp_text, count_words
from prompt_marker.models import FullVerdict, GatedVerdict, GridRow, RubricSignal, Tag, Verdict
from prompt_marker.rubric import DEFAULT_RUBRIC, PatternRubric, RubricValidator

logger = logging.getLogger(__name__)


# Present-dimension count -> score. Anything below two scores 4.
SCORE_STEPS: dict[int, int] = {4: 10, 3: 8, 2: 6}
FLOOR_SCORE = 4

MAX_STRENGTHS = 3


class MarkingEngine:
    """
    Deterministic marker for the Role / Task / Context / Format formula.

    The engine holds no per-request state: the same text always yields
    the same verdict.
    """

    GATED_MESSAGE = (
        "Please add to your answer.\n"
        "This response is too short to demonstrate the full prompt structure.\n"
        "Aim for at least {min_words} words and include: role, task, context, and format."
    )

    EXCELLENT_MESSAGE = "Excellent – you’ve followed the prompt formula."
    GOOD_MESSAGE = "Good – try adding audience or tone to strengthen further."
    NEEDS_WORK_MESSAGE = "Needs improvement – use the formula: role, task, context, format."

    def __init__(
        self,
        settings: Settings,
        rubric: PatternRubric = DEFAULT_RUBRIC,
        content: TaskContent = TASK_CONTENT,
    ):
        """
        Initialize the marking engine.

        Args:
            settings: Configuration settings; supplies the word gate and size limit.
            rubric: Pattern rubric to detect dimensions with.
            content: Canned framework text and model answer.

        Raises:
            RubricValidationError: If the rubric is unusable.
        """
        RubricValidator().validate_or_raise(rubric)
        self._rubric = rubric
        self._content = content
        self._min_words = settings.min_words_gate
        self._max_chars = settings.max_answer_chars
        self._detector = SignalDetector(rubric)

    @property
    def min_words(self) -> int:
        return self._min_words

    @property
    def detector(self) -> SignalDetector:
        return self._detector

    def mark(self, submission: str) -> Verdict:
        """
        Mark a submission.

        Args:
            submission: Raw submission text. Oversized text is truncated.

        Returns:
            GatedVerdict if the submission has fewer than the gate's words,
            otherwise FullVerdict.
        """
        text = clamp_text(submission, self._max_chars).strip()
        word_count = count_words(text)

        if word_count < self._min_words:
            logger.debug("Gated submission: %d words (gate %d)", word_count, self._min_words)
            return GatedVerdict(
                word_count=word_count,
                message=self.GATED_MESSAGE.format(min_words=self._min_words),
            )

        signal = self._detector.detect(text.lower())
        logger.debug(
            "Marked submission: %d words, %d/4 dimensions present",
            word_count,
            signal.present_count,
        )
        return self._build_full_verdict(word_count, signal)

    def _build_full_verdict(self, word_count: int, signal: RubricSignal) -> FullVerdict:
        return FullVerdict(
            word_count=word_count,
            score=self.score_for(signal),
            message=self.message_for(signal),
            strengths=self._strengths(signal),
            tags=self._tags(signal),
            grid=self._grid(signal),
            framework_text=self._content.framework_text,
            model_answer=self._content.model_answer,
        )

    @staticmethod
    def score_for(signal: RubricSignal) -> int:
        """Step-map the present count to 4, 6, 8 or 10."""
        return SCORE_STEPS.get(signal.present_count, FLOOR_SCORE)

    @classmethod
    def message_for(cls, signal: RubricSignal) -> str:
        if signal.present_count == 4:
            return cls.EXCELLENT_MESSAGE
        if signal.present_count >= 2:
            return cls.GOOD_MESSAGE
        return cls.NEEDS_WORK_MESSAGE

    def _strengths(self, signal: RubricSignal) -> tuple[str, ...]:
        strengths = [
            spec.strength
            for spec, present in zip(self._rubric.dimensions, signal.flags())
            if present
        ]
        if len(strengths) < 2:
            strengths.append(self._rubric.filler_strength)
        return tuple(strengths[:MAX_STRENGTHS])

    def _tags(self, signal: RubricSignal) -> tuple[Tag, ...]:
        return tuple(
            Tag(label=spec.label, status="ok" if present else "bad")
            for spec, present in zip(self._rubric.dimensions, signal.flags())
        )

    def _grid(self, signal: RubricSignal) -> tuple[GridRow, ...]:
        return tuple(
            GridRow(
                label=spec.label,
                status="✓ Secure" if present else "✗ Missing",
                detail=spec.secure_detail if present else spec.missing_detail,
            )
            for spec, present in zip(self._rubric.dimensions, signal.flags())
        )
