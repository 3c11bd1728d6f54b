"""Exceptions raised by the scoring pipeline."""

from __future__ import annotations


class ThinkingStylesError(ValueError):
    """Base class for errors surfaced to the web layer."""


class UnknownAssessmentType(ThinkingStylesError):
    """The requested assessment type has no question table."""

    def __init__(self, assessment_type: object):
        self.assessment_type = assessment_type
        super().__init__(f"Unknown assessment type: {assessment_type!r}")


class UnknownQuestionId(ThinkingStylesError):
    """A response references a question that is not in the bank (strict mode only)."""

    def __init__(self, assessment_type: str, question_id: str):
        self.assessment_type = assessment_type
        self.question_id     = question_id
        super().__init__(
            f"Question {question_id!r} does not belong to assessment {assessment_type!r}"
        )
