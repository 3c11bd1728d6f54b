"""
question_bank.py — Static questionnaires and per-category labels
=================================================================
Holds the three Likert questionnaires (12 items each) and the
human-readable strength labels used by the profile synthesizer.

The tables are wrapped in a frozen ``QuestionBank`` that is built once by
``default_question_bank()`` and passed to every pipeline function.  Nothing
in this module is mutated after import; callers that need a different bank
(tests, a translated questionnaire) construct their own ``QuestionBank``.

Public API
----------
  QuestionBank                  frozen, read-only question/label registry
  default_question_bank()       → QuestionBank (cached singleton)
  KOLB_QUESTIONS, STERNBERG_QUESTIONS, DUAL_PROCESS_QUESTIONS
  STRENGTH_LABELS               category → tuple of labels
  PROFILE_RECOMMENDATIONS       category → recommendations for a strong score
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache
from types import MappingProxyType
from typing import Mapping, Union

from thinking_styles.errors import UnknownAssessmentType
from thinking_styles.models import AssessmentType, Category, Question


# ─── Kolb's Experiential Learning Cycle ──────────────────────────────────────

KOLB_QUESTIONS: tuple[Question, ...] = (
    Question("kolb_1",  "I learn best when I can try things out and experiment with new ideas.",
             Category.CONCRETE_EXPERIENCE),
    Question("kolb_2",  "I prefer to observe and reflect before taking action.",
             Category.REFLECTIVE_OBSERVATION),
    Question("kolb_3",  "I like to analyze information and create theories to understand concepts.",
             Category.ABSTRACT_CONCEPTUALIZATION),
    Question("kolb_4",  "I learn most effectively when I can apply knowledge to solve real problems.",
             Category.ACTIVE_EXPERIMENTATION),
    Question("kolb_5",  "I enjoy hands-on activities and learning through direct experience.",
             Category.CONCRETE_EXPERIENCE),
    Question("kolb_6",  "I need time to think about what I have learned before moving forward.",
             Category.REFLECTIVE_OBSERVATION),
    Question("kolb_7",  "I prefer structured learning with clear theories and frameworks.",
             Category.ABSTRACT_CONCEPTUALIZATION),
    Question("kolb_8",  "I like to test ideas and see immediate results from my actions.",
             Category.ACTIVE_EXPERIMENTATION),
    Question("kolb_9",  "I learn better when I can connect new information to my personal experiences.",
             Category.CONCRETE_EXPERIENCE),
    Question("kolb_10", "I prefer to watch others and learn from their experiences.",
             Category.REFLECTIVE_OBSERVATION),
    Question("kolb_11", "I enjoy reading and studying theoretical concepts.",
             Category.ABSTRACT_CONCEPTUALIZATION),
    Question("kolb_12", "I learn best by doing and making things happen.",
             Category.ACTIVE_EXPERIMENTATION),
)


# ─── Sternberg's Triarchic Theory ────────────────────────────────────────────

STERNBERG_QUESTIONS: tuple[Question, ...] = (
    Question("sternberg_1",  "I excel at analyzing problems and finding logical solutions.",
             Category.ANALYTICAL),
    Question("sternberg_2",  "I enjoy coming up with creative and original ideas.",
             Category.CREATIVE),
    Question("sternberg_3",  "I am good at applying knowledge to practical situations.",
             Category.PRACTICAL),
    Question("sternberg_4",  "I prefer structured problems with clear right and wrong answers.",
             Category.ANALYTICAL),
    Question("sternberg_5",  "I like to think outside the box and explore new possibilities.",
             Category.CREATIVE),
    Question("sternberg_6",  "I can adapt well to different environments and situations.",
             Category.PRACTICAL),
    Question("sternberg_7",  "I enjoy breaking down complex problems into smaller parts.",
             Category.ANALYTICAL),
    Question("sternberg_8",  "I am comfortable with ambiguity and uncertainty.",
             Category.CREATIVE),
    Question("sternberg_9",  "I can easily relate theoretical concepts to real-world applications.",
             Category.PRACTICAL),
    Question("sternberg_10", "I prefer to work with facts, data, and evidence.",
             Category.ANALYTICAL),
    Question("sternberg_11", "I enjoy brainstorming and generating multiple solutions.",
             Category.CREATIVE),
    Question("sternberg_12", "I am good at reading people and understanding social dynamics.",
             Category.PRACTICAL),
)


# ─── Dual Process Theory ─────────────────────────────────────────────────────

DUAL_PROCESS_QUESTIONS: tuple[Question, ...] = (
    Question("dual_1",  "I make decisions quickly based on my first impression.",
             Category.SYSTEM_1),
    Question("dual_2",  "I carefully analyze all available information before making decisions.",
             Category.SYSTEM_2),
    Question("dual_3",  "I trust my gut feelings when making important choices.",
             Category.SYSTEM_1),
    Question("dual_4",  "I prefer to take time to think through problems systematically.",
             Category.SYSTEM_2),
    Question("dual_5",  "I often rely on patterns and past experiences to make decisions.",
             Category.SYSTEM_1),
    Question("dual_6",  "I like to gather detailed information and consider all options.",
             Category.SYSTEM_2),
    Question("dual_7",  "I make decisions based on what feels right in the moment.",
             Category.SYSTEM_1),
    Question("dual_8",  "I prefer to use logical reasoning and evidence in decision-making.",
             Category.SYSTEM_2),
    Question("dual_9",  "I can make quick judgments about people and situations.",
             Category.SYSTEM_1),
    Question("dual_10", "I like to weigh pros and cons before making important decisions.",
             Category.SYSTEM_2),
    Question("dual_11", "I often go with my initial reaction to problems.",
             Category.SYSTEM_1),
    Question("dual_12", "I prefer to research and analyze before taking action.",
             Category.SYSTEM_2),
)


# ─── Strength labels ─────────────────────────────────────────────────────────
# Weaknesses reuse these as "Developing <label>".

STRENGTH_LABELS: Mapping[Category, tuple[str, ...]] = MappingProxyType({
    Category.CONCRETE_EXPERIENCE:        ("Hands-on learning", "Practical application"),
    Category.REFLECTIVE_OBSERVATION:     ("Critical thinking", "Reflective analysis"),
    Category.ABSTRACT_CONCEPTUALIZATION: ("Theoretical understanding", "Conceptual thinking"),
    Category.ACTIVE_EXPERIMENTATION:     ("Problem-solving", "Innovation"),
    Category.ANALYTICAL:                 ("Logical reasoning", "Systematic analysis"),
    Category.CREATIVE:                   ("Original thinking", "Idea generation"),
    Category.PRACTICAL:                  ("Real-world problem solving", "Adaptability"),
    Category.SYSTEM_1:                   ("Intuitive judgement", "Quick decision-making"),
    Category.SYSTEM_2:                   ("Deliberate reasoning", "Evidence-based decision-making"),
})


# ─── Profile recommendations ─────────────────────────────────────────────────
# One study recommendation per strong Kolb category; other categories have none.

PROFILE_RECOMMENDATIONS: Mapping[Category, tuple[str, ...]] = MappingProxyType({
    Category.CONCRETE_EXPERIENCE:        ("Focus on experiential learning activities",),
    Category.REFLECTIVE_OBSERVATION:     ("Engage in reflective journaling",),
    Category.ABSTRACT_CONCEPTUALIZATION: ("Study theoretical frameworks",),
    Category.ACTIVE_EXPERIMENTATION:     ("Participate in project-based learning",),
})


AssessmentTypeLike = Union[AssessmentType, str]


@dataclass(frozen=True)
class QuestionBank:
    """
    Read-only registry of questionnaires and category labels.

    ``questions`` preserves declaration order; that order defines the
    category order used for score output and tie-breaking downstream.
    """
    questions:       Mapping[AssessmentType, tuple[Question, ...]]
    strength_labels: Mapping[Category, tuple[str, ...]] = field(default_factory=lambda: STRENGTH_LABELS)
    recommendations: Mapping[Category, tuple[str, ...]] = field(default_factory=lambda: PROFILE_RECOMMENDATIONS)

    def assessment_types(self) -> list[AssessmentType]:
        return list(self.questions)

    def resolve_type(self, value: AssessmentTypeLike) -> AssessmentType:
        """Coerce *value* to an ``AssessmentType`` present in this bank."""
        try:
            assessment_type = AssessmentType(value)
        except (ValueError, TypeError):
            raise UnknownAssessmentType(value) from None
        if assessment_type not in self.questions:
            raise UnknownAssessmentType(value)
        return assessment_type

    def questions_for(self, value: AssessmentTypeLike) -> tuple[Question, ...]:
        return self.questions[self.resolve_type(value)]

    def question_index(self, value: AssessmentTypeLike) -> Mapping[str, Question]:
        """question id → Question for one assessment type."""
        return MappingProxyType({q.id: q for q in self.questions_for(value)})

    def categories_for(self, value: AssessmentTypeLike) -> list[Category]:
        """Categories of one assessment type, in first-declared order."""
        return list(dict.fromkeys(q.category for q in self.questions_for(value)))

    def declared_categories(self) -> list[Category]:
        """Every category across all assessment types, in declaration order."""
        return list(dict.fromkeys(
            q.category for questions in self.questions.values() for q in questions
        ))

    def recommendations_for(self, category: str) -> tuple[str, ...]:
        return self.recommendations.get(category, ())

    def labels_for(self, category: str) -> tuple[str, ...]:
        labels = self.strength_labels.get(category)
        if labels:
            return labels
        # Unlabelled category: fall back to its name, e.g. "system_1" → "System 1"
        name = getattr(category, "value", category)
        return (str(name).replace("_", " ").capitalize(),)


@lru_cache(maxsize=None)
def default_question_bank() -> QuestionBank:
    """The production question bank; built once per process."""
    return QuestionBank(
        questions=MappingProxyType({
            AssessmentType.KOLB:         KOLB_QUESTIONS,
            AssessmentType.STERNBERG:    STERNBERG_QUESTIONS,
            AssessmentType.DUAL_PROCESS: DUAL_PROCESS_QUESTIONS,
        }),
    )
