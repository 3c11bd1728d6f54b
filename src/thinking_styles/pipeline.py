"""
pipeline.py — ThinkingStylesPipeline service
============================================
One immutable object that wires the question bank, education catalogue and
normaliser mode together, so callers never touch module-level tables.

Pipeline order
--------------
  raw responses ─► normalize_and_score  (per assessment type)
               ─► synthesize_profile    (all completed assessments)
               ─► map_education         (primary style)
               ─► generate_insights     (merged category means)
               ─► AssessmentReport

Usage::

    pipeline = ThinkingStylesPipeline.from_settings()
    kolb     = pipeline.normalize_and_score("kolb", responses)
    report   = pipeline.build_report({"kolb": kolb, "sternberg": sternberg})
    payload  = report.model_dump_json()
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Optional

from thinking_styles.config import Settings, get_settings
from thinking_styles.education_mapper import (
    GHANA_STUDY_TIPS,
    EducationCatalogue,
    EducationMapper,
)
from thinking_styles.errors import ThinkingStylesError
from thinking_styles.insights import generate_insights
from thinking_styles.models import (
    AssessmentReport,
    CategoryScores,
    EducationMapping,
    ProfileInsights,
    ThinkingStyleProfile,
)
from thinking_styles.profile_synthesizer import ProfileSynthesizer, merge_category_scores
from thinking_styles.question_bank import AssessmentTypeLike, QuestionBank, default_question_bank
from thinking_styles.scoring import normalize_and_score

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ThinkingStylesPipeline:
    bank:      QuestionBank       = field(default_factory=default_question_bank)
    catalogue: EducationCatalogue = field(default_factory=EducationCatalogue)
    strict:    bool               = False
    country:   str                = "Ghana"

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "ThinkingStylesPipeline":
        settings = settings or get_settings()
        return cls(strict=settings.scoring.strict_ids, country=settings.report.country)

    # ── Stages ──────────────────────────────────────────────────────────────

    def normalize_and_score(self, assessment_type: AssessmentTypeLike, responses: Iterable[Any]) -> CategoryScores:
        return normalize_and_score(assessment_type, responses, bank=self.bank, strict=self.strict)

    def synthesize_profile(self, category_scores_list: Iterable[Mapping[str, float]]) -> ThinkingStyleProfile:
        return ProfileSynthesizer(self.bank).synthesize(category_scores_list)

    def map_education(self, primary_style: str, secondary_style: str = "") -> EducationMapping:
        return EducationMapper(self.catalogue).map(primary_style, secondary_style)

    def generate_insights(self, category_scores_list: Iterable[Mapping[str, float]]) -> ProfileInsights:
        return generate_insights(merge_category_scores(category_scores_list))

    # ── End to end ──────────────────────────────────────────────────────────

    def score_submissions(
        self, submissions: Mapping[AssessmentTypeLike, Iterable[Any]],
    ) -> dict[str, CategoryScores]:
        """Score several raw submissions, keyed by assessment type value."""
        return {
            self.bank.resolve_type(a_type).value: self.normalize_and_score(a_type, responses)
            for a_type, responses in submissions.items()
        }

    def build_report(self, scores_by_type: Mapping[AssessmentTypeLike, Mapping[str, float]]) -> AssessmentReport:
        """
        Assemble the full report from already-scored assessments.

        Parameters
        ----------
        scores_by_type : assessment type → CategoryScores, in completion order

        Raises
        ------
        ThinkingStylesError    if no assessment has been completed
        UnknownAssessmentType  if a key is not a known assessment type
        """
        if not scores_by_type:
            raise ThinkingStylesError("No assessments completed")

        scores = {
            self.bank.resolve_type(a_type).value: {
                getattr(c, "value", c): float(mean) for c, mean in cat_scores.items()
            }
            for a_type, cat_scores in scores_by_type.items()
        }
        score_list = list(scores.values())

        profile   = self.synthesize_profile(score_list)
        mapper    = EducationMapper(self.catalogue)
        education = mapper.map(profile.primary_style, profile.secondary_style)

        logger.info(
            "Report built from %s: primary=%s secondary=%s, %d programme(s)",
            ", ".join(scores), profile.primary_style or "-",
            profile.secondary_style or "-", len(education.tertiary_programs),
        )
        return AssessmentReport(
            country=self.country,
            category_scores=scores,
            profile=profile,
            education=education,
            program_institutions=mapper.institutions_for(education.tertiary_programs),
            insights=self.generate_insights(score_list),
            study_tips={k: list(v) for k, v in GHANA_STUDY_TIPS.items()},
        )

    def assess(self, submissions: Mapping[AssessmentTypeLike, Iterable[Any]]) -> AssessmentReport:
        """Score raw submissions and build the report in one call."""
        return self.build_report(self.score_submissions(submissions))
