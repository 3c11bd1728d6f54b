"""
thinking_styles — Thinking Styles Assessment core
=================================================
Score aggregation and Ghana education/career recommendation pipeline for
the Kolb, Sternberg and Dual Process questionnaires.

Module map
----------
  models.py                 Enums, Question dataclass, Pydantic boundary models.
  errors.py                 ThinkingStylesError and its subclasses.
  config.py                 Settings loaded from .env.
  question_bank.py          Static questionnaires and strength labels.
  scoring.py                Response normaliser + per-category aggregator.
  profile_synthesizer.py    Primary/secondary style, strengths, weaknesses.
  education_mapper.py       SHS tracks, tertiary programmes, careers, tips.
  insights.py               Rule-based narrative insights.
  guardrails.py             R-01..R-06 / M-01..M-02 advisory checks.
  pipeline.py               ThinkingStylesPipeline service + report builder.

Pipeline order
--------------
  GuardrailsPipeline [R-01..R-06] → normalize_and_score (per assessment)
  → synthesize_profile → map_education → GuardrailsPipeline [M-01..M-02]
  → generate_insights → AssessmentReport
"""

from thinking_styles.education_mapper import map_education
from thinking_styles.errors import ThinkingStylesError, UnknownAssessmentType, UnknownQuestionId
from thinking_styles.insights import generate_insights
from thinking_styles.pipeline import ThinkingStylesPipeline
from thinking_styles.profile_synthesizer import synthesize_profile
from thinking_styles.scoring import normalize_and_score

__all__ = [
    "ThinkingStylesError",
    "ThinkingStylesPipeline",
    "UnknownAssessmentType",
    "UnknownQuestionId",
    "generate_insights",
    "map_education",
    "normalize_and_score",
    "synthesize_profile",
]

__version__ = "0.1.0"
