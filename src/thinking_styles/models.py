"""
Data models for the Thinking Styles assessment core.

Static configuration (questions) is held in frozen dataclasses; records that
cross the boundary to the web/persistence layer are Pydantic models so the
collaborator can validate and serialise them with ``model_dump()``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


# ─── Enumerations ────────────────────────────────────────────────────────────

class AssessmentType(str, Enum):
    """The three questionnaires administered by the platform."""
    KOLB         = "kolb"          # Kolb's Experiential Learning Cycle
    STERNBERG    = "sternberg"     # Sternberg's Triarchic Intelligence
    DUAL_PROCESS = "dual_process"  # Dual Process Theory (System 1 / System 2)


class Category(str, Enum):
    """Score category; every question belongs to exactly one."""
    # Kolb
    CONCRETE_EXPERIENCE        = "concrete_experience"
    REFLECTIVE_OBSERVATION     = "reflective_observation"
    ABSTRACT_CONCEPTUALIZATION = "abstract_conceptualization"
    ACTIVE_EXPERIMENTATION     = "active_experimentation"
    # Sternberg
    ANALYTICAL = "analytical"
    CREATIVE   = "creative"
    PRACTICAL  = "practical"
    # Dual process
    SYSTEM_1 = "system_1"   # fast, intuitive
    SYSTEM_2 = "system_2"   # slow, deliberate


class ThinkingStyle(str, Enum):
    """Recommendation bucket keys in the education catalogue."""
    ANALYTICAL    = "analytical"
    CREATIVE      = "creative"
    PRACTICAL     = "practical"
    CONVERGENT    = "convergent"
    DIVERGENT     = "divergent"
    ASSIMILATIVE  = "assimilative"
    ACCOMMODATIVE = "accommodative"


# category → mean score, one decimal, keys in declaration order
CategoryScores = dict[str, float]


# ─── Static question model ───────────────────────────────────────────────────

@dataclass(frozen=True)
class Question:
    """A single Likert item (answered 1–5)."""
    id:       str        # unique within its assessment type, e.g. "kolb_1"
    text:     str
    category: Category


# ─── Boundary models ─────────────────────────────────────────────────────────

class Response(BaseModel):
    """One answered question as submitted by the web layer."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    question_id: str = Field(alias="questionId", min_length=1)
    score:       int = Field(ge=1, le=5, strict=True, description="Likert score, 1=disagree … 5=agree")


class ThinkingStyleProfile(BaseModel):
    """
    Merged profile over every assessment a user has completed.
    Recomputed whenever that set changes; the caller may persist it.
    """
    primary_style:   str
    secondary_style: str
    strengths:       list[str] = Field(default_factory=list)
    weaknesses:      list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)


class EducationMapping(BaseModel):
    """Ghana education/career recommendations derived from a profile."""
    shs_tracks:               list[str] = Field(default_factory=list)   # ≤ 4
    tertiary_programs:        list[str] = Field(default_factory=list)   # ≤ 5
    career_suggestions:       list[str] = Field(default_factory=list)   # ≤ 8
    learning_recommendations: list[str] = Field(default_factory=list)   # ≤ 5

    def is_empty(self) -> bool:
        return not (
            self.shs_tracks or self.tertiary_programs
            or self.career_suggestions or self.learning_recommendations
        )


class ProfileInsights(BaseModel):
    """Rule-based narrative insights shown alongside the report."""
    learning_style:      str
    study_strategies:    list[str] = Field(default_factory=list)
    career_alignment:    list[str] = Field(default_factory=list)
    development_areas:   list[str] = Field(default_factory=list)
    communication_style: str


class AssessmentReport(BaseModel):
    """Everything the report page shows for one user, ready for ``model_dump_json()``."""
    country:              str
    category_scores:      dict[str, dict[str, float]]   # assessment type → CategoryScores
    profile:              ThinkingStyleProfile
    education:            EducationMapping
    program_institutions: dict[str, list[str]] = Field(default_factory=dict)
    insights:             ProfileInsights
    study_tips:           dict[str, list[str]] = Field(default_factory=dict)
