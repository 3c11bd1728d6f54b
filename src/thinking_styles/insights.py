"""
insights.py — Rule-based narrative insights
===========================================
Deterministic text insights computed from merged category means.  Every
rule fires only when its category is present; a category that was not
assessed is never treated as a low score.

Rules
-----
  learning_style       dominant Kolb category + runner-up
                       (fewer than two Kolb categories → "Mixed learning preferences")
  study_strategies     2 per Kolb/Sternberg category with mean > 4
  career_alignment     2 per Sternberg/Dual category with mean > 4
  development_areas    1 per Kolb/Sternberg category with mean < 3
  communication_style  system_1 > 4 → direct, else system_2 > 4 → thoughtful,
                       else adaptive
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from thinking_styles.models import Category, ProfileInsights


HIGH_THRESHOLD: float = 4.0   # strictly above
LOW_THRESHOLD:  float = 3.0   # strictly below

KOLB_CATEGORIES = (
    Category.CONCRETE_EXPERIENCE,
    Category.REFLECTIVE_OBSERVATION,
    Category.ABSTRACT_CONCEPTUALIZATION,
    Category.ACTIVE_EXPERIMENTATION,
)

MIXED_LEARNING_STYLE = "Mixed learning preferences"
BALANCED_STUDY       = "Use a balanced approach combining different study methods"
DIVERSE_CAREERS      = "Diverse career opportunities across multiple fields"
KEEP_DEVELOPING      = "Continue developing your existing strengths"


LEARNING_STYLE_DESCRIPTIONS: Mapping[Category, str] = MappingProxyType({
    Category.CONCRETE_EXPERIENCE:
        "Hands-on Learner - You learn best through direct experience and practical activities",
    Category.REFLECTIVE_OBSERVATION:
        "Reflective Observer - You prefer to watch, listen, and think before acting",
    Category.ABSTRACT_CONCEPTUALIZATION:
        "Theoretical Thinker - You excel at analyzing concepts and creating theories",
    Category.ACTIVE_EXPERIMENTATION:
        "Active Experimenter - You learn by doing and testing ideas in practice",
})

STUDY_STRATEGIES: Mapping[Category, tuple[str, str]] = MappingProxyType({
    Category.CONCRETE_EXPERIENCE: (
        "Use hands-on activities and real-world examples",
        "Practice with physical materials and experiments",
    ),
    Category.REFLECTIVE_OBSERVATION: (
        "Take time to reflect on what you've learned",
        "Discuss concepts with others before applying them",
    ),
    Category.ABSTRACT_CONCEPTUALIZATION: (
        "Focus on understanding underlying principles",
        "Create mind maps and conceptual frameworks",
    ),
    Category.ACTIVE_EXPERIMENTATION: (
        "Apply knowledge immediately to solve problems",
        "Engage in project-based learning",
    ),
    Category.ANALYTICAL: (
        "Break complex topics into smaller components",
        "Use logical reasoning and evidence-based study",
    ),
    Category.CREATIVE: (
        "Use creative visualization and imagination",
        "Explore multiple perspectives and solutions",
    ),
    Category.PRACTICAL: (
        "Connect learning to real-world applications",
        "Focus on practical skills and problem-solving",
    ),
})

CAREER_ALIGNMENTS: Mapping[Category, tuple[str, str]] = MappingProxyType({
    Category.ANALYTICAL: (
        "Research and Analysis roles",
        "STEM fields (Science, Technology, Engineering, Mathematics)",
    ),
    Category.CREATIVE: (
        "Creative and Design fields",
        "Innovation and Entrepreneurship",
    ),
    Category.PRACTICAL: (
        "Applied Sciences and Technology",
        "Business and Management",
    ),
    Category.SYSTEM_1: (
        "Fast-paced decision-making roles",
        "Emergency services and crisis management",
    ),
    Category.SYSTEM_2: (
        "Strategic planning and analysis",
        "Research and development",
    ),
})

DEVELOPMENT_AREAS: Mapping[Category, str] = MappingProxyType({
    Category.CONCRETE_EXPERIENCE:        "Hands-on learning and practical application",
    Category.REFLECTIVE_OBSERVATION:     "Reflective thinking and observation skills",
    Category.ABSTRACT_CONCEPTUALIZATION: "Theoretical understanding and conceptual thinking",
    Category.ACTIVE_EXPERIMENTATION:     "Active experimentation and practical testing",
    Category.ANALYTICAL:                 "Analytical thinking and logical reasoning",
    Category.CREATIVE:                   "Creative thinking and innovation",
    Category.PRACTICAL:                  "Practical application and real-world skills",
})

COMMUNICATION_DIRECT = (
    "Direct and decisive communication style - you prefer quick, clear exchanges"
)
COMMUNICATION_THOUGHTFUL = (
    "Thoughtful and analytical communication style - you prefer detailed, well-reasoned discussions"
)
COMMUNICATION_ADAPTIVE = (
    "Adaptive communication style - you adjust your approach based on the situation"
)


def _above(means: Mapping[str, float], category: Category) -> bool:
    value = means.get(category)
    return value is not None and value > HIGH_THRESHOLD


def _below(means: Mapping[str, float], category: Category) -> bool:
    value = means.get(category)
    return value is not None and value < LOW_THRESHOLD


def describe_learning_style(means: Mapping[str, float]) -> str:
    kolb = [(c, means[c]) for c in KOLB_CATEGORIES if c in means]
    if len(kolb) < 2:
        return MIXED_LEARNING_STYLE
    ranked = sorted(kolb, key=lambda item: -item[1])
    dominant  = LEARNING_STYLE_DESCRIPTIONS[ranked[0][0]]
    runner_up = LEARNING_STYLE_DESCRIPTIONS[ranked[1][0]].split(" - ")[0].lower()
    return f"{dominant} with secondary preference for {runner_up}"


def generate_insights(category_means: Mapping[str, float]) -> ProfileInsights:
    """
    Build ``ProfileInsights`` from merged category means.

    *category_means* is keyed by category name (``Category`` members or
    plain strings); unknown keys are ignored.
    """
    means = {getattr(k, "value", k): float(v) for k, v in category_means.items()}

    strategies = [s for c, pair in STUDY_STRATEGIES.items() if _above(means, c) for s in pair]
    careers    = [a for c, pair in CAREER_ALIGNMENTS.items() if _above(means, c) for a in pair]
    areas      = [area for c, area in DEVELOPMENT_AREAS.items() if _below(means, c)]

    if _above(means, Category.SYSTEM_1):
        communication = COMMUNICATION_DIRECT
    elif _above(means, Category.SYSTEM_2):
        communication = COMMUNICATION_THOUGHTFUL
    else:
        communication = COMMUNICATION_ADAPTIVE

    return ProfileInsights(
        learning_style=describe_learning_style(means),
        study_strategies=strategies or [BALANCED_STUDY],
        career_alignment=careers or [DIVERSE_CAREERS],
        development_areas=areas or [KEEP_DEVELOPING],
        communication_style=communication,
    )
