"""
education_mapper.py — Ghana education & career recommendation tables
=====================================================================
Maps a profile's primary style onto SHS tracks, tertiary programmes,
careers and learning tips.

Lookup is by exact category name: each ``Category`` maps to zero or more
``ThinkingStyle`` buckets, and each bucket carries four static lists.
Matched buckets are concatenated, de-duplicated (first occurrence wins)
and capped.  A style with no bucket (``system_1``, ``system_2`` or any
unknown string) yields an empty mapping; the web layer shows its own
generic fallback in that case.

  Category                     Bucket
  ---------------------------  -------------
  analytical                   ANALYTICAL
  creative                     CREATIVE
  practical                    PRACTICAL
  concrete_experience          CONVERGENT
  reflective_observation       DIVERGENT
  abstract_conceptualization   ASSIMILATIVE
  active_experimentation       ACCOMMODATIVE

Caps: 4 SHS tracks · 5 tertiary programmes · 8 careers · 5 learning tips.

Public API
----------
  EducationCatalogue            frozen tables (inject a custom one in tests)
  EducationMapper.map(primary, secondary)      → EducationMapping
  EducationMapper.institutions_for(programs)   → dict[programme, institutions]
  map_education(primary, secondary, catalogue=None)
  GHANA_STUDY_TIPS
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from thinking_styles.models import Category, EducationMapping, ThinkingStyle

logger = logging.getLogger(__name__)


# ─── Ghana SHS tracks (Senior High School) ──────────────────────────────────

GHANA_SHS_TRACKS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "SCIENCE": (
        "General Science",
        "Agricultural Science",
        "Technical Science",
        "Home Economics",
    ),
    "BUSINESS": (
        "Business (Accounting)",
        "Business (Management)",
        "Business (Secretarial)",
        "Business (Marketing)",
    ),
    "ARTS": (
        "General Arts",
        "Visual Arts",
        "Music",
        "Drama",
    ),
    "TECHNICAL": (
        "Technical (Engineering)",
        "Technical (Construction)",
        "Technical (Electronics)",
        "Technical (Automotive)",
    ),
    "VOCATIONAL": (
        "Agricultural Science",
        "Home Economics",
        "Technical Skills",
        "Business Skills",
    ),
})


# ─── Ghana tertiary institutions and their programmes ────────────────────────

GHANA_TERTIARY_INSTITUTIONS: Mapping[str, Mapping[str, tuple[str, ...]]] = MappingProxyType({
    "UNIVERSITIES": MappingProxyType({
        "University of Ghana": (
            "Medicine and Surgery", "Law", "Engineering", "Business Administration",
            "Computer Science", "Psychology", "Education", "Agriculture",
        ),
        "Kwame Nkrumah University of Science and Technology": (
            "Engineering (Civil, Mechanical, Electrical)", "Architecture", "Pharmacy",
            "Medicine", "Computer Science", "Agriculture", "Business Administration",
        ),
        "University of Cape Coast": (
            "Education", "Psychology", "Business Administration",
            "Computer Science", "Agriculture", "Nursing",
        ),
        "University for Development Studies": (
            "Medicine", "Agriculture", "Development Studies",
            "Business Administration", "Computer Science",
        ),
    }),
    "TECHNICAL_UNIVERSITIES": MappingProxyType({
        "Accra Technical University": (
            "Engineering Technology", "Business Administration", "Computer Science",
            "Fashion Design", "Hospitality Management",
        ),
        "Kumasi Technical University": (
            "Engineering Technology", "Business Administration",
            "Computer Science", "Agriculture Technology",
        ),
        "Cape Coast Technical University": (
            "Engineering Technology", "Business Administration",
            "Computer Science", "Agriculture Technology",
        ),
    }),
    "COLLEGES": MappingProxyType({
        "Ghana Institute of Management and Public Administration": (
            "Public Administration", "Business Administration",
            "Computer Science", "Development Studies",
        ),
        "Ghana Technology University College": (
            "Computer Science", "Engineering",
            "Business Administration", "Information Technology",
        ),
    }),
})


# ─── Tertiary programme groups ───────────────────────────────────────────────

_STEM_PROGRAMS = (
    "Medicine and Surgery", "Engineering", "Computer Science", "Law", "Pharmacy",
)
_HUMANITIES_PROGRAMS = (
    "Architecture", "Business Administration", "Education", "Psychology", "Arts",
)
_APPLIED_PROGRAMS = (
    "Business Administration", "Nursing", "Agriculture", "Education", "Engineering Technology",
)


# ─── Careers ─────────────────────────────────────────────────────────────────

CAREER_SUGGESTIONS: Mapping[ThinkingStyle, tuple[str, ...]] = MappingProxyType({
    ThinkingStyle.ANALYTICAL: (
        "Research Scientist", "Data Analyst", "Financial Analyst", "Software Engineer",
        "Medical Doctor", "Lawyer", "Engineer", "Accountant", "Statistician", "Pharmacist",
    ),
    ThinkingStyle.CREATIVE: (
        "Graphic Designer", "Architect", "Artist", "Writer", "Marketing Manager",
        "Entrepreneur", "Fashion Designer", "Musician", "Advertising Executive",
        "Product Designer",
    ),
    ThinkingStyle.PRACTICAL: (
        "Project Manager", "Business Manager", "Teacher", "Nurse", "Social Worker",
        "Police Officer", "Military Officer", "Sales Manager", "Human Resources Manager",
        "Operations Manager",
    ),
    ThinkingStyle.CONVERGENT: (
        "Engineer", "Computer Programmer", "Financial Analyst", "Research Scientist",
        "Mathematician", "Physicist", "Chemist", "Statistician",
    ),
    ThinkingStyle.DIVERGENT: (
        "Counselor", "Social Worker", "Teacher", "Artist", "Writer",
        "Marketing Manager", "Human Resources Manager", "Psychologist",
    ),
    ThinkingStyle.ASSIMILATIVE: (
        "Researcher", "Theoretical Physicist", "Mathematician", "Philosopher",
        "Academic", "Scientist", "Librarian", "Information Specialist",
    ),
    ThinkingStyle.ACCOMMODATIVE: (
        "Entrepreneur", "Sales Manager", "Project Manager", "Event Planner",
        "Business Manager", "Marketing Manager", "Operations Manager", "Consultant",
    ),
})


# ─── Learning recommendations ────────────────────────────────────────────────

LEARNING_RECOMMENDATIONS: Mapping[ThinkingStyle, tuple[str, ...]] = MappingProxyType({
    # Kolb
    ThinkingStyle.CONVERGENT: (
        "Focus on practical applications of concepts",
        "Use hands-on learning activities",
        "Work on problem-solving exercises",
        "Engage in laboratory work and experiments",
        "Apply theories to real-world situations",
    ),
    ThinkingStyle.DIVERGENT: (
        "Use brainstorming and creative thinking exercises",
        "Engage in group discussions and collaborative learning",
        "Explore multiple perspectives on topics",
        "Use case studies and real-world examples",
        "Participate in role-playing activities",
    ),
    ThinkingStyle.ASSIMILATIVE: (
        "Focus on theoretical understanding and concepts",
        "Use lectures and reading materials",
        "Create concept maps and diagrams",
        "Engage in research and analysis",
        "Work on theoretical problems and case studies",
    ),
    ThinkingStyle.ACCOMMODATIVE: (
        "Learn through trial and error",
        "Engage in experiential learning activities",
        "Use simulations and practical exercises",
        "Work on projects and real-world applications",
        "Learn from mistakes and feedback",
    ),
    # Sternberg
    ThinkingStyle.ANALYTICAL: (
        "Focus on logical reasoning and analysis",
        "Use structured learning materials",
        "Engage in critical thinking exercises",
        "Work on problem-solving tasks",
        "Use systematic study methods",
    ),
    ThinkingStyle.CREATIVE: (
        "Use creative and innovative learning methods",
        "Engage in brainstorming and idea generation",
        "Work on open-ended projects",
        "Use visual and artistic learning tools",
        "Explore multiple solutions to problems",
    ),
    ThinkingStyle.PRACTICAL: (
        "Focus on real-world applications",
        "Use hands-on learning experiences",
        "Engage in practical problem-solving",
        "Work on projects with real outcomes",
        "Learn through experience and practice",
    ),
})


# ─── Ghana-specific study tips (shown verbatim in reports) ──────────────────

GHANA_STUDY_TIPS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "cultural_context": (
        "Consider Ghana's educational system structure (JHS → SHS → Tertiary)",
        "Understand the importance of WASSCE (West African Senior School Certificate Examination)",
        "Consider local job market demands and opportunities",
        "Factor in family expectations and cultural values",
        "Consider the role of community and extended family in career decisions",
    ),
    "practical_tips": (
        "Focus on subjects that align with your chosen SHS track",
        "Develop both theoretical knowledge and practical skills",
        "Consider apprenticeship and vocational training options",
        "Network with professionals in your field of interest",
        "Stay updated with Ghana's economic and industrial developments",
    ),
    "resource_recommendations": (
        "Utilize Ghana Education Service resources",
        "Connect with career guidance counselors",
        "Attend career fairs and educational exhibitions",
        "Join professional associations in your field",
        "Consider mentorship programs with industry professionals",
    ),
})


# ─── Buckets ─────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class StyleBucket:
    """Everything recommended for one thinking style."""
    shs_tracks:        tuple[str, ...] = ()
    tertiary_programs: tuple[str, ...] = ()
    careers:           tuple[str, ...] = ()
    learning_tips:     tuple[str, ...] = ()


def _tracks(*groups: str) -> tuple[str, ...]:
    return tuple(track for g in groups for track in GHANA_SHS_TRACKS[g])


STYLE_BUCKETS: Mapping[ThinkingStyle, StyleBucket] = MappingProxyType({
    ThinkingStyle.ANALYTICAL: StyleBucket(
        shs_tracks=_tracks("SCIENCE", "TECHNICAL"),
        tertiary_programs=_STEM_PROGRAMS,
        careers=CAREER_SUGGESTIONS[ThinkingStyle.ANALYTICAL],
        learning_tips=LEARNING_RECOMMENDATIONS[ThinkingStyle.ANALYTICAL],
    ),
    ThinkingStyle.CONVERGENT: StyleBucket(
        shs_tracks=_tracks("SCIENCE", "TECHNICAL"),
        tertiary_programs=_STEM_PROGRAMS,
        careers=CAREER_SUGGESTIONS[ThinkingStyle.CONVERGENT],
        learning_tips=LEARNING_RECOMMENDATIONS[ThinkingStyle.CONVERGENT],
    ),
    ThinkingStyle.CREATIVE: StyleBucket(
        shs_tracks=_tracks("ARTS", "BUSINESS"),
        tertiary_programs=_HUMANITIES_PROGRAMS,
        careers=CAREER_SUGGESTIONS[ThinkingStyle.CREATIVE],
        learning_tips=LEARNING_RECOMMENDATIONS[ThinkingStyle.CREATIVE],
    ),
    ThinkingStyle.DIVERGENT: StyleBucket(
        shs_tracks=_tracks("ARTS", "BUSINESS"),
        tertiary_programs=_HUMANITIES_PROGRAMS,
        careers=CAREER_SUGGESTIONS[ThinkingStyle.DIVERGENT],
        learning_tips=LEARNING_RECOMMENDATIONS[ThinkingStyle.DIVERGENT],
    ),
    ThinkingStyle.PRACTICAL: StyleBucket(
        shs_tracks=_tracks("BUSINESS", "VOCATIONAL", "TECHNICAL"),
        tertiary_programs=_APPLIED_PROGRAMS,
        careers=CAREER_SUGGESTIONS[ThinkingStyle.PRACTICAL],
        learning_tips=LEARNING_RECOMMENDATIONS[ThinkingStyle.PRACTICAL],
    ),
    ThinkingStyle.ACCOMMODATIVE: StyleBucket(
        shs_tracks=_tracks("BUSINESS", "VOCATIONAL", "TECHNICAL"),
        tertiary_programs=_APPLIED_PROGRAMS,
        careers=CAREER_SUGGESTIONS[ThinkingStyle.ACCOMMODATIVE],
        learning_tips=LEARNING_RECOMMENDATIONS[ThinkingStyle.ACCOMMODATIVE],
    ),
    # No SHS track or tertiary group is keyed to assimilative learners
    ThinkingStyle.ASSIMILATIVE: StyleBucket(
        careers=CAREER_SUGGESTIONS[ThinkingStyle.ASSIMILATIVE],
        learning_tips=LEARNING_RECOMMENDATIONS[ThinkingStyle.ASSIMILATIVE],
    ),
})

CATEGORY_STYLES: Mapping[Category, tuple[ThinkingStyle, ...]] = MappingProxyType({
    Category.ANALYTICAL:                 (ThinkingStyle.ANALYTICAL,),
    Category.CREATIVE:                   (ThinkingStyle.CREATIVE,),
    Category.PRACTICAL:                  (ThinkingStyle.PRACTICAL,),
    Category.CONCRETE_EXPERIENCE:        (ThinkingStyle.CONVERGENT,),
    Category.REFLECTIVE_OBSERVATION:     (ThinkingStyle.DIVERGENT,),
    Category.ABSTRACT_CONCEPTUALIZATION: (ThinkingStyle.ASSIMILATIVE,),
    Category.ACTIVE_EXPERIMENTATION:     (ThinkingStyle.ACCOMMODATIVE,),
})


@dataclass(frozen=True)
class EducationCatalogue:
    """Read-only recommendation tables consulted by ``EducationMapper``."""
    category_styles: Mapping[str, tuple[ThinkingStyle, ...]]     = field(default_factory=lambda: CATEGORY_STYLES)
    style_buckets:   Mapping[ThinkingStyle, StyleBucket]         = field(default_factory=lambda: STYLE_BUCKETS)
    institutions:    Mapping[str, Mapping[str, tuple[str, ...]]] = field(default_factory=lambda: GHANA_TERTIARY_INSTITUTIONS)

    def buckets_for(self, style: str) -> list[StyleBucket]:
        """Buckets keyed to *style* by exact name; empty when unmapped."""
        styles = self.category_styles.get(style, ())
        return [self.style_buckets[s] for s in styles if s in self.style_buckets]


_DEFAULT_CATALOGUE = EducationCatalogue()


def _dedupe_and_cap(items: Iterable[str], cap: int) -> list[str]:
    return list(dict.fromkeys(items))[:cap]


class EducationMapper:
    """
    Stateless lookup from a profile's styles to Ghana recommendations.

    Usage::

        mapper  = EducationMapper()
        mapping = mapper.map("analytical", "creative")
        where   = mapper.institutions_for(mapping.tertiary_programs)
    """

    MAX_SHS_TRACKS:        int = 4
    MAX_TERTIARY_PROGRAMS: int = 5
    MAX_CAREERS:           int = 8
    MAX_LEARNING_TIPS:     int = 5

    def __init__(self, catalogue: Optional[EducationCatalogue] = None):
        self.catalogue = catalogue or _DEFAULT_CATALOGUE

    def map(self, primary_style: str, secondary_style: str = "") -> EducationMapping:
        # secondary_style does not influence the mapping; kept for callers
        # that already pass both styles.
        buckets = self.catalogue.buckets_for(primary_style)
        if not buckets:
            logger.debug("No recommendation bucket for style %r", primary_style)

        return EducationMapping(
            shs_tracks=_dedupe_and_cap(
                (t for b in buckets for t in b.shs_tracks), self.MAX_SHS_TRACKS),
            tertiary_programs=_dedupe_and_cap(
                (p for b in buckets for p in b.tertiary_programs), self.MAX_TERTIARY_PROGRAMS),
            career_suggestions=_dedupe_and_cap(
                (c for b in buckets for c in b.careers), self.MAX_CAREERS),
            learning_recommendations=_dedupe_and_cap(
                (r for b in buckets for r in b.learning_tips), self.MAX_LEARNING_TIPS),
        )

    def institutions_for(self, programs: Iterable[str]) -> dict[str, list[str]]:
        """Programme → institutions whose catalogue lists that exact programme."""
        result: dict[str, list[str]] = {}
        for program in programs:
            result[program] = [
                name
                for group in self.catalogue.institutions.values()
                for name, offered in group.items()
                if program in offered
            ]
        return result


def map_education(
    primary_style: str,
    secondary_style: str = "",
    catalogue: Optional[EducationCatalogue] = None,
) -> EducationMapping:
    """Functional form of ``EducationMapper.map``."""
    return EducationMapper(catalogue).map(primary_style, secondary_style)
