"""
Tests for EducationMapper: exact-match lookup, dedupe, caps, institutions.
"""
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import pytest

from thinking_styles.education_mapper import (
    CAREER_SUGGESTIONS,
    GHANA_SHS_TRACKS,
    GHANA_STUDY_TIPS,
    LEARNING_RECOMMENDATIONS,
    EducationCatalogue,
    EducationMapper,
    StyleBucket,
    map_education,
)
from thinking_styles.guardrails import MappingGuardrails
from thinking_styles.models import Category, ThinkingStyle


SCIENCE_OR_TECHNICAL = set(GHANA_SHS_TRACKS["SCIENCE"]) | set(GHANA_SHS_TRACKS["TECHNICAL"])
ARTS = set(GHANA_SHS_TRACKS["ARTS"])
VOCATIONAL_ONLY = set(GHANA_SHS_TRACKS["VOCATIONAL"]) - set(GHANA_SHS_TRACKS["SCIENCE"])


class TestLookup:
    def test_analytical(self):
        mapping = map_education("analytical", "creative")
        assert "General Science" in mapping.shs_tracks
        assert set(mapping.shs_tracks) <= SCIENCE_OR_TECHNICAL
        assert not set(mapping.shs_tracks) & ARTS
        assert not set(mapping.shs_tracks) & VOCATIONAL_ONLY
        assert mapping.tertiary_programs == [
            "Medicine and Surgery", "Engineering", "Computer Science", "Law", "Pharmacy",
        ]
        assert mapping.career_suggestions == list(CAREER_SUGGESTIONS[ThinkingStyle.ANALYTICAL][:8])
        assert mapping.learning_recommendations == list(LEARNING_RECOMMENDATIONS[ThinkingStyle.ANALYTICAL])

    def test_creative(self):
        mapping = map_education("creative", "")
        assert mapping.shs_tracks == ["General Arts", "Visual Arts", "Music", "Drama"]
        assert "Architecture" in mapping.tertiary_programs

    def test_practical(self):
        mapping = map_education("practical", "")
        assert mapping.shs_tracks == list(GHANA_SHS_TRACKS["BUSINESS"])
        assert mapping.tertiary_programs[-1] == "Engineering Technology"

    @pytest.mark.parametrize("category, style", [
        (Category.CONCRETE_EXPERIENCE,    ThinkingStyle.CONVERGENT),
        (Category.REFLECTIVE_OBSERVATION, ThinkingStyle.DIVERGENT),
        (Category.ACTIVE_EXPERIMENTATION, ThinkingStyle.ACCOMMODATIVE),
    ])
    def test_kolb_categories_use_kolb_careers(self, category, style):
        mapping = map_education(category.value)
        assert mapping.career_suggestions == list(CAREER_SUGGESTIONS[style])
        assert mapping.learning_recommendations == list(LEARNING_RECOMMENDATIONS[style])
        assert mapping.shs_tracks

    def test_assimilative_has_no_tracks_or_programmes(self):
        mapping = map_education("abstract_conceptualization")
        assert mapping.shs_tracks == []
        assert mapping.tertiary_programs == []
        assert mapping.career_suggestions == list(CAREER_SUGGESTIONS[ThinkingStyle.ASSIMILATIVE])
        assert len(mapping.learning_recommendations) == 5

    @pytest.mark.parametrize("style", ["system_1", "system_2", "", "phrenology",
                                       "practical_analytics", "Analytical", "analytical "])
    def test_unmapped_styles_give_empty_mapping(self, style):
        assert map_education(style, "analytical").is_empty()

    def test_enum_member_is_accepted(self):
        assert map_education(Category.ANALYTICAL) == map_education("analytical")


class TestSecondaryStyle:
    def test_secondary_style_is_ignored(self):
        assert map_education("analytical", "creative") == map_education("analytical", "system_2")

    def test_idempotent(self):
        assert map_education("analytical", "creative") == map_education("analytical", "creative")


class TestDedupeAndCaps:
    def _overlapping_catalogue(self):
        return EducationCatalogue(category_styles={
            "analytical": (ThinkingStyle.ANALYTICAL, ThinkingStyle.CONVERGENT, ThinkingStyle.PRACTICAL),
        })

    def test_overlapping_buckets_are_deduplicated_and_capped(self):
        mapping = EducationMapper(self._overlapping_catalogue()).map("analytical")
        for items, cap in [
            (mapping.shs_tracks, 4),
            (mapping.tertiary_programs, 5),
            (mapping.career_suggestions, 8),
            (mapping.learning_recommendations, 5),
        ]:
            assert len(items) == len(set(items))
            assert len(items) <= cap
        assert mapping.shs_tracks == list(GHANA_SHS_TRACKS["SCIENCE"])

    def test_first_occurrence_wins(self):
        catalogue = EducationCatalogue(
            category_styles={"creative": (ThinkingStyle.CREATIVE, ThinkingStyle.DIVERGENT)},
            style_buckets={
                ThinkingStyle.CREATIVE:  StyleBucket(shs_tracks=("B", "A", "B"), careers=("X",)),
                ThinkingStyle.DIVERGENT: StyleBucket(shs_tracks=("A", "C", "D", "E"), careers=("X", "Y")),
            },
        )
        mapping = EducationMapper(catalogue).map("creative")
        assert mapping.shs_tracks == ["B", "A", "C", "D"]
        assert mapping.career_suggestions == ["X", "Y"]

    def test_default_catalogue_passes_mapping_guardrails(self):
        guard = MappingGuardrails()
        for category in Category:
            assert guard.check(map_education(category.value)).passed

    def test_caps_are_class_constants(self):
        assert (EducationMapper.MAX_SHS_TRACKS, EducationMapper.MAX_TERTIARY_PROGRAMS,
                EducationMapper.MAX_CAREERS, EducationMapper.MAX_LEARNING_TIPS) == (4, 5, 8, 5)


class TestInstitutions:
    def test_exact_programme_names(self, mapper):
        where = mapper.institutions_for(["Engineering", "Computer Science", "Arts"])
        assert where["Engineering"] == ["University of Ghana", "Ghana Technology University College"]
        assert "Accra Technical University" in where["Computer Science"]
        assert "Kwame Nkrumah University of Science and Technology" in where["Computer Science"]
        assert where["Arts"] == []

    def test_preserves_programme_order(self, mapper):
        programs = ["Pharmacy", "Law", "Nursing"]
        assert list(mapper.institutions_for(programs)) == programs


class TestStaticTables:
    def test_study_tip_sections(self):
        assert list(GHANA_STUDY_TIPS) == ["cultural_context", "practical_tips", "resource_recommendations"]
        assert all(len(tips) == 5 for tips in GHANA_STUDY_TIPS.values())

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            GHANA_SHS_TRACKS["SCIENCE"] = ()
