"""
End-to-end pipeline integration tests.
Runs the full chain on raw submissions:
Guardrails → Normalise/Score → Profile → Education mapping → Insights → Report
"""
import json
import logging

import pytest
from factories import make_category_responses, make_responses

from thinking_styles import map_education, normalize_and_score, synthesize_profile
from thinking_styles.config import LoggingConfig, ReportConfig, ScoringConfig, Settings
from thinking_styles.education_mapper import GHANA_STUDY_TIPS
from thinking_styles.errors import ThinkingStylesError, UnknownAssessmentType, UnknownQuestionId
from thinking_styles.guardrails import GuardrailsPipeline
from thinking_styles.models import AssessmentType, Category
from thinking_styles.pipeline import ThinkingStylesPipeline


def _sternberg_scenario():
    """analytical = 4.5, creative = 2.0, practical = 3.0"""
    scores = {
        "sternberg_1": 5, "sternberg_4": 5, "sternberg_7": 4, "sternberg_10": 4,
        "sternberg_2": 2, "sternberg_5": 2, "sternberg_8": 2, "sternberg_11": 2,
    }
    return make_responses("sternberg", score=3, **scores)


class TestSternbergScenario:
    def test_scores(self):
        assert normalize_and_score("sternberg", _sternberg_scenario()) == {
            "analytical": 4.5, "creative": 2.0, "practical": 3.0,
        }

    def test_profile_and_mapping(self):
        profile = synthesize_profile([normalize_and_score("sternberg", _sternberg_scenario())])
        assert profile.primary_style == "analytical"
        assert profile.secondary_style == "practical"
        assert profile.strengths == ["Logical reasoning", "Systematic analysis"]
        assert profile.weaknesses == ["Developing original thinking", "Developing idea generation"]

        mapping = map_education(profile.primary_style, profile.secondary_style)
        assert "General Science" in mapping.shs_tracks
        assert "General Arts" not in mapping.shs_tracks
        assert "Technical Skills" not in mapping.shs_tracks
        assert "Engineering" in mapping.tertiary_programs


class TestPipelineService:
    def test_stages_match_module_functions(self, pipeline):
        responses = make_category_responses("kolb", concrete_experience=5, active_experimentation=1)
        scores = pipeline.normalize_and_score("kolb", responses)
        assert scores == normalize_and_score("kolb", responses)
        assert pipeline.synthesize_profile([scores]) == synthesize_profile([scores])
        assert pipeline.map_education("creative") == map_education("creative")

    def test_strict_pipeline_rejects_unknown_ids(self, pipeline, strict_pipeline):
        responses = make_responses("kolb") + [{"questionId": "kolb_99", "score": 5}]
        assert pipeline.normalize_and_score("kolb", responses)
        with pytest.raises(UnknownQuestionId):
            strict_pipeline.normalize_and_score("kolb", responses)

    def test_from_settings(self):
        settings = Settings(
            scoring=ScoringConfig(strict_ids=True),
            logging=LoggingConfig(level="DEBUG"),
            report=ReportConfig(country="Togo"),
        )
        pipeline = ThinkingStylesPipeline.from_settings(settings)
        assert pipeline.strict is True
        assert pipeline.country == "Togo"

    def test_from_environment(self, clean_env):
        clean_env.setenv("THINKING_STYLES_STRICT_IDS", "true")
        assert ThinkingStylesPipeline.from_settings().strict is True


class TestBuildReport:
    def test_full_report(self, pipeline, full_scores):
        report = pipeline.build_report(full_scores)
        assert list(report.category_scores) == ["kolb", "sternberg", "dual_process"]
        assert report.profile.primary_style == "analytical"
        assert report.profile.secondary_style == "system_2"
        assert report.profile.recommendations == ["Engage in reflective journaling", "Study theoretical frameworks"]
        assert report.education.shs_tracks[0] == "General Science"
        assert set(report.program_institutions) == set(report.education.tertiary_programs)
        assert "University of Ghana" in report.program_institutions["Law"]
        assert report.insights.communication_style.startswith("Thoughtful")
        assert report.study_tips == {k: list(v) for k, v in GHANA_STUDY_TIPS.items()}
        assert report.country == "Ghana"

    def test_report_serialises_to_json(self, pipeline, full_scores):
        data = json.loads(pipeline.build_report(full_scores).model_dump_json())
        assert data["profile"]["primary_style"] == "analytical"
        assert data["category_scores"]["sternberg"]["analytical"] == 4.8

    def test_enum_keys_are_normalised(self, pipeline):
        report = pipeline.build_report({AssessmentType.DUAL_PROCESS: {Category.SYSTEM_1: 4.5}})
        assert report.category_scores == {"dual_process": {"system_1": 4.5}}
        assert report.education.is_empty()
        assert report.program_institutions == {}

    def test_no_assessments_rejected(self, pipeline):
        with pytest.raises(ValueError):
            pipeline.build_report({})
        with pytest.raises(ThinkingStylesError):
            pipeline.build_report({})

    def test_unknown_assessment_key_rejected(self, pipeline):
        with pytest.raises(UnknownAssessmentType):
            pipeline.build_report({"phrenology": {"analytical": 4.0}})

    def test_report_logged_at_info(self, pipeline, full_scores, caplog):
        with caplog.at_level(logging.INFO, logger="thinking_styles.pipeline"):
            pipeline.build_report(full_scores)
        assert "primary=analytical" in caplog.text


class TestAssessRawSubmissions:
    def test_guardrails_then_assess(self, pipeline):
        submissions = {
            "kolb":         make_category_responses("kolb", reflective_observation=5),
            "sternberg":    _sternberg_scenario(),
            "dual_process": make_responses("dual_process", score=2),
        }
        guards = GuardrailsPipeline(bank=pipeline.bank)
        checks = guards.merge(*(guards.check_responses(t, r) for t, r in submissions.items()))
        assert checks.passed and not checks.violations

        report = pipeline.assess(submissions)
        assert report.profile.primary_style == "reflective_observation"
        assert report.profile.recommendations == ["Engage in reflective journaling"]
        assert report.category_scores["sternberg"]["analytical"] == 4.5
        assert guards.check_mapping(report.education).passed
        assert "Counselor" in report.education.career_suggestions

    def test_partial_submission(self, pipeline):
        report = pipeline.assess({"sternberg": [{"questionId": "sternberg_2", "score": 5}]})
        assert report.category_scores == {"sternberg": {"creative": 5.0}}
        assert report.profile.primary_style == report.profile.secondary_style == "creative"
        assert report.insights.learning_style == "Mixed learning preferences"
