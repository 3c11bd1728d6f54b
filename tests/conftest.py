"""
Shared pytest fixtures for the Thinking Styles test suite.
Factory helpers live in tests/factories.py so they can be imported
directly by test modules as well as being used here.
"""
import sys
import os

_tests_dir = os.path.dirname(__file__)
_src_dir   = os.path.join(_tests_dir, "..", "src")
for _p in (_tests_dir, _src_dir):
    if _p not in sys.path:
        sys.path.insert(0, _p)


import pytest

from factories import make_full_scores

from thinking_styles.education_mapper import EducationMapper
from thinking_styles.pipeline import ThinkingStylesPipeline
from thinking_styles.question_bank import default_question_bank


# ─── pytest fixtures ──────────────────────────────────────────────────────────

@pytest.fixture
def bank():
    return default_question_bank()


@pytest.fixture
def pipeline():
    return ThinkingStylesPipeline()


@pytest.fixture
def strict_pipeline():
    return ThinkingStylesPipeline(strict=True)


@pytest.fixture
def mapper():
    return EducationMapper()


@pytest.fixture
def full_scores():
    return make_full_scores()


@pytest.fixture
def clean_env(monkeypatch):
    for key in ("THINKING_STYLES_STRICT_IDS", "THINKING_STYLES_LOG_LEVEL", "THINKING_STYLES_COUNTRY"):
        monkeypatch.delenv(key, raising=False)
    return monkeypatch
