"""
scoring.py — Response normalisation and per-category aggregation
=================================================================
Turns one questionnaire submission into ``CategoryScores``.

  Normalizer:  each raw response is validated (``Response`` model) and its
               question id looked up in the bank for the assessment type.
               Unknown ids are dropped in lenient mode (default) and raise
               ``UnknownQuestionId`` in strict mode.
  Aggregator:  scores are summed and counted per category; the mean is
               rounded half-up to one decimal.  A category with no
               responses is left out of the result entirely: a missing key
               means "not assessed", never a score of zero.

Output keys follow the bank's category declaration order so that
downstream tie-breaking is deterministic.

Public API
----------
  normalize_responses(type, responses, bank=None, strict=False) → list[NormalizedResponse]
  aggregate_category_scores(normalized, category_order=None)    → CategoryScores
  normalize_and_score(type, responses, bank=None, strict=False) → CategoryScores
  round_half_up(value, digits=1)                                → float
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Iterable, Optional

from thinking_styles.errors import UnknownQuestionId
from thinking_styles.models import CategoryScores, Question, Response
from thinking_styles.question_bank import AssessmentTypeLike, QuestionBank, default_question_bank

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NormalizedResponse:
    """A response whose question id was found in the bank."""
    question: Question
    score:    int

    @property
    def category(self) -> str:
        return _category_key(self.question.category)


def _category_key(category: Any) -> str:
    return getattr(category, "value", category)


def round_half_up(value: float, digits: int = 1) -> float:
    """Round like ``Math.round(x * 10) / 10``; Python's round() is banker's rounding."""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def _coerce_response(raw: Any) -> Response:
    if isinstance(raw, Response):
        return raw
    # Raises pydantic.ValidationError for malformed records
    return Response.model_validate(raw)


def normalize_responses(
    assessment_type: AssessmentTypeLike,
    responses: Iterable[Any],
    bank: Optional[QuestionBank] = None,
    strict: bool = False,
) -> list[NormalizedResponse]:
    """
    Validate *responses* against the question bank for *assessment_type*.

    Parameters
    ----------
    assessment_type : AssessmentType | str
    responses       : iterable of ``Response`` or dicts with
                      ``questionId``/``question_id`` and ``score``
    bank            : QuestionBank (defaults to the production bank)
    strict          : reject unknown question ids instead of dropping them

    Raises
    ------
    UnknownAssessmentType  if the bank has no table for *assessment_type*
    UnknownQuestionId      strict mode only
    pydantic.ValidationError  for malformed response records
    """
    bank = bank or default_question_bank()
    a_type = bank.resolve_type(assessment_type)
    index = bank.question_index(a_type)

    normalized: list[NormalizedResponse] = []
    dropped: list[str] = []
    for raw in responses:
        response = _coerce_response(raw)
        question = index.get(response.question_id)
        if question is None:
            if strict:
                raise UnknownQuestionId(a_type.value, response.question_id)
            dropped.append(response.question_id)
            continue
        normalized.append(NormalizedResponse(question=question, score=response.score))

    if dropped:
        logger.debug("%s: dropped %d response(s) with unknown ids %s",
                     a_type.value, len(dropped), dropped)
    return normalized


def aggregate_category_scores(
    normalized: Iterable[NormalizedResponse],
    category_order: Optional[Iterable[Any]] = None,
) -> CategoryScores:
    """
    Mean score per category, one decimal, zero-count categories omitted.

    *category_order* fixes the key order of the result (usually the bank's
    declaration order); categories not listed there follow in encounter
    order.  Without it, encounter order is used throughout.
    """
    totals: dict[str, int] = {}
    counts: dict[str, int] = {}
    for item in normalized:
        key = item.category
        totals[key] = totals.get(key, 0) + item.score
        counts[key] = counts.get(key, 0) + 1

    order = [_category_key(c) for c in category_order] if category_order is not None else []
    order += [c for c in counts if c not in order]

    return {
        category: round_half_up(totals[category] / counts[category])
        for category in order
        if counts.get(category, 0) > 0
    }


def normalize_and_score(
    assessment_type: AssessmentTypeLike,
    responses: Iterable[Any],
    bank: Optional[QuestionBank] = None,
    strict: bool = False,
) -> CategoryScores:
    """Score one submission: normalise, then aggregate in declaration order."""
    bank = bank or default_question_bank()
    normalized = normalize_responses(assessment_type, responses, bank=bank, strict=strict)
    return aggregate_category_scores(normalized, bank.categories_for(assessment_type))
