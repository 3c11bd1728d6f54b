"""
guardrails.py – Submission & Recommendation Guardrails
======================================================
Advisory checks that run around the scoring pipeline.  Guards never raise;
they return a ``GuardrailResult`` the web layer can show to the user or log.

Guardrail levels
----------------
BLOCK   – Hard-stop: the submission should not be scored as-is.
WARN    – Soft-stop: scoring proceeds, the user sees a warning.
INFO    – Advisory: noted for the caller, no user-facing effect.

Guards implemented
------------------
Response guards (before normalize_and_score):
  R-01  Assessment type is known                                   BLOCK
  R-02  Submission is not empty                                    WARN
  R-03  Each record has a question id and an integer score 1–5     BLOCK
  R-04  No question answered twice                                 WARN
  R-05  Question id belongs to the assessment   INFO (BLOCK when strict)
  R-06  Every category has at least one response                   WARN

Mapping guards (after map_education):
  M-01  No duplicate entries within a list                         BLOCK
  M-02  No list exceeds its cap (4 / 5 / 8 / 5)                    BLOCK
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Mapping, Optional

from thinking_styles.education_mapper import EducationMapper
from thinking_styles.errors import UnknownAssessmentType
from thinking_styles.models import EducationMapping, Response
from thinking_styles.question_bank import AssessmentTypeLike, QuestionBank, default_question_bank


# ─── Enums & data models ─────────────────────────────────────────────────────

class GuardrailLevel(str, Enum):
    BLOCK = "BLOCK"
    WARN  = "WARN"
    INFO  = "INFO"


@dataclass
class GuardrailViolation:
    code:    str
    level:   GuardrailLevel
    message: str
    field:   str = ""   # which field triggered the violation


@dataclass
class GuardrailResult:
    passed:     bool
    violations: list[GuardrailViolation] = field(default_factory=list)

    @property
    def blocked(self) -> bool:
        return any(v.level == GuardrailLevel.BLOCK for v in self.violations)

    @property
    def warnings(self) -> list[GuardrailViolation]:
        return [v for v in self.violations if v.level == GuardrailLevel.WARN]

    def codes(self) -> list[str]:
        return [v.code for v in self.violations]

    def summary(self) -> str:
        if not self.violations:
            return "✅ All guardrails passed."
        icons = {GuardrailLevel.BLOCK: "🚫", GuardrailLevel.WARN: "⚠️", GuardrailLevel.INFO: "ℹ️"}
        return "\n".join(f"{icons[v.level]} [{v.code}] {v.message}" for v in self.violations)


def _result(violations: list[GuardrailViolation]) -> GuardrailResult:
    return GuardrailResult(
        passed=not any(v.level == GuardrailLevel.BLOCK for v in violations),
        violations=violations,
    )


# ─── Response guards ─────────────────────────────────────────────────────────

def _fields_of(raw: Any) -> Optional[tuple[Any, Any]]:
    """(question id, score) of a raw record, or None if it is not a record."""
    if isinstance(raw, Response):
        return raw.question_id, raw.score
    if isinstance(raw, Mapping):
        qid = raw.get("questionId", raw.get("question_id"))
        return qid, raw.get("score")
    return None


class ResponseGuardrails:
    """R-01 – R-06: Validates one raw questionnaire submission."""

    def __init__(self, bank: Optional[QuestionBank] = None, strict: bool = False):
        self.bank   = bank or default_question_bank()
        self.strict = strict

    def check(self, assessment_type: AssessmentTypeLike, responses: Iterable[Any]) -> GuardrailResult:
        violations: list[GuardrailViolation] = []

        # R-01 Known assessment type
        try:
            a_type = self.bank.resolve_type(assessment_type)
        except UnknownAssessmentType as exc:
            violations.append(GuardrailViolation(
                code="R-01", level=GuardrailLevel.BLOCK, field="assessment_type",
                message=str(exc),
            ))
            return _result(violations)

        records = list(responses)

        # R-02 Empty submission
        if not records:
            violations.append(GuardrailViolation(
                code="R-02", level=GuardrailLevel.WARN, field="responses",
                message=f"No responses submitted for {a_type.value}; nothing will be assessed.",
            ))
            return _result(violations)

        index = self.bank.question_index(a_type)
        seen: list[str] = []
        for i, raw in enumerate(records):
            fields = _fields_of(raw)

            # R-03 Record shape, id and score
            if fields is None:
                violations.append(GuardrailViolation(
                    code="R-03", level=GuardrailLevel.BLOCK, field=f"responses[{i}]",
                    message=f"Response #{i + 1} is not a question/score record.",
                ))
                continue
            qid, score = fields
            if not isinstance(qid, str) or not qid:
                violations.append(GuardrailViolation(
                    code="R-03", level=GuardrailLevel.BLOCK, field=f"responses[{i}].questionId",
                    message=f"Response #{i + 1} has no question id.",
                ))
                continue
            if isinstance(score, bool) or not isinstance(score, int) or not 1 <= score <= 5:
                violations.append(GuardrailViolation(
                    code="R-03", level=GuardrailLevel.BLOCK, field=f"responses[{i}].score",
                    message=f"Score for '{qid}' must be an integer from 1 to 5 (got {score!r}).",
                ))

            # R-05 Unknown question id
            if qid not in index:
                violations.append(GuardrailViolation(
                    code="R-05",
                    level=GuardrailLevel.BLOCK if self.strict else GuardrailLevel.INFO,
                    field=f"responses[{i}].questionId",
                    message=f"'{qid}' is not a {a_type.value} question"
                            + (" and is rejected." if self.strict else " and will be ignored."),
                ))
            seen.append(qid)

        # R-04 Duplicate answers
        dups = sorted({q for q in seen if seen.count(q) > 1})
        if dups:
            violations.append(GuardrailViolation(
                code="R-04", level=GuardrailLevel.WARN, field="responses",
                message=f"Questions answered more than once (every answer is counted): {dups}.",
            ))

        # R-06 Categories without any response
        answered = {index[q].category for q in seen if q in index}
        for category in self.bank.categories_for(a_type):
            if category not in answered:
                violations.append(GuardrailViolation(
                    code="R-06", level=GuardrailLevel.WARN, field=category.value,
                    message=f"No responses for '{category.value}'; it will be reported as not assessed.",
                ))

        return _result(violations)


# ─── Mapping guards ──────────────────────────────────────────────────────────

class MappingGuardrails:
    """M-01 – M-02: Verifies an EducationMapping before it is shown."""

    CAPS: dict[str, int] = {
        "shs_tracks":               EducationMapper.MAX_SHS_TRACKS,
        "tertiary_programs":        EducationMapper.MAX_TERTIARY_PROGRAMS,
        "career_suggestions":       EducationMapper.MAX_CAREERS,
        "learning_recommendations": EducationMapper.MAX_LEARNING_TIPS,
    }

    def check(self, mapping: EducationMapping) -> GuardrailResult:
        violations: list[GuardrailViolation] = []
        for name, cap in self.CAPS.items():
            items = getattr(mapping, name)

            # M-01 Duplicates
            dups = sorted({x for x in items if items.count(x) > 1})
            if dups:
                violations.append(GuardrailViolation(
                    code="M-01", level=GuardrailLevel.BLOCK, field=name,
                    message=f"Duplicate entries in {name}: {dups}.",
                ))

            # M-02 Cap
            if len(items) > cap:
                violations.append(GuardrailViolation(
                    code="M-02", level=GuardrailLevel.BLOCK, field=name,
                    message=f"{name} has {len(items)} entries (limit {cap}).",
                ))

        return _result(violations)


# ─── Convenience façade ───────────────────────────────────────────────────────

class GuardrailsPipeline:
    """
    Single entry-point for every guardrail stage.

    Usage::

        gp = GuardrailsPipeline()

        # Stage 1 – raw submission
        result = gp.check_responses("kolb", raw_responses)

        # Stage 2 – after education mapping
        result = gp.check_mapping(mapping)

        overall = gp.merge(r1, r2)
    """

    def __init__(self, bank: Optional[QuestionBank] = None, strict: bool = False):
        self.response_guard = ResponseGuardrails(bank=bank, strict=strict)
        self.mapping_guard  = MappingGuardrails()

    def check_responses(self, assessment_type: AssessmentTypeLike, responses: Iterable[Any]) -> GuardrailResult:
        return self.response_guard.check(assessment_type, responses)

    def check_mapping(self, mapping: EducationMapping) -> GuardrailResult:
        return self.mapping_guard.check(mapping)

    def merge(self, *results: GuardrailResult) -> GuardrailResult:
        """Merge multiple GuardrailResult objects into one."""
        all_v: list[GuardrailViolation] = []
        for r in results:
            all_v.extend(r.violations)
        return _result(all_v)
