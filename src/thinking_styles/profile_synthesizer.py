"""
profile_synthesizer.py — Merge category scores into a ThinkingStyleProfile
===========================================================================
Input: one ``CategoryScores`` mapping per completed assessment, in the
order the assessments were taken.

Algorithm
---------
  1. Flatten every category → mean pair in encounter order.  A category
     seen in more than one mapping keeps its first position and its means
     are averaged.
  2. Stable sort by mean, descending (ties keep encounter order).
  3. primary_style   = top category
     secondary_style = runner-up, or the primary when only one exists
  4. strengths  = labels of every category with mean  > 3.5
     weaknesses = "Developing …" labels of every category with mean < 2.5
     Both lists follow the bank's category declaration order (unknown
     categories after, as encountered), not score order.
  5. recommendations = study recommendations of every strength category
     that has one (only the Kolb categories do), in the same order.

No scores at all is a valid input: the profile is returned with empty
style names and empty lists; the caller decides what to show.
"""

from __future__ import annotations

from typing import Iterable, Mapping, Optional

from thinking_styles.models import CategoryScores, ThinkingStyleProfile
from thinking_styles.question_bank import QuestionBank, default_question_bank
from thinking_styles.scoring import round_half_up


def merge_category_scores(category_scores_list: Iterable[Mapping[str, float]]) -> CategoryScores:
    """Flatten several score mappings into one, averaging repeated categories."""
    collected: dict[str, list[float]] = {}
    for scores in category_scores_list:
        for category, mean in scores.items():
            key = getattr(category, "value", category)
            collected.setdefault(key, []).append(float(mean))

    return {
        category: means[0] if len(means) == 1 else round_half_up(sum(means) / len(means))
        for category, means in collected.items()
    }


def _developing(label: str) -> str:
    return f"Developing {label[:1].lower()}{label[1:]}"


class ProfileSynthesizer:
    """
    Builds a ``ThinkingStyleProfile`` from one or more assessments.

    Usage::

        synth   = ProfileSynthesizer()
        profile = synth.synthesize([kolb_scores, sternberg_scores])
    """

    STRENGTH_THRESHOLD: float = 3.5   # strictly above → strength
    WEAKNESS_THRESHOLD: float = 2.5   # strictly below → weakness

    def __init__(self, bank: Optional[QuestionBank] = None):
        self.bank = bank or default_question_bank()

    def _declaration_order(self, merged: Mapping[str, float]) -> list[str]:
        """Merged categories in the bank's declaration order; unknown keys follow as given."""
        declared = [c.value for c in self.bank.declared_categories() if c in merged]
        return declared + [c for c in merged if c not in declared]

    def synthesize(self, category_scores_list: Iterable[Mapping[str, float]]) -> ThinkingStyleProfile:
        merged = merge_category_scores(category_scores_list)
        ranked = sorted(merged.items(), key=lambda item: -item[1])

        primary   = ranked[0][0] if ranked else ""
        secondary = ranked[1][0] if len(ranked) > 1 else primary

        strengths:       list[str] = []
        weaknesses:      list[str] = []
        recommendations: list[str] = []
        for category in self._declaration_order(merged):
            mean = merged[category]
            if mean > self.STRENGTH_THRESHOLD:
                strengths.extend(self.bank.labels_for(category))
                recommendations.extend(self.bank.recommendations_for(category))
            elif mean < self.WEAKNESS_THRESHOLD:
                weaknesses.extend(_developing(label) for label in self.bank.labels_for(category))

        return ThinkingStyleProfile(
            primary_style=primary,
            secondary_style=secondary,
            strengths=strengths,
            weaknesses=weaknesses,
            recommendations=recommendations,
        )


def synthesize_profile(
    category_scores_list: Iterable[Mapping[str, float]],
    bank: Optional[QuestionBank] = None,
) -> ThinkingStyleProfile:
    """Functional form of ``ProfileSynthesizer.synthesize``."""
    return ProfileSynthesizer(bank).synthesize(category_scores_list)
