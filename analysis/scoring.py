"""
Composite scoring for speech performance reports.

Converts analyzer results into the user-facing 0-100 scores:
- clarity (pace and filler density)
- habits (weighted mix of the seven habit scores)
- overall (clarity, fluency, habits, pace and the two visual scores)
"""

from __future__ import annotations
from typing import Dict, Mapping

from .constants import HABIT_WEIGHTS, OVERALL_WEIGHTS
from .stats import clamp, round_half_up


def _weighted(scores: Mapping[str, float], weights: Mapping[str, float]) -> float:
    return sum(weights[k] * scores[k] for k in weights)


def score_clarity(wpm: float, filler_count: int, word_count: int) -> int:
    """
    Clarity from speaking rate and filler ratio.

    Slower than 100 WPM costs 0.3 points per WPM, faster than 180 costs 0.5
    per WPM, and the filler ratio is penalized at 500x.
    """
    score = 100.0
    score -= 0.3 * max(0.0, 100 - wpm)
    score -= 0.5 * max(0.0, wpm - 180)
    filler_ratio = filler_count / word_count if word_count > 0 else 0.0
    score -= filler_ratio * 500
    return round_half_up(clamp(score))


def score_pace(wpm: float) -> float:
    """0 WPM -> 0 ; 150+ WPM -> 100 (linear, capped)."""
    return min(100.0, wpm / 1.5)


def compute_habits_score(habit_scores: Dict[str, float]) -> int:
    """
    Weighted habit score.

    Args:
        habit_scores: One entry per key of ``HABIT_WEIGHTS``

    Returns:
        Integer 0..100
    """
    return round_half_up(clamp(_weighted(habit_scores, HABIT_WEIGHTS)))


def compute_overall_score(
    clarity: float,
    fluency: float,
    habits: float,
    wpm: float,
    eye_contact: float,
    posture: float,
) -> int:
    """Overall performance index (weights sum to 1.0)."""
    components = {
        "clarity": clarity,
        "fluency": fluency,
        "habits": habits,
        "pace": score_pace(wpm),
        "eye_contact": eye_contact,
        "posture": posture,
    }
    return round_half_up(clamp(_weighted(components, OVERALL_WEIGHTS)))
