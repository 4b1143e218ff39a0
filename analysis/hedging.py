"""Detection of confidence-undermining hedging phrases."""

import logging
import re
from typing import Dict, Optional, Pattern

from . import constants as c
from .models import HedgeOccurrence, HedgingAnalysis
from .stats import clamp, round_half_up
from .text_metrics import count_words

logger = logging.getLogger(__name__)


def phrase_pattern(phrase: str) -> Pattern[str]:
    """Word-bounded, case-insensitive pattern tolerant to any run of whitespace."""
    body = r"\s+".join(re.escape(part) for part in phrase.split())
    return re.compile(r"\b" + body + r"\b", re.IGNORECASE)


_HEDGE_PATTERNS: Dict[str, Pattern[str]] = {p: phrase_pattern(p) for p in c.HEDGING_PHRASES}


def detect_hedging(transcript: Optional[str]) -> HedgingAnalysis:
    """
    Count hedging phrases and score how declarative the speech sounds.

    Args:
        transcript: Transcribed text

    Returns:
        HedgingAnalysis with per-phrase counts sorted by frequency
    """
    text = transcript or ""
    word_count = count_words(text)

    hedges = []
    for phrase, pattern in _HEDGE_PATTERNS.items():
        n = len(pattern.findall(text))
        if n > 0:
            hedges.append(HedgeOccurrence(phrase=phrase, count=n))
    hedges.sort(key=lambda h: h.count, reverse=True)
    total = sum(h.count for h in hedges)

    ratio = total / word_count if word_count else 0.0
    score = clamp(
        100 - ratio * c.DECLARATIVE_RATIO_PENALTY - total * c.DECLARATIVE_COUNT_PENALTY
    )

    if total == 0:
        feedback = "Excellent! You speak with confident, declarative statements."
    elif total <= 2:
        feedback = "Minor hedging detected. Your delivery is mostly direct and confident."
    elif total <= 5:
        top = hedges[0].phrase
        replacement = c.HEDGE_REPLACEMENTS.get(top, "a direct statement")
        feedback = f"You often say \"{top}\". Try replacing it with {replacement}."
    else:
        feedback = "Frequent hedging weakens your message. Use more declarative statements."

    logger.debug(f"Hedging: {total} hits over {word_count} words, score={round_half_up(score)}")

    return HedgingAnalysis(
        declarative_score=round_half_up(score),
        hedging_count=total,
        word_count=word_count,
        hedges=hedges,
        feedback=feedback,
    )
