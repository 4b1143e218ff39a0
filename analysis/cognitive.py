"""
Cognitive habits: thought completion, answer structure and analogy use.

All three analyzers work on the transcript text alone.
"""

import logging
import re
from typing import Dict, Optional, Pattern

from . import constants as c
from .hedging import phrase_pattern
from .models import AnalogyAnalysis, AnalogyOccurrence, FrameworkAnalysis, ThoughtCompletion
from .stats import clamp, round_half_up

logger = logging.getLogger(__name__)

_SENTENCE_SPLIT = re.compile(r"[.!?]+")
_ANALOGY_PATTERNS: Dict[str, Pattern[str]] = {p: phrase_pattern(p) for p in c.ANALOGY_MARKERS}

FRAMEWORK_MISSING_PART = {
    "context": "Add context: open by setting the scene or describing the situation before your main point.",
    "core": "State your core point clearly: say explicitly what the key idea or solution is.",
    "connect": "Connect it back: close by explaining the impact or what it means for your listener.",
}


def analyze_thought_completion(transcript: Optional[str]) -> ThoughtCompletion:
    """
    Detect rambling from sentence lengths.

    Args:
        transcript: Transcribed text with sentence punctuation

    Returns:
        ThoughtCompletion. Transcripts under 20 characters yield a neutral
        score of 50.
    """
    text = transcript or ""
    if len(text) < c.THOUGHT_MIN_CHARS:
        return ThoughtCompletion(completion_score=50, feedback="Not enough data", insufficient_data=True)

    lengths = [len(s.split()) for s in _SENTENCE_SPLIT.split(text) if s.strip()]
    if not lengths:
        return ThoughtCompletion(completion_score=50, feedback="Not enough data", insufficient_data=True)

    # A very long sentence is also long, so it pays both penalties
    long_sentences = sum(1 for n in lengths if n > c.LONG_SENTENCE_WORDS)
    very_long = sum(1 for n in lengths if n > c.VERY_LONG_SENTENCE_WORDS)
    avg_length = sum(lengths) / len(lengths)

    score = int(clamp(90 - long_sentences * 5 - very_long * 10))

    if very_long > 0:
        feedback = "Some sentences run past 40 words. Break up long sentences into clear, separate thoughts."
    elif long_sentences > 2:
        feedback = "Several long sentences. Finish each thought sooner before starting the next."
    elif avg_length < c.SHORT_SENTENCE_AVG:
        feedback = "Your sentences are very short. Expand your ideas with a supporting detail or example."
    else:
        feedback = "Clear, complete thoughts with well-sized sentences."

    logger.debug(
        "Thought completion: %d sentences, avg=%.1f long=%d very_long=%d",
        len(lengths), avg_length, long_sentences, very_long,
    )

    return ThoughtCompletion(
        completion_score=score,
        sentence_count=len(lengths),
        avg_sentence_length=round(avg_length, 1),
        long_sentences=long_sentences,
        very_long_sentences=very_long,
        feedback=feedback,
    )


def detect_framework(transcript: Optional[str]) -> FrameworkAnalysis:
    """Check for Context -> Core -> Connect markers anywhere in the transcript."""
    lowered = (transcript or "").lower()
    found = {
        part: any(marker in lowered for marker in markers)
        for part, markers in c.FRAMEWORK_MARKERS.items()
    }
    parts = sum(found.values())
    score = round_half_up(parts / 3 * 100)

    if parts == 3:
        feedback = "Excellent structure! You set the context, delivered your core point and connected it to the impact."
    elif parts == 2:
        missing = next(part for part, present in found.items() if not present)
        feedback = FRAMEWORK_MISSING_PART[missing]
    elif parts == 1:
        feedback = "Try structuring answers as Context, then Core, then Connect."
    else:
        feedback = (
            "Use the Context -> Core -> Connect framework: start with the situation (Context), "
            "deliver your main point (Core), then explain why it matters (Connect)."
        )

    return FrameworkAnalysis(
        framework_score=score,
        has_context=found["context"],
        has_core=found["core"],
        has_connect=found["connect"],
        parts_found=parts,
        feedback=feedback,
    )


def _analogy_score(count: int) -> int:
    # Overuse is penalized slightly above five
    if count > 5:
        return 90
    if count >= 3:
        return 95
    if count >= 2:
        return 85
    if count >= 1:
        return 70
    return 50


def detect_analogies(transcript: Optional[str]) -> AnalogyAnalysis:
    """Count comparative and metaphorical markers."""
    text = transcript or ""
    analogies = []
    for phrase, pattern in _ANALOGY_PATTERNS.items():
        n = len(pattern.findall(text))
        if n > 0:
            analogies.append(AnalogyOccurrence(phrase=phrase, count=n))
    total = sum(a.count for a in analogies)

    if total == 0:
        feedback = "Try using an analogy or a vivid comparison to make abstract ideas concrete."
    elif total <= 2:
        feedback = "Good use of analogies. Keep reaching for comparisons that make ideas stick."
    else:
        feedback = "Excellent! Your analogies make complex ideas easy to picture."

    return AnalogyAnalysis(
        analogy_score=_analogy_score(total),
        analogy_count=total,
        analogies=analogies,
        feedback=feedback,
    )
