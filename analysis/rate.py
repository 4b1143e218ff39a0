"""
Phrase-level speaking-rate variability.

Words are grouped into phrases wherever the silence to the next word exceeds
0.4s, and the spread of the per-phrase WPM tells whether the speaker varies
pace for emphasis. The fixed-window pace metric used for fluency lives in
``analysis.stuttering`` and is intentionally separate.
"""

import logging
from typing import List, Sequence

from . import constants as c
from .models import PhraseSegment, RateBand, RateVariability, WordTiming
from .stats import coefficient_of_variation, mean, std_dev
from .timing import speaking_span

logger = logging.getLogger(__name__)

RATE_FEEDBACK = {
    RateBand.MONOTONE: (
        "Steadiness is not the issue: your pace barely changes. Vary your speed, "
        "slowing down for key points and moving faster through familiar material."
    ),
    RateBand.ERRATIC: (
        "Your pace is erratic. Aim for smoother transitions between faster and slower sections."
    ),
    RateBand.VARIED: "Nice pace variety. You change speed naturally to keep listeners engaged.",
}


def segment_phrases(words: Sequence[WordTiming]) -> List[List[WordTiming]]:
    """Split words into maximal runs whose internal gaps are <= 0.4s."""
    phrases: List[List[WordTiming]] = []
    current: List[WordTiming] = []
    for word in words:
        if current and word.start - current[-1].end > c.PHRASE_GAP_SEC:
            phrases.append(current)
            current = []
        current.append(word)
    if current:
        phrases.append(current)
    return phrases


def rate_band(cv: float) -> RateBand:
    if cv < c.RATE_CV_MONOTONE:
        return RateBand.MONOTONE
    if cv > c.RATE_CV_ERRATIC:
        return RateBand.ERRATIC
    return RateBand.VARIED


def _phrase_segment(phrase: List[WordTiming]) -> PhraseSegment:
    duration = phrase[-1].end - phrase[0].start
    return PhraseSegment(
        start=phrase[0].start,
        end=phrase[-1].end,
        word_count=len(phrase),
        wpm=round(len(phrase) / duration * 60, 1),
    )


def analyze_rate_variability(words: Sequence[WordTiming]) -> RateVariability:
    """
    Measure how much the local speaking rate varies between phrases.

    Args:
        words: Chronological word timings

    Returns:
        RateVariability. Fewer than 10 words gives a neutral score of 50;
        fewer than 3 usable phrases falls back to a whole-recording WPM with
        a fixed score of 70.
    """
    if len(words) < c.RATE_MIN_WORDS:
        return RateVariability(variability_score=50, feedback="Not enough data", insufficient_data=True)

    segments = []
    for phrase in segment_phrases(words):
        if len(phrase) < c.PHRASE_MIN_WORDS:
            continue
        if phrase[-1].end - phrase[0].start < c.PHRASE_MIN_DURATION_SEC:
            continue
        segment = _phrase_segment(phrase)
        if segment.wpm >= c.PHRASE_MAX_WPM:
            continue
        segments.append(segment)

    if len(segments) < c.RATE_MIN_PHRASES:
        span = speaking_span(words)
        overall = round(len(words) / span * 60, 1) if span > 0 else 0.0
        logger.debug("Rate: only %d usable phrases, falling back to %.1f WPM", len(segments), overall)
        return RateVariability(
            variability_score=c.RATE_SCORE_FALLBACK,
            average_wpm=overall,
            min_wpm=overall,
            max_wpm=overall,
            phrase_count=len(segments),
            segments=segments[:c.RATE_MAX_SEGMENTS],
            feedback="Speak in longer continuous phrases so your pace variety can be measured.",
        )

    rates = [s.wpm for s in segments]
    cv = coefficient_of_variation(rates)
    band = rate_band(cv)
    has_good_variation = band is RateBand.VARIED
    # Monotone and erratic share a score; only the feedback tells them apart
    score = c.RATE_SCORE_VARIED if has_good_variation else c.RATE_SCORE_UNVARIED

    logger.debug("Rate: %d phrases, cv=%.1f band=%s", len(segments), cv, band.value)

    return RateVariability(
        variability_score=score,
        average_wpm=round(mean(rates), 1),
        min_wpm=min(rates),
        max_wpm=max(rates),
        std_dev=round(std_dev(rates), 1),
        coefficient_of_variation=round(cv, 1),
        has_good_variation=has_good_variation,
        band=band,
        phrase_count=len(segments),
        segments=segments[:c.RATE_MAX_SEGMENTS],
        feedback=RATE_FEEDBACK[band],
    )
