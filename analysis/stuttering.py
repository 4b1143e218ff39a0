"""
Stuttering pattern analysis.

Analyzes word-level timestamps to build a fluency profile:
- Blocks (abnormal pauses between words)
- Repetitions (repeated words and stuttered syllables)
- Pace variation over fixed 10-second windows

The thresholds here are the clinical fluency set and are independent from
the coaching pause buckets and phrase-rate analysis.
"""

import logging
import math
import re
from typing import List, Sequence

from . import constants as c
from .models import (
    Block, BlockAnalysis, BlockSeverity, FluencySeverity, PaceConsistency,
    PaceSegment, PaceVariation, Priority, Recommendation, Repetition,
    RepetitionAnalysis, RepetitionType, StutteringReport, WordTiming,
)
from .stats import clamp, coefficient_of_variation, mean, round_half_up
from .text_metrics import clean_token
from .timing import iter_gaps, speaking_span

logger = logging.getLogger(__name__)

# Single letter repeated with hyphens, then the rest of the word: "b-b-ball"
SYLLABLE_STUTTER = re.compile(r"\b([a-z])-\1+-[a-z]+", re.IGNORECASE)

FLUENCY_AREA = "fluency"


def block_severity(count: int, severe_count: int) -> BlockSeverity:
    if count > 5 or severe_count > 2:
        return BlockSeverity.HIGH
    if count > 2 or severe_count > 0:
        return BlockSeverity.MODERATE
    if count > 0:
        return BlockSeverity.MILD
    return BlockSeverity.NONE


def detect_blocks(words: Sequence[WordTiming]) -> BlockAnalysis:
    """
    Detect abnormal pauses (>= 0.5s) between consecutive words.

    Args:
        words: Chronological word timings

    Returns:
        BlockAnalysis; gaps of 1.0s or more are flagged as severe
    """
    if len(words) < 2:
        return BlockAnalysis()

    blocks = [
        Block(
            before_word=prev.word,
            after_word=curr.word,
            duration=round(gap, 2),
            timestamp=prev.end,
            is_severe=gap >= c.SEVERE_BLOCK_THRESHOLD_SEC,
        )
        for prev, curr, gap in iter_gaps(words)
        if gap >= c.BLOCK_THRESHOLD_SEC
    ]
    severe = sum(1 for b in blocks if b.is_severe)

    return BlockAnalysis(
        blocks=blocks,
        count=len(blocks),
        severe_count=severe,
        severity=block_severity(len(blocks), severe),
    )


def detect_repetitions(words: Sequence[WordTiming]) -> RepetitionAnalysis:
    """
    Detect repeated words ("the the the") and stuttered syllables ("b-b-ball").

    Consecutive duplicates are grouped greedily and compared after
    lower-casing and stripping punctuation. Syllable stutters are matched on
    the joined transcript and carry no timestamp.
    """
    if len(words) < 2:
        return RepetitionAnalysis()

    repetitions: List[Repetition] = []
    tokens = [clean_token(w.word) for w in words]
    i = 0
    while i < len(tokens):
        j = i + 1
        while j < len(tokens) and tokens[j] == tokens[i]:
            j += 1
        if j - i > 1:
            repetitions.append(Repetition(
                word=tokens[i],
                count=j - i,
                timestamp=words[i].start,
                type=RepetitionType.WORD,
            ))
        i = j

    text = " ".join(w.word for w in words)
    for match in SYLLABLE_STUTTER.finditer(text):
        stutter = match.group(0)
        repetitions.append(Repetition(
            word=stutter,
            count=stutter.count("-") + 1,
            timestamp=None,
            type=RepetitionType.SYLLABLE,
        ))

    return RepetitionAnalysis(repetitions=repetitions, count=len(repetitions))


def pace_consistency(variation: float) -> PaceConsistency:
    if variation > c.PACE_HIGHLY_VARIABLE:
        return PaceConsistency.HIGHLY_VARIABLE
    if variation > c.PACE_SOMEWHAT_VARIABLE:
        return PaceConsistency.SOMEWHAT_VARIABLE
    return PaceConsistency.CONSISTENT


def analyze_pace_variation(
    words: Sequence[WordTiming], segment_duration: float = c.PACE_WINDOW_SEC
) -> PaceVariation:
    """
    Measure pace consistency over fixed wall-clock windows.

    Only complete windows are measured, starting at the first word. Each
    window's WPM uses the actual span of the words that start inside it.

    Args:
        words: Chronological word timings
        segment_duration: Window length in seconds

    Returns:
        PaceVariation with per-window WPM and the coefficient of variation
        over non-empty windows. Fewer than 5 words, or a single window, give
        an "unknown" consistency.
    """
    if len(words) < c.PACE_MIN_WORDS:
        return PaceVariation()

    origin = words[0].start
    num_segments = max(1, math.floor(speaking_span(words) / segment_duration))
    segments = []
    for seg in range(num_segments):
        seg_start = origin + seg * segment_duration
        seg_end = seg_start + segment_duration
        in_window = [w for w in words if seg_start <= w.start < seg_end]
        if in_window:
            actual = in_window[-1].end - in_window[0].start
        else:
            actual = segment_duration
        wpm = round_half_up(len(in_window) / actual * 60) if actual > 0 else 0
        segments.append(PaceSegment(
            start_time=round(seg_start, 1),
            wpm=wpm,
            word_count=len(in_window),
        ))

    if len(segments) == 1:
        return PaceVariation(
            segments=segments,
            consistency=PaceConsistency.UNKNOWN,
            average_wpm=segments[0].wpm,
        )

    rates = [s.wpm for s in segments if s.wpm > 0]
    if not rates:
        return PaceVariation(segments=segments)

    variation = round_half_up(coefficient_of_variation(rates))
    return PaceVariation(
        segments=segments,
        variation=variation,
        consistency=pace_consistency(variation),
        average_wpm=round_half_up(mean(rates)),
    )


def fluency_severity(score: float) -> FluencySeverity:
    if score < 50:
        return FluencySeverity.SIGNIFICANT
    if score < 70:
        return FluencySeverity.MODERATE
    if score < 85:
        return FluencySeverity.MILD
    return FluencySeverity.MINIMAL


def generate_stuttering_recommendations(
    blocks: BlockAnalysis, repetitions: RepetitionAnalysis, pace: PaceVariation
) -> List[Recommendation]:
    """Fluency tips from blocks, repetitions and pace; never empty, at most 4."""
    tips = []

    if blocks.severity is BlockSeverity.HIGH:
        tips.append(Recommendation(
            area=FLUENCY_AREA, priority=Priority.HIGH,
            tip="Practice gentle onset technique - start words with a soft, easy voice.",
        ))
        tips.append(Recommendation(
            area=FLUENCY_AREA, priority=Priority.HIGH,
            tip="Focus on exhaling gently before speaking to reduce tension.",
        ))
    elif blocks.severity is BlockSeverity.MODERATE:
        tips.append(Recommendation(
            area=FLUENCY_AREA, priority=Priority.MEDIUM,
            tip="Use intentional pauses at natural points instead of fighting through blocks.",
        ))
    elif blocks.count > 0:
        tips.append(Recommendation(
            area=FLUENCY_AREA, priority=Priority.LOW,
            tip="Good job managing blocks! Continue practicing relaxed breathing.",
        ))

    if repetitions.count > 3:
        tips.append(Recommendation(
            area=FLUENCY_AREA, priority=Priority.MEDIUM,
            tip="Try slowing down slightly and stretching the first sound of words.",
        ))
    elif repetitions.count > 0:
        tips.append(Recommendation(
            area=FLUENCY_AREA, priority=Priority.LOW,
            tip="Practice smooth, flowing speech - let words connect naturally.",
        ))

    if pace.consistency is PaceConsistency.HIGHLY_VARIABLE:
        tips.append(Recommendation(
            area=FLUENCY_AREA, priority=Priority.MEDIUM,
            tip="Practice with a metronome or rhythmic pattern to stabilize pace.",
        ))
    elif pace.average_wpm is not None and pace.average_wpm < 100:
        tips.append(Recommendation(
            area=FLUENCY_AREA, priority=Priority.LOW,
            tip="Your pace is deliberate - this is good for control! Gradually increase as comfort grows.",
        ))

    if not tips:
        tips.append(Recommendation(
            area=FLUENCY_AREA, priority=Priority.LOW,
            tip="Excellent fluency! Keep up the great practice.",
        ))

    return tips[:c.STUTTERING_MAX_RECOMMENDATIONS]


def generate_stuttering_report(words: Sequence[WordTiming]) -> StutteringReport:
    """
    Build the complete fluency profile for a recording.

    Args:
        words: Chronological word timings

    Returns:
        StutteringReport with fluency score, severity, the three detector
        results and recommendations
    """
    blocks = detect_blocks(words)
    repetitions = detect_repetitions(words)
    pace = analyze_pace_variation(words)

    score = 100
    score -= blocks.count * c.FLUENCY_BLOCK_PENALTY
    score -= blocks.severe_count * c.FLUENCY_SEVERE_BLOCK_PENALTY
    score -= repetitions.count * c.FLUENCY_REPETITION_PENALTY
    if pace.variation > c.PACE_HIGHLY_VARIABLE:
        score -= c.FLUENCY_HIGH_VARIATION_PENALTY
    elif pace.variation > c.PACE_SOMEWHAT_VARIABLE:
        score -= c.FLUENCY_MODERATE_VARIATION_PENALTY
    score = int(clamp(score))

    logger.debug(
        "Fluency: blocks=%d severe=%d repetitions=%d pace_variation=%d score=%d",
        blocks.count, blocks.severe_count, repetitions.count, pace.variation, score,
    )

    return StutteringReport(
        fluency_score=score,
        overall_severity=fluency_severity(score),
        blocks=blocks,
        repetitions=repetitions,
        pace_variation=pace,
        recommendations=generate_stuttering_recommendations(blocks, repetitions, pace),
        word_count=len(words),
    )
