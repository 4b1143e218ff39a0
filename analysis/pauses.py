"""
Strategic pause analysis.

Classifies the silence between consecutive words into short, strategic and
too-long buckets and scores how well pauses are used for emphasis. This is
the coaching view of pauses; fluency blocks are handled separately in
``analysis.stuttering`` with their own thresholds.
"""

import logging
from typing import Sequence

from . import constants as c
from .models import Pause, PauseAnalysis, PauseKind, WordTiming
from .stats import clamp
from .timing import iter_gaps

logger = logging.getLogger(__name__)

FEEDBACK_NO_PAUSES = (
    "You're speaking without pausing. Slow down and let key points land with a deliberate pause."
)
FEEDBACK_NO_STRATEGIC = (
    "Your pauses are very brief. Pause longer (around a second) before and after important points for emphasis."
)
FEEDBACK_AWKWARD = (
    "Several silences ran past 4 seconds and may feel awkward. Keep deliberate pauses under a few seconds."
)
FEEDBACK_MOSTLY_SHORT = (
    "Mostly short pauses. Mix in longer, deliberate pauses to emphasize your key ideas."
)
FEEDBACK_PRAISE = "Great use of strategic pauses to emphasize your points."


def classify_pause(gap: float) -> PauseKind:
    """Bucket a gap that is already known to be a pause (>= 0.3s)."""
    if gap >= c.PAUSE_TOO_LONG_SEC:
        return PauseKind.TOO_LONG
    if gap >= c.PAUSE_STRATEGIC_SEC:
        return PauseKind.STRATEGIC
    return PauseKind.SHORT


def analyze_strategic_pauses(words: Sequence[WordTiming]) -> PauseAnalysis:
    """
    Score the use of pauses across a recording.

    Args:
        words: Chronological word timings

    Returns:
        PauseAnalysis with bucket counts, the longest pauses and feedback.
        Fewer than 5 words yields a neutral score of 50.
    """
    if len(words) < c.PAUSE_MIN_WORDS:
        return PauseAnalysis(pause_score=50, feedback="Not enough data", insufficient_data=True)

    pauses = []
    for prev, curr, gap in iter_gaps(words):
        if gap < c.PAUSE_MIN_SEC:
            continue
        pauses.append(Pause(
            duration=round(gap, 2),
            timestamp=prev.end,
            before_word=prev.word,
            after_word=curr.word,
            kind=classify_pause(gap),
        ))

    short = sum(1 for p in pauses if p.kind is PauseKind.SHORT)
    strategic = sum(1 for p in pauses if p.kind is PauseKind.STRATEGIC)
    too_long = sum(1 for p in pauses if p.kind is PauseKind.TOO_LONG)
    strategic_ratio = strategic / len(words)

    score = c.PAUSE_BASE_SCORE
    if strategic_ratio > c.PAUSE_STRATEGIC_RATIO_GOOD:
        score += 15
    # Stacks with the bonus above: a slightly choppy speaker still nets +10
    if strategic_ratio > c.PAUSE_STRATEGIC_RATIO_CHOPPY:
        score -= 5
    score -= too_long * 10
    if not pauses:
        score = c.PAUSE_NO_PAUSES_SCORE
    score = int(clamp(score))

    if not pauses:
        feedback = FEEDBACK_NO_PAUSES
    elif strategic == 0:
        feedback = FEEDBACK_NO_STRATEGIC
    elif too_long > 1:
        feedback = FEEDBACK_AWKWARD
    elif short > strategic * 3:
        feedback = FEEDBACK_MOSTLY_SHORT
    else:
        feedback = FEEDBACK_PRAISE

    longest = sorted(pauses, key=lambda p: p.duration, reverse=True)[:c.PAUSE_TOP_N]

    logger.debug(
        "Pauses: total=%d short=%d strategic=%d too_long=%d score=%d",
        len(pauses), short, strategic, too_long, score,
    )

    return PauseAnalysis(
        pause_score=score,
        total_pauses=len(pauses),
        short_pauses=short,
        strategic_pauses=strategic,
        too_long_pauses=too_long,
        strategic_ratio=round(strategic_ratio, 4),
        longest_pauses=longest,
        feedback=feedback,
    )
