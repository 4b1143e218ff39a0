"""
Text metrics computation for speech analysis.

This module provides functions to compute words-per-minute (WPM) and
detect English filler words from transcribed text.
"""

import logging
import re
from typing import Dict, List, Optional

from .constants import MULTI_WORD_FILLERS, SINGLE_WORD_FILLERS, TOKEN_PUNCTUATION
from .models import FillerAnalysis, FillerOccurrence
from .stats import round_half_up

logger = logging.getLogger(__name__)

_PUNCT_TABLE = str.maketrans("", "", TOKEN_PUNCTUATION)
_WHITESPACE = re.compile(r"\s+")


def clean_token(token: str) -> str:
    """Lower-case a token and strip sentence punctuation from it."""
    return token.lower().translate(_PUNCT_TABLE)


def count_words(transcript: Optional[str]) -> int:
    """Number of whitespace-separated tokens in the transcript."""
    if not transcript:
        return 0
    return len(transcript.split())


def calculate_wpm(transcript: Optional[str], duration_ms: float) -> int:
    """
    Compute words-per-minute over the whole recording.

    Args:
        transcript: Transcribed text
        duration_ms: Recording duration in milliseconds

    Returns:
        Rounded WPM, or 0 if the transcript is empty or duration is not positive
    """
    if not transcript or duration_ms <= 0:
        return 0
    minutes = duration_ms / 60000.0
    return round_half_up(count_words(transcript) / minutes)


def detect_filler_words(transcript: Optional[str]) -> FillerAnalysis:
    """
    Detect filler words in a transcript.

    Single-word fillers are matched per token after stripping punctuation and
    their word indexes are recorded. Tokens come from splitting on whitespace
    runs, so leading whitespace yields an empty token at index 0. Multi-word
    fillers ("you know", "i mean") are counted by repeated substring search
    over the whole text.

    Args:
        transcript: Transcribed text

    Returns:
        FillerAnalysis with total count, per-filler occurrences sorted by
        frequency and the positions of single-word hits
    """
    if not transcript:
        return FillerAnalysis()

    lowered = transcript.lower()
    counts: Dict[str, int] = {}
    positions: List[int] = []

    for index, token in enumerate(_WHITESPACE.split(lowered)):
        word = clean_token(token)
        if word in SINGLE_WORD_FILLERS:
            counts[word] = counts.get(word, 0) + 1
            positions.append(index)

    for filler in MULTI_WORD_FILLERS:
        idx = lowered.find(filler)
        while idx != -1:
            counts[filler] = counts.get(filler, 0) + 1
            idx = lowered.find(filler, idx + 1)

    occurrences = sorted(
        (FillerOccurrence(word=w, count=c) for w, c in counts.items()),
        key=lambda o: o.count,
        reverse=True,
    )
    total = sum(o.count for o in occurrences)

    logger.debug(f"Filler detection: {total} total fillers, types: {list(counts.keys())}")

    return FillerAnalysis(count=total, occurrences=occurrences, positions=positions)
