"""Helpers over word-timing sequences."""

from typing import Iterator, List, Sequence, Tuple

from .models import WordTiming


def iter_gaps(words: Sequence[WordTiming]) -> Iterator[Tuple[WordTiming, WordTiming, float]]:
    """Yield ``(previous, current, gap_seconds)`` for each adjacent word pair."""
    for prev, curr in zip(words, words[1:]):
        yield prev, curr, curr.start - prev.end


def check_word_timings(words: Sequence[WordTiming]) -> List[str]:
    """
    Describe every violation of the chronological-timing precondition.

    Args:
        words: Word timings as delivered by the transcriber

    Returns:
        Human-readable problems, empty when the sequence is well formed
    """
    problems = []
    for i, w in enumerate(words):
        if w.end < w.start:
            problems.append(f"word {i} ({w.word!r}) ends at {w.end}s before it starts at {w.start}s")
        if i > 0 and w.start < words[i - 1].end:
            problems.append(
                f"word {i} ({w.word!r}) starts at {w.start}s before word {i - 1} ends at {words[i - 1].end}s"
            )
    return problems


def speaking_span(words: Sequence[WordTiming]) -> float:
    """Seconds from the first word's start to the last word's end."""
    if not words:
        return 0.0
    return words[-1].end - words[0].start
