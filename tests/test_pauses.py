from analysis.models import PauseKind, WordTiming
from analysis.pauses import (
    FEEDBACK_AWKWARD, FEEDBACK_MOSTLY_SHORT, FEEDBACK_NO_PAUSES,
    FEEDBACK_NO_STRATEGIC, FEEDBACK_PRAISE, analyze_strategic_pauses, classify_pause,
)
from _helpers import build_words


def test_not_enough_words_returns_neutral_score():
    result = analyze_strategic_pauses(build_words([0.25, 0.25, 0.25]))
    assert result.pause_score == 50
    assert result.feedback == "Not enough data"


def test_classify_pause_buckets():
    assert classify_pause(0.3) is PauseKind.SHORT
    assert classify_pause(0.79) is PauseKind.SHORT
    assert classify_pause(0.8) is PauseKind.STRATEGIC
    assert classify_pause(1.3) is PauseKind.STRATEGIC
    assert classify_pause(4.0) is PauseKind.TOO_LONG


def test_gap_of_1_3_seconds_is_strategic():
    words = [
        WordTiming(word="first", start=0.0, end=0.2),
        WordTiming(word="second", start=1.5, end=1.7),
        WordTiming(word="third", start=1.75, end=2.0),
        WordTiming(word="fourth", start=2.0, end=2.25),
        WordTiming(word="fifth", start=2.25, end=2.5),
    ]
    result = analyze_strategic_pauses(words)
    assert result.total_pauses == 1
    assert result.strategic_pauses == 1
    pause = result.longest_pauses[0]
    assert pause.kind is PauseKind.STRATEGIC
    assert pause.before_word == "first"
    assert pause.after_word == "second"
    assert pause.duration == 1.3
    # ratio 0.2: +15 bonus and -5 choppiness stack
    assert result.pause_score == 80
    assert result.feedback == FEEDBACK_PRAISE


def test_no_pauses_scores_30():
    result = analyze_strategic_pauses(build_words([0.25] * 6))
    assert result.total_pauses == 0
    assert result.pause_score == 30
    assert result.feedback == FEEDBACK_NO_PAUSES


def test_only_short_pauses_asks_for_longer_pauses():
    result = analyze_strategic_pauses(build_words([0.5] * 9))
    assert result.short_pauses == 9
    assert result.strategic_pauses == 0
    assert result.pause_score == 70
    assert result.feedback == FEEDBACK_NO_STRATEGIC


def test_multiple_too_long_pauses_are_awkward():
    gaps = [0.25] * 19
    gaps[3] = 5.0
    gaps[8] = 5.0
    gaps[12] = 1.0
    result = analyze_strategic_pauses(build_words(gaps))
    assert result.too_long_pauses == 2
    assert result.strategic_pauses == 1
    # strategic ratio is exactly 0.05, so no bonus
    assert result.pause_score == 50
    assert result.feedback == FEEDBACK_AWKWARD


def test_mostly_short_pauses():
    gaps = [0.25] * 19
    for i in (1, 4, 7, 10):
        gaps[i] = 0.5
    gaps[15] = 1.0
    result = analyze_strategic_pauses(build_words(gaps))
    assert result.short_pauses == 4
    assert result.strategic_pauses == 1
    assert result.pause_score == 70
    assert result.feedback == FEEDBACK_MOSTLY_SHORT


def test_score_is_clamped_at_zero():
    result = analyze_strategic_pauses(build_words([5.0] * 10))
    assert result.too_long_pauses == 10
    assert result.pause_score == 0


def test_longest_pauses_top_five_sorted():
    gaps = [1.0, 2.0, 1.5, 3.0, 0.5, 2.5, 1.25]
    result = analyze_strategic_pauses(build_words(gaps))
    durations = [p.duration for p in result.longest_pauses]
    assert durations == [3.0, 2.5, 2.0, 1.5, 1.25]
