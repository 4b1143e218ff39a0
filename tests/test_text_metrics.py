from analysis.text_metrics import calculate_wpm, clean_token, count_words, detect_filler_words


def test_empty_transcript_has_no_fillers():
    result = detect_filler_words("")
    assert result.count == 0
    assert result.occurrences == []
    assert result.positions == []


def test_none_transcript_has_no_fillers():
    assert detect_filler_words(None).count == 0


def test_single_word_fillers_strip_punctuation():
    result = detect_filler_words("um, so like, I think")
    counts = {o.word: o.count for o in result.occurrences}
    assert result.count == 3
    assert counts["um"] == 1
    assert counts["so"] == 1
    assert counts["like"] == 1
    assert result.positions == [0, 1, 2]


def test_multi_word_fillers_are_counted_by_substring():
    result = detect_filler_words("You know, I mean it. You know?")
    counts = {o.word: o.count for o in result.occurrences}
    assert counts == {"you know": 2, "i mean": 1}
    assert result.count == 3
    assert result.occurrences[0].word == "you know"
    # multi-word hits carry no positions
    assert result.positions == []


def test_occurrences_sorted_by_frequency():
    result = detect_filler_words("Like I said, um, um, um... okay")
    assert [o.word for o in result.occurrences][0] == "um"
    assert result.occurrences[0].count == 3
    assert result.count == 5


def test_non_filler_words_are_ignored():
    result = detect_filler_words("The quarterly numbers improved significantly.")
    assert result.count == 0


def test_clean_token():
    assert clean_token("Okay!") == "okay"
    assert clean_token("well;") == "well"


def test_count_words():
    assert count_words("  one   two\nthree ") == 3
    assert count_words("") == 0
    assert count_words(None) == 0


def test_calculate_wpm_guards():
    assert calculate_wpm("", 60000) == 0
    assert calculate_wpm("one two", 0) == 0
    assert calculate_wpm("one two", -5) == 0


def test_calculate_wpm_rounds_half_up():
    assert calculate_wpm("hello", 120000) == 1
    assert calculate_wpm("a b c d e", 120000) == 3


def test_calculate_wpm_values():
    assert calculate_wpm("one two three", 60000) == 3
    assert calculate_wpm(" ".join(["word"] * 150), 60000) == 150
    assert calculate_wpm(" ".join(["word"] * 60), 30000) == 120


def test_leading_whitespace_shifts_positions():
    result = detect_filler_words("  um okay")
    assert result.count == 2
    assert result.positions == [1, 2]
