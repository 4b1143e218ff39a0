from analysis.hedging import detect_hedging, phrase_pattern


def test_no_hedging_is_fully_declarative():
    result = detect_hedging("We will ship the release on Friday.")
    assert result.declarative_score == 100
    assert result.hedging_count == 0
    assert result.feedback.startswith("Excellent!")


def test_empty_transcript():
    result = detect_hedging("")
    assert result.declarative_score == 100
    assert result.word_count == 0


def test_single_hedge_in_long_transcript():
    text = "probably " + " ".join(["word"] * 99)
    result = detect_hedging(text)
    # 100 - 0.01 * 400 - 1 * 3
    assert result.declarative_score == 93
    assert result.hedging_count == 1
    assert result.feedback.startswith("Minor hedging")


def test_overlapping_hedges_each_count():
    result = detect_hedging("I think maybe we should probably go.")
    phrases = {h.phrase: h.count for h in result.hedges}
    assert phrases == {"i think maybe": 1, "maybe": 1, "probably": 1}
    assert result.hedging_count == 3
    assert result.declarative_score == 0
    assert '"i think maybe"' in result.feedback
    assert "I recommend" in result.feedback


def test_frequent_hedging():
    result = detect_hedging("Maybe. Maybe. Maybe. Maybe. Maybe. Maybe.")
    assert result.hedging_count == 6
    assert "declarative statements" in result.feedback
    assert result.hedges[0].phrase == "maybe"


def test_hedges_are_word_bounded():
    assert detect_hedging("Maybelline sells somewhatish products").hedging_count == 0


def test_phrase_pattern_tolerates_whitespace_runs():
    assert phrase_pattern("kind of").search("it was KIND \n of slow")
    assert not phrase_pattern("kind of").search("kindof")
