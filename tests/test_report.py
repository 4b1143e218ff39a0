import logging

import pytest

from analysis import InvalidWordTimingsError, generate_performance_report
from analysis.models import (
    AnalysisInput, BlockAnalysis, FluencySeverity, PaceVariation,
    RepetitionAnalysis, StutteringReport, WordTiming,
)
from config import settings
from _helpers import assert_common_report_fields, build_words, samples

TRANSCRIPT = (
    "The situation was tense. My approach was simple, like a relay race. "
    "As a result we shipped early."
)


def _sample_input(**overrides) -> AnalysisInput:
    tokens = TRANSCRIPT.split()
    gaps = [1.0 if i % 5 == 4 else 0.25 for i in range(len(tokens) - 1)]
    data = dict(
        transcript=TRANSCRIPT,
        words=build_words(gaps, tokens=tokens),
        volume_history=samples([40] * 12),
        duration_ms=8000,
        eye_contact_percentage=80,
        posture_score=75,
    )
    data.update(overrides)
    return AnalysisInput(**data)


def test_full_report_shape():
    report = generate_performance_report(_sample_input())
    assert_common_report_fields(report.model_dump(mode="json"))

    assert report.summary.word_count == len(TRANSCRIPT.split())
    assert report.summary.duration_label == "0:08"
    assert report.speech.wpm == 135
    assert report.summary.wpm_label == "Optimal"
    assert report.transcript == TRANSCRIPT
    assert report.visual.eye_contact_percentage == 80

    cognitive = report.habits.cognitive
    assert cognitive.frameworks.parts_found == 3
    assert cognitive.analogies.analogy_count == 1
    assert report.habits.vocal.volume.volume_score == 90

    names = [h.name for h in report.habits.scorecard]
    assert names == [
        "pauses", "rate", "declarative", "volume", "thought_completion", "frameworks", "analogies",
    ]
    assert report.habits.scorecard[2].metric == "Direct speech"


def test_stuttering_is_computed_from_words():
    report = generate_performance_report(_sample_input())
    assert report.stuttering is not None
    assert report.stuttering.word_count == len(TRANSCRIPT.split())


def test_supplied_stuttering_report_is_used_verbatim():
    supplied = StutteringReport(
        fluency_score=42,
        overall_severity=FluencySeverity.SIGNIFICANT,
        blocks=BlockAnalysis(),
        repetitions=RepetitionAnalysis(),
        pace_variation=PaceVariation(),
    )
    report = generate_performance_report(_sample_input(stuttering_report=supplied))
    assert report.stuttering == supplied


def test_report_is_deterministic():
    data = _sample_input()
    first = generate_performance_report(data)
    second = generate_performance_report(data)
    assert first.model_dump() == second.model_dump()


def test_dict_input_is_accepted():
    payload = _sample_input().model_dump()
    report = generate_performance_report(payload)
    assert report.summary.word_count == len(TRANSCRIPT.split())


def test_empty_input():
    report = generate_performance_report(AnalysisInput())
    assert_common_report_fields(report.model_dump(mode="json"))
    assert report.stuttering is None
    assert report.speech.wpm == 0
    assert report.summary.habits_score == 50
    # 0.15 * 70 clarity + 0.10 * 100 fluency + 0.35 * 50 habits
    assert report.summary.overall_score == 38
    assert report.summary.score_label == "Needs Work"
    assert report.summary.duration_label == "0:00"
    # unmeasured habits give no tips: framework and analogy tips, then base tips
    assert [r.area for r in report.recommendations] == ["cognitive", "cognitive", "pace", "presence", "presence"]
    assert not any(r.tip.startswith("Not enough") for r in report.recommendations)


def test_unmeasured_habits_are_flagged_and_skipped():
    transcript = "We grew revenue last quarter because the team focused on fewer bigger deals."
    report = generate_performance_report(
        AnalysisInput(transcript=transcript, duration_ms=6000, eye_contact_percentage=90, posture_score=90)
    )
    cards = {h.name: h for h in report.habits.scorecard}
    assert cards["volume"].insufficient_data
    assert cards["pauses"].insufficient_data
    assert cards["rate"].insufficient_data
    assert not cards["thought_completion"].insufficient_data
    assert report.habits.vocal.volume.insufficient_data
    tips = [r.tip for r in report.recommendations]
    assert "Not enough volume data" not in tips
    assert not any(t.startswith("Not enough") for t in tips)


def test_recommendation_limit_follows_settings(monkeypatch):
    monkeypatch.setattr(settings, "SPEECHCOACH_MAX_RECOMMENDATIONS", 3)
    report = generate_performance_report(AnalysisInput())
    assert len(report.recommendations) == 3


def _overlapping_words():
    return [
        WordTiming(word="hello", start=0.0, end=1.0),
        WordTiming(word="there", start=0.5, end=1.5),
        WordTiming(word="friend", start=2.0, end=2.5),
    ]


def test_malformed_timings_warn_by_default(caplog):
    with caplog.at_level(logging.WARNING, logger="analysis.report"):
        report = generate_performance_report(
            _sample_input(words=_overlapping_words()), strict_timings=False
        )
    assert report.stuttering is not None
    assert any("not chronological" in r.getMessage() for r in caplog.records)


def test_malformed_timings_raise_in_strict_mode():
    with pytest.raises(InvalidWordTimingsError) as excinfo:
        generate_performance_report(_sample_input(words=_overlapping_words()), strict_timings=True)
    assert len(excinfo.value.problems) == 1
    assert "'there'" in excinfo.value.problems[0]


def test_strict_mode_from_settings(monkeypatch):
    monkeypatch.setattr(settings, "SPEECHCOACH_STRICT_TIMINGS", True)
    with pytest.raises(InvalidWordTimingsError):
        generate_performance_report(_sample_input(words=_overlapping_words()))
