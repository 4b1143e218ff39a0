from analysis.advice_generator import AdviceGenerator
from analysis.models import (
    BlockAnalysis, FluencySeverity, HabitScore, PaceVariation, Priority,
    Recommendation, RepetitionAnalysis, StutteringReport,
)


def _card(name, score):
    return HabitScore(name=name, score=score, metric="-", feedback=f"{name} feedback")


def _stuttering(tips):
    return StutteringReport(
        fluency_score=60,
        overall_severity=FluencySeverity.MODERATE,
        blocks=BlockAnalysis(),
        repetitions=RepetitionAnalysis(),
        pace_variation=PaceVariation(),
        recommendations=[Recommendation(area="fluency", tip=t) for t in tips],
    )


def test_fallback_when_everything_is_good():
    recs = AdviceGenerator().generate_recommendations(
        scorecard=[_card("pauses", 90)], stuttering=None,
        wpm=140, filler_count=0, eye_contact=90, posture=90,
    )
    assert len(recs) == 1
    assert recs[0].area == "general"
    assert recs[0].priority is Priority.LOW
    assert recs[0].tip.startswith("Great job!")


def test_habit_tips_use_feedback_and_area():
    tips = AdviceGenerator().generate_habit_tips(
        [_card("pauses", 40), _card("volume", 65), _card("analogies", 70)]
    )
    assert [t.tip for t in tips] == ["pauses feedback", "volume feedback"]
    assert [t.area for t in tips] == ["delivery", "vocal"]
    assert [t.priority for t in tips] == [Priority.HIGH, Priority.MEDIUM]


def test_base_tips():
    tips = AdviceGenerator().generate_base_tips(wpm=90, filler_count=6, eye_contact=50, posture=50)
    assert [t.area for t in tips] == ["pace", "clarity", "presence", "presence"]
    assert "increase your speaking pace" in tips[0].tip

    fast = AdviceGenerator().generate_base_tips(wpm=200, filler_count=0, eye_contact=90, posture=90)
    assert len(fast) == 1
    assert "slowing down" in fast[0].tip


def test_sources_are_ordered_and_truncated():
    scorecard = [_card(n, 30) for n in ("pauses", "rate", "declarative", "volume", "frameworks")]
    recs = AdviceGenerator().generate_recommendations(
        scorecard=scorecard, stuttering=_stuttering(["slow down", "breathe"]),
        wpm=90, filler_count=10, eye_contact=10, posture=10,
    )
    assert len(recs) == 8
    assert [r.tip for r in recs[:5]] == [f"{n} feedback" for n in ("pauses", "rate", "declarative", "volume", "frameworks")]
    assert [r.tip for r in recs[5:7]] == ["slow down", "breathe"]
    assert recs[7].area == "pace"


def test_custom_limit():
    recs = AdviceGenerator(max_recommendations=2).generate_recommendations(
        scorecard=[], stuttering=None, wpm=90, filler_count=10, eye_contact=10, posture=10,
    )
    assert len(recs) == 2


def test_unmeasured_habits_give_no_tips():
    scorecard = [
        HabitScore(name="volume", score=50, metric="-", feedback="Not enough volume data", insufficient_data=True),
        _card("frameworks", 33),
    ]
    tips = AdviceGenerator().generate_habit_tips(scorecard)
    assert [t.tip for t in tips] == ["frameworks feedback"]
