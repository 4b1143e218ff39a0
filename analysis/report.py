"""
Performance report aggregation.

Runs every analyzer over one ``AnalysisInput`` and composes the results,
composite scores and recommendations into an immutable ``PerformanceReport``.
The analyzers share no state, so their order does not matter.
"""

import logging
from typing import Any, Dict, List, Optional, Union

from config import settings
from utils.logging import log_execution_time

from .advice_generator import AdviceGenerator
from .cognitive import analyze_thought_completion, detect_analogies, detect_framework
from .exceptions import InvalidWordTimingsError
from .formatters import format_duration, score_label, wpm_label
from .hedging import detect_hedging
from .models import (
    AnalysisInput, CognitiveHabits, DeliveryHabits, HabitScore, Habits,
    PerformanceReport, SpeechMetrics, Summary, VisualMetrics, VocalHabits,
)
from .pauses import analyze_strategic_pauses
from .rate import analyze_rate_variability
from .scoring import compute_habits_score, compute_overall_score, score_clarity
from .stats import round_half_up
from .stuttering import generate_stuttering_report
from .text_metrics import calculate_wpm, count_words, detect_filler_words
from .timing import check_word_timings
from .volume import analyze_volume_patterns

logger = logging.getLogger(__name__)


def build_scorecard(
    delivery: DeliveryHabits, vocal: VocalHabits, cognitive: CognitiveHabits
) -> List[HabitScore]:
    """One display card per habit, in report order."""
    pauses, rate, declarative = delivery.pauses, delivery.rate, delivery.declarative
    volume = vocal.volume
    thought, frameworks, analogies = cognitive.thought_completion, cognitive.frameworks, cognitive.analogies
    return [
        HabitScore(
            name="pauses",
            score=pauses.pause_score,
            metric=f"{pauses.strategic_pauses} strategic",
            feedback=pauses.feedback,
            insufficient_data=pauses.insufficient_data,
        ),
        HabitScore(
            name="rate",
            score=rate.variability_score,
            metric=f"{round_half_up(rate.min_wpm)}-{round_half_up(rate.max_wpm)} WPM",
            feedback=rate.feedback,
            insufficient_data=rate.insufficient_data,
        ),
        HabitScore(
            name="declarative",
            score=declarative.declarative_score,
            metric="Direct speech" if declarative.hedging_count == 0 else f"{declarative.hedging_count} hedges",
            feedback=declarative.feedback,
        ),
        HabitScore(
            name="volume",
            score=volume.volume_score,
            metric="Trails off at ends" if volume.has_trailing_off else "Consistent projection",
            feedback=volume.feedback,
            insufficient_data=volume.insufficient_data,
        ),
        HabitScore(
            name="thought_completion",
            score=thought.completion_score,
            metric="Run-on sentences" if thought.very_long_sentences > 0 else "Clear thoughts",
            feedback=thought.feedback,
            insufficient_data=thought.insufficient_data,
        ),
        HabitScore(
            name="frameworks",
            score=frameworks.framework_score,
            metric="Has Context" if frameworks.has_context else "Needs Context",
            feedback=frameworks.feedback,
        ),
        HabitScore(
            name="analogies",
            score=analogies.analogy_score,
            metric=f"{analogies.analogy_count} used",
            feedback=analogies.feedback,
        ),
    ]


def _enforce_timing_precondition(data: AnalysisInput, strict: bool) -> None:
    problems = check_word_timings(data.words)
    if not problems:
        return
    if strict:
        raise InvalidWordTimingsError(problems)
    logger.warning(
        "Word timings are not chronological (%d problem(s)); results may be unreliable: %s",
        len(problems), problems[0],
    )


@log_execution_time(logger, level=logging.DEBUG)
def generate_performance_report(
    data: Union[AnalysisInput, Dict[str, Any]],
    strict_timings: Optional[bool] = None,
) -> PerformanceReport:
    """
    Analyze one finished recording.

    Args:
        data: The recording signals, as a model or a plain dict
        strict_timings: Raise on non-chronological word timings instead of
            logging a warning. Defaults to ``SPEECHCOACH_STRICT_TIMINGS``.

    Returns:
        The complete performance report

    Raises:
        InvalidWordTimingsError: In strict mode, when timings are malformed
    """
    if not isinstance(data, AnalysisInput):
        data = AnalysisInput.model_validate(data)
    if strict_timings is None:
        strict_timings = settings.SPEECHCOACH_STRICT_TIMINGS
    _enforce_timing_precondition(data, strict_timings)

    transcript = data.transcript
    wpm = calculate_wpm(transcript, data.duration_ms)
    fillers = detect_filler_words(transcript)
    word_count = count_words(transcript)
    clarity = score_clarity(wpm, fillers.count, word_count)

    delivery = DeliveryHabits(
        pauses=analyze_strategic_pauses(data.words),
        rate=analyze_rate_variability(data.words),
        declarative=detect_hedging(transcript),
    )
    vocal = VocalHabits(volume=analyze_volume_patterns(data.volume_history))
    cognitive = CognitiveHabits(
        thought_completion=analyze_thought_completion(transcript),
        frameworks=detect_framework(transcript),
        analogies=detect_analogies(transcript),
    )
    scorecard = build_scorecard(delivery, vocal, cognitive)
    habits_score = compute_habits_score({h.name: h.score for h in scorecard})

    stuttering = data.stuttering_report
    if stuttering is None and data.words:
        stuttering = generate_stuttering_report(data.words)
    fluency = stuttering.fluency_score if stuttering is not None else 100

    overall = compute_overall_score(
        clarity=clarity,
        fluency=fluency,
        habits=habits_score,
        wpm=wpm,
        eye_contact=data.eye_contact_percentage,
        posture=data.posture_score,
    )

    recommendations = AdviceGenerator(settings.SPEECHCOACH_MAX_RECOMMENDATIONS).generate_recommendations(
        scorecard=scorecard,
        stuttering=stuttering,
        wpm=wpm,
        filler_count=fillers.count,
        eye_contact=data.eye_contact_percentage,
        posture=data.posture_score,
    )

    logger.info(
        "Performance report: overall=%d habits=%d clarity=%d fluency=%d wpm=%d words=%d",
        overall, habits_score, clarity, fluency, wpm, word_count,
    )

    return PerformanceReport(
        summary=Summary(
            overall_score=overall,
            habits_score=habits_score,
            score_label=score_label(overall),
            duration_ms=data.duration_ms,
            duration_label=format_duration(data.duration_ms),
            word_count=word_count,
            wpm=wpm,
            wpm_label=wpm_label(wpm),
        ),
        speech=SpeechMetrics(wpm=wpm, clarity_score=clarity, filler_words=fillers),
        habits=Habits(delivery=delivery, vocal=vocal, cognitive=cognitive, scorecard=scorecard),
        visual=VisualMetrics(
            eye_contact_percentage=data.eye_contact_percentage,
            posture_score=data.posture_score,
        ),
        stuttering=stuttering,
        transcript=transcript,
        recommendations=recommendations,
    )
