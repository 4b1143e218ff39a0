# analysis/advice_generator.py

"""
Generates ranked coaching recommendations from analysis results.
"""
from typing import List, Optional, Sequence

from .constants import HABIT_ADVICE_THRESHOLD, MAX_RECOMMENDATIONS
from .models import HabitScore, Priority, Recommendation, StutteringReport

# Labeling thresholds for base recommendations
WPM_SLOW = 100                   # <100 slow
WPM_FAST = 180                   # >180 too fast
FILLERS_HIGH = 5                 # total fillers in the recording
EYE_CONTACT_GOOD = 70
POSTURE_GOOD = 70

HABIT_AREAS = {
    "pauses": "delivery",
    "rate": "delivery",
    "declarative": "delivery",
    "volume": "vocal",
    "thought_completion": "cognitive",
    "frameworks": "cognitive",
    "analogies": "cognitive",
}


class AdviceGenerator:
    """Encapsulates logic for turning analysis results into recommendations."""

    def __init__(self, max_recommendations: int = MAX_RECOMMENDATIONS):
        self.max_recommendations = max_recommendations

    def generate_recommendations(
        self,
        scorecard: Sequence[HabitScore],
        stuttering: Optional[StutteringReport],
        wpm: float,
        filler_count: int,
        eye_contact: float,
        posture: float,
    ) -> List[Recommendation]:
        """
        Merge habit, fluency and base recommendations.

        Sources are concatenated in that order and truncated; no
        deduplication is applied across sources. The base source always
        contributes at least one item, so the result is never empty.
        """
        recommendations: List[Recommendation] = []
        recommendations.extend(self.generate_habit_tips(scorecard))
        if stuttering is not None:
            recommendations.extend(stuttering.recommendations)
        recommendations.extend(self.generate_base_tips(wpm, filler_count, eye_contact, posture))
        return recommendations[:self.max_recommendations]

    def generate_habit_tips(self, scorecard: Sequence[HabitScore]) -> List[Recommendation]:
        """One tip per measured habit scoring below 70, carrying that habit's feedback."""
        tips = []
        for habit in scorecard:
            if habit.insufficient_data or habit.score >= HABIT_ADVICE_THRESHOLD:
                continue
            tips.append(Recommendation(
                area=HABIT_AREAS.get(habit.name, "delivery"),
                tip=habit.feedback,
                priority=Priority.HIGH if habit.score < 50 else Priority.MEDIUM,
            ))
        return tips

    def generate_base_tips(
        self, wpm: float, filler_count: int, eye_contact: float, posture: float
    ) -> List[Recommendation]:
        """Pace, filler and presence tips with an encouraging fallback."""
        tips = []

        if wpm < WPM_SLOW:
            tips.append(Recommendation(
                area="pace",
                tip="Try to increase your speaking pace slightly for better engagement.",
            ))
        elif wpm > WPM_FAST:
            tips.append(Recommendation(
                area="pace",
                tip="Consider slowing down to allow your audience to absorb information.",
            ))

        if filler_count > FILLERS_HIGH:
            tips.append(Recommendation(
                area="clarity",
                tip="Practice reducing filler words by pausing briefly instead of using \"um\" or \"uh\".",
            ))

        if eye_contact < EYE_CONTACT_GOOD:
            tips.append(Recommendation(
                area="presence",
                tip="Focus on maintaining eye contact with the camera to connect with your audience.",
            ))

        if posture < POSTURE_GOOD:
            tips.append(Recommendation(
                area="presence",
                tip="Sit up straight and keep your shoulders back for a more confident presence.",
            ))

        if not tips:
            tips.append(Recommendation(
                area="general",
                tip="Great job! Keep practicing to maintain your excellent performance.",
                priority=Priority.LOW,
            ))

        return tips
