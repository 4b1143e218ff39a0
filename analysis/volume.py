"""Loudness level, consistency and trail-off analysis over the volume trace."""

import logging
from typing import Sequence

from . import constants as c
from .models import VolumeAnalysis, VolumeBand, VolumeSample
from .stats import clamp, mean, round_half_up, std_dev

logger = logging.getLogger(__name__)


def volume_band(avg: float) -> VolumeBand:
    """Map an average level (0..100) to its loudness band."""
    if avg < c.VOLUME_TOO_QUIET:
        return VolumeBand.TOO_QUIET
    if avg < c.VOLUME_IDEAL_LOW:
        return VolumeBand.QUIET
    if avg <= c.VOLUME_IDEAL_HIGH:
        return VolumeBand.IDEAL
    if avg <= c.VOLUME_CLIPPING:
        return VolumeBand.LOUD
    return VolumeBand.CLIPPING


def _band_score(band: VolumeBand, avg: float) -> float:
    if band is VolumeBand.TOO_QUIET:
        return 40 + avg
    if band is VolumeBand.IDEAL:
        return 90
    if band is VolumeBand.CLIPPING:
        # Likely clipping on the input meter
        return 75
    return 70


def analyze_volume_patterns(volume_history: Sequence[VolumeSample]) -> VolumeAnalysis:
    """
    Score loudness and projection from the recorded level meter.

    Args:
        volume_history: Level samples taken at roughly fixed intervals

    Returns:
        VolumeAnalysis with the raw history for charting. Fewer than 5
        samples yields a neutral score of 50.
    """
    if len(volume_history) < c.VOLUME_MIN_SAMPLES:
        return VolumeAnalysis(
            volume_score=50,
            history=list(volume_history),
            feedback="Not enough volume data",
            insufficient_data=True,
        )

    levels = [s.level for s in volume_history]
    avg = mean(levels)
    variation = std_dev(levels) / avg * 100 if avg > 0 else 0.0

    split = int(len(levels) * c.VOLUME_HEAD_FRACTION)
    avg_first = mean(levels[:split])
    avg_last = mean(levels[split:])
    trailing_off = avg_first > c.VOLUME_TOO_QUIET and avg_last < avg_first * c.VOLUME_TRAIL_RATIO

    band = volume_band(avg)
    score = _band_score(band, avg)
    if trailing_off:
        score -= 15
    if variation > c.VOLUME_VARIATION_MAX:
        score -= 10
    score = round_half_up(clamp(score))

    if band is VolumeBand.TOO_QUIET:
        feedback = "You're too quiet. Project your voice so every word reaches the back of the room."
    elif trailing_off:
        feedback = "Your volume trails off toward the end. Keep your energy up through the final words."
    elif variation > c.VOLUME_VARIATION_MAX:
        feedback = "Your volume is inconsistent. Aim for a steadier, controlled projection."
    else:
        feedback = "Good vocal projection with a consistent volume."

    logger.debug(
        "Volume: avg=%.1f variation=%.1f trailing_off=%s score=%d",
        avg, variation, trailing_off, score,
    )

    return VolumeAnalysis(
        volume_score=score,
        avg_volume=round(avg, 1),
        volume_variation=round(variation, 1),
        avg_first=round(avg_first, 1),
        avg_last=round(avg_last, 1),
        has_trailing_off=trailing_off,
        band=band,
        history=list(volume_history),
        feedback=feedback,
    )
