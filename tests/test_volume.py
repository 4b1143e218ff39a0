from analysis.models import VolumeBand
from analysis.volume import analyze_volume_patterns, volume_band
from _helpers import samples


def test_not_enough_samples_keeps_history():
    history = samples([40, 40, 40])
    result = analyze_volume_patterns(history)
    assert result.volume_score == 50
    assert result.feedback == "Not enough volume data"
    assert result.history == history


def test_ideal_steady_volume():
    result = analyze_volume_patterns(samples([40] * 10))
    assert result.volume_score == 90
    assert result.band is VolumeBand.IDEAL
    assert not result.has_trailing_off
    assert result.feedback.startswith("Good vocal projection")
    assert len(result.history) == 10


def test_too_quiet():
    result = analyze_volume_patterns(samples([10] * 10))
    assert result.volume_score == 50
    assert result.band is VolumeBand.TOO_QUIET
    assert result.feedback.startswith("You're too quiet")


def test_trailing_off():
    result = analyze_volume_patterns(samples([50] * 8 + [10, 10]))
    assert result.has_trailing_off
    assert result.avg_first == 50.0
    assert result.avg_last == 10.0
    assert result.volume_score == 75
    assert "trails off" in result.feedback


def test_loud_input_is_treated_as_clipping():
    result = analyze_volume_patterns(samples([90] * 10))
    assert result.band is VolumeBand.CLIPPING
    assert result.volume_score == 75


def test_inconsistent_volume():
    result = analyze_volume_patterns(samples([10, 70] * 5))
    assert result.volume_variation == 75.0
    assert result.volume_score == 80
    assert "inconsistent" in result.feedback


def test_silent_trace_does_not_divide_by_zero():
    result = analyze_volume_patterns(samples([0] * 6))
    assert result.volume_variation == 0.0
    assert result.volume_score == 40


def test_volume_band_edges():
    assert volume_band(14.9) is VolumeBand.TOO_QUIET
    assert volume_band(15) is VolumeBand.QUIET
    assert volume_band(25) is VolumeBand.IDEAL
    assert volume_band(60) is VolumeBand.IDEAL
    assert volume_band(80) is VolumeBand.LOUD
    assert volume_band(80.5) is VolumeBand.CLIPPING
