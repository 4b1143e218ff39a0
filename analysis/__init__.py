"""Speech performance analysis package.

This module exports the main analysis components:
- generate_performance_report: Aggregator (primary entry point)
- The individual analyzers, for callers that need a single habit:
  - detect_filler_words, analyze_strategic_pauses, detect_hedging
  - analyze_rate_variability, analyze_volume_patterns
  - analyze_thought_completion, detect_framework, detect_analogies
  - generate_stuttering_report (detect_blocks, detect_repetitions,
    analyze_pace_variation)
"""

from .cognitive import analyze_thought_completion, detect_analogies, detect_framework
from .exceptions import AnalysisError, InvalidWordTimingsError
from .hedging import detect_hedging
from .models import AnalysisInput, PerformanceReport, StutteringReport, VolumeSample, WordTiming
from .pauses import analyze_strategic_pauses
from .rate import analyze_rate_variability
from .report import generate_performance_report
from .stuttering import (
    analyze_pace_variation,
    detect_blocks,
    detect_repetitions,
    generate_stuttering_report,
)
from .text_metrics import calculate_wpm, detect_filler_words
from .volume import analyze_volume_patterns

__all__ = [
    "generate_performance_report",
    "detect_filler_words",
    "calculate_wpm",
    "analyze_strategic_pauses",
    "detect_hedging",
    "analyze_rate_variability",
    "analyze_volume_patterns",
    "analyze_thought_completion",
    "detect_framework",
    "detect_analogies",
    "generate_stuttering_report",
    "detect_blocks",
    "detect_repetitions",
    "analyze_pace_variation",
    # Models and errors
    "AnalysisInput",
    "PerformanceReport",
    "StutteringReport",
    "VolumeSample",
    "WordTiming",
    "AnalysisError",
    "InvalidWordTimingsError",
]
