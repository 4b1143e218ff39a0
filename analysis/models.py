"""
Pydantic models for speech performance analysis.

Inputs arrive from the recording collaborators (transcriber, volume meter,
face/pose tracker); every analyzer returns one of the frozen result models
below, and the aggregator composes them into a `PerformanceReport`.
"""

from typing import List, Optional
from enum import Enum

from pydantic import BaseModel, Field, ConfigDict


# ============================================================================
# Enums
# ============================================================================

class PauseKind(str, Enum):
    """Strategic-pause bucket for a gap between two words."""
    SHORT = "short"
    STRATEGIC = "strategic"
    TOO_LONG = "too_long"


class RateBand(str, Enum):
    """Coefficient-of-variation band for phrase-level speaking rate."""
    MONOTONE = "monotone"
    VARIED = "varied"
    ERRATIC = "erratic"


class VolumeBand(str, Enum):
    """Average loudness band."""
    TOO_QUIET = "too_quiet"
    QUIET = "quiet"
    IDEAL = "ideal"
    LOUD = "loud"
    CLIPPING = "clipping"


class BlockSeverity(str, Enum):
    NONE = "none"
    MILD = "mild"
    MODERATE = "moderate"
    HIGH = "high"


class RepetitionType(str, Enum):
    WORD = "word"
    SYLLABLE = "syllable"


class PaceConsistency(str, Enum):
    CONSISTENT = "consistent"
    SOMEWHAT_VARIABLE = "somewhat variable"
    HIGHLY_VARIABLE = "highly variable"
    UNKNOWN = "unknown"


class FluencySeverity(str, Enum):
    MINIMAL = "minimal"
    MILD = "mild"
    MODERATE = "moderate"
    SIGNIFICANT = "significant"


class Priority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


# ============================================================================
# Inputs
# ============================================================================

class WordTiming(BaseModel):
    """Transcribed word with start/end offsets in seconds.

    Sequences are expected to be chronological with ``start <= end`` and no
    overlap between neighbours. This is a precondition, see
    ``analysis.timing.check_word_timings``.
    """
    word: str
    start: float
    end: float

    model_config = ConfigDict(frozen=True)


class VolumeSample(BaseModel):
    """One reading of the input level meter."""
    timestamp: float
    level: float = Field(..., ge=0.0, le=100.0)

    model_config = ConfigDict(frozen=True)


class Recommendation(BaseModel):
    """Actionable coaching tip."""
    area: str
    tip: str
    priority: Priority = Priority.MEDIUM

    model_config = ConfigDict(frozen=True)


# ============================================================================
# Filler words
# ============================================================================

class FillerOccurrence(BaseModel):
    word: str
    count: int = Field(..., ge=1)

    model_config = ConfigDict(frozen=True)


class FillerAnalysis(BaseModel):
    """Filler word counts; positions are word indexes of single-word hits."""
    count: int = Field(default=0, ge=0)
    occurrences: List[FillerOccurrence] = Field(default_factory=list)
    positions: List[int] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


# ============================================================================
# Delivery habits
# ============================================================================

class Pause(BaseModel):
    duration: float = Field(..., ge=0.0)
    timestamp: float
    before_word: str
    after_word: str
    kind: PauseKind

    model_config = ConfigDict(frozen=True)


class PauseAnalysis(BaseModel):
    pause_score: int = Field(..., ge=0, le=100)
    total_pauses: int = 0
    short_pauses: int = 0
    strategic_pauses: int = 0
    too_long_pauses: int = 0
    strategic_ratio: float = 0.0
    longest_pauses: List[Pause] = Field(default_factory=list)
    feedback: str
    insufficient_data: bool = False

    model_config = ConfigDict(frozen=True)


class HedgeOccurrence(BaseModel):
    phrase: str
    count: int = Field(..., ge=1)

    model_config = ConfigDict(frozen=True)


class HedgingAnalysis(BaseModel):
    declarative_score: int = Field(..., ge=0, le=100)
    hedging_count: int = 0
    word_count: int = 0
    hedges: List[HedgeOccurrence] = Field(default_factory=list)
    feedback: str

    model_config = ConfigDict(frozen=True)


class PhraseSegment(BaseModel):
    """Run of words with no internal gap above the phrase threshold."""
    start: float
    end: float
    word_count: int = Field(..., ge=1)
    wpm: float = Field(..., ge=0.0)

    model_config = ConfigDict(frozen=True)


class RateVariability(BaseModel):
    variability_score: int = Field(..., ge=0, le=100)
    average_wpm: float = 0.0
    min_wpm: float = 0.0
    max_wpm: float = 0.0
    std_dev: float = 0.0
    coefficient_of_variation: float = 0.0
    has_good_variation: bool = False
    band: Optional[RateBand] = None
    phrase_count: int = 0
    segments: List[PhraseSegment] = Field(default_factory=list)
    feedback: str
    insufficient_data: bool = False

    model_config = ConfigDict(frozen=True)


# ============================================================================
# Vocal habits
# ============================================================================

class VolumeAnalysis(BaseModel):
    volume_score: int = Field(..., ge=0, le=100)
    avg_volume: float = 0.0
    volume_variation: float = 0.0
    avg_first: float = 0.0
    avg_last: float = 0.0
    has_trailing_off: bool = False
    band: Optional[VolumeBand] = None
    history: List[VolumeSample] = Field(default_factory=list)
    feedback: str
    insufficient_data: bool = False

    model_config = ConfigDict(frozen=True)


# ============================================================================
# Cognitive habits
# ============================================================================

class ThoughtCompletion(BaseModel):
    completion_score: int = Field(..., ge=0, le=100)
    sentence_count: int = 0
    avg_sentence_length: float = 0.0
    long_sentences: int = 0
    very_long_sentences: int = 0
    feedback: str
    insufficient_data: bool = False

    model_config = ConfigDict(frozen=True)


class FrameworkAnalysis(BaseModel):
    """Context -> Core -> Connect structure detection."""
    framework_score: int = Field(..., ge=0, le=100)
    has_context: bool = False
    has_core: bool = False
    has_connect: bool = False
    parts_found: int = Field(default=0, ge=0, le=3)
    feedback: str

    model_config = ConfigDict(frozen=True)


class AnalogyOccurrence(BaseModel):
    phrase: str
    count: int = Field(..., ge=1)

    model_config = ConfigDict(frozen=True)


class AnalogyAnalysis(BaseModel):
    analogy_score: int = Field(..., ge=0, le=100)
    analogy_count: int = 0
    analogies: List[AnalogyOccurrence] = Field(default_factory=list)
    feedback: str

    model_config = ConfigDict(frozen=True)


# ============================================================================
# Stuttering / fluency
# ============================================================================

class Block(BaseModel):
    """Abnormal pause between two words."""
    before_word: str
    after_word: str
    duration: float
    timestamp: float
    is_severe: bool

    model_config = ConfigDict(frozen=True)


class BlockAnalysis(BaseModel):
    blocks: List[Block] = Field(default_factory=list)
    count: int = 0
    severe_count: int = 0
    severity: BlockSeverity = BlockSeverity.NONE

    model_config = ConfigDict(frozen=True)


class Repetition(BaseModel):
    """Repeated word or stuttered syllable.

    Syllable repetitions are matched on the joined transcript text, so their
    timestamp is unknown and stays ``None``.
    """
    word: str
    count: int = Field(..., ge=2)
    timestamp: Optional[float] = None
    type: RepetitionType

    model_config = ConfigDict(frozen=True)


class RepetitionAnalysis(BaseModel):
    repetitions: List[Repetition] = Field(default_factory=list)
    count: int = 0

    model_config = ConfigDict(frozen=True)


class PaceSegment(BaseModel):
    start_time: float
    wpm: int = Field(..., ge=0)
    word_count: int = Field(..., ge=0)

    model_config = ConfigDict(frozen=True)


class PaceVariation(BaseModel):
    """Pace over fixed windows; ``average_wpm`` is None when no window could be measured."""
    segments: List[PaceSegment] = Field(default_factory=list)
    variation: int = 0
    consistency: PaceConsistency = PaceConsistency.UNKNOWN
    average_wpm: Optional[int] = None

    model_config = ConfigDict(frozen=True)


class StutteringReport(BaseModel):
    fluency_score: int = Field(..., ge=0, le=100)
    overall_severity: FluencySeverity
    blocks: BlockAnalysis
    repetitions: RepetitionAnalysis
    pace_variation: PaceVariation
    recommendations: List[Recommendation] = Field(default_factory=list)
    word_count: int = 0

    model_config = ConfigDict(frozen=True)


# ============================================================================
# Analysis input and report
# ============================================================================

class AnalysisInput(BaseModel):
    """Everything the engine needs about one finished recording."""
    transcript: str = ""
    words: List[WordTiming] = Field(default_factory=list)
    volume_history: List[VolumeSample] = Field(default_factory=list)
    duration_ms: float = Field(default=0.0, ge=0.0)
    eye_contact_percentage: float = Field(default=0.0, ge=0.0, le=100.0)
    posture_score: float = Field(default=0.0, ge=0.0, le=100.0)
    stuttering_report: Optional[StutteringReport] = None

    model_config = ConfigDict(frozen=True)


class HabitScore(BaseModel):
    """Display card for one of the seven habits.

    ``insufficient_data`` marks a neutral score given because the input was
    too short to measure the habit.
    """
    name: str
    score: int = Field(..., ge=0, le=100)
    metric: str
    feedback: str
    insufficient_data: bool = False

    model_config = ConfigDict(frozen=True)


class DeliveryHabits(BaseModel):
    pauses: PauseAnalysis
    rate: RateVariability
    declarative: HedgingAnalysis

    model_config = ConfigDict(frozen=True)


class VocalHabits(BaseModel):
    volume: VolumeAnalysis

    model_config = ConfigDict(frozen=True)


class CognitiveHabits(BaseModel):
    thought_completion: ThoughtCompletion
    frameworks: FrameworkAnalysis
    analogies: AnalogyAnalysis

    model_config = ConfigDict(frozen=True)


class Habits(BaseModel):
    delivery: DeliveryHabits
    vocal: VocalHabits
    cognitive: CognitiveHabits
    scorecard: List[HabitScore] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class Summary(BaseModel):
    overall_score: int = Field(..., ge=0, le=100)
    habits_score: int = Field(..., ge=0, le=100)
    score_label: str
    duration_ms: float = Field(..., ge=0.0)
    duration_label: str
    word_count: int = Field(..., ge=0)
    wpm: int = Field(..., ge=0)
    wpm_label: str

    model_config = ConfigDict(frozen=True)


class SpeechMetrics(BaseModel):
    wpm: int = Field(..., ge=0)
    clarity_score: int = Field(..., ge=0, le=100)
    filler_words: FillerAnalysis

    model_config = ConfigDict(frozen=True)


class VisualMetrics(BaseModel):
    eye_contact_percentage: float = Field(..., ge=0.0, le=100.0)
    posture_score: float = Field(..., ge=0.0, le=100.0)

    model_config = ConfigDict(frozen=True)


class PerformanceReport(BaseModel):
    """Complete, immutable result of one analysis call."""
    summary: Summary
    speech: SpeechMetrics
    habits: Habits
    visual: VisualMetrics
    stuttering: Optional[StutteringReport] = None
    transcript: str = ""
    recommendations: List[Recommendation] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class StutteringRequest(BaseModel):
    """Request body for a standalone fluency analysis."""
    words: List[WordTiming] = Field(default_factory=list)
