# analysis/constants.py
"""Centralized vocabularies and thresholds for the speech analyzers.

Two independent pause systems and two independent pace systems live here on
purpose: the coaching habits (strategic pauses, phrase-level rate variety)
and the fluency profile (blocks, 10-second pace windows) use different
threshold sets and must not be merged.
"""

# --- Filler words ---
FILLER_WORDS = [
    "um", "uh", "er", "ah", "like", "you know", "basically", "actually",
    "literally", "honestly", "so", "well", "i mean", "right", "okay",
]
SINGLE_WORD_FILLERS = frozenset(f for f in FILLER_WORDS if " " not in f)
MULTI_WORD_FILLERS = [f for f in FILLER_WORDS if " " in f]

# Characters stripped from tokens before vocabulary lookups
TOKEN_PUNCTUATION = ".,!?;:"

# --- Strategic pauses (coaching habit) ---
PAUSE_MIN_WORDS = 5
PAUSE_MIN_SEC = 0.3           # gaps below this are not pauses at all
PAUSE_STRATEGIC_SEC = 0.8     # [0.3, 0.8) short
PAUSE_TOO_LONG_SEC = 4.0      # [0.8, 4.0) strategic, [4.0, inf) too long
PAUSE_BASE_SCORE = 70
PAUSE_NO_PAUSES_SCORE = 30
PAUSE_STRATEGIC_RATIO_GOOD = 0.05
PAUSE_STRATEGIC_RATIO_CHOPPY = 0.15
PAUSE_TOP_N = 5

# --- Hedging ---
HEDGING_PHRASES = [
    "kind of", "sort of", "i think maybe", "i guess", "maybe", "probably",
    "i'm not sure", "it seems like", "perhaps", "possibly", "i feel like",
    "i suppose", "a little bit", "somewhat", "might be", "more or less",
]

# Direct alternatives suggested when one hedge dominates
HEDGE_REPLACEMENTS = {
    "kind of": "state the quality outright (\"it is slow\" instead of \"it is kind of slow\")",
    "sort of": "name the thing precisely instead of approximating it",
    "i think maybe": "\"I recommend\"",
    "i guess": "\"I believe\" or simply state the conclusion",
    "maybe": "\"I suggest\"",
    "probably": "\"I expect\" or \"the data shows\"",
    "i'm not sure": "\"I'll confirm\" or \"my best estimate is\"",
    "it seems like": "\"it is\"",
    "perhaps": "\"I propose\"",
    "possibly": "\"one option is\"",
    "i feel like": "\"I'm confident that\"",
    "i suppose": "\"I conclude\"",
    "a little bit": "a concrete amount",
    "somewhat": "a specific measure",
    "might be": "\"is\" or \"will be\"",
    "more or less": "the exact figure",
}

DECLARATIVE_RATIO_PENALTY = 400
DECLARATIVE_COUNT_PENALTY = 3

# --- Rate variability (coaching habit) ---
RATE_MIN_WORDS = 10
PHRASE_GAP_SEC = 0.4          # independent of the pause buckets above
PHRASE_MIN_WORDS = 2
PHRASE_MIN_DURATION_SEC = 0.2
PHRASE_MAX_WPM = 300          # faster phrases are timing noise
RATE_MIN_PHRASES = 3
RATE_CV_MONOTONE = 15
RATE_CV_ERRATIC = 40
RATE_SCORE_VARIED = 95
RATE_SCORE_UNVARIED = 60
RATE_SCORE_FALLBACK = 70
RATE_MAX_SEGMENTS = 20

# --- Volume ---
VOLUME_MIN_SAMPLES = 5
VOLUME_TOO_QUIET = 15
VOLUME_IDEAL_LOW = 25
VOLUME_IDEAL_HIGH = 60
VOLUME_CLIPPING = 80
VOLUME_HEAD_FRACTION = 0.8
VOLUME_TRAIL_RATIO = 0.6
VOLUME_VARIATION_MAX = 50

# --- Thought completion ---
THOUGHT_MIN_CHARS = 20
LONG_SENTENCE_WORDS = 25
VERY_LONG_SENTENCE_WORDS = 40
SHORT_SENTENCE_AVG = 5

# --- Context -> Core -> Connect ---
FRAMEWORK_MARKERS = {
    "context": [
        "the situation", "background", "currently", "the problem",
        "the challenge", "in the past", "to give context",
    ],
    "core": [
        "the key point", "the main", "most importantly", "my approach",
        "the solution", "what i did", "the core",
    ],
    "connect": [
        "this means", "as a result", "the impact", "which led to",
        "in conclusion", "the takeaway", "so that",
    ],
}

# --- Analogies ---
ANALOGY_MARKERS = [
    "like a", "like an", "similar to", "imagine", "picture this",
    "think of it as", "just like", "as if", "the same way", "it's like",
    "compared to", "analogous to",
]

# --- Stuttering / fluency (clinical profile) ---
BLOCK_THRESHOLD_SEC = 0.5
SEVERE_BLOCK_THRESHOLD_SEC = 1.0
PACE_WINDOW_SEC = 10
PACE_MIN_WORDS = 5
PACE_HIGHLY_VARIABLE = 40
PACE_SOMEWHAT_VARIABLE = 25
FLUENCY_BLOCK_PENALTY = 5
FLUENCY_SEVERE_BLOCK_PENALTY = 10
FLUENCY_REPETITION_PENALTY = 8
FLUENCY_HIGH_VARIATION_PENALTY = 15
FLUENCY_MODERATE_VARIATION_PENALTY = 8
STUTTERING_MAX_RECOMMENDATIONS = 4

# --- Report ---
MAX_RECOMMENDATIONS = 8
HABIT_ADVICE_THRESHOLD = 70

HABIT_WEIGHTS = {
    "pauses": 0.15,
    "rate": 0.10,
    "declarative": 0.15,
    "volume": 0.15,
    "thought_completion": 0.15,
    "frameworks": 0.15,
    "analogies": 0.15,
}

OVERALL_WEIGHTS = {
    "clarity": 0.15,
    "fluency": 0.10,
    "habits": 0.35,
    "pace": 0.10,
    "eye_contact": 0.15,
    "posture": 0.15,
}
