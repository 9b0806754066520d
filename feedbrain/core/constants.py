"""
Core constants used across the engine. Keep these simple and documented.

The thresholds below are tuned heuristics, not derived values. Change them only
together with the tests that pin their behaviour.
"""

from typing import Final

# Tokenizer
MIN_TOKEN_LENGTH: Final[int] = 3
MIN_STEM_LENGTH: Final[int] = 3
# Longest / most specific first; the first match wins
STEM_SUFFIXES: Final[tuple[str, ...]] = ("ation", "ment", "ness", "tion", "ing", "ers", "ies", "ed", "ly", "s")
STOP_WORDS: Final[frozenset[str]] = frozenset(
    {
        # function words
        "the",
        "and",
        "for",
        "that",
        "this",
        "with",
        "you",
        "your",
        "how",
        "what",
        "when",
        "which",
        "can",
        "from",
        "are",
        "was",
        "were",
        "has",
        "have",
        "had",
        "into",
        "their",
        "his",
        "her",
        "its",
        "but",
        "not",
        "about",
        "over",
        "under",
        "after",
        "before",
        "than",
        "then",
        "out",
        "off",
        "only",
        "more",
        "most",
        "some",
        "any",
        "make",
        "best",
        "all",
        "who",
        "why",
        "will",
        "just",
        # platform fluff
        "official",
        "video",
        "channel",
        "subscribe",
        "recap",
        "review",
        "full",
        "episode",
        "new",
        "4k",
        "8k",
        "1080p",
        "720p",
        "480p",
        "hdr",
        "uhd",
    }
)

# Feature extraction
CHANNEL_TOKEN_WEIGHT: Final[float] = 1.0
TITLE_TOKEN_WEIGHT: Final[float] = 0.5
BIGRAM_WEIGHT: Final[float] = 0.75
DURATION_SATURATION_SECONDS: Final[float] = 1200.0  # 20 minutes = 1.0
DEFAULT_LIVE_DURATION_SECONDS: Final[int] = 3600
DEFAULT_DURATION_SECONDS: Final[int] = 300
COMPLEXITY_TITLE_LENGTH: Final[float] = 60.0

# Similarity
DURATION_FALLBACK_WEIGHT: Final[float] = 0.3

# Learning rates (signed)
RATE_CLICK: Final[float] = 0.10
RATE_LIKED: Final[float] = 0.30
RATE_WATCHED: Final[float] = 0.15  # multiplied by the watched fraction
RATE_SKIPPED: Final[float] = -0.15
RATE_DISLIKED: Final[float] = -0.40
BUCKET_RATE_MULTIPLIER: Final[float] = 1.5
NOT_INTERESTED_GLOBAL_RATE: Final[float] = -0.35
NOT_INTERESTED_BUCKET_RATE: Final[float] = -0.25
NOT_INTERESTED_CHANNEL_SCORE: Final[float] = 0.05

TOPIC_DECAY: Final[float] = 0.97
TOPIC_PRUNE_THRESHOLD: Final[float] = 0.05
CHANNEL_SCORE_DEFAULT: Final[float] = 0.5
CHANNEL_SCORE_RETENTION: Final[float] = 0.95
MAX_CONSECUTIVE_SKIPS: Final[int] = 30
ONBOARDING_SEED_WEIGHT: Final[float] = 0.3

# Ranking
BOREDOM_SKIP_DIVISOR: Final[float] = 20.0
BOREDOM_MAX: Final[float] = 0.5
WEIGHT_PERSONALITY: Final[float] = 0.4
WEIGHT_CONTEXT: Final[float] = 0.4
WEIGHT_NOVELTY: Final[float] = 0.2
SUBSCRIPTION_BOOST: Final[float] = 0.15
SERENDIPITY_BOOST: Final[float] = 0.10
SERENDIPITY_MIN_NOVELTY: Final[float] = 0.6
SERENDIPITY_MIN_CONTEXT: Final[float] = 0.5
CURIOSITY_BOOST: Final[float] = 0.10
CURIOSITY_MIN_PERSONALITY: Final[float] = 0.65
CURIOSITY_MIN_COMPLEXITY_GAP: Final[float] = 0.35
CHANNEL_BOREDOM_THRESHOLD: Final[float] = 0.05
CHANNEL_BOREDOM_PENALTY: Final[float] = 0.5
FATIGUE_HEAVY_COUNT: Final[int] = 3
FATIGUE_HEAVY_PENALTY: Final[float] = 0.4
FATIGUE_LIGHT_PENALTY: Final[float] = 0.7
COLD_START_INTERACTIONS: Final[int] = 50
COLD_START_JITTER: Final[float] = 0.2
WARM_JITTER: Final[float] = 0.02

# Recency multipliers by upload age
RECENCY_FRESH: Final[float] = 1.15  # seconds / minutes / hours / live
RECENCY_DAYS: Final[float] = 1.12
RECENCY_WEEKS: Final[float] = 1.08
RECENCY_MONTHS: Final[float] = 1.0
RECENCY_YEAR_DECAY: Final[float] = 0.35
RECENCY_UNKNOWN: Final[float] = 0.85
CLASSIC_VIEW_COUNT: Final[int] = 5_000_000

# Diversity
STRICT_SLOTS: Final[int] = 20
MAX_TOPIC_USES: Final[int] = 3
STRICT_TITLE_WINDOW: Final[int] = 5
STRICT_TITLE_SIMILARITY: Final[float] = 0.55
RELAXED_TITLE_WINDOW: Final[int] = 3
RELAXED_TITLE_SIMILARITY: Final[float] = 0.65

# Persona
PERSONA_MIN_INTERACTIONS: Final[int] = 15
MUSIC_KEYWORDS: Final[frozenset[str]] = frozenset(
    {"music", "song", "lyric", "lyrics", "remix", "lofi", "playlist", "official audio", "audio"}
)
MUSIC_DOMINANCE_SHARE: Final[float] = 0.4
LIVE_DOMINANCE: Final[float] = 0.6
NOCTURNAL_RATIO: Final[float] = 1.5
NOCTURNAL_MIN_WEIGHT: Final[float] = 5.0
BINGER_MIN_INTERACTIONS: Final[int] = 500
BINGER_MIN_PACING: Final[float] = 0.6
SCHOLAR_MIN_COMPLEXITY: Final[float] = 0.75
DEEP_DIVER_MIN_DURATION: Final[float] = 0.70
SKIMMER_MAX_DURATION: Final[float] = 0.35
SKIMMER_MIN_PACING: Final[float] = 0.65
SPECIALIST_MAX_DIVERSITY: Final[float] = 0.25

# Discovery
DISCOVERY_TOP_INTERESTS: Final[int] = 5
DISCOVERY_DIRECT_INTERESTS: Final[int] = 2
DISCOVERY_BRIDGE_INTERESTS: Final[int] = 3
DEFAULT_DISCOVERY_QUERIES: Final[tuple[str, ...]] = ("New Trending", "Music", "Gaming", "Technology", "Science")

# Persistence
BRAIN_SCHEMA_VERSION: Final[int] = 3
