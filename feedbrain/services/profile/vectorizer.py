import math

from feedbrain.core.constants import (
    BIGRAM_WEIGHT,
    CHANNEL_TOKEN_WEIGHT,
    COMPLEXITY_TITLE_LENGTH,
    DEFAULT_DURATION_SECONDS,
    DEFAULT_LIVE_DURATION_SECONDS,
    DURATION_SATURATION_SECONDS,
    TITLE_TOKEN_WEIGHT,
)
from feedbrain.models.content import CandidateItem, ContentVector
from feedbrain.services.profile.tokenizer import Tokenizer, tokenizer


def clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return max(low, min(high, value))


def normalize_topics(topics: dict[str, float]) -> dict[str, float]:
    """Scale a topic map to unit L2 magnitude. Empty maps are returned as-is."""
    magnitude = math.sqrt(sum(w * w for w in topics.values()))
    if magnitude <= 0:
        return dict(topics)
    return {k: v / magnitude for k, v in topics.items()}


class ItemVectorizer:
    """
    Extracts a ContentVector from item metadata.

    Pure extraction: no profile access, no scoring.
    """

    def __init__(self, tokenizer: Tokenizer = tokenizer):
        self.tokenizer = tokenizer

    def extract_features(self, item: CandidateItem) -> ContentVector:
        """
        Build the feature vector for one item.

        Channel tokens seed the map at full weight, title tokens add up, and
        adjacent title words contribute a bigram so that "machine learning" and
        "washing machine" stay apart.

        Args:
            item: Candidate item

        Returns:
            ContentVector, possibly with an empty topic map
        """
        topics: dict[str, float] = {}

        for word in self.tokenizer.tokenize(item.channel_name):
            topics[word] = CHANNEL_TOKEN_WEIGHT

        for word in self.tokenizer.tokenize(item.title):
            topics[word] = topics.get(word, 0.0) + TITLE_TOKEN_WEIGHT

        words = list(self.tokenizer.surface_words(item.title))
        for first, second in zip(words, words[1:]):
            topics[f"{first} {second}"] = BIGRAM_WEIGHT

        duration_score = clamp(self._effective_duration(item) / DURATION_SATURATION_SECONDS)

        return ContentVector(
            topics=normalize_topics(topics),
            duration=duration_score,
            pacing=1.0 - duration_score,
            complexity=clamp(len(item.title) / COMPLEXITY_TITLE_LENGTH),
            is_live=1.0 if item.is_live else 0.0,
        )

    @staticmethod
    def _effective_duration(item: CandidateItem) -> int:
        if item.duration > 0:
            return item.duration
        if item.is_live:
            return DEFAULT_LIVE_DURATION_SECONDS
        return DEFAULT_DURATION_SECONDS


vectorizer = ItemVectorizer()
