import random
import re

from feedbrain.core.constants import (
    BOREDOM_MAX,
    BOREDOM_SKIP_DIVISOR,
    CHANNEL_BOREDOM_PENALTY,
    CHANNEL_BOREDOM_THRESHOLD,
    CLASSIC_VIEW_COUNT,
    COLD_START_INTERACTIONS,
    COLD_START_JITTER,
    CURIOSITY_BOOST,
    CURIOSITY_MIN_COMPLEXITY_GAP,
    CURIOSITY_MIN_PERSONALITY,
    FATIGUE_HEAVY_COUNT,
    FATIGUE_HEAVY_PENALTY,
    FATIGUE_LIGHT_PENALTY,
    RECENCY_DAYS,
    RECENCY_FRESH,
    RECENCY_MONTHS,
    RECENCY_UNKNOWN,
    RECENCY_WEEKS,
    RECENCY_YEAR_DECAY,
    SERENDIPITY_BOOST,
    SERENDIPITY_MIN_CONTEXT,
    SERENDIPITY_MIN_NOVELTY,
    SUBSCRIPTION_BOOST,
    WARM_JITTER,
    WEIGHT_CONTEXT,
    WEIGHT_NOVELTY,
    WEIGHT_PERSONALITY,
)
from feedbrain.models.brain import UserBrain
from feedbrain.models.content import CandidateItem, ContentVector
from feedbrain.models.scoring import ScoredCandidate
from feedbrain.services.profile.similarity import cosine_similarity
from feedbrain.services.profile.vectorizer import clamp

_AGE_RE = re.compile(r"\b(\d+|an?|one)\s+(second|sec|minute|min|hour|hr|day|week|month|year)s?\b", re.IGNORECASE)

_FRESH_UNITS = {"second", "sec", "minute", "min", "hour", "hr"}


class RecommendationScoring:
    """
    Handles dynamic weights, recency multipliers and per-candidate scoring.
    """

    @staticmethod
    def dynamic_weights(consecutive_skips: int) -> tuple[float, float, float]:
        """
        Shift weight from personalization to novelty as the user keeps skipping.

        Returns:
            (personality, context, novelty) weights
        """
        boredom = clamp(consecutive_skips / BOREDOM_SKIP_DIVISOR, 0.0, BOREDOM_MAX)
        return (
            WEIGHT_PERSONALITY - 0.5 * boredom,
            WEIGHT_CONTEXT - 0.5 * boredom,
            WEIGHT_NOVELTY + boredom,
        )

    @staticmethod
    def recency_multiplier(item: CandidateItem, is_subscribed: bool = False) -> float:
        """
        Multiplier from the human-readable upload age ("3 days ago", "2 years ago").

        Classics and subscribed channels are pulled halfway back toward 1.0 so
        age matters less for them.
        """
        factor = RecommendationScoring._raw_recency(item)
        if item.view_count >= CLASSIC_VIEW_COUNT or is_subscribed:
            factor = (factor + 1.0) / 2.0
        return factor

    @staticmethod
    def _raw_recency(item: CandidateItem) -> float:
        if item.is_live:
            return RECENCY_FRESH

        text = item.upload_date or ""
        match = _AGE_RE.search(text)
        if not match:
            return RECENCY_FRESH if "live" in text.lower() else RECENCY_UNKNOWN

        amount_raw, unit = match.group(1).lower(), match.group(2).lower()
        if unit in _FRESH_UNITS:
            return RECENCY_FRESH
        if unit == "day":
            return RECENCY_DAYS
        if unit == "week":
            return RECENCY_WEEKS
        if unit == "month":
            return RECENCY_MONTHS

        years = int(amount_raw) if amount_raw.isdigit() else 1
        return 1.0 / (1.0 + RECENCY_YEAR_DECAY * years)

    @staticmethod
    def fatigue_multiplier(primary_topic: str | None, recent_topics: list[str]) -> float:
        if not primary_topic:
            return 1.0
        occurrences = recent_topics.count(primary_topic)
        if occurrences >= FATIGUE_HEAVY_COUNT:
            return FATIGUE_HEAVY_PENALTY
        if occurrences > 0:
            return FATIGUE_LIGHT_PENALTY
        return 1.0

    @staticmethod
    def channel_boredom_multiplier(brain: UserBrain, channel_id: str) -> float:
        """Penalize channels the user consistently ignores; unseen channels are neutral."""
        score = brain.channel_scores.get(channel_id)
        if score is not None and score < CHANNEL_BOREDOM_THRESHOLD:
            return CHANNEL_BOREDOM_PENALTY
        return 1.0

    @staticmethod
    def jitter(brain: UserBrain, rng: random.Random) -> float:
        spread = COLD_START_JITTER if brain.total_interactions < COLD_START_INTERACTIONS else WARM_JITTER
        return rng.random() * spread

    @staticmethod
    def score_candidate(
        item: CandidateItem,
        vector: ContentVector,
        brain: UserBrain,
        context_vector: ContentVector,
        weights: tuple[float, float, float],
        subscribed_ids: set[str],
        recent_topics: list[str],
        rng: random.Random,
    ) -> ScoredCandidate:
        """
        Score one candidate against a profile snapshot.

        Args:
            item: Candidate item
            vector: Extracted features of the item
            brain: Profile snapshot
            context_vector: Active time-bucket vector
            weights: (personality, context, novelty) weights
            subscribed_ids: Channel IDs the user subscribes to
            recent_topics: Primary topics of recently watched items
            rng: Random source for jitter

        Returns:
            ScoredCandidate with final score and breakdown
        """
        w_personality, w_context, w_novelty = weights

        personality = cosine_similarity(brain.global_vector, vector)
        context = cosine_similarity(context_vector, vector)
        novelty = 1.0 - personality

        score = personality * w_personality + context * w_context + novelty * w_novelty

        is_subscribed = item.channel_id in subscribed_ids
        if is_subscribed:
            score += SUBSCRIPTION_BOOST
        if novelty > SERENDIPITY_MIN_NOVELTY and context > SERENDIPITY_MIN_CONTEXT:
            score += SERENDIPITY_BOOST
        base_score = score

        score *= RecommendationScoring.recency_multiplier(item, is_subscribed)

        # Familiar topic, unfamiliar depth
        complexity_gap = abs(brain.global_vector.complexity - vector.complexity)
        if personality > CURIOSITY_MIN_PERSONALITY and complexity_gap > CURIOSITY_MIN_COMPLEXITY_GAP:
            score += CURIOSITY_BOOST

        score *= RecommendationScoring.channel_boredom_multiplier(brain, item.channel_id)
        score *= RecommendationScoring.fatigue_multiplier(vector.primary_topic(), recent_topics)
        score += RecommendationScoring.jitter(brain, rng)

        return ScoredCandidate(
            item=item,
            vector=vector,
            score=score,
            base_score=base_score,
            personality=personality,
            context=context,
            novelty=novelty,
        )
