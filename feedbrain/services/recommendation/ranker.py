import random

from loguru import logger

from feedbrain.models.brain import UserBrain
from feedbrain.models.content import CandidateItem, TimeBucket
from feedbrain.models.scoring import ScoredCandidate
from feedbrain.services.profile.vectorizer import ItemVectorizer, vectorizer
from feedbrain.services.recommendation.diversity import DiversityReranker
from feedbrain.services.recommendation.filters import FilterEngine
from feedbrain.services.recommendation.scoring import RecommendationScoring


class Ranker:
    """
    Scores candidates against an immutable profile snapshot.

    Synchronous and CPU-bound; the engine runs it in a worker thread.
    """

    def __init__(
        self,
        item_vectorizer: ItemVectorizer = vectorizer,
        reranker: DiversityReranker | None = None,
    ):
        self.vectorizer = item_vectorizer
        self.reranker = reranker or DiversityReranker()

    def score_candidates(
        self,
        brain: UserBrain,
        candidates: list[CandidateItem],
        bucket: TimeBucket,
        subscribed_ids: set[str] | None = None,
        recent_topics: list[str] | None = None,
        rng: random.Random | None = None,
    ) -> list[ScoredCandidate]:
        """Filter blocked content and score what is left, in input order."""
        subscribed_ids = subscribed_ids or set()
        recent_topics = recent_topics or []
        rng = rng or random.Random()

        filters = FilterEngine(brain.blocked_channels, brain.blocked_topics)
        allowed = filters.filter_candidates(candidates)
        if len(allowed) < len(candidates):
            logger.debug(f"Filtered {len(candidates) - len(allowed)} blocked candidates")
        if not allowed:
            return []

        context_vector = brain.vector_for(bucket)
        weights = RecommendationScoring.dynamic_weights(brain.consecutive_skips)

        return [
            RecommendationScoring.score_candidate(
                item=item,
                vector=self.vectorizer.extract_features(item),
                brain=brain,
                context_vector=context_vector,
                weights=weights,
                subscribed_ids=subscribed_ids,
                recent_topics=recent_topics,
                rng=rng,
            )
            for item in allowed
        ]

    def rank(
        self,
        brain: UserBrain,
        candidates: list[CandidateItem],
        bucket: TimeBucket,
        subscribed_ids: set[str] | None = None,
        recent_topics: list[str] | None = None,
        rng: random.Random | None = None,
    ) -> list[CandidateItem]:
        scored = self.score_candidates(brain, candidates, bucket, subscribed_ids, recent_topics, rng)
        if not scored:
            return []
        return self.reranker.rerank(scored)
