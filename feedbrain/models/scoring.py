from pydantic import BaseModel

from feedbrain.models.content import CandidateItem, ContentVector


class ScoredCandidate(BaseModel):
    """A candidate with its features and score breakdown."""

    item: CandidateItem
    vector: ContentVector
    score: float = 0.0
    # Weighted affinity plus additive boosts, before multipliers and jitter
    base_score: float = 0.0
    personality: float = 0.0
    context: float = 0.0
    novelty: float = 0.0

    @property
    def primary_topic(self) -> str | None:
        return self.vector.primary_topic()
