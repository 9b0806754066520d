from collections import defaultdict

from loguru import logger

from feedbrain.core.constants import (
    MAX_TOPIC_USES,
    RELAXED_TITLE_SIMILARITY,
    RELAXED_TITLE_WINDOW,
    STRICT_SLOTS,
    STRICT_TITLE_SIMILARITY,
    STRICT_TITLE_WINDOW,
)
from feedbrain.models.content import CandidateItem
from feedbrain.models.scoring import ScoredCandidate
from feedbrain.services.profile.similarity import title_similarity


class DiversityReranker:
    """
    Reorders scored candidates so the top of the feed is not one channel or one topic.

    Phase 1 fills the first slots strictly (unique channel, capped topic, no
    near-duplicate titles). Phase 2 appends everything else by score and only
    drops obvious title duplicates.
    """

    def __init__(
        self,
        strict_slots: int = STRICT_SLOTS,
        max_topic_uses: int = MAX_TOPIC_USES,
    ):
        self.strict_slots = strict_slots
        self.max_topic_uses = max_topic_uses

    @staticmethod
    def _too_similar(candidate: ScoredCandidate, accepted: list[ScoredCandidate], window: int, limit: float) -> bool:
        if window <= 0:
            return False
        title = candidate.item.title
        return any(title_similarity(title, prev.item.title) > limit for prev in accepted[-window:])

    def rerank(self, candidates: list[ScoredCandidate]) -> list[CandidateItem]:
        ordered = sorted(candidates, key=lambda c: c.score, reverse=True)

        accepted: list[ScoredCandidate] = []
        deferred: list[ScoredCandidate] = []
        used_channels: set[str] = set()
        topic_uses: dict[str, int] = defaultdict(int)

        # Phase 1: strict
        position = 0
        while position < len(ordered) and len(accepted) < self.strict_slots:
            current = ordered[position]
            position += 1
            topic = current.primary_topic

            if (
                current.item.channel_id in used_channels
                or (topic is not None and topic_uses[topic] >= self.max_topic_uses)
                or self._too_similar(current, accepted, STRICT_TITLE_WINDOW, STRICT_TITLE_SIMILARITY)
            ):
                deferred.append(current)
                continue

            accepted.append(current)
            used_channels.add(current.item.channel_id)
            if topic is not None:
                topic_uses[topic] += 1

        # Phase 2: relaxed filler, still in score order
        remaining = sorted(deferred + ordered[position:], key=lambda c: c.score, reverse=True)
        dropped = 0
        for current in remaining:
            if self._too_similar(current, accepted, RELAXED_TITLE_WINDOW, RELAXED_TITLE_SIMILARITY):
                dropped += 1
                continue
            accepted.append(current)

        if dropped:
            logger.debug(f"Diversity pass dropped {dropped} near-duplicate titles")
        return [c.item for c in accepted]
