import asyncio
import random
from collections.abc import Callable
from datetime import datetime

from loguru import logger

from feedbrain.models.brain import UserBrain
from feedbrain.models.content import CandidateItem, InteractionKind, TimeBucket
from feedbrain.models.persona import Persona
from feedbrain.services.brain_store import BrainStore
from feedbrain.services.profile import learning
from feedbrain.services.profile.persona import get_persona
from feedbrain.services.profile.vectorizer import ItemVectorizer, vectorizer
from feedbrain.services.recommendation.discovery import DiscoveryEngine, discovery_engine
from feedbrain.services.recommendation.ranker import Ranker


class FeedEngine:
    """
    Owns one user's brain and serializes every change to it.

    Mutations hold the lock through the save so readers never see a half-applied
    update. Ranking only holds it long enough to copy a snapshot and scores the
    copy in a worker thread.
    """

    def __init__(
        self,
        store: BrainStore,
        clock: Callable[[], datetime] = datetime.now,
        rng: random.Random | None = None,
        item_vectorizer: ItemVectorizer = vectorizer,
        ranker: Ranker | None = None,
        discovery: DiscoveryEngine = discovery_engine,
    ):
        self.store = store
        self.clock = clock
        self.rng = rng or random.Random()
        self.vectorizer = item_vectorizer
        self.ranker = ranker or Ranker(item_vectorizer)
        self.discovery = discovery

        self._lock = asyncio.Lock()
        self._brain = UserBrain()
        self._initialized = False

    # Lifecycle

    async def initialize(self) -> None:
        """Load the persisted brain once. Safe to call repeatedly."""
        async with self._lock:
            if self._initialized:
                return
            self._brain = await asyncio.to_thread(self.store.load)
            self._initialized = True

    async def snapshot(self) -> UserBrain:
        await self.initialize()
        async with self._lock:
            return self._brain.snapshot()

    async def reset_brain(self) -> None:
        logger.info("Resetting brain to defaults")
        await self._mutate(lambda _brain: UserBrain())

    def current_bucket(self) -> TimeBucket:
        return TimeBucket.from_hour(self.clock().hour)

    async def _persist(self) -> None:
        saved = await asyncio.to_thread(self.store.save, self._brain)
        if not saved:
            logger.warning("Brain save failed; keeping in-memory state until the next successful write")

    async def _mutate(self, change: Callable[[UserBrain], UserBrain]) -> UserBrain:
        await self.initialize()
        async with self._lock:
            # The new brain only replaces the old one once it is fully built
            self._brain = change(self._brain)
            await self._persist()
            return self._brain

    # Ranking

    async def rank(
        self,
        candidates: list[CandidateItem],
        subscribed_ids: set[str] | None = None,
        recent_topics: list[str] | None = None,
    ) -> list[CandidateItem]:
        """
        Rank and diversify candidates for the current user.

        Args:
            candidates: Items supplied by the content source
            subscribed_ids: Channel IDs the user subscribes to
            recent_topics: Primary topics of recently watched items

        Returns:
            Ordered items, blocked content removed
        """
        if not candidates:
            return []

        brain = await self.snapshot()
        bucket = self.current_bucket()
        ranked = await asyncio.to_thread(
            self.ranker.rank,
            brain,
            candidates,
            bucket,
            subscribed_ids or set(),
            recent_topics or [],
            self.rng,
        )
        logger.debug(f"Ranked {len(ranked)} of {len(candidates)} candidates for {bucket.value}")
        return ranked

    # Learning

    async def on_interaction(self, item: CandidateItem, kind: InteractionKind, percent_watched: float = 0.0) -> None:
        item_vector = self.vectorizer.extract_features(item)
        bucket = self.current_bucket()
        await self._mutate(
            lambda brain: learning.apply_interaction(brain, item, item_vector, kind, bucket, percent_watched)
        )
        logger.debug(f"Learned {kind.value} on {item.id} ({bucket.value})")

    async def mark_not_interested(self, item: CandidateItem) -> None:
        item_vector = self.vectorizer.extract_features(item)
        bucket = self.current_bucket()
        await self._mutate(lambda brain: learning.mark_not_interested(brain, item, item_vector, bucket))
        logger.info(f"Marked {item.id} from channel {item.channel_id} as not interested")

    # Derived signals

    async def get_persona(self) -> Persona:
        return get_persona(await self.snapshot())

    async def generate_discovery_queries(self) -> list[str]:
        brain = await self.snapshot()
        return self.discovery.generate_queries(brain, self.current_bucket(), get_persona(brain), self.rng)

    # Blocklist & preferences

    async def add_blocked_topic(self, topic: str) -> None:
        topic = topic.strip().lower()
        if not topic:
            return
        await self._mutate(lambda brain: brain.model_copy(update={"blocked_topics": brain.blocked_topics | {topic}}))

    async def remove_blocked_topic(self, topic: str) -> None:
        topic = topic.strip().lower()
        await self._mutate(lambda brain: brain.model_copy(update={"blocked_topics": brain.blocked_topics - {topic}}))

    async def get_blocked_topics(self) -> set[str]:
        return (await self.snapshot()).blocked_topics

    async def add_blocked_channel(self, channel_id: str) -> None:
        channel_id = channel_id.strip()
        if not channel_id:
            return
        await self._mutate(
            lambda brain: brain.model_copy(update={"blocked_channels": brain.blocked_channels | {channel_id}})
        )

    async def remove_blocked_channel(self, channel_id: str) -> None:
        channel_id = channel_id.strip()
        await self._mutate(
            lambda brain: brain.model_copy(update={"blocked_channels": brain.blocked_channels - {channel_id}})
        )

    async def get_blocked_channels(self) -> set[str]:
        return (await self.snapshot()).blocked_channels

    async def get_preferred_topics(self) -> set[str]:
        return (await self.snapshot()).preferred_topics

    async def set_preferred_topics(self, topics: set[str]) -> None:
        cleaned = {t.strip() for t in topics if t.strip()}
        await self._mutate(lambda brain: brain.model_copy(update={"preferred_topics": cleaned}))

    async def add_preferred_topic(self, topic: str) -> None:
        topic = topic.strip()
        if not topic:
            return
        await self._mutate(
            lambda brain: brain.model_copy(update={"preferred_topics": brain.preferred_topics | {topic}})
        )

    async def remove_preferred_topic(self, topic: str) -> None:
        topic = topic.strip()
        await self._mutate(
            lambda brain: brain.model_copy(update={"preferred_topics": brain.preferred_topics - {topic}})
        )

    async def complete_onboarding(self, topics: set[str]) -> None:
        cleaned = {t.strip() for t in topics if t.strip()}

        def _complete(brain: UserBrain) -> UserBrain:
            seeded = learning.seed_preferred_topics(brain, cleaned)
            return seeded.model_copy(
                update={"preferred_topics": brain.preferred_topics | cleaned, "has_completed_onboarding": True}
            )

        await self._mutate(_complete)
        logger.info(f"Onboarding completed with {len(cleaned)} topics")

    async def has_completed_onboarding(self) -> bool:
        return (await self.snapshot()).has_completed_onboarding

    # Backup

    async def export_brain(self) -> str:
        return self.store.export_document(await self.snapshot())

    async def import_brain(self, raw: str) -> bool:
        """Replace the brain with an exported document. Returns False if it cannot be read."""
        imported = self.store.import_document(raw)
        if imported is None:
            return False
        await self._mutate(lambda _brain: imported)
        logger.info(f"Imported brain with {imported.total_interactions} interactions")
        return True
