import random
from itertools import combinations

from loguru import logger

from feedbrain.core.constants import (
    DEFAULT_DISCOVERY_QUERIES,
    DISCOVERY_BRIDGE_INTERESTS,
    DISCOVERY_DIRECT_INTERESTS,
    DISCOVERY_TOP_INTERESTS,
)
from feedbrain.models.brain import UserBrain
from feedbrain.models.content import TimeBucket
from feedbrain.models.persona import PERSONA_QUERY_SUFFIX, Persona
from feedbrain.models.topics import TOPIC_CATEGORIES, TopicCategory
from feedbrain.services.profile.tokenizer import Tokenizer, tokenizer


class DiscoveryEngine:
    """
    Builds search queries the content source can use to fetch "For You" candidates.

    Mixes what the user already likes with one deliberately under-represented
    category so the candidate pool does not collapse into an echo chamber.
    """

    def __init__(
        self,
        categories: list[TopicCategory] = TOPIC_CATEGORIES,
        text_tokenizer: Tokenizer = tokenizer,
    ):
        self.categories = categories
        self.tokenizer = text_tokenizer

    def category_affinity(self, brain: UserBrain, category: TopicCategory) -> float:
        """Sum of global weights for the tokens describing a category."""
        topics = brain.global_vector.topics
        tokens: set[str] = set(self.tokenizer.tokenize(category.name))
        for topic in category.topics:
            tokens.update(self.tokenizer.tokenize(topic))
        return sum(topics.get(token, 0.0) for token in tokens)

    def exploration_query(self, brain: UserBrain, rng: random.Random) -> str | None:
        if not self.categories:
            return None

        affinities = [(self.category_affinity(brain, c), c) for c in self.categories]
        lowest = min(score for score, _ in affinities)
        coldest = [c for score, c in affinities if score == lowest]
        category = rng.choice(coldest)

        options = [t for t in category.topics if t not in brain.preferred_topics] or category.topics
        if not options:
            return category.name
        return rng.choice(options)

    def generate_queries(
        self,
        brain: UserBrain,
        bucket: TimeBucket,
        persona: Persona,
        rng: random.Random | None = None,
    ) -> list[str]:
        """
        Generate discovery queries from the profile.

        Args:
            brain: Profile snapshot
            bucket: Active time-of-day bucket
            persona: Current persona of the profile
            rng: Random source for exploration choice and shuffling

        Returns:
            De-duplicated, shuffled list of queries
        """
        rng = rng or random.Random()
        top_interests = [key for key, _ in brain.global_vector.get_top_topics(DISCOVERY_TOP_INTERESTS)]

        queries: list[str] = []

        # Direct interests
        queries.extend(top_interests[:DISCOVERY_DIRECT_INTERESTS])

        # Bridges between strong interests
        for first, second in combinations(top_interests[:DISCOVERY_BRIDGE_INTERESTS], 2):
            if set(first.split()) & set(second.split()):
                continue
            queries.append(f"{first} {second}")

        # Time-of-day obsession
        obsession = brain.vector_for(bucket).primary_topic()
        if obsession:
            queries.append(obsession)

        suffix = PERSONA_QUERY_SUFFIX[persona]
        if suffix and top_interests:
            queries.append(f"{top_interests[0]} {suffix}")

        if not queries:
            if not brain.preferred_topics:
                logger.debug("No profile signal yet, using default discovery queries")
                return list(DEFAULT_DISCOVERY_QUERIES)
            queries.extend(sorted(brain.preferred_topics))

        exploration = self.exploration_query(brain, rng)
        if exploration:
            queries.append(exploration)

        unique = list(dict.fromkeys(q.strip() for q in queries if q.strip()))
        rng.shuffle(unique)
        return unique


discovery_engine = DiscoveryEngine()
