import random

import pytest

from feedbrain.core.constants import DEFAULT_DISCOVERY_QUERIES
from feedbrain.models.brain import UserBrain
from feedbrain.models.content import ContentVector, TimeBucket
from feedbrain.models.persona import Persona
from feedbrain.models.topics import TOPIC_CATEGORIES, TopicCategory
from feedbrain.services.recommendation.discovery import DiscoveryEngine, discovery_engine


def test_empty_profile_uses_defaults():
    queries = discovery_engine.generate_queries(UserBrain(), TimeBucket.MORNING, Persona.INITIATE, random.Random(1))
    assert queries == list(DEFAULT_DISCOVERY_QUERIES)


def test_preferred_topics_seed_cold_profile():
    brain = UserBrain(preferred_topics={"Chess"})
    queries = discovery_engine.generate_queries(brain, TimeBucket.MORNING, Persona.INITIATE, random.Random(1))

    assert "Chess" in queries
    assert len(queries) == 2


def test_queries_mix_interests_bridges_context_and_persona():
    brain = UserBrain(
        global_vector=ContentVector(topics={"chess": 0.9, "cooking": 0.8, "guitar": 0.7}),
        morning_vector=ContentVector(topics={"coffee": 0.5}),
    )
    queries = discovery_engine.generate_queries(brain, TimeBucket.MORNING, Persona.SCHOLAR, random.Random(3))

    expected = {"chess", "cooking", "chess cooking", "chess guitar", "cooking guitar", "coffee", "chess explained"}
    assert expected <= set(queries)
    assert len(queries) == len(expected) + 1
    assert len(queries) == len(set(queries))


def test_bridges_skip_overlapping_interests():
    brain = UserBrain(global_vector=ContentVector(topics={"machine learning": 0.9, "machine": 0.8}))
    queries = discovery_engine.generate_queries(brain, TimeBucket.NIGHT, Persona.INITIATE, random.Random(3))

    assert "machine learning machine" not in queries
    assert {"machine learning", "machine"} <= set(queries)


def test_same_seed_gives_same_queries():
    brain = UserBrain(global_vector=ContentVector(topics={"chess": 0.9, "cooking": 0.8}))
    first = discovery_engine.generate_queries(brain, TimeBucket.EVENING, Persona.EXPLORER, random.Random(5))
    second = discovery_engine.generate_queries(brain, TimeBucket.EVENING, Persona.EXPLORER, random.Random(5))
    assert first == second


@pytest.fixture
def two_categories() -> DiscoveryEngine:
    return DiscoveryEngine(
        categories=[
            TopicCategory(name="Board", icon="♟", topics=["Chess"]),
            TopicCategory(name="Kitchen", icon="🍳", topics=["Baking", "Bread"]),
        ]
    )


def test_exploration_targets_least_represented_category(two_categories):
    brain = UserBrain(global_vector=ContentVector(topics={"chess": 0.9}))
    for seed in range(10):
        assert two_categories.exploration_query(brain, random.Random(seed)) in {"Baking", "Bread"}


def test_exploration_skips_topics_already_preferred(two_categories):
    brain = UserBrain(global_vector=ContentVector(topics={"chess": 0.9}), preferred_topics={"Baking"})
    assert two_categories.exploration_query(brain, random.Random(0)) == "Bread"


def test_category_affinity_sums_stemmed_tokens():
    brain = UserBrain(global_vector=ContentVector(topics={"python": 0.5, "linux": 0.25}))
    technology = next(c for c in TOPIC_CATEGORIES if c.name == "Technology")
    assert discovery_engine.category_affinity(brain, technology) == pytest.approx(0.75)


def test_no_categories_means_no_exploration():
    assert DiscoveryEngine(categories=[]).exploration_query(UserBrain(), random.Random(0)) is None
