import random
from datetime import datetime

import pytest

from feedbrain.services.brain_store import BrainStore
from feedbrain.services.engine import FeedEngine


@pytest.fixture
def store(tmp_path) -> BrainStore:
    return BrainStore(tmp_path / "brain.json")


@pytest.fixture
def morning_clock():
    return lambda: datetime(2024, 5, 1, 9, 30)


@pytest.fixture
def engine(store, morning_clock) -> FeedEngine:
    return FeedEngine(store, clock=morning_clock, rng=random.Random(7))
