import asyncio
import random

import pytest

from feedbrain.core.constants import DEFAULT_DISCOVERY_QUERIES
from feedbrain.models.brain import UserBrain
from feedbrain.models.content import InteractionKind, TimeBucket
from feedbrain.models.persona import Persona
from feedbrain.services.brain_store import BrainStore
from feedbrain.services.engine import FeedEngine
from tests.factories import make_item


async def test_interaction_updates_active_bucket_and_persists(engine, store):
    await engine.on_interaction(make_item(), InteractionKind.LIKED)

    brain = await engine.snapshot()
    assert engine.current_bucket() is TimeBucket.MORNING
    assert brain.morning_vector.topics
    assert brain.evening_vector.topics == {}
    assert store.load() == brain


async def test_initialize_reads_existing_brain(store, morning_clock):
    store.save(UserBrain(total_interactions=9))
    engine = FeedEngine(store, clock=morning_clock)
    await engine.initialize()
    assert (await engine.snapshot()).total_interactions == 9


async def test_initialize_survives_undecodable_brain_file(store, morning_clock):
    store.path.write_bytes(b"\xff\xfe\x00garbage")
    engine = FeedEngine(store, clock=morning_clock)
    await engine.initialize()
    assert await engine.snapshot() == UserBrain()


async def test_snapshot_is_detached(engine):
    snapshot = await engine.snapshot()
    snapshot.global_vector.topics["hacked"] = 1.0
    assert "hacked" not in (await engine.snapshot()).global_vector.topics


async def test_concurrent_interactions_are_all_applied(engine):
    items = [make_item(f"v{i}", channel_id=f"c{i}") for i in range(20)]
    await asyncio.gather(*(engine.on_interaction(item, InteractionKind.CLICK) for item in items))

    brain = await engine.snapshot()
    assert brain.total_interactions == 20
    assert len(brain.channel_scores) == 20


async def test_rank_excludes_blocked_channels(engine):
    await engine.add_blocked_channel("bad")
    ranked = await engine.rank([make_item("1", channel_id="bad"), make_item("2", channel_id="good")])
    assert [item.id for item in ranked] == ["2"]


async def test_rank_empty_input(engine):
    assert await engine.rank([]) == []


async def test_rank_is_reproducible_with_seeded_rng(store, morning_clock):
    candidates = [make_item(f"v{i}", channel_id=f"c{i}", title=f"topic{i} words{i}") for i in range(10)]
    first = await FeedEngine(store, clock=morning_clock, rng=random.Random(3)).rank(candidates)
    second = await FeedEngine(store, clock=morning_clock, rng=random.Random(3)).rank(candidates)
    assert [i.id for i in first] == [i.id for i in second]


async def test_mark_not_interested(engine):
    item = make_item(channel_id="meh")
    await engine.on_interaction(item, InteractionKind.LIKED)
    await engine.mark_not_interested(item)
    assert (await engine.snapshot()).channel_scores["meh"] == 0.05


async def test_blocked_topics_are_normalized(engine):
    await engine.add_blocked_topic("  Crypto ")
    await engine.add_blocked_topic("   ")
    assert await engine.get_blocked_topics() == {"crypto"}

    await engine.remove_blocked_topic("CRYPTO")
    assert await engine.get_blocked_topics() == set()


async def test_blocked_channels(engine):
    await engine.add_blocked_channel("c1")
    await engine.add_blocked_channel("c2")
    await engine.remove_blocked_channel("c1")
    assert await engine.get_blocked_channels() == {"c2"}


async def test_preferred_topics(engine):
    await engine.set_preferred_topics({"Chess", " ", "Cooking"})
    await engine.add_preferred_topic("Jazz")
    await engine.remove_preferred_topic("Chess")
    assert await engine.get_preferred_topics() == {"Cooking", "Jazz"}


async def test_onboarding_seeds_profile(engine):
    assert await engine.has_completed_onboarding() is False
    await engine.complete_onboarding({"Chess", "Cooking"})

    brain = await engine.snapshot()
    assert brain.has_completed_onboarding is True
    assert brain.preferred_topics == {"Chess", "Cooking"}
    assert brain.global_vector.topics["chess"] == pytest.approx(0.3)
    assert brain.global_vector.topics["cook"] == pytest.approx(0.3)


async def test_export_import_round_trip(engine, store, morning_clock, tmp_path):
    await engine.on_interaction(make_item(), InteractionKind.WATCHED, 0.8)
    await engine.add_blocked_topic("crypto")
    exported = await engine.export_brain()

    other = FeedEngine(BrainStore(tmp_path / "other.json"), clock=morning_clock)
    assert await other.import_brain(exported) is True
    assert await other.snapshot() == await engine.snapshot()


async def test_failed_import_keeps_brain(engine):
    await engine.on_interaction(make_item(), InteractionKind.CLICK)
    before = await engine.snapshot()

    assert await engine.import_brain("definitely not json") is False
    assert await engine.snapshot() == before


async def test_reset_brain(engine, store):
    await engine.on_interaction(make_item(), InteractionKind.CLICK)
    await engine.reset_brain()
    assert await engine.snapshot() == UserBrain()
    assert store.load() == UserBrain()


async def test_save_failure_keeps_in_memory_state(tmp_path, morning_clock):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    engine = FeedEngine(BrainStore(blocker / "brain.json"), clock=morning_clock)

    await engine.on_interaction(make_item(), InteractionKind.LIKED)

    assert (await engine.snapshot()).total_interactions == 1


async def test_persona_and_discovery_for_new_user(engine):
    assert await engine.get_persona() is Persona.INITIATE
    assert await engine.generate_discovery_queries() == list(DEFAULT_DISCOVERY_QUERIES)
