import random
from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from feedbrain.core.app import create_app
from feedbrain.services.brain_store import BrainStore
from feedbrain.services.engine import FeedEngine
from tests.factories import make_item


@pytest.fixture
def client(tmp_path):
    engine = FeedEngine(
        BrainStore(tmp_path / "brain.json"),
        clock=lambda: datetime(2024, 5, 1, 21, 0),
        rng=random.Random(11),
    )
    with TestClient(create_app(engine)) as test_client:
        yield test_client


def _item(item_id: str, **overrides) -> dict:
    return make_item(item_id, **overrides).model_dump()


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_root(client):
    assert client.get("/").json() == {"message": "FeedBrain API is running"}


def test_rank_filters_blocked_channel(client):
    client.post("/blocked/channels", json={"channel_id": "bad"})
    response = client.post(
        "/rank",
        json={
            "candidates": [_item("1", channel_id="bad"), _item("2", channel_id="good")],
            "subscribed_channel_ids": ["good"],
        },
    )
    assert response.status_code == 200
    assert [item["id"] for item in response.json()["items"]] == ["2"]


def test_interaction_updates_profile(client):
    response = client.post("/interactions", json={"item": _item("1"), "kind": "liked"})
    assert response.status_code == 204

    profile = client.get("/profile").json()
    assert profile["total_interactions"] == 1
    assert profile["evening_vector"]["topics"]
    assert client.get("/stats").json()["total_interactions"] == 1


def test_invalid_interaction_kind_is_rejected(client):
    response = client.post("/interactions", json={"item": _item("1"), "kind": "shared"})
    assert response.status_code == 422


def test_not_interested(client):
    client.post("/not-interested", json={"item": _item("1", channel_id="meh")})
    assert client.get("/profile").json()["channel_scores"]["meh"] == 0.05


def test_persona_for_new_user(client):
    body = client.get("/persona").json()
    assert body["id"] == "initiate"
    assert body["title"] == "The Initiate"


def test_discovery(client):
    assert client.get("/discovery/queries").json()["queries"]
    categories = client.get("/discovery/categories").json()
    assert any(c["name"] == "Gaming" for c in categories)


def test_export_import_and_reset(client):
    client.post("/interactions", json={"item": _item("1"), "kind": "click"})
    exported = client.get("/profile/export")
    assert exported.status_code == 200
    assert exported.json()["version"] == 3

    assert client.delete("/profile").status_code == 204
    assert client.get("/profile").json()["total_interactions"] == 0

    assert client.post("/profile/import", json={"document": exported.text}).status_code == 204
    assert client.get("/profile").json()["total_interactions"] == 1


def test_import_rejects_garbage(client):
    response = client.post("/profile/import", json={"document": "garbage"})
    assert response.status_code == 400


def test_blocked_topics(client):
    assert client.post("/blocked/topics", json={"topic": "Crypto"}).json() == {"topics": ["crypto"]}
    assert client.get("/blocked/topics").json() == {"topics": ["crypto"]}
    assert client.delete("/blocked/topics/crypto").json() == {"topics": []}
    assert client.post("/blocked/topics", json={"topic": "  "}).status_code == 400


def test_blocked_channels(client):
    client.post("/blocked/channels", json={"channel_id": "c1"})
    assert client.get("/blocked/channels").json() == {"channels": ["c1"]}
    assert client.delete("/blocked/channels/c1").json() == {"channels": []}


def test_preferences_and_onboarding(client):
    assert client.put("/preferences/topics", json={"topics": ["Jazz"]}).json() == {"topics": ["Jazz"]}

    body = client.post("/onboarding", json={"topics": ["Chess"]}).json()
    assert body == {"completed": True, "topics": ["Chess", "Jazz"]}
    assert client.get("/preferences/topics").json() == {"topics": ["Chess", "Jazz"]}
    assert client.get("/profile").json()["has_completed_onboarding"] is True
