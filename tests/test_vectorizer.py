import pytest

from feedbrain.models.content import ContentVector
from feedbrain.services.profile.vectorizer import normalize_topics, vectorizer
from tests.factories import make_item


def test_topic_keys_include_stems_and_bigrams():
    vector = vectorizer.extract_features(make_item(title="Python Machine Learning Tutorial"))

    for key in ("python", "machine", "learn", "tutorial", "python machine", "machine learning"):
        assert key in vector.topics
    assert "learning" not in vector.topics


def test_topics_are_unit_length():
    vector = vectorizer.extract_features(make_item())
    assert abs(vector.magnitude() - 1.0) < 1e-9


def test_channel_tokens_outweigh_title_tokens():
    vector = vectorizer.extract_features(make_item(title="Rust Basics", channel_name="Ferris Hub"))
    assert vector.topics["ferri"] > vector.topics["rust"]


def test_token_in_channel_and_title_accumulates():
    vector = vectorizer.extract_features(make_item(title="Chess openings", channel_name="Chess Club"))
    assert vector.topics["chess"] > vector.topics["club"]


def test_empty_metadata_produces_empty_map_with_defaults():
    vector = vectorizer.extract_features(make_item(title="", channel_name="", duration=0))

    assert vector.topics == {}
    assert vector.duration == pytest.approx(0.25)
    assert vector.pacing == pytest.approx(0.75)
    assert vector.complexity == 0.0


def test_live_item_without_duration_counts_as_long():
    vector = vectorizer.extract_features(make_item(duration=0, is_live=True))
    assert vector.duration == 1.0
    assert vector.pacing == 0.0
    assert vector.is_live == 1.0


def test_scalar_heuristics():
    title = "x" * 30
    vector = vectorizer.extract_features(make_item(title=title, duration=600))
    assert vector.duration == pytest.approx(0.5)
    assert vector.pacing == pytest.approx(0.5)
    assert vector.complexity == pytest.approx(0.5)


def test_normalize_topics_leaves_empty_map():
    assert normalize_topics({}) == {}


def test_content_vector_clamps_values():
    vector = ContentVector(topics={"a": 1.7, "b": -0.2}, duration=3.0, pacing=-1.0)
    assert vector.topics == {"a": 1.0, "b": 0.0}
    assert vector.duration == 1.0
    assert vector.pacing == 0.0


def test_top_topics_and_primary_topic():
    vector = ContentVector(topics={"a": 0.2, "b": 0.9, "c": 0.5})
    assert vector.primary_topic() == "b"
    assert [k for k, _ in vector.get_top_topics(2)] == ["b", "c"]
    assert ContentVector().primary_topic() is None
