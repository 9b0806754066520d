"""
Online profile adaptation.

Every function here is pure: it takes a UserBrain and returns a new one, so a
failure half-way leaves the caller's brain untouched.
"""

from feedbrain.core.constants import (
    BUCKET_RATE_MULTIPLIER,
    CHANNEL_SCORE_DEFAULT,
    CHANNEL_SCORE_RETENTION,
    MAX_CONSECUTIVE_SKIPS,
    NOT_INTERESTED_BUCKET_RATE,
    NOT_INTERESTED_CHANNEL_SCORE,
    NOT_INTERESTED_GLOBAL_RATE,
    ONBOARDING_SEED_WEIGHT,
    RATE_CLICK,
    RATE_DISLIKED,
    RATE_LIKED,
    RATE_SKIPPED,
    RATE_WATCHED,
    TOPIC_DECAY,
    TOPIC_PRUNE_THRESHOLD,
)
from feedbrain.models.brain import UserBrain
from feedbrain.models.content import CandidateItem, ContentVector, InteractionKind, TimeBucket
from feedbrain.services.profile.tokenizer import tokenizer
from feedbrain.services.profile.vectorizer import clamp


def learning_rate(kind: InteractionKind, percent_watched: float = 0.0) -> float:
    """Signed base learning rate for an interaction."""
    if kind is InteractionKind.CLICK:
        return RATE_CLICK
    if kind is InteractionKind.LIKED:
        return RATE_LIKED
    if kind is InteractionKind.WATCHED:
        return RATE_WATCHED * clamp(percent_watched)
    if kind is InteractionKind.SKIPPED:
        return RATE_SKIPPED
    if kind is InteractionKind.DISLIKED:
        return RATE_DISLIKED
    raise ValueError(f"Unknown interaction kind: {kind!r}")


def saturating_step(current: float, target: float, rate: float) -> float:
    """
    Move `current` toward `target` by `rate`, damped by (1 - current)^2.

    The closer a value already is to 1.0 the less it moves, which keeps a few
    strong interactions from dominating the profile.
    """
    penalty = (1.0 - current) ** 2
    return clamp(current + (target - current) * rate * penalty)


def adjust_vector(current: ContentVector, target: ContentVector, rate: float) -> ContentVector:
    new_topics: dict[str, float] = {}

    # Untouched topics fade on positive learning
    decay = TOPIC_DECAY if rate > 0 else 1.0
    for key, weight in current.topics.items():
        if key in target.topics:
            continue
        weight *= decay
        if weight >= TOPIC_PRUNE_THRESHOLD:
            new_topics[key] = weight

    for key, target_weight in target.topics.items():
        updated = saturating_step(current.topics.get(key, 0.0), target_weight, rate)
        if updated > 0.0:
            new_topics[key] = updated

    return ContentVector(
        topics=new_topics,
        duration=saturating_step(current.duration, target.duration, rate),
        pacing=saturating_step(current.pacing, target.pacing, rate),
        complexity=saturating_step(current.complexity, target.complexity, rate),
        is_live=saturating_step(current.is_live, target.is_live, rate),
    )


def _update_vectors(
    brain: UserBrain, item_vector: ContentVector, global_rate: float, bucket_rate: float, bucket: TimeBucket
) -> UserBrain:
    new_global = adjust_vector(brain.global_vector, item_vector, global_rate)
    new_bucket = adjust_vector(brain.vector_for(bucket), item_vector, bucket_rate)
    return brain.with_bucket(bucket, new_bucket).model_copy(update={"global_vector": new_global})


def apply_interaction(
    brain: UserBrain,
    item: CandidateItem,
    item_vector: ContentVector,
    kind: InteractionKind,
    bucket: TimeBucket,
    percent_watched: float = 0.0,
) -> UserBrain:
    """
    Learn from one interaction event.

    Args:
        brain: Current profile (not modified)
        item: Item the user interacted with
        item_vector: Features of the item
        kind: Interaction kind
        bucket: Active time-of-day bucket
        percent_watched: Watched fraction in [0, 1], only used for WATCHED

    Returns:
        Updated profile
    """
    rate = learning_rate(kind, percent_watched)
    updated = _update_vectors(brain, item_vector, rate, rate * BUCKET_RATE_MULTIPLIER, bucket)

    outcome = 1.0 if rate > 0 else 0.0
    old_score = brain.channel_scores.get(item.channel_id, CHANNEL_SCORE_DEFAULT)
    channel_scores = dict(brain.channel_scores)
    channel_scores[item.channel_id] = old_score * CHANNEL_SCORE_RETENTION + outcome * (1.0 - CHANNEL_SCORE_RETENTION)

    if kind.is_positive:
        skips = 0
    else:
        skips = min(brain.consecutive_skips + 1, MAX_CONSECUTIVE_SKIPS)

    return updated.model_copy(
        update={
            "channel_scores": channel_scores,
            "consecutive_skips": skips,
            "total_interactions": brain.total_interactions + 1,
        }
    )


def mark_not_interested(
    brain: UserBrain, item: CandidateItem, item_vector: ContentVector, bucket: TimeBucket
) -> UserBrain:
    """Strong one-shot negative signal: pushes topics away and pins the channel score."""
    updated = _update_vectors(brain, item_vector, NOT_INTERESTED_GLOBAL_RATE, NOT_INTERESTED_BUCKET_RATE, bucket)
    channel_scores = dict(brain.channel_scores)
    channel_scores[item.channel_id] = NOT_INTERESTED_CHANNEL_SCORE
    return updated.model_copy(update={"channel_scores": channel_scores})


def seed_preferred_topics(brain: UserBrain, topics: set[str]) -> UserBrain:
    """Give onboarding choices a starting weight in the global vector."""
    seeded = dict(brain.global_vector.topics)
    for topic in topics:
        for token in tokenizer.tokenize(topic):
            seeded[token] = clamp(max(seeded.get(token, 0.0), ONBOARDING_SEED_WEIGHT))
    global_vector = brain.global_vector.model_copy(update={"topics": seeded})
    return brain.model_copy(update={"global_vector": global_vector})
