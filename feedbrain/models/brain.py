from pydantic import BaseModel, Field, field_serializer, field_validator

from feedbrain.core.constants import MAX_CONSECUTIVE_SKIPS
from feedbrain.models.content import ContentVector, TimeBucket

_BUCKET_FIELDS: dict[TimeBucket, str] = {
    TimeBucket.MORNING: "morning_vector",
    TimeBucket.AFTERNOON: "afternoon_vector",
    TimeBucket.EVENING: "evening_vector",
    TimeBucket.NIGHT: "night_vector",
}


class UserBrain(BaseModel):
    """
    The complete, persisted interest profile of one user.

    Four time-of-day vectors capture context-dependent taste, the global vector
    is the "core personality". Instances are treated as values: learning returns
    a new brain instead of mutating the one it was given.
    """

    morning_vector: ContentVector = Field(default_factory=ContentVector)
    afternoon_vector: ContentVector = Field(default_factory=ContentVector)
    evening_vector: ContentVector = Field(default_factory=ContentVector)
    night_vector: ContentVector = Field(default_factory=ContentVector)
    global_vector: ContentVector = Field(default_factory=ContentVector)

    channel_scores: dict[str, float] = Field(default_factory=dict, description="Channel ID -> positive outcome rate")
    total_interactions: int = 0
    consecutive_skips: int = 0

    blocked_topics: set[str] = Field(default_factory=set)
    blocked_channels: set[str] = Field(default_factory=set)
    preferred_topics: set[str] = Field(default_factory=set)
    has_completed_onboarding: bool = False

    @field_validator("channel_scores")
    @classmethod
    def _clamp_channel_scores(cls, value: dict[str, float]) -> dict[str, float]:
        return {k: max(0.0, min(1.0, v)) for k, v in value.items()}

    @field_validator("consecutive_skips")
    @classmethod
    def _cap_skips(cls, value: int) -> int:
        return max(0, min(MAX_CONSECUTIVE_SKIPS, value))

    @field_validator("total_interactions")
    @classmethod
    def _non_negative(cls, value: int) -> int:
        return max(0, value)

    @field_serializer("blocked_topics", "blocked_channels", "preferred_topics")
    def _serialize_string_set(self, value: set[str]) -> list[str]:
        return sorted(value)

    def vector_for(self, bucket: TimeBucket) -> ContentVector:
        return getattr(self, _BUCKET_FIELDS[bucket])

    def with_bucket(self, bucket: TimeBucket, vector: ContentVector) -> "UserBrain":
        """Return a copy with one time-bucket vector replaced."""
        return self.model_copy(update={_BUCKET_FIELDS[bucket]: vector})

    def snapshot(self) -> "UserBrain":
        return self.model_copy(deep=True)
