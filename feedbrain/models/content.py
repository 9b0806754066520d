import math
from enum import Enum

from pydantic import BaseModel, Field, field_validator


class InteractionKind(str, Enum):
    CLICK = "click"
    LIKED = "liked"
    WATCHED = "watched"
    SKIPPED = "skipped"
    DISLIKED = "disliked"

    @property
    def is_positive(self) -> bool:
        return self in (InteractionKind.CLICK, InteractionKind.LIKED, InteractionKind.WATCHED)


class TimeBucket(str, Enum):
    MORNING = "morning"  # 06:00 - 12:00
    AFTERNOON = "afternoon"  # 12:00 - 18:00
    EVENING = "evening"  # 18:00 - 00:00
    NIGHT = "night"  # 00:00 - 06:00

    @classmethod
    def from_hour(cls, hour: int) -> "TimeBucket":
        if 6 <= hour <= 11:
            return cls.MORNING
        if 12 <= hour <= 17:
            return cls.AFTERNOON
        if 18 <= hour <= 23:
            return cls.EVENING
        return cls.NIGHT


class CandidateItem(BaseModel):
    """A media item as supplied by the content source."""

    id: str
    title: str = ""
    channel_id: str = ""
    channel_name: str = ""
    thumbnail_url: str = ""
    duration: int = Field(default=0, ge=0, description="Length in seconds, 0 when unknown")
    view_count: int = Field(default=0, ge=0)
    upload_date: str = Field(default="", description="Relative age, e.g. '3 days ago'")
    is_live: bool = False


class ContentVector(BaseModel):
    """
    Sparse topic weights plus four scalar heuristics, all in [0, 1].

    Used both for a single item and for the learned profile vectors.
    """

    topics: dict[str, float] = Field(default_factory=dict, description="Token or bigram -> weight")
    duration: float = 0.5
    pacing: float = 0.5
    complexity: float = 0.5
    is_live: float = 0.0

    @field_validator("duration", "pacing", "complexity", "is_live")
    @classmethod
    def _clamp_scalar(cls, value: float) -> float:
        return max(0.0, min(1.0, value))

    @field_validator("topics")
    @classmethod
    def _clamp_topics(cls, value: dict[str, float]) -> dict[str, float]:
        return {k: max(0.0, min(1.0, w)) for k, w in value.items()}

    def magnitude(self) -> float:
        return math.sqrt(sum(w * w for w in self.topics.values()))

    def total_weight(self) -> float:
        return sum(self.topics.values())

    def primary_topic(self) -> str | None:
        """Highest-weight topic key, or None for an empty map."""
        if not self.topics:
            return None
        return max(self.topics.items(), key=lambda x: x[1])[0]

    def get_top_topics(self, limit: int = 5) -> list[tuple[str, float]]:
        """Return top N topics by weight."""
        return sorted(self.topics.items(), key=lambda x: x[1], reverse=True)[:limit]
