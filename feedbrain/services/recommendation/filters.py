from feedbrain.models.content import CandidateItem


class FilterEngine:
    """Handles blocked channels and blocked topics."""

    def __init__(self, blocked_channels: set[str] | None = None, blocked_topics: set[str] | None = None):
        self.blocked_channels = blocked_channels or set()
        self.blocked_topics = {t.lower() for t in (blocked_topics or set()) if t.strip()}

    def is_blocked(self, item: CandidateItem) -> bool:
        if item.channel_id in self.blocked_channels:
            return True
        if not self.blocked_topics:
            return False
        title = item.title.lower()
        channel_name = item.channel_name.lower()
        return any(topic in title or topic in channel_name for topic in self.blocked_topics)

    def filter_candidates(self, candidates: list[CandidateItem]) -> list[CandidateItem]:
        return [item for item in candidates if not self.is_blocked(item)]
