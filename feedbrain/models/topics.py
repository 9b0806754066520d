from pydantic import BaseModel, Field


class TopicCategory(BaseModel):
    """A macro category of topics offered during onboarding and used for exploration."""

    name: str
    icon: str
    topics: list[str] = Field(default_factory=list)


TOPIC_CATEGORIES: list[TopicCategory] = [
    TopicCategory(
        name="Gaming",
        icon="🎮",
        topics=["Minecraft", "Speedrun", "Retro Games", "Esports", "Indie Games", "Game Design"],
    ),
    TopicCategory(
        name="Music",
        icon="🎵",
        topics=["Lofi", "Hip Hop", "Jazz", "Classical", "Rock", "Electronic", "Music Theory"],
    ),
    TopicCategory(
        name="Technology",
        icon="💻",
        topics=["Programming", "Python", "Linux", "Smartphones", "Artificial Intelligence", "Cybersecurity"],
    ),
    TopicCategory(
        name="Science",
        icon="🔬",
        topics=["Physics", "Space", "Biology", "Chemistry", "Mathematics", "Climate"],
    ),
    TopicCategory(
        name="Education",
        icon="📚",
        topics=["History", "Languages", "Philosophy", "Economics", "Psychology"],
    ),
    TopicCategory(
        name="Entertainment",
        icon="🎬",
        topics=["Movies", "Comedy", "Animation", "Podcasts", "Anime"],
    ),
    TopicCategory(
        name="Sports",
        icon="⚽",
        topics=["Football", "Basketball", "Formula 1", "Tennis", "Fitness", "Climbing"],
    ),
    TopicCategory(
        name="Lifestyle",
        icon="🌿",
        topics=["Cooking", "Travel", "Fashion", "Gardening", "Minimalism", "Productivity"],
    ),
    TopicCategory(
        name="Creative",
        icon="🎨",
        topics=["Drawing", "Photography", "Woodworking", "Filmmaking", "3D Printing"],
    ),
    TopicCategory(
        name="Automotive",
        icon="🚗",
        topics=["Cars", "Motorcycles", "Car Restoration", "Electric Vehicles"],
    ),
]
