from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from feedbrain.api.dependencies import get_engine
from feedbrain.services.engine import FeedEngine

router = APIRouter(tags=["preferences"])


class TopicRequest(BaseModel):
    topic: str = Field(description="Topic or keyword")


class ChannelRequest(BaseModel):
    channel_id: str = Field(description="Channel identifier")


class TopicsPayload(BaseModel):
    topics: list[str] = Field(default_factory=list)


def _sorted(values: set[str]) -> TopicsPayload:
    return TopicsPayload(topics=sorted(values))


# Blocked topics


@router.get("/blocked/topics", response_model=TopicsPayload)
async def list_blocked_topics(engine: FeedEngine = Depends(get_engine)) -> TopicsPayload:
    return _sorted(await engine.get_blocked_topics())


@router.post("/blocked/topics", response_model=TopicsPayload)
async def block_topic(payload: TopicRequest, engine: FeedEngine = Depends(get_engine)) -> TopicsPayload:
    if not payload.topic.strip():
        raise HTTPException(status_code=400, detail="Topic must not be empty")
    await engine.add_blocked_topic(payload.topic)
    return _sorted(await engine.get_blocked_topics())


@router.delete("/blocked/topics/{topic}", response_model=TopicsPayload)
async def unblock_topic(topic: str, engine: FeedEngine = Depends(get_engine)) -> TopicsPayload:
    await engine.remove_blocked_topic(topic)
    return _sorted(await engine.get_blocked_topics())


# Blocked channels


class ChannelsPayload(BaseModel):
    channels: list[str] = Field(default_factory=list)


@router.get("/blocked/channels", response_model=ChannelsPayload)
async def list_blocked_channels(engine: FeedEngine = Depends(get_engine)) -> ChannelsPayload:
    return ChannelsPayload(channels=sorted(await engine.get_blocked_channels()))


@router.post("/blocked/channels", response_model=ChannelsPayload)
async def block_channel(payload: ChannelRequest, engine: FeedEngine = Depends(get_engine)) -> ChannelsPayload:
    if not payload.channel_id.strip():
        raise HTTPException(status_code=400, detail="Channel ID must not be empty")
    await engine.add_blocked_channel(payload.channel_id)
    return ChannelsPayload(channels=sorted(await engine.get_blocked_channels()))


@router.delete("/blocked/channels/{channel_id}", response_model=ChannelsPayload)
async def unblock_channel(channel_id: str, engine: FeedEngine = Depends(get_engine)) -> ChannelsPayload:
    await engine.remove_blocked_channel(channel_id)
    return ChannelsPayload(channels=sorted(await engine.get_blocked_channels()))


# Preferred topics & onboarding


@router.get("/preferences/topics", response_model=TopicsPayload)
async def list_preferred_topics(engine: FeedEngine = Depends(get_engine)) -> TopicsPayload:
    return _sorted(await engine.get_preferred_topics())


@router.put("/preferences/topics", response_model=TopicsPayload)
async def replace_preferred_topics(payload: TopicsPayload, engine: FeedEngine = Depends(get_engine)) -> TopicsPayload:
    await engine.set_preferred_topics(set(payload.topics))
    return _sorted(await engine.get_preferred_topics())


class OnboardingResponse(BaseModel):
    completed: bool
    topics: list[str]


@router.post("/onboarding", response_model=OnboardingResponse)
async def complete_onboarding(payload: TopicsPayload, engine: FeedEngine = Depends(get_engine)) -> OnboardingResponse:
    await engine.complete_onboarding(set(payload.topics))
    return OnboardingResponse(
        completed=await engine.has_completed_onboarding(),
        topics=sorted(await engine.get_preferred_topics()),
    )
