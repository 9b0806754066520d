from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from feedbrain.api.dependencies import get_engine
from feedbrain.models.content import CandidateItem, InteractionKind
from feedbrain.services.engine import FeedEngine

router = APIRouter(tags=["ranking"])


class RankRequest(BaseModel):
    candidates: list[CandidateItem] = Field(default_factory=list)
    subscribed_channel_ids: list[str] = Field(default_factory=list, description="Channels the user subscribes to")
    recent_topics: list[str] = Field(default_factory=list, description="Primary topics of recently watched items")


class RankResponse(BaseModel):
    items: list[CandidateItem]


class InteractionRequest(BaseModel):
    item: CandidateItem
    kind: InteractionKind
    percent_watched: float = Field(default=0.0, ge=0.0, le=1.0)


class NotInterestedRequest(BaseModel):
    item: CandidateItem


@router.post("/rank", response_model=RankResponse)
async def rank(payload: RankRequest, engine: FeedEngine = Depends(get_engine)) -> RankResponse:
    items = await engine.rank(
        payload.candidates,
        subscribed_ids=set(payload.subscribed_channel_ids),
        recent_topics=payload.recent_topics,
    )
    return RankResponse(items=items)


@router.post("/interactions", status_code=204)
async def record_interaction(payload: InteractionRequest, engine: FeedEngine = Depends(get_engine)) -> None:
    await engine.on_interaction(payload.item, payload.kind, payload.percent_watched)


@router.post("/not-interested", status_code=204)
async def not_interested(payload: NotInterestedRequest, engine: FeedEngine = Depends(get_engine)) -> None:
    await engine.mark_not_interested(payload.item)
