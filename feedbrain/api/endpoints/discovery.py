from fastapi import APIRouter, Depends
from pydantic import BaseModel

from feedbrain.api.dependencies import get_engine
from feedbrain.models.topics import TOPIC_CATEGORIES, TopicCategory
from feedbrain.services.engine import FeedEngine

router = APIRouter(prefix="/discovery", tags=["discovery"])


class QueriesResponse(BaseModel):
    queries: list[str]


@router.get("/queries", response_model=QueriesResponse)
async def discovery_queries(engine: FeedEngine = Depends(get_engine)) -> QueriesResponse:
    return QueriesResponse(queries=await engine.generate_discovery_queries())


@router.get("/categories", response_model=list[TopicCategory])
async def discovery_categories() -> list[TopicCategory]:
    return TOPIC_CATEGORIES
