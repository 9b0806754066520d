from fastapi import APIRouter, Depends

from feedbrain.api.dependencies import get_engine
from feedbrain.core.config import APP_VERSION
from feedbrain.services.engine import FeedEngine

router = APIRouter(tags=["health"])


@router.get("/health", summary="Simple readiness probe")
async def health_check() -> dict[str, str]:
    return {"status": "ok", "version": APP_VERSION}


@router.get("/stats", summary="Lightweight profile stats")
async def stats(engine: FeedEngine = Depends(get_engine)) -> dict:
    brain = await engine.snapshot()
    return {
        "total_interactions": brain.total_interactions,
        "consecutive_skips": brain.consecutive_skips,
        "tracked_channels": len(brain.channel_scores),
        "global_topics": len(brain.global_vector.topics),
    }
