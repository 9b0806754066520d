from fastapi import APIRouter

from .endpoints.discovery import router as discovery_router
from .endpoints.health import router as health_router
from .endpoints.preferences import router as preferences_router
from .endpoints.profile import router as profile_router
from .endpoints.ranking import router as ranking_router

api_router = APIRouter()


@api_router.get("/")
async def root():
    return {"message": "FeedBrain API is running"}


api_router.include_router(health_router)
api_router.include_router(ranking_router)
api_router.include_router(profile_router)
api_router.include_router(discovery_router)
api_router.include_router(preferences_router)
