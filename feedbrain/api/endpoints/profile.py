from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response
from loguru import logger
from pydantic import BaseModel, Field

from feedbrain.api.dependencies import get_engine
from feedbrain.models.brain import UserBrain
from feedbrain.services.engine import FeedEngine

router = APIRouter(tags=["profile"])


class PersonaResponse(BaseModel):
    id: str
    title: str
    description: str
    icon: str


class ImportRequest(BaseModel):
    document: str = Field(description="Brain document previously produced by /profile/export")


@router.get("/profile", response_model=UserBrain)
async def get_profile(engine: FeedEngine = Depends(get_engine)) -> UserBrain:
    return await engine.snapshot()


@router.delete("/profile", status_code=204)
async def reset_profile(engine: FeedEngine = Depends(get_engine)) -> None:
    await engine.reset_brain()


@router.get("/profile/export")
async def export_profile(engine: FeedEngine = Depends(get_engine)) -> Response:
    document = await engine.export_brain()
    return Response(content=document, media_type="application/json")


@router.post("/profile/import", status_code=204)
async def import_profile(payload: ImportRequest, engine: FeedEngine = Depends(get_engine)) -> None:
    if not await engine.import_brain(payload.document):
        logger.warning("Rejected unreadable brain import")
        raise HTTPException(status_code=400, detail="Could not read brain document")


@router.get("/persona", response_model=PersonaResponse)
async def get_persona(engine: FeedEngine = Depends(get_engine)) -> PersonaResponse:
    persona = await engine.get_persona()
    info = persona.info
    return PersonaResponse(id=persona.value, title=info.title, description=info.description, icon=info.icon)
