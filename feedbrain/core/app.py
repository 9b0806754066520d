from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from feedbrain.api.main import api_router
from feedbrain.services.brain_store import BrainStore
from feedbrain.services.engine import FeedEngine

from .config import settings
from .version import __version__


def create_app(engine: FeedEngine | None = None) -> FastAPI:
    """
    Build the API application.

    Args:
        engine: Engine to serve. Defaults to one backed by the configured brain file.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Manage application lifespan events (startup/shutdown).
        """
        feed_engine = engine or FeedEngine(BrainStore(settings.brain_path))
        await feed_engine.initialize()
        app.state.engine = feed_engine
        logger.info(f"{settings.APP_NAME} {__version__} ready, brain at {feed_engine.store.path}")
        yield
        logger.info("Shutting down")

    application = FastAPI(
        title=settings.APP_NAME,
        description="On-device style recommendation brain for video feeds",
        version=__version__,
        lifespan=lifespan,
        docs_url=None if settings.APP_ENV != "development" else "/docs",
        redoc_url=None if settings.APP_ENV != "development" else "/redoc",
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(api_router)
    return application


app = create_app()
