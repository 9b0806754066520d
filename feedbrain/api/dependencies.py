from fastapi import Request

from feedbrain.services.engine import FeedEngine


def get_engine(request: Request) -> FeedEngine:
    return request.app.state.engine
