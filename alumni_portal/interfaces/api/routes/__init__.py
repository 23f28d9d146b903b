from fastapi import FastAPI

from .communications import router as communications_router
from .local_overrides import router as local_overrides_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(communications_router)
    app.include_router(local_overrides_router)
