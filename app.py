"""
app.py — FastAPI application factory.

This is the ASGI application object imported by uvicorn.
It wires the allocation service and registers the router.

Usage (via launcher):
    python main.py

Usage (direct uvicorn):
    uvicorn app:app --reload
"""

from __future__ import annotations

from typing import Optional

from fastapi import FastAPI

from backend.controllers.allocation_controller import router as allocation_router
from backend.services.allocation_service import RoomAllocationService
from backend.utils.config import Settings, get_settings
from backend.utils.logger import get_logger


logger = get_logger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build and wire the FastAPI application.

    The allocation service is stateless between calls, so one instance is
    shared by every request through app.state.
    """
    settings = settings or get_settings()

    allocation_service = RoomAllocationService(settings=settings)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
    )

    app.include_router(allocation_router)

    app.state.allocation_service = allocation_service

    logger.info(
        "Application created | room_capacity=%s",
        allocation_service.room_capacity,
    )
    return app


# Module-level app object for uvicorn
app = create_app()
