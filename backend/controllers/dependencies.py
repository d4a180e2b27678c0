"""Shared FastAPI dependency providers for controller layer."""

from __future__ import annotations

from fastapi import HTTPException, Request, status

from backend.services.allocation_service import (
    AllocationValidationError,
    RoomAllocationService,
)
from backend.utils.config import get_settings


def get_allocation_service(request: Request) -> RoomAllocationService:
    service = getattr(request.app.state, "allocation_service", None)
    if service is None:
        try:
            service = RoomAllocationService(settings=get_settings())
        except AllocationValidationError as exc:
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail=f"Allocation service is not initialized: {exc}",
            ) from exc
        request.app.state.allocation_service = service
    return service
