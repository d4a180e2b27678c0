"""HTTP controller layer for room distribution."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from backend.controllers.dependencies import get_allocation_service
from backend.services.allocation_service import (
    AllocationValidationError,
    RoomAllocationService,
)
from backend.utils.logger import get_logger


logger = get_logger(__name__)

router = APIRouter(tags=["allocation"])


class DistributeRequest(BaseModel):
    """Input DTO validated before entering service layer.

    ``room_count`` is unbounded: a non-positive count is a
    domain infeasibility answered with an empty room list, not a 422.
    """

    room_count: int
    adults: int = Field(ge=0)
    seniors: int = Field(ge=0)
    children: int = Field(ge=0)


class RoomResponse(BaseModel):
    adults: int = Field(ge=0)
    seniors: int = Field(ge=0)
    children: int = Field(ge=0)


class DistributeResponse(BaseModel):
    rooms: list[RoomResponse]
    status: str
    feasible: bool
    senior_only_rooms: int = Field(ge=0)
    room_capacity: int = Field(gt=0)


class HealthResponse(BaseModel):
    status: str
    room_capacity: int = Field(gt=0)


@router.get("/health", response_model=HealthResponse)
def health(
    service: RoomAllocationService = Depends(get_allocation_service),
) -> HealthResponse:
    return HealthResponse(status="ok", room_capacity=service.room_capacity)


@router.post("/distribute", response_model=DistributeResponse)
def distribute_rooms(
    payload: DistributeRequest,
    service: RoomAllocationService = Depends(get_allocation_service),
) -> DistributeResponse:
    try:
        outcome = service.distribute(
            room_count=payload.room_count,
            adults=payload.adults,
            seniors=payload.seniors,
            children=payload.children,
        )
    except AllocationValidationError as exc:
        logger.warning("Distribution request rejected | reason=%s", exc)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        ) from exc

    return DistributeResponse(
        rooms=[RoomResponse(**room.as_dict()) for room in outcome.rooms],
        status=outcome.status.value,
        feasible=outcome.feasible,
        senior_only_rooms=outcome.senior_only_rooms,
        room_capacity=service.room_capacity,
    )
