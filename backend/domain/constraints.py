"""Domain-level validation rules for room distribution."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from backend.domain.models import PopulationTotals


ROOM_CAPACITY = 4


@dataclass(frozen=True)
class AllocatorConfig:
    room_capacity: int = ROOM_CAPACITY


def validate_allocator_config(config: AllocatorConfig) -> None:
    if isinstance(config.room_capacity, bool) or not isinstance(config.room_capacity, int):
        raise ValueError("room_capacity must be an integer")
    if config.room_capacity <= 0:
        raise ValueError("room_capacity must be > 0")


def validate_population(totals: PopulationTotals) -> None:
    for name in ("room_count", "adults", "seniors", "children"):
        value = getattr(totals, name)
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"{name} must be an integer")
    for name in ("adults", "seniors", "children"):
        if getattr(totals, name) < 0:
            raise ValueError(f"{name} must be >= 0")
