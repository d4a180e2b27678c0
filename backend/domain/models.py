"""Domain models for room occupancy and allocation outcomes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from backend.domain.constraints import ROOM_CAPACITY


@dataclass(frozen=True)
class Room:
    adults: int
    seniors: int
    children: int

    @property
    def total(self) -> int:
        return self.adults + self.seniors + self.children

    def as_dict(self) -> dict[str, int]:
        return {
            "adults": self.adults,
            "seniors": self.seniors,
            "children": self.children,
        }


@dataclass
class RoomContainer:
    """Mutable occupant counter for one room, saturating at ``capacity``."""

    capacity: int = ROOM_CAPACITY
    adults: int = 0
    seniors: int = 0
    children: int = 0

    @property
    def total(self) -> int:
        return self.adults + self.seniors + self.children

    @property
    def remaining_capacity(self) -> int:
        return self.capacity - self.total

    @property
    def has_anchor(self) -> bool:
        return self.adults + self.seniors > 0

    def _admit(self, count: int) -> int:
        return max(0, min(count, self.remaining_capacity))

    def add_adults(self, count: int) -> int:
        placed = self._admit(count)
        self.adults += placed
        return placed

    def add_seniors(self, count: int) -> int:
        placed = self._admit(count)
        self.seniors += placed
        return placed

    def add_children(self, count: int) -> int:
        placed = self._admit(count)
        self.children += placed
        return placed

    def to_room(self) -> Room:
        return Room(adults=self.adults, seniors=self.seniors, children=self.children)


@dataclass(frozen=True)
class PopulationTotals:
    room_count: int
    adults: int
    seniors: int
    children: int

    @property
    def total_people(self) -> int:
        return self.adults + self.seniors + self.children

    @property
    def anchors(self) -> int:
        return self.adults + self.seniors


class AllocationStatus(str, Enum):
    ALLOCATED = "allocated"
    INFEASIBLE = "infeasible"
    HEURISTIC_DEAD_END = "heuristic_dead_end"


@dataclass(frozen=True)
class AllocationOutcome:
    rooms: list[Room]
    status: AllocationStatus
    senior_only_rooms: int = 0

    @property
    def feasible(self) -> bool:
        return self.status is AllocationStatus.ALLOCATED
