"""Greedy room distribution for adults, seniors and children.

Rules enforced on every returned assignment:

* each room holds between one person and ``capacity`` people,
* a room with children also holds at least one adult or senior,
* seniors are grouped into senior-only rooms where that leaves the
  remaining rooms anchorable,
* rooms are returned sorted by adults, then seniors, then children,
  all descending.

An empty list is the only infeasibility signal returned by ``distribute``.
"""

from __future__ import annotations

from typing import Callable, Iterable, Optional

from backend.domain.constraints import (
    ROOM_CAPACITY,
    AllocatorConfig,
    validate_allocator_config,
    validate_population,
)
from backend.domain.models import (
    AllocationOutcome,
    AllocationStatus,
    PopulationTotals,
    Room,
    RoomContainer,
)
from backend.utils.config import Settings, get_settings
from backend.utils.logger import get_logger


logger = get_logger(__name__)

RoomPredicate = Callable[[RoomContainer], bool]
RoomAdder = Callable[[RoomContainer], int]


class AllocationValidationError(Exception):
    """Raised when distribution inputs or configuration are invalid."""


def _ceil_div(numerator: int, denominator: int) -> int:
    return -(-numerator // denominator)


def is_feasible(
    room_count: int,
    adults: int,
    seniors: int,
    children: int,
    capacity: int = ROOM_CAPACITY,
) -> bool:
    total_people = adults + seniors + children
    if room_count <= 0:
        return False
    if total_people < room_count:
        return False
    if total_people > room_count * capacity:
        return False
    if children > 0 and adults + seniors == 0:
        return False
    return True


def has_valid_assignment(
    room_count: int,
    adults: int,
    seniors: int,
    children: int,
    capacity: int = ROOM_CAPACITY,
) -> bool:
    """Return whether any assignment satisfies the hard rules.

    Every non-empty room must contain an adult or a senior (a room holding
    only children is not allowed), so ``room_count`` anchors are required.
    Senior grouping is a preference and plays no part here.
    """
    if room_count <= 0:
        return False
    if adults + seniors < room_count:
        return False
    return adults + seniors + children <= room_count * capacity


def pick_senior_only_room_count(
    room_count: int,
    adults: int,
    seniors: int,
    children: int,
    capacity: int = ROOM_CAPACITY,
) -> int:
    """Return how many rooms can be reserved for seniors alone.

    Leaves enough rooms for every non-senior, never reserves more rooms than
    the seniors can fill, and shrinks the reservation until each remaining
    room can still receive an adult or a leftover senior as its anchor.
    """
    rooms_needed_for_non_seniors = _ceil_div(adults + children, capacity)
    spare_rooms = max(0, room_count - rooms_needed_for_non_seniors)
    senior_only = min(spare_rooms, _ceil_div(seniors, capacity))

    while senior_only > 0:
        seniors_left = seniors - min(seniors, senior_only * capacity)
        if adults + seniors_left >= room_count - senior_only:
            break
        senior_only -= 1

    logger.debug(
        "Senior-only quota picked | rooms=%s | spare_rooms=%s | senior_only=%s",
        room_count,
        spare_rooms,
        senior_only,
    )
    return senior_only


def _sweep_until_stuck(
    remaining: int,
    room_groups: Iterable[list[RoomContainer]],
    accepts: RoomPredicate,
    add_one: RoomAdder,
) -> int:
    """Place one person per eligible room per sweep until a sweep places nobody."""
    groups = list(room_groups)
    while remaining > 0:
        placed_any = False
        for rooms in groups:
            for room in rooms:
                if remaining <= 0:
                    break
                if room.remaining_capacity > 0 and accepts(room):
                    remaining -= add_one(room)
                    placed_any = True
        if not placed_any:
            break
    return remaining


def _any_room(room: RoomContainer) -> bool:
    return True


def _has_seniors(room: RoomContainer) -> bool:
    return room.seniors > 0


def _has_adults(room: RoomContainer) -> bool:
    return room.adults > 0


def _add_adult(room: RoomContainer) -> int:
    return room.add_adults(1)


def _add_senior(room: RoomContainer) -> int:
    return room.add_seniors(1)


def _add_child(room: RoomContainer) -> int:
    return room.add_children(1)


def fill_senior_only_rooms(seniors: int, senior_only_rooms: list[RoomContainer]) -> int:
    for room in senior_only_rooms:
        if seniors <= 0:
            break
        seniors -= room.add_seniors(min(room.capacity, seniors))
    return seniors


def anchor_mixed_rooms(
    adults: int,
    seniors: int,
    mixed_rooms: list[RoomContainer],
) -> Optional[tuple[int, int]]:
    """Seat one adult (or a senior when adults run out) in every mixed room.

    Returns the remaining ``(adults, seniors)`` or ``None`` when a room
    cannot be anchored.
    """
    for room in mixed_rooms:
        if adults > 0:
            adults -= room.add_adults(1)
        elif seniors > 0:
            seniors -= room.add_seniors(1)
        else:
            return None
    return adults, seniors


def place_remaining_seniors(
    seniors: int,
    senior_only_rooms: list[RoomContainer],
    mixed_rooms: list[RoomContainer],
) -> int:
    groups = (senior_only_rooms, mixed_rooms)
    seniors = _sweep_until_stuck(seniors, groups, _has_seniors, _add_senior)
    return _sweep_until_stuck(seniors, groups, _any_room, _add_senior)


def place_remaining_adults(
    adults: int,
    mixed_rooms: list[RoomContainer],
    senior_only_rooms: list[RoomContainer],
) -> int:
    adults = _sweep_until_stuck(adults, (mixed_rooms,), _any_room, _add_adult)
    return _sweep_until_stuck(adults, (senior_only_rooms,), _any_room, _add_adult)


def place_remaining_children(
    children: int,
    mixed_rooms: list[RoomContainer],
    senior_only_rooms: list[RoomContainer],
) -> int:
    children = _sweep_until_stuck(
        children,
        (mixed_rooms, senior_only_rooms),
        _has_adults,
        _add_child,
    )
    if children > 0:
        children = _sweep_until_stuck(
            children,
            (senior_only_rooms, mixed_rooms),
            _has_seniors,
            _add_child,
        )
    return children


def _rooms_are_valid(rooms: list[RoomContainer]) -> bool:
    if any(room.total <= 0 for room in rooms):
        return False
    return not any(room.children > 0 and not room.has_anchor for room in rooms)


def sort_rooms(rooms: Iterable[Room]) -> list[Room]:
    return sorted(
        rooms,
        key=lambda room: (room.adults, room.seniors, room.children),
        reverse=True,
    )


def distribute(
    room_count: int,
    adults: int,
    seniors: int,
    children: int,
    capacity: int = ROOM_CAPACITY,
) -> list[Room]:
    """Assign people to ``room_count`` rooms, or return ``[]`` when impossible."""
    if not is_feasible(room_count, adults, seniors, children, capacity):
        logger.debug(
            "Distribution rejected by feasibility checks | rooms=%s | adults=%s | "
            "seniors=%s | children=%s | capacity=%s",
            room_count,
            adults,
            seniors,
            children,
            capacity,
        )
        return []

    senior_only_count = pick_senior_only_room_count(
        room_count, adults, seniors, children, capacity
    )
    senior_only_rooms = [RoomContainer(capacity=capacity) for _ in range(senior_only_count)]
    mixed_rooms = [
        RoomContainer(capacity=capacity) for _ in range(room_count - senior_only_count)
    ]

    remaining_seniors = fill_senior_only_rooms(seniors, senior_only_rooms)
    anchored = anchor_mixed_rooms(adults, remaining_seniors, mixed_rooms)
    if anchored is None:
        logger.debug("Distribution dead-ended while anchoring mixed rooms")
        return []
    remaining_adults, remaining_seniors = anchored

    remaining_seniors = place_remaining_seniors(
        remaining_seniors, senior_only_rooms, mixed_rooms
    )
    remaining_adults = place_remaining_adults(
        remaining_adults, mixed_rooms, senior_only_rooms
    )
    remaining_children = place_remaining_children(
        children, mixed_rooms, senior_only_rooms
    )

    if remaining_adults > 0 or remaining_seniors > 0 or remaining_children > 0:
        logger.debug(
            "Distribution left people unplaced | adults=%s | seniors=%s | children=%s",
            remaining_adults,
            remaining_seniors,
            remaining_children,
        )
        return []

    all_rooms = mixed_rooms + senior_only_rooms
    if not _rooms_are_valid(all_rooms):
        logger.debug("Distribution failed final room validation")
        return []

    return sort_rooms(room.to_room() for room in all_rooms)


class RoomAllocationService:
    """Validated entry point that classifies empty distributions."""

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self._settings = settings or get_settings()
        self._config = AllocatorConfig(room_capacity=self._settings.room_capacity)
        try:
            validate_allocator_config(self._config)
        except ValueError as exc:
            raise AllocationValidationError(str(exc)) from exc

    @property
    def room_capacity(self) -> int:
        return self._config.room_capacity

    def distribute(
        self,
        *,
        room_count: int,
        adults: int,
        seniors: int,
        children: int,
    ) -> AllocationOutcome:
        totals = PopulationTotals(
            room_count=room_count,
            adults=adults,
            seniors=seniors,
            children=children,
        )
        try:
            validate_population(totals)
        except ValueError as exc:
            raise AllocationValidationError(str(exc)) from exc

        capacity = self._config.room_capacity
        rooms = distribute(room_count, adults, seniors, children, capacity)
        if rooms:
            senior_only = sum(1 for room in rooms if room.seniors == room.total)
            logger.info(
                "Distribution completed | rooms=%s | people=%s | senior_only_rooms=%s",
                len(rooms),
                totals.total_people,
                senior_only,
            )
            return AllocationOutcome(
                rooms=rooms,
                status=AllocationStatus.ALLOCATED,
                senior_only_rooms=senior_only,
            )

        if has_valid_assignment(room_count, adults, seniors, children, capacity):
            logger.error(
                "Greedy distribution found no assignment although one exists | "
                "rooms=%s | adults=%s | seniors=%s | children=%s",
                room_count,
                adults,
                seniors,
                children,
            )
            status = AllocationStatus.HEURISTIC_DEAD_END
        else:
            logger.warning(
                "Distribution impossible | rooms=%s | adults=%s | seniors=%s | "
                "children=%s | capacity=%s",
                room_count,
                adults,
                seniors,
                children,
                capacity,
            )
            status = AllocationStatus.INFEASIBLE
        return AllocationOutcome(rooms=[], status=status)
