from __future__ import annotations

import pytest

from backend.domain.models import Room, RoomContainer


def test_new_container_is_empty_with_full_capacity() -> None:
    room = RoomContainer()
    assert room.total == 0
    assert room.remaining_capacity == 4
    assert not room.has_anchor


def test_adds_saturate_at_capacity() -> None:
    room = RoomContainer()
    assert room.add_adults(3) == 3
    assert room.add_seniors(5) == 1
    assert room.add_children(2) == 0
    assert (room.adults, room.seniors, room.children) == (3, 1, 0)
    assert room.total == 4
    assert room.remaining_capacity == 0


@pytest.mark.parametrize("requested", [0, -2])
def test_non_positive_requests_add_nothing(requested: int) -> None:
    room = RoomContainer()
    assert room.add_children(requested) == 0
    assert room.total == 0


def test_custom_capacity_is_respected() -> None:
    room = RoomContainer(capacity=2)
    assert room.add_children(4) == 2
    assert room.remaining_capacity == 0


def test_anchor_requires_adult_or_senior() -> None:
    room = RoomContainer()
    room.add_children(1)
    assert not room.has_anchor
    room.add_seniors(1)
    assert room.has_anchor


def test_to_room_snapshot_is_detached() -> None:
    container = RoomContainer()
    container.add_adults(1)
    container.add_children(2)
    snapshot = container.to_room()
    container.add_seniors(1)

    assert snapshot == Room(adults=1, seniors=0, children=2)
    assert snapshot.total == 3
    assert snapshot.as_dict() == {"adults": 1, "seniors": 0, "children": 2}
    with pytest.raises(AttributeError):
        snapshot.adults = 5  # type: ignore[misc]
