#!/usr/bin/env python3
"""Print a room distribution for the given population.

    python scripts/run_sample.py              # sample: 2 rooms, 2 adults, 2 seniors, 1 child
    python scripts/run_sample.py 3 4 4 4
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from backend.services.allocation_service import (
    AllocationValidationError,
    RoomAllocationService,
)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("rooms", type=int, nargs="?", default=2)
    parser.add_argument("adults", type=int, nargs="?", default=2)
    parser.add_argument("seniors", type=int, nargs="?", default=2)
    parser.add_argument("children", type=int, nargs="?", default=1)
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    service = RoomAllocationService()
    try:
        outcome = service.distribute(
            room_count=args.rooms,
            adults=args.adults,
            seniors=args.seniors,
            children=args.children,
        )
    except AllocationValidationError as exc:
        print(f"invalid input: {exc}", file=sys.stderr)
        return 2

    if not outcome.rooms:
        print("impossible")
        return 1
    for index, room in enumerate(outcome.rooms, start=1):
        print(
            f"room {index}: adults={room.adults} seniors={room.seniors} "
            f"children={room.children}"
        )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
