#!/usr/bin/env python3
"""Validate local room distribution environment readiness."""

from __future__ import annotations

import importlib
import sys
from dataclasses import replace
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from backend.domain.models import Room
from backend.services.allocation_service import RoomAllocationService
from backend.utils.config import get_settings

SEPARATOR_LINE = "=" * 44


def _print_result(name: str, success: bool, detail: str = "") -> tuple[bool, str]:
    if success:
        return True, f"[PASS] {name}{detail}"
    return False, f"[FAIL] {name}: {detail}"


def main() -> int:
    results: list[str] = []
    all_passed = True

    # CHECK 1 — Python version >= 3.10
    if sys.version_info >= (3, 10):
        ok, line = _print_result("Python " + sys.version.split()[0], True)
    else:
        ok, line = _print_result(
            "Python version >= 3.10",
            False,
            f"found {sys.version.split()[0]}",
        )
    results.append(line)
    all_passed = all_passed and ok

    # CHECK 2 — Required packages importable
    package_specs = [
        "fastapi",
        "uvicorn",
        "pydantic",
        "pandas",
        "requests",
        "streamlit",
        "httpx",
        "pytest",
    ]
    import_errors: list[str] = []
    for module_name in package_specs:
        try:
            importlib.import_module(module_name)
        except Exception as exc:  # pragma: no cover - runtime guard
            import_errors.append(f"{module_name} ({exc})")
    if import_errors:
        ok, line = _print_result(
            "Required packages",
            False,
            "missing/unimportable -> " + "; ".join(import_errors),
        )
    else:
        ok, line = _print_result("Required packages: all importable", True)
    results.append(line)
    all_passed = all_passed and ok

    # CHECK 3 — Settings load
    try:
        settings = get_settings()
        ok, line = _print_result(
            "Settings",
            True,
            f": room_capacity={settings.room_capacity}",
        )
    except Exception as exc:
        settings = None
        ok, line = _print_result("Settings", False, str(exc))
    results.append(line)
    all_passed = all_passed and ok

    # CHECK 4 — Sample distribution at the default capacity
    if settings is not None:
        try:
            service = RoomAllocationService(settings=replace(settings, room_capacity=4))
            outcome = service.distribute(room_count=2, adults=2, seniors=2, children=1)
            expected = [Room(adults=2, seniors=0, children=1), Room(adults=0, seniors=2, children=0)]
            if outcome.rooms != expected:
                raise RuntimeError(f"unexpected sample result {outcome.rooms}")
            ok, line = _print_result("Sample distribution", True)
        except Exception as exc:
            ok, line = _print_result("Sample distribution", False, str(exc))
        results.append(line)
        all_passed = all_passed and ok

    print(SEPARATOR_LINE)
    print(" Room Distribution Environment Validation")
    print(SEPARATOR_LINE)
    for line in results:
        print(f" {line}")
    print(SEPARATOR_LINE)
    if all_passed:
        print(" All checks passed. Environment is ready.")
        print(SEPARATOR_LINE)
        return 0
    print(" One or more checks failed.")
    print(SEPARATOR_LINE)
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
