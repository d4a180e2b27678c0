from __future__ import annotations

import importlib.util
from pathlib import Path

import pytest


SCRIPT_PATH = Path(__file__).resolve().parents[1] / "scripts" / "run_sample.py"


@pytest.fixture(scope="module")
def run_sample():
    module_spec = importlib.util.spec_from_file_location("run_sample", SCRIPT_PATH)
    module = importlib.util.module_from_spec(module_spec)
    module_spec.loader.exec_module(module)
    return module


def test_default_sample(run_sample, capsys):
    assert run_sample.main([]) == 0

    out = capsys.readouterr().out
    lines = [line for line in out.splitlines() if line.startswith("room ")]
    assert lines == [
        "room 1: adults=2 seniors=0 children=1",
        "room 2: adults=0 seniors=2 children=0",
    ]


def test_impossible_input(run_sample, capsys):
    assert run_sample.main(["2", "1", "0", "0"]) == 1
    assert "impossible" in capsys.readouterr().out.splitlines()


def test_invalid_input(run_sample, capsys):
    assert run_sample.main(["2", "-1", "0", "0"]) == 2
    assert "adults" in capsys.readouterr().err
