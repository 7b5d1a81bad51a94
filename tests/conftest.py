"""
Shared fixtures for the roster lookup tests
"""

import json
from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def read_fixture(name):
    """Load a JSON fixture by file name"""
    with open(FIXTURES_DIR / name, "r") as f:
        return json.load(f)


@pytest.fixture
def boxscore_payload():
    return read_fixture("boxscore.json")


@pytest.fixture
def live_schedule():
    return read_fixture("schedule_live.json")


@pytest.fixture
def preview_schedule():
    return read_fixture("schedule_preview.json")
