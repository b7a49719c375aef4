"""
Shared pytest fixtures for competition scheduler tests.

Running tests:
    pytest tests/                  - full suite
    pytest tests/ -m "not slow"   - skip the exhaustive team-count sweeps
"""
import pytest
import sys
import os
from datetime import datetime

# Add src directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from competition.config import CompetitionConfig
from competition.models import Group, Team


@pytest.fixture
def start():
    """Kick-off date used across generator tests."""
    return datetime(2026, 5, 1, 18, 30)


@pytest.fixture
def make_team_ids():
    """Factory for seeded team ID lists: T1 is seed 1."""
    def _make(count):
        return [f"T{i}" for i in range(1, count + 1)]
    return _make


@pytest.fixture
def sample_groups():
    """Two groups of four teams."""
    return [
        Group(id="Group A", team_ids=["A1", "A2", "A3", "A4"]),
        Group(id="Group B", team_ids=["B1", "B2", "B3", "B4"]),
    ]


@pytest.fixture
def sample_teams():
    """A small set of teams with display details."""
    return [
        Team(id="eagles", name="Eagles", short_name="EAG", color="#ffcc00"),
        Team(id="hawks", name="Hawks"),
        Team(id="falcons", name="Falcons"),
        Team(id="owls", name="Owls", short_name="OWL"),
    ]


@pytest.fixture
def league_config():
    """League configuration with two venues."""
    return CompetitionConfig.from_dict({
        "name": "Test League",
        "kind": "LEAGUE",
        "match_duration_minutes": 60,
        "break_duration_minutes": 15,
        "matches_per_day": 4,
        "venues": ["Court 1", "Court 2"],
        "daily_start_time": "09:00",
    })


@pytest.fixture
def group_config():
    """Tournament with a group stage."""
    return CompetitionConfig.from_dict({
        "kind": "TOURNAMENT",
        "has_groups": True,
        "group_count": 2,
        "teams_per_group": 4,
        "advance_per_group": 2,
        "matches_per_day": 10,
    })


@pytest.fixture
def write_yaml(tmp_path):
    """Write text to a YAML file under tmp_path and return its path."""
    def _write(name, text):
        path = tmp_path / name
        path.write_text(text, encoding='utf-8')
        return str(path)
    return _write
