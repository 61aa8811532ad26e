"""
Pytest fixtures shared across the test suite.

Provides:
- The shipped 26-team registry and a resolver over it
- Small hand-built registries for standings scenarios
- A JSON store rooted in a temporary directory
"""

import json

import pytest

from league_standings.normalization.resolver import (
    TeamRegistry,
    TeamResolver,
    load_registry,
)
from league_standings.storage.json_store import JsonLeagueStore


# ============================================================================
# REGISTRY FIXTURES
# ============================================================================

@pytest.fixture(scope="session")
def full_registry():
    """The shipped registry of 26 canonical teams and its alias table."""
    return load_registry(expected_count=26)


@pytest.fixture(scope="session")
def resolver(full_registry):
    return TeamResolver(full_registry)


@pytest.fixture
def lazio_resolver():
    """Both Lazio FC squads and no aliases."""
    return TeamResolver(TeamRegistry(["Lazio FC 1XI", "Lazio FC 2XI"]))


@pytest.fixture
def make_resolver():
    """Factory building a resolver over an ad-hoc registry."""

    def _make(labels, aliases=None):
        return TeamResolver(TeamRegistry(labels, aliases))

    return _make


# ============================================================================
# STORE FIXTURES
# ============================================================================

@pytest.fixture
def fixtures_feed():
    return {
        "week1": [
            {"home": "1XI - Lazio FC", "away": "2XI - Lazio FC"},
            {"bye": "Unknown Team X"},
        ],
        "week2": [
            {"home": "2XI - Lazio FC", "away": "1XI - Lazio FC"},
        ],
        "notes": "ignored",
    }


@pytest.fixture
def store(tmp_path, fixtures_feed):
    fixtures_path = tmp_path / "fixtures.json"
    fixtures_path.write_text(json.dumps(fixtures_feed), encoding="utf-8")
    return JsonLeagueStore(
        fixtures_path=fixtures_path,
        points_path=tmp_path / "week_points.json",
        results_path=tmp_path / "results.json",
    )
