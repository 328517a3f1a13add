import os

import pytest
from pydantic import ValidationError

from franchise_sim.config import DEFAULT_SETTINGS, Settings, load_settings

EXAMPLE = os.path.join(os.path.dirname(__file__), "..", "config", "settings.example.yaml")


def test_defaults_without_path():
    s = load_settings()
    assert s == Settings()
    assert s.rules.max_innings == 15
    assert s.season.games_by_tier["MLB"] == 162
    assert abs(s.league.hits_per_pa - 0.22625) < 1e-12


def test_example_file_matches_defaults():
    assert load_settings(EXAMPLE) == DEFAULT_SETTINGS


def test_partial_override(tmp_path):
    p = tmp_path / "settings.yaml"
    p.write_text("rules:\n  max_innings: 12\nleague:\n  runs_per_game: 5.0\n")
    s = load_settings(str(p))
    assert s.rules.max_innings == 12 and s.rules.regulation_innings == 9
    assert s.league.runs_per_game == 5.0 and s.league.batting_avg == 0.250


def test_bad_values_and_missing_file():
    with pytest.raises(FileNotFoundError):
        load_settings("/nonexistent/settings.yaml")
    with pytest.raises(ValidationError):
        Settings(rules={"max_innings": "many"})
