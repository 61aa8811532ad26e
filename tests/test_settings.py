import pytest

from league_standings.config.settings import AppSettings, load_settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    app_settings = AppSettings(_env_file=None)
    assert app_settings.expected_team_count == 26
    assert app_settings.current_week is None
    assert app_settings.fixtures_path.name == "fixtures.json"


def test_env_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("DATA_DIR", str(tmp_path))
    monkeypatch.setenv("CURRENT_WEEK", "4")
    app_settings = AppSettings(_env_file=None)
    assert app_settings.points_path == tmp_path / "week_points.json"
    assert app_settings.current_week == 4


def test_invalid_log_level_falls_back_to_info(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    assert load_settings().log_level == "INFO"


def test_log_level_uppercased(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    assert load_settings().log_level == "DEBUG"


def test_invalid_team_count_stops_startup(monkeypatch):
    monkeypatch.setenv("EXPECTED_TEAM_COUNT", "0")
    with pytest.raises(SystemExit):
        load_settings()
