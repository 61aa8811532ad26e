import json

import pytest
from rich.console import Console

import main
from league_standings.config.settings import AppSettings


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    fixtures = {
        "week1": [
            {"home": "1XI - Lazio FC", "away": "1XI - Smoke AI"},
            {"bye": "Unknown Team X"},
        ],
        "week2": [{"home": "1XI - Smoke AI", "away": "1XI - Lazio FC"}],
    }
    (tmp_path / "fixtures.json").write_text(json.dumps(fixtures), encoding="utf-8")
    monkeypatch.setattr(main, "settings", AppSettings(_env_file=None, data_dir=tmp_path, current_week=None, registry_file=None))
    return tmp_path


@pytest.fixture
def console():
    return Console(record=True, width=120)


def write_entry(data_dir, name, points):
    path = data_dir / name
    path.write_text(json.dumps(points), encoding="utf-8")
    return str(path)


def test_report_with_no_points(data_dir, console):
    assert main.main([], console=console) == 0
    assert console.export_text() == ""


def test_save_stores_points_and_prints_standings(data_dir, console):
    entry = write_entry(data_dir, "w1.json", {"Lazio FC 1XI": 9, "Smoke AI 1XI": 4})
    assert main.main(["--week", "1", "--save", entry], console=console) == 0

    stored = json.loads((data_dir / "week_points.json").read_text(encoding="utf-8"))
    assert stored == {"1": {"Lazio FC 1XI": 9, "Smoke AI 1XI": 4}}
    text = console.export_text()
    assert "Overall Standings - Week 1" in text
    assert "Unknown Team X" in text
    assert text.index("Lazio FC 1XI") < text.index("Smoke AI 1XI")


def test_preview_does_not_save(data_dir, console):
    entry = write_entry(data_dir, "w1.json", {"Lazio FC 1XI": 9})
    assert main.main(["--week", "1", "--preview", entry], console=console) == 0

    text = console.export_text()
    assert "Preview - Week 1" in text
    assert "1XI - Lazio FC vs 1XI - Smoke AI: 9-0" in text
    assert not (data_dir / "week_points.json").exists()


def test_clear_removes_week(data_dir, console):
    main.main(["--week", "1", "--save", write_entry(data_dir, "w1.json", {"Lazio FC 1XI": 9})], console=console)
    main.main(["--week", "2", "--save", write_entry(data_dir, "w2.json", {"Lazio FC 1XI": 1})], console=console)

    assert main.main(["--week", "2", "--clear"], console=console) == 0
    stored = json.loads((data_dir / "week_points.json").read_text(encoding="utf-8"))
    assert list(stored) == ["1"]


def test_report_from_saved_results(data_dir, console):
    main.main(["--week", "1", "--save", write_entry(data_dir, "w1.json", {"Smoke AI 1XI": 6})], console=Console(record=True))
    assert main.main(["--week", "1", "--from-results"], console=console) == 0
    text = console.export_text()
    assert "Overall Standings - Week 1" in text
    assert text.index("Smoke AI 1XI") < text.index("Lazio FC 1XI")


def test_entry_actions_need_a_week(data_dir, console):
    entry = write_entry(data_dir, "w1.json", {"Lazio FC 1XI": 9})
    assert main.main(["--save", entry], console=console) == 2
    assert not (data_dir / "week_points.json").exists()


def test_save_fails_on_corrupt_results(data_dir, console):
    (data_dir / "results.json").write_text("{broken", encoding="utf-8")
    entry = write_entry(data_dir, "w1.json", {"Lazio FC 1XI": 9})
    assert main.main(["--week", "1", "--save", entry], console=console) == 1
    assert not (data_dir / "week_points.json").exists()


def test_bad_points_entry_file(data_dir, console):
    entry = write_entry(data_dir, "w1.json", [1, 2])
    assert main.main(["--week", "1", "--preview", entry], console=console) == 1


def test_data_dir_argument(data_dir, tmp_path_factory, console):
    other = tmp_path_factory.mktemp("other")
    (other / "fixtures.json").write_text(
        json.dumps({"week1": [{"bye": "1XI - Lazio FC"}]}), encoding="utf-8"
    )
    entry = write_entry(other, "w1.json", {"Lazio FC 1XI": 3})
    assert main.main(["--data-dir", str(other), "--week", "1", "--save", entry], console=console) == 0
    assert (other / "week_points.json").exists()
    assert not (data_dir / "week_points.json").exists()
