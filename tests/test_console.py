from rich.console import Console

from league_standings.calculation.standings import build_standings
from league_standings.models.match import RawMatchRecord
from league_standings.reporting.console import (
    movement_label,
    preview_panel,
    print_report,
    standings_table,
    unmapped_panel,
)


def _report(lazio_resolver, extra=()):
    results = {
        1: [RawMatchRecord(home="Lazio FC 1XI", away="Lazio FC 2XI", home_score=1, away_score=6), *extra]
    }
    return build_standings(results, 1, lazio_resolver)


def test_movement_label():
    assert "▲2" in movement_label(2)
    assert "▼3" in movement_label(-3)
    assert "▲" not in movement_label(0) and "▼" not in movement_label(0)


def test_standings_table_has_a_row_per_team(lazio_resolver):
    table = standings_table(_report(lazio_resolver))
    assert table.row_count == 2
    assert len(table.columns) == 5


def test_unmapped_panel_only_when_needed(lazio_resolver):
    assert unmapped_panel(_report(lazio_resolver)) is None
    report = _report(lazio_resolver, [RawMatchRecord(bye="Unknown Team X", bye_score=3)])
    assert unmapped_panel(report) is not None


def test_print_report(lazio_resolver):
    console = Console(record=True, width=120)
    report = _report(lazio_resolver, [RawMatchRecord(bye="Unknown Team X", bye_score=3)])
    print_report(report, console=console)
    text = console.export_text()
    assert "Lazio FC 2XI" in text
    assert "Unknown Team X" in text
    assert text.index("Lazio FC 2XI") < text.index("Lazio FC 1XI")


def test_preview_panel():
    console = Console(record=True, width=120)
    summary = {"entered": 2, "teams": 26, "zeroes": 1}
    console.print(preview_panel(3, ["A vs B: 4-1", "BYE: C (2)"], summary))
    text = console.export_text()
    assert "Preview - Week 3" in text
    assert "A vs B: 4-1" in text
    assert "Entered: 2 / 26" in text


def test_preview_panel_without_fixtures():
    console = Console(record=True, width=120)
    console.print(preview_panel(9, [], {"entered": 0, "teams": 26, "zeroes": 0}))
    assert "No fixtures defined for Week 9." in console.export_text()
