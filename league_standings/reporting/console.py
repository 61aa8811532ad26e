from typing import Dict, List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from league_standings.models.standings import StandingsReport


def movement_label(movement: int) -> str:
    if movement > 0:
        return f"[green]▲{movement}[/green]"
    if movement < 0:
        return f"[red]▼{-movement}[/red]"
    return "[dim]-[/dim]"


def standings_table(report: StandingsReport) -> Table:
    """Builds the overall table: position, movement, team, week and season points."""
    table = Table(title=f"Overall Standings - Week {report.week}")
    table.add_column("Pos", justify="right")
    table.add_column("Move", justify="center")
    table.add_column("Team")
    table.add_column("Week", justify="right")
    table.add_column("Season", justify="right", style="bold")

    for row in report.rows:
        table.add_row(
            str(row.position),
            movement_label(row.movement),
            row.team,
            str(row.week_points),
            str(row.season_points),
        )
    return table


def unmapped_panel(report: StandingsReport) -> Optional[Panel]:
    """Lists team names that could not be mapped, for alias table maintenance."""
    if not report.unmapped:
        return None
    body = "\n".join(f"• {name}" for name in report.unmapped)
    return Panel(body, title="Unmapped team names", border_style="yellow")


def print_report(report: StandingsReport, console: Optional[Console] = None) -> None:
    console = console or Console()
    console.print(standings_table(report))
    panel = unmapped_panel(report)
    if panel is not None:
        console.print(panel)


def preview_panel(week: int, lines: List[str], summary: Dict[str, int]) -> Panel:
    """Shows what will be saved to results for a week, with entry progress."""
    body = "\n".join(lines) if lines else f"No fixtures defined for Week {week}."
    subtitle = (
        f"Entered: {summary['entered']} / {summary['teams']}  •  Zeroes: {summary['zeroes']}"
    )
    return Panel(body, title=f"Preview - Week {week}", subtitle=subtitle)
