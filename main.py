import sys
import argparse
from pathlib import Path
from typing import List, Optional

# --- Settings/Logging ---
from league_standings.logging.setup import setup_logging
from league_standings.config.settings import AppSettings, settings

setup_logging()

from loguru import logger
from rich.console import Console

from league_standings.calculation.standings import (
    build_standings,
    build_standings_from_points,
    entry_summary,
    preview_week,
)
from league_standings.models.match import RawMatchRecord
from league_standings.normalization.resolver import (
    RegistryError,
    TeamResolver,
    load_registry,
)
from league_standings.reporting.console import preview_panel, print_report
from league_standings.storage.json_store import (
    JsonLeagueStore,
    StoreError,
    load_team_points_file,
)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="League standings and weekly point entry")
    parser.add_argument("--week", type=int, default=None, help="Week to report on or enter points for")
    parser.add_argument("--data-dir", type=Path, default=None, help="Directory holding the league JSON files")
    action = parser.add_mutually_exclusive_group()
    action.add_argument("--save", type=Path, metavar="POINTS_JSON", help="Save a week's points (JSON of team -> points)")
    action.add_argument("--preview", type=Path, metavar="POINTS_JSON", help="Show what --save would write, without saving")
    action.add_argument("--clear", action="store_true", help="Remove a week's points and results")
    action.add_argument("--from-results", action="store_true", help="Build standings from the saved results file")
    return parser.parse_args(argv)


def _entry_week(args: argparse.Namespace, app_settings: AppSettings) -> Optional[int]:
    week = args.week or app_settings.current_week
    if not week:
        logger.error("A week is required: pass --week or set CURRENT_WEEK.")
    return week


def run_report(
    store: JsonLeagueStore,
    resolver: TeamResolver,
    week: Optional[int],
    from_results: bool,
    console: Console,
) -> int:
    """Builds and prints the overall standings through the given (or latest entered) week."""
    current_week = week or store.latest_entered_week()
    if not current_week:
        logger.warning("No points have been entered yet. Nothing to report.")
        return 0

    if from_results:
        results = {
            w: [RawMatchRecord.model_validate(entry) for entry in entries]
            for w, entries in store.load_results().items()
        }
        report = build_standings(results, current_week, resolver)
    else:
        fixtures = store.load_fixtures()
        if current_week not in fixtures:
            logger.warning(f"No fixtures defined for week {current_week}.")
        report = build_standings_from_points(
            fixtures, store.load_points(), current_week, resolver
        )
    print_report(report, console=console)
    logger.success(f"Standings through week {current_week} printed.")
    return 0


def run_preview(
    store: JsonLeagueStore,
    resolver: TeamResolver,
    week: int,
    points_file: Path,
    console: Console,
) -> int:
    team_points = load_team_points_file(points_file)
    fixtures = store.load_fixtures().get(week, [])
    lines = preview_week(fixtures, team_points, resolver)
    console.print(preview_panel(week, lines, entry_summary(team_points, resolver.registry)))
    return 0


def run_save(
    store: JsonLeagueStore,
    resolver: TeamResolver,
    week: int,
    points_file: Path,
    console: Console,
) -> int:
    team_points = load_team_points_file(points_file)
    if week not in store.fixture_weeks():
        logger.warning(f"No fixtures defined for week {week}; only the points will be stored.")
    summary = entry_summary(team_points, resolver.registry)
    logger.info(
        f"Week {week}: entered {summary['entered']} / {summary['teams']}, zeroes {summary['zeroes']}"
    )
    if not store.save_week_points(week, team_points, resolver):
        logger.error(f"Failed to save week {week}.")
        return 1
    return run_report(store, resolver, week, False, console)


def main(argv: Optional[List[str]] = None, console: Optional[Console] = None) -> int:
    """Entry point: report standings, or preview/save/clear a week's points."""
    args = parse_args(argv)
    console = console or Console()
    app_settings = settings
    if args.data_dir is not None:
        app_settings = settings.model_copy(update={"data_dir": args.data_dir})
    logger.info("Starting league standings run")

    try:
        registry = load_registry(
            app_settings.registry_file, expected_count=app_settings.expected_team_count
        )
    except RegistryError as e:
        logger.critical(f"Invalid team registry: {e}")
        return 1
    resolver = TeamResolver(registry)
    store = JsonLeagueStore.from_settings(app_settings)

    try:
        if args.save or args.preview or args.clear:
            week = _entry_week(args, app_settings)
            if not week:
                return 2
            if args.save:
                return run_save(store, resolver, week, args.save, console)
            if args.preview:
                return run_preview(store, resolver, week, args.preview, console)
            return 0 if store.clear_week(week) else 1
        return run_report(
            store, resolver, args.week or app_settings.current_week, args.from_results, console
        )
    except StoreError as e:
        logger.error(f"Could not load league data: {e}")
        return 1


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        logger.info("Execution interrupted by user (KeyboardInterrupt).")
        sys.exit(0)
    except Exception as e:
        logger.exception(f"Unhandled exception in main execution: {e}")
        sys.exit(1)
