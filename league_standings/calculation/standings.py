from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from loguru import logger

from league_standings.models.enums import RecordKind
from league_standings.models.match import RawMatchRecord
from league_standings.models.standings import StandingsReport, StandingsRow, WeekPoints
from league_standings.normalization.resolver import TeamRegistry, TeamResolver
from league_standings.utils.misc_utils import coerce_points

# Week number -> that week's match records (pairings with scores, byes)
ResultsByWeek = Mapping[int, Sequence[RawMatchRecord]]


def _zero_totals(registry: TeamRegistry) -> Dict[str, int]:
    return {label: 0 for label in registry.labels}


def lookup_team_points(
    raw_name: Optional[str], resolver: TeamResolver, team_points: Mapping[str, Any]
) -> int:
    """Finds a team's entered points, preferring the canonical key over the raw one.

    Point stores written before names were canonicalized are keyed by the raw
    fixture string, so that key is tried when the canonical one is missing.
    """
    if not raw_name:
        return 0
    canonical = resolver.resolve(raw_name)
    if canonical is not None and canonical in team_points:
        return coerce_points(team_points[canonical])
    if raw_name in team_points:
        return coerce_points(team_points[raw_name])
    return 0


def synthesize_week_results(
    fixtures: Iterable[Mapping[str, Any]],
    team_points: Mapping[str, Any],
    resolver: TeamResolver,
) -> List[RawMatchRecord]:
    """Combines a week's fixture list with entered points into scored records.

    The original fixture strings are kept on the records for display.
    """
    records: List[RawMatchRecord] = []
    for fixture in fixtures:
        if not isinstance(fixture, Mapping):
            logger.debug(f"Skipping non-mapping fixture entry: {fixture!r}")
            continue
        if fixture.get("bye"):
            bye_team = str(fixture["bye"])
            records.append(
                RawMatchRecord(
                    bye=bye_team,
                    bye_score=lookup_team_points(bye_team, resolver, team_points),
                )
            )
            continue
        home = str(fixture["home"]) if fixture.get("home") else None
        away = str(fixture["away"]) if fixture.get("away") else None
        records.append(
            RawMatchRecord(
                home=home,
                away=away,
                home_score=lookup_team_points(home, resolver, team_points) if home else None,
                away_score=lookup_team_points(away, resolver, team_points) if away else None,
            )
        )
    return records


def aggregate_week(
    week: int,
    records: Iterable[RawMatchRecord],
    resolver: TeamResolver,
    registry: Optional[TeamRegistry] = None,
) -> WeekPoints:
    """Resolves one week's records into points per canonical team.

    Every team string on a record (home, away and bye) is resolved, and any
    that fail are reported whatever the record kind. Only the scoring slots
    earn points; missing scores count as zero.
    """
    registry = registry or resolver.registry
    points = _zero_totals(registry)
    unmapped: List[str] = []
    resolved: Dict[str, Optional[str]] = {}

    for record in records:
        if record.kind == RecordKind.MALFORMED:
            logger.debug(f"Week {week}: skipping record with no teams: {record}")
            continue
        for raw_name in record.team_names():
            if raw_name not in resolved:
                resolved[raw_name] = resolver.resolve(raw_name)
            if resolved[raw_name] is None and raw_name not in unmapped:
                unmapped.append(raw_name)
        for raw_name, score in record.team_slots():
            team = resolved[raw_name]
            if team is not None and score is not None:
                points[team] = points.get(team, 0) + score

    return WeekPoints(week=week, points=points, unmapped=unmapped)


def season_totals(
    results_by_week: ResultsByWeek,
    through_week: int,
    resolver: TeamResolver,
    registry: Optional[TeamRegistry] = None,
) -> Dict[str, int]:
    """Sums week points over weeks 1..through_week (zero for every team when through_week < 1)."""
    registry = registry or resolver.registry
    totals = _zero_totals(registry)
    for week in range(1, through_week + 1):
        week_points = aggregate_week(
            week, results_by_week.get(week, ()), resolver, registry
        )
        for team, pts in week_points.points.items():
            totals[team] += pts
    return totals


def standings_sort_key(row: StandingsRow):
    return (-row.season_points, -row.week_points, row.team)


def sort_rows(rows: Iterable[StandingsRow]) -> List[StandingsRow]:
    """Season points desc, then week points desc, then team label asc."""
    return sorted(rows, key=standings_sort_key)


def rank_teams(
    season: Mapping[str, int], week: Mapping[str, int], labels: Sequence[str]
) -> Dict[str, int]:
    rows = [
        StandingsRow(team=label, week_points=week.get(label, 0), season_points=season.get(label, 0))
        for label in labels
    ]
    return {row.team: position for position, row in enumerate(sort_rows(rows), start=1)}


def build_standings(
    results_by_week: ResultsByWeek,
    current_week: int,
    resolver: TeamResolver,
    registry: Optional[TeamRegistry] = None,
) -> StandingsReport:
    """Builds the overall table through current_week from the full result history.

    Nothing is cached between calls: weeks 1..current_week are recomputed each
    time, so the same inputs always give the same report.
    """
    if current_week < 1:
        raise ValueError(f"current_week must be >= 1, got {current_week}")
    registry = registry or resolver.registry
    labels = registry.labels

    weeks = [
        aggregate_week(week, results_by_week.get(week, ()), resolver, registry)
        for week in range(1, current_week + 1)
    ]
    totals = season_totals(results_by_week, current_week, resolver, registry)
    previous_totals = season_totals(results_by_week, current_week - 1, resolver, registry)

    unmapped: List[str] = []
    for week_points in weeks:
        for raw_name in week_points.unmapped:
            if raw_name not in unmapped:
                unmapped.append(raw_name)

    current = weeks[-1].points
    previous_week = weeks[-2].points if current_week > 1 else _zero_totals(registry)
    previous_rank = rank_teams(previous_totals, previous_week, labels)

    rows = sort_rows(
        StandingsRow(team=label, week_points=current[label], season_points=totals[label])
        for label in labels
    )
    rows = [
        row.model_copy(
            update={"position": position, "previous_position": previous_rank[row.team]}
        )
        for position, row in enumerate(rows, start=1)
    ]

    if unmapped:
        logger.warning(
            f"{len(unmapped)} team name(s) could not be mapped through week {current_week}: {unmapped}"
        )
    logger.info(
        f"Built standings through week {current_week} for {len(rows)} teams."
    )
    return StandingsReport(
        week=current_week,
        rows=rows,
        previous_rank=previous_rank,
        unmapped=unmapped,
        season_totals=totals,
        week_points=dict(current),
    )


def build_standings_from_points(
    fixtures_by_week: Mapping[int, Sequence[Mapping[str, Any]]],
    points_by_week: Mapping[int, Mapping[str, Any]],
    current_week: int,
    resolver: TeamResolver,
    registry: Optional[TeamRegistry] = None,
) -> StandingsReport:
    """Synthesizes each week's results from fixtures plus entered points, then builds standings.

    Weeks without entered points score zero, but their fixture names still go
    through resolution so unmapped strings are reported.
    """
    results: Dict[int, List[RawMatchRecord]] = {
        week: synthesize_week_results(
            fixtures_by_week.get(week, ()), points_by_week.get(week, {}), resolver
        )
        for week in range(1, current_week + 1)
    }
    return build_standings(results, current_week, resolver, registry)


def entry_summary(
    team_points: Mapping[str, Any], registry: TeamRegistry
) -> Dict[str, int]:
    """Counts how many canonical teams have points entered and how many are zero."""
    entered = [coerce_points(team_points[label]) for label in registry.labels if label in team_points]
    return {
        "entered": len(entered),
        "teams": len(registry),
        "zeroes": sum(1 for pts in entered if pts == 0),
    }


def preview_week(
    fixtures: Iterable[Mapping[str, Any]],
    team_points: Mapping[str, Any],
    resolver: TeamResolver,
) -> List[str]:
    """Renders a week's fixtures as the lines that will be saved to results."""
    lines: List[str] = []
    for record in synthesize_week_results(fixtures, team_points, resolver):
        if record.kind == RecordKind.BYE:
            lines.append(f"BYE: {record.bye} ({record.bye_score})")
        elif record.kind == RecordKind.PAIRING:
            lines.append(
                f"{record.home} vs {record.away}: {record.home_score or 0}-{record.away_score or 0}"
            )
    return lines
