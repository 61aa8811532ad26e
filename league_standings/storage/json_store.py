# league_standings/storage/json_store.py
import json
import os
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from loguru import logger

from league_standings.calculation.standings import synthesize_week_results
from league_standings.config.settings import AppSettings, settings
from league_standings.normalization.resolver import TeamResolver
from league_standings.utils.misc_utils import coerce_points, parse_week_key, week_key


class StoreError(Exception):
    """Raised when a league data file exists but cannot be used."""

    pass


class JsonLeagueStore:
    """Reads the fixture feed and keeps entered points and synthesized results as JSON files.

    Fixtures and results are keyed "week<N>"; the points store is keyed by the
    week number, then by team.
    """

    def __init__(
        self,
        fixtures_path: Path,
        points_path: Path,
        results_path: Path,
    ):
        self.fixtures_path = Path(fixtures_path)
        self.points_path = Path(points_path)
        self.results_path = Path(results_path)

    @classmethod
    def from_settings(cls, app_settings: Optional[AppSettings] = None) -> "JsonLeagueStore":
        app_settings = app_settings or settings
        return cls(
            fixtures_path=app_settings.fixtures_path,
            points_path=app_settings.points_path,
            results_path=app_settings.results_path,
        )

    # --- Raw file access ---

    def _read_json(self, path: Path) -> Dict[str, Any]:
        if not path.exists():
            logger.debug(f"{path} does not exist yet, treating as empty.")
            return {}
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Failed to read {path}: {e}")
            raise StoreError(f"Could not read {path}: {e}") from e
        if not isinstance(data, dict):
            raise StoreError(f"{path} must hold a JSON object, got {type(data).__name__}.")
        return data

    def _write_json(self, path: Path, data: Mapping[str, Any]) -> bool:
        tmp_path = path.with_name(path.name + ".tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            os.replace(tmp_path, path)
            return True
        except (OSError, TypeError) as e:
            logger.error(f"Failed to write {path}: {e}")
            tmp_path.unlink(missing_ok=True)
            return False

    # --- Fixtures ---

    def load_fixtures(self) -> Dict[int, List[Dict[str, Any]]]:
        """Returns the fixture feed as week number -> list of pairing/bye dicts."""
        fixtures: Dict[int, List[Dict[str, Any]]] = {}
        for key, entries in self._read_json(self.fixtures_path).items():
            week = parse_week_key(key)
            if week is None:
                logger.debug(f"Ignoring non-week key '{key}' in {self.fixtures_path}")
                continue
            if not isinstance(entries, list):
                logger.warning(f"Fixtures for {key} are not a list, skipping.")
                continue
            fixtures[week] = [e for e in entries if isinstance(e, dict)]
        return fixtures

    def fixture_weeks(self) -> List[int]:
        return sorted(self.load_fixtures())

    # --- Entered points ---

    def load_points(self) -> Dict[int, Dict[str, int]]:
        points: Dict[int, Dict[str, int]] = {}
        for key, team_points in self._read_json(self.points_path).items():
            try:
                week = int(key)
            except ValueError:
                logger.debug(f"Ignoring non-numeric week key '{key}' in {self.points_path}")
                continue
            if not isinstance(team_points, dict):
                logger.warning(f"Points for week {week} are not an object, skipping.")
                continue
            points[week] = {str(team): coerce_points(v) for team, v in team_points.items()}
        return points

    def latest_entered_week(self) -> Optional[int]:
        weeks = [week for week, pts in self.load_points().items() if pts]
        return max(weeks) if weeks else None

    def save_week_points(
        self, week: int, team_points: Mapping[str, Any], resolver: TeamResolver
    ) -> bool:
        """Stores a week's entered points and the week results synthesized from them.

        Every file is read and the new content built before anything is written,
        so an unreadable store leaves both files untouched.
        """
        cleaned = {str(team): coerce_points(v) for team, v in team_points.items()}
        try:
            previous = self._read_json(self.points_path)
            store = {str(w): pts for w, pts in self.load_points().items()}
            fixtures = self.load_fixtures().get(week, [])
            results = self._read_json(self.results_path)
        except StoreError as e:
            logger.error(f"Not saving week {week}: {e}")
            return False

        store[str(week)] = cleaned
        records = synthesize_week_results(fixtures, cleaned, resolver)
        results[week_key(week)] = [r.model_dump(exclude_none=True) for r in records]
        if not self._commit(previous, store, results):
            return False
        logger.success(
            f"Saved week {week}: {len(cleaned)} team entries, {len(records)} result records."
        )
        return True

    def clear_week(self, week: int) -> bool:
        """Removes a week's entered points and its synthesized results."""
        try:
            previous = self._read_json(self.points_path)
            store = {str(w): pts for w, pts in self.load_points().items() if w != week}
            results = self._read_json(self.results_path)
        except StoreError as e:
            logger.error(f"Not clearing week {week}: {e}")
            return False

        results.pop(week_key(week), None)
        if not self._commit(previous, store, results):
            return False
        logger.info(f"Cleared week {week}.")
        return True

    def _commit(
        self,
        previous_points: Mapping[str, Any],
        points: Mapping[str, Any],
        results: Mapping[str, Any],
    ) -> bool:
        """Writes the points store then the results, restoring the old points if the results fail."""
        if not self._write_json(self.points_path, points):
            return False
        if not self._write_json(self.results_path, results):
            if not self._write_json(self.points_path, previous_points):
                logger.critical(
                    f"Could not restore {self.points_path} after a failed results write."
                )
            return False
        return True

    # --- Synthesized results ---

    def load_results(self) -> Dict[int, List[Dict[str, Any]]]:
        results: Dict[int, List[Dict[str, Any]]] = {}
        for key, entries in self._read_json(self.results_path).items():
            week = parse_week_key(key)
            if week is None or not isinstance(entries, list):
                continue
            results[week] = [e for e in entries if isinstance(e, dict)]
        return results


def load_team_points_file(path: Path) -> Dict[str, int]:
    """Reads a week's manual point entry: a JSON object of team -> points."""
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise StoreError(f"Could not read points entry {path}: {e}") from e
    if not isinstance(data, dict):
        raise StoreError(f"Points entry {path} must hold a JSON object of team -> points.")
    return {str(team): coerce_points(v) for team, v in data.items()}
