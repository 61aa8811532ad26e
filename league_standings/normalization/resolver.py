import json
import re
from pathlib import Path
from types import MappingProxyType
from typing import Callable, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from loguru import logger

from league_standings.config.teams import CANONICAL_TEAMS, TEAM_ALIASES
from league_standings.models.enums import Division
from league_standings.models.team import CanonicalTeam


class RegistryError(Exception):
    """Raised when the canonical team registry configuration is invalid."""

    pass


_APOSTROPHES = re.compile(r"[’‘]")
_DASHES = re.compile(r"[–—]")
_WHITESPACE = re.compile(r"\s+")
_DIVISION_SUFFIX = re.compile(r"\s+(1XI|2XI)$", re.IGNORECASE)

# Whole-word markers such as "2XI", "2nd", "2s", "2's" or "2 11" (checked first)
_SECOND_TEAM_MARKER = re.compile(r"\b2(?:xi|nd|s|'s| 11)?\b")
_FIRST_TEAM_MARKER = re.compile(r"\b1(?:xi|st|s|'s| 11)?\b")


def clean_name(raw: str) -> str:
    """Lowercases and unifies apostrophes, dashes and whitespace."""
    cleaned = _APOSTROPHES.sub("'", raw.lower())
    cleaned = _DASHES.sub("-", cleaned)
    return _WHITESPACE.sub(" ", cleaned).strip()


def detect_division(raw: str) -> Optional[Division]:
    """Detects a first/second team marker in a raw team string, if there is one."""
    cleaned = clean_name(raw)
    if _SECOND_TEAM_MARKER.search(cleaned):
        return Division.SECOND
    if _FIRST_TEAM_MARKER.search(cleaned):
        return Division.FIRST
    return None


def base_of(label: str) -> str:
    return clean_name(_DIVISION_SUFFIX.sub("", label.strip()))


def division_of(label: str) -> Division:
    return Division.SECOND if label.strip().upper().endswith("2XI") else Division.FIRST


def build_team(label: str) -> CanonicalTeam:
    return CanonicalTeam(
        label=label,
        base=base_of(label),
        division=division_of(label),
        key=clean_name(label),
    )


class TeamRegistry:
    """The fixed set of canonical teams plus the curated alias table.

    Derived attributes (base, division, cleaned key) are computed once here and
    the registry is read-only afterwards.
    """

    def __init__(
        self, labels: Sequence[str], aliases: Optional[Mapping[str, str]] = None
    ):
        self._teams: Tuple[CanonicalTeam, ...] = tuple(build_team(label) for label in labels)
        self._by_label: Dict[str, CanonicalTeam] = {t.label: t for t in self._teams}
        self._by_key: Dict[str, CanonicalTeam] = {t.key: t for t in self._teams}
        self._aliases: Mapping[str, str] = MappingProxyType(dict(aliases or {}))
        self._by_division: Dict[Division, Tuple[CanonicalTeam, ...]] = {
            division: tuple(t for t in self._teams if t.division == division)
            for division in Division
        }
        self._validate()
        logger.debug(
            f"Team registry built with {len(self._teams)} teams and {len(self._aliases)} aliases."
        )

    def _validate(self) -> None:
        if len(self._by_label) != len(self._teams):
            raise RegistryError("Canonical team labels must be distinct.")
        if len(self._by_key) != len(self._teams):
            raise RegistryError(
                "Canonical team labels must stay distinct after name cleaning."
            )
        seen: Dict[Tuple[str, Division], str] = {}
        for team in self._teams:
            slot = (team.base, team.division)
            if slot in seen:
                raise RegistryError(
                    f"'{team.label}' and '{seen[slot]}' share base name '{team.base}' in division {team.division.value}."
                )
            seen[slot] = team.label
        unknown_targets = sorted(
            {target for target in self._aliases.values() if target not in self._by_label}
        )
        if unknown_targets:
            raise RegistryError(f"Alias targets are not canonical teams: {unknown_targets}")

    @property
    def teams(self) -> Tuple[CanonicalTeam, ...]:
        return self._teams

    @property
    def labels(self) -> List[str]:
        return [t.label for t in self._teams]

    @property
    def aliases(self) -> Mapping[str, str]:
        return self._aliases

    def get(self, label: str) -> Optional[CanonicalTeam]:
        return self._by_label.get(label)

    def get_by_key(self, key: str) -> Optional[CanonicalTeam]:
        return self._by_key.get(key)

    def candidates(self, division: Optional[Division]) -> Tuple[CanonicalTeam, ...]:
        if division is None:
            return self._teams
        return self._by_division[division]

    def __len__(self) -> int:
        return len(self._teams)

    def __contains__(self, label: object) -> bool:
        return label in self._by_label


def load_registry(
    path: Optional[Union[str, Path]] = None, expected_count: Optional[int] = None
) -> TeamRegistry:
    """Builds the registry from the shipped configuration or a JSON override file.

    The override file holds {"teams": [...], "aliases": {raw: label}}.
    """
    labels: Sequence[str] = CANONICAL_TEAMS
    aliases: Mapping[str, str] = TEAM_ALIASES
    if path is not None:
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise RegistryError(f"Could not read registry file {path}: {e}") from e
        if not isinstance(data, dict) or not isinstance(data.get("teams"), list):
            raise RegistryError(f"Registry file {path} must hold a 'teams' list.")
        labels = [str(label) for label in data["teams"]]
        aliases = {str(k): str(v) for k, v in (data.get("aliases") or {}).items()}
        logger.info(f"Loaded team registry override from {path}")

    registry = TeamRegistry(labels, aliases)
    if expected_count is not None and len(registry) != expected_count:
        raise RegistryError(
            f"Registry holds {len(registry)} teams, expected {expected_count}."
        )
    return registry


# --- Resolution strategies, tried in order; the first non-None result wins ---

ResolutionStrategy = Callable[[str, TeamRegistry], Optional[str]]


def match_alias(raw: str, registry: TeamRegistry) -> Optional[str]:
    return registry.aliases.get(raw)


def match_clean_label(raw: str, registry: TeamRegistry) -> Optional[str]:
    team = registry.get_by_key(clean_name(raw))
    return team.label if team else None


def match_base_containment(raw: str, registry: TeamRegistry) -> Optional[str]:
    """Picks the candidate with the longest base name contained in the raw string.

    Candidates are limited to the detected division when the raw string carries
    a marker. A tie on the longest base is ambiguous and resolves to nothing.
    """
    cleaned = clean_name(raw)
    division = detect_division(raw)
    matches = [
        team
        for team in registry.candidates(division)
        if team.base and team.base in cleaned
    ]
    if not matches:
        return None
    longest = max(len(team.base) for team in matches)
    best = [team for team in matches if len(team.base) == longest]
    if len(best) > 1:
        logger.info(
            f"Ambiguous team name '{raw}' matches {[t.label for t in best]}; leaving unresolved."
        )
        return None
    return best[0].label


RESOLUTION_STRATEGIES: Tuple[ResolutionStrategy, ...] = (
    match_alias,
    match_clean_label,
    match_base_containment,
)


class TeamResolver:
    """Maps raw team strings to canonical labels. None means unresolved."""

    def __init__(
        self,
        registry: TeamRegistry,
        strategies: Sequence[ResolutionStrategy] = RESOLUTION_STRATEGIES,
    ):
        self.registry = registry
        self.strategies: Tuple[ResolutionStrategy, ...] = tuple(strategies)

    def resolve(self, raw: Optional[str]) -> Optional[str]:
        if not isinstance(raw, str) or not raw:
            return None
        for strategy in self.strategies:
            label = strategy(raw, self.registry)
            if label is not None:
                return label
        return None

    def __call__(self, raw: Optional[str]) -> Optional[str]:
        return self.resolve(raw)
