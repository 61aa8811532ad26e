from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field


class WeekPoints(BaseModel):
    """Points per canonical team for one week, plus the names that did not resolve."""

    week: int
    points: Dict[str, int] = Field(default_factory=dict)
    unmapped: List[str] = Field(default_factory=list)


class StandingsRow(BaseModel):
    """One team's line in the overall table."""

    model_config = ConfigDict(frozen=True)

    team: str
    week_points: int = 0
    season_points: int = 0
    position: Optional[int] = None
    previous_position: Optional[int] = None

    @computed_field  # type: ignore[misc]
    @property
    def movement(self) -> int:
        """Places gained since the previous week (negative when dropping)."""
        if self.position is None or self.previous_position is None:
            return 0
        return self.previous_position - self.position


class StandingsReport(BaseModel):
    """Overall standings through a given week."""

    week: int
    rows: List[StandingsRow]
    previous_rank: Dict[str, int]
    unmapped: List[str] = Field(default_factory=list)
    season_totals: Dict[str, int] = Field(default_factory=dict)
    week_points: Dict[str, int] = Field(default_factory=dict)

    def row_for(self, team: str) -> Optional[StandingsRow]:
        for row in self.rows:
            if row.team == team:
                return row
        return None
