from typing import Any, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, field_validator

from league_standings.models.enums import RecordKind
from league_standings.utils.misc_utils import coerce_points


class RawMatchRecord(BaseModel):
    """A single fixture slot for one week: either a pairing or a bye.

    Team strings are kept exactly as the fixture feed supplied them. Scores
    are optional; when present they are coerced to non-negative ints.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    home: Optional[str] = None
    away: Optional[str] = None
    home_score: Optional[int] = None
    away_score: Optional[int] = None
    bye: Optional[str] = None
    bye_score: Optional[int] = None

    @field_validator("home", "away", "bye", mode="before")
    @classmethod
    def _team_to_str(cls, value: Any) -> Optional[str]:
        if value is None:
            return None
        value = str(value)
        return value or None

    @field_validator("home_score", "away_score", "bye_score", mode="before")
    @classmethod
    def _score_to_points(cls, value: Any) -> Optional[int]:
        if value is None:
            return None
        return coerce_points(value)

    @property
    def kind(self) -> RecordKind:
        # A bye with no score falls back to the home/away slots when it has them
        if self.bye and (self.bye_score is not None or not (self.home or self.away)):
            return RecordKind.BYE
        if self.home or self.away:
            return RecordKind.PAIRING
        return RecordKind.MALFORMED

    def team_names(self) -> List[str]:
        """Every raw team string on the record, whatever its kind."""
        return [name for name in (self.home, self.away, self.bye) if name]

    def team_slots(self) -> List[Tuple[str, Optional[int]]]:
        """Returns the (raw team, score) slots that earn points for this record."""
        if self.kind == RecordKind.BYE:
            return [(self.bye, self.bye_score)]
        slots: List[Tuple[str, Optional[int]]] = []
        if self.home:
            slots.append((self.home, self.home_score))
        if self.away:
            slots.append((self.away, self.away_score))
        return slots
