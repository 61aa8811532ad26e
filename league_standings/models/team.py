# league_standings/models/team.py
from pydantic import BaseModel, ConfigDict

from league_standings.models.enums import Division


class CanonicalTeam(BaseModel):
    """A canonical team label with its derived matching attributes."""

    model_config = ConfigDict(frozen=True)  # Make instances immutable

    label: str
    base: str  # Lowercased label without the trailing division marker
    division: Division
    key: str  # Label put through the name cleaning pipeline
