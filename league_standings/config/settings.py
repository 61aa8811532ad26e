import logging
from pathlib import Path
from typing import Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class AppSettings(BaseSettings):
    """Application settings loaded from environment variables or .env file."""

    # Data Store Configuration
    data_dir: Path = Field(
        Path("data"), description="Directory holding the league JSON files."
    )
    fixtures_file: str = Field(
        "fixtures.json", description="Fixture feed, one list of pairings/byes per week."
    )
    points_file: str = Field(
        "week_points.json", description="Manually entered points, by week then team."
    )
    results_file: str = Field(
        "results.json", description="Week results synthesized from fixtures and points."
    )

    # Registry Configuration
    registry_file: Optional[Path] = Field(
        None,
        description="Optional JSON file with 'teams' and 'aliases' overriding the shipped registry.",
    )
    expected_team_count: int = Field(
        26, ge=1, description="Number of canonical teams the registry must hold."
    )

    # Standings Configuration
    current_week: Optional[int] = Field(
        None,
        ge=1,
        description="Week to report on. Defaults to the latest week with entered points.",
    )

    # Logging Configuration
    log_level: str = Field(
        "INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)."
    )

    # Pydantic Settings Configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _known_log_level(cls, value: object) -> str:
        level = str(value or "").strip().upper()
        if level not in LOG_LEVELS:
            logging.warning(f"Unknown LOG_LEVEL '{value}', using INFO.")
            return "INFO"
        return level

    @property
    def fixtures_path(self) -> Path:
        return self.data_dir / self.fixtures_file

    @property
    def points_path(self) -> Path:
        return self.data_dir / self.points_file

    @property
    def results_path(self) -> Path:
        return self.data_dir / self.results_file


def load_settings() -> AppSettings:
    """Loads the league settings once at startup; bad values stop the process."""
    try:
        return AppSettings()
    except ValidationError as e:
        logging.error(f"Invalid league settings in environment or .env: {e}")
        raise SystemExit("Failed to load league settings. Exiting.")


settings: AppSettings = load_settings()
