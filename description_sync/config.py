"""Application configuration loaded from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parents[1]
ENV_PATH = PROJECT_ROOT / ".env"
load_dotenv(ENV_PATH)

DEFAULT_SUMMARY_SEPARATOR = "---Workout Summary---"
DEFAULT_ACTIVITY_WINDOW_MINUTES = 60


@dataclass(frozen=True)
class Settings:
    """Typed runtime settings.

    Args:
        sport_type: Intervals.icu sport whose zone tables are used.
        activity_window_minutes: Half-width of the window used to look up
            the Intervals.icu copy of a Strava activity.
        workout_match_tolerance: Relative distance/duration tolerance used when
            a workout is not explicitly paired with the activity.
        summary_separator: Marker line placed above the generated summary.
        log_level: Root logging level for the CLI.
    """

    sport_type: str = os.getenv("SPORT_TYPE", "Run")
    activity_window_minutes: int = int(os.getenv("ACTIVITY_WINDOW_MINUTES", str(DEFAULT_ACTIVITY_WINDOW_MINUTES)))
    workout_match_tolerance: float = float(os.getenv("WORKOUT_MATCH_TOLERANCE", "0.05"))
    summary_separator: str = os.getenv("SUMMARY_SEPARATOR", DEFAULT_SUMMARY_SEPARATOR)
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    def __post_init__(self) -> None:
        """Normalize out-of-range values instead of failing at startup."""

        if self.activity_window_minutes <= 0:
            object.__setattr__(self, "activity_window_minutes", DEFAULT_ACTIVITY_WINDOW_MINUTES)
        tolerance = max(0.0, min(1.0, self.workout_match_tolerance))
        object.__setattr__(self, "workout_match_tolerance", tolerance)
        if not self.summary_separator.strip():
            object.__setattr__(self, "summary_separator", DEFAULT_SUMMARY_SEPARATOR)
        object.__setattr__(self, "log_level", self.log_level.strip().upper() or "INFO")


settings = Settings()
