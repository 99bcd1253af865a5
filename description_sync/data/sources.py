"""Contracts for the activity and workout services the pipeline talks to."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol

from description_sync.models.activity import StravaActivity
from description_sync.models.workout import AthleteSportSettings, Workout


class SourceError(Exception):
    """Raised by a source when a remote lookup or update fails."""


class NotFoundError(SourceError):
    """The requested activity, workout, or settings do not exist."""


class AuthError(SourceError):
    """The source rejected the stored credentials."""


class ActivitySource(Protocol):
    """Recorded activities whose descriptions receive summaries."""

    def fetch_activity(self, activity_id: int) -> StravaActivity:
        ...

    def update_activity_description(self, activity_id: int, description: str) -> bool:
        ...


class WorkoutSource(Protocol):
    """Planned workouts and athlete zone settings."""

    def fetch_matching_workout(self, activity_id: int, window: tuple[datetime, datetime]) -> Workout:
        ...

    def fetch_athlete_settings(self, sport_type: str) -> AthleteSportSettings:
        ...
