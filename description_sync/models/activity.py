"""Activity value objects exchanged with the activity and workout sources."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class StravaActivity:
    """Recorded activity whose description receives the summary."""

    id: int
    description: str
    start_date_local: datetime
    sport_type: str = "Run"


@dataclass(frozen=True)
class IntervalsActivity:
    """Intervals.icu copy of a recorded activity.

    Args:
        strava_id: Strava activity id as a string, when imported from Strava.
        paired_event_id: Planned workout id the activity was paired with.
        start_date: Activity start time.
        distance_m: Recorded distance in meters.
        moving_time_s: Recorded moving time in seconds.
    """

    strava_id: str | None
    paired_event_id: int | None
    start_date: datetime
    distance_m: float = 0.0
    moving_time_s: float = 0.0
