"""Pair a recorded activity with its planned workout."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Iterable

from description_sync.data.sources import NotFoundError
from description_sync.models.activity import IntervalsActivity
from description_sync.models.workout import Workout

LOGGER = logging.getLogger(__name__)


def activity_search_window(start: datetime, minutes: int = 60) -> tuple[datetime, datetime]:
    """Return `(start - minutes, start + minutes)` for looking up an activity copy."""

    delta = timedelta(minutes=minutes)
    return start - delta, start + delta


def workout_day_window(start: datetime) -> tuple[datetime, datetime]:
    """Return the UTC calendar day containing the activity date.

    Args:
        start: Activity start time; its own calendar date is used.

    Returns:
        tuple[datetime, datetime]: Midnight UTC of that date and the next midnight.
    """

    day_start = datetime(start.year, start.month, start.day, tzinfo=timezone.utc)
    return day_start, day_start + timedelta(days=1)


def find_intervals_activity(activities: Iterable[IntervalsActivity], strava_activity_id: int) -> IntervalsActivity:
    wanted = str(strava_activity_id)
    for activity in activities:
        if activity.strava_id == wanted:
            return activity
    raise NotFoundError(f"No activity imported from Strava activity {strava_activity_id}")


def _within(planned: float, actual: float, tolerance: float) -> bool:
    return abs(planned - actual) < planned * tolerance


def match_workout(workouts: Iterable[Workout], activity: IntervalsActivity, tolerance: float = 0.05) -> Workout:
    """Find the planned workout for an activity.

    An explicit pairing wins. Otherwise the first workout whose planned distance
    or duration is within `tolerance` of the recorded one is used.

    Args:
        workouts: Planned workouts on the activity's day.
        activity: Recorded activity.
        tolerance: Relative tolerance, e.g. `0.05` for 5%.

    Returns:
        Workout: Matching planned workout.
    """

    candidates = list(workouts)
    if activity.paired_event_id is not None:
        for workout in candidates:
            if workout.id == activity.paired_event_id:
                return workout

    for workout in candidates:
        document = workout.document
        if _within(document.distance_m, activity.distance_m, tolerance) or _within(
            document.duration_s, activity.moving_time_s, tolerance
        ):
            LOGGER.info("Workout %s matched activity by distance/duration", workout.id)
            return workout

    raise NotFoundError("No planned workout matches the activity")
