"""Write planned-workout summaries into recorded activity descriptions."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

from description_sync.config import Settings
from description_sync.data.matching import activity_search_window
from description_sync.data.sources import ActivitySource, NotFoundError, SourceError, WorkoutSource
from description_sync.summary.description import has_summary, merge_summary
from description_sync.summary.renderer import render_workout

LOGGER = logging.getLogger(__name__)


@dataclass
class SyncResult:
    """Sync outcome payload."""

    activity_id: int
    status: str
    description: str | None = None


def sync_activity_description(
    activity_id: int,
    activities: ActivitySource,
    workouts: WorkoutSource,
    config: Settings,
) -> SyncResult:
    """Render the planned workout of one activity into its description.

    Args:
        activity_id: Recorded activity id.
        activities: Source of recorded activities.
        workouts: Source of planned workouts and athlete settings.
        config: Runtime settings.

    Returns:
        SyncResult: One of `updated`, `skipped`, `not_found`, `update_failed`,
        or `error`, with the new description when one was written.
    """

    t0 = time.perf_counter()
    try:
        activity = activities.fetch_activity(activity_id)
        if has_summary(activity.description, config.summary_separator):
            LOGGER.info("Activity %s already contains a summary", activity_id)
            return SyncResult(activity_id=activity_id, status="skipped")

        window = activity_search_window(activity.start_date_local, config.activity_window_minutes)
        workout = workouts.fetch_matching_workout(activity_id, window)
        sport_settings = workouts.fetch_athlete_settings(config.sport_type)

        summary = render_workout(workout.document, sport_settings)
        if not summary.strip():
            LOGGER.info("Workout %s rendered an empty summary", workout.id)
            return SyncResult(activity_id=activity_id, status="skipped")

        description = merge_summary(activity.description, summary, config.summary_separator)
        if not activities.update_activity_description(activity_id, description):
            LOGGER.warning("Updating activity %s description failed", activity_id)
            return SyncResult(activity_id=activity_id, status="update_failed")
    except NotFoundError as exc:
        LOGGER.warning("Activity %s not synced: %s", activity_id, exc)
        return SyncResult(activity_id=activity_id, status="not_found")
    except SourceError as exc:
        LOGGER.error("Activity %s sync failed: %s", activity_id, exc)
        return SyncResult(activity_id=activity_id, status="error")

    LOGGER.info("sync_activity_description completed activity=%s elapsed=%.2fs", activity_id, time.perf_counter() - t0)
    return SyncResult(activity_id=activity_id, status="updated", description=description)
