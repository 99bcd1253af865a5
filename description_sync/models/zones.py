"""Heart-rate and pace zone classification."""

from __future__ import annotations

import logging
from typing import Sequence

from description_sync.models.workout import AthleteSportSettings, Intensity, IntensityUnit
from description_sync.summary.magnitude import format_clock

LOGGER = logging.getLogger(__name__)

UNKNOWN_PACE = "--:--"


def zone_index(value: float, boundaries: Sequence[float]) -> int:
    """Return the 1-based zone whose upper bound is the first one >= `value`.

    Args:
        value: Absolute bpm or pace percentage.
        boundaries: Ascending zone upper bounds.

    Returns:
        int: Zone number. Values above every bound fall back to zone 1.
    """

    for idx, upper in enumerate(boundaries):
        if value <= upper:
            return idx + 1
    LOGGER.warning("Value %s exceeds every zone boundary %s; using zone 1", value, list(boundaries))
    return 1


def zone_label(start_zone: int, end_zone: int | None = None) -> str:
    """Format `Z<n>` or `Z<a>-Z<b>` when the two ends differ."""

    if end_zone is None or end_zone == start_zone:
        return f"Z{start_zone}"
    return f"Z{start_zone}-Z{end_zone}"


def heart_rate_zone(bpm: float, settings: AthleteSportSettings) -> int:
    return zone_index(bpm, settings.heart_rate_zones)


def pace_zone(percent: float, settings: AthleteSportSettings) -> int:
    """Classify a percentage of threshold pace (not the absolute pace)."""

    return zone_index(percent, settings.pace_zones)


def _absolute_zone(intensity: Intensity) -> str:
    if intensity.is_range:
        return zone_label(int(intensity.start), int(intensity.end))
    return zone_label(int(intensity.value))


def percent_to_bpm(percent: float, source_hr: int) -> float:
    return percent * source_hr / 100


def classify_heart_rate(intensity: Intensity, settings: AthleteSportSettings) -> tuple[str, str] | None:
    """Map a heart-rate target to `(zone_label, detail_text)`.

    Args:
        intensity: Heart-rate target of a leaf step.
        settings: Athlete thresholds and zone table.

    Returns:
        tuple[str, str] | None: Label such as `Z3` or `Z2-Z3` and a bpm detail,
        or None when the units are not heart-rate units.
    """

    if intensity.units == IntensityUnit.HR_ZONE.value:
        return _absolute_zone(intensity), ""
    if intensity.units == IntensityUnit.PERCENT_MAX_HR.value:
        source_hr = settings.maximum_heart_rate
    elif intensity.units == IntensityUnit.PERCENT_LTHR.value:
        source_hr = settings.threshold_heart_rate
    else:
        return None

    if not intensity.is_range:
        bpm = percent_to_bpm(intensity.value, source_hr)
        return zone_label(heart_rate_zone(bpm, settings)), f"{int(bpm)}"

    start_bpm = percent_to_bpm(intensity.start, source_hr)
    end_bpm = percent_to_bpm(intensity.end, source_hr)
    label = zone_label(heart_rate_zone(start_bpm, settings), heart_rate_zone(end_bpm, settings))
    return label, f"{int(start_bpm)}-{int(end_bpm)} bpm"


def pace_text(percent: float, threshold_pace: float) -> str:
    """Format `percent` of threshold speed (m/s) as minutes per kilometer `MM:SS`."""

    speed = percent * threshold_pace / 100
    if speed <= 0:
        LOGGER.warning("Cannot format pace for non-positive speed %s m/s", speed)
        return UNKNOWN_PACE
    seconds_per_km = 1 / (speed / 1000 * 60) * 60
    return format_clock(int(round(seconds_per_km, 6)))


def classify_pace(intensity: Intensity, settings: AthleteSportSettings) -> tuple[str, str] | None:
    """Map a pace target to `(zone_label, detail_text)`.

    Returns None when the units are not pace units.
    """

    if intensity.units == IntensityUnit.PACE_ZONE.value:
        return _absolute_zone(intensity), ""
    if intensity.units != IntensityUnit.PERCENT_PACE.value:
        return None

    if not intensity.is_range:
        label = zone_label(pace_zone(intensity.value, settings))
        return label, f"{pace_text(intensity.value, settings.threshold_pace)} min/km"

    label = zone_label(pace_zone(intensity.start, settings), pace_zone(intensity.end, settings))
    start_text = pace_text(intensity.start, settings.threshold_pace)
    end_text = pace_text(intensity.end, settings.threshold_pace)
    return label, f"{start_text}-{end_text} min/km"
