"""Distance and duration text for workout steps."""

from __future__ import annotations

import math


def round_to_ten_seconds(seconds: float) -> int:
    """Round to the nearest multiple of 10 seconds, halves away from zero."""

    return int(math.floor(seconds / 10 + 0.5)) * 10


def format_clock(total_seconds: int) -> str:
    """Format seconds as `MM:SS` using total minutes."""

    minutes, seconds = divmod(int(total_seconds), 60)
    return f"{minutes:02d}:{seconds:02d}"


def format_distance(distance_m: float) -> str:
    if distance_m < 1000:
        return f"{int(distance_m)}m"
    return f"{distance_m / 1000:.2g}km"


def format_duration(duration_s: float) -> str:
    rounded = round_to_ten_seconds(duration_s)
    if rounded < 60:
        return f"{rounded}s"
    return f"{format_clock(rounded)}min"


def format_when(distance_m: float, duration_s: float) -> str:
    """Describe how long a step lasts.

    When both values are set, the source system has usually back-computed one of
    them after pairing. A distance on a 100 m grid is taken to be the authored
    one and shown alone; otherwise both are shown.

    Args:
        distance_m: Step distance in meters, 0 when unset.
        duration_s: Step duration in seconds, 0 when unset.

    Returns:
        str: Text such as `400m`, `1.5km`, `04:00min` or `04:00min / 950m`.
    """

    distance_text = format_distance(distance_m) if distance_m > 0 else ""
    duration_text = format_duration(duration_s) if duration_s > 0 else ""

    if not distance_text:
        return duration_text
    if not duration_text:
        return distance_text
    if int(distance_m) % 100 == 0:
        return distance_text
    return f"{duration_text} / {distance_text}"
