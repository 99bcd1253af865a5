import pytest

from description_sync.models.workout import AthleteSportSettings, Intensity, IntensityKind
from description_sync.models.zones import (
    classify_heart_rate,
    classify_pace,
    pace_text,
    zone_index,
    zone_label,
)

SETTINGS = AthleteSportSettings(
    maximum_heart_rate=195,
    threshold_heart_rate=180,
    heart_rate_zones=(120, 140, 160, 170, 190),
    threshold_pace=3.0,
    pace_zones=(77.5, 87.7, 94.3, 100.0, 103.4, 111.5, 999.0),
)


def _hr(units: str, value: float = 0.0, start: float = 0.0, end: float = 0.0) -> Intensity:
    return Intensity(kind=IntensityKind.HEART_RATE, units=units, value=value, start=start, end=end)


def _pace(units: str, value: float = 0.0, start: float = 0.0, end: float = 0.0) -> Intensity:
    return Intensity(kind=IntensityKind.PACE, units=units, value=value, start=start, end=end)


@pytest.mark.parametrize(
    ("value", "expected"),
    [(100, 1), (120, 1), (120.5, 2), (140, 2), (162, 4), (170, 4), (190, 5)],
)
def test_zone_index_uses_upper_bounds(value: float, expected: int) -> None:
    assert zone_index(value, SETTINGS.heart_rate_zones) == expected


def test_zone_index_is_monotonic() -> None:
    values = [90 + step * 2.5 for step in range(41)]
    zones = [zone_index(v, SETTINGS.heart_rate_zones) for v in values if v <= 190]
    assert zones == sorted(zones)


def test_value_above_every_boundary_falls_back_to_zone_one() -> None:
    # Current behaviour pins zone 1, not the top zone. Change deliberately.
    assert zone_index(191, SETTINGS.heart_rate_zones) == 1
    assert zone_index(50, ()) == 1


def test_zone_label() -> None:
    assert zone_label(3) == "Z3"
    assert zone_label(3, 3) == "Z3"
    assert zone_label(2, 4) == "Z2-Z4"


def test_percent_lthr_single_target() -> None:
    assert classify_heart_rate(_hr("%lthr", value=90), SETTINGS) == ("Z4", "162")


def test_percent_max_hr_uses_maximum_heart_rate() -> None:
    label, detail = classify_heart_rate(_hr("%hr", value=80), SETTINGS)
    assert detail == "156"
    assert label == "Z3"


def test_heart_rate_range_spanning_zones() -> None:
    label, detail = classify_heart_rate(_hr("%lthr", start=75, end=85), SETTINGS)
    assert label == "Z2-Z3"
    assert detail == "135-153 bpm"


def test_heart_rate_range_inside_one_zone() -> None:
    label, detail = classify_heart_rate(_hr("%lthr", start=90, end=94), SETTINGS)
    assert label == "Z4"
    assert detail == "162-169 bpm"


def test_hr_zone_units_are_taken_as_is() -> None:
    assert classify_heart_rate(_hr("hr_zone", value=2), SETTINGS) == ("Z2", "")
    assert classify_heart_rate(_hr("hr_zone", start=1, end=2), SETTINGS) == ("Z1-Z2", "")


def test_unknown_heart_rate_units() -> None:
    assert classify_heart_rate(_hr("%ftp", value=90), SETTINGS) is None
    assert classify_heart_rate(_hr("%pace", value=90), SETTINGS) is None


def test_pace_text_converts_speed_to_minutes_per_km() -> None:
    assert pace_text(90, 3.0) == "06:10"
    assert pace_text(95, 3.0) == "05:50"
    assert pace_text(100, 10 / 3) == "05:00"


def test_pace_text_with_missing_threshold() -> None:
    assert pace_text(90, 0.0) == "--:--"


def test_percent_pace_single_target() -> None:
    assert classify_pace(_pace("%pace", value=90), SETTINGS) == ("Z3", "06:10 min/km")


def test_percent_pace_range_classifies_percentages() -> None:
    label, detail = classify_pace(_pace("%pace", start=90, end=95), SETTINGS)
    assert label == "Z3-Z4"
    assert detail == "06:10-05:50 min/km"


def test_percent_pace_range_inside_one_zone() -> None:
    label, _ = classify_pace(_pace("%pace", start=88, end=92), SETTINGS)
    assert label == "Z3"


def test_pace_zone_units_use_pace_value() -> None:
    assert classify_pace(_pace("pace_zone", value=5), SETTINGS) == ("Z5", "")


def test_unknown_pace_units() -> None:
    assert classify_pace(_pace("%lthr", value=90), SETTINGS) is None
