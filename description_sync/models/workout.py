"""Workout document model and athlete zone settings."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class IntensityKind(str, Enum):
    """Which target a leaf step carries."""

    HEART_RATE = "hr"
    PACE = "pace"


class IntensityUnit(str, Enum):
    """Target units known to the renderer."""

    HR_ZONE = "hr_zone"
    PERCENT_MAX_HR = "%hr"
    PERCENT_LTHR = "%lthr"
    PACE_ZONE = "pace_zone"
    PERCENT_PACE = "%pace"


@dataclass(frozen=True)
class AthleteSportSettings:
    """Personal thresholds and zone tables for one sport.

    Args:
        maximum_heart_rate: Max heart rate in bpm.
        threshold_heart_rate: Lactate threshold heart rate in bpm.
        heart_rate_zones: Ascending upper bound (bpm) of each heart-rate zone.
        threshold_pace: Threshold pace as speed in meters/second.
        pace_zones: Ascending upper bound of each pace zone, in percent of
            threshold pace (e.g. `77.5`).
    """

    maximum_heart_rate: int = 0
    threshold_heart_rate: int = 0
    heart_rate_zones: tuple[int, ...] = ()
    threshold_pace: float = 0.0
    pace_zones: tuple[float, ...] = ()


@dataclass(frozen=True)
class Intensity:
    """Heart-rate or pace target of a leaf step.

    A positive `value` is a single target; `value == 0` means the target is the
    `start`..`end` range. `units` is kept as the raw string so unknown units
    survive parsing and can be reported at render time.
    """

    kind: IntensityKind
    units: str
    value: float = 0.0
    start: float = 0.0
    end: float = 0.0

    @property
    def is_range(self) -> bool:
        return self.value <= 0


@dataclass(frozen=True)
class LeafStep:
    """Single step with a concrete target and optional distance/duration."""

    intensity: Intensity
    distance_m: float = 0.0
    duration_s: float = 0.0
    text: str | None = None


@dataclass(frozen=True)
class RepeatGroup:
    """Repeat the child steps `repetitions` times."""

    repetitions: int
    children: tuple[WorkoutStep, ...]
    text: str | None = None

    def __post_init__(self) -> None:
        if self.repetitions <= 0:
            raise ValueError(f"Repeat group needs positive repetitions, got {self.repetitions}")
        if not self.children:
            raise ValueError("Repeat group needs at least one child step")


@dataclass(frozen=True)
class UnsupportedStep:
    """Step whose shape is neither a target step nor a repeat group."""

    distance_m: float = 0.0
    duration_s: float = 0.0
    text: str | None = None


WorkoutStep = LeafStep | RepeatGroup | UnsupportedStep


@dataclass(frozen=True)
class WorkoutDocument:
    """Top-level ordered steps of a planned workout plus its planned totals."""

    steps: tuple[WorkoutStep, ...] = ()
    distance_m: float = 0.0
    duration_s: float = 0.0


@dataclass(frozen=True)
class Workout:
    """Planned workout event as stored in the calendar."""

    id: int
    name: str = ""
    document: WorkoutDocument = field(default_factory=WorkoutDocument)
