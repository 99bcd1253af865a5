"""Intervals.icu JSON payloads and their conversion to the workout model."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_validator

from description_sync.models.activity import IntervalsActivity
from description_sync.models.workout import (
    AthleteSportSettings,
    Intensity,
    IntensityKind,
    LeafStep,
    RepeatGroup,
    UnsupportedStep,
    Workout,
    WorkoutDocument,
    WorkoutStep,
)

LOGGER = logging.getLogger(__name__)


def _zero_if_null(value: Any) -> Any:
    return 0 if value is None else value


# Intervals.icu sends `null` for unset distance/duration/reps.
Number = Annotated[float, BeforeValidator(_zero_if_null)]
Count = Annotated[int, BeforeValidator(_zero_if_null)]


class _Payload(BaseModel):
    model_config = ConfigDict(extra="ignore")


class StepTargetPayload(_Payload):
    start: Number = 0.0
    end: Number = 0.0
    units: str = ""
    value: Number = 0.0


class WorkoutStepPayload(_Payload):
    distance: Number = 0.0
    duration: Number = 0.0
    text: str | None = None
    hr: StepTargetPayload | None = None
    pace: StepTargetPayload | None = None
    steps: list[WorkoutStepPayload] | None = None
    reps: Count = 0


class WorkoutDocPayload(_Payload):
    steps: list[WorkoutStepPayload] = Field(default_factory=list)
    distance: Number = 0.0
    duration: Number = 0.0

    @field_validator("steps", mode="before")
    @classmethod
    def _null_steps(cls, value: Any) -> Any:
        return [] if value is None else value


class WorkoutPayload(_Payload):
    id: int
    name: str = ""
    workout_doc: WorkoutDocPayload | None = None


class SportSettingsPayload(_Payload):
    max_hr: Count = 0
    lthr: Count = 0
    hr_zones: list[int] = Field(default_factory=list)
    threshold_pace: Number = 0.0
    pace_zones: list[float] = Field(default_factory=list)

    @field_validator("hr_zones", "pace_zones", mode="before")
    @classmethod
    def _null_zones(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("hr_zones", "pace_zones")
    @classmethod
    def _strictly_ascending(cls, value: list[float]) -> list[float]:
        if any(later <= earlier for earlier, later in zip(value, value[1:])):
            raise ValueError("zone boundaries must be strictly ascending")
        return value


class ActivityPayload(_Payload):
    strava_id: str | None = None
    paired_event_id: int | None = None
    start_date: datetime
    distance: Number = 0.0
    moving_time: Number = 0.0

    @field_validator("strava_id", mode="before")
    @classmethod
    def _strava_id_as_text(cls, value: Any) -> Any:
        return str(value) if isinstance(value, int) else value


WorkoutStepPayload.model_rebuild()


def _intensity(kind: IntensityKind, target: StepTargetPayload) -> Intensity:
    return Intensity(kind=kind, units=target.units, value=target.value, start=target.start, end=target.end)


def to_workout_step(payload: WorkoutStepPayload) -> WorkoutStep:
    """Convert one wire step into the matching step variant.

    A step with repetitions and child steps becomes a repeat group even if it
    also carries a target; then heart-rate targets win over pace targets.
    """

    if payload.reps > 0 and payload.steps:
        if payload.hr is not None or payload.pace is not None:
            LOGGER.warning("Step has both repeats and a target; rendering it as a repeat group")
        children = tuple(to_workout_step(child) for child in payload.steps)
        return RepeatGroup(repetitions=payload.reps, children=children, text=payload.text)
    if payload.hr is not None:
        return LeafStep(
            intensity=_intensity(IntensityKind.HEART_RATE, payload.hr),
            distance_m=payload.distance,
            duration_s=payload.duration,
            text=payload.text,
        )
    if payload.pace is not None:
        return LeafStep(
            intensity=_intensity(IntensityKind.PACE, payload.pace),
            distance_m=payload.distance,
            duration_s=payload.duration,
            text=payload.text,
        )
    return UnsupportedStep(distance_m=payload.distance, duration_s=payload.duration, text=payload.text)


def to_workout_document(payload: WorkoutDocPayload) -> WorkoutDocument:
    return WorkoutDocument(
        steps=tuple(to_workout_step(step) for step in payload.steps),
        distance_m=payload.distance,
        duration_s=payload.duration,
    )


def parse_workout_document(data: dict[str, Any]) -> WorkoutDocument:
    """Parse a bare `workout_doc` object."""

    return to_workout_document(WorkoutDocPayload.model_validate(data))


def parse_workout(data: dict[str, Any]) -> Workout:
    """Parse a calendar event, accepting a bare `workout_doc` as well.

    Args:
        data: Decoded event JSON (`id`, `name`, `workout_doc`) or workout doc JSON.

    Returns:
        Workout: Event with an empty document when it has no `workout_doc`.
    """

    if "workout_doc" not in data and "steps" in data:
        return Workout(id=0, document=parse_workout_document(data))
    payload = WorkoutPayload.model_validate(data)
    document = to_workout_document(payload.workout_doc) if payload.workout_doc is not None else WorkoutDocument()
    return Workout(id=payload.id, name=payload.name, document=document)


def parse_sport_settings(data: dict[str, Any]) -> AthleteSportSettings:
    payload = SportSettingsPayload.model_validate(data)
    return AthleteSportSettings(
        maximum_heart_rate=payload.max_hr,
        threshold_heart_rate=payload.lthr,
        heart_rate_zones=tuple(payload.hr_zones),
        threshold_pace=payload.threshold_pace,
        pace_zones=tuple(payload.pace_zones),
    )


def parse_activity(data: dict[str, Any]) -> IntervalsActivity:
    payload = ActivityPayload.model_validate(data)
    return IntervalsActivity(
        strava_id=payload.strava_id,
        paired_event_id=payload.paired_event_id,
        start_date=payload.start_date,
        distance_m=payload.distance,
        moving_time_s=payload.moving_time,
    )
