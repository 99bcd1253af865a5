"""Render a workout step tree into summary text."""

from __future__ import annotations

import logging
from typing import Iterable

from description_sync.models.workout import (
    AthleteSportSettings,
    IntensityKind,
    LeafStep,
    RepeatGroup,
    WorkoutDocument,
    WorkoutStep,
)
from description_sync.models.zones import classify_heart_rate, classify_pace
from description_sync.summary.magnitude import format_when

LOGGER = logging.getLogger(__name__)


def render_leaf(step: LeafStep, settings: AthleteSportSettings) -> str:
    """Render one target step, e.g. `1km @ Z4 (162)` or `400m @ Pace Z5 (04:10 min/km)`.

    Returns an empty string when the target units are not recognised.
    """

    intensity = step.intensity
    if intensity.kind is IntensityKind.HEART_RATE:
        classified = classify_heart_rate(intensity, settings)
        prefix = ""
    else:
        classified = classify_pace(intensity, settings)
        prefix = "Pace "

    if classified is None:
        LOGGER.warning("Unknown %s units %r; step left blank", intensity.kind.value, intensity.units)
        return ""

    label, detail = classified
    return f"{format_when(step.distance_m, step.duration_s)} @ {prefix}{label} ({detail})"


def render_step(step: WorkoutStep, settings: AthleteSportSettings) -> str:
    """Render a leaf as one line or a repeat group as a block.

    Repeat groups emit `<n>X:` followed by one `- ` line per child; nested groups
    recurse the same way.
    """

    if isinstance(step, RepeatGroup):
        lines = [f"{step.repetitions}X:"]
        lines.extend(f"- {render_step(child, settings)}" for child in step.children)
        return "\n".join(lines)
    if isinstance(step, LeafStep):
        return render_leaf(step, settings)
    LOGGER.warning("Unexpected step type %s; step left blank", type(step).__name__)
    return ""


def render_steps(steps: Iterable[WorkoutStep], settings: AthleteSportSettings) -> str:
    return "\n".join(render_step(step, settings) for step in steps)


def render_workout(document: WorkoutDocument, settings: AthleteSportSettings) -> str:
    """Render every top-level step of a workout document.

    Args:
        document: Parsed workout document.
        settings: Athlete thresholds and zone tables.

    Returns:
        str: Newline-joined summary; empty for a document without steps.
    """

    return render_steps(document.steps, settings)
