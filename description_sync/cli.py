"""CLI entrypoint for rendering workout summaries."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import click
from pydantic import ValidationError

from description_sync.config import settings
from description_sync.data.intervals_payload import parse_activity, parse_sport_settings, parse_workout
from description_sync.data.matching import match_workout
from description_sync.data.sources import NotFoundError
from description_sync.summary.description import merge_summary
from description_sync.summary.renderer import render_workout

logging.basicConfig(level=getattr(logging, settings.log_level, logging.INFO))
LOGGER = logging.getLogger(__name__)

JSON_FILE = click.Path(exists=True, dir_okay=False, path_type=Path)


def _load_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise click.BadParameter(f"{path} is not valid JSON: {exc}") from exc


def _render(workout_file: Path, settings_file: Path) -> str:
    try:
        workout = parse_workout(_load_json(workout_file))
        sport_settings = parse_sport_settings(_load_json(settings_file))
    except ValidationError as exc:
        raise click.ClickException(str(exc)) from exc
    return render_workout(workout.document, sport_settings)


@click.group()
def cli() -> None:
    """Workout summary CLI."""


@cli.command("render")
@click.argument("workout_file", type=JSON_FILE)
@click.argument("settings_file", type=JSON_FILE)
def render_cmd(workout_file: Path, settings_file: Path) -> None:
    """Print the summary of a planned workout."""

    click.echo(_render(workout_file, settings_file))


@cli.command("describe")
@click.argument("workout_file", type=JSON_FILE)
@click.argument("settings_file", type=JSON_FILE)
@click.option("--existing", default="", help="Current activity description")
def describe_cmd(workout_file: Path, settings_file: Path, existing: str) -> None:
    """Print an activity description with the summary block appended."""

    summary = _render(workout_file, settings_file)
    click.echo(merge_summary(existing, summary, settings.summary_separator))


@cli.command("match")
@click.argument("activity_file", type=JSON_FILE)
@click.argument("events_file", type=JSON_FILE)
@click.option("--tolerance", default=settings.workout_match_tolerance, type=float, show_default=True)
def match_cmd(activity_file: Path, events_file: Path, tolerance: float) -> None:
    """Find the planned workout for a recorded activity."""

    try:
        activity = parse_activity(_load_json(activity_file))
        workouts = [parse_workout(event) for event in _load_json(events_file)]
    except ValidationError as exc:
        raise click.ClickException(str(exc)) from exc

    try:
        workout = match_workout(workouts, activity, tolerance=tolerance)
    except NotFoundError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(json.dumps({"workout_id": workout.id, "name": workout.name}, indent=2))


if __name__ == "__main__":
    cli()
