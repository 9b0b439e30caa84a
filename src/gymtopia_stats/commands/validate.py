"""Exercise validation commands."""

import click

from ..models.limits import ValidationResult
from ..services.validation import validate_cardio, validate_exercise
from .base import echo_error, echo_json, echo_success, echo_warning, json_option


def _report(ctx: click.Context, result: ValidationResult, as_json: bool) -> None:
    if as_json:
        echo_json(result.to_dict())
    else:
        for message in result.errors:
            echo_error(message)
        for message in result.warnings:
            echo_warning(message)
        if result.is_valid and not result.warnings:
            echo_success("Entry looks plausible.")
        elif result.is_valid:
            echo_success("Entry accepted with warnings.")

    if not result.is_valid:
        ctx.exit(1)


@click.group()
def validate():
    """Check a logged exercise before saving it.

    Exits with status 1 when the entry has errors. Warnings alone do not
    change the exit status.
    """
    pass


@validate.command("strength")
@click.argument("exercise_name")
@click.option("--category", "-c", default=None, help="Muscle-group category (chest, back, legs, ...).")
@click.option("--weight", "-w", type=float, required=True, help="Weight in kg.")
@click.option("--reps", "-r", type=int, required=True, help="Reps per set.")
@click.option("--sets", "-s", type=int, required=True, help="Number of sets.")
@json_option
@click.pass_context
def strength(
    ctx: click.Context,
    exercise_name: str,
    category: str | None,
    weight: float,
    reps: int,
    sets: int,
    as_json: bool,
):
    """Validate a strength entry.

    Examples:

        gymtopia-stats validate strength "Bench Press" -w 100 -r 8 -s 4

        gymtopia-stats validate strength "Cable Fly" -c chest -w 30 -r 12 -s 3
    """
    result = validate_exercise(exercise_name, category, weight, reps, sets)
    _report(ctx, result, as_json)


@validate.command("cardio")
@click.argument("exercise_name")
@click.option("--duration", "-d", type=float, required=True, help="Duration in minutes.")
@click.option("--distance", type=float, default=None, help="Distance in km.")
@click.option("--speed", type=float, default=None, help="Average speed in km/h.")
@json_option
@click.pass_context
def cardio(
    ctx: click.Context,
    exercise_name: str,
    duration: float,
    distance: float | None,
    speed: float | None,
    as_json: bool,
):
    """Validate a cardio entry.

    Examples:

        gymtopia-stats validate cardio Running -d 45 --distance 10 --speed 13.3
    """
    result = validate_cardio(exercise_name, duration, distance, speed)
    _report(ctx, result, as_json)
