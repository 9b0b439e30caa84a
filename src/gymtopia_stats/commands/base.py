"""Shared CLI utilities."""

import json
from datetime import datetime, timezone

import click

from ..data import WorkoutHistory, load_history
from ..models.sessions import parse_timestamp
from ..models.statistics import Weekday


def echo_success(message: str) -> None:
    """Print a success message."""
    click.echo(click.style("[OK] ", fg="green") + message)


def echo_error(message: str) -> None:
    """Print an error message."""
    click.echo(click.style("[ERROR] ", fg="red") + message, err=True)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(click.style("[INFO] ", fg="blue") + message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.echo(click.style("[WARN] ", fg="yellow") + message)


def echo_json(data) -> None:
    """Print data as indented JSON."""
    click.echo(json.dumps(data, indent=2, ensure_ascii=False))


def format_table(headers: list[str], rows: list[list[str]], padding: int = 2) -> str:
    """Format data as a simple table."""
    if not rows:
        return ""

    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(str(cell)))

    lines = ["".join(h.ljust(widths[i] + padding) for i, h in enumerate(headers))]
    lines.append("".join("-" * w + " " * padding for w in widths))
    for row in rows:
        lines.append(
            "".join(str(cell).ljust(widths[i] + padding) for i, cell in enumerate(row))
        )

    return "\n".join(line.rstrip() for line in lines)


def open_history(ctx: click.Context, path: str) -> WorkoutHistory:
    """Load a history file, exiting with an error message on failure."""
    try:
        history = load_history(path)
    except (FileNotFoundError, ValueError) as e:
        echo_error(str(e))
        ctx.exit(1)

    if history.skipped:
        echo_warning(f"Skipped {history.skipped} malformed record(s) in {path}")
    return history


def resolve_now(ctx: click.Context, value: str | None) -> datetime:
    """Parse the --now option, defaulting to the current UTC time."""
    if value is None:
        return datetime.now(timezone.utc)
    try:
        return parse_timestamp(value)
    except ValueError as e:
        echo_error(str(e))
        ctx.exit(1)


class WeekdayParamType(click.ParamType):
    """Click parameter accepting weekday names like ``sunday`` or ``mon``."""

    name = "weekday"

    def convert(self, value, param, ctx):
        try:
            return Weekday.parse(value)
        except ValueError:
            self.fail(f"{value!r} is not a weekday name", param, ctx)


WEEKDAY = WeekdayParamType()


now_option = click.option(
    "--now",
    "now_value",
    default=None,
    metavar="TIMESTAMP",
    help="Reference time (ISO 8601, UTC if no offset). Defaults to the current time.",
)
week_start_option = click.option(
    "--week-start",
    type=WEEKDAY,
    default="sunday",
    show_default=True,
    help="First day of the week for weekly counts.",
)
json_option = click.option("--json", "as_json", is_flag=True, help="Output JSON.")
