"""Statistics command."""

import click

from ..models.statistics import Weekday
from ..services.statistics import compute_statistics
from .base import (
    echo_json,
    format_table,
    json_option,
    now_option,
    open_history,
    resolve_now,
    week_start_option,
)


@click.command()
@click.argument("history_file", type=click.Path(dir_okay=False))
@now_option
@week_start_option
@json_option
@click.pass_context
def stats(
    ctx: click.Context,
    history_file: str,
    now_value: str | None,
    week_start: Weekday,
    as_json: bool,
):
    """Show aggregate workout statistics for a history file.

    HISTORY_FILE is a JSON export with "sessions", "exercises" and
    optionally "gyms".

    Examples:

        # Statistics as of right now
        gymtopia-stats stats history.json

        # Reproducible output for a fixed date, weeks starting Monday
        gymtopia-stats stats history.json --now 2024-03-15T12:00:00Z --week-start monday
    """
    history = open_history(ctx, history_file)
    now = resolve_now(ctx, now_value)

    snapshot = compute_statistics(
        history.sessions, history.exercises_by_session, now, week_start=week_start
    )

    if as_json:
        echo_json(snapshot.to_dict())
        return

    click.echo()
    click.echo(click.style(f"Workout statistics as of {now:%Y-%m-%d %H:%M} UTC", bold=True))
    click.echo("=" * 50)
    rows = [
        ["Total visits", str(snapshot.total_visits)],
        ["This week", str(snapshot.weekly_visits)],
        ["This month", str(snapshot.monthly_visits)],
        ["This year", str(snapshot.yearly_visits)],
        ["Current streak", f"{snapshot.current_streak} days"],
        ["Longest streak", f"{snapshot.longest_streak} days"],
        ["Total volume", f"{snapshot.total_weight:,} kg"],
        ["Total time", f"{snapshot.total_duration_hours} h"],
        ["Average visit", f"{snapshot.avg_duration_minutes} min"],
    ]
    click.echo(format_table(["Metric", "Value"], rows))
