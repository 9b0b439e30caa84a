"""Insights command."""

import click

from ..models.statistics import Period, Weekday
from ..services.insights import (
    DEFAULT_LIMIT,
    achievement_progress,
    gym_visit_rankings,
    period_summary,
    personal_bests,
    recent_visits,
    time_distribution,
    weekly_pattern,
)
from ..services.statistics import compute_statistics
from .base import (
    echo_info,
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
@click.option(
    "--limit", "-n", default=DEFAULT_LIMIT, show_default=True, type=click.IntRange(min=1),
    help="Number of gyms and recent visits to show.",
)
@json_option
@click.pass_context
def insights(
    ctx: click.Context,
    history_file: str,
    now_value: str | None,
    week_start: Weekday,
    limit: int,
    as_json: bool,
):
    """Show gym rankings, visit patterns and achievements.

    Examples:

        gymtopia-stats insights history.json

        gymtopia-stats insights history.json --limit 10 --json
    """
    history = open_history(ctx, history_file)
    now = resolve_now(ctx, now_value)
    sessions, exercises = history.sessions, history.exercises_by_session

    snapshot = compute_statistics(sessions, exercises, now, week_start=week_start)
    rankings = gym_visit_rankings(sessions, now, history.gym_names, limit=limit)
    recent = recent_visits(sessions, exercises, history.gym_names, limit=limit)
    pattern = weekly_pattern(sessions)
    slots = time_distribution(sessions)
    achievements = achievement_progress(snapshot)
    summaries = [
        period_summary(sessions, exercises, now, period, week_start=week_start)
        for period in Period
    ]
    bests = personal_bests(sessions, exercises)

    if as_json:
        echo_json(
            {
                "statistics": snapshot.to_dict(),
                "gym_rankings": [r.to_dict() for r in rankings],
                "recent_visits": [v.to_dict() for v in recent],
                "weekly_pattern": [d.to_dict() for d in pattern],
                "time_distribution": [s.to_dict() for s in slots],
                "achievements": [a.to_dict() for a in achievements],
                "period_summaries": [s.to_dict() for s in summaries],
                "personal_bests": bests.to_dict(),
            }
        )
        return

    if not sessions:
        echo_info("No sessions recorded yet.")
        return

    click.echo()
    click.echo(click.style("Favorite gyms", bold=True))
    if rankings:
        click.echo(
            format_table(
                ["Gym", "Visits", "Share", "Last visit"],
                [[r.name, str(r.visits), f"{r.percentage}%", r.last_visit_label] for r in rankings],
            )
        )
    else:
        echo_info("No visits are tagged with a gym.")

    click.echo()
    click.echo(click.style("Recent visits", bold=True))
    click.echo(
        format_table(
            ["Date", "Gym", "Duration", "Volume", "Exercises"],
            [
                [
                    f"{v.started_at:%Y-%m-%d}",
                    v.gym_name,
                    v.duration_display,
                    f"{v.total_weight:,} kg",
                    ", ".join(v.exercises) or "-",
                ]
                for v in recent
            ],
        )
    )

    click.echo()
    click.echo(click.style("Weekly pattern", bold=True))
    click.echo(
        format_table(
            ["Day", "Visits", "Avg/week"],
            [[d.day, str(d.visits), str(d.avg)] for d in pattern],
        )
    )

    click.echo()
    click.echo(click.style("Time of day", bold=True))
    click.echo(
        format_table(
            ["Slot", "Visits", "Share"],
            [[s.label, str(s.visits), f"{s.percentage}%"] for s in slots],
        )
    )

    click.echo()
    click.echo(click.style("Current periods", bold=True))
    click.echo(
        format_table(
            ["Period", "Visits", "Hours", "Volume", "Gyms", "Exercises"],
            [
                [
                    s.period.value,
                    str(s.visits),
                    str(s.duration_hours),
                    f"{s.total_weight:,} kg",
                    str(s.unique_gyms),
                    str(s.unique_exercises),
                ]
                for s in summaries
            ],
        )
    )

    click.echo()
    click.echo(click.style("Personal bests", bold=True))
    click.echo(f"  Best day:         {bests.max_daily_weight:,} kg")
    click.echo(f"  Longest session:  {bests.max_session_duration} min")
    click.echo(f"  Most exercises:   {bests.most_exercises_per_session}")

    click.echo()
    click.echo(click.style("Achievements", bold=True))
    for a in achievements:
        done = click.style(" [done]", fg="green") if a.is_complete else ""
        click.echo(f"  {a.name}: {a.percentage:.0f}%{done}")
