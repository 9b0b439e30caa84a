"""CLI entry point for gymtopia-stats."""

import logging

import click

from . import __version__
from .commands import insights, serve, stats, validate


@click.group()
@click.version_option(version=__version__, prog_name="gymtopia-stats")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def main(verbose: bool):
    """gymtopia-stats: workout statistics and exercise validation.

    Example usage:

        # Aggregate statistics from an exported history
        gymtopia-stats stats history.json

        # Gym rankings, patterns and achievements
        gymtopia-stats insights history.json

        # Sanity-check an entry before saving it
        gymtopia-stats validate strength "Bench Press" -w 100 -r 8 -s 4

        # Serve the JSON API
        gymtopia-stats serve
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


main.add_command(stats)
main.add_command(insights)
main.add_command(validate)
main.add_command(serve)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
