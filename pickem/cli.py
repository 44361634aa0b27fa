"""
Click-based CLI for the race-data layer.

Usage:
    python -m pickem.cli races --season 2022
    python -m pickem.cli results --season 2022 --round 1
"""
import json
import sys

import click

from pickem.ingest_ergast import ErgastRaceDataClient, RaceDataError
from pickem.utils.logger import logger, setup_logger


def _echo_json(payload) -> None:
    click.echo(json.dumps(payload, indent=2))


@click.group()
@click.option("--base-url", default=None, help="Ergast base URL (defaults to ERGAST_BASE_URL).")
@click.option("--timeout", default=None, type=float, help="Request timeout in seconds.")
@click.pass_context
def cli(ctx: click.Context, base_url: str | None, timeout: float | None) -> None:
    """F1 Pick'em race data"""
    setup_logger()
    ctx.obj = {"client": ErgastRaceDataClient(base_url=base_url), "timeout": timeout}


@cli.command()
@click.option("--season", required=True, help="Season, e.g. 2022 or 'current'.")
@click.pass_obj
def races(obj: dict, season: str) -> None:
    """Print the race schedule of a season."""
    try:
        schedule = obj["client"].get_races(season, timeout=obj["timeout"])
    except RaceDataError as e:
        logger.error(f"Could not fetch races for {season}: {e}")
        sys.exit(1)
    _echo_json([race.model_dump(by_alias=True, mode="json") for race in schedule])


@cli.command()
@click.option("--season", required=True, help="Season, e.g. 2022.")
@click.option("--round", "race_number", required=True, help="Round within the season.")
@click.pass_obj
def results(obj: dict, season: str, race_number: str) -> None:
    """Print the finishing order of a race (null if not available yet)."""
    try:
        race_results = obj["client"].get_race_results(season, race_number, timeout=obj["timeout"])
    except RaceDataError as e:
        logger.error(f"Could not fetch results for {season}/{race_number}: {e}")
        sys.exit(1)
    if race_results is None:
        _echo_json(None)
        return
    _echo_json(race_results.model_dump(by_alias=True, mode="json"))


if __name__ == "__main__":
    cli()
