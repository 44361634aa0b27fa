"""
Race schedules and results, normalized into domain entities.

`RaceDataClient` is the capability the rest of the application depends on.
`ErgastRaceDataClient` serves it from the Ergast API; `StaticRaceDataClient`
serves fixed fixtures without touching the network.

The Ergast responses are treated as an uncontrolled contract: counts,
position ranges and pagination are checked and any surprise is raised as a
classified error instead of being patched over.
"""
import re
from abc import ABC, abstractmethod
from datetime import date
from typing import Optional

from pydantic import ValidationError as PydanticValidationError

from pickem.domain.race import RESULTS_PER_RACE, Race, RaceResults, Races
from pickem.ingest_ergast.api_client import ErgastApiClient
from pickem.ingest_ergast.errors import DecodeError, UnsupportedPaginationError, ValidationError
from pickem.ingest_ergast.schemas import ResultsResponse, ScheduleResponse
from pickem.utils.logger import logger
from pickem.utils.time_utils import parse_calendar_date, parse_rfc3339


_INTEGER = re.compile(r"[+-]?\d+", re.ASCII)


def _parse_int(value: str, what: str) -> int:
    """Parse an integer sent as text; ValidationError if it is anything else."""
    if not _INTEGER.fullmatch(value):
        raise ValidationError(f"{what} is not an integer: {value!r}")
    return int(value)


def _parse_date(value: str, what: str) -> date:
    try:
        return parse_calendar_date(value)
    except ValueError as e:
        raise ValidationError(f"{what} is not a calendar date: {value!r}") from e


# ── Decoding ──────────────────────────────────────────────────────────────────

def decode_schedule(body: str | bytes) -> ScheduleResponse:
    """Decode a schedule body, raising DecodeError on bad JSON or shape."""
    try:
        return ScheduleResponse.model_validate_json(body)
    except PydanticValidationError as e:
        logger.error(f"Unable to parse schedule response: {e}")
        raise DecodeError(f"unexpected schedule response: {e}") from e


def decode_results(body: str | bytes) -> ResultsResponse:
    """Decode a results body, raising DecodeError on bad JSON or shape."""
    try:
        return ResultsResponse.model_validate_json(body)
    except PydanticValidationError as e:
        logger.error(f"Unable to parse results response: {e}")
        raise DecodeError(f"unexpected results response: {e}") from e


# ── Transformation ────────────────────────────────────────────────────────────

def build_races(season: str, response: ScheduleResponse) -> Races:
    """
    Turn a decoded schedule into Race entities, in upstream order.

    Args:
        season: Season the schedule was requested for. Used for the race key
            when an entry does not carry its own season.
        response: Decoded schedule response.

    Returns:
        List of races; empty when the schedule is not published yet.

    Raises:
        UnsupportedPaginationError: the schedule does not fit in one page.
        ValidationError: a round, date or start time cannot be parsed.
    """
    mr_data = response.mr_data
    entries = mr_data.race_table.races
    if not entries:
        logger.info(f"No races scheduled for season {season} yet.")
        return []

    total = _parse_int(mr_data.total, "schedule total")
    limit = _parse_int(mr_data.limit, "schedule limit")
    if total >= limit:
        logger.error(f"Unhandled paginated race schedule, season: {season}")
        raise UnsupportedPaginationError(season, total, limit)

    races: Races = []
    for entry in entries:
        # validity check only; the round stays text
        _parse_int(entry.round, f"round of {entry.race_name!r}")

        datetime_str = f"{entry.date}T{entry.time}"
        try:
            start_time = parse_rfc3339(datetime_str)
        except ValueError as e:
            logger.error(f"Failed to parse race start time: {entry!r}")
            raise ValidationError(
                f"start time of round {entry.round} is not a timestamp: {datetime_str!r}"
            ) from e

        races.append(Race(
            season=entry.season or season,
            race_number=entry.round,
            race_name=entry.race_name,
            race_date=_parse_date(entry.date, f"date of round {entry.round}"),
            start_time=start_time,
        ))

    return races


def build_race_results(
    season: str,
    race_number: str,
    response: ResultsResponse,
) -> Optional[RaceResults]:
    """
    Turn a decoded results response into a full finishing order.

    Returns None while the race has no published results. Anything short of
    exactly one race with a complete, gap-free grid of 20 is rejected.
    """
    entries = response.mr_data.race_table.races
    if not entries:
        return None

    if len(entries) != 1:
        logger.error(f"Unexpected number of races ({len(entries)}) for {season}/{race_number}")
        raise ValidationError(f"expected one race, got {len(entries)}")

    race = entries[0]
    if not race.results:
        return None

    if len(race.results) != RESULTS_PER_RACE:
        logger.error(
            f"Unexpected number of race results ({len(race.results)}) for {season}/{race_number}"
        )
        raise ValidationError(
            f"expected {RESULTS_PER_RACE} race results, got {len(race.results)}"
        )

    results = [""] * RESULTS_PER_RACE
    for result in race.results:
        position = _parse_int(result.position, "result position")
        if not 1 <= position <= RESULTS_PER_RACE:
            logger.error(f"Invalid position {position} in results for {season}/{race_number}")
            raise ValidationError(f"position out of range: {position}")
        if results[position - 1]:
            raise ValidationError(f"position {position} reported twice")
        results[position - 1] = f"{result.driver.given_name} {result.driver.family_name}"

    try:
        return RaceResults(
            season=season,
            race_number=race_number,
            race_date=_parse_date(race.date, f"date of {season}/{race_number}"),
            results=tuple(results),
        )
    except PydanticValidationError as e:
        raise ValidationError(f"incomplete results for {season}/{race_number}: {e}") from e


# ── Clients ───────────────────────────────────────────────────────────────────

class RaceDataClient(ABC):
    """Access to race schedules and results, hiding where they come from."""

    @abstractmethod
    def get_races(self, season: str, timeout: float | None = None) -> Races:
        """All races of a season in schedule order; empty if not published."""

    @abstractmethod
    def get_race_results(
        self,
        season: str,
        race_number: str,
        timeout: float | None = None,
    ) -> Optional[RaceResults]:
        """Finishing order of one race, or None if not available yet."""


class ErgastRaceDataClient(RaceDataClient):
    """
    Race data served from the Ergast API.

    Each call is a single request; nothing is cached or retried, so a
    failure reaches the caller as soon as it happens.
    """

    def __init__(self, api: ErgastApiClient | None = None, base_url: str | None = None) -> None:
        self.api = api or ErgastApiClient(base_url=base_url)

    def get_races(self, season: str, timeout: float | None = None) -> Races:
        logger.info(f"Fetching races for season {season}...")
        body = self.api.get(f"api/f1/{season}.json", timeout=timeout)
        races = build_races(season, decode_schedule(body))
        logger.info(f"Found {len(races)} races for season {season}.")
        return races

    def get_race_results(
        self,
        season: str,
        race_number: str,
        timeout: float | None = None,
    ) -> Optional[RaceResults]:
        logger.info(f"Fetching race results for season {season}, race {race_number}...")
        body = self.api.get(f"api/f1/{season}/{race_number}/results.json", timeout=timeout)
        results = build_race_results(season, race_number, decode_results(body))
        if results is None:
            logger.info(f"No results yet for season {season}, race {race_number}.")
        return results


class StaticRaceDataClient(RaceDataClient):
    """Serves fixed races and results from memory."""

    def __init__(
        self,
        races: dict[str, Races] | None = None,
        results: dict[tuple[str, str], RaceResults] | None = None,
    ) -> None:
        self._races = dict(races or {})
        self._results = dict(results or {})

    def get_races(self, season: str, timeout: float | None = None) -> Races:
        return list(self._races.get(season, []))

    def get_race_results(
        self,
        season: str,
        race_number: str,
        timeout: float | None = None,
    ) -> Optional[RaceResults]:
        return self._results.get((season, race_number))
