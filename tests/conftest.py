"""
Pytest fixtures for race-data tests.

Payloads mirror the Ergast JSON layout with every scalar sent as text.
"""
from datetime import date, datetime, timezone
from typing import Any, Callable

import pytest

from pickem.domain.race import Race, RaceResults


DRIVERS_2022_R1 = [
    ("Max", "Verstappen"),
    ("Charles", "Leclerc"),
    ("Carlos", "Sainz"),
    ("Sergio", "Pérez"),
    ("George", "Russell"),
    ("Lewis", "Hamilton"),
    ("Lando", "Norris"),
    ("Esteban", "Ocon"),
    ("Fernando", "Alonso"),
    ("Valtteri", "Bottas"),
    ("Daniel", "Ricciardo"),
    ("Sebastian", "Vettel"),
    ("Kevin", "Magnussen"),
    ("Pierre", "Gasly"),
    ("Lance", "Stroll"),
    ("Mick", "Schumacher"),
    ("Yuki", "Tsunoda"),
    ("Guanyu", "Zhou"),
    ("Alexander", "Albon"),
    ("Nicholas", "Latifi"),
]


def race_entry(
    season: str = "2022",
    round: str = "1",
    race_name: str = "Bahrain Grand Prix",
    date: str = "2022-03-20",
    time: str = "15:00:00Z",
) -> dict[str, Any]:
    return {
        "season": season,
        "round": round,
        "url": "http://en.wikipedia.org/wiki/2022_Bahrain_Grand_Prix",
        "raceName": race_name,
        "Circuit": {
            "circuitId": "bahrain",
            "url": "http://en.wikipedia.org/wiki/Bahrain_International_Circuit",
            "circuitName": "Bahrain International Circuit",
            "Location": {"lat": "26.0325", "long": "50.5106", "locality": "Sakhir", "country": "Bahrain"},
        },
        "date": date,
        "time": time,
    }


def result_entry(position: str, given_name: str, family_name: str) -> dict[str, Any]:
    return {
        "number": "1",
        "position": position,
        "positionText": position,
        "points": "0",
        "Driver": {
            "driverId": family_name.lower(),
            "code": family_name[:3].upper(),
            "givenName": given_name,
            "familyName": family_name,
            "dateOfBirth": "1997-09-30",
            "nationality": "Dutch",
        },
        "Constructor": {"constructorId": "red_bull", "name": "Red Bull", "nationality": "Austrian"},
        "grid": "1",
        "laps": "57",
        "status": "Finished",
    }


@pytest.fixture
def make_schedule() -> Callable[..., dict]:
    """Build a schedule payload; total defaults to the number of races."""

    def _make(races: list[dict], limit: str = "30", total: str | None = None) -> dict:
        return {
            "MRData": {
                "xmlns": "http://ergast.com/mrd/1.5",
                "series": "f1",
                "url": "http://ergast.com/api/f1/2022.json",
                "limit": limit,
                "offset": "0",
                "total": str(len(races)) if total is None else total,
                "RaceTable": {"season": "2022", "Races": races},
            }
        }

    return _make


@pytest.fixture
def make_results() -> Callable[..., dict]:
    """Build a results payload from a list of race dicts (each may carry Results)."""

    def _make(races: list[dict]) -> dict:
        return {
            "MRData": {
                "xmlns": "http://ergast.com/mrd/1.5",
                "series": "f1",
                "url": "http://ergast.com/api/f1/2022/1/results.json",
                "limit": "30",
                "offset": "0",
                "total": "20",
                "RaceTable": {"season": "2022", "round": "1", "Races": races},
            }
        }

    return _make


@pytest.fixture
def full_results() -> list[dict]:
    """Twenty finishers, position i + 1 for DRIVERS_2022_R1[i]."""
    return [
        result_entry(str(i + 1), given, family)
        for i, (given, family) in enumerate(DRIVERS_2022_R1)
    ]


@pytest.fixture
def sample_race() -> Race:
    return Race(
        season="2022",
        race_number="1",
        race_name="Bahrain Grand Prix",
        race_date=date(2022, 3, 20),
        start_time=datetime(2022, 3, 20, 15, 0, tzinfo=timezone.utc),
    )


@pytest.fixture
def sample_results() -> RaceResults:
    return RaceResults(
        season="2022",
        race_number="1",
        race_date=date(2022, 3, 20),
        results=tuple(f"{given} {family}" for given, family in DRIVERS_2022_R1),
    )
