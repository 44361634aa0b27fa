"""
Ergast-based race data ingestion package.

Fetches season schedules and race results from the Ergast API and turns
them into validated domain entities:
  - api/f1/{season}.json                 → list[Race]
  - api/f1/{season}/{round}/results.json → RaceResults (20 finishers)
"""
from pickem.ingest_ergast.errors import (
    DecodeError,
    RaceDataError,
    RequestTimeoutError,
    TransportError,
    UnsupportedPaginationError,
    UpstreamError,
    ValidationError,
)
from pickem.ingest_ergast.race_data import (
    ErgastRaceDataClient,
    RaceDataClient,
    StaticRaceDataClient,
)

__all__ = [
    "DecodeError",
    "ErgastRaceDataClient",
    "RaceDataClient",
    "RaceDataError",
    "RequestTimeoutError",
    "StaticRaceDataClient",
    "TransportError",
    "UnsupportedPaginationError",
    "UpstreamError",
    "ValidationError",
]
