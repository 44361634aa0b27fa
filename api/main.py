"""
FastAPI handlers for the pick'em front end.
Each route calls the race-data client once and renders what it returns.
"""
from functools import lru_cache

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from pickem.config import cfg
from pickem.domain.race import RaceResults
from pickem.ingest_ergast import (
    ErgastRaceDataClient,
    RaceDataClient,
    RaceDataError,
    RequestTimeoutError,
    TransportError,
)
from pickem.utils.logger import logger

app = FastAPI(title="F1 Pick'em API", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=cfg.server.cors_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@lru_cache(maxsize=1)
def get_race_data_client() -> RaceDataClient:
    return ErgastRaceDataClient()


def _status_for(error: RaceDataError) -> int:
    if isinstance(error, RequestTimeoutError):
        return 504
    if isinstance(error, TransportError):
        return 503
    return 502


@app.exception_handler(RaceDataError)
async def race_data_error_handler(request: Request, exc: RaceDataError) -> JSONResponse:
    status = _status_for(exc)
    logger.error(f"{request.url.path} failed with {status}: {exc}")
    return JSONResponse(status_code=status, content={"detail": str(exc)})


# ── Races ─────────────────────────────────────────────────────────────────────

@app.get("/api/seasons/{season}/races")
def list_races(season: str, client: RaceDataClient = Depends(get_race_data_client)):
    """Race schedule of a season; empty while it is not published."""
    races = client.get_races(season)
    return {"races": [race.model_dump(by_alias=True, mode="json") for race in races]}


@app.get("/api/seasons/{season}/races/{race_number}/results")
def race_results(
    season: str,
    race_number: str,
    client: RaceDataClient = Depends(get_race_data_client),
):
    """Finishing order of one race."""
    results: RaceResults | None = client.get_race_results(season, race_number)
    if results is None:
        raise HTTPException(404, f"No results yet for season {season}, race {race_number}")
    return results.model_dump(by_alias=True, mode="json")


@app.get("/api/health")
def health():
    return {"status": "ok"}
