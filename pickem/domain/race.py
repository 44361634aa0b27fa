"""
Internal race entities, independent of any upstream wire format.

Entities are immutable and serialize with camelCase keys, which is the
contract the front end consumes.
"""
from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, computed_field, field_validator
from pydantic.alias_generators import to_camel


RESULTS_PER_RACE = 20


def get_race_id(season: str, race_number: str) -> str:
    """Deterministic key of a race within all seasons, e.g. '2022-1'."""
    return f"{season}-{race_number}"


class _Entity(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class Race(_Entity):
    season: str
    race_number: str
    race_name: str
    race_date: date
    start_time: datetime

    @computed_field(alias="raceId")
    @property
    def race_id(self) -> str:
        return get_race_id(self.season, self.race_number)

    @field_validator("start_time")
    @classmethod
    def _require_offset(cls, v: datetime) -> datetime:
        if v.tzinfo is None:
            raise ValueError("start_time must be timezone-aware")
        return v


Races = list[Race]


class RaceResults(_Entity):
    """Finishing order of one race: results[p - 1] is the driver placed p."""

    season: str
    race_number: str
    race_date: date
    results: tuple[str, ...]

    @field_validator("results")
    @classmethod
    def _require_full_grid(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        if len(v) != RESULTS_PER_RACE:
            raise ValueError(f"expected {RESULTS_PER_RACE} results, got {len(v)}")
        missing = [i + 1 for i, name in enumerate(v) if not name]
        if missing:
            raise ValueError(f"no driver for positions {missing}")
        return v

