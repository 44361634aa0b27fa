"""
Wire shapes of the Ergast schedule and results responses.

Every scalar is kept as text exactly as the API sends it; numeric and
date interpretation happens in the race-data client. Absent scalars
default to "" so that gaps show up as validation failures there.
"""
from pydantic import BaseModel, ConfigDict, Field


class _Wire(BaseModel):
    model_config = ConfigDict(extra="ignore", strict=True, populate_by_name=True)


# ── Shared pieces ─────────────────────────────────────────────────────────────

class Location(_Wire):
    lat: str = ""
    long: str = ""
    locality: str = ""
    country: str = ""


class Circuit(_Wire):
    circuit_id: str = Field(default="", alias="circuitId")
    url: str = ""
    circuit_name: str = Field(default="", alias="circuitName")
    location: Location = Field(default_factory=Location, alias="Location")


class SessionTime(_Wire):
    date: str = ""
    time: str = ""


class _RaceBase(_Wire):
    season: str = ""
    round: str = ""
    url: str = ""
    race_name: str = Field(default="", alias="raceName")
    circuit: Circuit = Field(default_factory=Circuit, alias="Circuit")
    date: str = ""
    time: str = ""


# ── Schedule: /api/f1/{season}.json ───────────────────────────────────────────

class ScheduledRace(_RaceBase):
    first_practice: SessionTime | None = Field(default=None, alias="FirstPractice")
    second_practice: SessionTime | None = Field(default=None, alias="SecondPractice")
    third_practice: SessionTime | None = Field(default=None, alias="ThirdPractice")
    qualifying: SessionTime | None = Field(default=None, alias="Qualifying")
    sprint: SessionTime | None = Field(default=None, alias="Sprint")


class ScheduleRaceTable(_Wire):
    season: str = ""
    races: list[ScheduledRace] = Field(alias="Races")


class ScheduleMRData(_Wire):
    xmlns: str = ""
    series: str = ""
    url: str = ""
    limit: str
    offset: str = ""
    total: str
    race_table: ScheduleRaceTable = Field(alias="RaceTable")


class ScheduleResponse(_Wire):
    mr_data: ScheduleMRData = Field(alias="MRData")


# ── Results: /api/f1/{season}/{round}/results.json ────────────────────────────

class Driver(_Wire):
    driver_id: str = Field(default="", alias="driverId")
    permanent_number: str = Field(default="", alias="permanentNumber")
    code: str = ""
    url: str = ""
    given_name: str = Field(default="", alias="givenName")
    family_name: str = Field(default="", alias="familyName")
    date_of_birth: str = Field(default="", alias="dateOfBirth")
    nationality: str = ""


class Constructor(_Wire):
    constructor_id: str = Field(default="", alias="constructorId")
    url: str = ""
    name: str = ""
    nationality: str = ""


class RaceTime(_Wire):
    millis: str = ""
    time: str = ""


class LapTime(_Wire):
    time: str = ""


class AverageSpeed(_Wire):
    units: str = ""
    speed: str = ""


class FastestLap(_Wire):
    rank: str = ""
    lap: str = ""
    time: LapTime | None = Field(default=None, alias="Time")
    average_speed: AverageSpeed | None = Field(default=None, alias="AverageSpeed")


class Result(_Wire):
    number: str = ""
    position: str = ""
    position_text: str = Field(default="", alias="positionText")
    points: str = ""
    driver: Driver = Field(alias="Driver")
    constructor: Constructor | None = Field(default=None, alias="Constructor")
    grid: str = ""
    laps: str = ""
    status: str = ""
    time: RaceTime | None = Field(default=None, alias="Time")
    fastest_lap: FastestLap | None = Field(default=None, alias="FastestLap")


class ResultsRace(_RaceBase):
    results: list[Result] = Field(default_factory=list, alias="Results")


class ResultsRaceTable(_Wire):
    season: str = ""
    round: str = ""
    races: list[ResultsRace] = Field(alias="Races")


class ResultsMRData(_Wire):
    xmlns: str = ""
    series: str = ""
    url: str = ""
    limit: str = ""
    offset: str = ""
    total: str = ""
    race_table: ResultsRaceTable = Field(alias="RaceTable")


class ResultsResponse(_Wire):
    mr_data: ResultsMRData = Field(alias="MRData")
