"""
Domain entities shared by the race-data client and its callers.
"""
from pickem.domain.race import RESULTS_PER_RACE, Race, RaceResults, Races, get_race_id

__all__ = ["RESULTS_PER_RACE", "Race", "RaceResults", "Races", "get_race_id"]
