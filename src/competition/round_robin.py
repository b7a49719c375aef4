"""
Round-robin (league) fixture generation.
"""
import datetime
import logging
from typing import List, Optional, Sequence

from .errors import SchedulingError
from .models import ScheduledMatch

logger = logging.getLogger(__name__)

BYE = None
DEFAULT_VENUES = ["Court 1"]
DEFAULT_LEAGUE_DAY_START = datetime.time(9, 0)


def start_of_day(start, day_start: datetime.time) -> datetime.datetime:
    """Combine the date part of start with the daily start time."""
    if isinstance(start, datetime.datetime):
        return datetime.datetime.combine(start.date(), day_start, tzinfo=start.tzinfo)
    return datetime.datetime.combine(start, day_start)


def check_unique_team_ids(team_ids: Sequence[str]):
    seen = set()
    duplicates = []
    for team_id in team_ids:
        if team_id in seen and team_id not in duplicates:
            duplicates.append(team_id)
        seen.add(team_id)
    if duplicates:
        raise SchedulingError(f"Duplicate team IDs: {', '.join(map(str, duplicates))}")


def round_robin_pairings(team_ids: Sequence[str]) -> List[List[tuple]]:
    """
    Pair every team with every other team once using the circle method.

    Returns one list of (home, away) tuples per round. With an odd number of
    teams the team paired with the bye sits the round out.
    """
    teams = list(team_ids)
    if len(teams) < 2:
        return []
    if len(teams) % 2 != 0:
        teams.append(BYE)

    total = len(teams)
    rotating = total - 1
    rounds = []
    for round_index in range(rotating):
        pairings = []
        for slot in range(total // 2):
            home = (round_index + slot) % rotating
            # Slot 0 always meets the fixed last entry
            away = rotating if slot == 0 else (rotating - slot + round_index) % rotating
            home_team, away_team = teams[home], teams[away]
            if home_team is BYE or away_team is BYE:
                continue
            pairings.append((home_team, away_team))
        rounds.append(pairings)
    return rounds


def generate_league_schedule(team_ids: Sequence[str],
                             start,
                             match_duration: int = 60,
                             break_duration: int = 15,
                             matches_per_day: int = 10,
                             venues: Optional[Sequence[str]] = None,
                             day_start: datetime.time = DEFAULT_LEAGUE_DAY_START) -> List[ScheduledMatch]:
    """
    Generate a full league calendar where every team meets every other team once.

    Matches run back to back from day_start, each one match_duration plus
    break_duration after the previous. Once matches_per_day have been placed
    the calendar moves to the next day and the venue rotation restarts.
    """
    venues = list(DEFAULT_VENUES if venues is None else venues)
    if len(team_ids) < 2:
        return []
    check_unique_team_ids(team_ids)
    if matches_per_day < 1:
        raise SchedulingError(f"matches_per_day must be at least 1, got {matches_per_day}")
    if not venues:
        raise SchedulingError("At least one venue is required")

    slot_length = datetime.timedelta(minutes=match_duration + break_duration)
    current_time = start_of_day(start, day_start)
    matches = []
    match_number = 1
    matches_today = 0
    venue_index = 0

    rounds = round_robin_pairings(team_ids)
    for round_number, pairings in enumerate(rounds, start=1):
        for home_team, away_team in pairings:
            if matches_today >= matches_per_day:
                current_time = start_of_day(current_time + datetime.timedelta(days=1), day_start)
                matches_today = 0
                venue_index = 0

            matches.append(ScheduledMatch(
                match_number=match_number,
                round=round_number,
                home_team_id=home_team,
                away_team_id=away_team,
                scheduled_time=current_time,
                venue=venues[venue_index % len(venues)],
            ))
            match_number += 1
            current_time += slot_length
            matches_today += 1
            venue_index += 1

    logger.debug(f"Generated {len(matches)} league matches over {len(rounds)} rounds for {len(team_ids)} teams")
    return matches
