"""
Single elimination bracket generation.
"""
import datetime
import logging
import math
from typing import Dict, List, Sequence

from .models import ScheduledMatch
from .placeholders import loser_of, winner_of
from .round_robin import check_unique_team_ids, start_of_day
from .rounds import SEMIFINAL, THIRD_PLACE, get_round_names
from .seeding import get_bracket_seeding

logger = logging.getLogger(__name__)

DEFAULT_BRACKET_VENUE = "Court 1"
DEFAULT_BRACKET_DAY_START = datetime.time(10, 0)


def calculate_bracket_size(num_teams: int) -> int:
    """Calculate the bracket size (next power of 2)."""
    if num_teams <= 0:
        return 0
    return 2 ** math.ceil(math.log2(num_teams))


def calculate_byes(num_teams: int) -> int:
    """Calculate number of byes needed."""
    return calculate_bracket_size(num_teams) - num_teams


def is_perfect_bracket(num_teams: int) -> bool:
    return num_teams >= 2 and (num_teams & (num_teams - 1)) == 0


def has_preliminary_round(num_teams: int) -> bool:
    """True when some teams must play an extra round while higher seeds wait."""
    return not is_perfect_bracket(num_teams) and calculate_byes(num_teams) > 0


def get_bracket_info(num_teams: int) -> Dict:
    """
    Summarize the shape of a bracket for num_teams entrants.

    Returns dict with:
    - 'bracket_size': slots in round 1
    - 'total_rounds': number of rounds
    - 'byes': teams advancing from round 1 without playing
    - 'is_perfect': num_teams is a power of two
    - 'has_preliminary': round 1 only thins the field
    - 'round_names': one name per round
    - 'total_matches': matches excluding a third place match
    """
    if num_teams < 2:
        return {
            'bracket_size': 0,
            'total_rounds': 0,
            'byes': 0,
            'is_perfect': False,
            'has_preliminary': False,
            'round_names': [],
            'total_matches': 0,
        }
    bracket_size = calculate_bracket_size(num_teams)
    total_rounds = int(math.log2(bracket_size))
    preliminary = has_preliminary_round(num_teams)
    return {
        'bracket_size': bracket_size,
        'total_rounds': total_rounds,
        'byes': calculate_byes(num_teams),
        'is_perfect': is_perfect_bracket(num_teams),
        'has_preliminary': preliminary,
        'round_names': get_round_names(num_teams, preliminary, total_rounds),
        'total_matches': num_teams - 1,
    }


def generate_tournament_bracket(team_ids: Sequence[str],
                                start,
                                match_duration: int = 60,
                                break_duration: int = 15,
                                third_place: bool = False,
                                venue: str = DEFAULT_BRACKET_VENUE,
                                day_start: datetime.time = DEFAULT_BRACKET_DAY_START) -> List[ScheduledMatch]:
    """
    Generate every match of a single elimination bracket.

    team_ids is in seed order (index 0 is seed 1). Round 1 pairs slots from
    the seed table; a team whose opponent slot is empty gets a bye and joins
    round 2 directly. Every later slot is either that bye team or the winner
    of the match that feeds it.

    Round 1 starts on the start date at day_start, each later round on the
    following day. The optional third place match follows the final.
    """
    num_teams = len(team_ids)
    if num_teams < 2:
        return []
    check_unique_team_ids(team_ids)

    info = get_bracket_info(num_teams)
    bracket_size = info['bracket_size']
    total_rounds = info['total_rounds']
    round_names = info['round_names']
    seeding = get_bracket_seeding(bracket_size)

    slot_length = datetime.timedelta(minutes=match_duration + break_duration)
    current_time = start_of_day(start, day_start)
    matches = []
    match_number = 1

    def round_name(round_number):
        return round_names[min(round_number - 1, len(round_names) - 1)]

    # Each feed is what enters the next round from one slot pair: a team ID
    # for a bye, or the number of the match that was played there.
    feeds = []
    for i in range(0, bracket_size, 2):
        home_seed, away_seed = seeding[i], seeding[i + 1]
        home_team = team_ids[home_seed - 1] if home_seed <= num_teams else None
        away_team = team_ids[away_seed - 1] if away_seed <= num_teams else None

        if home_team is not None and away_team is not None:
            matches.append(ScheduledMatch(
                match_number=match_number,
                round=1,
                round_name=round_name(1),
                home_team_id=home_team,
                away_team_id=away_team,
                scheduled_time=current_time,
                venue=venue,
            ))
            feeds.append(match_number)
            match_number += 1
            current_time += slot_length
        else:
            feeds.append({'team': home_team if home_team is not None else away_team})

    for round_number in range(2, total_rounds + 1):
        current_time = start_of_day(current_time + datetime.timedelta(days=1), day_start)
        next_feeds = []
        for i in range(0, len(feeds), 2):
            match = ScheduledMatch(
                match_number=match_number,
                round=round_number,
                round_name=round_name(round_number),
                scheduled_time=current_time,
                venue=venue,
            )
            match.home_team_id, match.home_source = _resolve_feed(feeds[i])
            match.away_team_id, match.away_source = _resolve_feed(feeds[i + 1])
            matches.append(match)
            next_feeds.append(match_number)
            match_number += 1
            current_time += slot_length
        feeds = next_feeds

    if third_place and total_rounds >= 2:
        semifinals = [m for m in matches if m.round_name == SEMIFINAL]
        if len(semifinals) == 2:
            matches.append(ScheduledMatch(
                match_number=match_number,
                round=total_rounds,
                round_name=THIRD_PLACE,
                home_source=loser_of(semifinals[0].match_number),
                away_source=loser_of(semifinals[1].match_number),
                scheduled_time=current_time,
                venue=venue,
            ))

    logger.debug(
        f"Generated {len(matches)} bracket matches for {num_teams} teams "
        f"(bracket size {bracket_size}, {info['byes']} byes, {total_rounds} rounds)"
    )
    return matches


def _resolve_feed(feed):
    """Turn a feed into (team_id, source) for one side of a match."""
    if isinstance(feed, dict):
        return feed['team'], None
    return None, winner_of(feed)
