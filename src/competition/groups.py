"""
Group stage generation: a round-robin inside every group, merged into one calendar.
"""
import datetime
import logging
import string
from dataclasses import replace
from typing import List, Optional, Sequence

from .errors import SchedulingError
from .models import Group, ScheduledMatch
from .round_robin import DEFAULT_LEAGUE_DAY_START, generate_league_schedule

logger = logging.getLogger(__name__)


def group_label(index: int) -> str:
    """Group A, Group B, ... Group Z, Group AA, ..."""
    letters = ""
    index += 1
    while index > 0:
        index, remainder = divmod(index - 1, 26)
        letters = string.ascii_uppercase[remainder] + letters
    return f"Group {letters}"


def partition_into_groups(team_ids: Sequence[str], group_count: int) -> List[Group]:
    """
    Deal a seeded team list into groups in serpentine order.

    With 4 groups seeds 1-4 go to A-D, seeds 5-8 to D-A, and so on, so every
    group gets a comparable mix of strong and weak seeds.
    """
    if group_count < 1:
        raise SchedulingError(f"group_count must be at least 1, got {group_count}")

    buckets = [[] for _ in range(group_count)]
    for index, team_id in enumerate(team_ids):
        lap, offset = divmod(index, group_count)
        position = offset if lap % 2 == 0 else group_count - 1 - offset
        buckets[position].append(team_id)

    return [Group(id=group_label(i), team_ids=bucket) for i, bucket in enumerate(buckets)]


def check_disjoint_groups(groups: Sequence[Group]):
    owner = {}
    for group in groups:
        for team_id in group.team_ids:
            if team_id in owner and owner[team_id] != group.id:
                raise SchedulingError(
                    f"Team {team_id} is in both {owner[team_id]} and {group.id}"
                )
            owner[team_id] = group.id


def generate_group_stage_schedule(groups: Sequence[Group],
                                  start,
                                  match_duration: int = 60,
                                  break_duration: int = 15,
                                  matches_per_day: int = 10,
                                  venues: Optional[Sequence[str]] = None,
                                  day_start: datetime.time = DEFAULT_LEAGUE_DAY_START) -> List[ScheduledMatch]:
    """
    Generate the group stage calendar.

    Every group gets its own league schedule from the same start date. The
    results are tagged with their group, sorted by kick-off (ties keep group
    order) and renumbered 1..N across the whole stage.
    """
    check_disjoint_groups(groups)

    all_matches = []
    for group in groups:
        if len(group.team_ids) < 2:
            logger.warning(
                f"{group.id} has fewer than 2 teams ({len(group.team_ids)} found). Skipping match generation."
            )
            continue
        group_matches = generate_league_schedule(
            group.team_ids,
            start,
            match_duration,
            break_duration,
            matches_per_day,
            venues,
            day_start,
        )
        all_matches.extend(replace(match, group_id=group.id) for match in group_matches)

    # sorted() is stable, so simultaneous matches stay in group order
    all_matches = sorted(all_matches, key=lambda m: m.scheduled_time)
    for number, match in enumerate(all_matches, start=1):
        match.match_number = number

    logger.debug(f"Generated {len(all_matches)} group stage matches across {len(groups)} groups")
    return all_matches
