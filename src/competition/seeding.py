"""
Bracket seeding tables and knockout seeding from group standings.
"""
import logging
from typing import Dict, List, Optional, Sequence, Tuple

from .models import Group, TeamWithStats

logger = logging.getLogger(__name__)


# Slot order of seed ranks for round 1: consecutive pairs meet, and if the
# higher seeds keep winning, seeds 1 and 2 only meet in the final.
SEED_TABLES: Dict[int, List[int]] = {
    2: [1, 2],
    4: [1, 4, 2, 3],
    8: [1, 8, 4, 5, 2, 7, 3, 6],
    16: [1, 16, 8, 9, 4, 13, 5, 12, 2, 15, 7, 10, 3, 14, 6, 11],
    32: [1, 32, 16, 17, 8, 25, 9, 24, 4, 29, 13, 20, 5, 28, 12, 21,
         2, 31, 15, 18, 7, 26, 10, 23, 3, 30, 14, 19, 6, 27, 11, 22],
}


def get_bracket_seeding(bracket_size: int) -> List[int]:
    """
    Get the seed permutation for a bracket.

    Sizes 2 to 32 come from SEED_TABLES; larger brackets are built with the
    same recursive rule the tables follow.
    """
    if bracket_size < 2:
        return list(range(1, bracket_size + 1))
    table = SEED_TABLES.get(bracket_size)
    if table is not None:
        return list(table)
    logger.debug(f"No seed table for bracket size {bracket_size}, generating recursively")
    return _generate_bracket_order(bracket_size)


def _generate_bracket_order(bracket_size: int) -> List[int]:
    """
    Generate the standard tournament bracket order.

    For 8 teams: [1, 8, 4, 5, 2, 7, 3, 6]
    This gives matchups: 1v8, 4v5, 2v7, 3v6
    Winners: 1v4 side, 2v3 side
    Final: 1v2 (if chalk)
    """
    if bracket_size == 2:
        return [1, 2]

    half_size = bracket_size // 2
    upper_half = _generate_bracket_order(half_size)

    # Each upper seed meets its complement in the doubled bracket
    lower_half = [bracket_size + 1 - seed for seed in upper_half]

    result = []
    for u, l in zip(upper_half, lower_half):
        result.extend([u, l])

    return result


def seed_teams_from_groups(groups: Sequence[Group],
                           standings: Optional[Dict[str, List[TeamWithStats]]] = None,
                           advance_per_group: int = 2) -> List[Tuple[str, int, str]]:
    """
    Create the seeded knockout field from a group stage.
    Returns list of (team_id, seed, group_id) tuples.

    Seeding is done by group finish position:
    - All group winners get the top seeds, in group order
    - All runners-up get the next seeds
    - etc.

    A team only counts once it has played. Until then its slot is labelled
    "#<position> <group id>" so the knockout draw can be previewed.
    """
    seeded_teams = []
    if not groups or advance_per_group < 1:
        return seeded_teams

    seed = 1
    for position in range(1, advance_per_group + 1):
        for group in groups:
            if position > len(group.team_ids):
                continue
            team_id = f"#{position} {group.id}"
            if standings and group.id in standings:
                group_table = standings[group.id]
                if len(group_table) >= position and group_table[position - 1].stats.played > 0:
                    team_id = group_table[position - 1].id
            seeded_teams.append((team_id, seed, group.id))
            seed += 1

    return seeded_teams
