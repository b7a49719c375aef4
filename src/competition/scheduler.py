"""
Pick and run the right generator for a competition configuration.
"""
import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from .config import LEAGUE, TOURNAMENT, CompetitionConfig
from .elimination import generate_tournament_bracket
from .errors import ConfigError
from .groups import generate_group_stage_schedule, partition_into_groups
from .models import Group, ScheduledMatch, Team, TeamWithStats
from .round_robin import generate_league_schedule
from .standings import build_standings

logger = logging.getLogger(__name__)


def generate_schedule(config: CompetitionConfig,
                      team_ids: Sequence[str],
                      start,
                      groups: Optional[Sequence[Group]] = None) -> List[ScheduledMatch]:
    """
    Generate the full calendar for a competition.

    - LEAGUE: everyone plays everyone on the configured venues
    - TOURNAMENT with groups: a round-robin per group; groups are dealt from
      team_ids when none are given
    - TOURNAMENT: a knockout bracket seeded in team_ids order
    """
    logger.debug(f"Generating {config.kind} schedule for {len(team_ids)} teams")
    if config.kind == LEAGUE:
        return generate_league_schedule(
            team_ids,
            start,
            config.match_duration_minutes,
            config.break_duration_minutes,
            config.matches_per_day,
            config.venues,
            config.day_start,
        )

    if config.kind == TOURNAMENT:
        if config.has_groups:
            if not groups:
                groups = partition_into_groups(team_ids, config.group_count)
            return generate_group_stage_schedule(
                groups,
                start,
                config.match_duration_minutes,
                config.break_duration_minutes,
                config.matches_per_day,
                config.venues,
                config.day_start,
            )
        venue = config.venues[0] if config.venues else "Court 1"
        return generate_tournament_bracket(
            team_ids,
            start,
            config.match_duration_minutes,
            config.break_duration_minutes,
            config.third_place_match,
            venue,
            config.day_start,
        )

    raise ConfigError(f"Unknown competition kind '{config.kind}'")


def calculate_standings(config: CompetitionConfig,
                        teams: Sequence[Team],
                        results: Iterable[Tuple[str, str, int, int]]) -> List[TeamWithStats]:
    """Standings table using the configured point values."""
    return build_standings(teams, results, *config.point_values)
