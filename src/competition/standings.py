"""
Standings: fold match results into team stats and rank the table.
"""
import unicodedata
from typing import Dict, Iterable, List, Sequence, Tuple

from .models import Team, TeamStats, TeamWithStats


def calculate_team_stats(current: TeamStats,
                         goals_for: int,
                         goals_against: int,
                         points_for_win: int = 3,
                         points_for_draw: int = 1,
                         points_for_loss: int = 0) -> TeamStats:
    """Return current with one more match of goals_for - goals_against applied."""
    is_win = goals_for > goals_against
    is_draw = goals_for == goals_against
    is_loss = not is_win and not is_draw

    if is_win:
        points = points_for_win
    elif is_draw:
        points = points_for_draw
    else:
        points = points_for_loss

    return TeamStats(
        played=current.played + 1,
        wins=current.wins + (1 if is_win else 0),
        draws=current.draws + (1 if is_draw else 0),
        losses=current.losses + (1 if is_loss else 0),
        goals_for=current.goals_for + goals_for,
        goals_against=current.goals_against + goals_against,
        goal_difference=current.goal_difference + (goals_for - goals_against),
        points=current.points + points,
    )


def apply_match_result(home: TeamStats, away: TeamStats, home_goals: int, away_goals: int,
                       points_for_win: int = 3, points_for_draw: int = 1,
                       points_for_loss: int = 0) -> Tuple[TeamStats, TeamStats]:
    """Apply one result to both sides. Returns (new_home, new_away)."""
    points = (points_for_win, points_for_draw, points_for_loss)
    return (
        calculate_team_stats(home, home_goals, away_goals, *points),
        calculate_team_stats(away, away_goals, home_goals, *points),
    )


def collation_key(name: str) -> str:
    # Accents and case only matter after the base letters
    decomposed = unicodedata.normalize('NFKD', name)
    stripped = ''.join(c for c in decomposed if not unicodedata.combining(c))
    return stripped.casefold()


def standing_sort_key(team: TeamWithStats):
    stats = team.stats
    return (
        -stats.points,
        -stats.goal_difference,
        -stats.goals_for,
        collation_key(team.name),
        team.name,
        team.id,
    )


def sort_teams_by_standing(teams: Iterable[TeamWithStats]) -> List[TeamWithStats]:
    """
    Rank teams for the standings table.

    Ranking: points -> goal difference -> goals scored -> name
    Team ID breaks any remaining tie so the order is always total.
    """
    return sorted(teams, key=standing_sort_key)


def build_standings(teams: Sequence[Team],
                    results: Iterable[Tuple[str, str, int, int]],
                    points_for_win: int = 3,
                    points_for_draw: int = 1,
                    points_for_loss: int = 0) -> List[TeamWithStats]:
    """
    Calculate a standings table from scratch.

    results holds (home_id, away_id, home_goals, away_goals) tuples.
    Results that name a team outside teams are ignored.
    """
    stats: Dict[str, TeamStats] = {team.id: TeamStats() for team in teams}

    for home_id, away_id, home_goals, away_goals in results:
        if home_id not in stats or away_id not in stats:
            continue
        stats[home_id], stats[away_id] = apply_match_result(
            stats[home_id], stats[away_id], home_goals, away_goals,
            points_for_win, points_for_draw, points_for_loss,
        )

    table = [TeamWithStats.from_team(team, stats[team.id]) for team in teams]
    return sort_teams_by_standing(table)
