from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from .placeholders import SlotReference, format_placeholder


@dataclass(frozen=True)
class Team:
    id: str
    name: str
    short_name: Optional[str] = None
    color: Optional[str] = None

    @property
    def display_name(self):
        return self.short_name or self.name


@dataclass(frozen=True)
class Group:
    id: str
    team_ids: List[str] = field(default_factory=list)


@dataclass
class ScheduledMatch:
    """
    One fixture in a generated calendar.

    Each side carries either a resolved team ID or a structured source
    (winner/loser of an earlier match), never both.
    """
    match_number: int
    round: int
    scheduled_time: datetime
    round_name: Optional[str] = None
    home_team_id: Optional[str] = None
    away_team_id: Optional[str] = None
    home_source: Optional[SlotReference] = None
    away_source: Optional[SlotReference] = None
    venue: Optional[str] = None
    group_id: Optional[str] = None
    is_bye: bool = False

    @property
    def home_placeholder(self) -> Optional[str]:
        return format_placeholder(self.home_source)

    @property
    def away_placeholder(self) -> Optional[str]:
        return format_placeholder(self.away_source)

    @property
    def is_placeholder(self) -> bool:
        return self.home_source is not None or self.away_source is not None

    def home_label(self) -> str:
        return self.home_team_id or self.home_placeholder

    def away_label(self) -> str:
        return self.away_team_id or self.away_placeholder

    def to_dict(self):
        return {
            'match_number': self.match_number,
            'round': self.round,
            'round_name': self.round_name,
            'home_team_id': self.home_team_id,
            'away_team_id': self.away_team_id,
            'home_placeholder': self.home_placeholder,
            'away_placeholder': self.away_placeholder,
            'scheduled_time': self.scheduled_time,
            'venue': self.venue,
            'group_id': self.group_id,
            'is_bye': self.is_bye,
        }


@dataclass(frozen=True)
class TeamStats:
    played: int = 0
    wins: int = 0
    draws: int = 0
    losses: int = 0
    goals_for: int = 0
    goals_against: int = 0
    goal_difference: int = 0
    points: int = 0


@dataclass(frozen=True)
class TeamWithStats:
    id: str
    name: str
    stats: TeamStats = field(default_factory=TeamStats)
    short_name: Optional[str] = None
    color: Optional[str] = None

    @classmethod
    def from_team(cls, team: Team, stats: Optional[TeamStats] = None):
        return cls(
            id=team.id,
            name=team.name,
            stats=stats if stats is not None else TeamStats(),
            short_name=team.short_name,
            color=team.color,
        )
