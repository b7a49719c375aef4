"""
Competition configuration: defaults, YAML loading and validation.
"""
import datetime
import logging
from dataclasses import dataclass, field
from typing import List, Optional

import yaml

from .errors import ConfigError

logger = logging.getLogger(__name__)

LEAGUE = "LEAGUE"
TOURNAMENT = "TOURNAMENT"
COMPETITION_KINDS = (LEAGUE, TOURNAMENT)


def parse_time(time_str) -> datetime.time:
    if isinstance(time_str, datetime.time):
        return time_str
    return datetime.datetime.strptime(str(time_str), '%H:%M').time()


def _time_text(value) -> str:
    # YAML 1.1 reads an unquoted 10:30 as the base-60 integer 630
    if isinstance(value, int) and not isinstance(value, bool):
        return f"{value // 60:02d}:{value % 60:02d}"
    return str(value)


@dataclass
class CompetitionConfig:
    name: str = ""
    kind: str = LEAGUE
    points_for_win: int = 3
    points_for_draw: int = 1
    points_for_loss: int = 0
    third_place_match: bool = False
    match_duration_minutes: int = 60
    break_duration_minutes: int = 15
    matches_per_day: int = 10
    venues: List[str] = field(default_factory=lambda: ["Court 1"])
    daily_start_time: str = "09:00"
    has_groups: bool = False
    group_count: int = 4
    teams_per_group: int = 4
    advance_per_group: int = 2

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> 'CompetitionConfig':
        data = data or {}
        defaults = cls()
        venues = data.get('venues', defaults.venues)
        if isinstance(venues, str):
            venues = [venues]
        return cls(
            name=data.get('name', defaults.name),
            kind=str(data.get('kind', defaults.kind)).upper(),
            points_for_win=data.get('points_for_win', defaults.points_for_win),
            points_for_draw=data.get('points_for_draw', defaults.points_for_draw),
            points_for_loss=data.get('points_for_loss', defaults.points_for_loss),
            third_place_match=bool(data.get('third_place_match', defaults.third_place_match)),
            match_duration_minutes=data.get('match_duration_minutes', defaults.match_duration_minutes),
            break_duration_minutes=data.get('break_duration_minutes', defaults.break_duration_minutes),
            matches_per_day=data.get('matches_per_day', defaults.matches_per_day),
            venues=list(venues or []),
            daily_start_time=_time_text(data.get('daily_start_time', defaults.daily_start_time)),
            has_groups=bool(data.get('has_groups', defaults.has_groups)),
            group_count=data.get('group_count', defaults.group_count),
            teams_per_group=data.get('teams_per_group', defaults.teams_per_group),
            advance_per_group=data.get('advance_per_group', defaults.advance_per_group),
        )

    @property
    def day_start(self) -> datetime.time:
        return parse_time(self.daily_start_time)

    @property
    def point_values(self):
        return self.points_for_win, self.points_for_draw, self.points_for_loss


def validate_config(config: CompetitionConfig) -> List[str]:
    """
    Check a configuration before it is handed to a generator.
    Returns a list of error messages, empty when the configuration is usable.
    """
    errors = []

    if config.kind not in COMPETITION_KINDS:
        errors.append(f"Unknown competition kind '{config.kind}' (expected one of {', '.join(COMPETITION_KINDS)})")

    for key in ('points_for_win', 'points_for_draw', 'points_for_loss', 'match_duration_minutes',
                'break_duration_minutes', 'matches_per_day', 'group_count', 'teams_per_group',
                'advance_per_group'):
        value = getattr(config, key)
        if not isinstance(value, int) or isinstance(value, bool):
            errors.append(f"{key} must be a whole number, got {value!r}")

    if errors:
        return errors

    if config.match_duration_minutes <= 0:
        errors.append("match_duration_minutes must be positive")
    if config.break_duration_minutes < 0:
        errors.append("break_duration_minutes cannot be negative")
    if config.matches_per_day < 1:
        errors.append("matches_per_day must be at least 1")
    if not config.venues:
        errors.append("At least one venue is required")

    try:
        parse_time(config.daily_start_time)
    except ValueError:
        errors.append(f"daily_start_time must be HH:MM, got '{config.daily_start_time}'")

    if config.kind == TOURNAMENT and config.has_groups:
        if config.group_count < 1:
            errors.append("group_count must be at least 1")
        if config.teams_per_group < 2:
            errors.append("teams_per_group must be at least 2")
        if not 1 <= config.advance_per_group < config.teams_per_group:
            errors.append("advance_per_group must be at least 1 and less than teams_per_group")

    return errors


def load_config(file_path, validate: bool = True) -> CompetitionConfig:
    """Load a competition configuration from a YAML file."""
    with open(file_path, mode='r', encoding='utf-8') as file:
        try:
            data = yaml.safe_load(file)
        except yaml.YAMLError as e:
            raise ConfigError(f"Failed to parse {file_path}: {e}") from e

    if data is not None and not isinstance(data, dict):
        raise ConfigError(f"{file_path} must contain a mapping of settings")

    config = CompetitionConfig.from_dict(data)
    if validate:
        errors = validate_config(config)
        if errors:
            raise ConfigError(f"Invalid configuration in {file_path}: {'; '.join(errors)}", errors)
    logger.debug(f"Loaded {config.kind} configuration from {file_path}")
    return config
