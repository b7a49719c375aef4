"""
Print the match calendar for a competition.

Usage:
    python src/generate_schedule.py data/teams.yaml
    python src/generate_schedule.py data/teams.yaml --config data/competition.yaml --start 2026-05-01

Exit codes:
    0: Success
    1: Invalid configuration or teams file
"""
import argparse
import datetime
import logging
import os
import sys

import yaml

from competition.config import CompetitionConfig, load_config
from competition.errors import SchedulingError
from competition.models import Group
from competition.scheduler import generate_schedule


def load_groups(file_path):
    """Read {group_name: [team, ...]} into groups, keeping file order."""
    with open(file_path, mode='r', encoding='utf-8') as file:
        groups_data = yaml.safe_load(file) or {}
    if not isinstance(groups_data, dict):
        raise SchedulingError(f"{file_path} must map group names to team lists")
    return [Group(id=str(name), team_ids=[str(t) for t in (teams or [])]) for name, teams in groups_data.items()]


def format_schedule(matches):
    lines = []
    current_round = None
    for match in sorted(matches, key=lambda m: (m.round, m.match_number)):
        if match.round != current_round:
            if current_round is not None:
                lines.append("")
            header = f"# Round {match.round}"
            if match.round_name:
                header += f" - {match.round_name}"
            lines.append(header)
            current_round = match.round
        when = match.scheduled_time.strftime('%Y-%m-%d %H:%M')
        group = f" [{match.group_id}]" if match.group_id else ""
        lines.append(f"#{match.match_number} {when} {match.venue}{group}: {match.home_label()} vs {match.away_label()}")
    return "\n".join(lines)


def main(argv=None):
    script_dir = os.path.dirname(__file__)
    base_dir = os.path.dirname(script_dir)

    parser = argparse.ArgumentParser(description="Generate a competition match calendar")
    parser.add_argument('teams', nargs='?', default=os.path.join(base_dir, 'data', 'teams.yaml'),
                        help="YAML file mapping group names to team lists")
    parser.add_argument('--config', help="Competition configuration YAML (defaults to a league)")
    parser.add_argument('--start', default=None, help="First match date, YYYY-MM-DD (default: today)")
    parser.add_argument('--verbose', action='store_true', help="Log generator details")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    try:
        config = load_config(args.config) if args.config else CompetitionConfig()
        groups = load_groups(args.teams)
        start = datetime.date.fromisoformat(args.start) if args.start else datetime.date.today()
    except (SchedulingError, ValueError, OSError, yaml.YAMLError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    team_ids = [team_id for group in groups for team_id in group.team_ids]
    try:
        matches = generate_schedule(config, team_ids, start, groups if config.has_groups else None)
    except SchedulingError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not matches:
        print("No matches generated. At least 2 teams are required.")
        return 0

    print(format_schedule(matches))
    return 0


if __name__ == '__main__':
    sys.exit(main())
