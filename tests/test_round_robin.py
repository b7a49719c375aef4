"""
Unit tests for league (round-robin) schedule generation.
"""
import pytest
import sys
import os
from collections import Counter, defaultdict
from datetime import date, datetime, time, timedelta
from itertools import combinations

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from competition.errors import SchedulingError
from competition.round_robin import generate_league_schedule, round_robin_pairings


class TestRoundRobinPairings:
    """Tests for the circle method pairings."""

    def test_four_teams(self):
        """Test the exact rotation for four teams."""
        rounds = round_robin_pairings(["A", "B", "C", "D"])
        assert rounds == [
            [("A", "D"), ("B", "C")],
            [("B", "D"), ("C", "A")],
            [("C", "D"), ("A", "B")],
        ]

    def test_odd_count_drops_bye(self):
        """Test that one team sits out every round with 5 teams."""
        rounds = round_robin_pairings(["A", "B", "C", "D", "E"])
        assert len(rounds) == 5
        for pairings in rounds:
            assert len(pairings) == 2

    def test_fewer_than_two_teams(self):
        assert round_robin_pairings([]) == []
        assert round_robin_pairings(["A"]) == []


class TestLeagueSchedule:
    """Tests for the generated league calendar."""

    @pytest.mark.parametrize("count", [2, 3, 4, 5, 6, 7, 8, 9, 10])
    def test_every_pair_meets_once(self, make_team_ids, start, count):
        """Test round-robin completeness."""
        teams = make_team_ids(count)
        matches = generate_league_schedule(teams, start)

        pairs = Counter(frozenset((m.home_team_id, m.away_team_id)) for m in matches)
        assert len(matches) == count * (count - 1) // 2
        assert set(pairs) == {frozenset(p) for p in combinations(teams, 2)}
        assert all(n == 1 for n in pairs.values())

    @pytest.mark.parametrize("count", [4, 6, 8])
    def test_even_count_round_shape(self, make_team_ids, start, count):
        """Test n-1 rounds with n/2 fixtures each and everyone playing every round."""
        matches = generate_league_schedule(make_team_ids(count), start)
        by_round = defaultdict(list)
        for m in matches:
            by_round[m.round].append(m)

        assert sorted(by_round) == list(range(1, count))
        for round_matches in by_round.values():
            assert len(round_matches) == count // 2
            playing = [t for m in round_matches for t in (m.home_team_id, m.away_team_id)]
            assert len(set(playing)) == count

    @pytest.mark.parametrize("count", [3, 5, 7])
    def test_odd_count_one_bye_per_round(self, make_team_ids, start, count):
        """Test that exactly one team rests each round and each team rests once."""
        teams = make_team_ids(count)
        matches = generate_league_schedule(teams, start)
        by_round = defaultdict(set)
        for m in matches:
            by_round[m.round].update((m.home_team_id, m.away_team_id))

        assert len(by_round) == count
        resting = [next(iter(set(teams) - playing)) for playing in by_round.values()
                   if len(set(teams) - playing) == 1]
        assert len(resting) == count
        assert sorted(resting) == sorted(teams)

    def test_match_numbers_contiguous(self, make_team_ids, start):
        matches = generate_league_schedule(make_team_ids(7), start)
        assert [m.match_number for m in matches] == list(range(1, len(matches) + 1))

    def test_fewer_than_two_teams_is_empty(self, start):
        assert generate_league_schedule([], start) == []
        assert generate_league_schedule(["A"], start) == []

    def test_times_start_at_nine_and_step(self, make_team_ids, start):
        """Test the daily start time and duration + break spacing."""
        matches = generate_league_schedule(make_team_ids(4), start, match_duration=60,
                                           break_duration=15, matches_per_day=10)
        assert matches[0].scheduled_time == datetime(2026, 5, 1, 9, 0)
        assert matches[1].scheduled_time == datetime(2026, 5, 1, 10, 15)
        assert matches[5].scheduled_time == datetime(2026, 5, 1, 15, 15)

    def test_rolls_to_next_day(self, make_team_ids, start):
        """Test that the calendar moves on once the daily limit is reached."""
        matches = generate_league_schedule(make_team_ids(4), start, match_duration=30,
                                           break_duration=10, matches_per_day=4,
                                           venues=["Court 1", "Court 2", "Court 3"])
        times = [m.scheduled_time for m in matches]
        assert times[:4] == [datetime(2026, 5, 1, 9, 0) + timedelta(minutes=40 * i) for i in range(4)]
        assert times[4] == datetime(2026, 5, 2, 9, 0)
        assert times[5] == datetime(2026, 5, 2, 9, 40)

    def test_venues_cycle_and_reset_each_day(self, make_team_ids, start):
        matches = generate_league_schedule(make_team_ids(4), start, matches_per_day=4,
                                           venues=["Court 1", "Court 2", "Court 3"])
        venues = [m.venue for m in matches]
        assert venues == ["Court 1", "Court 2", "Court 3", "Court 1", "Court 1", "Court 2"]

    def test_default_venue(self, make_team_ids, start):
        matches = generate_league_schedule(make_team_ids(3), start)
        assert {m.venue for m in matches} == {"Court 1"}

    def test_custom_day_start_and_date_input(self, make_team_ids):
        matches = generate_league_schedule(make_team_ids(2), date(2026, 6, 1), day_start=time(17, 30))
        assert matches[0].scheduled_time == datetime(2026, 6, 1, 17, 30)

    def test_deterministic(self, make_team_ids, start):
        """Test that identical input gives identical output."""
        teams = make_team_ids(9)
        assert generate_league_schedule(teams, start, venues=["A", "B"]) == \
            generate_league_schedule(teams, start, venues=["A", "B"])

    def test_no_group_or_placeholders(self, make_team_ids, start):
        for m in generate_league_schedule(make_team_ids(5), start):
            assert m.group_id is None
            assert not m.is_placeholder
            assert not m.is_bye


class TestLeagueScheduleValidation:
    """Tests for input the league generator rejects."""

    def test_duplicate_team_ids(self, start):
        with pytest.raises(SchedulingError, match="Duplicate team IDs: A"):
            generate_league_schedule(["A", "B", "A"], start)

    @pytest.mark.parametrize("per_day", [0, -1])
    def test_non_positive_matches_per_day(self, make_team_ids, start, per_day):
        with pytest.raises(SchedulingError):
            generate_league_schedule(make_team_ids(4), start, matches_per_day=per_day)

    def test_empty_venue_list(self, make_team_ids, start):
        with pytest.raises(SchedulingError):
            generate_league_schedule(make_team_ids(4), start, venues=[])
