"""
Validation module for the Round-Robin Tournament Scheduler.
Checks raw inputs before generation and generated schedules afterwards.
"""

from datetime import datetime, date
from typing import List, Dict, Sequence, Tuple
from collections import Counter, defaultdict

from app.models import (
    Match, SchedulingConstraint, ScheduleValidationResult,
    TeamScheduleStats, ScheduleRun
)
from app.core.config import (
    DATE_INPUT_FORMAT, MIN_COMPETITORS, MIN_VENUES, MAX_COMPETITORS,
    GAME_TIME_SLOTS, PENALTY_WEIGHTS
)
from app.core.logging_config import get_logger

logger = get_logger(__name__)


class ValidationError(ValueError):
    """Raised when schedule inputs are unusable. Nothing is generated."""


class ScheduleValidator:
    """
    Validates tournament inputs and generated schedules.
    Input problems raise ValidationError; schedule problems are collected as
    hard constraint violations (broken round-robin) or soft ones (preferences).
    """

    def __init__(self, max_competitors: int = MAX_COMPETITORS):
        self.max_competitors = max_competitors

    def validate_inputs(self, competitors: Sequence[str], venues: Sequence[str],
                        start_date) -> Tuple[List[str], List[str], date]:
        """
        Check the raw inputs and normalize them.

        Args:
            competitors: Team names
            venues: Venue names
            start_date: Start date as a date or YYYY-MM-DD string

        Returns:
            Tuple of (teams, venues, start date) with names stripped

        Raises:
            ValidationError: On the first failed check
        """
        competitors = [str(name).strip() for name in (competitors or [])]
        venues = [str(name).strip() for name in (venues or [])]

        if len(competitors) < MIN_COMPETITORS:
            raise ValidationError(f"Need at least {MIN_COMPETITORS} teams")
        if len(venues) < MIN_VENUES:
            raise ValidationError(f"Need at least {MIN_VENUES} venue")
        if start_date is None or (isinstance(start_date, str) and not start_date.strip()):
            raise ValidationError("Please set a start date")
        if any(not name for name in competitors):
            raise ValidationError("Team names cannot be blank")
        if any(not name for name in venues):
            raise ValidationError("Venue names cannot be blank")
        if len(competitors) > self.max_competitors:
            raise ValidationError(
                f"Too many teams: {len(competitors)} (max {self.max_competitors})"
            )

        return competitors, venues, self._parse_start_date(start_date)

    def _parse_start_date(self, start_date) -> date:
        if isinstance(start_date, datetime):
            return start_date.date()
        if isinstance(start_date, date):
            return start_date
        try:
            return datetime.strptime(str(start_date).strip(), DATE_INPUT_FORMAT).date()
        except ValueError:
            raise ValidationError(f"Invalid start date: {start_date!r} (expected YYYY-MM-DD)")

    def validate_schedule(self, matches: List[Match], competitors: Sequence[str],
                          venues: Sequence[str]) -> ScheduleValidationResult:
        """
        Validate a generated schedule against the round-robin rules.

        Args:
            matches: The generated (possibly reordered) matches
            competitors: Team names the schedule was built from
            venues: Venue names the schedule was built from

        Returns:
            ScheduleValidationResult with all violations found
        """
        result = ScheduleValidationResult(is_valid=True)

        self._check_pair_coverage(matches, competitors, result)
        self._check_self_pairings(matches, competitors, result)
        self._check_venues(matches, venues, result)
        self._check_time_slots(matches, result)
        self._check_venue_slot_conflicts(matches, result)
        self._check_team_double_booking(matches, result)
        self._check_home_away_balance(matches, result)

        logger.info(
            "Schedule validation: valid=%s hard=%d soft=%d penalty=%.2f",
            result.is_valid,
            len(result.hard_constraint_violations),
            len(result.soft_constraint_violations),
            result.total_penalty_score
        )
        return result

    def _check_pair_coverage(self, matches: List[Match], competitors: Sequence[str],
                             result: ScheduleValidationResult):
        """Every unordered pair of teams must meet exactly once."""
        expected = Counter()
        for i in range(len(competitors)):
            for j in range(i + 1, len(competitors)):
                expected[tuple(sorted((competitors[i], competitors[j])))] += 1

        actual = Counter(tuple(sorted((m.home, m.away))) for m in matches)

        for pair, count in expected.items():
            if actual[pair] < count:
                result.add_violation(SchedulingConstraint(
                    constraint_type="missing_pairing",
                    severity="hard",
                    description=f"{pair[0]} vs {pair[1]} is scheduled {actual[pair]} time(s), expected {count}",
                    affected_teams=list(pair),
                    penalty_score=PENALTY_WEIGHTS["missing_pairing"]
                ))

        for pair, count in actual.items():
            if count > expected[pair]:
                result.add_violation(SchedulingConstraint(
                    constraint_type="duplicate_pairing",
                    severity="hard",
                    description=f"{pair[0]} vs {pair[1]} is scheduled {count} time(s), expected {expected[pair]}",
                    affected_teams=list(pair),
                    affected_matches=[m for m in matches if tuple(sorted((m.home, m.away))) == pair],
                    penalty_score=PENALTY_WEIGHTS["duplicate_pairing"]
                ))

    def _check_self_pairings(self, matches: List[Match], competitors: Sequence[str],
                             result: ScheduleValidationResult):
        """A team cannot play itself (repeated names in the input excepted)."""
        name_counts = Counter(competitors)
        for match in matches:
            if match.home == match.away and name_counts[match.home] < 2:
                result.add_violation(SchedulingConstraint(
                    constraint_type="self_pairing",
                    severity="hard",
                    description=f"{match.id}: {match.home} is scheduled against itself",
                    affected_teams=[match.home],
                    affected_matches=[match],
                    penalty_score=PENALTY_WEIGHTS["self_pairing"]
                ))

    def _check_venues(self, matches: List[Match], venues: Sequence[str],
                      result: ScheduleValidationResult):
        known = set(venues)
        for match in matches:
            if match.venue not in known:
                result.add_violation(SchedulingConstraint(
                    constraint_type="unknown_venue",
                    severity="hard",
                    description=f"{match.id} is at unknown venue {match.venue}",
                    affected_matches=[match],
                    penalty_score=PENALTY_WEIGHTS["unknown_venue"]
                ))

    def _check_time_slots(self, matches: List[Match], result: ScheduleValidationResult):
        allowed = set(GAME_TIME_SLOTS)
        for match in matches:
            if match.time not in allowed:
                result.add_violation(SchedulingConstraint(
                    constraint_type="invalid_time_slot",
                    severity="hard",
                    description=f"{match.id} starts at {match.time_label}, not a game time slot",
                    affected_matches=[match],
                    penalty_score=PENALTY_WEIGHTS["invalid_time_slot"]
                ))

    def _check_venue_slot_conflicts(self, matches: List[Match], result: ScheduleValidationResult):
        """A venue hosts one game per time slot."""
        slot_matches = defaultdict(list)
        for match in matches:
            slot_matches[(match.date, match.time, match.venue)].append(match)

        for key, games in slot_matches.items():
            if len(games) > 1:
                # Repeated venue names in the input share a label, not a court
                result.add_violation(SchedulingConstraint(
                    constraint_type="venue_slot_conflict",
                    severity="hard",
                    description=f"{len(games)} matches at {key[2]} on {key[0]} {key[1].strftime('%H:%M')}",
                    affected_matches=games,
                    penalty_score=PENALTY_WEIGHTS["venue_slot_conflict"]
                ))

    def _check_team_double_booking(self, matches: List[Match], result: ScheduleValidationResult):
        """Report teams booked into two venues at the same time."""
        team_slots = defaultdict(list)
        for match in matches:
            for team in {match.home, match.away}:
                team_slots[(team, match.date, match.time)].append(match)

        for (team, game_date, game_time), games in team_slots.items():
            if len(games) > 1:
                result.add_violation(SchedulingConstraint(
                    constraint_type="team_double_booking",
                    severity="soft",
                    description=f"{team} has {len(games)} matches on {game_date} at {game_time.strftime('%H:%M')}",
                    affected_teams=[team],
                    affected_matches=games,
                    penalty_score=PENALTY_WEIGHTS["team_double_booking"]
                ))

    def _check_home_away_balance(self, matches: List[Match], result: ScheduleValidationResult):
        for team in self._teams_in(matches):
            stats = self.get_team_stats(team, matches)
            if abs(stats.home_games - stats.away_games) > 1:
                result.add_violation(SchedulingConstraint(
                    constraint_type="home_away_imbalance",
                    severity="soft",
                    description=f"{team} has {stats.home_games} home and {stats.away_games} away matches",
                    affected_teams=[team],
                    penalty_score=PENALTY_WEIGHTS["home_away_imbalance"] * stats.calculate_balance_score()
                ))

    def _teams_in(self, matches: List[Match]) -> List[str]:
        teams = []
        seen = set()
        for match in matches:
            for team in (match.home, match.away):
                if team not in seen:
                    seen.add(team)
                    teams.append(team)
        return teams

    def get_team_stats(self, team: str, matches: List[Match]) -> TeamScheduleStats:
        """
        Get schedule statistics for a specific team.

        Args:
            team: Team name
            matches: Matches to count

        Returns:
            TeamScheduleStats for the team
        """
        stats = TeamScheduleStats(team=team)
        for match in matches:
            if not match.involves_team(team):
                continue
            stats.total_games += 1
            if match.is_home_game(team):
                stats.home_games += 1
            else:
                stats.away_games += 1
            stats.games_by_date[match.date] = stats.games_by_date.get(match.date, 0) + 1
            stats.opponents.append(match.get_opponent(team))
        return stats

    def generate_schedule_report(self, run: ScheduleRun, summary: Dict = None) -> str:
        """
        Generate a text report of a schedule run.

        Args:
            run: The completed schedule run
            summary: Optional prediction summary to append

        Returns:
            Formatted report string
        """
        report = []
        report.append("=" * 80)
        report.append("SCHEDULE REPORT")
        report.append("=" * 80)
        report.append(f"Start Date: {run.start_date}")
        report.append(f"Teams: {len(run.competitors)}  Venues: {len(run.venues)}")
        report.append(f"Total Matches: {len(run.matches)}")
        report.append("")

        report.append("Matches by Date:")
        matches_by_date = defaultdict(list)
        for match in run.matches:
            matches_by_date[match.date].append(match)
        for match_date in sorted(matches_by_date.keys()):
            report.append(f"  {match_date}: {len(matches_by_date[match_date])} matches")
        report.append("")

        report.append("Team Statistics:")
        for team in sorted(self._teams_in(run.matches)):
            stats = self.get_team_stats(team, run.matches)
            strength = run.stats.get(team)
            strength_str = f"{strength.strength:.1f}" if strength else "n/a"
            report.append(f"  {team} (strength {strength_str}):")
            report.append(f"    Total Matches: {stats.total_games}")
            report.append(f"    Home: {stats.home_games}, Away: {stats.away_games}")

        if run.validation is not None:
            report.append("")
            report.append(run.validation.get_summary().rstrip())

        if summary:
            report.append("")
            report.append("Prediction Summary:")
            report.append(f"  Mean distance from 50/50: {summary['mean_balance']}")
            report.append(f"  Most balanced: {summary['most_balanced']}")
            report.append(f"  Most lopsided: {summary['most_lopsided']}")

        report.append("=" * 80)

        return "\n".join(report)
