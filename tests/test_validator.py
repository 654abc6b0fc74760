"""
Tests for input validation and schedule checks.
"""

import sys
import os
from datetime import date, time

import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.models import Match
from app.services.scheduler import ScheduleGenerator
from app.services.validator import ScheduleValidator, ValidationError


def test_validate_inputs_normalizes():
    validator = ScheduleValidator()
    teams, venues, start = validator.validate_inputs([" A ", "B"], ["V1 "], "2024-01-01")
    assert teams == ["A", "B"]
    assert venues == ["V1"]
    assert start == date(2024, 1, 1)


def test_validate_inputs_accepts_date_object():
    _, _, start = ScheduleValidator().validate_inputs(["A", "B"], ["V1"], date(2024, 6, 1))
    assert start == date(2024, 6, 1)


def test_single_team_rejected():
    with pytest.raises(ValidationError, match="Need at least 2 teams"):
        ScheduleValidator().validate_inputs(["A"], ["V1"], "2024-01-01")


def test_no_teams_rejected():
    with pytest.raises(ValidationError, match="Need at least 2 teams"):
        ScheduleValidator().validate_inputs([], ["V1"], "2024-01-01")


def test_no_venue_rejected():
    with pytest.raises(ValidationError, match="Need at least 1 venue"):
        ScheduleValidator().validate_inputs(["A", "B"], [], "2024-01-01")


@pytest.mark.parametrize("start_date", [None, "", "   "])
def test_missing_start_date_rejected(start_date):
    with pytest.raises(ValidationError, match="Please set a start date"):
        ScheduleValidator().validate_inputs(["A", "B"], ["V1"], start_date)


@pytest.mark.parametrize("start_date", ["2024-13-01", "01/01/2024", "tomorrow"])
def test_invalid_start_date_rejected(start_date):
    with pytest.raises(ValidationError, match="Invalid start date"):
        ScheduleValidator().validate_inputs(["A", "B"], ["V1"], start_date)


def test_blank_names_rejected():
    with pytest.raises(ValidationError, match="Team names cannot be blank"):
        ScheduleValidator().validate_inputs(["A", "  "], ["V1"], "2024-01-01")
    with pytest.raises(ValidationError, match="Venue names cannot be blank"):
        ScheduleValidator().validate_inputs(["A", "B"], [""], "2024-01-01")


def test_too_many_teams_rejected():
    validator = ScheduleValidator(max_competitors=4)
    with pytest.raises(ValidationError, match="Too many teams"):
        validator.validate_inputs(["A", "B", "C", "D", "E"], ["V1"], "2024-01-01")


def test_validation_error_is_value_error():
    assert issubclass(ValidationError, ValueError)


def test_generated_schedule_is_valid():
    teams = ["A", "B", "C", "D", "E"]
    venues = ["V1"]
    matches = ScheduleGenerator().generate(teams, venues, "2024-01-01")

    result = ScheduleValidator().validate_schedule(matches, teams, venues)
    assert result.is_valid
    assert result.hard_constraint_violations == []


def test_missing_match_is_hard_violation():
    teams = ["A", "B", "C"]
    matches = ScheduleGenerator().generate(teams, ["V1"], "2024-01-01")[:-1]

    result = ScheduleValidator().validate_schedule(matches, teams, ["V1"])
    assert not result.is_valid
    assert [v.constraint_type for v in result.hard_constraint_violations] == ["missing_pairing"]


def test_repeated_match_is_hard_violation():
    teams = ["A", "B"]
    matches = ScheduleGenerator().generate(teams, ["V1"], "2024-01-01")
    matches.append(Match(id="EXTRA", home="B", away="A", date=date(2024, 1, 1),
                         time=time(16, 30), venue="V1"))

    result = ScheduleValidator().validate_schedule(matches, teams, ["V1"])
    types = {v.constraint_type for v in result.hard_constraint_violations}
    assert "duplicate_pairing" in types


def test_unknown_venue_and_time_slot():
    match = Match(id="M1", home="A", away="B", date=date(2024, 1, 1), time=time(9, 0), venue="Nowhere")

    result = ScheduleValidator().validate_schedule([match], ["A", "B"], ["V1"])
    types = {v.constraint_type for v in result.hard_constraint_violations}
    assert types == {"unknown_venue", "invalid_time_slot"}


def test_self_pairing_flagged():
    match = Match(id="M1", home="A", away="A", date=date(2024, 1, 1), time=time(14, 0), venue="V1")
    result = ScheduleValidator().validate_schedule([match], ["A", "B"], ["V1"])
    assert "self_pairing" in {v.constraint_type for v in result.hard_constraint_violations}


def test_repeated_team_name_is_not_self_pairing():
    teams = ["A", "A"]
    matches = ScheduleGenerator().generate(teams, ["V1"], "2024-01-01")
    result = ScheduleValidator().validate_schedule(matches, teams, ["V1"])
    assert result.is_valid


def test_repeated_venue_name_shares_slot():
    teams = ["A", "B", "C", "D"]
    venues = ["Gym", "Gym"]
    matches = ScheduleGenerator().generate(teams, venues, "2024-01-01")

    result = ScheduleValidator().validate_schedule(matches, teams, venues)
    assert "venue_slot_conflict" in {v.constraint_type for v in result.hard_constraint_violations}


def test_team_double_booking_is_soft():
    teams = ["A", "B", "C", "D"]
    venues = ["V1", "V2"]
    matches = ScheduleGenerator().generate(teams, venues, "2024-01-01")

    result = ScheduleValidator().validate_schedule(matches, teams, venues)
    soft = [v for v in result.soft_constraint_violations if v.constraint_type == "team_double_booking"]

    # A vs B and A vs C both start at 14:00 on day one
    assert any("A" in v.affected_teams for v in soft)
    assert result.is_valid


def test_home_away_imbalance_is_soft():
    teams = ["A", "B", "C"]
    matches = ScheduleGenerator().generate(teams, ["V1"], "2024-01-01")

    result = ScheduleValidator().validate_schedule(matches, teams, ["V1"])
    imbalanced = [v for v in result.soft_constraint_violations if v.constraint_type == "home_away_imbalance"]
    assert [v.affected_teams for v in imbalanced] == [["A"], ["C"]]
    assert result.total_penalty_score > 0


def test_team_stats():
    teams = ["A", "B", "C", "D"]
    matches = ScheduleGenerator().generate(teams, ["V1"], "2024-01-01")

    stats = ScheduleValidator().get_team_stats("B", matches)
    assert stats.total_games == 3
    assert stats.home_games == 2
    assert stats.away_games == 1
    assert sorted(stats.opponents) == ["A", "C", "D"]
    assert stats.calculate_balance_score() == 1.0
