"""
Data models for the Round-Robin Tournament Scheduler.
Defines all data structures used throughout the application.
"""

from dataclasses import dataclass, field
from datetime import date, time
from typing import List, Optional, Dict


@dataclass(frozen=True)
class CompetitorStats:
    strength: float
    form: tuple  # Last 5 outcomes, each 0, 1 or 2
    win_streak: int

    def to_dict(self) -> Dict:
        return {
            "strength": self.strength,
            "form": list(self.form),
            "win_streak": self.win_streak
        }


@dataclass(eq=False)
class Match:
    id: str
    home: str
    away: str
    date: date
    time: time
    venue: str

    def __str__(self):
        return f"{self.label} on {self.display_date} at {self.time_label} ({self.venue})"

    @property
    def label(self) -> str:
        return f"{self.home} vs {self.away}"

    @property
    def time_label(self) -> str:
        return self.time.strftime("%H:%M")

    @property
    def display_date(self) -> str:
        return format_display_date(self.date)

    def involves_team(self, team: str) -> bool:
        return self.home == team or self.away == team

    def get_opponent(self, team: str) -> Optional[str]:
        if self.home == team:
            return self.away
        elif self.away == team:
            return self.home
        return None

    def is_home_game(self, team: str) -> bool:
        return self.home == team

    def to_dict(self) -> Dict:
        return {
            "id": self.id,
            "home": self.home,
            "away": self.away,
            "date": self.display_date,
            "time": self.time_label,
            "venue": self.venue
        }


@dataclass(frozen=True)
class PredictedScore:
    home: int
    away: int


@dataclass(frozen=True)
class PredictionFragment:
    """Outcome of a single predictor draw for one pairing."""
    home_win_pct: float
    away_win_pct: float
    predicted_score: PredictedScore

    @property
    def balance(self) -> float:
        """Distance from an even 50/50 split (0 = perfectly balanced)."""
        return abs(50 - self.home_win_pct)


@dataclass(frozen=True)
class Prediction:
    match_label: str
    home_win_pct: float
    away_win_pct: float
    predicted_score: PredictedScore
    date: date
    time: time
    venue: str

    def to_dict(self) -> Dict:
        return {
            "match": self.match_label,
            "home_win": self.home_win_pct,
            "away_win": self.away_win_pct,
            "predicted_score": {
                "home": self.predicted_score.home,
                "away": self.predicted_score.away
            },
            "date": format_display_date(self.date),
            "time": self.time.strftime("%H:%M"),
            "venue": self.venue
        }


@dataclass
class SchedulingConstraint:
    constraint_type: str
    severity: str
    description: str
    affected_teams: List[str] = field(default_factory=list)
    affected_matches: List[Match] = field(default_factory=list)
    penalty_score: float = 0.0


@dataclass
class ScheduleValidationResult:
    is_valid: bool
    hard_constraint_violations: List[SchedulingConstraint] = field(default_factory=list)
    soft_constraint_violations: List[SchedulingConstraint] = field(default_factory=list)
    total_penalty_score: float = 0.0

    def add_violation(self, constraint: SchedulingConstraint):
        if constraint.severity == 'hard':
            self.hard_constraint_violations.append(constraint)
            self.is_valid = False
        else:
            self.soft_constraint_violations.append(constraint)
        self.total_penalty_score += constraint.penalty_score

    def get_summary(self) -> str:
        summary = f"Schedule Valid: {self.is_valid}\n"
        summary += f"Hard Violations: {len(self.hard_constraint_violations)}\n"
        summary += f"Soft Violations: {len(self.soft_constraint_violations)}\n"
        summary += f"Total Penalty Score: {self.total_penalty_score:.2f}\n"
        return summary

    def to_dict(self) -> Dict:
        return {
            "is_valid": self.is_valid,
            "hard_violations": len(self.hard_constraint_violations),
            "soft_violations": len(self.soft_constraint_violations),
            "total_penalty": self.total_penalty_score
        }


@dataclass
class TeamScheduleStats:
    team: str
    total_games: int = 0
    home_games: int = 0
    away_games: int = 0
    games_by_date: Dict[date, int] = field(default_factory=dict)
    opponents: List[str] = field(default_factory=list)

    def calculate_balance_score(self) -> float:
        if self.total_games == 0:
            return 0.0
        ideal_split = self.total_games / 2.0
        return abs(self.home_games - ideal_split) + abs(self.away_games - ideal_split)


@dataclass
class ScheduleRun:
    competitors: List[str]
    venues: List[str]
    start_date: date
    stats: Dict[str, CompetitorStats]
    matches: List[Match] = field(default_factory=list)
    predictions: List[Prediction] = field(default_factory=list)
    validation: Optional[ScheduleValidationResult] = None
    generation_time: float = 0.0


def format_display_date(value: date) -> str:
    """Format a date the way the schedule is displayed (M/D/YYYY)."""
    return f"{value.month}/{value.day}/{value.year}"
