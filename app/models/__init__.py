"""
Data models for the scheduling system.
"""

from .models import (
    CompetitorStats,
    Match,
    PredictedScore,
    PredictionFragment,
    Prediction,
    SchedulingConstraint,
    ScheduleValidationResult,
    TeamScheduleStats,
    ScheduleRun,
    format_display_date
)

__all__ = [
    "CompetitorStats",
    "Match",
    "PredictedScore",
    "PredictionFragment",
    "Prediction",
    "SchedulingConstraint",
    "ScheduleValidationResult",
    "TeamScheduleStats",
    "ScheduleRun",
    "format_display_date"
]
