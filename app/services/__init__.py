"""
Services for strength modelling, prediction, scheduling and validation.
"""

from .strength_model import StrengthModel, StrengthStatsCache
from .predictor import MatchPredictor
from .scheduler import ScheduleGenerator
from .optimizer import ScheduleOptimizer
from .report import PredictionReportBuilder
from .validator import ScheduleValidator, ValidationError
from .tournament import TournamentScheduler

__all__ = [
    "StrengthModel",
    "StrengthStatsCache",
    "MatchPredictor",
    "ScheduleGenerator",
    "ScheduleOptimizer",
    "PredictionReportBuilder",
    "ScheduleValidator",
    "ValidationError",
    "TournamentScheduler"
]
