"""
Match outcome predictor.
Turns two team strengths into a win-probability split and a rough score.
"""

import math
from typing import Mapping, Optional

import numpy as np

from app.models import CompetitorStats, PredictedScore, PredictionFragment
from app.core.config import HOME_ADVANTAGE, DEFAULT_STRENGTH, PREDICTION_NOISE


def _clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return min(high, max(low, value))


class MatchPredictor:
    """
    Predicts head-to-head outcomes from the strength stats.

    Each call draws fresh noise, so two predictions for the same pairing
    generally differ.
    """

    def __init__(self, rng: Optional[np.random.Generator] = None,
                 home_advantage: float = HOME_ADVANTAGE,
                 default_strength: float = DEFAULT_STRENGTH):
        self.rng = rng if rng is not None else np.random.default_rng()
        self.home_advantage = home_advantage
        self.default_strength = default_strength

    def get_strength(self, team: str, stats: Mapping[str, CompetitorStats]) -> float:
        """Strength of a team, or the default when it has no stats entry."""
        team_stats = stats.get(team)
        if team_stats is None:
            return self.default_strength
        return team_stats.strength

    def predict(self, home: str, away: str,
                stats: Mapping[str, CompetitorStats]) -> PredictionFragment:
        """
        Predict a single matchup.

        Args:
            home: Home team name
            away: Away team name
            stats: Strength stats for the current team set

        Returns:
            PredictionFragment with win percentages (one decimal) and score
        """
        home_strength = self.get_strength(home, stats)
        away_strength = self.get_strength(away, stats)
        noise = self.rng.uniform(-PREDICTION_NOISE, PREDICTION_NOISE)

        raw_home_win = ((home_strength + self.home_advantage) /
                        (home_strength + away_strength + self.home_advantage) * 100) + noise

        # Each side is clamped on its own; the pair may not add up to 100
        home_win_pct = round(_clamp(raw_home_win), 1)
        away_win_pct = round(_clamp(100 - raw_home_win), 1)

        clamped = _clamp(raw_home_win)
        predicted_score = PredictedScore(
            home=int(math.floor(clamped / 10)),
            away=int(math.floor((100 - clamped) / 10))
        )

        return PredictionFragment(
            home_win_pct=float(home_win_pct),
            away_win_pct=float(away_win_pct),
            predicted_score=predicted_score
        )

    def balance(self, home: str, away: str, stats: Mapping[str, CompetitorStats]) -> float:
        """Distance from 50/50 of a fresh prediction."""
        return self.predict(home, away, stats).balance
