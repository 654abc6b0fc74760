"""
Prediction report builder.
"""

from typing import Dict, List, Mapping

from app.models import CompetitorStats, Match, Prediction
from app.services.predictor import MatchPredictor


class PredictionReportBuilder:
    """Maps an ordered schedule to display-ready predictions."""

    def __init__(self, predictor: MatchPredictor):
        self.predictor = predictor

    def build_report(self, matches: List[Match],
                     stats: Mapping[str, CompetitorStats]) -> List[Prediction]:
        """
        One prediction per match, same order.

        Every prediction is a fresh draw, independent of whatever keys were
        used to order the schedule.
        """
        predictions = []
        for match in matches:
            fragment = self.predictor.predict(match.home, match.away, stats)
            predictions.append(Prediction(
                match_label=match.label,
                home_win_pct=fragment.home_win_pct,
                away_win_pct=fragment.away_win_pct,
                predicted_score=fragment.predicted_score,
                date=match.date,
                time=match.time,
                venue=match.venue
            ))
        return predictions

    @staticmethod
    def summarize(predictions: List[Prediction]) -> Dict:
        if not predictions:
            return {
                "total_predictions": 0,
                "mean_balance": 0.0,
                "most_balanced": None,
                "most_lopsided": None
            }

        balances = [abs(50 - p.home_win_pct) for p in predictions]
        most_balanced = predictions[balances.index(min(balances))]
        most_lopsided = predictions[balances.index(max(balances))]

        return {
            "total_predictions": len(predictions),
            "mean_balance": round(sum(balances) / len(balances), 2),
            "most_balanced": most_balanced.match_label,
            "most_lopsided": most_lopsided.match_label
        }
