"""
Schedule ordering by competitive balance.
Moves the matchups predicted closest to 50/50 to the front of the schedule.
"""

from functools import cmp_to_key
from typing import List, Mapping

from app.models import CompetitorStats, Match
from app.services.predictor import MatchPredictor
from app.core.logging_config import get_logger

logger = get_logger(__name__)


class ScheduleOptimizer:
    """
    Reorders a generated schedule so balanced games come first.

    By default every match is predicted once and the schedule is sorted on
    that snapshot, which gives a stable, reproducible order for a seeded
    predictor. With ``resample_per_comparison`` the predictor is called again
    on every comparison, so the same match can get a different key each
    time it is compared.
    """

    def __init__(self, predictor: MatchPredictor, resample_per_comparison: bool = False):
        self.predictor = predictor
        self.resample_per_comparison = resample_per_comparison

    def optimize(self, matches: List[Match], stats: Mapping[str, CompetitorStats]) -> List[Match]:
        """
        Sort matches by closeness to an even split, in place.

        Args:
            matches: Generated matches
            stats: Strength stats for the current team set

        Returns:
            The same list, reordered
        """
        if self.resample_per_comparison:
            matches.sort(key=cmp_to_key(lambda a, b: self._compare(a, b, stats)))
        else:
            keys = {id(match): self.predictor.balance(match.home, match.away, stats)
                    for match in matches}
            matches.sort(key=lambda match: keys[id(match)])

        logger.debug(
            "Ordered %d matches by balance (resample_per_comparison=%s)",
            len(matches), self.resample_per_comparison
        )
        return matches

    def _compare(self, a: Match, b: Match, stats: Mapping[str, CompetitorStats]) -> int:
        diff = (self.predictor.balance(a.home, a.away, stats) -
                self.predictor.balance(b.home, b.away, stats))
        if diff < 0:
            return -1
        if diff > 0:
            return 1
        return 0
