"""
Team strength model.

Each team gets a heuristic strength score (0-100) plus its recent form and
current win streak. The draws come from an injected numpy Generator so a run
can be reproduced from a seed.
"""

from typing import Dict, Optional, Sequence, Tuple

import numpy as np

from app.models import CompetitorStats
from app.core.config import (
    STRENGTH_MIN, STRENGTH_MAX,
    BASE_STRENGTH_RANGE, RECENT_FORM_RANGE, CONSISTENCY_RANGE,
    FORM_LENGTH, FORM_OUTCOMES, MAX_WIN_STREAK
)
from app.core.logging_config import get_logger

logger = get_logger(__name__)


class StrengthModel:
    """Draws per-team strength, form and win streak."""

    def __init__(self, rng: Optional[np.random.Generator] = None):
        self.rng = rng if rng is not None else np.random.default_rng()

    def calculate_strength(self) -> float:
        """
        Simulate a strength rating from several factors.

        Returns:
            Strength clamped to [0, 100]
        """
        base_strength = self.rng.uniform(*BASE_STRENGTH_RANGE)
        recent_form = self.rng.uniform(*RECENT_FORM_RANGE)
        consistency = self.rng.uniform(*CONSISTENCY_RANGE)

        return float(min(STRENGTH_MAX, max(STRENGTH_MIN, base_strength + recent_form + consistency)))

    def compute_stats(self, competitors: Sequence[str]) -> Dict[str, CompetitorStats]:
        """
        Build the stats mapping for a set of teams.

        Every entry is drawn independently. A repeated team name gets its own
        draw, and the later one replaces the earlier in the mapping.

        Args:
            competitors: Team names in input order

        Returns:
            Dictionary of team name -> CompetitorStats
        """
        stats = {}
        for team in competitors:
            strength = self.calculate_strength()
            form = tuple(int(x) for x in self.rng.integers(0, FORM_OUTCOMES, size=FORM_LENGTH))
            win_streak = int(self.rng.integers(0, MAX_WIN_STREAK + 1))
            stats[team] = CompetitorStats(strength=strength, form=form, win_streak=win_streak)

        logger.debug("Computed strength stats for %d teams", len(stats))
        return stats


class StrengthStatsCache:
    """
    Holds the stats for the current team set.

    Stats are recomputed only when the ordered team list or the seed that
    drew them changes, so repeated schedule runs over the same teams see the
    same strengths and a seeded run always sees the stats of its own seed.
    """

    def __init__(self):
        self._key: Optional[Tuple[str, ...]] = None
        self._seed: Optional[int] = None
        self._stats: Dict[str, CompetitorStats] = {}

    @property
    def key(self) -> Optional[Tuple[str, ...]]:
        return self._key

    @property
    def seed(self) -> Optional[int]:
        return self._seed

    def get(self, competitors: Sequence[str], model: StrengthModel,
            seed: Optional[int] = None) -> Dict[str, CompetitorStats]:
        key = tuple(competitors)
        if key != self._key or seed != self._seed:
            logger.info("Team set or seed changed (%d teams, seed=%s), recomputing strength stats",
                        len(key), seed)
            self._stats = model.compute_stats(competitors)
            self._key = key
            self._seed = seed
        return self._stats

    def peek(self) -> Dict[str, CompetitorStats]:
        return dict(self._stats)

    def invalidate(self):
        self._key = None
        self._seed = None
        self._stats = {}
