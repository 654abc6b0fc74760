"""
End-to-end tournament scheduling pipeline.

validate inputs -> strength stats (cached per team set and seed) -> generate the
round-robin -> order by competitive balance -> build predictions.
"""

from datetime import datetime
from typing import Dict, Optional, Sequence

import numpy as np

from app.models import ScheduleRun
from app.services.strength_model import StrengthModel, StrengthStatsCache
from app.services.predictor import MatchPredictor
from app.services.scheduler import ScheduleGenerator
from app.services.optimizer import ScheduleOptimizer
from app.services.report import PredictionReportBuilder
from app.services.validator import ScheduleValidator
from app.core.config import RANDOM_SEED
from app.core.logging_config import get_logger

logger = get_logger(__name__)


class TournamentScheduler:
    """
    Runs the whole scheduling pipeline for one set of inputs.

    The seed is split into two independent numpy Generators, one for the
    strength draws and one for prediction noise. A cached strength table
    therefore never shifts the noise stream, and a seeded scheduler
    reproduces its output whether or not the stats were already cached.
    """

    def __init__(self, rng: Optional[np.random.Generator] = None,
                 stats_cache: Optional[StrengthStatsCache] = None,
                 resample_per_comparison: bool = False,
                 seed: Optional[int] = RANDOM_SEED):
        self.seed = seed
        if rng is not None:
            strength_rng = noise_rng = rng
        else:
            strength_seq, noise_seq = np.random.SeedSequence(seed).spawn(2)
            strength_rng = np.random.default_rng(strength_seq)
            noise_rng = np.random.default_rng(noise_seq)
        self.stats_cache = stats_cache if stats_cache is not None else StrengthStatsCache()
        self.strength_model = StrengthModel(strength_rng)
        self.predictor = MatchPredictor(noise_rng)
        self.generator = ScheduleGenerator()
        self.optimizer = ScheduleOptimizer(self.predictor, resample_per_comparison)
        self.report_builder = PredictionReportBuilder(self.predictor)
        self.validator = ScheduleValidator()

    def run(self, competitors: Sequence[str], venues: Sequence[str], start_date) -> ScheduleRun:
        """
        Generate an ordered schedule with predictions.

        Args:
            competitors: Team names
            venues: Venue names
            start_date: Start date (date or YYYY-MM-DD string)

        Returns:
            ScheduleRun with ordered matches and one prediction per match

        Raises:
            ValidationError: If the inputs are unusable; nothing is generated
                and the cached stats are left untouched
        """
        start_time = datetime.now()
        competitors, venues, start = self.validator.validate_inputs(competitors, venues, start_date)

        stats = self.stats_cache.get(competitors, self.strength_model, self.seed)

        matches = self.generator.generate(competitors, venues, start)
        matches = self.optimizer.optimize(matches, stats)
        predictions = self.report_builder.build_report(matches, stats)
        validation = self.validator.validate_schedule(matches, competitors, venues)

        generation_time = (datetime.now() - start_time).total_seconds()
        logger.info(
            "Schedule run complete: %d matches, %d predictions in %.3fs",
            len(matches), len(predictions), generation_time
        )

        return ScheduleRun(
            competitors=competitors,
            venues=venues,
            start_date=start,
            stats=stats,
            matches=matches,
            predictions=predictions,
            validation=validation,
            generation_time=generation_time
        )

    def to_response(self, run: ScheduleRun) -> Dict:
        """Convert a run into the JSON-ready response payload."""
        return {
            "success": True,
            "message": f"Schedule generated successfully with {len(run.matches)} matches",
            "total_matches": len(run.matches),
            "matches": [match.to_dict() for match in run.matches],
            "predictions": [prediction.to_dict() for prediction in run.predictions],
            "summary": self.report_builder.summarize(run.predictions),
            "validation": run.validation.to_dict() if run.validation else {},
            "generation_time": run.generation_time
        }

    def team_strengths(self, competitors: Sequence[str]) -> Dict:
        """Strength stats for a team list, through the same cache as run()."""
        competitors = [str(name).strip() for name in competitors]
        stats = self.stats_cache.get(competitors, self.strength_model, self.seed)
        return {team: stats[team].to_dict() for team in competitors if team in stats}
