"""
Celery tasks for schedule generation.
"""

from app.core.celery_app import celery_app
from app.services.strength_model import StrengthStatsCache
from app.services.tournament import TournamentScheduler
from app.services.validator import ValidationError
from app.core.config import RANDOM_SEED
from app.core.logging_config import get_logger
import traceback

logger = get_logger(__name__)

# Per-worker strength stats, same team-list and seed policy as the API
stats_cache = StrengthStatsCache()


@celery_app.task(bind=True, name="generate_schedule")
def generate_schedule_task(self, teams, venues, start_date, seed=None, resample_per_comparison=False):
    """
    Async task to generate a tournament schedule.

    Args:
        teams: Team names
        venues: Venue names
        start_date: Start date as YYYY-MM-DD
        seed: Optional random seed for reproducible predictions
        resample_per_comparison: Use the per-comparison ordering

    Returns:
        dict: Schedule data with matches, predictions and validation results
    """
    try:
        self.update_state(
            state="PROGRESS",
            meta={"status": f"Generating schedule for {len(teams or [])} teams..."}
        )

        scheduler = TournamentScheduler(
            stats_cache=stats_cache,
            seed=seed if seed is not None else RANDOM_SEED,
            resample_per_comparison=resample_per_comparison
        )
        run = scheduler.run(teams, venues, start_date)

        return scheduler.to_response(run)

    except ValidationError as e:
        logger.warning("Schedule request rejected: %s", e)
        return {
            "success": False,
            "message": str(e),
            "error": str(e)
        }

    except Exception as e:
        error_trace = traceback.format_exc()
        logger.error("Error in generate_schedule_task: %s", error_trace)

        return {
            "success": False,
            "message": f"Schedule generation failed: {str(e)}",
            "error": str(e),
            "traceback": error_trace
        }
