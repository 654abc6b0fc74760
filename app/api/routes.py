"""
API routes for schedule generation and team strength analysis.
"""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel
from typing import List, Dict, Optional
from datetime import datetime
from celery.result import AsyncResult

from app.services.strength_model import StrengthStatsCache
from app.services.tournament import TournamentScheduler
from app.services.validator import ValidationError
from app.core.config import (
    GAME_TIME_SLOTS, SLOTS_PER_VENUE, HOME_ADVANTAGE, DEFAULT_STRENGTH,
    PREDICTION_NOISE, MAX_COMPETITORS, MIN_COMPETITORS, MIN_VENUES,
    RANDOM_SEED
)
from app.core.celery_app import celery_app
from app.core.logging_config import get_logger
from app.tasks.scheduler_tasks import generate_schedule_task

logger = get_logger(__name__)

router = APIRouter(prefix="/api", tags=["schedule"])

# Strength stats live until the posted team list or seed changes
stats_cache = StrengthStatsCache()


class ScheduleRequest(BaseModel):
    """Request model for schedule generation."""
    teams: List[str]
    venues: List[str]
    start_date: Optional[str] = None
    seed: Optional[int] = None
    resample_per_comparison: bool = False


class StrengthRequest(BaseModel):
    """Request model for team strength analysis."""
    teams: List[str]
    seed: Optional[int] = None


class MatchResponse(BaseModel):
    """Response model for a single match."""
    id: str
    home: str
    away: str
    date: str  # M/D/YYYY
    time: str  # HH:MM
    venue: str


class ScoreResponse(BaseModel):
    home: int
    away: int


class PredictionResponse(BaseModel):
    """Response model for a single match prediction."""
    match: str
    home_win: float
    away_win: float
    predicted_score: ScoreResponse
    date: str
    time: str
    venue: str


class ScheduleResponse(BaseModel):
    """Response model for schedule generation."""
    success: bool
    message: str
    total_matches: int
    matches: List[MatchResponse]
    predictions: List[PredictionResponse]
    summary: Dict
    validation: Dict
    generation_time: float


class TeamStrength(BaseModel):
    """Strength analysis for one team."""
    name: str
    strength: float
    form: List[int]
    win_streak: int


def _scheduler(seed: Optional[int] = None, resample_per_comparison: bool = False) -> TournamentScheduler:
    return TournamentScheduler(
        stats_cache=stats_cache,
        seed=seed if seed is not None else RANDOM_SEED,
        resample_per_comparison=resample_per_comparison
    )


@router.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "timestamp": datetime.now().isoformat()}


@router.post("/schedule", response_model=ScheduleResponse)
async def generate_schedule(request: ScheduleRequest):
    """
    Generate a balanced round-robin schedule.

    This endpoint:
    1. Validates the team list, venue list and start date
    2. Generates every pairing with date, time and venue
    3. Orders the matches by predicted competitive balance
    4. Returns the schedule with one prediction per match
    """
    try:
        scheduler = _scheduler(request.seed, request.resample_per_comparison)
        run = scheduler.run(request.teams, request.venues, request.start_date)
        return ScheduleResponse(**scheduler.to_response(run))

    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception("Schedule generation failed")
        raise HTTPException(status_code=500, detail=f"Schedule generation failed: {str(e)}")


@router.post("/schedule/async")
async def generate_schedule_async(request: ScheduleRequest):
    """
    Start async schedule generation task.

    Returns:
        dict: Task ID for polling status
    """
    try:
        task = generate_schedule_task.delay(
            request.teams,
            request.venues,
            request.start_date,
            request.seed,
            request.resample_per_comparison
        )

        return {
            "task_id": task.id,
            "status": "PENDING",
            "message": "Schedule generation started"
        }
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Failed to start task: {str(e)}")


@router.get("/schedule/status/{task_id}")
async def get_schedule_status(task_id: str):
    """
    Get status of async schedule generation task.

    Args:
        task_id: Celery task ID

    Returns:
        dict: Task status and result (if complete)
    """
    try:
        task_result = AsyncResult(task_id, app=celery_app)

        if task_result.state == "PENDING":
            response = {
                "task_id": task_id,
                "status": "PENDING",
                "message": "Task is waiting to start..."
            }
        elif task_result.state == "PROGRESS":
            response = {
                "task_id": task_id,
                "status": "PROGRESS",
                "message": task_result.info.get("status", "Processing...")
            }
        elif task_result.state == "SUCCESS":
            response = {
                "task_id": task_id,
                "status": "SUCCESS",
                "result": task_result.result
            }
        elif task_result.state == "FAILURE":
            response = {
                "task_id": task_id,
                "status": "FAILURE",
                "message": str(task_result.info)
            }
        else:
            response = {
                "task_id": task_id,
                "status": task_result.state,
                "message": f"Task state: {task_result.state}"
            }

        return response
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Failed to get task status: {str(e)}")


@router.post("/strengths", response_model=List[TeamStrength])
async def get_team_strengths(request: StrengthRequest):
    """
    Strength analysis for a team list (strength, recent form, win streak).
    """
    try:
        scheduler = _scheduler(request.seed)
        strengths = scheduler.team_strengths(request.teams)
        return [
            TeamStrength(name=name, **values)
            for name, values in strengths.items()
        ]
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Failed to get team strengths: {str(e)}")


@router.get("/info")
async def get_schedule_info():
    """
    Scheduling rules and model constants.
    """
    return {
        "time_slots": [slot.strftime("%H:%M") for slot in GAME_TIME_SLOTS],
        "slots_per_venue_per_day": SLOTS_PER_VENUE,
        "min_teams": MIN_COMPETITORS,
        "max_teams": MAX_COMPETITORS,
        "min_venues": MIN_VENUES,
        "home_advantage": HOME_ADVANTAGE,
        "default_strength": DEFAULT_STRENGTH,
        "prediction_noise": PREDICTION_NOISE,
        "date_format": "YYYY-MM-DD"
    }
