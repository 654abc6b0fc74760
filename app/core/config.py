"""
Configuration constants for the Round-Robin Tournament Scheduler.
All configurable settings are defined here.
"""

from datetime import time
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Input Rules
DATE_INPUT_FORMAT = "%Y-%m-%d"
MIN_COMPETITORS = 2
MIN_VENUES = 1
# Upper bound keeps the pair count (n * (n - 1) / 2) small
MAX_COMPETITORS = int(os.getenv("SCHEDULER_MAX_COMPETITORS", "64"))

# Game Time Rules
GAME_TIME_SLOTS = [
    time(14, 0),   # 2:00 PM
    time(16, 30),  # 4:30 PM
]
SLOTS_PER_VENUE = len(GAME_TIME_SLOTS)  # Games per venue per day

# Strength Model
STRENGTH_MIN = 0.0
STRENGTH_MAX = 100.0
BASE_STRENGTH_RANGE = (0.0, 100.0)
RECENT_FORM_RANGE = (-10.0, 10.0)
CONSISTENCY_RANGE = (0.0, 10.0)
FORM_LENGTH = 5      # Last 5 matches
FORM_OUTCOMES = 3    # 0, 1 or 2 per match
MAX_WIN_STREAK = 3

# Match Prediction
HOME_ADVANTAGE = 5
DEFAULT_STRENGTH = 50
PREDICTION_NOISE = 5  # Noise drawn from [-5, 5)

# Optional fixed seed for reproducible runs (unset = fresh entropy)
RANDOM_SEED = os.getenv("SCHEDULER_RANDOM_SEED")
RANDOM_SEED = int(RANDOM_SEED) if RANDOM_SEED else None

# Schedule Validation Penalties
PENALTY_WEIGHTS = {
    "missing_pairing": 1000.0,
    "duplicate_pairing": 1000.0,
    "self_pairing": 1000.0,
    "unknown_venue": 1000.0,
    "invalid_time_slot": 1000.0,
    "venue_slot_conflict": 1000.0,
    "team_double_booking": 100.0,
    "home_away_imbalance": 10.0,
}

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# API
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")
API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "8000"))

# Celery worker
CELERY_CONCURRENCY = int(os.getenv("CELERY_CONCURRENCY", "2"))

# Redis connection URL (default to localhost)
REDIS_URL = os.getenv("REDIS_URL", "redis://localhost:6379/0")
