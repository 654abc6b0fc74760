"""
Main FastAPI application for the Round-Robin Tournament Scheduler.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api import routes
from app.core.config import CORS_ORIGINS
from app.core.logging_config import setup_logging

setup_logging()

app = FastAPI(
    title="Tournament Scheduler API",
    description="API for generating balanced round-robin schedules with match predictions",
    version="1.0.0"
)

# Enable CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(routes.router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Tournament Scheduler API",
        "version": "1.0.0",
        "endpoints": {
            "generate": "/api/schedule",
            "generate_async": "/api/schedule/async",
            "strengths": "/api/strengths",
            "info": "/api/info",
            "health": "/api/health"
        }
    }
