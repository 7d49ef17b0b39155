"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import exercises, reports, users, workouts

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(users.router, prefix="/user", tags=["Users"])
api_router.include_router(exercises.router, prefix="/exercises", tags=["Exercises"])
api_router.include_router(workouts.router, prefix="/workouts", tags=["Workout plans"])
api_router.include_router(reports.router, prefix="/report", tags=["Reports"])
