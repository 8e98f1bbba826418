"""AeroSky - API Router."""
from fastapi import APIRouter

from aerosky.api.v1.auth import router as auth_router
from aerosky.api.v1.questions import router as questions_router
from aerosky.api.v1.test import router as test_router
from aerosky.api.v1.practice import router as practice_router
from aerosky.api.v1.analytics import router as analytics_router

api_router = APIRouter()

api_router.include_router(auth_router)
api_router.include_router(questions_router)
api_router.include_router(test_router)
api_router.include_router(practice_router)
api_router.include_router(analytics_router)
