"""AeroSky - Services initialization."""
from aerosky.services.analytics import AnalyticsService
from aerosky.services.auth import (
    AuthService,
    AuthenticationError,
    InvalidCredentialsError,
    UserExistsError,
)
from aerosky.services.stats import StatsService

__all__ = [
    "AnalyticsService",
    "AuthService",
    "AuthenticationError",
    "InvalidCredentialsError",
    "UserExistsError",
    "StatsService",
]
