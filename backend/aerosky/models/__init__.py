"""AeroSky - Models initialization."""
from aerosky.models.user import User
from aerosky.models.test import TestResult
from aerosky.models.practice import PracticeSession


__all__ = [
    "User",
    "TestResult",
    "PracticeSession",
]
