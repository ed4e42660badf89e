"""
App package - Application configuration and core utilities.
Contains settings, exceptions, and foundational application code.
"""

from app.config import settings, Settings, Environment
from app.exceptions import UnauthorizedError

__all__ = [
    "settings",
    "Settings",
    "Environment",
    "UnauthorizedError",
]
