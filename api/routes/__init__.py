"""API routes package"""

from . import users, meals, health

__all__ = ["users", "meals", "health"]
