"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository
from repositories.feeding_repository import FeedingRepository

__all__ = [
    "BaseRepository",
    "FeedingRepository",
]
