"""Services package - Business logic layer"""

from services.feeding_service import FeedingService

__all__ = [
    "FeedingService",
]
