"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.feeding_schemas import (
    FeedingCreate,
    FeedingReplace,
    FeedingResponse,
)

__all__ = [
    # Feeding schemas
    "FeedingCreate",
    "FeedingReplace",
    "FeedingResponse",
]
