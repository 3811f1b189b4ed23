from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime, timezone


# Range of the INTEGER columns (feeding.id, feeding.pet_id) on every supported database
FEEDING_ID_MIN = -(2**31)
FEEDING_ID_MAX = 2**31 - 1


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class FeedingCreate(BaseModel):
    """Schema for creating a feeding; an ``id`` sent by the client is ignored"""

    name: str = Field(
        ..., min_length=1, max_length=200, description="What the pet was fed (e.g. 'Oats')"
    )
    when: Optional[datetime] = Field(
        None, description="When the feeding happened; defaults to now"
    )
    pet_id: Optional[int] = Field(
        None, ge=FEEDING_ID_MIN, le=FEEDING_ID_MAX, description="Pet that was fed"
    )

    model_config = {"from_attributes": True, "extra": "ignore"}


class FeedingReplace(BaseModel):
    """Schema for replacing a feeding. Every field is overwritten."""

    id: int = Field(
        ..., ge=FEEDING_ID_MIN, le=FEEDING_ID_MAX, description="Must match the id in the URL"
    )
    name: str = Field(..., min_length=1, max_length=200)
    when: datetime = Field(default_factory=_utcnow)
    pet_id: Optional[int] = Field(None, ge=FEEDING_ID_MIN, le=FEEDING_ID_MAX)

    model_config = {"from_attributes": True}


class FeedingResponse(BaseModel):
    """Schema for feeding response"""

    id: int
    name: str
    when: datetime
    pet_id: Optional[int] = None

    model_config = {"from_attributes": True}
