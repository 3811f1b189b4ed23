"""
Feeding Repository - Data access layer for feedings
"""

from typing import List
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import Feeding


class FeedingRepository(BaseRepository[Feeding]):
    """Repository for feeding data access"""

    def __init__(self, db: Session):
        super().__init__(db, Feeding)

    def get_all_ordered(self) -> List[Feeding]:
        """Every feeding, lowest id first"""
        return self.get_all()

    def create_feeding(self, name: str, when=None, pet_id: int = None) -> Feeding:
        """Insert a feeding and return it with its database-assigned id"""
        feeding = Feeding(name=name, pet_id=pet_id)
        if when is not None:
            feeding.when = when
        return self.create(feeding)
