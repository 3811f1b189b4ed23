"""
Feeding model - one row per time a pet was fed.
"""

from sqlalchemy import Column, Integer, Text, TIMESTAMP
from sqlalchemy.sql import func

from domain.models.database import Base


class Feeding(Base):
    """A single feeding; ``id`` is assigned by the database and never changes."""

    __tablename__ = "feeding"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    when = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())
    pet_id = Column(Integer)

    def __repr__(self) -> str:
        return f"<Feeding id={self.id} name={self.name!r}>"
