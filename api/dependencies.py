"""
API dependencies for dependency injection
"""

from typing import Generator
from sqlalchemy.orm import Session
from domain.models import get_db_session


def get_db() -> Generator[Session, None, None]:
    """
    Yield one SQLAlchemy session per request, closed when the response is sent.

    Every route in ``api.routes.feedings`` takes ``db: Session = Depends(get_db)``
    and hands the session to ``FeedingService``. Tests swap in a session bound
    to an in-memory database through ``app.dependency_overrides[get_db]``.
    """
    yield from get_db_session()
