from typing import List
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError
import logging

from domain.models import Feeding
from domain.schemas.feeding_schemas import FeedingCreate, FeedingReplace
from repositories import FeedingRepository
from app.exceptions import ServiceValidationError, NotFoundError

logger = logging.getLogger("tamagotchi.feedings")


class FeedingService:
    """Business logic for feedings"""

    @staticmethod
    def list_feedings(db: Session) -> List[Feeding]:
        """Return every feeding ordered by ascending id (empty list if none)."""
        return FeedingRepository(db).get_all_ordered()

    @staticmethod
    def get_feeding(db: Session, feeding_id: int) -> Feeding:
        """
        Fetch a single feeding.

        Raises:
            NotFoundError: no feeding has this id
        """
        feeding = FeedingRepository(db).get_by_id(feeding_id)
        if feeding is None:
            logger.warning(f"feeding_not_found id={feeding_id}")
            raise NotFoundError(
                f"Feeding {feeding_id} not found", details={"id": feeding_id}
            )
        return feeding

    @staticmethod
    def create_feeding(db: Session, data: FeedingCreate) -> Feeding:
        """Insert a new feeding; the database assigns its id."""
        feeding = FeedingRepository(db).create_feeding(
            name=data.name, when=data.when, pet_id=data.pet_id
        )
        logger.info(f"feeding_created id={feeding.id}")
        return feeding

    @staticmethod
    def replace_feeding(db: Session, feeding_id: int, data: FeedingReplace) -> None:
        """
        Replace every field of an existing feeding.

        The row is not loaded first: the new values are attached as the
        current state of ``feeding_id`` and committed as one UPDATE. If that
        UPDATE matches nothing the feeding was deleted in the meantime.

        Raises:
            ServiceValidationError: the body id differs from ``feeding_id``
            NotFoundError: the feeding no longer exists at commit time
            StaleDataError: the commit conflicted although the row still exists
        """
        if data.id != feeding_id:
            logger.warning(
                f"feeding_replace_id_mismatch path_id={feeding_id} body_id={data.id}"
            )
            raise ServiceValidationError(
                f"Feeding id in body ({data.id}) does not match id in URL ({feeding_id})",
                details={"path_id": feeding_id, "body_id": data.id},
            )

        repo = FeedingRepository(db)
        try:
            repo.replace(Feeding(**data.model_dump()))
        except StaleDataError:
            db.rollback()
            if not FeedingService.feeding_exists(db, feeding_id):
                logger.warning(f"feeding_replace_conflict_deleted id={feeding_id}")
                raise NotFoundError(
                    f"Feeding {feeding_id} not found", details={"id": feeding_id}
                )
            raise

        logger.info(f"feeding_replaced id={feeding_id}")

    @staticmethod
    def delete_feeding(db: Session, feeding_id: int) -> None:
        """
        Delete a feeding.

        Raises:
            NotFoundError: no feeding has this id
        """
        if not FeedingRepository(db).delete(feeding_id):
            logger.warning(f"feeding_delete_not_found id={feeding_id}")
            raise NotFoundError(
                f"Feeding {feeding_id} not found", details={"id": feeding_id}
            )
        logger.info(f"feeding_deleted id={feeding_id}")

    @staticmethod
    def feeding_exists(db: Session, feeding_id: int) -> bool:
        return FeedingRepository(db).exists(feeding_id)
