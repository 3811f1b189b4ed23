"""Feeding routes - list, fetch, create, replace and delete feedings"""

from fastapi import APIRouter, Depends, Path, Request, Response, status
from sqlalchemy.orm import Session
from typing import Annotated, List

from api.dependencies import get_db
from api.responses import ErrorResponse
from domain.schemas.feeding_schemas import (
    FEEDING_ID_MAX,
    FEEDING_ID_MIN,
    FeedingCreate,
    FeedingReplace,
    FeedingResponse,
)
from services import FeedingService

router = APIRouter(prefix="/feedings", tags=["Feedings"])

NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}

FeedingId = Annotated[
    int, Path(ge=FEEDING_ID_MIN, le=FEEDING_ID_MAX, description="Feeding id")
]


@router.get("", response_model=List[FeedingResponse])
def list_feedings(db: Session = Depends(get_db)):
    """Return all feedings ordered by id"""
    feedings = FeedingService.list_feedings(db)
    return [FeedingResponse.model_validate(f) for f in feedings]


@router.get("/{feeding_id}", response_model=FeedingResponse, responses=NOT_FOUND)
def get_feeding(feeding_id: FeedingId, db: Session = Depends(get_db)):
    """Fetch a single feeding by id"""
    feeding = FeedingService.get_feeding(db, feeding_id)
    return FeedingResponse.model_validate(feeding)


@router.post("", response_model=FeedingResponse, status_code=status.HTTP_201_CREATED)
def create_feeding(
    payload: FeedingCreate,
    request: Request,
    response: Response,
    db: Session = Depends(get_db),
):
    """
    Create a new feeding.

    Any id in the body is ignored; the database assigns one. The response
    carries a Location header pointing at the new feeding.
    """
    feeding = FeedingService.create_feeding(db, payload)
    response.headers["Location"] = str(
        request.url_for("get_feeding", feeding_id=feeding.id)
    )
    return FeedingResponse.model_validate(feeding)


@router.put(
    "/{feeding_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        **NOT_FOUND,
    },
)
def replace_feeding(
    feeding_id: FeedingId, payload: FeedingReplace, db: Session = Depends(get_db)
):
    """
    Replace a feeding.

    The id in the body must match the id in the URL (400 otherwise). Returns
    404 if the feeding was deleted before the change could be saved.
    """
    FeedingService.replace_feeding(db, feeding_id, payload)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{feeding_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND,
)
def delete_feeding(feeding_id: FeedingId, db: Session = Depends(get_db)):
    """Delete a feeding"""
    FeedingService.delete_feeding(db, feeding_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
