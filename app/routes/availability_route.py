from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List
from app.services.availability_crud import availability_crud
from app.schemas.availability_schema import (
    AvailabilityCreate,
    AvailabilityUpdate,
    AvailabilityResponse,
)
from app.database import get_db
from app.logger import get_logger

availability_router = APIRouter()
logger = get_logger(__name__)


@availability_router.get(
    "/availability/provider/{provider_id}",
    response_model=List[AvailabilityResponse],
    status_code=status.HTTP_200_OK,
)
def get_provider_availability(provider_id: int, db: Session = Depends(get_db)):
    windows = availability_crud.get_availability_by_provider(db, provider_id)
    return [AvailabilityResponse.model_validate(window) for window in windows]


@availability_router.get(
    "/availability/{availability_id}",
    response_model=AvailabilityResponse,
    status_code=status.HTTP_200_OK,
)
def get_availability(availability_id: int, db: Session = Depends(get_db)):
    window = availability_crud.get_availability_by_id(db, availability_id)
    if not window:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Availability not found"
        )
    return AvailabilityResponse.model_validate(window)


@availability_router.post(
    "/availability",
    response_model=AvailabilityResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_availability(availability: AvailabilityCreate, db: Session = Depends(get_db)):
    try:
        logger.info(
            f"Creating availability for provider {availability.provider_id} "
            f"on day {availability.day_of_week}"
        )
        window = availability_crud.create_availability(db, availability)
        return AvailabilityResponse.model_validate(window)

    except Exception as e:
        logger.error(f"Error creating availability: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error occurred while creating availability",
        )


@availability_router.patch(
    "/availability/{availability_id}",
    response_model=AvailabilityResponse,
    status_code=status.HTTP_200_OK,
)
def update_availability(
    availability_id: int,
    availability_update: AvailabilityUpdate,
    db: Session = Depends(get_db),
):
    try:
        logger.info(f"Updating availability: {availability_id}")
        window = availability_crud.update_availability(db, availability_id, availability_update)
        if not window:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Availability not found"
            )
        return AvailabilityResponse.model_validate(window)

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error updating availability {availability_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error occurred while updating availability",
        )
