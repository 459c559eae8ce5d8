from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List
from app.exceptions import ReferencedEntityNotFound, InvalidStatusError
from app.services.booking_crud import booking_crud
from app.schemas.booking_schema import (
    BookingCreate,
    BookingResponse,
    BookingStatusUpdate,
    BookingQuoteRequest,
    BookingQuote,
)
from app.database import get_db
from app.logger import get_logger

booking_router = APIRouter()
logger = get_logger(__name__)


@booking_router.post(
    "/bookings", response_model=BookingResponse, status_code=status.HTTP_201_CREATED
)
def create_booking(booking: BookingCreate, db: Session = Depends(get_db)):
    """Create a pending booking; the end time follows from the service duration"""
    try:
        logger.info(
            f"Creating booking for service {booking.service_id} at {booking.start_time.isoformat()}"
        )
        db_booking = booking_crud.create_booking(db, booking)
        logger.info(f"Booking created: {db_booking.id}")
        return BookingResponse.model_validate(db_booking)

    except ReferencedEntityNotFound as e:
        logger.warning(f"Booking rejected: {str(e)}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except Exception as e:
        logger.error(f"Error creating booking: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error occurred while creating booking",
        )


@booking_router.post(
    "/bookings/quote", response_model=BookingQuote, status_code=status.HTTP_200_OK
)
def quote_booking(request: BookingQuoteRequest, db: Session = Depends(get_db)):
    """Total price and duration for a service with add-ons"""
    try:
        return booking_crud.quote_booking(db, request.service_id, request.addon_ids)

    except ReferencedEntityNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@booking_router.get(
    "/bookings", response_model=List[BookingResponse], status_code=status.HTTP_200_OK
)
def get_bookings(db: Session = Depends(get_db)):
    try:
        logger.info("Fetching bookings")
        bookings = booking_crud.get_bookings(db)
        return [BookingResponse.model_validate(booking) for booking in bookings]

    except Exception as e:
        logger.error(f"Error fetching bookings: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error occurred while fetching bookings",
        )


@booking_router.get(
    "/bookings/phone/{phone}",
    response_model=List[BookingResponse],
    status_code=status.HTTP_200_OK,
)
def get_bookings_by_phone(phone: str, db: Session = Depends(get_db)):
    try:
        logger.info(f"Fetching bookings for phone: {phone}")
        bookings = booking_crud.get_bookings_by_phone(db, phone)
        return [BookingResponse.model_validate(booking) for booking in bookings]

    except Exception as e:
        logger.error(f"Error fetching bookings by phone: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error occurred while fetching bookings by phone",
        )


@booking_router.get(
    "/bookings/{booking_id}",
    response_model=BookingResponse,
    status_code=status.HTTP_200_OK,
)
def get_booking(booking_id: int, db: Session = Depends(get_db)):
    try:
        logger.info(f"Fetching booking: {booking_id}")
        booking = booking_crud.get_booking_by_id(db, booking_id)
        if not booking:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Booking not found"
            )
        return BookingResponse.model_validate(booking)

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error fetching booking {booking_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error occurred while fetching booking",
        )


@booking_router.patch(
    "/bookings/{booking_id}/status",
    response_model=BookingResponse,
    status_code=status.HTTP_200_OK,
)
def update_booking_status(
    booking_id: int,
    payload: BookingStatusUpdate,
    db: Session = Depends(get_db),
):
    try:
        logger.info(f"Updating booking {booking_id} status to {payload.status.value}")
        booking = booking_crud.update_booking_status(db, booking_id, payload.status)
        if not booking:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Booking not found"
            )
        logger.info(f"Booking status updated: {booking_id} -> {booking.status}")
        return BookingResponse.model_validate(booking)

    except HTTPException:
        raise
    except InvalidStatusError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    except Exception as e:
        logger.error(f"Error updating booking status {booking_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error occurred while updating booking status",
        )
