from sqlalchemy.orm import Session
from typing import List, Optional
from datetime import timedelta, timezone
from app.exceptions import ReferencedEntityNotFound, InvalidStatusError
from app.models.booking_model import Booking
from app.models.service_model import Service
from app.models.service_addon_model import ServiceAddon
from app.schemas.booking_schema import BookingCreate, BookingStatus, BookingQuote

BOOKING_STATUSES = [s.value for s in BookingStatus]


class BookingCRUD:
    @staticmethod
    def create_booking(db: Session, booking: BookingCreate) -> Booking:
        """Create a booking for an existing service.

        ``end_time`` is derived from the service's own duration and the status
        always starts as pending. Raises ``ReferencedEntityNotFound`` without
        writing anything when the service does not exist.
        """
        service = db.get(Service, booking.service_id)
        if not service:
            raise ReferencedEntityNotFound("Service", booking.service_id)

        start_time = booking.start_time
        # If start_time is timezone-naive, assume it's UTC
        if start_time.tzinfo is None:
            start_time = start_time.replace(tzinfo=timezone.utc)
        start_time = start_time.astimezone(timezone.utc)

        db_booking = Booking(
            service_id=service.id,
            client_name=booking.client_name,
            client_phone=booking.client_phone,
            start_time=start_time,
            end_time=start_time + timedelta(minutes=service.duration),
            provider_id=booking.provider_id,
            status=BookingStatus.pending.value,
            extras=booking.extras,
            total_price=booking.total_price,
        )
        db.add(db_booking)
        db.commit()
        db.refresh(db_booking)
        return db_booking

    @staticmethod
    def quote_booking(db: Session, service_id: int, addon_ids: List[int]) -> BookingQuote:
        """Price and length of a service plus the chosen add-ons"""
        service = db.get(Service, service_id)
        if not service:
            raise ReferencedEntityNotFound("Service", service_id)

        total_price = service.price
        total_duration = service.duration
        for addon_id in addon_ids:
            addon = db.get(ServiceAddon, addon_id)
            if not addon:
                raise ReferencedEntityNotFound("ServiceAddon", addon_id)
            total_price += addon.price
            total_duration += addon.duration

        return BookingQuote(
            service_id=service_id,
            addon_ids=list(addon_ids),
            total_price=total_price,
            total_duration=total_duration,
        )

    @staticmethod
    def get_booking_by_id(db: Session, booking_id: int) -> Optional[Booking]:
        return db.get(Booking, booking_id)

    @staticmethod
    def get_bookings(db: Session) -> List[Booking]:
        return db.query(Booking).order_by(Booking.id).all()

    @staticmethod
    def get_bookings_by_phone(db: Session, phone: str) -> List[Booking]:
        return (
            db.query(Booking)
            .filter(Booking.client_phone == phone)
            .order_by(Booking.id)
            .all()
        )

    @staticmethod
    def update_booking_status(db: Session, booking_id: int, status) -> Optional[Booking]:
        """Move a booking to any known status.

        Transitions are not ordered: every listed status is reachable from
        every other one. Unknown values raise ``InvalidStatusError`` before the
        booking is looked up.
        """
        value = status.value if isinstance(status, BookingStatus) else status
        if value not in BOOKING_STATUSES:
            raise InvalidStatusError(value, BOOKING_STATUSES)

        db_booking = db.get(Booking, booking_id)
        if not db_booking:
            return None

        db_booking.status = value
        db.commit()
        db.refresh(db_booking)
        return db_booking


booking_crud = BookingCRUD()
