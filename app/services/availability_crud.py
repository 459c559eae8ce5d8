from sqlalchemy.orm import Session
from typing import List, Optional
from app.models.availability_model import Availability
from app.schemas.availability_schema import AvailabilityCreate, AvailabilityUpdate


class AvailabilityCRUD:
    @staticmethod
    def get_availability(db: Session) -> List[Availability]:
        return db.query(Availability).order_by(Availability.id).all()

    @staticmethod
    def get_availability_by_id(db: Session, availability_id: int) -> Optional[Availability]:
        return db.get(Availability, availability_id)

    @staticmethod
    def get_availability_by_provider(db: Session, provider_id: int) -> List[Availability]:
        """Weekly windows for one provider; overlapping windows are allowed"""
        return (
            db.query(Availability)
            .filter(Availability.provider_id == provider_id)
            .order_by(Availability.id)
            .all()
        )

    @staticmethod
    def create_availability(db: Session, availability: AvailabilityCreate) -> Availability:
        db_availability = Availability(**availability.model_dump())
        db.add(db_availability)
        db.commit()
        db.refresh(db_availability)
        return db_availability

    @staticmethod
    def update_availability(
            db: Session, availability_id: int, availability_update: AvailabilityUpdate
    ) -> Optional[Availability]:
        db_availability = db.get(Availability, availability_id)
        if not db_availability:
            return None

        for key, value in availability_update.model_dump(exclude_unset=True).items():
            setattr(db_availability, key, value)

        db.commit()
        db.refresh(db_availability)
        return db_availability


availability_crud = AvailabilityCRUD()
