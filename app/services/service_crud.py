from sqlalchemy.orm import Session
from typing import List, Optional
from app.models.service_model import Service
from app.schemas.service_schema import ServiceCreate, ServiceUpdate
from app.services import ordering


class ServiceCRUD:
    @staticmethod
    def get_services(db: Session) -> List[Service]:
        """All services, lowest position first"""
        return ordering.ordered_query(db, Service).all()

    @staticmethod
    def get_active_services(db: Session) -> List[Service]:
        return ordering.ordered_query(db, Service, active=True).all()

    @staticmethod
    def get_service_by_id(db: Session, service_id: int) -> Optional[Service]:
        return db.get(Service, service_id)

    @staticmethod
    def create_service(db: Session, service: ServiceCreate) -> Service:
        data = service.model_dump()
        if data.get("position") is None:
            data["position"] = ordering.next_position(db, Service)

        db_service = Service(**data)
        db.add(db_service)
        db.commit()
        db.refresh(db_service)
        return db_service

    @staticmethod
    def update_service(db: Session, service_id: int, service_update: ServiceUpdate) -> Optional[Service]:
        """Merge only the fields the caller sent"""
        db_service = db.get(Service, service_id)
        if not db_service:
            return None

        for key, value in service_update.model_dump(exclude_unset=True).items():
            setattr(db_service, key, value)

        db.commit()
        db.refresh(db_service)
        return db_service

    @staticmethod
    def update_service_position(db: Session, service_id: int, position: int) -> Optional[Service]:
        return ordering.set_position(db, Service, service_id, position)

    @staticmethod
    def update_services_order(db: Session, service_ids: List[int]) -> List[Service]:
        return ordering.reorder(db, Service, service_ids)

    @staticmethod
    def delete_service(db: Session, service_id: int) -> bool:
        # Hard delete; bookings pointing at the service are left as they are
        db_service = db.get(Service, service_id)
        if not db_service:
            return False
        db.delete(db_service)
        db.commit()
        return True


service_crud = ServiceCRUD()
