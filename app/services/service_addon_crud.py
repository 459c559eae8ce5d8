from sqlalchemy.orm import Session
from typing import List, Optional
from app.models.service_addon_model import ServiceAddon
from app.schemas.service_addon_schema import ServiceAddonCreate, ServiceAddonUpdate
from app.services import ordering


class ServiceAddonCRUD:
    @staticmethod
    def get_addons(db: Session) -> List[ServiceAddon]:
        return ordering.ordered_query(db, ServiceAddon).all()

    @staticmethod
    def get_active_addons(db: Session) -> List[ServiceAddon]:
        return ordering.ordered_query(db, ServiceAddon, active=True).all()

    @staticmethod
    def get_addon_by_id(db: Session, addon_id: int) -> Optional[ServiceAddon]:
        return db.get(ServiceAddon, addon_id)

    @staticmethod
    def create_addon(db: Session, addon: ServiceAddonCreate) -> ServiceAddon:
        data = addon.model_dump()
        if data.get("position") is None:
            data["position"] = ordering.next_position(db, ServiceAddon)

        db_addon = ServiceAddon(**data)
        db.add(db_addon)
        db.commit()
        db.refresh(db_addon)
        return db_addon

    @staticmethod
    def update_addon(db: Session, addon_id: int, addon_update: ServiceAddonUpdate) -> Optional[ServiceAddon]:
        db_addon = db.get(ServiceAddon, addon_id)
        if not db_addon:
            return None

        for key, value in addon_update.model_dump(exclude_unset=True).items():
            setattr(db_addon, key, value)

        db.commit()
        db.refresh(db_addon)
        return db_addon

    @staticmethod
    def update_addon_position(db: Session, addon_id: int, position: int) -> Optional[ServiceAddon]:
        return ordering.set_position(db, ServiceAddon, addon_id, position)

    @staticmethod
    def update_addons_order(db: Session, addon_ids: List[int]) -> List[ServiceAddon]:
        return ordering.reorder(db, ServiceAddon, addon_ids)

    @staticmethod
    def delete_addon(db: Session, addon_id: int) -> bool:
        db_addon = db.get(ServiceAddon, addon_id)
        if not db_addon:
            return False
        db.delete(db_addon)
        db.commit()
        return True


service_addon_crud = ServiceAddonCRUD()
