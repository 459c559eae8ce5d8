"""String-keyed settings registry.

Values are free-form JSON (flags, numbers, nested objects) and are stored as
given; what each key holds is agreed between its readers and writers.
"""
from sqlalchemy.orm import Session
from typing import Any, List, Optional
from app.exceptions import DuplicateKeyError
from app.models.ai_setting_model import AISetting


class AISettingCRUD:
    @staticmethod
    def get_settings(db: Session) -> List[AISetting]:
        return db.query(AISetting).order_by(AISetting.key).all()

    @staticmethod
    def get_setting(db: Session, key: str) -> Optional[AISetting]:
        return db.get(AISetting, key)

    @staticmethod
    def create_setting(db: Session, key: str, value: Any, description: Optional[str] = None) -> AISetting:
        if db.get(AISetting, key) is not None:
            raise DuplicateKeyError("Setting", key)

        db_setting = AISetting(key=key, value=value, description=description)
        db.add(db_setting)
        db.commit()
        db.refresh(db_setting)
        return db_setting

    @staticmethod
    def update_setting(db: Session, key: str, value: Any) -> Optional[AISetting]:
        """Replace the value only; the description is kept"""
        db_setting = db.get(AISetting, key)
        if not db_setting:
            return None

        db_setting.value = value
        db.commit()
        db.refresh(db_setting)
        return db_setting

    @staticmethod
    def upsert_setting(db: Session, key: str, value: Any, description: Optional[str] = None) -> AISetting:
        """Create the key or replace its value in one step.

        An existing description is only replaced when a new one is given.
        """
        db_setting = db.get(AISetting, key)
        if db_setting is None:
            db_setting = AISetting(key=key, value=value, description=description)
            db.add(db_setting)
        else:
            db_setting.value = value
            if description is not None:
                db_setting.description = description

        db.commit()
        db.refresh(db_setting)
        return db_setting


ai_setting_crud = AISettingCRUD()
