from sqlalchemy.orm import Session
from typing import List, Optional
from app.models.ai_persona_model import AIPersona
from app.schemas.ai_schema import AIPersonaCreate, AIPersonaUpdate


class AIPersonaCRUD:
    @staticmethod
    def get_personas(db: Session) -> List[AIPersona]:
        return db.query(AIPersona).order_by(AIPersona.id).all()

    @staticmethod
    def get_persona_by_id(db: Session, persona_id: int) -> Optional[AIPersona]:
        return db.get(AIPersona, persona_id)

    @staticmethod
    def create_persona(db: Session, persona: AIPersonaCreate) -> AIPersona:
        db_persona = AIPersona(**persona.model_dump())
        db.add(db_persona)
        db.commit()
        db.refresh(db_persona)
        return db_persona

    @staticmethod
    def update_persona(db: Session, persona_id: int, persona_update: AIPersonaUpdate) -> Optional[AIPersona]:
        db_persona = db.get(AIPersona, persona_id)
        if not db_persona:
            return None

        for key, value in persona_update.model_dump(exclude_unset=True).items():
            setattr(db_persona, key, value)

        db.commit()
        db.refresh(db_persona)
        return db_persona


ai_persona_crud = AIPersonaCRUD()
