from sqlalchemy.orm import Session
from typing import List, Optional
from datetime import datetime, timezone
from app.models.ai_conversation_model import AIConversation
from app.schemas.ai_schema import AIConversationCreate, AIConversationUpdate


class AIConversationCRUD:
    @staticmethod
    def get_conversations(db: Session) -> List[AIConversation]:
        return db.query(AIConversation).order_by(AIConversation.id).all()

    @staticmethod
    def get_conversation_by_id(db: Session, conversation_id: int) -> Optional[AIConversation]:
        return db.get(AIConversation, conversation_id)

    @staticmethod
    def get_conversations_by_persona(db: Session, persona_id: int) -> List[AIConversation]:
        return (
            db.query(AIConversation)
            .filter(AIConversation.persona_id == persona_id)
            .order_by(AIConversation.id)
            .all()
        )

    @staticmethod
    def create_conversation(db: Session, conversation: AIConversationCreate) -> AIConversation:
        now = datetime.now(timezone.utc)
        db_conversation = AIConversation(
            persona_id=conversation.persona_id,
            user_id=conversation.user_id,
            title=conversation.title,
            created_at=now,
            updated_at=now,
        )
        db.add(db_conversation)
        db.commit()
        db.refresh(db_conversation)
        return db_conversation

    @staticmethod
    def update_conversation(
            db: Session, conversation_id: int, conversation_update: AIConversationUpdate
    ) -> Optional[AIConversation]:
        db_conversation = db.get(AIConversation, conversation_id)
        if not db_conversation:
            return None

        for key, value in conversation_update.model_dump(exclude_unset=True).items():
            setattr(db_conversation, key, value)
        db_conversation.updated_at = datetime.now(timezone.utc)

        db.commit()
        db.refresh(db_conversation)
        return db_conversation


ai_conversation_crud = AIConversationCRUD()
