from datetime import datetime, timezone
from sqlalchemy import Column, String, Integer
from app.database import Base, UTCDateTime


class AIConversation(Base):
    __tablename__ = "ai_conversations"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    persona_id = Column(Integer, nullable=False, index=True)
    user_id = Column(Integer, nullable=True)  # None for anonymous conversations
    title = Column(String, default="New Conversation", nullable=False)
    created_at = Column(UTCDateTime, default=lambda: datetime.now(timezone.utc), nullable=False)
    updated_at = Column(UTCDateTime, default=lambda: datetime.now(timezone.utc), nullable=False)
