from datetime import datetime, timezone
from sqlalchemy import Column, String, Integer, Text, JSON
from app.database import Base, UTCDateTime


class Message(Base):
    __tablename__ = "messages"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    sender_id = Column(Integer, nullable=True, index=True)  # None for system/ai messages
    receiver_id = Column(Integer, nullable=True, index=True)  # None for broadcasts
    content = Column(Text, nullable=False)
    channel = Column(String, default="sms", nullable=False)
    status = Column(String, default="sent", nullable=False)
    timestamp = Column(UTCDateTime, default=lambda: datetime.now(timezone.utc), nullable=False)
    # "metadata" is reserved on declarative classes
    message_metadata = Column("metadata", JSON, nullable=True)
