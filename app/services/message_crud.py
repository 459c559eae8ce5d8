from sqlalchemy.orm import Session
from typing import List, Optional
from datetime import datetime, timezone
from app.exceptions import InvalidStatusError
from app.models.message_model import Message
from app.schemas.message_schema import MessageCreate, MessageStatus

MESSAGE_STATUSES = [s.value for s in MessageStatus]


class MessageCRUD:
    @staticmethod
    def get_messages(db: Session) -> List[Message]:
        return db.query(Message).order_by(Message.id).all()

    @staticmethod
    def get_message_by_id(db: Session, message_id: int) -> Optional[Message]:
        return db.get(Message, message_id)

    @staticmethod
    def get_messages_by_sender(db: Session, sender_id: int) -> List[Message]:
        return db.query(Message).filter(Message.sender_id == sender_id).order_by(Message.id).all()

    @staticmethod
    def get_messages_by_receiver(db: Session, receiver_id: int) -> List[Message]:
        return db.query(Message).filter(Message.receiver_id == receiver_id).order_by(Message.id).all()

    @staticmethod
    def create_message(db: Session, message: MessageCreate) -> Message:
        """Store a message; status and timestamp are always set here"""
        db_message = Message(
            sender_id=message.sender_id,
            receiver_id=message.receiver_id,
            content=message.content,
            channel=message.channel.value,
            status=MessageStatus.sent.value,
            timestamp=datetime.now(timezone.utc),
            message_metadata=message.message_metadata,
        )
        db.add(db_message)
        db.commit()
        db.refresh(db_message)
        return db_message

    @staticmethod
    def update_message_status(db: Session, message_id: int, status) -> Optional[Message]:
        value = status.value if isinstance(status, MessageStatus) else status
        if value not in MESSAGE_STATUSES:
            raise InvalidStatusError(value, MESSAGE_STATUSES)

        db_message = db.get(Message, message_id)
        if not db_message:
            return None

        db_message.status = value
        db.commit()
        db.refresh(db_message)
        return db_message


message_crud = MessageCRUD()
