from pydantic import Field, AliasChoices
from typing import Optional, Any
from datetime import datetime
from enum import Enum
from app.schemas.base_schema import CamelModel


class MessageChannel(str, Enum):
    sms = "sms"
    whatsapp = "whatsapp"
    ai = "ai"


class MessageStatus(str, Enum):
    sent = "sent"
    delivered = "delivered"
    read = "read"
    failed = "failed"


class MessageBase(CamelModel):
    sender_id: Optional[int] = None
    receiver_id: Optional[int] = None
    content: str = Field(..., min_length=1)
    channel: MessageChannel = MessageChannel.sms
    # The ORM attribute is message_metadata; the wire name stays "metadata"
    message_metadata: Optional[Any] = Field(
        None,
        validation_alias=AliasChoices("message_metadata", "metadata"),
        serialization_alias="metadata",
    )


class MessageCreate(MessageBase):
    pass


class MessageStatusUpdate(CamelModel):
    status: MessageStatus


class MessageResponse(MessageBase):
    id: int
    status: MessageStatus
    timestamp: datetime
