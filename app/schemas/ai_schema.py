from pydantic import Field, field_validator
from typing import Optional, Any
from datetime import datetime
from app.schemas.base_schema import CamelModel, reject_null


# Personas

class AIPersonaBase(CamelModel):
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    system_prompt: str = Field(..., min_length=1)
    icon: str = "robot"
    icon_color: str = "blue"
    active: bool = True


class AIPersonaCreate(AIPersonaBase):
    pass


class AIPersonaUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    system_prompt: Optional[str] = Field(None, min_length=1)
    icon: Optional[str] = None
    icon_color: Optional[str] = None
    active: Optional[bool] = None

    @field_validator(
        "name", "system_prompt", "icon", "icon_color", "active", mode="before"
    )
    @classmethod
    def fields_not_null(cls, v):
        return reject_null(v)


class AIPersonaResponse(AIPersonaBase):
    id: int


# Settings registry

class AISettingCreate(CamelModel):
    key: str = Field(..., min_length=1)
    value: Any = None
    description: Optional[str] = None


class AISettingValue(CamelModel):
    value: Any


class AISettingUpsert(CamelModel):
    value: Any
    description: Optional[str] = None


class AISettingResponse(CamelModel):
    key: str
    value: Any = None
    description: Optional[str] = None


# Conversations

class AIConversationCreate(CamelModel):
    persona_id: int
    user_id: Optional[int] = None
    title: str = "New Conversation"


class AIConversationUpdate(CamelModel):
    title: Optional[str] = None

    @field_validator("title", mode="before")
    @classmethod
    def fields_not_null(cls, v):
        return reject_null(v)


class AIConversationResponse(CamelModel):
    id: int
    persona_id: int
    user_id: Optional[int] = None
    title: str
    created_at: datetime
    updated_at: datetime
