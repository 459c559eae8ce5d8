from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List
from app.exceptions import DuplicateKeyError
from app.services.ai_persona_crud import ai_persona_crud
from app.services.ai_setting_crud import ai_setting_crud
from app.services.ai_conversation_crud import ai_conversation_crud
from app.schemas.ai_schema import (
    AIPersonaCreate,
    AIPersonaUpdate,
    AIPersonaResponse,
    AISettingCreate,
    AISettingValue,
    AISettingUpsert,
    AISettingResponse,
    AIConversationCreate,
    AIConversationUpdate,
    AIConversationResponse,
)
from app.database import get_db
from app.logger import get_logger

ai_router = APIRouter(prefix="/ai")
logger = get_logger(__name__)

# PERSONAS


@ai_router.get(
    "/personas", response_model=List[AIPersonaResponse], status_code=status.HTTP_200_OK
)
def get_personas(db: Session = Depends(get_db)):
    personas = ai_persona_crud.get_personas(db)
    return [AIPersonaResponse.model_validate(persona) for persona in personas]


@ai_router.get(
    "/personas/{persona_id}",
    response_model=AIPersonaResponse,
    status_code=status.HTTP_200_OK,
)
def get_persona(persona_id: int, db: Session = Depends(get_db)):
    persona = ai_persona_crud.get_persona_by_id(db, persona_id)
    if not persona:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Persona not found")
    return AIPersonaResponse.model_validate(persona)


@ai_router.post(
    "/personas", response_model=AIPersonaResponse, status_code=status.HTTP_201_CREATED
)
def create_persona(persona: AIPersonaCreate, db: Session = Depends(get_db)):
    try:
        logger.info(f"Creating AI persona: {persona.name}")
        db_persona = ai_persona_crud.create_persona(db, persona)
        return AIPersonaResponse.model_validate(db_persona)

    except Exception as e:
        logger.error(f"Error creating AI persona: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error occurred while creating AI persona",
        )


@ai_router.patch(
    "/personas/{persona_id}",
    response_model=AIPersonaResponse,
    status_code=status.HTTP_200_OK,
)
def update_persona(
    persona_id: int,
    persona_update: AIPersonaUpdate,
    db: Session = Depends(get_db),
):
    try:
        logger.info(f"Updating AI persona: {persona_id}")
        persona = ai_persona_crud.update_persona(db, persona_id, persona_update)
        if not persona:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Persona not found")
        return AIPersonaResponse.model_validate(persona)

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error updating AI persona {persona_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error occurred while updating AI persona",
        )


# SETTINGS


@ai_router.get(
    "/settings", response_model=List[AISettingResponse], status_code=status.HTTP_200_OK
)
def get_settings(db: Session = Depends(get_db)):
    settings = ai_setting_crud.get_settings(db)
    return [AISettingResponse.model_validate(setting) for setting in settings]


@ai_router.get(
    "/settings/{key}", response_model=AISettingResponse, status_code=status.HTTP_200_OK
)
def get_setting(key: str, db: Session = Depends(get_db)):
    setting = ai_setting_crud.get_setting(db, key)
    if not setting:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Setting not found")
    return AISettingResponse.model_validate(setting)


@ai_router.post(
    "/settings", response_model=AISettingResponse, status_code=status.HTTP_201_CREATED
)
def create_setting(setting: AISettingCreate, db: Session = Depends(get_db)):
    try:
        logger.info(f"Creating setting: {setting.key}")
        db_setting = ai_setting_crud.create_setting(
            db, setting.key, setting.value, setting.description
        )
        return AISettingResponse.model_validate(db_setting)

    except DuplicateKeyError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except Exception as e:
        logger.error(f"Error creating setting {setting.key}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error occurred while creating setting",
        )


@ai_router.patch(
    "/settings/{key}", response_model=AISettingResponse, status_code=status.HTTP_200_OK
)
def update_setting(key: str, payload: AISettingValue, db: Session = Depends(get_db)):
    """Replace the value of an existing key"""
    try:
        logger.info(f"Updating setting: {key}")
        setting = ai_setting_crud.update_setting(db, key, payload.value)
        if not setting:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Setting not found")
        return AISettingResponse.model_validate(setting)

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error updating setting {key}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error occurred while updating setting",
        )


@ai_router.put(
    "/settings/{key}", response_model=AISettingResponse, status_code=status.HTTP_200_OK
)
def upsert_setting(key: str, payload: AISettingUpsert, db: Session = Depends(get_db)):
    """Create the key if needed, otherwise replace its value"""
    try:
        logger.info(f"Upserting setting: {key}")
        setting = ai_setting_crud.upsert_setting(db, key, payload.value, payload.description)
        return AISettingResponse.model_validate(setting)

    except Exception as e:
        logger.error(f"Error upserting setting {key}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error occurred while saving setting",
        )


# CONVERSATIONS


@ai_router.get(
    "/conversations",
    response_model=List[AIConversationResponse],
    status_code=status.HTTP_200_OK,
)
def get_conversations(db: Session = Depends(get_db)):
    conversations = ai_conversation_crud.get_conversations(db)
    return [AIConversationResponse.model_validate(c) for c in conversations]


@ai_router.get(
    "/conversations/persona/{persona_id}",
    response_model=List[AIConversationResponse],
    status_code=status.HTTP_200_OK,
)
def get_conversations_by_persona(persona_id: int, db: Session = Depends(get_db)):
    conversations = ai_conversation_crud.get_conversations_by_persona(db, persona_id)
    return [AIConversationResponse.model_validate(c) for c in conversations]


@ai_router.get(
    "/conversations/{conversation_id}",
    response_model=AIConversationResponse,
    status_code=status.HTTP_200_OK,
)
def get_conversation(conversation_id: int, db: Session = Depends(get_db)):
    conversation = ai_conversation_crud.get_conversation_by_id(db, conversation_id)
    if not conversation:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Conversation not found")
    return AIConversationResponse.model_validate(conversation)


@ai_router.post(
    "/conversations",
    response_model=AIConversationResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_conversation(conversation: AIConversationCreate, db: Session = Depends(get_db)):
    try:
        logger.info(f"Creating AI conversation with persona {conversation.persona_id}")
        db_conversation = ai_conversation_crud.create_conversation(db, conversation)
        return AIConversationResponse.model_validate(db_conversation)

    except Exception as e:
        logger.error(f"Error creating AI conversation: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error occurred while creating AI conversation",
        )


@ai_router.patch(
    "/conversations/{conversation_id}",
    response_model=AIConversationResponse,
    status_code=status.HTTP_200_OK,
)
def update_conversation(
    conversation_id: int,
    conversation_update: AIConversationUpdate,
    db: Session = Depends(get_db),
):
    conversation = ai_conversation_crud.update_conversation(db, conversation_id, conversation_update)
    if not conversation:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Conversation not found")
    return AIConversationResponse.model_validate(conversation)
