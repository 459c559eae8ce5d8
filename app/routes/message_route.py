from fastapi import APIRouter, Depends, HTTPException, status, Request, BackgroundTasks, WebSocket
from fastapi.websockets import WebSocketDisconnect
from sqlalchemy.orm import Session
from typing import List
from app.exceptions import InvalidStatusError
from app.services.message_crud import message_crud
from app.schemas.message_schema import MessageCreate, MessageResponse, MessageStatusUpdate
from app.database import get_db
from app.logger import get_logger

message_router = APIRouter()
logger = get_logger(__name__)


@message_router.get(
    "/messages", response_model=List[MessageResponse], status_code=status.HTTP_200_OK
)
def get_messages(db: Session = Depends(get_db)):
    try:
        messages = message_crud.get_messages(db)
        return [MessageResponse.model_validate(message) for message in messages]

    except Exception as e:
        logger.error(f"Error fetching messages: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error occurred while fetching messages",
        )


@message_router.post(
    "/messages", response_model=MessageResponse, status_code=status.HTTP_201_CREATED
)
def create_message(
    message: MessageCreate,
    request: Request,
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db),
):
    """Store a message, then push it to every connected WebSocket client"""
    try:
        logger.info(f"Creating {message.channel.value} message for receiver {message.receiver_id}")
        db_message = message_crud.create_message(db, message)
        response = MessageResponse.model_validate(db_message)

        # Runs after the response; a failed push never undoes the stored message
        background_tasks.add_task(
            request.app.state.broadcaster.broadcast,
            {"type": "new_message", "message": response.model_dump(mode="json", by_alias=True)},
        )
        return response

    except Exception as e:
        logger.error(f"Error creating message: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error occurred while creating message",
        )


@message_router.patch(
    "/messages/{message_id}/status",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
)
def update_message_status(
    message_id: int,
    payload: MessageStatusUpdate,
    db: Session = Depends(get_db),
):
    try:
        logger.info(f"Updating message {message_id} status to {payload.status.value}")
        message = message_crud.update_message_status(db, message_id, payload.status)
        if not message:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Message not found"
            )
        return MessageResponse.model_validate(message)

    except HTTPException:
        raise
    except InvalidStatusError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    except Exception as e:
        logger.error(f"Error updating message status {message_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error occurred while updating message status",
        )


@message_router.get(
    "/messages/sender/{sender_id}",
    response_model=List[MessageResponse],
    status_code=status.HTTP_200_OK,
)
def get_messages_by_sender(sender_id: int, db: Session = Depends(get_db)):
    messages = message_crud.get_messages_by_sender(db, sender_id)
    return [MessageResponse.model_validate(message) for message in messages]


@message_router.get(
    "/messages/receiver/{receiver_id}",
    response_model=List[MessageResponse],
    status_code=status.HTTP_200_OK,
)
def get_messages_by_receiver(receiver_id: int, db: Session = Depends(get_db)):
    messages = message_crud.get_messages_by_receiver(db, receiver_id)
    return [MessageResponse.model_validate(message) for message in messages]


ws_router = APIRouter()


@ws_router.websocket("/ws")
async def messages_socket(websocket: WebSocket):
    manager = websocket.app.state.broadcaster
    await manager.connect(websocket)
    try:
        await websocket.send_json({
            "type": "connection_established",
            "message": "Connected to messaging server",
        })
        while True:
            data = await websocket.receive_text()
            logger.debug(f"WebSocket received: {data}")
            await websocket.send_json({"type": "message_received", "data": data})
    except WebSocketDisconnect:
        logger.debug("WebSocket closed by client")
    finally:
        manager.disconnect(websocket)
