from typing import List
from fastapi import WebSocket
from app.logger import get_logger

logger = get_logger(__name__)


class ConnectionManager:
    """Tracks open sockets and fans payloads out to all of them.

    Delivery is best effort: a socket that fails to receive is dropped and
    the failure is only logged.
    """

    def __init__(self):
        self.active_connections: List[WebSocket] = []

    async def connect(self, websocket: WebSocket) -> None:
        await websocket.accept()
        self.active_connections.append(websocket)
        logger.info(f"WebSocket connected ({len(self.active_connections)} open)")

    def disconnect(self, websocket: WebSocket) -> None:
        if websocket in self.active_connections:
            self.active_connections.remove(websocket)
            logger.info(f"WebSocket disconnected ({len(self.active_connections)} open)")

    async def broadcast(self, payload: dict) -> int:
        delivered = 0
        for connection in list(self.active_connections):
            try:
                await connection.send_json(payload)
                delivered += 1
            except Exception as e:
                logger.warning(f"Dropping WebSocket after failed send: {str(e)}")
                self.disconnect(connection)
        return delivered
