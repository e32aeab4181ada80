# talent96/api/ws_routes.py
import logging

from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect

from talent96.services.realtime import NotificationHub, get_hub

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Realtime"])

@router.websocket("/ws/notifications/{user_id}")
async def notifications_channel(websocket: WebSocket, user_id: int, hub: NotificationHub = Depends(get_hub)):
    """Holds the socket open; anything the client sends is ignored."""
    await websocket.accept()
    hub.join(user_id, websocket)
    try:
        while True:
            await websocket.receive_text()
    except WebSocketDisconnect:
        logger.info(f"User {user_id} left their notification channel")
    finally:
        hub.leave(user_id, websocket)
