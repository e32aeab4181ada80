# talent96/services/realtime.py
import logging
from collections import defaultdict
from typing import Any

from fastapi import WebSocket, WebSocketDisconnect

EVENT_NEW_NOTIFICATION = "new_notification"


class NotificationHub:
    """Per-user websocket channels living in this process."""

    def __init__(self):
        self._channels: dict[int, set[WebSocket]] = defaultdict(set)
        self.logger = logging.getLogger(self.__class__.__name__)

    def join(self, user_id: int, websocket: WebSocket) -> None:
        self._channels[user_id].add(websocket)
        self.logger.info(f"User {user_id} joined their notification channel")

    def leave(self, user_id: int, websocket: WebSocket) -> None:
        sockets = self._channels.get(user_id)
        if not sockets:
            return
        sockets.discard(websocket)
        if not sockets:
            del self._channels[user_id]

    def is_connected(self, user_id: int) -> bool:
        return bool(self._channels.get(user_id))

    async def push(self, user_id: int, payload: dict[str, Any], event: str = EVENT_NEW_NOTIFICATION) -> int:
        """Send ``payload`` to every socket of ``user_id``; returns how many got it."""
        delivered = 0
        for ws in list(self._channels.get(user_id, ())):
            try:
                await ws.send_json({"event": event, "data": payload})
                delivered += 1
            except (WebSocketDisconnect, RuntimeError, OSError) as e:
                # socket closed underneath us
                self.logger.warning(f"Dropping dead channel for user {user_id}: {e!r}")
                self.leave(user_id, ws)
        return delivered


hub = NotificationHub()

def get_hub() -> NotificationHub:
    return hub
