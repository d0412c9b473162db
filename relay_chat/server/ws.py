"""WebSocket endpoint carrying named chat events."""
from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect

from .deps import get_hub
from .hub import BroadcastHub
from .logging_config import configure_logging
from ..shared.dto import Event

router = APIRouter(tags=["chat"])
logger = configure_logging()


@router.websocket("/ws")
async def chat_socket(websocket: WebSocket, hub: BroadcastHub = Depends(get_hub)):
    await websocket.accept()
    connection_id = await hub.connect(websocket)
    try:
        while True:
            message = await websocket.receive()
            if message["type"] == "websocket.disconnect":
                raise WebSocketDisconnect(message.get("code", 1000), message.get("reason"))
            # Binary frames carry the same UTF-8 JSON envelope as text frames.
            frame = message.get("text")
            if frame is None:
                frame = message.get("bytes") or b""
            try:
                event = Event.from_json(frame)
            except ValueError:
                await hub.reject_frame(connection_id)
                continue
            await hub.handle(connection_id, event)
    except WebSocketDisconnect as exc:
        logger.info("CLIENT_DISCONNECTED id=%s code=%s", connection_id, exc.code)
    finally:
        await hub.disconnect(connection_id)
