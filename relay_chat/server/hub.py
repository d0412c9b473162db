"""Broadcast hub: applies chat events to shared state and fans the results out."""
import asyncio
import itertools
import secrets
from typing import Any, Dict, List, Optional, Set, Tuple, Type

from fastapi import WebSocket
from pydantic import BaseModel
from pydantic import ValidationError as PayloadError

from . import schemas
from .config import SEND_TIMEOUT
from .errors import ChatError, UnauthenticatedError, ValidationError
from .logging_config import configure_logging
from .models import SYSTEM_SENDER, Message
from .registry import SessionRegistry
from ..shared import dto
from ..shared.utils import clean_text, iso_timestamp

logger = configure_logging()


def _payload_field(model: Type[BaseModel], data: Any, name: str) -> Any:
    """Read one field from an inbound payload; malformed payloads read as missing."""
    try:
        return getattr(model.model_validate(data), name)
    except PayloadError:
        return None


class BroadcastHub:
    """Owns the session registry, the message log and the set of open sockets.

    Every event is applied under a single lock, together with the frames it
    produces, so all clients observe the same order of events. The state
    changes themselves never await, which keeps the read accessors consistent
    without taking the lock.
    """

    def __init__(self, send_timeout: float = SEND_TIMEOUT) -> None:
        self.registry = SessionRegistry()
        self.connections: Dict[str, WebSocket] = {}
        self.send_timeout = send_timeout
        self._messages: List[Message] = []
        self._ids = itertools.count(1)
        self._lock = asyncio.Lock()
        self._closing: Set["asyncio.Task[None]"] = set()
        self._handlers = {
            dto.JOIN: self._join,
            dto.MESSAGE: self._post_message,
            dto.TYPING: self._typing,
        }

    async def connect(self, websocket: WebSocket) -> str:
        """Track an accepted socket and return its connection id."""
        connection_id = secrets.token_urlsafe(12)
        async with self._lock:
            self.connections[connection_id] = websocket
        logger.info("CLIENT_CONNECTED id=%s", connection_id)
        return connection_id

    async def handle(self, connection_id: str, event: dto.Event) -> None:
        handler = self._handlers.get(event.name)
        async with self._lock:
            try:
                if handler is None:
                    logger.warning("UNKNOWN_EVENT id=%s event=%s", connection_id, event.name)
                    raise ChatError(f"Unknown event: {event.name}")
                await handler(connection_id, event.data)
            except ChatError as exc:
                await self._send(connection_id, dto.Event(dto.ERROR, {"message": str(exc)}))

    async def reject_frame(self, connection_id: str) -> None:
        logger.warning("MALFORMED_EVENT id=%s", connection_id)
        async with self._lock:
            await self._send(connection_id, dto.Event(dto.ERROR, {"message": "Malformed event"}))

    async def disconnect(self, connection_id: str) -> None:
        """Drop the socket; a joined user is announced as having left.

        The leave announcement runs in its own task, so cancelling the caller
        (client gone, server shutting down) still delivers it to everyone else.
        """
        task = asyncio.ensure_future(self._drop(connection_id))
        self._closing.add(task)
        task.add_done_callback(self._closing.discard)
        await asyncio.shield(task)

    async def _drop(self, connection_id: str) -> None:
        async with self._lock:
            self.connections.pop(connection_id, None)
            user = self.registry.unregister(connection_id)
            if user is None:
                return
            leave = self._append("system", f"{user.full_name} left the chat", SYSTEM_SENDER)
            users = self.registry.list_all()
            logger.info("USER_LEFT id=%s name=%s", connection_id, user.full_name)
            await self._broadcast(dto.Event(dto.MESSAGE, leave.to_dict()))
            await self._broadcast(dto.Event(dto.USERS, users))

    # Read accessors

    def stats(self) -> Dict[str, int]:
        return {"connectedUsers": len(self.registry), "totalMessages": len(self._messages)}

    def user_list(self) -> List[Dict[str, str]]:
        return self.registry.list_all()

    def message_log(self) -> List[Dict[str, Any]]:
        return [message.to_dict() for message in list(self._messages)]

    # Event handlers, called with the lock held

    async def _join(self, connection_id: str, data: Any) -> None:
        full_name = _payload_field(schemas.JoinRequest, data, "fullName")
        try:
            user = self.registry.register(connection_id, full_name)
        except ValidationError:
            logger.info("JOIN_REJECTED id=%s reason=empty_name", connection_id)
            raise
        history = self.message_log()
        joined = self._append("system", f"{user.full_name} joined the chat", SYSTEM_SENDER)
        users = self.registry.list_all()
        logger.info("USER_JOINED id=%s name=%s", connection_id, user.full_name)

        await self._send(connection_id, dto.Event(dto.HISTORY, history))
        await self._broadcast(dto.Event(dto.MESSAGE, joined.to_dict()))
        await self._broadcast(dto.Event(dto.USERS, users))

    async def _post_message(self, connection_id: str, data: Any) -> None:
        user = self.registry.lookup(connection_id)
        if user is None:
            logger.info("MESSAGE_REJECTED id=%s reason=not_joined", connection_id)
            raise UnauthenticatedError("User not found")
        content = clean_text(_payload_field(schemas.ChatMessageRequest, data, "content"))
        if content is None:
            logger.info("MESSAGE_REJECTED id=%s reason=empty", connection_id)
            raise ValidationError("Message cannot be empty")
        message = self._append("user", content, user.full_name, sender_id=connection_id)
        logger.info("MESSAGE_SENT sender_id=%s message_id=%s", connection_id, message.id)
        await self._broadcast(dto.Event(dto.MESSAGE, message.to_dict()))

    async def _typing(self, connection_id: str, data: Any) -> None:
        user = self.registry.lookup(connection_id)
        if user is None or not isinstance(data, bool):
            return
        payload = {"user": user.full_name, "isTyping": data}
        await self._broadcast(dto.Event(dto.USER_TYPING, payload), exclude=connection_id)

    def _append(self, kind: str, content: str, sender: str, sender_id: Optional[str] = None) -> Message:
        message = Message(
            id=str(next(self._ids)),
            type=kind,
            content=content,
            timestamp=iso_timestamp(),
            sender=sender,
            sender_id=sender_id,
        )
        self._messages.append(message)
        return message

    # Delivery

    async def _send(self, connection_id: str, event: dto.Event) -> None:
        websocket = self.connections.get(connection_id)
        if websocket is not None:
            await self._deliver([(connection_id, websocket)], event)

    async def _broadcast(self, event: dto.Event, exclude: Optional[str] = None) -> None:
        targets = [(cid, ws) for cid, ws in list(self.connections.items()) if cid != exclude]
        await self._deliver(targets, event)

    async def _deliver(self, targets: List[Tuple[str, WebSocket]], event: dto.Event) -> None:
        frame = event.to_json()
        results = await asyncio.gather(
            *(asyncio.wait_for(ws.send_text(frame), self.send_timeout) for _, ws in targets),
            return_exceptions=True,
        )
        for (connection_id, _), result in zip(targets, results):
            if isinstance(result, Exception):
                logger.warning("SEND_FAILED id=%s event=%s error=%r", connection_id, event.name, result)
