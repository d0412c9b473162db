"""Pydantic schemas for inbound event payloads and HTTP response bodies."""
from typing import Literal, Optional

from pydantic import BaseModel, Field


class JoinRequest(BaseModel):
    fullName: Optional[str] = None


class ChatMessageRequest(BaseModel):
    content: Optional[str] = None


class UserOut(BaseModel):
    id: str
    fullName: str


class MessageOut(BaseModel):
    id: str
    type: Literal["system", "user"]
    content: str
    timestamp: str
    sender: str
    senderId: Optional[str] = None


class HealthOut(BaseModel):
    status: str = "OK"
    connectedUsers: int = Field(..., ge=0)
    totalMessages: int = Field(..., ge=0)
