"""In-memory records held by the relay."""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional

SYSTEM_SENDER = "System"


@dataclass(frozen=True)
class User:
    id: str
    full_name: str
    joined_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def summary(self) -> Dict[str, str]:
        return {"id": self.id, "fullName": self.full_name}


@dataclass(frozen=True)
class Message:
    id: str
    type: str
    content: str
    timestamp: str
    sender: str
    sender_id: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Wire form; senderId is only present on user messages."""
        data: Dict[str, Any] = {
            "id": self.id,
            "type": self.type,
            "content": self.content,
            "timestamp": self.timestamp,
            "sender": self.sender,
        }
        if self.sender_id is not None:
            data["senderId"] = self.sender_id
        return data
