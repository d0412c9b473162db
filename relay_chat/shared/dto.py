"""Named-event envelope exchanged over the chat WebSocket."""
import json
from dataclasses import dataclass
from typing import Any, Union

# Client -> server
JOIN = "join"
MESSAGE = "message"
TYPING = "typing"

# Server -> client
HISTORY = "messages"
USERS = "users"
ERROR = "error"
USER_TYPING = "userTyping"


@dataclass
class Event:
    name: str
    data: Any = None

    def to_json(self) -> str:
        return json.dumps({"event": self.name, "data": self.data})

    @classmethod
    def from_json(cls, frame: Union[str, bytes]) -> "Event":
        """Parse a frame; raises ValueError if it is not an envelope with a string event name."""
        try:
            payload = json.loads(frame)
        except RecursionError as exc:
            raise ValueError("frame is nested too deeply") from exc
        if not isinstance(payload, dict) or not isinstance(payload.get("event"), str):
            raise ValueError("frame is not an event envelope")
        return cls(name=payload["event"], data=payload.get("data"))
