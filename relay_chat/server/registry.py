"""Session registry: connection id -> joined user."""
from typing import Any, Dict, List, Optional

from .errors import ValidationError
from .models import User
from ..shared.utils import clean_text


class SessionRegistry:
    def __init__(self) -> None:
        self._users: Dict[str, User] = {}

    def __len__(self) -> int:
        return len(self._users)

    def __contains__(self, connection_id: str) -> bool:
        return connection_id in self._users

    def register(self, connection_id: str, full_name: Any) -> User:
        """Store a user for the connection, replacing any earlier entry under the same id."""
        name = clean_text(full_name)
        if name is None:
            raise ValidationError("Full name is required")
        user = User(id=connection_id, full_name=name)
        self._users[connection_id] = user
        return user

    def lookup(self, connection_id: str) -> Optional[User]:
        return self._users.get(connection_id)

    def unregister(self, connection_id: str) -> Optional[User]:
        return self._users.pop(connection_id, None)

    def list_all(self) -> List[Dict[str, str]]:
        return [user.summary() for user in list(self._users.values())]
