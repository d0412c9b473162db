"""FastAPI dependencies shared by the HTTP and WebSocket routes."""
from fastapi.requests import HTTPConnection

from .hub import BroadcastHub


def get_hub(connection: HTTPConnection) -> BroadcastHub:
    """Hub owned by the running application."""
    return connection.app.state.hub
