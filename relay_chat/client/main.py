"""Console status viewer for a running relay server."""
import sys
from typing import Any, Dict, List, Optional

import requests

from .api import StatusClient

DEFAULT_SERVER_URL = "http://localhost:3000"


def format_message(message: Dict[str, Any]) -> str:
    if message.get("type") == "system":
        return f"[{message['timestamp']}] * {message['content']}"
    return f"[{message['timestamp']}] {message['sender']}: {message['content']}"


def render_status(health: Dict[str, Any], users: List[Dict[str, str]], messages: List[Dict[str, Any]]) -> str:
    lines = [
        f"Server status: {health['status']}",
        f"Connected users ({health['connectedUsers']}):",
    ]
    lines.extend(f"  - {user['fullName']}" for user in users)
    lines.append(f"Messages ({health['totalMessages']}):")
    lines.extend(f"  {format_message(message)}" for message in messages)
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    server_url = argv[0] if argv else DEFAULT_SERVER_URL
    client = StatusClient(server_url)
    try:
        output = render_status(client.health(), client.list_users(), client.get_messages())
    except requests.RequestException as exc:
        print(f"Could not reach {server_url}: {exc}", file=sys.stderr)
        return 1
    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
