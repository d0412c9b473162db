"""HTTP client for the relay's read-only status endpoints."""
from typing import Any, Dict, List

import requests


class StatusClient:
    def __init__(self, base_url: str, timeout: float = 10):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def _get(self, path: str) -> Any:
        resp = requests.get(f"{self.base_url}{path}", timeout=self.timeout)
        resp.raise_for_status()
        return resp.json()

    def health(self) -> Dict[str, Any]:
        return self._get("/health")

    def list_users(self) -> List[Dict[str, str]]:
        return self._get("/users")

    def get_messages(self) -> List[Dict[str, Any]]:
        return self._get("/messages")
