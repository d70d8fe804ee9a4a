"""
HOOKFORGE client - talks to a running HOOKFORGE server over HTTP
"""
from typing import Any, Dict, Optional

import requests

from hookforge.core.config import load_settings


class HookforgeClient:
    """
    Thin client for the HOOKFORGE REST API.

    Example usage:
        client = HookforgeClient("http://localhost:8000")

        result = client.generate(name="MyHook", bumping_fee_hook=True)
        if result["success"]:
            print(result["source"])
    """

    def __init__(self, base_url: Optional[str] = None, timeout: float = 10.0):
        """
        Args:
            base_url: Server URL (default: http://localhost:<HOOKFORGE_PORT>)
            timeout: Request timeout in seconds
        """
        if base_url is None:
            base_url = f"http://localhost:{load_settings().port}"
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def _get(self, path: str) -> Dict[str, Any]:
        response = requests.get(f"{self.base_url}{path}", timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    def _post(self, path: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        response = requests.post(f"{self.base_url}{path}", json=payload, timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    def health(self) -> Dict[str, Any]:
        return self._get("/")

    def defaults(self) -> Dict[str, Any]:
        return self._get("/api/defaults")["options"]

    def generate(self, **options: Any) -> Dict[str, Any]:
        """
        Generate a contract.

        Returns:
            {"success", "contract", "source", "parents", "functions",
             "permissions", "error"}
        """
        return self._post("/api/generate", options)

    def permissions(self, **options: Any) -> Dict[str, Any]:
        return self._post("/api/permissions", options)
