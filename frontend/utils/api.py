from typing import Any, Optional
from urllib.parse import quote

import requests


def error_message(resp: dict, default: str = "Request failed") -> str:
    """Human-readable message for a failed API response."""
    if resp.get("error"):
        return resp["error"]
    data = resp.get("data")
    if isinstance(data, dict):
        detail = data.get("detail") or data.get("message")
        if isinstance(detail, list):
            # FastAPI validation errors
            return "; ".join(str(item.get("msg", item)) for item in detail)
        if detail:
            return str(detail)
        if data.get("raw"):
            return str(data["raw"])
    return f"{default} (HTTP {resp.get('status')})"


def is_ok(resp: dict) -> bool:
    return 200 <= resp.get("status", 0) < 300


class APIClient:
    """Simple API client for backend requests."""

    def __init__(self, base_url: str, timeout: int = 30):
        self.base_url = base_url
        self.timeout = timeout

    def _headers(self) -> dict:
        return {"Content-Type": "application/json"}

    def _parse_json(self, resp) -> Optional[Any]:
        """Safely parse JSON, return None or text on failure."""
        try:
            if resp is None:
                return None
            if not resp.text:
                return None
            return resp.json()
        except ValueError:
            # Non-JSON response
            return {"raw": resp.text}

    def _request(
        self,
        method: str,
        endpoint: str,
        params: Optional[dict] = None,
        data: Optional[Any] = None,
    ) -> dict:
        """Make a request; never raises."""
        try:
            resp = requests.request(
                method,
                f"{self.base_url}{endpoint}",
                headers=self._headers(),
                params=params,
                json=data,
                timeout=self.timeout,
            )
            return {"status": resp.status_code, "data": self._parse_json(resp)}
        except requests.exceptions.ConnectionError:
            return {"status": 0, "error": "Cannot connect to backend"}
        except requests.exceptions.RequestException as e:
            return {"status": 0, "error": str(e)}

    def _get(self, endpoint: str, params: Optional[dict] = None) -> dict:
        """Make GET request."""
        return self._request("GET", endpoint, params=params)

    def _post(self, endpoint: str, data: Optional[Any] = None, params: Optional[dict] = None) -> dict:
        """Make POST request."""
        return self._request("POST", endpoint, params=params, data=data)

    def _put(self, endpoint: str, data: Optional[Any] = None) -> dict:
        return self._request("PUT", endpoint, data=data)

    def _delete(self, endpoint: str, params: Optional[dict] = None) -> dict:
        return self._request("DELETE", endpoint, params=params)

    # Health endpoint
    def health(self) -> dict:
        """Check API health."""
        return self._get("/health")

    # Connection endpoints
    def connect(
        self,
        host: str,
        port: int,
        username: Optional[str] = None,
        password: Optional[str] = None,
    ) -> dict:
        """Connect the backend to a cluster."""
        data = {"host": host, "port": port}
        if username:
            data["username"] = username
        if password:
            data["password"] = password
        return self._post("/api/connect", data)

    def disconnect(self) -> dict:
        """Disconnect the backend from its cluster."""
        return self._post("/api/disconnect")

    def cluster_info(self) -> dict:
        """Get the current connection status."""
        return self._get("/api/cluster-info")

    # Namespace endpoints
    def list_namespaces(self) -> dict:
        return self._get("/api/namespaces")

    def list_sets(self, namespace: str) -> dict:
        return self._get(f"/api/namespaces/{namespace}/sets")

    def namespace_stats(self, namespace: str) -> dict:
        """Get set totals for a namespace."""
        return self._get(f"/api/namespaces/{namespace}/stats")

    # Record endpoints
    def scan_records(self, namespace: str, set_name: str, max_records: int = 100) -> dict:
        """Scan a set."""
        return self._get("/api/records/scan", {
            "namespace": namespace,
            "set_name": set_name,
            "max_records": max_records,
        })

    def search_records(
        self,
        namespace: str,
        set_name: str,
        pattern: str,
        match_type: str = "EXACT",
        max_results: int = 100,
    ) -> dict:
        """Search a set by key pattern."""
        return self._post("/api/records/search", {
            "namespace": namespace,
            "set_name": set_name,
            "pattern": pattern,
            "match_type": match_type,
            "max_results": max_results,
        })

    def get_record(self, namespace: str, set_name: str, key: str, key_type: str = "string") -> dict:
        return self._get(
            f"/api/records/{namespace}/{set_name}/{quote(key, safe='')}", {"key_type": key_type}
        )

    def put_record(self, record: dict) -> dict:
        """Create or update a record."""
        return self._post("/api/records", record)

    def delete_record(self, namespace: str, set_name: str, key: str, key_type: str = "string") -> dict:
        """Delete a record."""
        return self._delete(
            f"/api/records/{namespace}/{set_name}/{quote(key, safe='')}", {"key_type": key_type}
        )

    # Profile endpoints
    def list_profiles(self) -> dict:
        return self._get("/api/profiles")

    def create_profile(
        self,
        name: str,
        host: str,
        port: int,
        username: Optional[str] = None,
        password: Optional[str] = None,
    ) -> dict:
        """Save a connection profile."""
        return self._post("/api/profiles", {
            "name": name,
            "host": host,
            "port": port,
            "username": username or None,
            "password": password or None,
        })

    def delete_profile(self, profile_id: str) -> dict:
        return self._delete(f"/api/profiles/{profile_id}")

    def get_active_profile(self) -> dict:
        return self._get("/api/profiles/active")

    def set_active_profile(self, profile_id: Optional[str]) -> dict:
        """Select the active profile; None clears it."""
        return self._put("/api/profiles/active", {"profile_id": profile_id})

    # Preference endpoints
    def get_preferences(self) -> dict:
        return self._get("/api/preferences")

    def set_preference(self, name: str, value: Optional[str]) -> dict:
        return self._put(f"/api/preferences/{name}", {"value": value})
