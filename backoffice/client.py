# backoffice/client.py

"""
HTTP client for the back office API.

GET responses are cached by endpoint path (``/api/companies``,
``/api/companies/<id>``). Every mutation drops the cached list and item of
the resource it touched, plus cached reports, so the next read goes back to
the server.
"""

import time
from typing import Any, Dict, Optional, Tuple

import httpx

DERIVED_PREFIXES = ("/api/reports", "/api/dashboard")


class ApiClientError(Exception):
    def __init__(self, status_code: int, message: str):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message


class BackOfficeClient:
    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        *,
        http: Optional[httpx.Client] = None,
        ttl_seconds: Optional[float] = None,
        timeout: float = 10,
    ):
        self._owns_http = http is None
        self._http = http if http is not None else httpx.Client(base_url=base_url, timeout=timeout)
        self.ttl_seconds = ttl_seconds
        # path -> (fetched_at, payload)
        self._cache: Dict[str, Tuple[float, Any]] = {}

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    @staticmethod
    def path(resource: str, record_id: Optional[str] = None) -> str:
        base = f"/api/{resource.strip('/')}"
        return f"{base}/{record_id}" if record_id is not None else base

    def is_cached(self, path: str) -> bool:
        entry = self._cache.get(path)
        if entry is None:
            return False
        if self.ttl_seconds is None:
            return True
        return time.time() - entry[0] < self.ttl_seconds

    def invalidate(self, path: Optional[str] = None) -> None:
        if path is None:
            self._cache.clear()
        else:
            self._cache.pop(path, None)

    def fetch(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """GET ``path``, served from the cache while fresh. Queries with params bypass it."""
        if params:
            return self._send("GET", path, params=params)
        if self.is_cached(path):
            return self._cache[path][1]
        data = self._send("GET", path)
        self._cache[path] = (time.time(), data)
        return data

    def list(self, resource: str, search: Optional[str] = None):
        return self.fetch(self.path(resource), params={"search": search} if search else None)

    def get(self, resource: str, record_id: str):
        return self.fetch(self.path(resource, record_id))

    def create(self, resource: str, data: Dict[str, Any]):
        created = self._send("POST", self.path(resource), json=data)
        self._invalidate_resource(resource, created.get("id") if isinstance(created, dict) else None)
        return created

    def update(self, resource: str, record_id: str, data: Dict[str, Any]):
        updated = self._send("PUT", self.path(resource, record_id), json=data)
        self._invalidate_resource(resource, record_id)
        return updated

    def delete(self, resource: str, record_id: str) -> None:
        self._send("DELETE", self.path(resource, record_id))
        self._invalidate_resource(resource, record_id)

    def dashboard_metrics(self):
        return self.fetch("/api/dashboard/metrics")

    def report(self, name: str):
        return self.fetch(f"/api/reports/{name.strip('/')}")

    def _invalidate_resource(self, resource: str, record_id: Optional[str]) -> None:
        self.invalidate(self.path(resource))
        if record_id is not None:
            self.invalidate(self.path(resource, record_id))
        for cached in list(self._cache):
            if cached.startswith(DERIVED_PREFIXES):
                self.invalidate(cached)

    def _send(self, method: str, path: str, **kwargs) -> Any:
        response = self._http.request(method, path, **kwargs)
        if response.is_error:
            raise ApiClientError(response.status_code, _error_message(response))
        if response.status_code == 204 or not response.content:
            return None
        return response.json()


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return response.text
