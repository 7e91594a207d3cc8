# src/todo_sync/api/client.py

from __future__ import annotations

import logging
from typing import Any

import httpx

from ..core.models import TodoId

logger = logging.getLogger(__name__)

JsonObject = dict[str, Any]


class TodoApiError(RuntimeError):
    """The remote API answered with a non-success HTTP status."""

    def __init__(self, method: str, url: str, status_code: int) -> None:
        super().__init__(f"{method} {url} failed with HTTP {status_code}")
        self.method = method
        self.url = url
        self.status_code = status_code


def _is_connection_error(exc: Exception) -> bool:
    return isinstance(exc, (httpx.TransportError, httpx.TimeoutException))


def friendly_api_error_message(err: Exception) -> str:
    if isinstance(err, TodoApiError):
        return f"Failed to fetch todos (HTTP {err.status_code})"
    if _is_connection_error(err):
        return "Failed to fetch todos (network error)"
    return str(err).strip() or err.__class__.__name__


def make_timeout(connect_s: float, read_s: float) -> httpx.Timeout:
    return httpx.Timeout(
        connect=connect_s,
        read=read_s,
        write=10.0,
        pool=connect_s,
    )


class TodoApiClient:
    """
    Async client for a JSONPlaceholder-style `todos` endpoint.

    Routes:
    - GET    {base}         list
    - POST   {base}         create
    - GET    {base}/{id}    fetch one
    - PUT    {base}/{id}    full replacement
    - PATCH  {base}/{id}    partial update
    - DELETE {base}/{id}    delete

    Any non-2xx response raises TodoApiError. No retries.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: httpx.Timeout | float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        base_url = (base_url or "").strip().rstrip("/")
        if not base_url:
            raise RuntimeError("API base URL is not set. Set TODO_API_URL in your .env.")
        self._base_url = base_url
        self._http = httpx.AsyncClient(
            timeout=timeout if timeout is not None else make_timeout(5.0, 15.0),
            headers={"Accept": "application/json"},
            transport=transport,
        )

    @classmethod
    def from_settings(cls, settings) -> TodoApiClient:
        timeout = make_timeout(
            connect_s=float(getattr(settings, "http_connect_timeout_seconds", 5.0)),
            read_s=float(getattr(settings, "http_read_timeout_seconds", 15.0)),
        )
        return cls(settings.api_url, timeout=timeout)

    @property
    def base_url(self) -> str:
        return self._base_url

    async def __aenter__(self) -> TodoApiClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    # ---- low-level helpers ----

    def _item_url(self, todo_id: TodoId) -> str:
        return f"{self._base_url}/{todo_id}"

    async def _request(self, method: str, url: str, *, json: Any = None) -> Any:
        logger.debug("API %s %s", method, url)
        resp = await self._http.request(method, url, json=json)
        if not resp.is_success:
            logger.debug("API %s %s -> HTTP %s", method, url, resp.status_code)
            raise TodoApiError(method, url, resp.status_code)
        if not resp.content:
            return {}
        return resp.json()

    # ---- public API ----

    async def list_todos(self) -> list[JsonObject]:
        data = await self._request("GET", self._base_url)
        if not isinstance(data, list):
            raise ValueError("todo list endpoint did not return a JSON array")
        return data

    async def get_todo(self, todo_id: TodoId) -> JsonObject:
        return await self._request("GET", self._item_url(todo_id))

    async def create_todo(self, payload: JsonObject) -> JsonObject:
        return await self._request("POST", self._base_url, json=payload)

    async def replace_todo(self, todo_id: TodoId, payload: JsonObject) -> JsonObject:
        return await self._request("PUT", self._item_url(todo_id), json=payload)

    async def patch_todo(self, todo_id: TodoId, fields: JsonObject) -> JsonObject:
        return await self._request("PATCH", self._item_url(todo_id), json=fields)

    async def delete_todo(self, todo_id: TodoId) -> None:
        await self._request("DELETE", self._item_url(todo_id))
