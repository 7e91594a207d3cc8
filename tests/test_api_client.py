# tests/test_api_client.py

from __future__ import annotations

import json

import httpx
import pytest

from todo_sync.api.client import TodoApiClient, TodoApiError, friendly_api_error_message

BASE = "https://api.test/todos"


class Recorder:
    """httpx.MockTransport handler that records requests and replays canned responses."""

    def __init__(self, responses: dict[tuple[str, str], httpx.Response]) -> None:
        self.responses = responses
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = (request.method, str(request.url))
        return self.responses.get(key, httpx.Response(404, json={}))


def _client(recorder: Recorder, base: str = BASE) -> TodoApiClient:
    return TodoApiClient(base, transport=httpx.MockTransport(recorder))


@pytest.mark.asyncio
async def test_list_todos_gets_base_url() -> None:
    rec = Recorder({("GET", BASE): httpx.Response(200, json=[{"id": 1, "title": "a", "completed": False}])})
    async with _client(rec) as api:
        data = await api.list_todos()

    assert data == [{"id": 1, "title": "a", "completed": False}]
    assert rec.requests[0].method == "GET"


@pytest.mark.asyncio
async def test_trailing_slash_in_base_url_is_ignored() -> None:
    rec = Recorder({("GET", f"{BASE}/7"): httpx.Response(200, json={"id": 7})})
    async with _client(rec, base=BASE + "/") as api:
        assert api.base_url == BASE
        assert await api.get_todo(7) == {"id": 7}


@pytest.mark.asyncio
async def test_create_posts_json_body() -> None:
    rec = Recorder({("POST", BASE): httpx.Response(201, json={"id": 201, "title": "x", "completed": False})})
    async with _client(rec) as api:
        saved = await api.create_todo({"title": "x", "completed": False})

    assert saved["id"] == 201
    req = rec.requests[0]
    assert req.headers["content-type"] == "application/json"
    assert json.loads(req.content) == {"title": "x", "completed": False}


@pytest.mark.asyncio
async def test_replace_and_patch_target_item_url() -> None:
    rec = Recorder(
        {
            ("PUT", f"{BASE}/3"): httpx.Response(200, json={"id": 3, "title": "t", "completed": True}),
            ("PATCH", f"{BASE}/3"): httpx.Response(200, json={"id": 3, "completed": False}),
        }
    )
    async with _client(rec) as api:
        await api.replace_todo(3, {"id": 3, "title": "t", "completed": True})
        await api.patch_todo(3, {"completed": False})

    assert [r.method for r in rec.requests] == ["PUT", "PATCH"]
    assert json.loads(rec.requests[1].content) == {"completed": False}


@pytest.mark.asyncio
async def test_delete_accepts_empty_body() -> None:
    rec = Recorder({("DELETE", f"{BASE}/5"): httpx.Response(200)})
    async with _client(rec) as api:
        assert await api.delete_todo(5) is None


@pytest.mark.asyncio
async def test_non_success_status_raises() -> None:
    rec = Recorder({("PATCH", f"{BASE}/9"): httpx.Response(500, json={})})
    async with _client(rec) as api:
        with pytest.raises(TodoApiError) as ei:
            await api.patch_todo(9, {"completed": True})

    assert ei.value.status_code == 500
    assert ei.value.method == "PATCH"
    assert ei.value.url == f"{BASE}/9"


@pytest.mark.asyncio
async def test_list_rejects_non_array_payload() -> None:
    rec = Recorder({("GET", BASE): httpx.Response(200, json={"oops": True})})
    async with _client(rec) as api:
        with pytest.raises(ValueError):
            await api.list_todos()


def test_empty_base_url_is_rejected() -> None:
    with pytest.raises(RuntimeError):
        TodoApiClient("  ")


def test_friendly_messages() -> None:
    assert friendly_api_error_message(TodoApiError("GET", BASE, 404)) == "Failed to fetch todos (HTTP 404)"
    assert friendly_api_error_message(httpx.ConnectError("x")) == "Failed to fetch todos (network error)"
    assert friendly_api_error_message(ValueError("bad payload")) == "bad payload"
