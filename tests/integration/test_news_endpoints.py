"""Integration tests for the /news endpoints."""

import json
from collections.abc import Iterator
from uuid import UUID, uuid4

import pytest
from httpx import ASGITransport, AsyncClient

from newsapi.application.interfaces import NewsStore
from newsapi.domain.entities import Article
from newsapi.domain.exceptions import StorageError
from newsapi.infrastructure.dependencies import get_news_store
from newsapi.infrastructure.memory import InMemoryNewsStore
from newsapi.main import app

KNOWN_ID = "123e4567-e89b-12d3-a456-426614174000"

VALID_BODY = {
    "author": "test-author",
    "title": "test-title",
    "summary": "test-summary",
    "created_at": "2025-07-30T15:30:45Z",
    "source": "https://example.com",
    "tags": ["tag1", "tag2"],
}


class MockNewsStore(NewsStore):
    """Store stub that either succeeds with canned data or fails every call."""

    def __init__(self, err_state: bool = False):
        self.err_state = err_state
        self.calls: list[str] = []

    def _check(self, operation: str) -> None:
        self.calls.append(operation)
        if self.err_state:
            raise StorageError("backend unavailable")

    @staticmethod
    def _canned(article_id: UUID) -> Article:
        return Article(id=article_id, **VALID_BODY)

    async def create(self, article: Article) -> Article:
        self._check("create")
        return article.copy(id=uuid4())

    async def find_by_id(self, article_id: UUID) -> Article:
        self._check("find_by_id")
        return self._canned(article_id)

    async def find_all(self) -> list[Article]:
        self._check("find_all")
        return [self._canned(UUID(KNOWN_ID))]

    async def delete_by_id(self, article_id: UUID) -> None:
        self._check("delete_by_id")

    async def update(self, article_id: UUID, article: Article) -> Article:
        self._check("update")
        return article.copy(id=article_id)


@pytest.fixture
def use_store() -> Iterator:
    """Install a store for the duration of one test."""

    def _install(store: NewsStore) -> NewsStore:
        app.dependency_overrides[get_news_store] = lambda: store
        return store

    yield _install
    app.dependency_overrides.clear()


def _client() -> AsyncClient:
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


# ── POST /news ───────────────────────────────────────────────────────


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "body, err_state, expected_status",
    [
        ("invalid", False, 400),
        ("[1, 2]", False, 400),
        (json.dumps({**VALID_BODY, "tags": "not-a-list"}), False, 400),
        (json.dumps({k: v for k, v in VALID_BODY.items() if k != "tags"}), False, 400),
        (json.dumps(VALID_BODY), True, 500),
        (json.dumps(VALID_BODY), False, 201),
    ],
    ids=[
        "invalid json",
        "json array",
        "wrong field type",
        "validation failure",
        "db error",
        "success",
    ],
)
async def test_create_news(use_store, body: str, err_state: bool, expected_status: int):
    use_store(MockNewsStore(err_state=err_state))
    async with _client() as client:
        response = await client.post("/news", content=body)
    assert response.status_code == expected_status


@pytest.mark.asyncio
async def test_create_news_success_has_empty_body(use_store):
    use_store(MockNewsStore())
    async with _client() as client:
        response = await client.post("/news", json=VALID_BODY)
    assert response.status_code == 201
    assert response.content == b""


@pytest.mark.asyncio
async def test_create_news_missing_created_at_mentions_validation(use_store):
    store = use_store(MockNewsStore())
    body = {k: v for k, v in VALID_BODY.items() if k != "created_at"}
    async with _client() as client:
        response = await client.post("/news", json=body)

    assert response.status_code == 400
    assert "validation failed" in response.text
    assert "created_at" in response.text
    assert store.calls == []


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "overrides",
    [
        {"created_at": "2025-07-30T15:30:45Z\n"},
        {"source": " https://example.com"},
    ],
    ids=["created_at trailing newline", "source leading space"],
)
async def test_create_news_rejects_padded_values(use_store, overrides: dict):
    store = use_store(InMemoryNewsStore())
    async with _client() as client:
        response = await client.post("/news", json={**VALID_BODY, **overrides})

    assert response.status_code == 400
    assert "validation failed" in response.text
    assert await store.find_all() == []

@pytest.mark.asyncio
async def test_create_news_ignores_client_supplied_id(use_store):
    store = use_store(InMemoryNewsStore())
    async with _client() as client:
        response = await client.post("/news", json={**VALID_BODY, "id": KNOWN_ID})
    assert response.status_code == 201
    [stored] = await store.find_all()
    assert stored.id != UUID(KNOWN_ID)


# ── GET /news ────────────────────────────────────────────────────────


@pytest.mark.asyncio
@pytest.mark.parametrize("err_state, expected_status", [(True, 500), (False, 200)], ids=["db error", "success"])
async def test_list_news(use_store, err_state: bool, expected_status: int):
    use_store(MockNewsStore(err_state=err_state))
    async with _client() as client:
        response = await client.get("/news")
    assert response.status_code == expected_status


@pytest.mark.asyncio
async def test_list_news_returns_json_array(use_store):
    use_store(MockNewsStore())
    async with _client() as client:
        response = await client.get("/news")
    assert response.headers["content-type"].startswith("application/json")
    assert response.json() == [{"id": KNOWN_ID, **VALID_BODY}]


@pytest.mark.asyncio
async def test_list_news_empty_store(use_store):
    use_store(InMemoryNewsStore())
    async with _client() as client:
        response = await client.get("/news")
    assert response.status_code == 200
    assert response.json() == []


# ── GET /news/{id} ───────────────────────────────────────────────────


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "url, err_state, expected_status",
    [
        ("/news/", False, 400),
        ("/news/invalid-uuid", False, 400),
        (f"/news/{KNOWN_ID}", True, 500),
        (f"/news/{KNOWN_ID}", False, 200),
    ],
    ids=["missing id parameter", "invalid id format", "db error", "success"],
)
async def test_get_news_by_id(use_store, url: str, err_state: bool, expected_status: int):
    use_store(MockNewsStore(err_state=err_state))
    async with _client() as client:
        response = await client.get(url)
    assert response.status_code == expected_status


@pytest.mark.asyncio
async def test_get_news_by_id_error_messages(use_store):
    use_store(MockNewsStore())
    async with _client() as client:
        missing = await client.get("/news/")
        invalid = await client.get("/news/not-a-uuid")
    assert missing.json()["detail"] == "missing id parameter"
    assert invalid.json()["detail"] == "invalid id format"


@pytest.mark.asyncio
async def test_get_news_by_id_returns_article(use_store):
    use_store(MockNewsStore())
    async with _client() as client:
        response = await client.get(f"/news/{KNOWN_ID}")
    assert response.json() == {"id": KNOWN_ID, **VALID_BODY}


@pytest.mark.asyncio
async def test_get_unknown_id_is_reported_as_server_error(use_store):
    use_store(InMemoryNewsStore())
    async with _client() as client:
        response = await client.get(f"/news/{uuid4()}")
    assert response.status_code == 500


@pytest.mark.asyncio
async def test_encoding_failure_keeps_status(use_store):
    class UnencodableStore(MockNewsStore):
        async def find_by_id(self, article_id: UUID) -> Article:
            return Article(id=None, **VALID_BODY)

    use_store(UnencodableStore())
    async with _client() as client:
        response = await client.get(f"/news/{KNOWN_ID}")
    assert response.status_code == 200
    assert response.content == b""


# ── PUT /news/{id} ───────────────────────────────────────────────────


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "url, body, err_state, expected_status",
    [
        ("/news/", json.dumps(VALID_BODY), False, 400),
        ("/news/invalid-uuid", json.dumps(VALID_BODY), False, 400),
        (f"/news/{KNOWN_ID}", "invalid", False, 400),
        (f"/news/{KNOWN_ID}", json.dumps({k: v for k, v in VALID_BODY.items() if k != "tags"}), False, 400),
        (f"/news/{KNOWN_ID}", json.dumps(VALID_BODY), True, 500),
        (f"/news/{KNOWN_ID}", json.dumps(VALID_BODY), False, 200),
    ],
    ids=[
        "missing id parameter",
        "invalid id format",
        "invalid request body json",
        "invalid request body validation",
        "db error",
        "success",
    ],
)
async def test_update_news_by_id(use_store, url: str, body: str, err_state: bool, expected_status: int):
    use_store(MockNewsStore(err_state=err_state))
    async with _client() as client:
        response = await client.put(url, content=body)
    assert response.status_code == expected_status


@pytest.mark.asyncio
async def test_update_checks_id_before_body(use_store):
    use_store(MockNewsStore())
    async with _client() as client:
        response = await client.put("/news/invalid-uuid", content="invalid")
    assert response.status_code == 400
    assert response.json()["detail"] == "invalid id format"


@pytest.mark.asyncio
async def test_update_news_returns_updated_article(use_store):
    store = use_store(InMemoryNewsStore())
    created = await store.create(Article(**VALID_BODY))
    replacement = {**VALID_BODY, "title": "new-title", "tags": ["only"]}

    async with _client() as client:
        response = await client.put(f"/news/{created.id}", json=replacement)

    assert response.status_code == 200
    assert response.json() == {"id": str(created.id), **replacement}
    assert (await store.find_by_id(created.id)).title == "new-title"


# ── DELETE /news/{id} ────────────────────────────────────────────────


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "url, err_state, expected_status",
    [
        ("/news/", False, 400),
        ("/news/invalid-uuid", False, 400),
        (f"/news/{KNOWN_ID}", True, 500),
        (f"/news/{KNOWN_ID}", False, 204),
    ],
    ids=["missing id parameter", "invalid id format", "db error", "success"],
)
async def test_delete_news_by_id(use_store, url: str, err_state: bool, expected_status: int):
    use_store(MockNewsStore(err_state=err_state))
    async with _client() as client:
        response = await client.delete(url)
    assert response.status_code == expected_status


@pytest.mark.asyncio
async def test_delete_then_get_and_delete_again(use_store):
    store = use_store(InMemoryNewsStore())
    created = await store.create(Article(**VALID_BODY))

    async with _client() as client:
        deleted = await client.delete(f"/news/{created.id}")
        fetched = await client.get(f"/news/{created.id}")
        deleted_again = await client.delete(f"/news/{created.id}")

    assert deleted.status_code == 204
    assert deleted.content == b""
    assert fetched.status_code == 500
    assert deleted_again.status_code == 500


# ── Full lifecycle ───────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_create_list_get_round_trip(use_store):
    use_store(InMemoryNewsStore())
    async with _client() as client:
        created = await client.post("/news", json=VALID_BODY)
        listed = await client.get("/news")
        [item] = listed.json()
        fetched = await client.get(f"/news/{item['id']}")

    assert created.status_code == 201
    assert fetched.status_code == 200
    body = fetched.json()
    assert UUID(body.pop("id")) == UUID(item["id"])
    assert body == VALID_BODY
