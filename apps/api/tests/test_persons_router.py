import httpx
import pytest
from fastapi.testclient import TestClient

from person_notes.dependencies import get_provider
from person_notes.main import app


@pytest.fixture
def client_for(make_provider):
    """TestClient whose kinopoisk provider answers through `handler`."""
    def _client(handler):
        provider = make_provider(handler)
        app.dependency_overrides[get_provider] = lambda: provider
        return TestClient(app)
    yield _client
    app.dependency_overrides.clear()


@pytest.fixture
def api_handler(person_payload, search_payload):
    def handler(request: httpx.Request) -> httpx.Response:
        path = request.url.path
        if path.endswith("/person/search"):
            return httpx.Response(200, json=search_payload)
        if path.endswith("/person/9144"):
            return httpx.Response(200, json=person_payload)
        if path.endswith("/person/500"):
            return httpx.Response(500, text="upstream down")
        if path.endswith("/person/429"):
            return httpx.Response(429, text="quota")
        if path.endswith("/person/777"):
            return httpx.Response(200, json={"name": "no id"})
        return httpx.Response(404, json={"message": "not found"})
    return handler


def test_health():
    assert TestClient(app).get("/health").json() == {"status": "ok"}


def test_search_returns_ranked_candidates(client_for, api_handler):
    r = client_for(api_handler).get("/persons/search", params={"query": "Том", "refine": "tom hanks"})
    assert r.status_code == 200
    body = r.json()
    assert body["query"] == "Том"
    assert [c["id"] for c in body["candidates"]] == [9144, 1]
    assert body["candidates"][0]["enName"] == "Tom Hanks"
    assert body["candidates"][0]["photo"] == "https://image.test/9144.jpg"


def test_get_person_returns_template_fields(client_for, api_handler):
    r = client_for(api_handler).get("/persons/9144", params={"folder": "Actors/"})
    assert r.status_code == 200
    body = r.json()
    assert body["id"] == 9144
    assert body["nameArr"] == ["Том Хэнкс"]
    assert body["birthDate"] == "1956-07-09"
    assert body["fileSafeEnglishName"] == "Tom Hanks"
    # spouse 25346 has no name and its fetch 404s: skipped
    assert body["relatedPersonLinks"] == ['"[[Actors/25345|Рита Уилсон]]"']


def test_lookup_numeric_and_name(client_for, api_handler):
    client = client_for(api_handler)
    by_id = client.get("/persons/lookup", params={"query": "9144", "folder": ""}).json()
    assert by_id["person"]["id"] == 9144
    assert by_id["candidates"] == []

    by_name = client.get("/persons/lookup", params={"query": "Том Хэнкс"}).json()
    assert by_name["person"] is None
    assert [c["id"] for c in by_name["candidates"]] == [9144, 1]


@pytest.mark.parametrize(
    "path, status_code",
    [
        ("/persons/404", 404),
        ("/persons/429", 429),
        ("/persons/500", 502),
        ("/persons/777", 502),
    ],
)
def test_upstream_errors_are_mapped(client_for, api_handler, path, status_code):
    assert client_for(api_handler).get(path).status_code == status_code


def test_blank_query_is_bad_request(client_for, api_handler):
    r = client_for(api_handler).get("/persons/lookup", params={"query": "  "})
    assert r.status_code == 400


def test_missing_token_is_service_unavailable(monkeypatch):
    from person_notes.core import get_settings
    from person_notes.providers import get_kinopoisk_provider

    monkeypatch.setenv("KINOPOISK_API_TOKEN", "")
    get_settings.cache_clear()
    get_kinopoisk_provider.cache_clear()
    try:
        r = TestClient(app).get("/persons/9144")
    finally:
        get_settings.cache_clear()
        get_kinopoisk_provider.cache_clear()
    assert r.status_code == 503
