
import httpx
import pytest

from person_notes.core import limiter
from person_notes.providers import KinopoiskProvider

BASE_URL = "https://api.test/v1.4"


@pytest.fixture(scope="session", autouse=True)
def _disable_rate_limits():
    limiter.enabled = False
    yield
    limiter.enabled = True


@pytest.fixture
def person_payload():
    """Shape of GET /person/{id} from kinopoisk.dev (trimmed)."""
    return {
        "id": 9144,
        "name": "Том Хэнкс",
        "enName": "Tom Hanks",
        "photo": "https:https://image.openmoviedb.com/kinopoisk-st-images/actor_iphone/iphone360_9144.jpg",
        "sex": "Мужской",
        "growth": 183,
        "birthday": "1956-07-09T00:00:00.000Z",
        "death": None,
        "age": 69,
        "description": "Американский актёр.\n\nЛауреат   двух премий «Оскар».",
        "profession": [{"value": "Актер"}, {"value": "Продюсер"}],
        "enProfession": [{"value": "Actor"}, {"value": "Producer"}],
        "facts": [
            {"value": "Родился в <b>Конкорде</b>, Калифорния &mdash; США."},
            {"value": "Спойлер", "spoiler": True},
        ],
        "spouses": [
            {"id": 25345, "name": "Рита Уилсон", "divorced": False, "relation": "супруга"},
            {"id": 25346, "name": None, "divorced": True},
            None,
        ],
        "unknownField": {"ignored": True},
    }


@pytest.fixture
def search_payload():
    return {
        "docs": [
            {"id": 1, "name": "Том", "enName": "Tom", "photo": "", "sex": "Мужской", "age": 30},
            {"id": 9144, "name": "Том Хэнкс", "enName": "Tom Hanks",
             "photo": "https:https://image.test/9144.jpg", "sex": "Мужской", "age": 69},
            {"name": "broken doc without id"},
        ],
        "total": 3,
    }


@pytest.fixture
def make_provider():
    """Build a provider whose HTTP calls go to `handler(request) -> httpx.Response`."""
    def _make(handler, **kwargs):
        return KinopoiskProvider(
            api_token="test-token",
            base_url=BASE_URL,
            transport=httpx.MockTransport(handler),
            **kwargs,
        )
    return _make
