from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from wordscope.config import settings
from wordscope.database import get_db
from wordscope.main import app
from wordscope.models import Base

TEST_DB_URL = "sqlite+aiosqlite://"

engine = create_async_engine(
    TEST_DB_URL,
    echo=False,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
test_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture(autouse=True)
async def setup_db():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


async def override_get_db():
    async with test_session() as session:
        yield session


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture
async def db():
    async with test_session() as session:
        yield session


@pytest.fixture
async def client():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


# --- Boundary mock: Anthropic SDK ---


@pytest.fixture
def mock_anthropic(monkeypatch):
    """Mock anthropic.AsyncAnthropic at the SDK boundary.

    Usage:
        set_response("dictionary text")   — text returned by every call
        set_error(RuntimeError("boom"))   — every call raises
    """
    monkeypatch.setattr(settings, "llm_provider", "anthropic")
    state = {"text": "", "error": None}

    def set_response(text):
        state["text"] = text
        state["error"] = None

    def set_error(exc):
        state["error"] = exc

    async def _create_side_effect(**kwargs):
        if state["error"] is not None:
            raise state["error"]
        content_block = MagicMock()
        content_block.text = state["text"]
        message = MagicMock()
        message.content = [content_block]
        return message

    mock_message_create = AsyncMock(side_effect=_create_side_effect)

    mock_client_instance = MagicMock()
    mock_client_instance.messages = MagicMock()
    mock_client_instance.messages.create = mock_message_create

    with patch("anthropic.AsyncAnthropic", return_value=mock_client_instance):
        yield {
            "set_response": set_response,
            "set_error": set_error,
            "create_mock": mock_message_create,
        }


# --- Boundary mock: Unsplash search API ---


@pytest.fixture
def mock_unsplash(monkeypatch):
    """Serve Unsplash search responses from an httpx.MockTransport.

    Usage:
        set_results([{"urls": {"regular": "..."}}])
        set_status(500)
        set_error(httpx.ConnectError("down"))
    """
    import wordscope.services.image_service as image_mod

    monkeypatch.setattr(settings, "unsplash_access_key", "test-key")
    state = {"status": 200, "payload": {"results": []}, "error": None}
    requests: list[httpx.Request] = []

    def set_results(results):
        state["payload"] = {"results": results}

    def set_payload(payload):
        state["payload"] = payload

    def set_status(code):
        state["status"] = code

    def set_error(exc):
        state["error"] = exc

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        if state["error"] is not None:
            raise state["error"]
        return httpx.Response(state["status"], json=state["payload"])

    monkeypatch.setattr(image_mod, "_transport", httpx.MockTransport(handler))
    yield {
        "set_results": set_results,
        "set_payload": set_payload,
        "set_status": set_status,
        "set_error": set_error,
        "requests": requests,
    }


def photo(url):
    return {"id": "abc", "urls": {"regular": url, "small": url + "&w=400"}}


FULL_ENTRY = (
    "**Pronunciation:** /ˈlæŋɡwɪdʒ/\n"
    "**Definitions:**\n"
    "1. The method of human communication.\n"
    "2. The system of communication used by a particular community.\n"
    "**Synonyms:** tongue, speech, idiom\n"
    "**Antonyms:** silence\n"
    "**Etymology:** Middle English, from Old French langage.\n"
    "**Example Sentences:**\n"
    "- She speaks three languages.\n"
    "- Body language says a lot.\n"
    "**Turkish Meaning:** dil"
)
