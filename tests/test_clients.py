import httpx
import pytest
import respx

from app.moods import MOOD_PROFILES, AggregatorConfig
from app.services.exercise_client import ExerciseClient
from app.services.quote_client import QuoteClient

CONFIG = AggregatorConfig(
    api_key="dummy",
    exercise_url="https://api.api-ninjas.com/v1/exercises",
    quote_url="https://zenquotes.io/api/random",
)


@pytest.mark.asyncio
@respx.mock
async def test_exercise_search_sends_profile_and_key():
    route = respx.get(
        CONFIG.exercise_url, params={"type": "stretching", "difficulty": "beginner"}
    ).mock(return_value=httpx.Response(200, json=[{"name": "Child's Pose"}]))

    client = ExerciseClient(CONFIG)
    try:
        data = await client.search(MOOD_PROFILES["stressed"])
    finally:
        await client.aclose()

    assert data == [{"name": "Child's Pose"}]
    assert route.calls.last.request.headers["X-Api-Key"] == "dummy"


@pytest.mark.asyncio
@respx.mock
async def test_exercise_search_raises_on_error_status():
    respx.get(CONFIG.exercise_url).mock(return_value=httpx.Response(403, json={"error": "bad key"}))

    client = ExerciseClient(CONFIG)
    try:
        with pytest.raises(httpx.HTTPStatusError):
            await client.search(MOOD_PROFILES["happy"])
    finally:
        await client.aclose()


@pytest.mark.asyncio
@respx.mock
async def test_random_quote_returns_payload():
    respx.get(CONFIG.quote_url).mock(
        return_value=httpx.Response(200, json=[{"q": "Begin.", "a": "Anon"}])
    )

    async with httpx.AsyncClient() as http:
        data = await QuoteClient(CONFIG, client=http).random_quote()

    assert data == [{"q": "Begin.", "a": "Anon"}]


@pytest.mark.asyncio
@respx.mock
async def test_random_quote_raises_on_bad_json():
    respx.get(CONFIG.quote_url).mock(return_value=httpx.Response(200, text="not json"))

    async with httpx.AsyncClient() as http:
        with pytest.raises(ValueError):
            await QuoteClient(CONFIG, client=http).random_quote()
