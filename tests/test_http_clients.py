"""Tests for HTTP-based adapters."""

import asyncio
import json

import httpx
import pytest

from food_suggest.adapters.open_meteo_client import HttpxOpenMeteoClient
from food_suggest.adapters.openai_recommendation_client import (
    OpenAIRecommendationClient,
)
from food_suggest.adapters.proxy_client import HttpxProxyClient


class _FakeResponses:
    def __init__(self, output_text: str) -> None:
        self.output_text = output_text
        self.last_payload: dict[str, object] | None = None

    async def create(self, **kwargs):  # type: ignore[no-untyped-def]
        self.last_payload = kwargs
        return type("Resp", (), {"output_text": self.output_text})()


class _FakeOpenAI:
    def __init__(self, output_text: str) -> None:
        self.responses = _FakeResponses(output_text)


def _proxy(handler) -> HttpxProxyClient:  # type: ignore[no-untyped-def]
    transport = httpx.MockTransport(handler)
    return HttpxProxyClient(
        base_url="https://proxy.test",
        http_client=httpx.AsyncClient(transport=transport),
    )


def test_proxy_fetch_foods_with_region() -> None:
    seen: list[httpx.URL] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.url)
        return httpx.Response(200, json={"foods": [{"id": "hamsi"}]})

    client = _proxy(handler)

    everything = asyncio.run(client.fetch_foods())
    regional = asyncio.run(client.fetch_foods("karadeniz"))

    assert everything == {"foods": [{"id": "hamsi"}]}
    assert regional == everything
    assert seen[0].path == "/api/foods"
    assert "region" not in seen[0].params
    assert seen[1].params["region"] == "karadeniz"


def test_proxy_posts_json_to_endpoints() -> None:
    calls: list[tuple[str, dict[str, object]]] = []

    def handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "POST"
        calls.append((request.url.path, json.loads(request.content.decode())))
        return httpx.Response(200, json={"places": []})

    client = _proxy(handler)

    asyncio.run(client.recommend({"language": "en"}))
    asyncio.run(client.search_places({"query": "pide restaurant"}))
    asyncio.run(client.nearby_places({"radius": 1500}))

    assert calls == [
        ("/api/recommend", {"language": "en"}),
        ("/api/places/search", {"query": "pide restaurant"}),
        ("/api/places/nearby", {"radius": 1500}),
    ]


def test_proxy_raises_on_error_status() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(429, json={"error": "Too many requests"})

    client = _proxy(handler)

    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(client.recommend({}))


def test_proxy_health() -> None:
    def healthy(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/health"
        return httpx.Response(200, json={"status": "ok"})

    def unreachable(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    assert asyncio.run(_proxy(healthy).health()) is True
    assert asyncio.run(_proxy(unreachable).health()) is False


def test_proxy_create_strips_trailing_slash() -> None:
    client = HttpxProxyClient.create("https://proxy.test/", timeout=5)

    assert client.base_url == "https://proxy.test"
    assert client.timeout == 5
    asyncio.run(client.close())


def test_open_meteo_current() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/v1/forecast"
        assert request.url.params["latitude"] == "41.0"
        assert "weather_code" in request.url.params["current"]
        assert request.url.params["timezone"] == "auto"
        return httpx.Response(
            200, json={"current": {"temperature_2m": 12.4, "weather_code": 3}}
        )

    client = HttpxOpenMeteoClient(
        base_url="https://weather.test",
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )

    payload = asyncio.run(client.current(41.0, 29.0))

    assert payload["current"] == {"temperature_2m": 12.4, "weather_code": 3}


def test_openai_recommendation_client_parses_output() -> None:
    fake = _FakeOpenAI(json.dumps({"recommendation": "Soup", "foods": ["Soup"]}))
    client = OpenAIRecommendationClient(client=fake, model="gpt-4.1-mini")

    result = asyncio.run(
        client.recommend(
            {
                "mood": {"label": "Sad", "description": "Feeling low"},
                "city": "Rize",
                "preferences": {"isVegan": True},
                "language": "en",
            }
        )
    )

    assert result == {"recommendation": "Soup", "foods": ["Soup"]}
    request = fake.responses.last_payload
    assert request is not None
    assert request["model"] == "gpt-4.1-mini"
    assert request["store"] is False
    assert request["text"]["format"]["name"] == "food_recommendation"
    prompt = request["input"][0]["content"]
    assert "Sad" in prompt
    assert "Rize" in prompt
    assert "vegan" in prompt


def test_openai_recommendation_client_rejects_empty_output() -> None:
    client = OpenAIRecommendationClient(client=_FakeOpenAI(""), model="gpt-4.1-mini")

    with pytest.raises(RuntimeError):
        asyncio.run(client.recommend({"mood": {"label": "Happy"}}))


def test_openai_prompt_uses_proxy_diet_keys() -> None:
    fake = _FakeOpenAI(json.dumps({"foods": []}))
    client = OpenAIRecommendationClient(client=fake, model="gpt-4.1-mini")

    asyncio.run(
        client.recommend(
            {
                "mood": {"label": "Yorgun", "description": "Biraz dinlenmeliyim"},
                "preferences": {"isVegetarian": True, "isGlutenFree": True},
                "language": "tr",
            }
        )
    )

    request = fake.responses.last_payload
    assert request is not None
    prompt = request["input"][0]["content"]
    assert "vejetaryen ve gluten-free" in prompt
