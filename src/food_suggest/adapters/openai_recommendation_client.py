"""OpenAI Responses API client for food recommendations."""

import json
from dataclasses import dataclass

from openai import AsyncOpenAI

from food_suggest.services.ai import RecommendationClient
from food_suggest.services.prompts import (
    RECOMMENDATION_SCHEMA,
    build_recommendation_prompt,
)


@dataclass
class OpenAIRecommendationClient(RecommendationClient):
    """Recommendation client calling OpenAI directly instead of the proxy."""

    client: AsyncOpenAI
    model: str

    @classmethod
    def create(cls, api_key: str, model: str) -> "OpenAIRecommendationClient":
        """Create an OpenAI recommendation client."""
        return cls(client=AsyncOpenAI(api_key=api_key), model=model)

    async def recommend(self, payload: dict[str, object]) -> dict[str, object]:
        """Call OpenAI Responses API with structured outputs."""
        mood = payload.get("mood")
        preferences = payload.get("preferences")
        prompt = build_recommendation_prompt(
            mood=mood if isinstance(mood, dict) else {},
            city=payload.get("city") or None,
            preferences=preferences if isinstance(preferences, dict) else None,
            language=str(payload.get("language") or "en"),
        )
        response = await self.client.responses.create(
            model=self.model,
            input=[{"role": "user", "content": prompt}],
            text={
                "format": {
                    "type": "json_schema",
                    "name": "food_recommendation",
                    "strict": True,
                    "schema": RECOMMENDATION_SCHEMA,
                }
            },
            store=False,
        )
        output_text = response.output_text
        if not output_text:
            raise RuntimeError("OpenAI returned an empty response")
        return json.loads(output_text)
