"""OpenAI Responses API client for food image classification."""

import json
from dataclasses import dataclass

from openai import AsyncOpenAI, OpenAIError

from food_advisor.domain.errors import UpstreamUnavailableError
from food_advisor.services.vision import VisionClient


@dataclass
class OpenAIVisionClient(VisionClient):
    """Vision client backed by OpenAI structured outputs."""

    client: AsyncOpenAI

    @classmethod
    def create(cls, api_key: str, timeout_seconds: float = 30.0) -> "OpenAIVisionClient":
        return cls(client=AsyncOpenAI(api_key=api_key, timeout=timeout_seconds))

    async def classify(
        self,
        *,
        model: str,
        image_data_url: str,
        schema: dict[str, object],
        prompt: str,
    ) -> dict[str, object]:
        """Ask the model for ranked labels matching ``schema``."""
        try:
            response = await self.client.responses.create(
                model=model,
                input=[
                    {
                        "role": "user",
                        "content": [
                            {"type": "input_text", "text": prompt},
                            {"type": "input_image", "image_url": image_data_url},
                        ],
                    }
                ],
                text={
                    "format": {
                        "type": "json_schema",
                        "name": "food_classification",
                        "strict": True,
                        "schema": schema,
                    }
                },
                store=False,
            )
        except OpenAIError as exc:
            raise UpstreamUnavailableError(f"OpenAI request failed: {exc}") from exc

        output_text = response.output_text
        if not output_text:
            raise UpstreamUnavailableError("OpenAI returned an empty response")
        try:
            return json.loads(output_text)
        except json.JSONDecodeError as exc:
            raise UpstreamUnavailableError("OpenAI returned invalid JSON") from exc

    async def close(self) -> None:
        await self.client.close()
