"""OpenAI Responses API client for plan generation."""

import json
from dataclasses import dataclass

from openai import AsyncOpenAI

from keto_planner.services.generation import PlanClient


@dataclass
class OpenAIPlanClient(PlanClient):
    """Plan client backed by OpenAI structured outputs."""

    client: AsyncOpenAI

    @classmethod
    def create(cls, api_key: str) -> "OpenAIPlanClient":
        """Create an OpenAI plan client."""
        return cls(client=AsyncOpenAI(api_key=api_key))

    async def generate(
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        schema: dict[str, object],
        prompt: str,
    ) -> dict[str, object]:
        """Send the instruction with a strict JSON schema and decode the reply."""
        request_payload: dict[str, object] = {
            "model": model,
            "input": [
                {
                    "role": "user",
                    "content": [{"type": "input_text", "text": prompt}],
                }
            ],
            "text": {
                "format": {
                    "type": "json_schema",
                    "name": "keto_plan",
                    "strict": True,
                    "schema": schema,
                }
            },
            "store": store,
        }
        if reasoning_effort:
            request_payload["reasoning"] = {"effort": reasoning_effort}

        response = await self.client.responses.create(**request_payload)
        output_text = response.output_text
        if not output_text:
            raise RuntimeError("OpenAI returned an empty plan response")
        return json.loads(output_text)

    async def close(self) -> None:
        await self.client.close()
