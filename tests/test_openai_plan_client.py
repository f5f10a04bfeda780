"""Tests for the OpenAI plan client adapter."""

import asyncio
import json

import pytest

from keto_planner.adapters.openai_plan_client import OpenAIPlanClient


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
        self.closed = False

    async def close(self) -> None:
        self.closed = True


def _generate(client: OpenAIPlanClient, reasoning_effort: str | None = "low"):
    return asyncio.run(
        client.generate(
            model="gpt-5.2",
            reasoning_effort=reasoning_effort,
            store=False,
            schema={"type": "object"},
            prompt="Gere um plano",
        )
    )


def test_openai_plan_client_parses_output() -> None:
    fake = _FakeOpenAI(json.dumps({"tips": []}))
    client = OpenAIPlanClient(client=fake)

    result = _generate(client)

    assert result == {"tips": []}
    payload = fake.responses.last_payload
    assert payload is not None
    text_format = payload["text"]["format"]
    assert text_format["type"] == "json_schema"
    assert text_format["strict"] is True
    assert text_format["schema"] == {"type": "object"}
    assert payload["input"][0]["content"][0]["text"] == "Gere um plano"
    assert payload["reasoning"] == {"effort": "low"}


def test_openai_plan_client_omits_reasoning_when_unset() -> None:
    fake = _FakeOpenAI("{}")
    client = OpenAIPlanClient(client=fake)

    _generate(client, reasoning_effort=None)

    assert "reasoning" not in fake.responses.last_payload


def test_openai_plan_client_rejects_empty_output() -> None:
    client = OpenAIPlanClient(client=_FakeOpenAI(""))

    with pytest.raises(RuntimeError):
        _generate(client)


def test_openai_plan_client_raises_on_invalid_json() -> None:
    client = OpenAIPlanClient(client=_FakeOpenAI("not json"))

    with pytest.raises(json.JSONDecodeError):
        _generate(client)


def test_openai_plan_client_close() -> None:
    fake = _FakeOpenAI("{}")
    client = OpenAIPlanClient(client=fake)

    asyncio.run(client.close())

    assert fake.closed is True
