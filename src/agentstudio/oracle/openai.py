"""OpenAI-compatible decision oracle over async httpx.

Renders the transcript and tool catalog into a chat completions request
and maps the model's answer back onto a Decision. Reads configuration from
constructor arguments or environment variables. Requests are sent once;
there is no retry.
"""

from __future__ import annotations

import json
import logging
import os
from typing import TYPE_CHECKING, Any, Sequence

import httpx

from agentstudio.models.decision import Decision, ToolCall
from agentstudio.models.messages import Role
from agentstudio.oracle.errors import (
    OracleConfigError,
    OracleResponseError,
    OracleTransportError,
    status_error,
)

if TYPE_CHECKING:
    from agentstudio.models.config import OracleConfig
    from agentstudio.models.messages import Message
    from agentstudio.toolkit.models import ToolSpec

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.openai.com/v1"


def render_messages(prompt: str, transcript: Sequence[Message]) -> list[dict[str, Any]]:
    """Convert a transcript into OpenAI chat messages.

    Each tool message becomes an assistant ``tool_calls`` entry followed by
    the matching ``tool`` reply, since the API only accepts tool output in
    answer to a call. The goal prompt is prepended when the transcript
    does not start with a system message.
    """
    messages: list[dict[str, Any]] = []
    if not transcript or transcript[0].role is not Role.SYSTEM:
        messages.append({"role": "system", "content": prompt})

    for index, msg in enumerate(transcript):
        if msg.role is Role.TOOL:
            call_id = f"call_{index}"
            messages.append({
                "role": "assistant",
                "content": None,
                "tool_calls": [{
                    "id": call_id,
                    "type": "function",
                    "function": {
                        "name": msg.tool_name or "",
                        "arguments": json.dumps(msg.tool_arguments or {}),
                    },
                }],
            })
            messages.append({
                "role": "tool",
                "tool_call_id": call_id,
                "content": msg.content,
            })
        else:
            messages.append({"role": msg.role.value, "content": msg.content})
    return messages


def parse_decision(response: dict) -> Decision:
    """Map a chat completions response onto a Decision.

    The first tool call wins; any further calls are dropped. Without tool
    calls the message content (possibly empty) is the reply.

    Raises:
        OracleResponseError: If the response has no usable message.
    """
    try:
        message = response["choices"][0]["message"]
    except (KeyError, IndexError, TypeError) as exc:
        raise OracleResponseError(
            f"Cannot extract message from response: {exc}. Response: {response}"
        ) from exc
    if not isinstance(message, dict):
        raise OracleResponseError(f"Response message is not an object: {message!r}")

    raw_calls = message.get("tool_calls") or []
    if not isinstance(raw_calls, list):
        raise OracleResponseError(f"tool_calls is not a list: {raw_calls!r}")
    if raw_calls:
        if len(raw_calls) > 1:
            logger.warning(
                "Oracle requested %d tool calls; only the first is used", len(raw_calls)
            )
        first = raw_calls[0]
        func = first.get("function") if isinstance(first, dict) else None
        if not isinstance(func, dict) or not isinstance(func.get("name"), str):
            raise OracleResponseError(f"Tool call has no function name: {first!r}")
        name = func["name"]
        raw_args = func.get("arguments", "{}")
        try:
            arguments = json.loads(raw_args) if isinstance(raw_args, str) else dict(raw_args)
        except (json.JSONDecodeError, TypeError, ValueError):
            logger.warning("Malformed JSON in tool call arguments for %s", name)
            arguments = {}
        if not isinstance(arguments, dict):
            arguments = {}
        return Decision(tool_call=ToolCall(tool_name=name, parameters=arguments))

    return Decision.reply(message.get("content") or "")


class OpenAIOracle:
    """Async httpx oracle for OpenAI-compatible chat completions.

    Implements the DecisionOracle protocol. Any non-success status raises
    an OracleStatusError subclass (see :func:`status_error`) on the first
    attempt.

    Usage::

        async with OpenAIOracle(api_key="sk-...") as oracle:
            executor = AgentExecutor(agent, oracle)
            await executor.run("What is 2 + 2?")
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        model: str = "gpt-4o-mini",
        timeout: float = 120.0,
        temperature: float | None = None,
        max_tokens: int | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the oracle.

        Args:
            api_key: API key. Falls back to AGENTSTUDIO_OPENAI_API_KEY env var.
            base_url: API base URL. Falls back to AGENTSTUDIO_OPENAI_BASE_URL
                env var, then to https://api.openai.com/v1.
            model: Model name sent with every request.
            timeout: Request timeout in seconds.
            temperature: Sampling temperature, omitted when None.
            max_tokens: Completion token cap, omitted when None.
            client: Pre-built httpx client (the oracle then does not own it).

        Raises:
            OracleConfigError: If no API key is provided or found in environment.
        """
        self._api_key = api_key or os.environ.get("AGENTSTUDIO_OPENAI_API_KEY", "")
        if not self._api_key:
            raise OracleConfigError(
                "No API key provided. Pass api_key= or set AGENTSTUDIO_OPENAI_API_KEY "
                "environment variable."
            )
        self._base_url = (
            base_url or os.environ.get("AGENTSTUDIO_OPENAI_BASE_URL", DEFAULT_BASE_URL)
        ).rstrip("/")
        self._model = model
        self._temperature = temperature
        self._max_tokens = max_tokens
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    @classmethod
    def from_config(cls, config: OracleConfig) -> OpenAIOracle:
        return cls(
            api_key=config.api_key,
            base_url=config.base_url,
            model=config.model,
            timeout=config.timeout,
            temperature=config.temperature,
            max_tokens=config.max_tokens,
        )

    @property
    def model(self) -> str:
        return self._model

    async def decide(
        self,
        prompt: str,
        transcript: Sequence[Message],
        tools: Sequence[ToolSpec],
    ) -> Decision:
        payload: dict[str, Any] = {
            "model": self._model,
            "messages": render_messages(prompt, transcript),
        }
        if tools:
            payload["tools"] = [t.to_openai() for t in tools]
        if self._temperature is not None:
            payload["temperature"] = self._temperature
        if self._max_tokens is not None:
            payload["max_tokens"] = self._max_tokens

        logger.debug("Requesting decision from %s (%d messages)", self._model, len(transcript))
        return parse_decision(await self._post(payload))

    async def _post(self, payload: dict[str, Any]) -> dict:
        """Send one chat completions request and return the JSON body."""
        try:
            response = await self._client.post(
                f"{self._base_url}/chat/completions",
                json=payload,
                headers={"Authorization": f"Bearer {self._api_key}"},
            )
        except httpx.HTTPError as exc:
            raise OracleTransportError(f"Oracle request failed: {exc}") from exc

        if response.is_error:
            raise status_error(response.status_code, response.text)

        try:
            data = response.json()
        except ValueError as exc:
            raise OracleResponseError(f"Oracle returned invalid JSON: {exc}") from exc
        if not isinstance(data, dict) or "choices" not in data:
            raise OracleResponseError(
                f"Unexpected response format: missing 'choices' key. Response: {data}"
            )
        return data

    async def aclose(self) -> None:
        """Close the underlying httpx client if this oracle created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> OpenAIOracle:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.aclose()
