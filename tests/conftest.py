"""Shared test fixtures for agentstudio.

Provides a scripted oracle, an echo tool and agent builders. Async code is
driven with ``asyncio.run`` inside ordinary test functions.
"""

from __future__ import annotations

import asyncio

import pytest
from hypothesis import HealthCheck, settings

from agentstudio import Agent, Decision, define_tool

# First-run charmap generation for text strategies can trip the timing health check.
settings.register_profile("default", suppress_health_check=[HealthCheck.too_slow])
settings.load_profile("default")


class ScriptedOracle:
    """Oracle that replays a fixed list of decisions and records each call.

    When ``gate`` is set, every call first signals ``entered`` and then
    waits for the gate, so a test can observe the executor mid-turn.
    """

    def __init__(self, *decisions: Decision) -> None:
        self.decisions = list(decisions)
        self.calls: list[dict] = []
        self.gate: asyncio.Event | None = None
        self.entered: asyncio.Event | None = None

    def hold(self) -> None:
        """Make the next calls block until ``release()``. Call inside a loop."""
        self.gate = asyncio.Event()
        self.entered = asyncio.Event()

    def release(self) -> None:
        assert self.gate is not None
        self.gate.set()

    async def decide(self, prompt, transcript, tools):
        self.calls.append({
            "prompt": prompt,
            "transcript": transcript,
            "tools": tools,
        })
        if self.gate is not None:
            self.entered.set()
            await self.gate.wait()
        idx = min(len(self.calls) - 1, len(self.decisions) - 1)
        return self.decisions[idx]


class FailingOracle:
    """Oracle whose every call raises."""

    def __init__(self, exc: Exception | None = None) -> None:
        self.exc = exc or RuntimeError("oracle unavailable")

    async def decide(self, prompt, transcript, tools):
        raise self.exc


@define_tool(
    "echo",
    "Return the text unchanged",
    {"text": {"kind": "string", "description": "Text to echo", "required": True}},
)
async def echo_tool(text: str) -> str:
    return text


def make_agent(*tools, prompt: str = "You are a test agent.", name: str = "tester") -> Agent:
    """Create an agent bound to ``tools``."""
    return Agent.create(name=name, prompt=prompt, tools=tools, agent_id="agent-test")


@pytest.fixture
def echo():
    return echo_tool


@pytest.fixture
def echo_agent():
    return make_agent(echo_tool)
