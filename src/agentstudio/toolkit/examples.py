"""Example tools and a ready-made demo agent.

Each tool is built with :func:`define_tool`, so its handler signature is
checked against its schema at import time.
"""

from __future__ import annotations

import json
import math
import random
import re
from datetime import datetime
from typing import Any, Mapping

from agentstudio.models.agent import Agent
from agentstudio.models.parameters import parse_parameters
from agentstudio.toolkit.builder import define_tool
from agentstudio.toolkit.models import ToolSpec

EXAMPLE_AGENT_PROMPT = (
    "You are a helpful AI assistant with access to various utility tools.\n"
    "Your goal is to help users with calculations, text processing, and conversions.\n"
    "Always be friendly and explain what you're doing when you use a tool."
)


def _fmt(n: float) -> str:
    """Render a number without a trailing ``.0`` for integral values."""
    if isinstance(n, float) and n.is_integer():
        return str(int(n))
    return str(n)


@define_tool(
    "calculator",
    "Performs basic arithmetic operations on two numbers",
    {
        "operation": {
            "kind": "string",
            "description": "The operation to perform: add, subtract, multiply, divide",
            "required": True,
        },
        "a": {"kind": "number", "description": "First number", "required": True},
        "b": {"kind": "number", "description": "Second number", "required": True},
    },
)
async def calculator(operation: str, a: float, b: float) -> str:
    op = operation.lower()
    if op == "add":
        return f"{_fmt(a)} + {_fmt(b)} = {_fmt(a + b)}"
    if op == "subtract":
        return f"{_fmt(a)} - {_fmt(b)} = {_fmt(a - b)}"
    if op == "multiply":
        return f"{_fmt(a)} × {_fmt(b)} = {_fmt(a * b)}"
    if op == "divide":
        if b == 0:
            raise ZeroDivisionError("Cannot divide by zero")
        return f"{_fmt(a)} ÷ {_fmt(b)} = {_fmt(a / b)}"
    raise ValueError(f"Unknown operation: {operation}")


@define_tool(
    "randomNumber",
    "Generates a random number within a specified range",
    {
        "min": {
            "kind": "number",
            "description": "Minimum value (inclusive)",
            "default": 0,
            "min": 0,
        },
        "max": {
            "kind": "number",
            "description": "Maximum value (inclusive)",
            "default": 100,
            "max": 1000,
        },
    },
)
async def random_number(min: float = 0, max: float = 100) -> str:  # noqa: A002
    if min > max:
        raise ValueError(f"min ({_fmt(min)}) must not exceed max ({_fmt(max)})")
    value = math.floor(random.random() * (max - min + 1)) + min
    return f"Random number between {_fmt(min)} and {_fmt(max)}: {_fmt(value)}"


@define_tool(
    "reverseString",
    "Reverses a string and optionally converts to uppercase",
    {
        "text": {"kind": "string", "description": "The text to reverse", "required": True},
        "uppercase": {
            "kind": "boolean",
            "description": "Convert to uppercase after reversing",
            "default": False,
        },
    },
)
async def reverse_string(text: str, uppercase: bool = False) -> str:
    reversed_text = text[::-1]
    if uppercase:
        reversed_text = reversed_text.upper()
    return f'Reversed: "{reversed_text}"'


@define_tool("currentTime", "Returns the current time and date")
async def current_time() -> str:
    return f"Current time: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}"


@define_tool(
    "wordCounter",
    "Counts words, characters, and sentences in text",
    {"text": {"kind": "string", "description": "The text to analyze", "required": True}},
)
async def word_counter(text: str) -> str:
    words = len(text.split())
    sentences = len([s for s in re.split(r"[.!?]+", text) if s.strip()])
    return (
        "Analysis:\n"
        f"- Words: {words}\n"
        f"- Characters: {len(text)}\n"
        f"- Sentences: {sentences}"
    )


_TO_CELSIUS = {
    "celsius": lambda v: v,
    "fahrenheit": lambda v: (v - 32) * 5 / 9,
    "kelvin": lambda v: v - 273.15,
}

_FROM_CELSIUS = {
    "celsius": lambda c: c,
    "fahrenheit": lambda c: c * 9 / 5 + 32,
    "kelvin": lambda c: c + 273.15,
}


@define_tool(
    "convertTemperature",
    "Converts temperature between Celsius, Fahrenheit, and Kelvin",
    {
        "value": {"kind": "number", "description": "Temperature value", "required": True},
        "from": {
            "kind": "string",
            "description": "Source unit: celsius, fahrenheit, kelvin",
            "required": True,
        },
        "to": {
            "kind": "string",
            "description": "Target unit: celsius, fahrenheit, kelvin",
            "required": True,
        },
    },
)
async def convert_temperature(value: float, **units: str) -> str:
    source, target = units["from"], units["to"]
    from_unit, to_unit = source.lower(), target.lower()

    if from_unit == to_unit:
        return f"{_fmt(value)}°{to_unit[:1].upper()}"

    if from_unit not in _TO_CELSIUS:
        raise ValueError(f"Unknown unit: {source}")
    if to_unit not in _FROM_CELSIUS:
        raise ValueError(f"Unknown unit: {target}")

    result = _FROM_CELSIUS[to_unit](_TO_CELSIUS[from_unit](value))
    symbol = "K" if to_unit == "kelvin" else f"°{to_unit[0].upper()}"
    return f"{_fmt(value)}°{from_unit[0].upper()} = {result:.2f}{symbol}"


@define_tool(
    "greet",
    "Greets a person by name with a friendly message",
    {
        "name": {
            "kind": "string",
            "description": "The name of the person to greet",
            "required": True,
        },
    },
)
async def greet(name: str) -> str:
    return f"Hello, {name}! Welcome to AI Agent Studio! 👋"


EXAMPLE_TOOLS: tuple[ToolSpec, ...] = (
    calculator,
    random_number,
    reverse_string,
    current_time,
    word_counter,
    convert_temperature,
    greet,
)


def create_custom_tool(
    name: str,
    description: str,
    parameters: Mapping[str, Mapping[str, Any]] | None = None,
) -> ToolSpec:
    """Build a placeholder tool that reports the parameters it was given.

    Useful for prototyping an agent's tool catalog before the real
    implementation exists.
    """
    schema = parse_parameters(parameters or {})

    async def _placeholder(**params: Any) -> str:
        return f'Tool "{name}" executed with params: {json.dumps(params, sort_keys=True)}'

    return ToolSpec(name=name, description=description, parameters=schema, handler=_placeholder)


def create_example_agent() -> Agent:
    """Create the demo agent with every example tool."""
    return Agent.create(
        name="Demo Assistant",
        prompt=EXAMPLE_AGENT_PROMPT,
        tools=EXAMPLE_TOOLS,
        agent_id="example-agent-1",
    )
