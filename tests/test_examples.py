"""Tests for the bundled example tools and demo agent."""

from __future__ import annotations

import asyncio
import re

import pytest
from hypothesis import given
from hypothesis import strategies as st

from agentstudio import ToolCall, ToolExecutor, ToolRegistry
from agentstudio.toolkit.examples import (
    EXAMPLE_AGENT_PROMPT,
    EXAMPLE_TOOLS,
    calculator,
    convert_temperature,
    create_custom_tool,
    create_example_agent,
    current_time,
    greet,
    random_number,
    reverse_string,
    word_counter,
)

_dispatcher = ToolExecutor(ToolRegistry(EXAMPLE_TOOLS))


def _call(name: str, **params):
    return asyncio.run(_dispatcher.execute(ToolCall(name, params)))


class TestCatalog:
    def test_names_in_order(self):
        assert [t.name for t in EXAMPLE_TOOLS] == [
            "calculator",
            "randomNumber",
            "reverseString",
            "currentTime",
            "wordCounter",
            "convertTemperature",
            "greet",
        ]

    def test_every_tool_has_description(self):
        assert all(t.description for t in EXAMPLE_TOOLS)

    def test_schemas_render(self):
        for tool in EXAMPLE_TOOLS:
            assert tool.to_openai()["function"]["name"] == tool.name


class TestCalculator:
    @pytest.mark.parametrize(
        "operation,a,b,expected",
        [
            ("add", 2, 3, "2 + 3 = 5"),
            ("subtract", 10, 4, "10 - 4 = 6"),
            ("multiply", 6, 7, "6 × 7 = 42"),
            ("divide", 9, 2, "9 ÷ 2 = 4.5"),
            ("ADD", 1.5, 1.5, "1.5 + 1.5 = 3"),
        ],
    )
    def test_operations(self, operation, a, b, expected):
        result = _call("calculator", operation=operation, a=a, b=b)
        assert result.success
        assert result.result == expected

    def test_divide_by_zero(self):
        result = _call("calculator", operation="divide", a=1, b=0)
        assert result.error == "Cannot divide by zero"

    def test_unknown_operation(self):
        result = _call("calculator", operation="modulo", a=1, b=2)
        assert result.error == "Unknown operation: modulo"

    def test_missing_operand(self):
        result = _call("calculator", operation="add", a=1)
        assert result.error == "Missing required parameter: b"

    def test_is_exported(self):
        assert calculator.name == "calculator"


class TestRandomNumber:
    @given(st.integers(min_value=0, max_value=500), st.integers(min_value=0, max_value=500))
    def test_within_range(self, low, span):
        high = min(low + span, 1000)
        result = asyncio.run(random_number.invoke({"min": low, "max": high}))
        value = int(result.rsplit(": ", 1)[1])
        assert low <= value <= high

    def test_defaults(self):
        result = _call("randomNumber")
        assert result.result.startswith("Random number between 0 and 100: ")

    def test_bounds_enforced(self):
        assert _call("randomNumber", min=-1).error == "Parameter min must be >= 0"
        assert _call("randomNumber", max=1001).error == "Parameter max must be <= 1000"

    def test_inverted_range_fails(self):
        result = _call("randomNumber", min=10, max=5)
        assert not result.success
        assert "must not exceed" in result.error


class TestReverseString:
    def test_reverse(self):
        assert _call("reverseString", text="abc").result == 'Reversed: "cba"'

    def test_uppercase(self):
        assert _call("reverseString", text="abc", uppercase=True).result == 'Reversed: "CBA"'

    def test_uppercase_must_be_boolean(self):
        result = _call("reverseString", text="abc", uppercase="yes")
        assert result.error == "Parameter uppercase must be a boolean"

    def test_direct_invoke(self):
        assert asyncio.run(reverse_string.invoke({"text": "ab"})) == 'Reversed: "ba"'


class TestCurrentTime:
    def test_format(self):
        result = asyncio.run(current_time.invoke({}))
        assert re.fullmatch(r"Current time: \d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}", result)


class TestWordCounter:
    def test_counts(self):
        result = asyncio.run(word_counter.invoke({"text": "Hi there. How are you?"}))
        assert result == "Analysis:\n- Words: 5\n- Characters: 22\n- Sentences: 2"

    def test_empty_text(self):
        result = asyncio.run(word_counter.invoke({"text": ""}))
        assert "- Words: 0" in result
        assert "- Sentences: 0" in result


class TestConvertTemperature:
    def test_celsius_to_fahrenheit(self):
        result = _call("convertTemperature", value=100, **{"from": "celsius", "to": "fahrenheit"})
        assert result.result == "100°C = 212.00°F"

    def test_fahrenheit_to_celsius(self):
        result = asyncio.run(
            convert_temperature.invoke({"value": 32, "from": "Fahrenheit", "to": "celsius"})
        )
        assert result == "32°F = 0.00°C"

    def test_to_kelvin(self):
        result = asyncio.run(
            convert_temperature.invoke({"value": 0, "from": "celsius", "to": "kelvin"})
        )
        assert result == "0°C = 273.15K"

    def test_same_unit(self):
        result = asyncio.run(
            convert_temperature.invoke({"value": 5, "from": "kelvin", "to": "kelvin"})
        )
        assert result == "5°K"

    def test_unknown_unit(self):
        result = _call("convertTemperature", value=1, **{"from": "rankine", "to": "celsius"})
        assert result.error == "Unknown unit: rankine"


class TestGreet:
    def test_greeting(self):
        assert asyncio.run(greet.invoke({"name": "Ada"})) == (
            "Hello, Ada! Welcome to AI Agent Studio! 👋"
        )


class TestCustomTool:
    def test_reports_params(self):
        tool = create_custom_tool(
            "lookup",
            "Look something up",
            {"query": {"kind": "string", "required": True}, "limit": {"kind": "number"}},
        )
        result = asyncio.run(tool.invoke({"query": "cats", "limit": 3}))
        assert result == 'Tool "lookup" executed with params: {"limit": 3, "query": "cats"}'

    def test_schema_is_validated(self):
        tool = create_custom_tool("lookup", "d", {"query": {"kind": "string", "required": True}})
        dispatcher = ToolExecutor(ToolRegistry([tool]))
        result = asyncio.run(dispatcher.execute(ToolCall("lookup", {})))
        assert result.error == "Missing required parameter: query"

    def test_reports_exactly_what_was_sent(self):
        tool = create_custom_tool("t", "d", {"n": {"kind": "number", "default": 5}})
        dispatcher = ToolExecutor(ToolRegistry([tool]))
        result = asyncio.run(dispatcher.execute(ToolCall("t", {"extra": "x"})))
        assert result.result == 'Tool "t" executed with params: {"extra": "x"}'

    def test_no_parameters(self):
        tool = create_custom_tool("ping", "Ping")
        assert asyncio.run(tool.invoke({})) == 'Tool "ping" executed with params: {}'


class TestExampleAgent:
    def test_agent(self):
        agent = create_example_agent()
        assert agent.id == "example-agent-1"
        assert agent.name == "Demo Assistant"
        assert agent.prompt == EXAMPLE_AGENT_PROMPT
        assert agent.tools == EXAMPLE_TOOLS
