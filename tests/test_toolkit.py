"""Tests for the toolkit: tool specs, builder, registry and dispatch.

Covers ToolSpec formats and argument binding, ToolResult invariants,
define_tool signature checks, ToolRegistry lookup rules, and end-to-end
ToolExecutor dispatch for every failure mode.
"""

from __future__ import annotations

import asyncio
import logging

import pytest

from agentstudio import (
    NumberParam,
    ToolCall,
    ToolDefinitionError,
    ToolExecutor,
    ToolRegistry,
    ToolResult,
    ToolSpec,
    define_tool,
)
from agentstudio.exceptions import ParameterDefinitionError


def _run(coro):
    return asyncio.run(coro)


def _spec(name: str = "t", handler=None, **params) -> ToolSpec:
    return ToolSpec(
        name=name,
        description=f"{name} tool",
        parameters=params,
        handler=handler or (lambda **kw: "ok"),
    )


# ===========================================================================
# ToolSpec
# ===========================================================================


class TestToolSpec:
    def test_dict_parameters_are_parsed(self):
        spec = _spec(n={"kind": "number", "max": 3})
        assert isinstance(spec.parameters["n"], NumberParam)

    def test_bad_parameter_dict_raises(self):
        with pytest.raises(ParameterDefinitionError):
            _spec(n={"kind": "number", "default": "x"})

    def test_handler_required(self):
        with pytest.raises(TypeError):
            ToolSpec(name="t", description="d")

    def test_to_openai(self):
        spec = _spec("adder", a={"kind": "number", "required": True})
        oai = spec.to_openai()
        assert oai["type"] == "function"
        func = oai["function"]
        assert func["name"] == "adder"
        assert func["description"] == "adder tool"
        assert func["parameters"]["required"] == ["a"]
        assert func["parameters"]["properties"]["a"]["type"] == "number"

    def test_bind_passes_declared_values_and_drops_extras(self):
        spec = _spec(
            handler=lambda text, upper=False: text,
            text={"kind": "string", "required": True},
            upper={"kind": "boolean", "default": False},
        )
        assert spec.bind_arguments({"text": "hi", "extra": 1}) == {"text": "hi"}

    def test_bind_does_not_inject_defaults(self):
        spec = _spec(handler=lambda n=5: n, n={"kind": "number", "default": 5})
        assert spec.bind_arguments({}) == {}
        assert _run(spec.invoke({})) == "5"

    def test_bind_keeps_extras_for_var_kwargs(self):
        spec = _spec(handler=lambda **kw: kw, n={"kind": "number", "default": 5})
        assert spec.bind_arguments({"extra": "x"}) == {"extra": "x"}

    def test_invoke_sync_handler(self):
        spec = _spec(handler=lambda x: x * 2, x={"kind": "number", "required": True})
        assert _run(spec.invoke({"x": 21})) == "42"

    def test_invoke_async_handler(self):
        async def handler(x):
            await asyncio.sleep(0)
            return f"got {x}"

        spec = _spec(handler=handler, x={"kind": "string", "required": True})
        assert _run(spec.invoke({"x": "y"})) == "got y"


class TestToolResult:
    def test_ok(self):
        r = ToolResult.ok("t", "done")
        assert r.success and r.result == "done" and r.error is None
        assert r.content == "done"

    def test_fail(self):
        r = ToolResult.fail("t", "nope")
        assert not r.success and r.error == "nope" and r.result is None
        assert r.content == "Error: nope"

    def test_exactly_one_of_result_and_error(self):
        with pytest.raises(ValueError):
            ToolResult(tool_name="t", success=True)
        with pytest.raises(ValueError):
            ToolResult(tool_name="t", success=False, result="x", error="y")


# ===========================================================================
# define_tool
# ===========================================================================


class TestDefineTool:
    def test_builds_spec(self):
        @define_tool("double", "Double a number", {"n": {"kind": "number", "required": True}})
        def double(n: float) -> str:
            return str(n * 2)

        assert isinstance(double, ToolSpec)
        assert double.name == "double"
        assert _run(double.invoke({"n": 2})) == "4"

    def test_undeclared_schema_parameter_rejected(self):
        with pytest.raises(ToolDefinitionError, match="does not accept parameter 'b'"):
            @define_tool("t", "d", {"a": {"kind": "string"}, "b": {"kind": "string"}})
            def handler(a: str = "") -> str:
                return a

    def test_undeclared_handler_argument_rejected(self):
        with pytest.raises(ToolDefinitionError, match="'secret' is not declared"):
            @define_tool("t", "d", {})
            def handler(secret: str) -> str:
                return secret

    def test_optional_without_handler_default_rejected(self):
        with pytest.raises(ToolDefinitionError, match="needs a default in the handler"):
            @define_tool("t", "d", {"a": {"kind": "string", "default": "x"}})
            def handler(a: str) -> str:
                return a

    def test_schema_and_handler_defaults_must_agree(self):
        with pytest.raises(ToolDefinitionError, match="default for 'a'"):
            @define_tool("t", "d", {"a": {"kind": "number", "default": 1}})
            def handler(a: float = 2) -> str:
                return str(a)

    def test_absent_optional_uses_handler_default(self):
        @define_tool("t", "d", {"a": {"kind": "string", "default": "x"}})
        def handler(a: str = "x") -> str:
            return a

        assert _run(handler.invoke({})) == "x"
        assert _run(handler.invoke({"a": "y"})) == "y"

    def test_var_kwargs_accepts_anything(self):
        @define_tool("t", "d", {"from": {"kind": "string", "required": True}})
        def handler(**kw: str) -> str:
            return kw["from"]

        assert _run(handler.invoke({"from": "celsius"})) == "celsius"


# ===========================================================================
# ToolRegistry
# ===========================================================================


class TestToolRegistry:
    def test_find_exact_match(self):
        reg = ToolRegistry([_spec("alpha"), _spec("beta")])
        assert reg.find("beta").name == "beta"

    def test_find_is_case_sensitive(self):
        reg = ToolRegistry([_spec("Alpha")])
        assert reg.find("alpha") is None
        assert "Alpha" in reg
        assert "alpha" not in reg

    def test_first_match_wins_and_duplicates_warn(self, caplog):
        first = _spec("dup", handler=lambda: "first")
        second = _spec("dup", handler=lambda: "second")
        with caplog.at_level(logging.WARNING, logger="agentstudio.toolkit.registry"):
            reg = ToolRegistry([first, second])
        assert reg.find("dup") is first
        assert "Duplicate tool names" in caplog.text

    def test_order_and_len(self):
        reg = ToolRegistry([_spec("b"), _spec("a")])
        assert reg.names() == ["b", "a"]
        assert len(reg) == 2
        assert [t.name for t in reg] == ["b", "a"]
        assert isinstance(reg.catalog(), tuple)


# ===========================================================================
# ToolExecutor
# ===========================================================================


class TestToolExecutor:
    def _executor(self, *tools):
        return ToolExecutor(ToolRegistry(tools))

    def test_success(self, echo):
        result = _run(self._executor(echo).execute(ToolCall("echo", {"text": "hi"})))
        assert result == ToolResult.ok("echo", "hi")

    def test_unknown_tool(self, echo):
        result = _run(self._executor(echo).execute(ToolCall("missing", {})))
        assert result == ToolResult.fail("missing", 'Tool "missing" not found')

    def test_validation_failure_skips_handler(self):
        calls = []

        def handler(n):
            calls.append(n)
            return "ran"

        tool = _spec("bounded", handler=handler, n={"kind": "number", "required": True, "max": 5})
        result = _run(self._executor(tool).execute(ToolCall("bounded", {"n": 6})))
        assert result.error == "Parameter n must be <= 5"
        assert calls == []

    def test_handler_exception_becomes_failure(self):
        def handler():
            raise RuntimeError("boom")

        result = _run(self._executor(_spec("bad", handler=handler)).execute(ToolCall("bad")))
        assert result == ToolResult.fail("bad", "boom")

    def test_empty_exception_message_uses_class_name(self):
        def handler():
            raise KeyError()

        result = _run(self._executor(_spec("bad", handler=handler)).execute(ToolCall("bad")))
        assert result.error == "KeyError"

    def test_non_string_result_is_stringified(self):
        tool = _spec("num", handler=lambda: 7)
        assert _run(self._executor(tool).execute(ToolCall("num"))).result == "7"

    def test_handler_called_once(self):
        count = []
        tool = _spec("once", handler=lambda: count.append(1) or "x")
        _run(self._executor(tool).execute(ToolCall("once")))
        assert count == [1]
