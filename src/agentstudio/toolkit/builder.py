"""Pair a parameter schema with a handler at definition time.

``define_tool`` checks the handler's signature against its schema once,
when the tool is built, so a mismatch fails loudly at import rather than
as a TypeError on the first call.
"""

from __future__ import annotations

import inspect
from typing import TYPE_CHECKING, Any, Mapping

from agentstudio.exceptions import ToolDefinitionError
from agentstudio.models.parameters import parse_parameters
from agentstudio.toolkit.models import ToolSpec

if TYPE_CHECKING:
    from collections.abc import Callable

    from pydantic import BaseModel


def check_signature(name: str, parameters: Mapping[str, Any], handler: Callable[..., Any]) -> None:
    """Verify that ``handler`` accepts exactly what ``parameters`` declares.

    Every declared parameter must be accepted by keyword (or swallowed by
    ``**kwargs``), and every handler parameter without a Python default
    must be declared and required. Absent optional parameters fall back to
    the handler's default, so a schema default must equal it.

    Raises:
        ToolDefinitionError: On the first mismatch found.
    """
    try:
        sig = inspect.signature(handler)
    except (TypeError, ValueError) as e:
        raise ToolDefinitionError(name, f"cannot inspect handler: {e}") from e

    params = sig.parameters
    var_kw = any(p.kind is inspect.Parameter.VAR_KEYWORD for p in params.values())
    keywordable = {
        pname
        for pname, p in params.items()
        if p.kind in (inspect.Parameter.POSITIONAL_OR_KEYWORD, inspect.Parameter.KEYWORD_ONLY)
    }

    for pname in parameters:
        if pname not in keywordable and not var_kw:
            raise ToolDefinitionError(name, f"handler does not accept parameter '{pname}'")

    for pname in keywordable:
        p = params[pname]
        spec = parameters.get(pname)
        if p.default is inspect.Parameter.empty:
            if spec is None:
                raise ToolDefinitionError(name, f"handler argument '{pname}' is not declared")
            if not spec.required:
                raise ToolDefinitionError(
                    name, f"optional parameter '{pname}' needs a default in the handler"
                )
        elif spec is not None and spec.default is not None and spec.default != p.default:
            raise ToolDefinitionError(
                name,
                f"default for '{pname}' is {spec.default!r} in the schema "
                f"but {p.default!r} in the handler",
            )


def define_tool(
    name: str,
    description: str,
    parameters: Mapping[str, Mapping[str, Any] | BaseModel] | None = None,
) -> Callable[[Callable[..., Any]], ToolSpec]:
    """Decorator that turns a function into a ToolSpec.

    Usage::

        @define_tool(
            "echo",
            "Return the text unchanged",
            {"text": {"kind": "string", "required": True}},
        )
        async def echo(text: str) -> str:
            return text
    """
    schema = parse_parameters(parameters or {})

    def decorator(handler: Callable[..., Any]) -> ToolSpec:
        check_signature(name, schema, handler)
        return ToolSpec(
            name=name,
            description=description,
            parameters=schema,
            handler=handler,
        )

    return decorator
