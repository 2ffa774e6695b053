"""Toolkit data models.

Frozen dataclasses for tool specs and tool results.
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Mapping

from agentstudio.models.parameters import parse_parameters, schema_to_json

if TYPE_CHECKING:
    from collections.abc import Callable

    from agentstudio.models.parameters import ParameterSchema


def _accepts_var_keyword(handler: Callable[..., Any]) -> bool:
    """True if ``handler`` declares ``**kwargs``."""
    try:
        params = inspect.signature(handler).parameters.values()
    except (TypeError, ValueError):
        return False
    return any(p.kind is inspect.Parameter.VAR_KEYWORD for p in params)


@dataclass(frozen=True)
class ToolSpec:
    """A named, schema-described capability an agent can call.

    Attributes:
        name: Tool name, unique within an agent (e.g. "calculator").
        description: When/why to use this tool, shown to the oracle.
        parameters: Parameter name -> spec. Plain dicts are parsed into
            specs at construction.
        handler: Callable invoked with keyword arguments; may be sync or
            async and returns the result text (or raises).
    """

    name: str
    description: str
    parameters: ParameterSchema = field(default_factory=dict)
    handler: Callable[..., Any] = field(default=None, repr=False)  # type: ignore[assignment]
    _takes_any: bool = field(init=False, default=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.handler is None or not callable(self.handler):
            raise TypeError(f"Tool '{self.name}' needs a callable handler")
        object.__setattr__(self, "parameters", parse_parameters(self.parameters))
        object.__setattr__(self, "_takes_any", _accepts_var_keyword(self.handler))

    def bind_arguments(self, supplied: Mapping[str, object]) -> dict[str, object]:
        """Build handler kwargs from a validated parameter bag.

        Supplied values pass through unchanged. Keys the schema does not
        declare are dropped unless the handler takes ``**kwargs``. Absent
        parameters are left to the handler's own defaults.
        """
        if self._takes_any:
            return dict(supplied)
        return {name: value for name, value in supplied.items() if name in self.parameters}

    async def invoke(self, supplied: Mapping[str, object]) -> str:
        """Call the handler once and return its result as text.

        Exceptions raised by the handler propagate to the caller.
        """
        result = self.handler(**self.bind_arguments(supplied))
        if inspect.isawaitable(result):
            result = await result
        return result if isinstance(result, str) else str(result)

    def json_schema(self) -> dict[str, Any]:
        """Return the parameters as a JSON Schema object."""
        return schema_to_json(self.parameters)

    def to_openai(self) -> dict:
        """Convert to OpenAI function-calling format.

        Returns:
            Dict with "type": "function" and nested "function" object.
        """
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": self.json_schema(),
            },
        }


@dataclass(frozen=True)
class ToolResult:
    """Structured result from dispatching one tool call.

    Exactly one of ``result`` (on success) and ``error`` (on failure) is set.

    Attributes:
        tool_name: Name of the tool that was requested.
        success: Whether execution succeeded.
        result: Output text on success.
        error: Failure reason on failure.
    """

    tool_name: str
    success: bool
    result: str | None = None
    error: str | None = None

    def __post_init__(self) -> None:
        if self.success and (self.result is None or self.error is not None):
            raise ValueError("Successful ToolResult needs result and no error")
        if not self.success and (self.error is None or self.result is not None):
            raise ValueError("Failed ToolResult needs error and no result")

    @classmethod
    def ok(cls, tool_name: str, result: str) -> ToolResult:
        return cls(tool_name=tool_name, success=True, result=result)

    @classmethod
    def fail(cls, tool_name: str, error: str) -> ToolResult:
        return cls(tool_name=tool_name, success=False, error=error)

    @property
    def content(self) -> str:
        """Transcript text for this result."""
        if self.success:
            return self.result  # type: ignore[return-value]
        return f"Error: {self.error}"
