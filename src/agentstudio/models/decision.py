"""Oracle decision artifacts.

A Decision is what an oracle hands back for one phase of a turn:
either a free-form reply or a request to call exactly one tool.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from agentstudio.models.parameters import ParameterValue


@dataclass(frozen=True)
class ToolCall:
    """A request to invoke one named tool with a parameter bag."""

    tool_name: str
    parameters: dict[str, ParameterValue] = field(default_factory=dict)


@dataclass(frozen=True)
class Decision:
    """Outcome of one oracle call.

    Exactly one of ``text`` and ``tool_call`` is set. An empty string is
    a valid (silent) reply.
    """

    text: str | None = None
    tool_call: ToolCall | None = None

    def __post_init__(self) -> None:
        if (self.text is None) == (self.tool_call is None):
            raise ValueError("Decision needs exactly one of text or tool_call")

    @classmethod
    def reply(cls, text: str) -> Decision:
        return cls(text=text)

    @classmethod
    def call(cls, tool_name: str, **parameters: ParameterValue) -> Decision:
        return cls(tool_call=ToolCall(tool_name=tool_name, parameters=parameters))

    @property
    def is_tool_call(self) -> bool:
        return self.tool_call is not None
