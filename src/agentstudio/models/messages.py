"""Transcript message model.

A transcript is an ordered, append-only list of frozen Message records.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Role(str, enum.Enum):
    """Who produced a message."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"
    TOOL = "tool"


@dataclass(frozen=True)
class Message:
    """A single entry in an agent transcript.

    Attributes:
        role: One of system, user, assistant, tool.
        content: Message text. For tool messages this is the tool's output,
            or ``"Error: <reason>"`` when the call failed.
        timestamp: When the message was appended (UTC).
        tool_name: Name of the tool, for tool messages.
        tool_result: Tool output, set only on successful tool messages.
        tool_arguments: Parameters the tool was called with.
    """

    role: Role
    content: str
    timestamp: datetime = field(default_factory=_utcnow)
    tool_name: str | None = None
    tool_result: str | None = None
    tool_arguments: dict[str, Any] | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.role, Role):
            object.__setattr__(self, "role", Role(self.role))

    @classmethod
    def system(cls, content: str) -> Message:
        return cls(role=Role.SYSTEM, content=content)

    @classmethod
    def user(cls, content: str) -> Message:
        return cls(role=Role.USER, content=content)

    @classmethod
    def assistant(cls, content: str) -> Message:
        return cls(role=Role.ASSISTANT, content=content)

    @property
    def is_tool_error(self) -> bool:
        """True for tool messages that record a failed call."""
        return self.role is Role.TOOL and self.tool_result is None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a plain dict (timestamp as ISO 8601)."""
        d: dict[str, Any] = {
            "role": self.role.value,
            "content": self.content,
            "timestamp": self.timestamp.isoformat(),
        }
        if self.tool_name is not None:
            d["tool_name"] = self.tool_name
        if self.tool_result is not None:
            d["tool_result"] = self.tool_result
        if self.tool_arguments is not None:
            d["tool_arguments"] = dict(self.tool_arguments)
        return d
