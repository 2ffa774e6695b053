"""Agent configuration model."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from agentstudio.toolkit.models import ToolSpec


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Agent:
    """A named goal prompt bound to an ordered set of tools.

    Frozen: edit with :meth:`updated`, which returns a copy. Executors
    built from the old agent keep running against the old configuration.

    Attributes:
        id: Stable identifier.
        name: Display name.
        prompt: Goal / system instruction; becomes the first transcript message.
        tools: Ordered tool specs. Names should be unique; lookups take the
            first match.
        created_at: Creation time (UTC).
        updated_at: Time of the last edit (UTC).
    """

    id: str
    name: str
    prompt: str
    tools: tuple[ToolSpec, ...] = ()
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    def __post_init__(self) -> None:
        if not isinstance(self.tools, tuple):
            object.__setattr__(self, "tools", tuple(self.tools))

    @classmethod
    def create(
        cls,
        name: str,
        prompt: str,
        tools: Iterable[ToolSpec] = (),
        *,
        agent_id: str | None = None,
    ) -> Agent:
        """Build a new agent with a generated id and matching timestamps."""
        now = _utcnow()
        return cls(
            id=agent_id or f"agent-{uuid.uuid4().hex[:12]}",
            name=name,
            prompt=prompt,
            tools=tuple(tools),
            created_at=now,
            updated_at=now,
        )

    def updated(
        self,
        *,
        name: str | None = None,
        prompt: str | None = None,
        tools: Iterable[ToolSpec] | None = None,
    ) -> Agent:
        """Return an edited copy with a fresh ``updated_at``."""
        return replace(
            self,
            name=self.name if name is None else name,
            prompt=self.prompt if prompt is None else prompt,
            tools=self.tools if tools is None else tuple(tools),
            updated_at=_utcnow(),
        )
