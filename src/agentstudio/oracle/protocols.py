"""Decision oracle protocol.

Defines the pluggable interface the execution loop uses to decide what to
do next. Any object with a matching ``decide`` coroutine works.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence, runtime_checkable

if TYPE_CHECKING:
    from agentstudio.models.decision import Decision
    from agentstudio.models.messages import Message
    from agentstudio.toolkit.models import ToolSpec


@runtime_checkable
class DecisionOracle(Protocol):
    """Protocol for pluggable decision oracles.

    ``decide`` receives the agent's goal prompt, the transcript so far
    (a snapshot the oracle may keep) and the tool catalog, and returns a
    Decision holding either reply text or one tool call. It may suspend for
    as long as it needs; the executor awaits it in sequence. Exceptions it
    raises propagate to the caller of ``run``.
    """

    async def decide(
        self,
        prompt: str,
        transcript: Sequence[Message],
        tools: Sequence[ToolSpec],
    ) -> Decision:
        """Return the next decision for this conversation."""
        ...
