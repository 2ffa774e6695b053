"""Offline placeholder oracle.

Picks a tool when the latest user message mentions its name, otherwise
introduces the agent. It never supplies tool parameters, so tools with
required parameters come back as validation errors in the transcript.
Stands in for a real model in demos and tests.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Sequence

from agentstudio.models.decision import Decision
from agentstudio.models.messages import Role

if TYPE_CHECKING:
    from agentstudio.models.messages import Message
    from agentstudio.toolkit.models import ToolSpec


class KeywordOracle:
    """Substring match of tool names against the last user message.

    Args:
        delay: Seconds to sleep before answering, to mimic remote latency.
    """

    def __init__(self, delay: float = 0.0) -> None:
        self._delay = delay

    async def decide(
        self,
        prompt: str,
        transcript: Sequence[Message],
        tools: Sequence[ToolSpec],
    ) -> Decision:
        if self._delay > 0:
            await asyncio.sleep(self._delay)

        if tools and transcript and transcript[-1].role is Role.USER:
            content = transcript[-1].content.lower()
            for tool in tools:
                if tool.name.lower() in content:
                    return Decision.call(tool.name)

        return Decision.reply(
            f'I\'m an AI agent with the following goal: "{prompt}". '
            f"I have access to {len(tools)} tools. How can I help you?"
        )
