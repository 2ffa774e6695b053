"""Agent execution loop.

Provides the AgentExecutor class that runs one conversational turn at a
time: append the user's text, ask the oracle to decide, dispatch at most
one tool call, ask the oracle again to summarize, and return the
transcript.

Domain failures (unknown tool, invalid parameters, a tool raising) are
folded into the transcript as tool messages. Only the single-flight guard
and oracle failures reach the caller as exceptions.
"""

from __future__ import annotations

import enum
import logging
import threading
from typing import TYPE_CHECKING

from agentstudio.exceptions import AlreadyRunningError, OracleContractError
from agentstudio.models.decision import Decision
from agentstudio.models.messages import Message, Role
from agentstudio.toolkit.executor import ToolExecutor
from agentstudio.toolkit.registry import ToolRegistry

if TYPE_CHECKING:
    from agentstudio.models.agent import Agent
    from agentstudio.oracle.protocols import DecisionOracle
    from agentstudio.toolkit.models import ToolResult, ToolSpec

logger = logging.getLogger(__name__)


class ExecutorState(str, enum.Enum):
    """States the executor can be in."""

    IDLE = "idle"
    RUNNING = "running"


class AgentExecutor:
    """Runs turns of a conversation between a user, an oracle and tools.

    The executor owns the transcript: it starts as a single system message
    built from the agent's prompt and only ever grows by appending, until
    :meth:`reset`. At most one :meth:`run` is in flight per executor; a
    concurrent call fails with AlreadyRunningError instead of queueing.

    Messages are appended as each phase completes, so
    :meth:`get_messages` called mid-turn sees a partial turn.

    Usage::

        from agentstudio import AgentExecutor, KeywordOracle, create_example_agent

        executor = AgentExecutor(create_example_agent(), KeywordOracle())
        transcript = await executor.run("what is the currentTime?")
        print(transcript[-1].content)
    """

    def __init__(self, agent: Agent, oracle: DecisionOracle) -> None:
        self._agent = agent
        self._oracle = oracle
        self._registry = ToolRegistry(agent.tools)
        self._tools = ToolExecutor(self._registry)
        self._lock = threading.Lock()
        self._state = ExecutorState.IDLE
        self._messages: list[Message] = []
        self._initialize_messages()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def agent(self) -> Agent:
        return self._agent

    @property
    def oracle(self) -> DecisionOracle:
        return self._oracle

    @property
    def state(self) -> ExecutorState:
        """Return the current executor state."""
        return self._state

    @property
    def is_running(self) -> bool:
        return self._state is ExecutorState.RUNNING

    async def run(self, user_text: str) -> list[Message]:
        """Run one turn and return a copy of the full transcript.

        1. Append the user message
        2. Decide: ask the oracle for a reply or a tool call
        3. On a tool call: dispatch it, append the tool message, then ask
           the oracle again and append its reply (if it has text)
        4. Otherwise append the reply directly

        Args:
            user_text: The user's message, appended verbatim.

        Returns:
            Snapshot of the transcript after the turn.

        Raises:
            AlreadyRunningError: If a turn is already in progress. The
                transcript is left untouched.
            OracleContractError: If the oracle returns a non-Decision.
            Exception: Whatever the oracle raises, after the executor has
                returned to IDLE. Messages appended before the failure stay.
        """
        if not self._lock.acquire(blocking=False):
            raise AlreadyRunningError(self._agent.name)

        self._state = ExecutorState.RUNNING
        try:
            logger.debug("Turn started for agent %s", self._agent.name)
            self._append(Message.user(user_text))

            decision = await self._decide()

            if decision.tool_call is not None:
                result = await self._tools.execute(decision.tool_call)
                self._append(self._tool_message(result, decision.tool_call.parameters))

                summary = await self._decide()
                if summary.tool_call is not None:
                    logger.warning(
                        "Ignoring tool call %r from summarize phase; "
                        "one tool call per turn",
                        summary.tool_call.tool_name,
                    )
                elif summary.text:
                    self._append(Message.assistant(summary.text))
            elif decision.text:
                self._append(Message.assistant(decision.text))

            return list(self._messages)
        finally:
            self._state = ExecutorState.IDLE
            self._lock.release()
            logger.debug("Turn finished for agent %s", self._agent.name)

    def get_messages(self) -> list[Message]:
        """Return a copy of the transcript."""
        return list(self._messages)

    def reset(self) -> None:
        """Clear the transcript back to the agent's system message.

        Raises:
            AlreadyRunningError: If a turn is in progress.
        """
        if not self._lock.acquire(blocking=False):
            raise AlreadyRunningError(self._agent.name)
        try:
            self._initialize_messages()
        finally:
            self._lock.release()

    def get_tools(self) -> tuple[ToolSpec, ...]:
        """Return the agent's tools in order."""
        return self._registry.catalog()

    # ------------------------------------------------------------------
    # Internal methods
    # ------------------------------------------------------------------

    def _initialize_messages(self) -> None:
        self._messages = [Message.system(self._agent.prompt)]

    def _append(self, message: Message) -> None:
        self._messages.append(message)

    async def _decide(self) -> Decision:
        """Ask the oracle about the transcript as it stands now."""
        outcome = await self._oracle.decide(
            self._agent.prompt,
            list(self._messages),
            self._registry.catalog(),
        )
        if not isinstance(outcome, Decision):
            raise OracleContractError(outcome)
        return outcome

    @staticmethod
    def _tool_message(result: ToolResult, arguments: dict) -> Message:
        return Message(
            role=Role.TOOL,
            content=result.content,
            tool_name=result.tool_name,
            tool_result=result.result if result.success else None,
            tool_arguments=dict(arguments),
        )
