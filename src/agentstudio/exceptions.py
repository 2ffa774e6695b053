"""Agent Studio exception hierarchy.

All agentstudio-specific exceptions inherit from AgentStudioError.
Tool failures are never raised through the executor -- they are folded
into the transcript as tool messages. Only the errors below escape.
"""


class AgentStudioError(Exception):
    """Base exception for all agentstudio errors."""


class AlreadyRunningError(AgentStudioError):
    """Raised when an executor is asked to run (or reset) mid-turn."""

    def __init__(self, agent_name: str) -> None:
        self.agent_name = agent_name
        super().__init__(f"Agent '{agent_name}' is already running")


class ParameterDefinitionError(AgentStudioError):
    """Raised when a parameter spec is internally inconsistent.

    Named ParameterDefinitionError (not ValidationError) to avoid
    collision with pydantic.ValidationError.
    """


class ToolDefinitionError(AgentStudioError):
    """Raised when a tool handler does not match its declared parameters."""

    def __init__(self, tool_name: str, reason: str) -> None:
        self.tool_name = tool_name
        self.reason = reason
        super().__init__(f"Invalid tool '{tool_name}': {reason}")


class OracleContractError(AgentStudioError):
    """Raised when an oracle returns something other than a Decision."""

    def __init__(self, outcome: object) -> None:
        self.outcome = outcome
        super().__init__(
            f"Oracle returned {type(outcome).__name__}, expected Decision"
        )
