"""agentstudio: a small engine for tool-calling agent conversations.

An agent is a goal prompt plus a set of schema-described tools. The
AgentExecutor drives one turn at a time: it asks a decision oracle what to
do, validates and runs at most one tool call, and asks the oracle again for
the final reply.
"""

__version__ = "0.1.0"

# Core entry point
from agentstudio.engine import AgentExecutor, ExecutorState

# Data models
from agentstudio.models import (
    Agent,
    BooleanParam,
    Decision,
    Message,
    NumberParam,
    OracleConfig,
    ParameterSpec,
    Role,
    StringParam,
    ToolCall,
    parse_parameters,
)

# Tools
from agentstudio.toolkit import (
    ToolExecutor,
    ToolRegistry,
    ToolResult,
    ToolSpec,
    ValidationResult,
    define_tool,
    validate_parameters,
)
from agentstudio.toolkit.examples import create_custom_tool, create_example_agent

# Oracles
from agentstudio.oracle import DecisionOracle, KeywordOracle, OpenAIOracle, build_oracle

# Exceptions
from agentstudio.exceptions import (
    AgentStudioError,
    AlreadyRunningError,
    OracleContractError,
    ParameterDefinitionError,
    ToolDefinitionError,
)
from agentstudio.oracle.errors import OracleError

__all__ = [
    "__version__",
    "AgentExecutor",
    "ExecutorState",
    "Agent",
    "Message",
    "Role",
    "Decision",
    "ToolCall",
    "StringParam",
    "NumberParam",
    "BooleanParam",
    "ParameterSpec",
    "parse_parameters",
    "OracleConfig",
    "ToolSpec",
    "ToolResult",
    "ToolRegistry",
    "ToolExecutor",
    "ValidationResult",
    "validate_parameters",
    "define_tool",
    "create_custom_tool",
    "create_example_agent",
    "DecisionOracle",
    "KeywordOracle",
    "OpenAIOracle",
    "build_oracle",
    "AgentStudioError",
    "AlreadyRunningError",
    "OracleContractError",
    "ParameterDefinitionError",
    "ToolDefinitionError",
    "OracleError",
]
