"""Agent Toolkit: tool specs, validation, lookup and dispatch.

Provides the tool data models, the parameter validator, the per-agent
registry, the dispatcher used by the execution loop, and a set of example
tools.
"""

from agentstudio.toolkit.builder import check_signature, define_tool
from agentstudio.toolkit.executor import ToolExecutor
from agentstudio.toolkit.models import ToolResult, ToolSpec
from agentstudio.toolkit.registry import ToolRegistry
from agentstudio.toolkit.validation import ValidationResult, validate_parameters

__all__ = [
    "ToolSpec",
    "ToolResult",
    "ToolRegistry",
    "ToolExecutor",
    "ValidationResult",
    "validate_parameters",
    "define_tool",
    "check_signature",
]
