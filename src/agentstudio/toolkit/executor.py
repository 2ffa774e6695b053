"""ToolExecutor: dispatches one tool call to a registered tool.

Provides a single ``execute()`` coroutine that looks up the tool by name,
validates the parameters, invokes the handler and returns a structured
``ToolResult``. Nothing is raised for domain failures; a missing tool, bad
parameters and handler exceptions all come back as failed results.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from agentstudio.toolkit.models import ToolResult
from agentstudio.toolkit.validation import validate_parameters

if TYPE_CHECKING:
    from agentstudio.models.decision import ToolCall
    from agentstudio.toolkit.registry import ToolRegistry

logger = logging.getLogger(__name__)


class ToolExecutor:
    """Validates and dispatches tool calls against a registry.

    Usage::

        executor = ToolExecutor(registry)
        result = await executor.execute(ToolCall("echo", {"text": "hi"}))
        if result.success:
            print(result.result)
        else:
            print(result.error)
    """

    def __init__(self, registry: ToolRegistry) -> None:
        self._registry = registry

    @property
    def registry(self) -> ToolRegistry:
        return self._registry

    async def execute(self, call: ToolCall) -> ToolResult:
        """Execute a tool call.

        Args:
            call: Tool name and parameter bag from the oracle.

        Returns:
            ToolResult with success/failure status and result/error.
        """
        tool = self._registry.find(call.tool_name)
        if tool is None:
            logger.info("Tool %r not found", call.tool_name)
            return ToolResult.fail(call.tool_name, f'Tool "{call.tool_name}" not found')

        validation = validate_parameters(tool.parameters, call.parameters)
        if not validation.passed:
            logger.info("Rejected call to %s: %s", tool.name, validation.error)
            return ToolResult.fail(call.tool_name, validation.error or "invalid parameters")

        try:
            output = await tool.invoke(call.parameters)
        except Exception as exc:
            logger.debug("Tool %s failed: %s", tool.name, exc, exc_info=True)
            return ToolResult.fail(call.tool_name, str(exc) or type(exc).__name__)

        logger.debug("Tool %s succeeded", tool.name)
        return ToolResult.ok(call.tool_name, output)
