"""Execution engine: the agent turn loop."""

from agentstudio.engine.executor import AgentExecutor, ExecutorState

__all__ = ["AgentExecutor", "ExecutorState"]
