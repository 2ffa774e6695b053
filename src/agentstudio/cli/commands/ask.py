"""agentstudio ask -- run a single turn."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

import click

from agentstudio.cli.formatting import format_transcript

if TYPE_CHECKING:
    from agentstudio.engine.executor import AgentExecutor
    from agentstudio.models.messages import Message


async def _run_once(executor: AgentExecutor, text: str) -> list[Message]:
    from agentstudio.cli import _close_oracle

    try:
        return await executor.run(text)
    finally:
        await _close_oracle(executor)


@click.command()
@click.argument("text")
@click.pass_context
def ask(ctx: click.Context, text: str) -> None:
    """Send TEXT to the agent and print the turn's messages."""
    from agentstudio.cli import _cli_session

    with _cli_session(ctx) as (executor, console):
        messages = asyncio.run(_run_once(executor, text))
        # Skip the system prompt; show only this turn.
        format_transcript(messages[1:], console)
