"""agentstudio chat -- interactive conversation loop."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

import click
from rich.markup import escape

from agentstudio.cli.formatting import format_tools, format_transcript

if TYPE_CHECKING:
    from rich.console import Console

    from agentstudio.engine.executor import AgentExecutor

_HELP = "Commands: /tools lists tools, /reset clears the conversation, /quit exits."


async def _chat_loop(executor: AgentExecutor, console: Console) -> None:
    from agentstudio.cli import _close_oracle

    try:
        while True:
            try:
                line = console.input("[bold cyan]you>[/bold cyan] ").strip()
            except (EOFError, KeyboardInterrupt):
                console.print()
                return

            if not line:
                continue
            if line in ("/quit", "/exit"):
                return
            if line == "/reset":
                executor.reset()
                console.print("[dim]Conversation reset.[/dim]")
                continue
            if line == "/tools":
                format_tools(executor.get_tools(), console)
                continue
            if line == "/help":
                console.print(f"[dim]{_HELP}[/dim]")
                continue

            before = len(executor.get_messages())
            messages = await executor.run(line)
            # The user's own line is already on screen.
            format_transcript(messages[before + 1:], console)
    finally:
        await _close_oracle(executor)


@click.command()
@click.pass_context
def chat(ctx: click.Context) -> None:
    """Talk to the agent until /quit or end of input."""
    from agentstudio.cli import _cli_session

    with _cli_session(ctx) as (executor, console):
        console.print(f"[bold]{escape(executor.agent.name)}[/bold] ready. {_HELP}")
        asyncio.run(_chat_loop(executor, console))
