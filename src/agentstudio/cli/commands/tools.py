"""agentstudio tools -- list the demo agent's tools."""

from __future__ import annotations

import click
from rich.markup import escape

from agentstudio.cli.formatting import format_tools


@click.command()
@click.pass_context
def tools(ctx: click.Context) -> None:
    """Show every tool the agent can call, with its parameters."""
    from agentstudio.cli import _cli_session

    with _cli_session(ctx) as (executor, console):
        catalog = executor.get_tools()
        console.print(f"[bold]{escape(executor.agent.name)}[/bold] ({len(catalog)} tools)")
        format_tools(catalog, console)
