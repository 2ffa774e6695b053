"""Rich formatting helpers for the agentstudio CLI.

Provides functions that format SDK data structures for terminal display.
Rich auto-detects TTY and degrades gracefully when piped (no ANSI codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from agentstudio.models.messages import Role
from agentstudio.models.parameters import NumberParam

if TYPE_CHECKING:
    from agentstudio.models.messages import Message
    from agentstudio.models.parameters import ParameterSchema
    from agentstudio.toolkit.models import ToolSpec

_ROLE_STYLES: dict[Role, str] = {
    Role.SYSTEM: "dim",
    Role.USER: "bold cyan",
    Role.ASSISTANT: "bold green",
    Role.TOOL: "yellow",
}


def get_console() -> Console:
    """Create a Rich Console that auto-detects TTY for graceful pipe degradation."""
    return Console(stderr=False)


def describe_parameters(schema: ParameterSchema) -> str:
    """One-line summary like ``a: number* [0..10], flag: boolean = false``."""
    if not schema:
        return "-"
    parts = []
    for name, spec in schema.items():
        part = f"{name}: {spec.kind}"
        if spec.required:
            part += "*"
        if isinstance(spec, NumberParam) and (spec.min is not None or spec.max is not None):
            low = "" if spec.min is None else spec.min
            high = "" if spec.max is None else spec.max
            part += f" [{low}..{high}]"
        if spec.default is not None:
            default = str(spec.default).lower() if isinstance(spec.default, bool) else spec.default
            part += f" = {default}"
        parts.append(part)
    return ", ".join(parts)


def format_tools(tools: Iterable[ToolSpec], console: Console) -> None:
    """Display the tool catalog as a table."""
    tools = list(tools)
    if not tools:
        console.print("[dim]No tools.[/dim]")
        return

    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("Tool", style="cyan")
    table.add_column("Description")
    table.add_column("Parameters", style="dim")

    for tool in tools:
        table.add_row(
            escape(tool.name),
            escape(tool.description),
            escape(describe_parameters(tool.parameters)),
        )

    console.print(table)


def format_message(message: Message, console: Console) -> None:
    """Display one transcript message with a role label."""
    style = _ROLE_STYLES[message.role]
    label = message.role.value
    if message.role is Role.TOOL and message.tool_name:
        label = f"tool:{message.tool_name}"
        if message.is_tool_error:
            style = "bold red"
    console.print(f"[{style}]{escape(label)}>[/{style}] {escape(message.content)}")


def format_transcript(messages: Iterable[Message], console: Console) -> None:
    """Display a sequence of transcript messages."""
    for message in messages:
        format_message(message, console)


def format_error(message: str, console: Console) -> None:
    """Display an error message."""
    console.print(f"[bold red]Error:[/bold red] {escape(message)}")
