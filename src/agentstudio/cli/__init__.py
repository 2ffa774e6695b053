"""agentstudio CLI -- terminal front-end for the demo agent.

This module is NEVER imported from agentstudio/__init__.py.
It is only loaded via the ``agentstudio`` entry point defined in pyproject.toml.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING

try:
    import click
except ImportError:
    raise ImportError(
        "CLI dependencies not installed. Install with: pip install agentstudio[cli]"
    ) from None

from agentstudio.cli.formatting import format_error, get_console

if TYPE_CHECKING:
    from collections.abc import Iterator

    from rich.console import Console

    from agentstudio.engine.executor import AgentExecutor


@click.group()
@click.option(
    "--oracle",
    "provider",
    type=click.Choice(["keyword", "openai"]),
    default=None,
    envvar="AGENTSTUDIO_ORACLE",
    help="Decision oracle to use (default: keyword).",
)
@click.option(
    "--model",
    default=None,
    envvar="AGENTSTUDIO_MODEL",
    help="Model name for the openai oracle.",
)
@click.option("--verbose", "-v", is_flag=True, help="Log engine activity to stderr.")
@click.pass_context
def cli(ctx: click.Context, provider: str | None, model: str | None, verbose: bool) -> None:
    """agentstudio: run a tool-calling agent in the terminal."""
    ctx.ensure_object(dict)
    ctx.obj["provider"] = provider
    ctx.obj["model"] = model
    if verbose:
        from rich.logging import RichHandler

        pkg_logger = logging.getLogger("agentstudio")
        pkg_logger.setLevel(logging.DEBUG)
        if not any(isinstance(h, RichHandler) for h in pkg_logger.handlers):
            handler = RichHandler(console=get_console(), show_path=False)
            handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
            pkg_logger.addHandler(handler)


def _get_executor(ctx: click.Context) -> AgentExecutor:
    """Build an executor for the demo agent with the configured oracle."""
    from agentstudio.engine.executor import AgentExecutor
    from agentstudio.models.config import OracleConfig
    from agentstudio.oracle import build_oracle
    from agentstudio.toolkit.examples import create_example_agent

    config = OracleConfig.from_env(provider=ctx.obj["provider"], model=ctx.obj["model"])
    return AgentExecutor(create_example_agent(), build_oracle(config))


async def _close_oracle(executor: AgentExecutor) -> None:
    """Release oracle resources (HTTP clients) if it holds any."""
    aclose = getattr(executor.oracle, "aclose", None)
    if aclose is not None:
        await aclose()


@contextmanager
def _cli_session(ctx: click.Context) -> Iterator[tuple[AgentExecutor, Console]]:
    """Context manager that builds an executor, yields (executor, console).

    Formats exceptions as CLI errors and exits with status 1.
    """
    console = get_console()
    try:
        yield _get_executor(ctx), console
    except SystemExit:
        raise
    except Exception as e:
        format_error(str(e), console)
        raise SystemExit(1) from None


# Register subcommands after cli group is defined
from agentstudio.cli.commands.ask import ask  # noqa: E402
from agentstudio.cli.commands.chat import chat  # noqa: E402
from agentstudio.cli.commands.tools import tools  # noqa: E402

cli.add_command(ask)
cli.add_command(chat)
cli.add_command(tools)
