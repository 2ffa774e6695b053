"""Read-only, ordered tool lookup for one agent."""

from __future__ import annotations

import logging
from collections import Counter
from typing import TYPE_CHECKING, Iterable, Iterator

if TYPE_CHECKING:
    from agentstudio.toolkit.models import ToolSpec

logger = logging.getLogger(__name__)


class ToolRegistry:
    """The ordered set of tools bound to one agent.

    Lookup is an exact, case-sensitive name match and the first match wins.
    Duplicate names are allowed but logged, since later duplicates can
    never be reached.

    Usage::

        registry = ToolRegistry(agent.tools)
        tool = registry.find("calculator")
        if tool is None:
            ...
    """

    def __init__(self, tools: Iterable[ToolSpec] = ()) -> None:
        self._tools: tuple[ToolSpec, ...] = tuple(tools)
        dupes = [n for n, c in Counter(t.name for t in self._tools).items() if c > 1]
        if dupes:
            logger.warning(
                "Duplicate tool names %s; only the first of each is reachable",
                sorted(dupes),
            )

    def find(self, name: str) -> ToolSpec | None:
        """Return the first tool named ``name``, or None."""
        for tool in self._tools:
            if tool.name == name:
                return tool
        return None

    def names(self) -> list[str]:
        """Return tool names in registration order."""
        return [t.name for t in self._tools]

    def catalog(self) -> tuple[ToolSpec, ...]:
        """Return the tools as handed to the oracle."""
        return self._tools

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.find(name) is not None

    def __iter__(self) -> Iterator[ToolSpec]:
        return iter(self._tools)

    def __len__(self) -> int:
        return len(self._tools)

    def __repr__(self) -> str:
        return f"ToolRegistry({self.names()!r})"
