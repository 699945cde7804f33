"""Render ranked documents as a compact context block for the prompt."""
from __future__ import annotations

from typing import Iterable

from domain.entities import ScoredResult

DEFAULT_CHAR_LIMIT = 1200


def format_context(results: Iterable[ScoredResult], char_limit: int = DEFAULT_CHAR_LIMIT) -> str:
    """Join ``• [section] text`` bullets while they fit into ``char_limit``.

    Stops at the first bullet that would overflow, so a lower ranked document
    never replaces a higher ranked one. An empty string means no context.
    """

    lines: list[str] = []
    used = 0
    for result in results:
        line = f"• [{result.section}] {result.text}"
        projected = used + len(line) + (1 if lines else 0)
        if projected > char_limit:
            break
        lines.append(line)
        used = projected
    return "\n".join(lines)


__all__ = ["DEFAULT_CHAR_LIMIT", "format_context"]
