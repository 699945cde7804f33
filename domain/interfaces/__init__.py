"""Abstract interfaces for the restaurant concierge."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable


class GenerationUnavailable(RuntimeError):
    """Raised when the text generation service cannot produce an answer."""


class QueryExpander(ABC):
    """Widens a tokenized query with interchangeable domain terms."""

    @abstractmethod
    def expand(self, tokens: Iterable[str]) -> set[str]:
        """Return the original tokens plus every known synonym."""


class TextGenerator(ABC):
    """Black-box text completion service."""

    @abstractmethod
    def generate(
        self,
        prompt: str,
        *,
        temperature: float | None = None,
        max_output_tokens: int | None = None,
    ) -> str:
        """Return generated text for the prompt or raise ``GenerationUnavailable``."""


class ResponseCache(ABC):
    """Best-effort memo of generated replies keyed by the user message."""

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the cached reply, or ``None`` when absent or expired."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store a reply, replacing any previous value for the key."""


__all__ = [
    "GenerationUnavailable",
    "QueryExpander",
    "TextGenerator",
    "ResponseCache",
]
