"""Domain entities for the restaurant concierge."""
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True, frozen=True)
class Document:
    """A short, self-contained fact about the restaurant."""

    id: str
    section: str
    text: str


@dataclass(slots=True, frozen=True)
class IndexedDocument:
    """A document together with the text derived from it at index time."""

    id: str
    section: str
    text: str
    normalized_text: str
    normalized_section: str
    tokens: tuple[str, ...] = ()


@dataclass(slots=True)
class ScoredResult:
    """A document ranked against one query."""

    id: str
    section: str
    text: str
    score: float


@dataclass(slots=True, frozen=True)
class ChatTurn:
    """One earlier message of the conversation as sent by the chat widget."""

    role: str
    text: str

    @property
    def is_user(self) -> bool:
        return self.role == "user"


@dataclass(slots=True)
class ChatReply:
    """Answer returned to the chat widget."""

    reply: str
    sources: list[dict[str, str]] = field(default_factory=list)
    cached: bool = False


__all__ = [
    "Document",
    "IndexedDocument",
    "ScoredResult",
    "ChatTurn",
    "ChatReply",
]
