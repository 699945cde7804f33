"""Text normalization and tokenization shared by indexing and querying."""
from __future__ import annotations

import re

# Anything that is not a letter or a digit. ``\W`` keeps the underscore, so it is added explicitly.
_NON_ALNUM = re.compile(r"[\W_]+")

STOP_WORDS = frozenset(
    {
        "a",
        "an",
        "the",
        "and",
        "or",
        "but",
        "of",
        "to",
        "for",
        "in",
        "on",
        "at",
        "with",
        "by",
        "from",
        "about",
        "do",
        "does",
        "did",
        "is",
        "are",
        "was",
        "be",
        "have",
        "has",
        "can",
        "could",
        "would",
        "will",
        "it",
        "this",
        "that",
        "what",
        "how",
        "i",
        "me",
        "my",
        "we",
        "us",
        "you",
        "your",
        "they",
        "our",
        "any",
        "there",
        "please",
        "tell",
        "know",
    }
)


def normalize(text: str) -> str:
    """Lowercase, replace punctuation with spaces and collapse whitespace."""
    return " ".join(_NON_ALNUM.sub(" ", text.lower()).split())


def tokenize(text: str) -> list[str]:
    """Return normalized tokens without stop-words or single characters.

    Repeated tokens are kept in order because term frequency depends on them.
    """
    return [token for token in normalize(text).split(" ") if len(token) > 1 and token not in STOP_WORDS]


__all__ = ["STOP_WORDS", "normalize", "tokenize"]
