"""Lexical relevance scoring of indexed documents against a query."""
from __future__ import annotations

import re
from dataclasses import dataclass

from application.services.lexical_index import LexicalIndex
from domain.entities import IndexedDocument


@dataclass(slots=True, frozen=True)
class IntentBoost:
    """Flat bonus for sections that answer an intent the question signals.

    A boost fires when any trigger occurs in the space-joined query keywords
    and any section fragment occurs in the document's normalized section.
    Both checks are substring checks, so "open" also fires on "opening".
    """

    triggers: tuple[str, ...]
    sections: tuple[str, ...]
    bonus: float

    def applies(self, joined_terms: str, normalized_section: str) -> bool:
        return any(t in joined_terms for t in self.triggers) and any(s in normalized_section for s in self.sections)


_BOOKING_TRIGGERS = ("meeting", "hall", "reserve", "book", "reservation")

RESTAURANT_INTENT_BOOSTS: tuple[IntentBoost, ...] = (
    IntentBoost(_BOOKING_TRIGGERS, ("meeting",), 2.5),
    IntentBoost(_BOOKING_TRIGGERS, ("reserv",), 1.5),
    IntentBoost(("menu", "dish", "food", "signature"), ("menu",), 2.5),
    IntentBoost(("hour", "open", "close", "time"), ("hours",), 2.5),
    IntentBoost(
        ("phone", "email", "call", "number", "contact", "facebook", "instagram", "tiktok", "website"),
        ("contact",),
        3.0,
    ),
    IntentBoost(("where", "address", "map", "direction", "located", "near"), ("location", "map"), 2.5),
    IntentBoost(("capacity", "guests", "people", "size", "seats"), ("meeting",), 2.5),
)


@dataclass(slots=True, frozen=True)
class ScoringWeights:
    """Tunable constants of the scoring formula."""

    direct_term: float = 1.0
    synonym_term: float = 0.6
    section_direct: float = 4.0
    section_synonym: float = 2.0
    bigram: float = 5.0
    exact_phrase: float = 8.0
    exact_phrase_min_chars: int = 4
    fallback_score: float = 0.1
    # Count only whole-word occurrences instead of raw substrings ("meet" no longer hits "meeting").
    whole_word: bool = False
    # Off by default; pass RESTAURANT_INTENT_BOOSTS to favor the sections a question is about.
    intent_boosts: tuple[IntentBoost, ...] = ()


@dataclass(slots=True, frozen=True)
class PreparedQuery:
    raw_terms: frozenset[str]
    expanded_terms: tuple[str, ...]
    bigrams: tuple[str, ...]
    phrase: str
    joined_terms: str = ""


def prepare_query(tokens: list[str], expanded: set[str], phrase: str) -> PreparedQuery:
    bigrams = tuple(f"{first} {second}" for first, second in zip(tokens, tokens[1:]))
    # Sorted so that floating point sums do not depend on set iteration order.
    return PreparedQuery(
        raw_terms=frozenset(tokens),
        expanded_terms=tuple(sorted(expanded | set(tokens))),
        bigrams=bigrams,
        phrase=phrase,
        joined_terms=" ".join(tokens),
    )


def score_document(
    doc: IndexedDocument,
    query: PreparedQuery,
    index: LexicalIndex,
    weights: ScoringWeights,
) -> float:
    score = 0.0
    for term in query.expanded_terms:
        direct = term in query.raw_terms
        matches = _count(doc.normalized_text, term, weights.whole_word)
        if matches:
            score += matches * index.idf(term) * (weights.direct_term if direct else weights.synonym_term)
        if term in doc.normalized_section:
            score += weights.section_direct if direct else weights.section_synonym

    for bigram in query.bigrams:
        if bigram in doc.normalized_text:
            score += weights.bigram

    if len(query.phrase) >= weights.exact_phrase_min_chars and query.phrase in doc.normalized_text:
        score += weights.exact_phrase

    for boost in weights.intent_boosts:
        if boost.applies(query.joined_terms, doc.normalized_section):
            score += boost.bonus

    return score


def _count(text: str, term: str, whole_word: bool) -> int:
    if whole_word:
        return len(re.findall(rf"\b{re.escape(term)}\b", text))
    return text.count(term)


__all__ = [
    "IntentBoost",
    "RESTAURANT_INTENT_BOOSTS",
    "ScoringWeights",
    "PreparedQuery",
    "prepare_query",
    "score_document",
]
