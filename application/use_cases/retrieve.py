"""Use case that ranks knowledge base documents for a chat question."""
from __future__ import annotations

import logging

from application.services.lexical_index import LexicalIndex
from application.services.scoring import ScoringWeights, prepare_query, score_document
from application.services.text_normalizer import normalize, tokenize
from domain.entities import ScoredResult
from domain.interfaces import QueryExpander

logger = logging.getLogger(__name__)

# Sections worth showing when the question carries no usable keywords.
FALLBACK_SECTIONS = ("Hours", "Location", "Reservations", "Meeting Halls", "Menu")

DEFAULT_WEIGHTS = ScoringWeights()


def retrieve(
    query_text: str,
    *,
    index: LexicalIndex,
    expander: QueryExpander,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
    top_k: int = 6,
) -> list[ScoredResult]:
    """Return at most ``top_k`` documents ordered by descending relevance."""

    if top_k <= 0:
        return []

    tokens = tokenize(query_text)
    if not tokens:
        return fallback_results(index, top_k=top_k, score=weights.fallback_score)

    query = prepare_query(tokens, expander.expand(tokens), normalize(query_text))
    logger.debug(
        "Scoring %d raw / %d expanded terms against %d documents",
        len(query.raw_terms),
        len(query.expanded_terms),
        len(index),
    )

    scored: list[ScoredResult] = []
    for doc in index.documents:
        score = score_document(doc, query, index, weights)
        if score == 0:
            continue
        scored.append(ScoredResult(id=doc.id, section=doc.section, text=doc.text, score=score))

    # Stable sort: ties keep corpus order.
    scored.sort(key=lambda result: result.score, reverse=True)
    return scored[:top_k]


def fallback_results(index: LexicalIndex, *, top_k: int, score: float) -> list[ScoredResult]:
    """Default documents for questions without keywords, in corpus order."""
    return [
        ScoredResult(id=doc.id, section=doc.section, text=doc.text, score=score)
        for doc in index.documents
        if doc.section in FALLBACK_SECTIONS
    ][:top_k]


__all__ = ["FALLBACK_SECTIONS", "retrieve", "fallback_results"]
