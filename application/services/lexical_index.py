"""Immutable lexical index over the concierge corpus."""
from __future__ import annotations

import logging
import math
from types import MappingProxyType
from typing import Iterable, Mapping, Sequence

from application.services.text_normalizer import normalize, tokenize
from domain.entities import Document, IndexedDocument

logger = logging.getLogger(__name__)


class LexicalIndex:
    """Normalized documents plus an inverse document frequency table.

    Built once at startup and only read afterwards, so it can be shared by
    concurrent requests without locking.
    """

    __slots__ = ("_documents", "_idf")

    def __init__(self, documents: Sequence[IndexedDocument], idf: Mapping[str, float]) -> None:
        self._documents = tuple(documents)
        self._idf = MappingProxyType(dict(idf))

    @classmethod
    def build(cls, documents: Iterable[Document]) -> LexicalIndex:
        indexed: list[IndexedDocument] = []
        seen: set[str] = set()
        for doc in documents:
            if doc.id in seen:
                raise ValueError(f"Duplicate document id '{doc.id}'")
            seen.add(doc.id)
            indexed.append(
                IndexedDocument(
                    id=doc.id,
                    section=doc.section,
                    text=doc.text,
                    normalized_text=normalize(doc.text),
                    normalized_section=normalize(doc.section),
                    tokens=tuple(tokenize(doc.text)),
                )
            )

        vocabulary = sorted({token for doc in indexed for token in doc.tokens})
        idf = {token: _idf_weight(token, indexed) for token in vocabulary}
        logger.info("Indexed %d documents with %d distinct tokens", len(indexed), len(idf))
        return cls(indexed, idf)

    @property
    def documents(self) -> tuple[IndexedDocument, ...]:
        return self._documents

    @property
    def idf_table(self) -> Mapping[str, float]:
        return self._idf

    def idf(self, term: str) -> float:
        """Return the weight of ``term``, computing it for terms outside the vocabulary."""
        weight = self._idf.get(term)
        if weight is None:
            weight = _idf_weight(term, self._documents)
        return weight

    def __len__(self) -> int:
        return len(self._documents)


def _idf_weight(term: str, documents: Sequence[IndexedDocument]) -> float:
    # Document frequency uses substring containment, the same test the scorer applies.
    doc_freq = sum(1 for doc in documents if term in doc.normalized_text)
    return math.log((len(documents) + 1) / (doc_freq + 1)) + 1


__all__ = ["LexicalIndex"]
