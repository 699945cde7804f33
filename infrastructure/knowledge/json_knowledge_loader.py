"""Load and validate the restaurant knowledge record from JSON."""
from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from domain.knowledge import KnowledgeRecord

logger = logging.getLogger(__name__)

DEFAULT_KNOWLEDGE_PATH = Path(__file__).resolve().parents[2] / "data" / "restaurant_data.json"


class KnowledgeLoadError(ValueError):
    """The knowledge file is missing or does not match the schema."""


def load_knowledge_record(path: str | Path = DEFAULT_KNOWLEDGE_PATH) -> KnowledgeRecord:
    path = Path(path).expanduser()
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise KnowledgeLoadError(f"Cannot read knowledge file {path}: {exc}") from exc
    try:
        record = KnowledgeRecord.model_validate_json(raw)
    except ValidationError as exc:
        raise KnowledgeLoadError(f"Invalid knowledge file {path}: {exc}") from exc
    logger.info("Loaded knowledge record for %s from %s", record.brand.name, path)
    return record


__all__ = ["DEFAULT_KNOWLEDGE_PATH", "KnowledgeLoadError", "load_knowledge_record"]
