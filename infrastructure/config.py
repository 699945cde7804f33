"""Dependency wiring for the restaurant concierge."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Literal

from application.services.corpus_builder import build_corpus
from application.services.lexical_index import LexicalIndex
from application.services.scoring import RESTAURANT_INTENT_BOOSTS, ScoringWeights
from application.use_cases.chat import ChatService, ChatSettings
from domain.interfaces import QueryExpander, ResponseCache, TextGenerator
from domain.knowledge import KnowledgeRecord
from infrastructure.cache.in_memory_response_cache import DEFAULT_TTL_SECONDS, InMemoryResponseCache
from infrastructure.generation.llm_generator import LLMGenerator, LLMGeneratorConfig
from infrastructure.knowledge.json_knowledge_loader import DEFAULT_KNOWLEDGE_PATH, load_knowledge_record
from infrastructure.query.synonym_expander import SynonymExpander


ProviderName = Literal["gemini", "ollama"]

_DEFAULT_MODELS: dict[str, str] = {
    "gemini": "gemini-1.5-flash",
    "ollama": "llama3.1",
}


@dataclass(slots=True)
class Container:
    """Simple container bundling concrete infrastructure implementations."""

    record: KnowledgeRecord
    index: LexicalIndex
    expander: QueryExpander
    generator: TextGenerator
    cache: ResponseCache
    chat_service: ChatService


@dataclass(slots=True)
class ContainerConfig:
    """Runtime settings, usually read from ``CONCIERGE_*`` environment variables."""

    knowledge_path: Path = DEFAULT_KNOWLEDGE_PATH
    provider: ProviderName = "gemini"
    model: str | None = None
    gemini_api_key: str | None = None
    ollama_url: str = "http://localhost:11434"
    generation_timeout: float = 30.0
    cache_ttl_seconds: float = DEFAULT_TTL_SECONDS
    top_k: int = 6
    char_limit: int = 1200
    history_turns: int = 6
    weights: ScoringWeights = field(default_factory=ScoringWeights)

    @classmethod
    def from_env(cls) -> ContainerConfig:
        defaults = cls()
        return cls(
            knowledge_path=Path(os.getenv("CONCIERGE_KNOWLEDGE_PATH") or defaults.knowledge_path),
            provider=os.getenv("CONCIERGE_LLM_PROVIDER", defaults.provider).lower(),  # type: ignore[arg-type]
            model=os.getenv("CONCIERGE_LLM_MODEL") or None,
            gemini_api_key=os.getenv("GEMINI_API_KEY") or None,
            ollama_url=os.getenv("CONCIERGE_OLLAMA_URL", defaults.ollama_url),
            generation_timeout=_env_number("CONCIERGE_GENERATION_TIMEOUT", defaults.generation_timeout, float),
            cache_ttl_seconds=_env_number("CONCIERGE_CACHE_TTL", defaults.cache_ttl_seconds, float),
            top_k=_env_number("CONCIERGE_TOP_K", defaults.top_k, int),
            char_limit=_env_number("CONCIERGE_CONTEXT_CHARS", defaults.char_limit, int),
            history_turns=_env_number("CONCIERGE_HISTORY_TURNS", defaults.history_turns, int),
            weights=(
                ScoringWeights(intent_boosts=RESTAURANT_INTENT_BOOSTS)
                if _env_flag("CONCIERGE_INTENT_BOOSTS")
                else defaults.weights
            ),
        )


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in {"1", "true", "yes", "on"}


def _env_number(name: str, default, cast: Callable[[str], float | int]):
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return cast(raw)
    except ValueError as exc:
        raise ValueError(f"Environment variable {name} must be a number, got '{raw}'") from exc


def build_default_container(
    config: ContainerConfig | None = None,
    *,
    generator: TextGenerator | None = None,
) -> Container:
    """Load the knowledge record, build the index once and wire the chat service."""

    cfg = config or ContainerConfig.from_env()
    if cfg.provider not in _DEFAULT_MODELS:
        raise ValueError(f"Unknown provider '{cfg.provider}'")

    record = load_knowledge_record(cfg.knowledge_path)
    index = LexicalIndex.build(build_corpus(record))
    expander = SynonymExpander()
    if generator is None:
        generator = LLMGenerator(
            LLMGeneratorConfig(
                provider=cfg.provider,
                model=cfg.model or _DEFAULT_MODELS[cfg.provider],
                gemini_api_key=cfg.gemini_api_key,
                ollama_url=cfg.ollama_url,
                timeout=cfg.generation_timeout,
            )
        )
    cache = InMemoryResponseCache(ttl_seconds=cfg.cache_ttl_seconds)
    chat_service = ChatService(
        index=index,
        expander=expander,
        generator=generator,
        cache=cache,
        brand=record.brand.name,
        settings=ChatSettings(
            top_k=cfg.top_k,
            char_limit=cfg.char_limit,
            history_turns=cfg.history_turns,
            generation_timeout=cfg.generation_timeout,
        ),
        weights=cfg.weights,
    )

    return Container(
        record=record,
        index=index,
        expander=expander,
        generator=generator,
        cache=cache,
        chat_service=chat_service,
    )


__all__ = ["Container", "ContainerConfig", "build_default_container"]
