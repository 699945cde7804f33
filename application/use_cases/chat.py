"""Chat use case: retrieval, prompt building, generation and reply caching."""
from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Sequence

from application.services.context_formatter import DEFAULT_CHAR_LIMIT, format_context
from application.services.lexical_index import LexicalIndex
from application.services.prompt_builder import build_prompt
from application.services.scoring import ScoringWeights
from application.services.text_normalizer import tokenize
from application.use_cases.retrieve import DEFAULT_WEIGHTS, retrieve
from domain.entities import ChatReply, ChatTurn
from domain.interfaces import GenerationUnavailable, QueryExpander, ResponseCache, TextGenerator

logger = logging.getLogger(__name__)

NO_ANSWER_REPLY = "I don't have that information right now. Please contact us if the issue persists."
UNAVAILABLE_REPLY = "Sorry, I'm having trouble answering right now. Please try again in a moment or contact us directly."


@dataclass(slots=True)
class ChatSettings:
    top_k: int = 6
    char_limit: int = DEFAULT_CHAR_LIMIT
    history_turns: int = 6
    # Messages with this many keywords or fewer borrow words from earlier user turns.
    short_query_tokens: int = 4
    augment_user_turns: int = 2
    generation_timeout: float = 30.0
    temperature: float | None = None
    max_output_tokens: int | None = None


class ChatService:
    """Answers chat messages using the knowledge base and the generation service."""

    def __init__(
        self,
        *,
        index: LexicalIndex,
        expander: QueryExpander,
        generator: TextGenerator,
        cache: ResponseCache,
        brand: str,
        settings: ChatSettings | None = None,
        weights: ScoringWeights = DEFAULT_WEIGHTS,
    ) -> None:
        self._index = index
        self._expander = expander
        self._generator = generator
        self._cache = cache
        self._brand = brand
        self._settings = settings or ChatSettings()
        self._weights = weights

    @property
    def settings(self) -> ChatSettings:
        return self._settings

    @property
    def weights(self) -> ScoringWeights:
        return self._weights

    def reply(self, message: str, history: Sequence[ChatTurn] = ()) -> ChatReply:
        if not message or not message.strip():
            raise ValueError("Invalid message")
        message = message.strip()
        recent = list(history)[-self._settings.history_turns :] if self._settings.history_turns > 0 else []

        # Follow-up answers depend on the conversation, so only standalone questions are cached.
        use_cache = not recent
        if use_cache:
            cached = self._cache.get(message)
            if cached is not None:
                logger.debug("Cache hit for %r", message)
                return ChatReply(reply=cached, cached=True)

        query_text = self._retrieval_query(message, recent)
        results = retrieve(
            query_text,
            index=self._index,
            expander=self._expander,
            weights=self._weights,
            top_k=self._settings.top_k,
        )
        context = format_context(results, self._settings.char_limit)
        prompt = build_prompt(message, context, recent, brand=self._brand)
        sources = [{"id": result.id, "section": result.section} for result in results]

        text = self._generate(prompt)
        if text is None:
            return ChatReply(reply=UNAVAILABLE_REPLY, sources=sources)
        if not text:
            return ChatReply(reply=NO_ANSWER_REPLY, sources=sources)

        if use_cache:
            self._cache.set(message, text)
        return ChatReply(reply=text, sources=sources)

    def _retrieval_query(self, message: str, history: Sequence[ChatTurn]) -> str:
        if not history or len(tokenize(message)) > self._settings.short_query_tokens:
            return message
        earlier = [turn.text for turn in history if turn.is_user][-self._settings.augment_user_turns :]
        if not earlier:
            return message
        return " ".join([message, *earlier])

    def _generate(self, prompt: str) -> str | None:
        """Return the generated text, or ``None`` when the service failed or timed out.

        Each call runs on its own daemon thread, so the timeout starts when
        generation starts. A thread that outlives the timeout is abandoned and
        its result dropped.
        """
        outcome: dict[str, object] = {}

        def run() -> None:
            try:
                outcome["text"] = self._generator.generate(
                    prompt,
                    temperature=self._settings.temperature,
                    max_output_tokens=self._settings.max_output_tokens,
                )
            except Exception as exc:
                outcome["error"] = exc

        worker = threading.Thread(target=run, name="generation", daemon=True)
        worker.start()
        worker.join(self._settings.generation_timeout)
        if worker.is_alive():
            logger.warning("Generation timed out after %.1fs", self._settings.generation_timeout)
            return None

        error = outcome.get("error")
        if isinstance(error, GenerationUnavailable):
            logger.warning("Generation unavailable: %s", error)
            return None
        if error is not None:
            logger.error("Generation failed.", exc_info=error)
            return None
        text = outcome.get("text")
        return (text if isinstance(text, str) else "").strip()


__all__ = ["ChatService", "ChatSettings", "NO_ANSWER_REPLY", "UNAVAILABLE_REPLY"]
