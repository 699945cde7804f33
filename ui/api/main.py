"""FastAPI layer that exposes the chat concierge and its retrieval."""
from __future__ import annotations

import json
import logging
from typing import Literal

from fastapi import FastAPI, HTTPException, Query as FastAPIQuery, Request
from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel, Field, ValidationError

from application.services.context_formatter import format_context
from application.use_cases.retrieve import retrieve
from domain.entities import ChatTurn
from infrastructure.config import Container, build_default_container
from ui.logging_utils import setup_logging

logger = logging.getLogger(__name__)


class HistoryTurn(BaseModel):
    role: Literal["user", "model", "assistant"]
    text: str


class ChatRequest(BaseModel):
    message: str | None = None
    history: list[HistoryTurn] = Field(default_factory=list)


class Source(BaseModel):
    id: str
    section: str


class ChatResponse(BaseModel):
    reply: str
    sources: list[Source]
    cached: bool = False


class SearchResult(BaseModel):
    id: str
    section: str
    text: str
    score: float


class SearchResponse(BaseModel):
    query: str
    results: list[SearchResult]
    context: str


class HealthResponse(BaseModel):
    status: str
    documents: int


def create_app(container: Container | None = None) -> FastAPI:
    container = container or build_default_container()

    app = FastAPI(title=f"{container.record.brand.name} Concierge API")

    @app.post("/chat", response_model=ChatResponse)
    async def chat_endpoint(request: Request, message: str | None = None) -> ChatResponse:
        payload = await _parse_chat_request(request)
        text = payload.message if payload.message is not None else message
        if not text or not text.strip():
            raise HTTPException(status_code=400, detail="Invalid message")
        history = [ChatTurn(role=turn.role, text=turn.text) for turn in payload.history]
        # ChatService blocks on the generation call; keep it off the event loop.
        reply = await run_in_threadpool(container.chat_service.reply, text, history)
        return ChatResponse(
            reply=reply.reply,
            sources=[Source(**source) for source in reply.sources],
            cached=reply.cached,
        )

    @app.get("/search", response_model=SearchResponse)
    def search_endpoint(
        q: str = FastAPIQuery(..., description="User question"),
        top_k: int = FastAPIQuery(6, ge=1, le=50),
    ) -> SearchResponse:
        results = retrieve(
            q,
            index=container.index,
            expander=container.expander,
            weights=container.chat_service.weights,
            top_k=top_k,
        )
        return SearchResponse(
            query=q,
            results=[SearchResult(id=r.id, section=r.section, text=r.text, score=r.score) for r in results],
            context=format_context(results, container.chat_service.settings.char_limit),
        )

    @app.get("/health", response_model=HealthResponse)
    def health_endpoint() -> HealthResponse:
        return HealthResponse(status="ok", documents=len(container.index))

    return app


async def _parse_chat_request(request: Request) -> ChatRequest:
    """Read the optional JSON body; an empty or malformed body counts as no message."""
    raw = await request.body()
    if not raw:
        return ChatRequest()
    try:
        return ChatRequest.model_validate_json(raw)
    except ValidationError as exc:
        logger.debug("Ignoring unparsable chat body: %s", exc)
        try:
            data = json.loads(raw)
        except ValueError:
            return ChatRequest()
        message = data.get("message") if isinstance(data, dict) else None
        return ChatRequest(message=message if isinstance(message, str) else None)


setup_logging()
app = create_app()
