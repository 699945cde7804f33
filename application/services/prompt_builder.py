"""Prompt construction for the generation service."""
from __future__ import annotations

from typing import Sequence

from domain.entities import ChatTurn

SYSTEM_PROMPT_TEMPLATE = """\
You are **{brand}'s** friendly, on-brand assistant.
Your job:
- Answer ONLY questions about {brand}: menu items, prices when provided, meeting halls, reservations, opening hours, location, contact details, policies, and general dining info.
- If the user asks anything unrelated, politely decline and guide them back to restaurant topics.
- Be concise, warm, and professional. Use **bold** for emphasis and structure with line breaks.
- If the user asks for details not in the provided context, say you don't have that information and suggest contacting the restaurant directly (phone/email).
- Never fabricate prices, promotions, or availability.
- Prefer concrete facts from context; if context conflicts with prior assumptions, prefer the context.
- When relevant, remind users they can book meeting halls via the **/booking** page or by phone."""

GUIDELINES = """\
Assistant guidelines:
- Answer directly and helpfully using the context.
- If context is insufficient, say so and offer the best next step (call/email/visit /booking).
- Keep it under ~80 words unless listing items."""

NO_CONTEXT_MARKER = "• No additional context found."


def build_prompt(
    message: str,
    context: str,
    history: Sequence[ChatTurn] = (),
    *,
    brand: str,
) -> str:
    """Assemble the full prompt; the same inputs always give the same text."""

    sections = [
        SYSTEM_PROMPT_TEMPLATE.format(brand=brand),
        f"Context (authoritative, may be partial):\n{context or NO_CONTEXT_MARKER}",
    ]
    if history:
        turns = "\n".join(f"{'User' if turn.is_user else 'Assistant'}: {turn.text}" for turn in history)
        sections.append(f"Recent conversation:\n{turns}")
    sections.append(f'User question:\n"{message}"')
    sections.append(GUIDELINES)
    return "\n\n".join(sections)


__all__ = ["SYSTEM_PROMPT_TEMPLATE", "NO_CONTEXT_MARKER", "build_prompt"]
