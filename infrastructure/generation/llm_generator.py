"""LLM-backed text generator for the chat concierge."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass

import requests

from domain.interfaces import GenerationUnavailable, TextGenerator

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class LLMGeneratorConfig:
    provider: str = "gemini"
    model: str = "gemini-1.5-flash"
    gemini_api_key: str | None = None
    gemini_url: str = "https://generativelanguage.googleapis.com/v1beta/models"
    ollama_url: str = "http://localhost:11434"
    timeout: float = 30.0
    temperature: float = 0.2
    top_p: float = 0.9
    top_k: int = 40
    max_output_tokens: int = 256


class LLMGenerator(TextGenerator):
    """Send a rendered prompt to Gemini or a local Ollama server."""

    PROVIDERS = ("gemini", "ollama")

    def __init__(self, config: LLMGeneratorConfig) -> None:
        if config.provider not in self.PROVIDERS:
            raise ValueError(f"Unknown generation provider '{config.provider}'")
        self._config = config

    def generate(
        self,
        prompt: str,
        *,
        temperature: float | None = None,
        max_output_tokens: int | None = None,
    ) -> str:
        temperature = self._config.temperature if temperature is None else temperature
        max_output_tokens = self._config.max_output_tokens if max_output_tokens is None else max_output_tokens
        try:
            if self._config.provider == "ollama":
                return self._call_ollama(prompt, temperature, max_output_tokens)
            return self._call_gemini(prompt, temperature, max_output_tokens)
        except requests.Timeout as exc:
            raise GenerationUnavailable(f"{self._config.provider} timed out after {self._config.timeout}s") from exc
        except requests.RequestException as exc:
            raise GenerationUnavailable(f"{self._config.provider} request failed: {exc}") from exc
        except (KeyError, IndexError, TypeError, ValueError) as exc:
            raise GenerationUnavailable(f"Unexpected {self._config.provider} response") from exc

    def _call_gemini(self, prompt: str, temperature: float, max_output_tokens: int) -> str:
        api_key = self._config.gemini_api_key or os.getenv("GEMINI_API_KEY")
        if not api_key:
            raise GenerationUnavailable("Missing Gemini API key.")
        response = requests.post(
            f"{self._config.gemini_url}/{self._config.model}:generateContent",
            params={"key": api_key},
            json={
                "contents": [{"parts": [{"text": prompt}]}],
                "generationConfig": {
                    "temperature": temperature,
                    "topP": self._config.top_p,
                    "topK": self._config.top_k,
                    "maxOutputTokens": max_output_tokens,
                },
            },
            timeout=self._config.timeout,
        )
        response.raise_for_status()
        payload = response.json()
        candidates = payload.get("candidates") or []
        if not candidates:
            logger.warning("Gemini returned no candidates: %s", payload.get("promptFeedback"))
            return ""
        parts = candidates[0]["content"].get("parts", [])
        return "".join(part.get("text", "") for part in parts).strip()

    def _call_ollama(self, prompt: str, temperature: float, max_output_tokens: int) -> str:
        response = requests.post(
            f"{self._config.ollama_url}/api/generate",
            json={
                "model": self._config.model,
                "prompt": prompt,
                "stream": False,
                "options": {"temperature": temperature, "num_predict": max_output_tokens},
            },
            timeout=self._config.timeout,
        )
        response.raise_for_status()
        payload = response.json()
        return str(payload.get("response", "")).strip()


__all__ = ["LLMGenerator", "LLMGeneratorConfig"]
