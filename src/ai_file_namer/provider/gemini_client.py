"""Minimal Gemini ``generateContent`` client over httpx.

Wraps the REST reply in ``GeminiResponse`` so callers see the same ``.text``
and ``.candidates`` attributes the Google SDK exposes.
"""
from __future__ import annotations
import logging
import time
from dataclasses import dataclass, field
from typing import Any, Protocol

import httpx

from ai_file_namer.common.config import Settings
from ai_file_namer.common.schema import GenerationRequest

LOGGER = logging.getLogger("ai_file_namer.provider.gemini")


class Provider(Protocol):
    def generate(self, request: GenerationRequest) -> Any: ...


@dataclass
class GeminiResponse:
    """Raw ``generateContent`` JSON plus SDK-style accessors."""
    raw: dict[str, Any] = field(default_factory=dict)
    latency_ms: int = 0

    @property
    def candidates(self) -> list[Any]:
        return list(self.raw.get("candidates") or [])

    @property
    def text(self) -> str | None:
        """Concatenated text parts of the first candidate, or None if it has none."""
        if not self.candidates or not isinstance(self.candidates[0], dict):
            return None
        content = self.candidates[0].get("content") or {}
        if not isinstance(content, dict):
            return None
        parts = [p.get("text") for p in content.get("parts") or [] if isinstance(p, dict)]
        texts = [t for t in parts if isinstance(t, str)]
        if not texts:
            return None
        return "".join(texts)

    def model_dump(self) -> dict[str, Any]:
        return self.raw


def build_payload(request: GenerationRequest) -> dict[str, Any]:
    return {
        "systemInstruction": {"parts": [{"text": request.system_instruction}]},
        "contents": [{"role": "user", "parts": [{"text": request.description}]}],
        "generationConfig": {
            "temperature": request.temperature,
            "responseMimeType": request.response_mime_type,
            "responseSchema": request.response_schema,
        },
    }


class GeminiClient:
    """Issues one ``generateContent`` call per ``generate``."""

    def __init__(self, settings: Settings, transport: httpx.BaseTransport | None = None) -> None:
        if not settings.has_api_key:
            raise ValueError("Gemini API key is not configured")
        self.settings = settings
        self._transport = transport

    def generate(self, request: GenerationRequest) -> GeminiResponse:
        url = f"{self.settings.base_url.rstrip('/')}/v1beta/models/{request.model_id}:generateContent"
        headers = {"x-goog-api-key": self.settings.gemini_api_key or ""}
        payload = build_payload(request)

        start = time.time()
        with httpx.Client(timeout=self.settings.timeout_s, transport=self._transport) as client:
            r = client.post(url, headers=headers, json=payload)
            r.raise_for_status()
            data = r.json()
        latency_ms = int((time.time() - start) * 1000)
        LOGGER.info("Gemini call to %s took %sms", request.model_id, latency_ms)

        if not isinstance(data, dict):
            raise ValueError(f"Gemini returned {type(data).__name__}, expected an object")
        return GeminiResponse(raw=data, latency_ms=latency_ms)
