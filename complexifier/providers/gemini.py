"""
Gemini Provider — Google Gemini embedding API implementation.

Uses the google.genai SDK. Client is lazily initialized —
the engine loads without an API key and reports MODEL_NOT_READY
until one is configured.

Features:
- Exponential backoff retry on transient errors
- Circuit breaker: after consecutive failures, embed() returns None
  for 60s so candidates degrade to "no similarity" instead of stalling
"""

from __future__ import annotations

import asyncio
import logging
import os
import time
from typing import Optional

import numpy as np
from google import genai
from google.genai import types

from complexifier.providers import EmbeddingProvider, normalize

logger = logging.getLogger(__name__)

DEFAULT_EMBEDDING_MODEL = "text-embedding-004"

# Circuit breaker settings
_CB_FAILURE_THRESHOLD = 3   # Open after this many consecutive failures
_CB_RECOVERY_TIMEOUT = 60   # Seconds before trying again (half-open)

_TRANSIENT_MARKERS = (
    "429", "503", "500", "rate", "quota", "timeout",
    "connection", "unavailable", "overloaded",
)


class CircuitBreaker:
    """Simple circuit breaker: closed → open → half-open → closed."""

    def __init__(
        self,
        failure_threshold: int = _CB_FAILURE_THRESHOLD,
        recovery_timeout: float = _CB_RECOVERY_TIMEOUT,
    ):
        self.failure_threshold = failure_threshold
        self.recovery_timeout = recovery_timeout
        self._failures = 0
        self._last_failure_time: float = 0
        self._state = "closed"  # closed | open | half-open

    @property
    def state(self) -> str:
        if self._state == "open":
            if time.monotonic() - self._last_failure_time >= self.recovery_timeout:
                self._state = "half-open"
        return self._state

    def record_success(self) -> None:
        self._failures = 0
        self._state = "closed"

    def record_failure(self) -> None:
        self._failures += 1
        self._last_failure_time = time.monotonic()
        if self._failures >= self.failure_threshold:
            self._state = "open"
            logger.warning(
                "Circuit breaker OPEN — %d consecutive embedding failures. "
                "Embeddings unavailable for %ds.",
                self._failures, self.recovery_timeout,
            )

    @property
    def is_open(self) -> bool:
        return self.state == "open"


class GeminiEmbeddingProvider(EmbeddingProvider):
    """Google Gemini embeddings with retry and circuit breaker."""

    def __init__(self, api_key: Optional[str] = None, model: Optional[str] = None):
        self._api_key = api_key or os.getenv("GEMINI_API_KEY", "")
        self._model = model or os.getenv("GEMINI_EMBEDDING_MODEL", DEFAULT_EMBEDDING_MODEL)
        self._client: Optional[genai.Client] = None
        self.circuit_breaker = CircuitBreaker()

    @property
    def is_ready(self) -> bool:
        return bool(self._api_key)

    def _get_client(self) -> genai.Client:
        if self._client is None:
            if not self._api_key:
                raise RuntimeError(
                    "GEMINI_API_KEY not set. Get one from "
                    "https://aistudio.google.com/apikey"
                )
            self._client = genai.Client(api_key=self._api_key)
        return self._client

    async def load(self) -> None:
        if self._api_key:
            self._get_client()

    async def _call_model(self, text: str, max_retries: int = 3) -> list[float]:
        """Call the embedding endpoint with retry logic."""
        client = self._get_client()
        config = types.EmbedContentConfig(task_type="SEMANTIC_SIMILARITY")
        last_error = None
        for attempt in range(max_retries):
            try:
                response = await client.aio.models.embed_content(
                    model=self._model,
                    contents=text,
                    config=config,
                )
                return list(response.embeddings[0].values)
            except Exception as e:
                last_error = e
                error_str = str(e).lower()
                is_transient = any(k in error_str for k in _TRANSIENT_MARKERS)
                if is_transient and attempt < max_retries - 1:
                    await asyncio.sleep(2 ** attempt)
                    continue
                raise

        raise last_error  # type: ignore[misc]

    async def embed(self, text: str) -> Optional[np.ndarray]:
        if not self.is_ready or self.circuit_breaker.is_open:
            return None
        try:
            values = await self._call_model(text)
        except Exception as e:
            self.circuit_breaker.record_failure()
            logger.error("Gemini embedding failed: %s", e, extra={"provider": "gemini"})
            return None
        self.circuit_breaker.record_success()
        return normalize(values)
