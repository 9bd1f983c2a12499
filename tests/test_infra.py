"""
Tests for logging, settings, provider factory and provider fallbacks.
"""

import io
import json
import logging

import numpy as np
import pytest

from complexifier.config import Settings
from complexifier.logging import JSONFormatter, TextFormatter, get_logger, setup_logging
from complexifier.providers import normalize
from complexifier.providers.factory import get_embedding_provider, get_mask_predictor
from complexifier.providers.gemini import CircuitBreaker, GeminiEmbeddingProvider
from complexifier.providers.huggingface import (
    HuggingFaceEmbeddingProvider,
    HuggingFaceMaskPredictor,
)


class TestLogging:
    """Structured logging tests."""

    def _record(self, **extra):
        record = logging.LogRecord(
            "complexifier.engine", logging.INFO, __file__, 1, "Text processed", None, None,
        )
        for key, value in extra.items():
            setattr(record, key, value)
        return record

    def test_json_formatter_fields(self):
        line = JSONFormatter().format(self._record())
        data = json.loads(line)
        assert data["level"] == "INFO"
        assert data["logger"] == "complexifier.engine"
        assert data["message"] == "Text processed"
        assert "timestamp" in data

    def test_json_formatter_known_extras(self):
        record = self._record(substitutions_made=3, duration_ms=12.5, unrelated="x")
        data = json.loads(JSONFormatter().format(record))
        assert data["substitutions_made"] == 3
        assert data["duration_ms"] == 12.5
        assert "unrelated" not in data

    def test_json_formatter_exception(self):
        try:
            raise ValueError("bad density")
        except ValueError:
            import sys
            record = self._record()
            record.exc_info = sys.exc_info()
        data = json.loads(JSONFormatter().format(record))
        assert "ValueError" in data["exception"]

    @pytest.mark.asyncio
    async def test_candidate_decision_record(self, engine, caplog):
        with caplog.at_level(logging.DEBUG, logger="complexifier.policy"):
            await engine.evaluate("The hot coffee.", "hot", "scalding")
        record = next(r for r in caplog.records if r.name == "complexifier.policy")
        data = json.loads(JSONFormatter().format(record))
        assert data["level"] == "DEBUG"
        assert data["original"] == "hot"
        assert data["candidate"] == "scalding"
        assert data["reason"] == "PASSED"
        assert {"similarity", "syntax_score", "semantic_score"} <= set(data)

    @pytest.mark.asyncio
    async def test_document_pass_record(self, engine, caplog):
        with caplog.at_level(logging.INFO, logger="complexifier.engine"):
            await engine.process_text("The hot coffee was too hot to drink.")
        record = next(r for r in caplog.records if r.getMessage() == "Processed text")
        data = json.loads(JSONFormatter().format(record))
        assert data["substitutions_made"] == 1
        assert data["token_count"] == 8

    def test_get_logger_namespace(self):
        assert get_logger("engine").name == "complexifier.engine"

    def test_setup_logging_stream(self):
        stream = io.StringIO()
        root = setup_logging(stream=stream)
        try:
            assert len(root.handlers) == 1
            assert root.handlers[0].stream is stream
            assert isinstance(root.handlers[0].formatter, (JSONFormatter, TextFormatter))
            get_logger("test").warning("hello")
            assert "hello" in stream.getvalue()
        finally:
            root.handlers.clear()

    def test_setup_logging_idempotent(self):
        root = setup_logging(stream=io.StringIO())
        setup_logging(stream=io.StringIO())
        try:
            assert len(root.handlers) == 1
        finally:
            root.handlers.clear()


class TestSettings:
    """Default thresholds and immutability."""

    def test_threshold_defaults(self):
        s = Settings()
        assert s.EMBEDDING_MIN < s.EMBEDDING_TRUST_THRESHOLD < s.EMBEDDING_MAX
        assert s.SYNTAX_MISS_SCORE < s.SYNTAX_FLOOR
        assert s.SEMANTIC_FLOOR < s.SEMANTIC_OVERRIDE
        assert 0 < s.MAX_DENSITY <= 1

    def test_frozen(self):
        with pytest.raises(Exception):
            Settings().MAX_DENSITY = 0.5


class TestProviders:
    """Factory selection and not-ready behavior."""

    def test_unknown_embedding_provider(self):
        with pytest.raises(ValueError, match="Unknown embedding provider"):
            get_embedding_provider("word2vec")

    def test_unknown_mask_provider(self):
        with pytest.raises(ValueError, match="Unknown mask provider"):
            get_mask_predictor("gemini")

    def test_factory_huggingface_lazy(self):
        provider = get_embedding_provider("huggingface", model="some-model")
        assert isinstance(provider, HuggingFaceEmbeddingProvider)
        assert provider.model_name == "some-model"
        assert provider.is_ready is False

    def test_normalize(self):
        vec = normalize([3.0, 4.0])
        assert np.allclose(vec, [0.6, 0.8])
        assert normalize([0.0, 0.0]) is None
        assert normalize([]) is None

    @pytest.mark.asyncio
    async def test_hf_embedding_not_loaded(self):
        provider = HuggingFaceEmbeddingProvider()
        assert await provider.embed("hot") is None

    @pytest.mark.asyncio
    async def test_hf_mask_not_loaded(self):
        predictor = HuggingFaceMaskPredictor()
        assert predictor.is_ready is False
        with pytest.raises(RuntimeError):
            await predictor.predict_top_k("The [MASK] coffee.", 5)

    @pytest.mark.asyncio
    async def test_gemini_without_key(self, monkeypatch):
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)
        provider = GeminiEmbeddingProvider(api_key="")
        assert provider.is_ready is False
        await provider.load()
        assert await provider.embed("hot") is None

    @pytest.mark.asyncio
    async def test_gemini_failures_open_breaker(self, monkeypatch):
        provider = GeminiEmbeddingProvider(api_key="test-key")

        async def failing(text, max_retries=3):
            raise RuntimeError("invalid argument")

        monkeypatch.setattr(provider, "_call_model", failing)
        for _ in range(3):
            assert await provider.embed("hot") is None
        assert provider.circuit_breaker.is_open


class TestCircuitBreaker:

    def test_opens_after_threshold(self):
        cb = CircuitBreaker(failure_threshold=3, recovery_timeout=60)
        cb.record_failure()
        cb.record_failure()
        assert cb.state == "closed"
        cb.record_failure()
        assert cb.is_open

    def test_success_resets(self):
        cb = CircuitBreaker(failure_threshold=2)
        cb.record_failure()
        cb.record_success()
        cb.record_failure()
        assert cb.state == "closed"

    def test_half_open_after_recovery(self):
        cb = CircuitBreaker(failure_threshold=1, recovery_timeout=0)
        cb.record_failure()
        assert cb.state == "half-open"
        assert cb.is_open is False
