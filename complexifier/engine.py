"""
Substitution Engine — Orchestrator

Owns everything one engine instance needs: vocabulary store, both
caches, the three scorers and the decision policy. Independent engines
share nothing, so tests can build as many as they like.

Provider calls are serialized through a single lock. A caller-imposed
timeout on process_text() abandons the pass but never interrupts the
in-flight provider call: it runs to completion, holding the lock, and
its result is discarded.

Usage:
    engine = SubstitutionEngine(get_embedding_provider(), get_mask_predictor())
    await engine.initialize()
    result = await engine.process_text("The hot coffee was too hot to drink.")
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable, Iterable, Mapping
from typing import Any, Optional

from complexifier.cache import ContextCache, EmbeddingCache
from complexifier.config import Settings, settings as default_settings
from complexifier.guards import lookup_key
from complexifier.lexicon import Candidate
from complexifier.policy import DecisionPolicy, SubstitutionResult
from complexifier.providers import EmbeddingProvider, MaskPredictor
from complexifier.scorers import EmbeddingScorer, SemanticScorer, SentenceContext, SyntaxScorer
from complexifier.selector import (
    DocumentResult,
    apply_substitutions,
    compute_diff_spans,
    density_budget,
    pick_best,
    rank_winners,
    tokenize,
)
from complexifier.vocabulary import VocabularyStore

logger = logging.getLogger(__name__)


class ProcessingTimeoutError(TimeoutError):
    """A document pass exceeded the caller's timeout."""

    def __init__(self, timeout: float):
        super().__init__(f"Processing exceeded {timeout}s timeout")
        self.timeout = timeout


class SubstitutionEngine:
    """Decides which words in a text get replaced, and by what."""

    def __init__(
        self,
        embedding_provider: EmbeddingProvider,
        mask_predictor: MaskPredictor,
        settings: Settings = default_settings,
        vocabulary: Optional[VocabularyStore] = None,
    ):
        self.settings = settings
        self.vocabulary = vocabulary if vocabulary is not None else VocabularyStore()
        self.embedding_cache = EmbeddingCache()
        self.context_cache = ContextCache()

        self._provider_lock = asyncio.Lock()
        self._init_lock = asyncio.Lock()

        self.embeddings = EmbeddingScorer(
            embedding_provider, self.embedding_cache, call=self._call_provider,
        )
        self.syntax = SyntaxScorer(mask_predictor, settings, call=self._call_provider)
        self.semantic = SemanticScorer(self.embeddings, self.context_cache, settings)
        self.policy = DecisionPolicy(self.embeddings, self.syntax, self.semantic, settings)

    # ------------------------------------------------------------
    # Provider access
    # ------------------------------------------------------------

    async def _call_provider(self, factory: Callable[[], Awaitable[Any]]) -> Any:
        """Run one provider call with no other provider call in flight."""
        await self._provider_lock.acquire()
        try:
            task = asyncio.ensure_future(factory())
        except BaseException:
            self._provider_lock.release()
            raise

        def _release(done: asyncio.Future) -> None:
            self._provider_lock.release()
            if not done.cancelled():
                done.exception()  # Consume the error of an abandoned call

        task.add_done_callback(_release)
        return await asyncio.shield(task)

    # ------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------

    @property
    def is_ready(self) -> bool:
        return self.policy.is_ready

    def status(self) -> dict:
        return {
            "model_loaded": self.is_ready,
            "model_loading": self._init_lock.locked(),
            "embeddings_cached": len(self.embedding_cache),
            "contexts_cached": len(self.context_cache),
            "custom_vocab_size": self.vocabulary.custom_size,
        }

    async def initialize(self) -> dict:
        """Load both providers and warm the caches for the known vocabulary."""
        async with self._init_lock:
            start = time.perf_counter()
            await self.embeddings.provider.load()
            await self.syntax.predictor.load()

            if not self.is_ready:
                logger.warning("Providers not ready after load; skipping precompute")
            else:
                await self.precompute()
                logger.info(
                    "Engine initialized",
                    extra={
                        "count": len(self.embedding_cache),
                        "duration_ms": round((time.perf_counter() - start) * 1000, 2),
                    },
                )
        # Read outside the lock: model_loading is False once initialize() returns
        return self.status()

    async def precompute(self) -> None:
        """
        Embed every vocabulary word and candidate, and build context
        vectors from candidate examples. Failures leave the cache slot
        empty; the word is retried on first use.
        """
        for word, candidate in self.vocabulary.all_candidates():
            await self.embeddings.vector(word)
            await self.embeddings.vector(candidate.word)
            await self.semantic.context_vectors(candidate)

    # ------------------------------------------------------------
    # Decisions
    # ------------------------------------------------------------

    def _resolve_candidate(self, original: str, candidate: str) -> Candidate:
        wanted = candidate.lower()
        for known in self.vocabulary.lookup(original):
            if known.word.lower() == wanted:
                return known
        return Candidate(word=candidate)

    async def evaluate(self, sentence: str, original: str, candidate: str) -> SubstitutionResult:
        """Run the decision policy for one (sentence, original, candidate) triple."""
        return await self.policy.evaluate(
            SentenceContext(sentence), original, self._resolve_candidate(original, candidate),
        )

    async def find_best_substitution(
        self,
        sentence: str,
        word: str,
        context: Optional[SentenceContext] = None,
    ) -> Optional[SubstitutionResult]:
        """Best passing candidate for word in sentence, or None."""
        candidates = self.vocabulary.lookup(word)
        if not candidates:
            return None

        context = context or SentenceContext(sentence)
        results = []
        for candidate in candidates:
            results.append(await self.policy.evaluate(context, word, candidate))
        return pick_best(results)

    async def process_text(
        self,
        text: str,
        max_density: Optional[float] = None,
        timeout: Optional[float] = None,
    ) -> DocumentResult:
        """
        Choose and apply substitutions across a whole text.

        Raises ValueError for a density outside (0, 1] and
        ProcessingTimeoutError when the pass outlives `timeout` seconds.
        """
        density = self.settings.MAX_DENSITY if max_density is None else max_density
        density_budget(0, density)  # Validate before any work starts
        limit = self.settings.PROCESS_TIMEOUT_SECONDS if timeout is None else timeout

        try:
            return await asyncio.wait_for(self._process(text, density), limit)
        except asyncio.TimeoutError:
            logger.warning("Processing timed out", extra={"duration_ms": limit * 1000})
            raise ProcessingTimeoutError(limit) from None

    async def _process(self, text: str, density: float) -> DocumentResult:
        start = time.perf_counter()
        tokens = tokenize(text)
        budget = density_budget(len(tokens), density)

        if not self.is_ready:
            logger.warning("Processing requested before providers are ready")

        # Every decision sees the untouched input
        context = SentenceContext(text)
        decided: set[str] = set()
        winners: list[SubstitutionResult] = []

        for token in tokens[: self.settings.MAX_WORDS_PER_BATCH]:
            key = lookup_key(token)
            if len(key) < 2 or key in decided or not self.vocabulary.has(key):
                continue
            decided.add(key)

            best = await self.find_best_substitution(text, key, context=context)
            if best is not None:
                winners.append(best)

        selected = rank_winners(winners, budget)
        modified, applied = apply_substitutions(text, selected)

        result = DocumentResult(
            original_text=text,
            modified_text=modified,
            substitutions=applied,
            substitutions_attempted=len(winners),
            diff_spans=compute_diff_spans(text, modified),
            total_time_ms=round((time.perf_counter() - start) * 1000, 2),
        )
        logger.info(
            "Processed text",
            extra={
                "token_count": len(tokens),
                "count": len(decided),
                "substitutions_made": result.substitutions_made,
                "duration_ms": result.total_time_ms,
            },
        )
        return result

    # ------------------------------------------------------------
    # Vocabulary
    # ------------------------------------------------------------

    async def _warm_synonym(self, synonym: str) -> None:
        if self.is_ready:
            await self.embeddings.vector(synonym)

    async def add_custom_vocabulary(self, entries: Iterable[Mapping[str, Any]]) -> int:
        """Add custom entries and embed each new synonym. Returns the count accepted."""
        return await self.vocabulary.add_custom(entries, on_added=self._warm_synonym)

    async def clear_custom_vocabulary(self) -> None:
        await self.vocabulary.clear_custom()

    def find_vocabulary_words(self, text: str) -> list[str]:
        return self.vocabulary.words_in_text(text)

    def vocabulary_listing(self) -> dict:
        return {
            "default": self.vocabulary.builtin_words(),
            "custom": self.vocabulary.custom_words(),
        }
