"""
Scorers — Embedding, Syntax and Semantic

Three model-backed scores feed the decision policy:
  - Embedding similarity: dot product of cached unit word vectors
  - Syntax fitness:       log-probability of the candidate filling a
                          masked slot in the sentence
  - Semantic fit:         sentence context vector vs. context vectors
                          built from the candidate's example sentences

Scorers never raise. A provider failure degrades the one score it
touches: similarity 0, syntax floor, no context vectors.

Every provider call goes through the `call` hook so the engine can
serialize them; without a hook the call is awaited directly.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any, Optional

import numpy as np

from complexifier.cache import ContextCache, EmbeddingCache
from complexifier.config import Settings, settings as default_settings
from complexifier.lexicon import Candidate
from complexifier.providers import EmbeddingProvider, MaskPredictor

logger = logging.getLogger(__name__)

ProviderCall = Callable[[Callable[[], Awaitable[Any]]], Awaitable[Any]]


async def _direct_call(factory: Callable[[], Awaitable[Any]]) -> Any:
    return await factory()


def dot(a: Optional[np.ndarray], b: Optional[np.ndarray]) -> float:
    """Cosine similarity of two unit vectors, 0.0 if either is missing."""
    if a is None or b is None or a.shape != b.shape:
        return 0.0
    return float(np.clip(np.dot(a, b), -1.0, 1.0))


@dataclass
class SentenceContext:
    """A sentence plus its memoized context vector for one pass."""

    text: str
    _vector: Optional[np.ndarray] = field(default=None, repr=False)
    _resolved: bool = field(default=False, repr=False)


# ============================================================
# EMBEDDING SIMILARITY
# ============================================================

class EmbeddingScorer:
    """Cached word embeddings and the similarity between them."""

    def __init__(
        self,
        provider: EmbeddingProvider,
        cache: Optional[EmbeddingCache] = None,
        call: Optional[ProviderCall] = None,
    ):
        self.provider = provider
        self.cache = cache if cache is not None else EmbeddingCache()
        self._call = call or _direct_call

    async def embed_text(self, text: str) -> Optional[np.ndarray]:
        """Uncached embedding of arbitrary text. None if unavailable."""
        try:
            return await self._call(lambda: self.provider.embed(text))
        except Exception as e:
            logger.warning("Embedding failed: %s", e, extra={"error": str(e)})
            return None

    async def vector(self, word: str) -> Optional[np.ndarray]:
        """Unit vector for a word, from cache or provider."""
        cached = self.cache.get(word)
        if cached is not None:
            return cached

        vec = await self.embed_text(word.lower())
        if vec is None:
            return None
        return self.cache.put(word, vec)

    async def similarity(self, word_a: str, word_b: str) -> float:
        vec_a = await self.vector(word_a)
        vec_b = await self.vector(word_b)
        return dot(vec_a, vec_b)

    async def sentence_vector(self, context: SentenceContext) -> Optional[np.ndarray]:
        """Context vector of a sentence, computed at most once per context."""
        if not context._resolved:
            context._vector = await self.embed_text(context.text)
            context._resolved = True
        return context._vector


# ============================================================
# SYNTAX FITNESS
# ============================================================

def build_masked_sentence(sentence: str, target: str, mask_token: str) -> Optional[str]:
    """
    Replace the first whole-word occurrence of target with the mask token.

    Returns None when target does not occur in the sentence.
    """
    if not target:
        return None
    pattern = re.compile(rf"\b{re.escape(target)}\b", re.IGNORECASE)
    masked, count = pattern.subn(lambda _: mask_token, sentence, count=1)
    return masked if count else None


class SyntaxScorer:
    """Masked-LM log-probability of a candidate in the target's slot."""

    def __init__(
        self,
        predictor: MaskPredictor,
        settings: Settings = default_settings,
        call: Optional[ProviderCall] = None,
    ):
        self.predictor = predictor
        self.settings = settings
        self._call = call or _direct_call

    async def score(self, sentence: str, target: str, candidate: str) -> float:
        floor = self.settings.SYNTAX_MISS_SCORE

        masked = build_masked_sentence(sentence, target, self.predictor.mask_token)
        if masked is None:
            return floor

        k = self.settings.MASK_TOPK
        try:
            predictions = await self._call(lambda: self.predictor.predict_top_k(masked, k))
        except Exception as e:
            logger.warning(
                "Mask prediction failed: %s", e,
                extra={"candidate": candidate, "error": str(e)},
            )
            return floor

        wanted = candidate.strip().lower()
        for prediction in predictions or []:
            if prediction.token.strip().lower() == wanted:
                return math.log(prediction.probability + self.settings.LOG_EPSILON)

        return floor


# ============================================================
# SEMANTIC FIT
# ============================================================

class SemanticScorer:
    """Compare the sentence's context vector with the candidate's usage examples."""

    def __init__(
        self,
        embeddings: EmbeddingScorer,
        cache: Optional[ContextCache] = None,
        settings: Settings = default_settings,
    ):
        self.embeddings = embeddings
        self.cache = cache if cache is not None else ContextCache()
        self.settings = settings

    async def context_vectors(self, candidate: Candidate) -> tuple:
        """Context vectors for a candidate's first few examples, built once."""
        cached = self.cache.get(candidate.word)
        if cached is not None:
            return cached

        vectors = []
        for example in candidate.examples[: self.settings.CONTEXT_EXAMPLES_PER_CANDIDATE]:
            vec = await self.embeddings.embed_text(example)
            if vec is not None:
                vectors.append(vec)
        return self.cache.put(candidate.word, tuple(vectors))

    async def score(
        self,
        context: SentenceContext,
        candidate: Candidate,
        similarity: float,
    ) -> float:
        sentence_vec = await self.embeddings.sentence_vector(context)

        result = 0.0
        if sentence_vec is not None:
            vectors = await self.context_vectors(candidate)
            if vectors:
                result = max(dot(sentence_vec, v) for v in vectors)

        # High word similarity stands in for missing or weak context evidence
        if similarity >= self.settings.EMBEDDING_TRUST_THRESHOLD:
            result = max(result, similarity)
        return result
