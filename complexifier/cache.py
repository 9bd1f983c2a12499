"""
Vector Caches

Process-lifetime memoization of model outputs:
  - EmbeddingCache: lowercased word -> unit embedding vector
  - ContextCache:   candidate word -> context vectors from its examples

Both caches are append-only. Nothing is evicted or invalidated, so a
cache is only valid for one model version; create a new engine (and
with it new caches) when the model changes.

Usage:
    cache = EmbeddingCache()
    vec = cache.get("hot")
    if vec is None:
        vec = await provider.embed("hot")
        cache.put("hot", vec)
"""

from __future__ import annotations

from typing import Generic, Optional, TypeVar

import numpy as np

V = TypeVar("V")


class _AppendOnlyCache(Generic[V]):
    """Unbounded map with hit/miss statistics. Existing keys are never replaced."""

    def __init__(self):
        self._cache: dict[str, V] = {}
        self._hits = 0
        self._misses = 0

    @staticmethod
    def _make_key(word: str) -> str:
        return word.lower()

    def get(self, word: str) -> Optional[V]:
        """Return the cached value, or None on a miss."""
        value = self._cache.get(self._make_key(word))
        if value is None:
            self._misses += 1
            return None
        self._hits += 1
        return value

    def put(self, word: str, value: V) -> V:
        """Store a value unless one is already present. Returns the stored value."""
        return self._cache.setdefault(self._make_key(word), value)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self._make_key(word) in self._cache

    def __len__(self) -> int:
        return len(self._cache)

    @property
    def stats(self) -> dict:
        """Cache hit/miss statistics."""
        total = self._hits + self._misses
        return {
            "entries": len(self._cache),
            "hits": self._hits,
            "misses": self._misses,
            "hit_rate": round(self._hits / total, 3) if total > 0 else 0.0,
        }


class EmbeddingCache(_AppendOnlyCache[np.ndarray]):
    """Word embeddings, keyed by lowercased word."""


class ContextCache(_AppendOnlyCache[tuple]):
    """Context vectors computed from a candidate's example sentences."""

    def put(self, word: str, value: tuple) -> tuple:
        # An empty tuple means every example failed; leave the slot open for a retry
        if not value:
            return value
        return super().put(word, tuple(value))
