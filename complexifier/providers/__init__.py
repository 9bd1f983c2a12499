"""
Model Providers — Abstract Interfaces

All model calls go through these interfaces. Swap providers by
changing COMPLEXIFIER_EMBEDDING_PROVIDER / COMPLEXIFIER_MASK_PROVIDER
in env.

The engine awaits one provider call at a time; providers do not need
to be safe for concurrent use.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

import numpy as np


@dataclass(frozen=True)
class Prediction:
    """One ranked fill-mask prediction."""
    token: str
    probability: float


def normalize(vector) -> Optional[np.ndarray]:
    """L2-normalize a vector. Returns None for empty or zero vectors."""
    arr = np.asarray(vector, dtype=np.float32).reshape(-1)
    if arr.size == 0:
        return None
    norm = float(np.linalg.norm(arr))
    if norm == 0.0 or not np.isfinite(norm):
        return None
    return arr / norm


class EmbeddingProvider(ABC):
    """Abstract base for text embedding providers."""

    @property
    @abstractmethod
    def is_ready(self) -> bool:
        """True once the provider can serve embed() calls."""
        ...

    async def load(self) -> None:
        """Load model weights or clients. Providers that need nothing may keep the default."""
        return None

    @abstractmethod
    async def embed(self, text: str) -> Optional[np.ndarray]:
        """Return a unit-length embedding for text, or None if unavailable."""
        ...


class MaskPredictor(ABC):
    """Abstract base for masked-token predictors."""

    mask_token: str = "[MASK]"

    @property
    @abstractmethod
    def is_ready(self) -> bool:
        """True once the predictor can serve predict_top_k() calls."""
        ...

    async def load(self) -> None:
        return None

    @abstractmethod
    async def predict_top_k(self, masked_text: str, k: int) -> list[Prediction]:
        """Return the top-k predictions for the mask slot, best first. May raise."""
        ...
