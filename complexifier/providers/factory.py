"""
Provider factory — returns the configured embedding and mask providers.
"""

from __future__ import annotations

from typing import Optional

from complexifier.config import settings
from complexifier.providers import EmbeddingProvider, MaskPredictor


def get_embedding_provider(
    provider_name: str = "huggingface",
    model: Optional[str] = None,
) -> EmbeddingProvider:
    """Factory — returns an embedding provider by name."""
    if provider_name == "huggingface":
        from complexifier.providers.huggingface import HuggingFaceEmbeddingProvider
        return HuggingFaceEmbeddingProvider(model or settings.HF_MODEL)
    elif provider_name == "gemini":
        from complexifier.providers.gemini import GeminiEmbeddingProvider
        return GeminiEmbeddingProvider(
            api_key=settings.GEMINI_API_KEY or None,
            model=model or settings.GEMINI_EMBEDDING_MODEL,
        )
    else:
        raise ValueError(f"Unknown embedding provider: {provider_name}")


def get_mask_predictor(
    provider_name: str = "huggingface",
    model: Optional[str] = None,
) -> MaskPredictor:
    """Factory — returns a mask predictor by name."""
    if provider_name == "huggingface":
        from complexifier.providers.huggingface import HuggingFaceMaskPredictor
        return HuggingFaceMaskPredictor(model or settings.HF_MODEL)
    else:
        raise ValueError(f"Unknown mask provider: {provider_name}")
