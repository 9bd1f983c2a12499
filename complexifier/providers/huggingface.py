"""
Hugging Face Providers — local transformers models.

Embeddings: AutoModel hidden states, attention-masked mean pooling,
L2-normalized. Syntax: the fill-mask pipeline on the same checkpoint.

Models load lazily (app starts without torch touching the disk) and
blocking inference runs in a worker thread so the event loop stays free.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

import numpy as np

from complexifier.providers import EmbeddingProvider, MaskPredictor, Prediction, normalize

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "distilbert-base-uncased"


class HuggingFaceEmbeddingProvider(EmbeddingProvider):
    """Mean-pooled transformer embeddings."""

    def __init__(self, model_name: str = DEFAULT_MODEL, max_length: int = 256):
        self.model_name = model_name
        self.max_length = max_length
        self._tokenizer = None
        self._model = None
        self._torch = None
        self._load_lock = asyncio.Lock()

    @property
    def is_ready(self) -> bool:
        return self._model is not None

    def _load_sync(self) -> None:
        import torch
        from transformers import AutoModel, AutoTokenizer

        self._torch = torch
        self._tokenizer = AutoTokenizer.from_pretrained(self.model_name)
        model = AutoModel.from_pretrained(self.model_name)
        model.eval()
        self._model = model

    async def load(self) -> None:
        async with self._load_lock:
            if self._model is not None:
                return
            logger.info("Loading embedding model %s", self.model_name)
            await asyncio.to_thread(self._load_sync)

    def _embed_sync(self, text: str) -> Optional[np.ndarray]:
        torch = self._torch
        with torch.no_grad():
            tokens = self._tokenizer(
                [text],
                padding=True,
                truncation=True,
                max_length=self.max_length,
                return_tensors="pt",
            )
            outputs = self._model(**tokens)
            token_embeddings = outputs.last_hidden_state
            attention_mask = tokens["attention_mask"].unsqueeze(-1)
            summed = (token_embeddings * attention_mask).sum(dim=1)
            counts = attention_mask.sum(dim=1).clamp(min=1)
            pooled = (summed / counts)[0]
        return normalize(pooled.detach().cpu().numpy())

    async def embed(self, text: str) -> Optional[np.ndarray]:
        if not self.is_ready:
            return None
        return await asyncio.to_thread(self._embed_sync, text)


class HuggingFaceMaskPredictor(MaskPredictor):
    """Masked language model scoring through the fill-mask pipeline."""

    def __init__(self, model_name: str = DEFAULT_MODEL):
        self.model_name = model_name
        self._pipeline = None
        self._load_lock = asyncio.Lock()

    @property
    def is_ready(self) -> bool:
        return self._pipeline is not None

    def _load_sync(self) -> None:
        from transformers import pipeline

        fill_mask = pipeline("fill-mask", model=self.model_name)
        self.mask_token = fill_mask.tokenizer.mask_token
        self._pipeline = fill_mask

    async def load(self) -> None:
        async with self._load_lock:
            if self._pipeline is not None:
                return
            logger.info("Loading fill-mask model %s", self.model_name)
            await asyncio.to_thread(self._load_sync)

    def _predict_sync(self, masked_text: str, k: int) -> list[Prediction]:
        outputs = self._pipeline(masked_text, top_k=k)
        # Several mask tokens yield one list per mask; only the first slot is scored
        if outputs and isinstance(outputs[0], list):
            outputs = outputs[0]
        return [
            Prediction(token=o.get("token_str", ""), probability=float(o.get("score", 0.0)))
            for o in outputs
        ]

    async def predict_top_k(self, masked_text: str, k: int) -> list[Prediction]:
        if not self.is_ready:
            raise RuntimeError("Fill-mask model is not loaded")
        return await asyncio.to_thread(self._predict_sync, masked_text, k)
