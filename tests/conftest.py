"""
Shared test fixtures — deterministic fake providers.

Word vectors are 2-D unit vectors placed by angle, so the similarity
between two words is cos(angle difference):

    hot         0°
    scalding   30°   sim 0.866  (in band, above trust threshold)
    scorching  35°   sim 0.819
    sweltering 40°   sim 0.766
    torrid     80°   sim 0.174  (below EMBEDDING_MIN)

Text with no registered vector embeds to None, so sentence context
vectors are unavailable unless a test registers one.
"""

from __future__ import annotations

import asyncio
import math
from typing import Optional

import numpy as np
import pytest

from complexifier.config import Settings
from complexifier.engine import SubstitutionEngine
from complexifier.providers import EmbeddingProvider, MaskPredictor, Prediction, normalize


def angle_vector(degrees: float) -> list[float]:
    rad = math.radians(degrees)
    return [math.cos(rad), math.sin(rad)]


HOT_VECTORS = {
    "hot": angle_vector(0),
    "scalding": angle_vector(30),
    "scorching": angle_vector(35),
    "sweltering": angle_vector(40),
    "torrid": angle_vector(80),
}

HOT_PREDICTIONS = {"scalding": 0.20, "scorching": 0.05, "warm": 0.40}


class CallTracker:
    """Counts concurrent provider calls across both fakes."""

    def __init__(self):
        self.in_flight = 0
        self.max_in_flight = 0
        self.completed = 0

    def enter(self):
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)

    def exit(self):
        self.in_flight -= 1
        self.completed += 1


class FakeEmbeddingProvider(EmbeddingProvider):
    """Embeddings from a fixed table."""

    def __init__(
        self,
        vectors: Optional[dict] = None,
        ready: bool = True,
        fail: tuple = (),
        delay: float = 0.0,
        tracker: Optional[CallTracker] = None,
    ):
        self.vectors = dict(HOT_VECTORS if vectors is None else vectors)
        self.ready = ready
        self.fail = set(fail)
        self.delay = delay
        self.tracker = tracker or CallTracker()
        self.calls: list[str] = []
        self.load_calls = 0

    @property
    def is_ready(self) -> bool:
        return self.ready

    async def load(self) -> None:
        self.load_calls += 1

    async def embed(self, text: str) -> Optional[np.ndarray]:
        self.calls.append(text)
        self.tracker.enter()
        try:
            await asyncio.sleep(self.delay)
            if text in self.fail:
                raise RuntimeError(f"embedding failed for {text!r}")
            vec = self.vectors.get(text)
            return normalize(vec) if vec is not None else None
        finally:
            self.tracker.exit()


class FakeMaskPredictor(MaskPredictor):
    """Returns the same ranked predictions for every masked sentence."""

    def __init__(
        self,
        predictions: Optional[dict] = None,
        ready: bool = True,
        error: Optional[Exception] = None,
        delay: float = 0.0,
        tracker: Optional[CallTracker] = None,
    ):
        self.predictions = dict(HOT_PREDICTIONS if predictions is None else predictions)
        self.ready = ready
        self.error = error
        self.delay = delay
        self.tracker = tracker or CallTracker()
        self.calls: list[str] = []

    @property
    def is_ready(self) -> bool:
        return self.ready

    async def predict_top_k(self, masked_text: str, k: int) -> list[Prediction]:
        self.calls.append(masked_text)
        self.tracker.enter()
        try:
            await asyncio.sleep(self.delay)
            if self.error is not None:
                raise self.error
            ranked = sorted(self.predictions.items(), key=lambda kv: kv[1], reverse=True)
            return [Prediction(token=t, probability=p) for t, p in ranked[:k]]
        finally:
            self.tracker.exit()


@pytest.fixture
def tracker():
    return CallTracker()


@pytest.fixture
def embedder(tracker):
    return FakeEmbeddingProvider(tracker=tracker)


@pytest.fixture
def predictor(tracker):
    return FakeMaskPredictor(tracker=tracker)


@pytest.fixture
def test_settings():
    return Settings()


@pytest.fixture
def engine(embedder, predictor, test_settings):
    return SubstitutionEngine(embedder, predictor, settings=test_settings)
