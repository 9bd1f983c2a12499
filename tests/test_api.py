"""
API Integration Tests — Endpoint Verification

Tests every public API endpoint using FastAPI's TestClient.
No real models: the engine is built on the fake providers from
conftest and injected before the app starts.

These tests catch:
  - Schema mismatches (response model vs actual data)
  - camelCase wire names drifting from the output contract
  - Route registration issues
  - Error status codes (422 validation, 504 timeout)
"""

from __future__ import annotations

from dataclasses import replace

import pytest
from fastapi.testclient import TestClient

from complexifier.config import settings
from complexifier.engine import SubstitutionEngine

from conftest import FakeEmbeddingProvider, FakeMaskPredictor

SCENARIO_A = "The hot coffee was too hot to drink."


# --- Fixtures ---

def _client_for(engine, monkeypatch):
    import api.main as main
    monkeypatch.setattr(main, "settings", replace(settings, WARMUP_ON_STARTUP=False))
    main.set_engine(engine)
    return TestClient(main.app)


@pytest.fixture
def client(monkeypatch):
    """Test client backed by a fresh fake-provider engine."""
    import api.main as main
    engine = SubstitutionEngine(FakeEmbeddingProvider(), FakeMaskPredictor())
    with _client_for(engine, monkeypatch) as c:
        yield c
    main.set_engine(None)


# ============================================================
# HEALTH & STATUS
# ============================================================

class TestHealth:

    def test_health_returns_200(self, client):
        r = client.get("/health")
        assert r.status_code == 200

    def test_health_fields(self, client):
        data = client.get("/health").json()
        assert data["status"] == "operational"
        assert data["modelLoaded"] is True
        assert "engineVersion" in data
        assert "embeddingProvider" in data
        assert "maskProvider" in data

    def test_status_camel_case(self, client):
        data = client.get("/status").json()
        assert set(data) == {
            "modelLoaded", "modelLoading", "embeddingsCached",
            "contextsCached", "customVocabSize",
        }

    def test_init(self, client):
        r = client.post("/init")
        assert r.status_code == 200
        data = r.json()
        assert data["modelLoaded"] is True
        assert data["modelLoading"] is False
        assert data["embeddingsCached"] > 0


# ============================================================
# PROCESS
# ============================================================

class TestProcess:

    def test_process_output_contract(self, client):
        r = client.post("/process", json={"text": SCENARIO_A})
        assert r.status_code == 200
        data = r.json()
        assert data["originalText"] == SCENARIO_A
        assert data["modifiedText"] == "The scalding coffee was too hot to drink."
        assert data["substitutionsMade"] == 1
        assert data["substitutionsAttempted"] == 1
        sub = data["substitutions"][0]
        assert set(sub) == {"original", "replacement", "similarity", "syntaxScore", "semanticScore"}
        assert sub["replacement"] == "scalding"
        assert isinstance(data["diffSpans"], list)
        assert "totalTimeMs" in data

    def test_process_max_density(self, client):
        r = client.post("/process", json={"text": SCENARIO_A, "maxDensity": 1.0})
        assert r.status_code == 200

    def test_snake_case_input_accepted(self, client):
        r = client.post("/process", json={"text": SCENARIO_A, "max_density": 0.5})
        assert r.status_code == 200

    @pytest.mark.parametrize("density", [0, -0.1, 1.5])
    def test_invalid_density_422(self, client, density):
        r = client.post("/process", json={"text": SCENARIO_A, "maxDensity": density})
        assert r.status_code == 422

    def test_missing_text_422(self, client):
        r = client.post("/process", json={})
        assert r.status_code == 422

    def test_blocked_sentence(self, client):
        data = client.post("/process", json={"text": "I got myself in hot water."}).json()
        assert data["substitutionsMade"] == 0
        assert data["modifiedText"] == "I got myself in hot water."

    def test_timeout_504(self, monkeypatch):
        import api.main as main
        slow = SubstitutionEngine(
            FakeEmbeddingProvider(),
            FakeMaskPredictor(delay=0.2),
            settings=replace(settings, PROCESS_TIMEOUT_SECONDS=0.01),
        )
        with _client_for(slow, monkeypatch) as c:
            r = c.post("/process", json={"text": SCENARIO_A})
        main.set_engine(None)
        assert r.status_code == 504


# ============================================================
# SUBSTITUTION
# ============================================================

class TestSubstitution:

    def test_single_passed(self, client):
        r = client.post("/substitution", json={
            "sentence": SCENARIO_A, "original": "hot", "candidate": "scalding",
        })
        assert r.status_code == 200
        data = r.json()
        assert data["passed"] is True
        assert data["reason"] == "PASSED"
        assert "syntaxScore" in data
        assert "semanticScore" in data
        assert "timeMs" in data

    def test_single_proper_noun(self, client):
        data = client.post("/substitution", json={
            "sentence": "Hot Springs Hotel welcomed guests.",
            "original": "hot",
            "candidate": "scalding",
        }).json()
        assert data["passed"] is False
        assert data["reason"] == "PROPER_NOUN"

    def test_best(self, client):
        data = client.post("/substitution/best", json={"sentence": SCENARIO_A, "word": "hot"}).json()
        assert data["result"]["candidate"] == "scalding"

    def test_best_none(self, client):
        data = client.post("/substitution/best", json={"sentence": SCENARIO_A, "word": "coffee"}).json()
        assert data["result"] is None


# ============================================================
# VOCABULARY
# ============================================================

class TestVocabulary:

    def test_find_words(self, client):
        data = client.post("/vocabulary/find", json={"text": "A hot day, a big dog."}).json()
        assert data["words"] == ["hot", "big"]

    def test_listing(self, client):
        data = client.get("/vocabulary").json()
        assert "hot" in data["default"]
        assert data["custom"] == []

    def test_add_custom(self, client):
        r = client.post("/vocabulary/custom", json={"vocabulary": [
            {"word": "coffee", "synonym": "espresso"},
            {"word": "tea", "synonym": "chai", "definition": "spiced tea", "examples": ["Chai, please."]},
        ]})
        assert r.status_code == 200
        assert r.json() == {"success": True, "count": 2}
        assert client.get("/vocabulary").json()["custom"] == ["coffee", "tea"]
        assert client.get("/status").json()["customVocabSize"] == 2

    def test_add_custom_partial_422(self, client):
        r = client.post("/vocabulary/custom", json={"vocabulary": [
            {"word": "coffee", "synonym": "espresso"},
            {"word": "tea"},
        ]})
        assert r.status_code == 422
        data = r.json()
        assert data["success"] is False
        assert data["count"] == 1
        assert "synonym" in data["detail"]
        # The accepted entry stays
        assert client.get("/vocabulary").json()["custom"] == ["coffee"]

    def test_add_custom_csv(self, client):
        csv_text = "Word,Synonym,Definition\ncoffee,espresso,strong coffee\n,orphan,\n"
        r = client.post("/vocabulary/custom/csv", json={"csv": csv_text})
        assert r.status_code == 200
        assert r.json()["count"] == 1

    def test_add_custom_csv_bad_header(self, client):
        r = client.post("/vocabulary/custom/csv", json={"csv": "Term,Meaning\nhot,scalding\n"})
        assert r.status_code == 422

    def test_clear_custom(self, client):
        client.post("/vocabulary/custom", json={"vocabulary": [{"word": "coffee", "synonym": "espresso"}]})
        r = client.delete("/vocabulary/custom")
        assert r.status_code == 200
        assert r.json() == {"success": True}
        assert client.get("/vocabulary").json()["custom"] == []
