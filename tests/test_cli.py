"""
CLI Tests — complexify.py

Runs the command-line entry point end to end on fake providers:
  1. Plain and JSON output
  2. Custom vocabulary from CSV
  3. Exit codes for bad density and unavailable models
"""

from __future__ import annotations

import json
import logging
import sys

import pytest

import complexify

from conftest import FakeEmbeddingProvider, FakeMaskPredictor


@pytest.fixture
def fake_providers(monkeypatch):
    """Route the CLI's provider factories to the deterministic fakes."""
    state = {"embedder": FakeEmbeddingProvider(), "predictor": FakeMaskPredictor()}
    monkeypatch.setattr(complexify, "get_embedding_provider", lambda name: state["embedder"])
    monkeypatch.setattr(complexify, "get_mask_predictor", lambda name: state["predictor"])
    return state


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logging.getLogger("complexifier").handlers.clear()


def run_cli(monkeypatch, *argv) -> int:
    monkeypatch.setattr(sys, "argv", ["complexify", *argv])
    with pytest.raises(SystemExit) as exc_info:
        complexify.main()
    return exc_info.value.code


# ============================================================
# OUTPUT
# ============================================================

class TestOutput:

    def test_plain_output(self, tmp_path, monkeypatch, capsys, fake_providers):
        source = tmp_path / "essay.txt"
        source.write_text("The hot coffee was too hot to drink.")
        code = run_cli(monkeypatch, str(source))
        captured = capsys.readouterr()
        assert code == 0
        assert captured.out.strip() == "The scalding coffee was too hot to drink."
        assert "hot → scalding" in captured.err

    def test_json_output(self, tmp_path, monkeypatch, capsys, fake_providers):
        source = tmp_path / "essay.txt"
        source.write_text("The hot coffee was too hot to drink.")
        code = run_cli(monkeypatch, str(source), "--json")
        assert code == 0
        data = json.loads(capsys.readouterr().out)
        assert data["substitutions_made"] == 1
        assert data["substitutions"][0]["replacement"] == "scalding"
        assert isinstance(data["diff_spans"], list)

    def test_custom_vocabulary_csv(self, tmp_path, monkeypatch, capsys, fake_providers):
        source = tmp_path / "essay.txt"
        source.write_text("A cup of coffee.")
        vocab = tmp_path / "vocab.csv"
        vocab.write_text("Word,Synonym\ncoffee,espresso\n")
        code = run_cli(monkeypatch, str(source), "--vocab-csv", str(vocab))
        assert code == 0
        assert "Loaded 1 custom entries" in capsys.readouterr().err


# ============================================================
# EXIT CODES
# ============================================================

class TestExitCodes:

    def test_missing_file(self, tmp_path, monkeypatch, fake_providers):
        assert run_cli(monkeypatch, str(tmp_path / "nope.txt")) == 1

    def test_missing_vocabulary_csv(self, tmp_path, monkeypatch, capsys, fake_providers):
        source = tmp_path / "essay.txt"
        source.write_text("The hot coffee.")
        code = run_cli(monkeypatch, str(source), "--vocab-csv", str(tmp_path / "missing.csv"))
        assert code == 1
        assert "Vocabulary file not found" in capsys.readouterr().out
        assert fake_providers["embedder"].load_calls == 0

    def test_invalid_density(self, tmp_path, monkeypatch, capsys, fake_providers):
        source = tmp_path / "essay.txt"
        source.write_text("The hot coffee.")
        assert run_cli(monkeypatch, str(source), "--density", "1.5") == 2
        assert "Error" in capsys.readouterr().err

    def test_models_not_ready(self, tmp_path, monkeypatch, fake_providers):
        fake_providers["predictor"] = FakeMaskPredictor(ready=False)
        source = tmp_path / "essay.txt"
        source.write_text("The hot coffee.")
        assert run_cli(monkeypatch, str(source)) == 1

    def test_timeout(self, tmp_path, monkeypatch, fake_providers):
        fake_providers["predictor"] = FakeMaskPredictor(delay=0.2)
        source = tmp_path / "essay.txt"
        source.write_text("The hot coffee.")
        assert run_cli(monkeypatch, str(source), "--timeout", "0.01") == 3
