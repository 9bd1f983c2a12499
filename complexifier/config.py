"""
Complexifier Configuration

Central settings loaded from environment variables.
Thresholds are calibrated for a quantized DistilBERT-class model.
"""

import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    """Immutable engine and service settings."""

    # --- Versioning ---
    ENGINE_VERSION: str = "1.0.0"

    # --- Embedding gate ---
    EMBEDDING_MIN: float = float(os.getenv("COMPLEXIFIER_EMBEDDING_MIN", "0.55"))
    EMBEDDING_MAX: float = float(os.getenv("COMPLEXIFIER_EMBEDDING_MAX", "0.96"))
    EMBEDDING_TRUST_THRESHOLD: float = float(
        os.getenv("COMPLEXIFIER_EMBEDDING_TRUST", "0.75")
    )

    # --- Syntax & semantic verdict ---
    SYNTAX_FLOOR: float = float(os.getenv("COMPLEXIFIER_SYNTAX_FLOOR", "-3.5"))
    SEMANTIC_FLOOR: float = float(os.getenv("COMPLEXIFIER_SEMANTIC_FLOOR", "0.45"))
    SEMANTIC_OVERRIDE: float = float(
        os.getenv("COMPLEXIFIER_SEMANTIC_OVERRIDE", "0.80")
    )
    SYNTAX_MISS_SCORE: float = -10.0
    LOG_EPSILON: float = 1e-10

    # --- Document processing ---
    MAX_DENSITY: float = float(os.getenv("COMPLEXIFIER_MAX_DENSITY", "0.08"))
    MAX_WORDS_PER_BATCH: int = int(os.getenv("COMPLEXIFIER_MAX_WORDS", "1000"))
    MASK_TOPK: int = int(os.getenv("COMPLEXIFIER_MASK_TOPK", "100"))
    NEGATION_WINDOW: int = int(os.getenv("COMPLEXIFIER_NEGATION_WINDOW", "4"))
    CONTEXT_EXAMPLES_PER_CANDIDATE: int = int(
        os.getenv("COMPLEXIFIER_CONTEXT_EXAMPLES", "3")
    )
    PROCESS_TIMEOUT_SECONDS: float = float(os.getenv("COMPLEXIFIER_TIMEOUT", "120"))

    # --- Model providers ---
    EMBEDDING_PROVIDER: str = os.getenv("COMPLEXIFIER_EMBEDDING_PROVIDER", "huggingface")
    MASK_PROVIDER: str = os.getenv("COMPLEXIFIER_MASK_PROVIDER", "huggingface")
    HF_MODEL: str = os.getenv("COMPLEXIFIER_HF_MODEL", "distilbert-base-uncased")
    GEMINI_API_KEY: str = os.getenv("GEMINI_API_KEY", "")
    GEMINI_EMBEDDING_MODEL: str = os.getenv(
        "GEMINI_EMBEDDING_MODEL", "text-embedding-004"
    )

    # --- Server ---
    WARMUP_ON_STARTUP: bool = _env_bool("COMPLEXIFIER_WARMUP", "true")
    HOST: str = os.getenv("COMPLEXIFIER_HOST", "0.0.0.0")
    PORT: int = int(os.getenv("COMPLEXIFIER_PORT", "8000"))

    # --- CORS ---
    CORS_ORIGINS: str = os.getenv("COMPLEXIFIER_CORS_ORIGINS", "*")


settings = Settings()
