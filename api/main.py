"""
Complexifier API — Main Application

POST   /init                     — Load models and warm caches
GET    /status                   — Engine status
GET    /health                   — Health check
POST   /process                  — Choose and apply substitutions for a text
POST   /substitution             — Judge one (sentence, original, candidate)
POST   /substitution/best        — Best candidate for one word
POST   /vocabulary/find          — Vocabulary words present in a text
GET    /vocabulary               — Builtin and custom vocabulary words
POST   /vocabulary/custom        — Add custom vocabulary entries
POST   /vocabulary/custom/csv    — Add custom vocabulary from CSV
DELETE /vocabulary/custom        — Clear custom vocabulary
"""

from __future__ import annotations

import asyncio
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.requests import Request

from complexifier import __version__
from complexifier.config import settings
from complexifier.engine import ProcessingTimeoutError, SubstitutionEngine
from complexifier.logging import get_logger, setup_logging
from complexifier.providers.factory import get_embedding_provider, get_mask_predictor
from complexifier.schemas.substitution import (
    BestSubstitutionRequest,
    BestSubstitutionResponse,
    ClearResponse,
    CsvVocabularyRequest,
    CustomVocabularyRequest,
    CustomVocabularyResponse,
    FindWordsRequest,
    FindWordsResponse,
    HealthResponse,
    ProcessRequest,
    ProcessResponse,
    StatusResponse,
    SubstitutionRequest,
    SubstitutionResultResponse,
    VocabularyListingResponse,
)
from complexifier.vocabulary import VocabularyValidationError, parse_vocabulary_csv

logger = get_logger("api")

# Lazy engine, replaced in tests through set_engine()
_engine: Optional[SubstitutionEngine] = None
_warmup_task: Optional[asyncio.Task] = None


def _get_engine() -> SubstitutionEngine:
    global _engine
    if _engine is None:
        _engine = SubstitutionEngine(
            get_embedding_provider(settings.EMBEDDING_PROVIDER),
            get_mask_predictor(settings.MASK_PROVIDER),
            settings=settings,
        )
    return _engine


def set_engine(engine: Optional[SubstitutionEngine]) -> None:
    global _engine
    _engine = engine


async def _warm_up(engine: SubstitutionEngine) -> None:
    try:
        await engine.initialize()
    except Exception as e:
        logger.error("Warm-up failed", extra={"error": str(e)}, exc_info=True)


# ============================================================
# STARTUP / SHUTDOWN
# ============================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging and optionally start loading models."""
    global _warmup_task
    setup_logging()
    logger.info(
        "Complexifier API starting",
        extra={"provider": settings.EMBEDDING_PROVIDER},
    )
    if settings.WARMUP_ON_STARTUP:
        _warmup_task = asyncio.create_task(_warm_up(_get_engine()))
    yield
    if _warmup_task is not None and not _warmup_task.done():
        _warmup_task.cancel()
    _warmup_task = None
    logger.info("Complexifier API shutting down")


app = FastAPI(
    title="Complexifier API",
    description="Context-safe vocabulary substitution engine",
    version=__version__,
    lifespan=lifespan,
)

# CORS — set COMPLEXIFIER_CORS_ORIGINS in production
app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in settings.CORS_ORIGINS.split(",")],
    allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
    allow_credentials=False,
)


# ============================================================
# GLOBAL ERROR HANDLER
# ============================================================

@app.exception_handler(Exception)
async def global_error_handler(request: Request, exc: Exception):
    """Catch unhandled exceptions — return structured error, don't leak internals."""
    logger.error(
        f"Unhandled exception: {type(exc).__name__}",
        extra={"error": str(exc), "path": request.url.path, "method": request.method},
        exc_info=True,
    )
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error. The request could not be completed."},
    )


# ============================================================
# ENGINE ROUTES
# ============================================================

@app.post("/init", response_model=StatusResponse)
async def init_engine():
    """Load models and precompute vocabulary embeddings."""
    return await _get_engine().initialize()


@app.get("/status", response_model=StatusResponse)
async def status():
    return _get_engine().status()


@app.get("/health", response_model=HealthResponse)
async def health():
    """Health check."""
    return {
        "status": "operational",
        "version": __version__,
        "engine_version": settings.ENGINE_VERSION,
        "embedding_provider": settings.EMBEDDING_PROVIDER,
        "mask_provider": settings.MASK_PROVIDER,
        "model_loaded": _get_engine().is_ready,
    }


@app.post("/process", response_model=ProcessResponse)
async def process_text(request: ProcessRequest):
    """Choose and apply substitutions across a text."""
    engine = _get_engine()
    try:
        result = await engine.process_text(request.text, max_density=request.max_density)
    except ProcessingTimeoutError as e:
        raise HTTPException(504, str(e))
    except ValueError as e:
        raise HTTPException(422, str(e))
    return result.to_dict()


@app.post("/substitution", response_model=SubstitutionResultResponse)
async def evaluate_substitution(request: SubstitutionRequest):
    """Run the decision policy for a single candidate."""
    result = await _get_engine().evaluate(request.sentence, request.original, request.candidate)
    return result.to_dict()


@app.post("/substitution/best", response_model=BestSubstitutionResponse)
async def best_substitution(request: BestSubstitutionRequest):
    """Best passing candidate for a word, or null."""
    result = await _get_engine().find_best_substitution(request.sentence, request.word)
    return {"result": result.to_dict() if result is not None else None}


# ============================================================
# VOCABULARY ROUTES
# ============================================================

@app.post("/vocabulary/find", response_model=FindWordsResponse)
async def find_vocabulary_words(request: FindWordsRequest):
    return {"words": _get_engine().find_vocabulary_words(request.text)}


@app.get("/vocabulary", response_model=VocabularyListingResponse)
async def get_vocabulary():
    return _get_engine().vocabulary_listing()


async def _ingest(entries: list[dict]):
    try:
        count = await _get_engine().add_custom_vocabulary(entries)
    except VocabularyValidationError as e:
        return JSONResponse(
            status_code=422,
            content={"detail": str(e), "success": False, "count": e.accepted},
        )
    return {"success": True, "count": count}


@app.post("/vocabulary/custom", response_model=CustomVocabularyResponse)
async def add_custom_vocabulary(request: CustomVocabularyRequest):
    """Add custom entries. Entries accepted before an invalid one are kept."""
    return await _ingest(request.vocabulary)


@app.post("/vocabulary/custom/csv", response_model=CustomVocabularyResponse)
async def add_custom_vocabulary_csv(request: CsvVocabularyRequest):
    """Add custom entries from CSV text with Word and Synonym columns."""
    try:
        entries = parse_vocabulary_csv(request.csv)
    except VocabularyValidationError as e:
        raise HTTPException(422, str(e))
    return await _ingest(entries)


@app.delete("/vocabulary/custom", response_model=ClearResponse)
async def clear_custom_vocabulary():
    await _get_engine().clear_custom_vocabulary()
    return {"success": True}


# --- Request Logging Middleware ---
@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log every API request with method, path, status, duration."""
    path = request.url.path
    # Skip noise: health and status polling
    if path in ("/health", "/status"):
        return await call_next(request)

    start = time.time()
    response = await call_next(request)
    duration_ms = round((time.time() - start) * 1000, 1)

    logger.info(
        f"{request.method} {path} → {response.status_code} ({duration_ms}ms)",
        extra={
            "method": request.method,
            "path": path,
            "status_code": response.status_code,
            "duration_ms": duration_ms,
        },
    )
    return response
