"""
API Schemas — Request and Response Models

Pydantic models for the Complexifier API. Wire names are camelCase
(originalText, syntaxScore, ...); Python code uses snake_case and
either form is accepted on input.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        protected_namespaces=(),
    )


# ============================================================
# PROCESS
# ============================================================

class ProcessRequest(_CamelModel):
    """POST /process request body."""
    text: str = Field(..., max_length=200_000,
                      description="The text to rewrite.")
    max_density: Optional[float] = Field(None, gt=0, le=1,
                                         description="Fraction of tokens that may be replaced.")

    model_config = ConfigDict(json_schema_extra={"examples": [
        {"text": "The hot coffee was too hot to drink.", "maxDensity": 0.08},
    ]})


class AppliedSubstitutionResponse(_CamelModel):
    original: str
    replacement: str
    similarity: float
    syntax_score: float
    semantic_score: float


class ProcessResponse(_CamelModel):
    """POST /process response body."""
    original_text: str
    modified_text: str
    substitutions: list[AppliedSubstitutionResponse]
    substitutions_made: int
    substitutions_attempted: int
    diff_spans: list[dict]
    total_time_ms: float


# ============================================================
# SINGLE SUBSTITUTION
# ============================================================

class SubstitutionRequest(_CamelModel):
    """POST /substitution request body."""
    sentence: str = Field(..., min_length=1, max_length=50_000)
    original: str = Field(..., min_length=1, max_length=100)
    candidate: str = Field(..., min_length=1, max_length=100)


class SubstitutionResultResponse(_CamelModel):
    original: str
    candidate: str
    passed: bool
    reason: str
    similarity: float
    syntax_score: float
    semantic_score: float
    time_ms: float = 0.0


class BestSubstitutionRequest(_CamelModel):
    """POST /substitution/best request body."""
    sentence: str = Field(..., min_length=1, max_length=50_000)
    word: str = Field(..., min_length=1, max_length=100)


class BestSubstitutionResponse(_CamelModel):
    result: Optional[SubstitutionResultResponse] = None


# ============================================================
# VOCABULARY
# ============================================================

class FindWordsRequest(_CamelModel):
    """POST /vocabulary/find request body."""
    text: str = Field(..., max_length=200_000)


class FindWordsResponse(_CamelModel):
    words: list[str]


class VocabularyListingResponse(_CamelModel):
    default: list[str]
    custom: list[str]


class CustomVocabularyRequest(_CamelModel):
    """
    POST /vocabulary/custom request body.

    Entries are validated one at a time on ingestion, not here, so a
    bad entry only rejects itself and the ones after it.
    """
    vocabulary: list[dict[str, Any]] = Field(..., max_length=10_000)


class CsvVocabularyRequest(_CamelModel):
    """POST /vocabulary/custom/csv request body."""
    csv: str = Field(..., min_length=1, max_length=1_048_576)


class CustomVocabularyResponse(_CamelModel):
    success: bool
    count: int


class ClearResponse(_CamelModel):
    success: bool


# ============================================================
# STATUS / HEALTH
# ============================================================

class StatusResponse(_CamelModel):
    model_loaded: bool
    model_loading: bool
    embeddings_cached: int
    contexts_cached: int
    custom_vocab_size: int


class HealthResponse(_CamelModel):
    status: str
    version: str
    engine_version: str
    embedding_provider: str
    mask_provider: str
    model_loaded: bool
