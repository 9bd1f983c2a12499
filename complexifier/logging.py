"""
Structured Logging — Engine and API Events

Every record goes out as one JSON line (or plain text when
COMPLEXIFIER_LOG_FORMAT=text). The engine logs a handful of events,
each carrying its own context fields through ``extra``:

    Candidate hot -> scalding: PASSED   DEBUG  original, candidate, reason,
                                               similarity, syntax_score, semantic_score
    Processed text                      INFO   token_count, count, substitutions_made, duration_ms
    Engine initialized                  INFO   count, duration_ms
    Custom vocabulary added             INFO   count
    Embedding failed                    WARN   error
    POST /process → 200 (84.1ms)        INFO   method, path, status_code, duration_ms

Set COMPLEXIFIER_LOG_LEVEL=DEBUG to see every candidate decision.

Usage:
    from complexifier.logging import get_logger
    logger = get_logger("engine")
    logger.info("Processed text", extra={"substitutions_made": 3, "duration_ms": 840})
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone


LOG_LEVEL = os.getenv("COMPLEXIFIER_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = os.getenv("COMPLEXIFIER_LOG_FORMAT", "json")  # "json" or "text"

# Context fields copied from ``extra`` into the JSON entry, by event
_EXTRA_FIELDS = (
    # candidate decisions
    "original", "candidate", "reason", "similarity", "syntax_score", "semantic_score",
    # document passes, initialization, vocabulary ingestion
    "token_count", "count", "substitutions_made", "duration_ms",
    # provider failures
    "provider", "error",
    # HTTP requests
    "method", "path", "status_code",
)


class JSONFormatter(logging.Formatter):
    """Formats log records as JSON lines."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key in _EXTRA_FIELDS:
            val = getattr(record, key, None)
            if val is not None:
                entry[key] = val

        if record.exc_info and record.exc_info[0]:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


class TextFormatter(logging.Formatter):
    """Human-readable format for development."""

    def __init__(self):
        super().__init__(
            fmt="%(asctime)s [%(levelname)-8s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )


def setup_logging(stream=None):
    """
    Attach one handler to the "complexifier" logger.

    The API logs to stdout from its lifespan hook. The CLI passes
    sys.stderr; stdout carries the rewritten text. Calling it again
    replaces the handler instead of adding a second one.
    """
    root = logging.getLogger("complexifier")
    root.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))

    root.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stdout)
    if LOG_FORMAT == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(TextFormatter())

    root.addHandler(handler)

    # Access lines duplicate the request middleware; model loading is chatty at INFO
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("transformers").setLevel(logging.WARNING)

    return root


def get_logger(name: str) -> logging.Logger:
    """Get a named logger under the complexifier namespace."""
    return logging.getLogger(f"complexifier.{name}")
