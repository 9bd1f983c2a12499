"""
Vocabulary Store — builtin + user-supplied synonym candidates.

Lookups merge the builtin lexicon with the custom map, builtin first,
without deduplication. Custom entries accumulate until clear_custom();
adding the same (word, synonym) pair twice keeps both copies.

Writers are serialized by a lock and publish a fresh map on every
accepted entry, so a document pass reading the custom map mid-ingestion
sees either the old or the new map, never a half-written one.
"""

from __future__ import annotations

import asyncio
import csv
import io
import logging
from collections.abc import Awaitable, Callable, Iterable, Mapping
from typing import Any, Optional

from complexifier.guards import lookup_key
from complexifier.lexicon import VOCABULARY, Candidate

logger = logging.getLogger(__name__)


class VocabularyValidationError(ValueError):
    """Raised for a custom vocabulary entry that cannot be ingested."""

    def __init__(self, message: str, index: Optional[int] = None, accepted: int = 0):
        super().__init__(message)
        self.index = index
        self.accepted = accepted


def _require(entry: Mapping[str, Any], field_name: str, index: int, accepted: int) -> str:
    value = entry.get(field_name)
    if not isinstance(value, str) or not value.strip():
        raise VocabularyValidationError(
            f"Entry {index}: missing required field '{field_name}'",
            index=index,
            accepted=accepted,
        )
    return value.strip()


def candidate_from_entry(entry: Mapping[str, Any], index: int = 0, accepted: int = 0) -> tuple[str, Candidate]:
    """Validate one ingestion record and build its (key, Candidate)."""
    if not isinstance(entry, Mapping):
        raise VocabularyValidationError(
            f"Entry {index}: expected an object", index=index, accepted=accepted,
        )
    word = _require(entry, "word", index, accepted)
    synonym = _require(entry, "synonym", index, accepted)
    examples = entry.get("examples") or []
    if isinstance(examples, str):
        examples = [examples]
    return word.lower(), Candidate(
        word=synonym,
        pos=entry.get("pos") or "unknown",
        domain=entry.get("domain") or "general",
        definition=entry.get("definition") or "",
        examples=tuple(str(e) for e in examples),
    )


class VocabularyStore:
    """Builtin lexicon plus a mutable custom map."""

    def __init__(self, builtin: Optional[Mapping[str, Iterable[Candidate]]] = None):
        source = VOCABULARY if builtin is None else builtin
        self._builtin: dict[str, tuple[Candidate, ...]] = {
            key.lower(): tuple(candidates) for key, candidates in source.items()
        }
        self._custom: dict[str, tuple[Candidate, ...]] = {}
        self._write_lock = asyncio.Lock()

    def lookup(self, word: str) -> list[Candidate]:
        """Candidates for word: builtin first, then custom."""
        key = word.lower()
        custom = self._custom  # snapshot
        return [*self._builtin.get(key, ()), *custom.get(key, ())]

    def has(self, word: str) -> bool:
        key = word.lower()
        return key in self._builtin or key in self._custom

    def builtin_words(self) -> list[str]:
        return list(self._builtin)

    def custom_words(self) -> list[str]:
        return list(self._custom)

    def all_candidates(self, include_custom: bool = True) -> list[tuple[str, Candidate]]:
        """Every (simple word, candidate) pair, builtin first."""
        pairs = [(w, c) for w, cs in self._builtin.items() for c in cs]
        if include_custom:
            pairs.extend((w, c) for w, cs in self._custom.items() for c in cs)
        return pairs

    @property
    def custom_size(self) -> int:
        return len(self._custom)

    def words_in_text(self, text: str) -> list[str]:
        """Distinct vocabulary keys found in text, in order of first appearance."""
        found: dict[str, None] = {}
        for token in text.split():
            key = lookup_key(token)
            if key and self.has(key):
                found.setdefault(key, None)
        return list(found)

    async def add_custom(
        self,
        entries: Iterable[Mapping[str, Any]],
        on_added: Optional[Callable[[str], Awaitable[object]]] = None,
    ) -> int:
        """
        Ingest custom entries in order. Returns the number accepted.

        An invalid entry raises VocabularyValidationError; entries
        accepted before it stay in the store.
        """
        accepted = 0
        async with self._write_lock:
            for index, entry in enumerate(entries):
                key, candidate = candidate_from_entry(entry, index, accepted)

                updated = dict(self._custom)
                updated[key] = updated.get(key, ()) + (candidate,)
                self._custom = updated
                accepted += 1

                if on_added is not None:
                    await on_added(candidate.word)

        logger.info("Custom vocabulary added", extra={"count": accepted})
        return accepted

    async def clear_custom(self) -> None:
        """Drop every custom entry. Caches are untouched."""
        async with self._write_lock:
            self._custom = {}
        logger.info("Custom vocabulary cleared")


# ============================================================
# CSV IMPORT
# ============================================================

_WORD_HEADERS = ("word", "simple")
_SYNONYM_HEADERS = ("synonym", "complex", "replacement")
_DEFINITION_HEADERS = ("definition", "def")


def _column(header: list[str], names: tuple[str, ...]) -> int:
    for i, h in enumerate(header):
        if h in names:
            return i
    return -1


def parse_vocabulary_csv(text: str) -> list[dict]:
    """
    Parse a vocabulary CSV into ingestion records.

    Expected columns: Word, Synonym (optional: Definition). Rows
    missing a word or synonym are skipped.
    """
    rows = list(csv.reader(io.StringIO(text.strip())))
    if len(rows) < 2:
        return []

    header = [h.strip().lower() for h in rows[0]]
    word_idx = _column(header, _WORD_HEADERS)
    synonym_idx = _column(header, _SYNONYM_HEADERS)
    def_idx = _column(header, _DEFINITION_HEADERS)

    if word_idx == -1 or synonym_idx == -1:
        raise VocabularyValidationError('CSV must have "Word" and "Synonym" columns')

    def cell(row: list[str], idx: int) -> str:
        return row[idx].strip() if 0 <= idx < len(row) else ""

    records = []
    for row in rows[1:]:
        word = cell(row, word_idx)
        synonym = cell(row, synonym_idx)
        if not word or not synonym:
            continue
        records.append({
            "word": word.lower(),
            "synonym": synonym,
            "definition": cell(row, def_idx),
            "examples": [],
        })
    return records
