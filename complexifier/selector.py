"""
Selector — Per-Word and Document-Level Substitution Selection

Per word: keep the passing candidate with the highest syntax score.
Per document: rank all per-word winners by syntax score, keep as many
as the density budget allows, and rewrite the first occurrence of each.

Selection is deterministic: ranking uses a stable sort, so ties keep
the order in which words were first seen in the text.
"""

from __future__ import annotations

import math
import re
from collections.abc import Iterable
from dataclasses import asdict, dataclass, field
from typing import Optional

from diff_match_patch import diff_match_patch

from complexifier.policy import SubstitutionResult

_dmp = diff_match_patch()


@dataclass(frozen=True)
class AppliedSubstitution:
    original: str
    replacement: str
    similarity: float
    syntax_score: float
    semantic_score: float

    @classmethod
    def from_result(cls, result: SubstitutionResult) -> "AppliedSubstitution":
        return cls(
            original=result.original,
            replacement=result.candidate,
            similarity=result.similarity,
            syntax_score=result.syntax_score,
            semantic_score=result.semantic_score,
        )


@dataclass
class DocumentResult:
    original_text: str
    modified_text: str
    substitutions: list[AppliedSubstitution] = field(default_factory=list)
    substitutions_attempted: int = 0
    diff_spans: list[dict] = field(default_factory=list)
    total_time_ms: float = 0.0

    @property
    def substitutions_made(self) -> int:
        return len(self.substitutions)

    def to_dict(self) -> dict:
        data = asdict(self)
        data["substitutions_made"] = self.substitutions_made
        return data


# ============================================================
# PER-WORD
# ============================================================

def pick_best(results: Iterable[SubstitutionResult]) -> Optional[SubstitutionResult]:
    """Highest-syntax passing result; the first one seen wins ties."""
    best = None
    for result in results:
        if not result.passed:
            continue
        if best is None or result.syntax_score > best.syntax_score:
            best = result
    return best


# ============================================================
# DOCUMENT
# ============================================================

def tokenize(text: str) -> list[str]:
    return text.split()


def density_budget(token_count: int, max_density: float) -> int:
    """Maximum substitutions for a document: max(1, ceil(n * d))."""
    if not 0 < max_density <= 1:
        raise ValueError(f"max_density must be in (0, 1], got {max_density}")
    return max(1, math.ceil(token_count * max_density))


def rank_winners(winners: list[SubstitutionResult], budget: int) -> list[SubstitutionResult]:
    """Top `budget` winners by syntax score, stable on ties."""
    ranked = sorted(winners, key=lambda r: r.syntax_score, reverse=True)
    return ranked[:budget]


def apply_substitutions(
    text: str,
    selected: Iterable[SubstitutionResult],
) -> tuple[str, list[AppliedSubstitution]]:
    """
    Apply substitutions in order to a working copy of text.

    Each replaces the first whole-word occurrence of its original with
    the candidate verbatim. One whose original no longer occurs is
    skipped and not reported.
    """
    modified = text
    applied = []
    for result in selected:
        pattern = re.compile(rf"\b{re.escape(result.original)}\b", re.IGNORECASE)
        modified, count = pattern.subn(lambda _, rep=result.candidate: rep, modified, count=1)
        if count:
            applied.append(AppliedSubstitution.from_result(result))
    return modified, applied


def compute_diff_spans(original: str, modified: str) -> list[dict]:
    """
    Character spans of what changed between original and modified text.

    Uses diff-match-patch. Returns spans with type (equal/delete/insert),
    text, and positions in both texts.
    """
    diffs = _dmp.diff_main(original, modified)
    _dmp.diff_cleanupSemantic(diffs)

    spans = []
    orig_pos = 0
    mod_pos = 0

    for op, text in diffs:
        if op == 0:  # EQUAL
            spans.append({
                "type": "equal",
                "text": text,
                "orig_start": orig_pos,
                "orig_end": orig_pos + len(text),
                "mod_start": mod_pos,
                "mod_end": mod_pos + len(text),
            })
            orig_pos += len(text)
            mod_pos += len(text)
        elif op == -1:  # DELETE
            spans.append({
                "type": "delete",
                "text": text,
                "orig_start": orig_pos,
                "orig_end": orig_pos + len(text),
            })
            orig_pos += len(text)
        elif op == 1:  # INSERT
            spans.append({
                "type": "insert",
                "text": text,
                "mod_start": mod_pos,
                "mod_end": mod_pos + len(text),
            })
            mod_pos += len(text)

    return spans
