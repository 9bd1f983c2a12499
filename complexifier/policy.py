"""
Decision Policy — Gate Chain for One Substitution

Judges a single (sentence, original, candidate) triple. Gates run in a
fixed order and short-circuit: the first gate to return a BlockReason
ends the evaluation, and the result carries whatever scores were
computed up to that point (0 for the rest).

    1. ready        providers loaded            MODEL_NOT_READY
    2. antonym      opposite meaning            ANTONYM_DETECTED
    3. similarity   embedding band [MIN, MAX]   NOT_SIMILAR_ENOUGH / TOO_SIMILAR
    4. proper noun  part of a name              PROPER_NOUN
    5. idiom        inside a fixed phrase       IDIOM_DETECTED
    6. negation     negated or diminished       NEGATION_CONTEXT
    7. scoring      syntax + semantic scores, then verdict()

There are no retries. Every outcome is returned, never raised.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Awaitable, Callable
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Optional

from complexifier.config import Settings, settings as default_settings
from complexifier.guards import check_idiom, check_negation, check_proper_noun, is_antonym
from complexifier.lexicon import Candidate
from complexifier.scorers import EmbeddingScorer, SemanticScorer, SentenceContext, SyntaxScorer

logger = logging.getLogger(__name__)


class BlockReason(str, Enum):
    PASSED = "PASSED"
    ANTONYM_DETECTED = "ANTONYM_DETECTED"
    NOT_SIMILAR_ENOUGH = "NOT_SIMILAR_ENOUGH"
    TOO_SIMILAR = "TOO_SIMILAR"
    PROPER_NOUN = "PROPER_NOUN"
    IDIOM_DETECTED = "IDIOM_DETECTED"
    NEGATION_CONTEXT = "NEGATION_CONTEXT"
    SYNTAX_FAILED = "SYNTAX_FAILED"
    SEMANTIC_FAILED = "SEMANTIC_FAILED"
    MODEL_NOT_READY = "MODEL_NOT_READY"


@dataclass(frozen=True)
class SubstitutionResult:
    """Outcome of one candidate evaluation. Never mutated after creation."""

    original: str
    candidate: str
    passed: bool
    reason: BlockReason
    similarity: float = 0.0
    syntax_score: float = 0.0
    semantic_score: float = 0.0
    time_ms: float = 0.0

    def to_dict(self) -> dict:
        data = asdict(self)
        data["reason"] = self.reason.value
        return data


def verdict(syntax_score: float, semantic_score: float, settings: Settings = default_settings) -> BlockReason:
    """
    Combine syntax and semantic scores.

    A candidate that fits the slot needs only modest semantic support.
    One that does not fit can still pass on strong semantic evidence.
    """
    if syntax_score > settings.SYNTAX_FLOOR:
        if semantic_score > settings.SEMANTIC_FLOOR:
            return BlockReason.PASSED
        return BlockReason.SEMANTIC_FAILED
    if semantic_score > settings.SEMANTIC_OVERRIDE:
        return BlockReason.PASSED
    return BlockReason.SYNTAX_FAILED


# ============================================================
# GATES
# ============================================================

@dataclass
class Evaluation:
    """Mutable state threaded through the gate chain."""

    context: SentenceContext
    original: str
    candidate: Candidate
    target: str = ""
    similarity: float = 0.0
    syntax_score: float = 0.0
    semantic_score: float = 0.0

    @property
    def sentence(self) -> str:
        return self.context.text


Gate = Callable[["DecisionPolicy", Evaluation], Awaitable[Optional[BlockReason]]]


async def ready_gate(policy: "DecisionPolicy", ev: Evaluation) -> Optional[BlockReason]:
    if not policy.is_ready:
        return BlockReason.MODEL_NOT_READY
    return None


async def antonym_gate(policy: "DecisionPolicy", ev: Evaluation) -> Optional[BlockReason]:
    if is_antonym(ev.original, ev.candidate.word):
        return BlockReason.ANTONYM_DETECTED
    return None


async def similarity_gate(policy: "DecisionPolicy", ev: Evaluation) -> Optional[BlockReason]:
    ev.similarity = await policy.embeddings.similarity(ev.original, ev.candidate.word)
    if ev.similarity < policy.settings.EMBEDDING_MIN:
        return BlockReason.NOT_SIMILAR_ENOUGH
    if ev.similarity > policy.settings.EMBEDDING_MAX:
        return BlockReason.TOO_SIMILAR
    return None


async def proper_noun_gate(policy: "DecisionPolicy", ev: Evaluation) -> Optional[BlockReason]:
    check = check_proper_noun(ev.sentence, ev.original)
    if check.is_proper_noun:
        return BlockReason.PROPER_NOUN
    return None


async def idiom_gate(policy: "DecisionPolicy", ev: Evaluation) -> Optional[BlockReason]:
    check = check_idiom(ev.sentence, ev.original)
    if check.is_idiom:
        return BlockReason.IDIOM_DETECTED
    return None


async def negation_gate(policy: "DecisionPolicy", ev: Evaluation) -> Optional[BlockReason]:
    check = check_negation(ev.sentence, ev.original, policy.settings.NEGATION_WINDOW)
    if check.is_negated:
        return BlockReason.NEGATION_CONTEXT
    ev.target = check.expanded
    return None


async def scoring_gate(policy: "DecisionPolicy", ev: Evaluation) -> Optional[BlockReason]:
    ev.syntax_score = await policy.syntax.score(ev.sentence, ev.target, ev.candidate.word)
    ev.semantic_score = await policy.semantic.score(ev.context, ev.candidate, ev.similarity)
    return verdict(ev.syntax_score, ev.semantic_score, policy.settings)


GATES: tuple[Gate, ...] = (
    ready_gate,
    antonym_gate,
    similarity_gate,
    proper_noun_gate,
    idiom_gate,
    negation_gate,
    scoring_gate,
)


class DecisionPolicy:
    """Runs the gate chain for one candidate at a time."""

    def __init__(
        self,
        embeddings: EmbeddingScorer,
        syntax: SyntaxScorer,
        semantic: SemanticScorer,
        settings: Settings = default_settings,
        gates: tuple[Gate, ...] = GATES,
    ):
        self.embeddings = embeddings
        self.syntax = syntax
        self.semantic = semantic
        self.settings = settings
        self.gates = gates

    @property
    def is_ready(self) -> bool:
        return self.embeddings.provider.is_ready and self.syntax.predictor.is_ready

    async def evaluate(
        self,
        context: SentenceContext,
        original: str,
        candidate: Candidate,
    ) -> SubstitutionResult:
        start = time.perf_counter()
        ev = Evaluation(context=context, original=original, candidate=candidate, target=original)

        reason = BlockReason.PASSED
        for gate in self.gates:
            outcome = await gate(self, ev)
            if outcome is not None:
                reason = outcome
                break

        result = SubstitutionResult(
            original=original,
            candidate=candidate.word,
            passed=reason is BlockReason.PASSED,
            reason=reason,
            similarity=ev.similarity,
            syntax_score=ev.syntax_score,
            semantic_score=ev.semantic_score,
            time_ms=round((time.perf_counter() - start) * 1000, 2),
        )

        logger.debug(
            "Candidate %s -> %s: %s", original, candidate.word, reason.value,
            extra={
                "original": original,
                "candidate": candidate.word,
                "reason": reason.value,
                "similarity": round(ev.similarity, 4),
                "syntax_score": round(ev.syntax_score, 4),
                "semantic_score": round(ev.semantic_score, 4),
            },
        )
        return result
