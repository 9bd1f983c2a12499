"""
Heuristic Guards — Deterministic Context Checks

Four fast checks that run before any model scoring:
  1. Antonym:     the candidate means the opposite of the original
  2. Idiom:       the word sits inside a fixed phrase ("hot water")
  3. Proper noun: the word is part of a name ("Hot Springs", "Judge Black")
  4. Negation:    a negator or diminisher precedes the word

Guards are pure functions of (sentence, word). They make no provider
calls and only ever look at the FIRST occurrence of the word in the
sentence. Scoring and rewriting share that first-occurrence scope.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from complexifier.lexicon import (
    ANTONYM_PAIRS,
    DIMINISHER_WORDS,
    IDIOMS,
    INTENSIFIER_WORDS,
    NEGATOR_WORDS,
    PROPER_NOUN_PATTERNS,
    TITLE_PATTERNS,
    TOKEN_PUNCTUATION,
)


# ============================================================
# RESULTS
# ============================================================

@dataclass(frozen=True)
class IdiomCheck:
    is_idiom: bool
    meaning: Optional[str] = None


@dataclass(frozen=True)
class ProperNounCheck:
    is_proper_noun: bool
    reason: Optional[str] = None


@dataclass(frozen=True)
class NegationCheck:
    is_negated: bool
    expanded: str  # Phrase to mask for scoring: "word" or "intensifier word"


# ============================================================
# SHARED HELPERS
# ============================================================

def strip_token(token: str) -> str:
    """Strip leading/trailing punctuation from a whitespace token."""
    return token.strip(TOKEN_PUNCTUATION)


def lookup_key(token: str) -> str:
    """Vocabulary key for a token: punctuation stripped, lowercased."""
    return strip_token(token).lower()


def find_first_occurrence(sentence: str, phrase: str) -> Optional[re.Match]:
    """First case-insensitive whole-word occurrence of phrase, or None."""
    if not phrase:
        return None
    pattern = re.compile(rf"\b{re.escape(phrase)}\b", re.IGNORECASE)
    return pattern.search(sentence)


# Title + capitalized word: "Judge Black", "Dr. Strange"
_TITLE_REGEX = re.compile(
    r"\b(?i:" + "|".join(re.escape(t) for t in TITLE_PATTERNS) + r")\.?\s+[A-Z][a-z]+"
)

_SENTENCE_TERMINATORS = (".", "!", "?")


# ============================================================
# GUARDS
# ============================================================

def is_antonym(word_a: str, word_b: str) -> bool:
    """True if the unordered pair is a known antonym pair."""
    return frozenset((word_a.lower(), word_b.lower())) in ANTONYM_PAIRS


def check_idiom(sentence: str, word: str) -> IdiomCheck:
    """Check whether any idiom registered for word appears in the sentence."""
    idioms = IDIOMS.get(word.lower())
    if not idioms:
        return IdiomCheck(is_idiom=False)

    sentence_lower = sentence.lower()
    for idiom in idioms:
        if idiom.phrase in sentence_lower:
            return IdiomCheck(is_idiom=True, meaning=idiom.meaning)

    return IdiomCheck(is_idiom=False)


def check_proper_noun(sentence: str, word: str) -> ProperNounCheck:
    """
    Check whether the first occurrence of word is part of a name.

    Three signals, in order:
      (a) a known proper-noun phrase containing the word is present
      (b) the word falls inside a "Title Name" span
      (c) the word is capitalized mid-sentence
    """
    lower = word.lower()
    sentence_lower = sentence.lower()

    for pattern in PROPER_NOUN_PATTERNS:
        if lower in pattern.split() and pattern in sentence_lower:
            return ProperNounCheck(True, f'Part of "{pattern}"')

    first = find_first_occurrence(sentence, word)
    if first is None:
        return ProperNounCheck(False)

    for match in _TITLE_REGEX.finditer(sentence):
        if match.start() <= first.start() < match.end():
            return ProperNounCheck(True, "Title/name context")

    if sentence[first.start()].isupper():
        # Punctuation-only tokens such as an opening quote are not words
        preceding = [t for t in sentence[:first.start()].split() if strip_token(t)]
        if preceding and not preceding[-1].endswith(_SENTENCE_TERMINATORS):
            return ProperNounCheck(True, "Mid-sentence capitalization")

    return ProperNounCheck(False)


def check_negation(sentence: str, word: str, window: int = 4) -> NegationCheck:
    """
    Inspect the tokens preceding the first occurrence of word.

    A negator or diminisher within the window blocks substitution.
    An intensifier immediately before the word does not block; it is
    folded into the phrase that gets masked for syntax scoring.
    """
    first = find_first_occurrence(sentence, word)
    if first is None:
        return NegationCheck(is_negated=False, expanded=word)

    preceding = sentence[:first.start()].lower().split()[-window:] if window > 0 else []
    cleaned = [strip_token(t) for t in preceding]

    for i, token in enumerate(cleaned):
        if token in NEGATOR_WORDS or token in DIMINISHER_WORDS:
            return NegationCheck(is_negated=True, expanded=word)
        if i > 0 and f"{cleaned[i - 1]} {token}" in DIMINISHER_WORDS:
            return NegationCheck(is_negated=True, expanded=word)

    if cleaned and cleaned[-1] in INTENSIFIER_WORDS:
        return NegationCheck(is_negated=False, expanded=f"{cleaned[-1]} {word}")

    return NegationCheck(is_negated=False, expanded=word)
