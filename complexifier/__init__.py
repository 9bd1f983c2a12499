"""
Complexifier — Context-Safe Vocabulary Substitution

Decides which simple words in a text can be swapped for a more
sophisticated synonym without changing what the text says.

Public API:
  - SubstitutionEngine:  Orchestrates vocabulary, guards, scorers and selection
  - VocabularyStore:     Builtin + custom synonym candidates
  - DecisionPolicy:      Gate chain for one (sentence, original, candidate)
  - BlockReason:         Named outcome of a policy evaluation
  - get_embedding_provider / get_mask_predictor: provider factories

Usage:
    from complexifier import SubstitutionEngine
    from complexifier import get_embedding_provider, get_mask_predictor
"""

__version__ = "1.0.0"

from complexifier.engine import ProcessingTimeoutError, SubstitutionEngine
from complexifier.lexicon import Candidate
from complexifier.policy import BlockReason, DecisionPolicy, SubstitutionResult, verdict
from complexifier.providers import EmbeddingProvider, MaskPredictor, Prediction
from complexifier.providers.factory import get_embedding_provider, get_mask_predictor
from complexifier.selector import AppliedSubstitution, DocumentResult
from complexifier.vocabulary import (
    VocabularyStore,
    VocabularyValidationError,
    parse_vocabulary_csv,
)

__all__ = [
    "SubstitutionEngine",
    "ProcessingTimeoutError",
    "Candidate",
    "BlockReason",
    "DecisionPolicy",
    "SubstitutionResult",
    "verdict",
    "EmbeddingProvider",
    "MaskPredictor",
    "Prediction",
    "get_embedding_provider",
    "get_mask_predictor",
    "AppliedSubstitution",
    "DocumentResult",
    "VocabularyStore",
    "VocabularyValidationError",
    "parse_vocabulary_csv",
]
