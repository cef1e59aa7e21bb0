"""Entity resolution for extracted mentions.

Submodules:
- similarity: label similarity scoring (normalize, containment, plural, Levenshtein)
- strategies: ordered resolution steps (exact identifier, fuzzy label)
- resolver: pipeline orchestrator and batch API
- classifier: verdict -> suggestion state contract
- intake: extraction output -> validated candidates
- audit: resolution audit records
"""

from catalog_resolver.resolution.audit import (
    AuditedSuggestion,
    ResolutionAuditEntry,
    audit_entry_for,
)
from catalog_resolver.resolution.classifier import (
    BlockingPolicy,
    Suggestion,
    VerdictClassifier,
    can_submit,
    classify_verdict,
    persistable_links,
)
from catalog_resolver.resolution.intake import candidates_from_extraction, parse_candidates
from catalog_resolver.resolution.resolver import EntityResolver, resolve
from catalog_resolver.resolution.similarity import (
    SimilarityResult,
    SimilarityScorer,
    is_match,
    score_labels,
    similarity,
)
from catalog_resolver.resolution.strategies import (
    ExactIdentifierStrategy,
    FuzzyLabelStrategy,
    ResolutionStrategy,
)

__all__ = [
    "AuditedSuggestion",
    "BlockingPolicy",
    "EntityResolver",
    "ExactIdentifierStrategy",
    "FuzzyLabelStrategy",
    "ResolutionAuditEntry",
    "ResolutionStrategy",
    "SimilarityResult",
    "SimilarityScorer",
    "Suggestion",
    "VerdictClassifier",
    "audit_entry_for",
    "can_submit",
    "candidates_from_extraction",
    "classify_verdict",
    "is_match",
    "parse_candidates",
    "persistable_links",
    "resolve",
    "score_labels",
    "similarity",
]
