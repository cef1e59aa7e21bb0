"""Lexical similarity scoring between mention labels and catalog labels.

Rules are evaluated in precedence order; the first that applies decides the
score and is recorded on the result so a match can be explained later:

1. EXACT: equal after normalization -> 1.0
2. CONTAINMENT: one normalized label is a non-empty substring of the other
   -> 1.0 ("Kitchen" vs "Kitchen - Main House")
3. PLURAL: both non-empty and adding/removing a trailing "s" makes them
   equal -> 1.0
4. EDIT_DISTANCE: 1 - levenshtein(a, b) / max(len(a), len(b))

Edge cases:
- Case or punctuation/whitespace differences alone are EXACT.
- Disjoint strings of equal length score 0.0.
- Two empty strings are EXACT (1.0); empty mention labels are rejected
  before resolution, so this only matters for direct callers.
- An empty label against a non-empty one scores 0.0, so a catalog entry
  whose label normalizes to "" (e.g. "--") never matches a mention.
"""

from __future__ import annotations

from dataclasses import dataclass

from rapidfuzz.distance import Levenshtein

from catalog_resolver.models.enums import MatchRule
from catalog_resolver.utils.normalize import normalize

DEFAULT_MATCH_THRESHOLD = 0.8


@dataclass(frozen=True)
class SimilarityResult:
    """Similarity between two labels and the rule that produced it."""

    score: float
    """Similarity in [0, 1], higher = more similar."""

    rule: MatchRule
    """Heuristic that decided the score."""


def _check_threshold(threshold: float) -> None:
    if not 0.0 <= threshold <= 1.0:
        msg = f"Similarity threshold must be within [0, 1], got {threshold}"
        raise ValueError(msg)


def _is_plural_pair(a: str, b: str) -> bool:
    if not a or not b:
        return False
    return a + "s" == b or b + "s" == a


def score_labels(a: str, b: str) -> SimilarityResult:
    """Compute similarity between two raw labels.

    Both labels are normalized first.

    Args:
        a: First label (e.g. the extracted mention).
        b: Second label (e.g. a catalog entry label).

    Returns:
        SimilarityResult with score and deciding rule.
    """
    norm_a = normalize(a)
    norm_b = normalize(b)

    if norm_a == norm_b:
        return SimilarityResult(score=1.0, rule=MatchRule.EXACT)

    if norm_a and norm_b and (norm_a in norm_b or norm_b in norm_a):
        return SimilarityResult(score=1.0, rule=MatchRule.CONTAINMENT)

    if _is_plural_pair(norm_a, norm_b):
        return SimilarityResult(score=1.0, rule=MatchRule.PLURAL)

    # norm_a != norm_b here, so at least one is non-empty
    longest = max(len(norm_a), len(norm_b))
    distance = Levenshtein.distance(norm_a, norm_b)
    return SimilarityResult(score=1.0 - distance / longest, rule=MatchRule.EDIT_DISTANCE)


def similarity(a: str, b: str) -> float:
    """Similarity score in [0, 1] between two labels."""
    return score_labels(a, b).score


def is_match(a: str, b: str, threshold: float = DEFAULT_MATCH_THRESHOLD) -> bool:
    """Check whether two labels refer to the same thing lexically.

    Args:
        a: First label.
        b: Second label.
        threshold: Minimum similarity to count as a match. Raise it for
            entity types where a false link is costly.

    Returns:
        True iff similarity >= threshold.

    Raises:
        ValueError: If threshold is outside [0, 1].
    """
    _check_threshold(threshold)
    return similarity(a, b) >= threshold


class SimilarityScorer:
    """Scores labels against a fixed match threshold.

    Usage:
        scorer = SimilarityScorer(threshold=0.8)
        result = scorer.compute("kitchen", "Kitchen")
        scorer.passes(result)  # True
    """

    def __init__(self, threshold: float = DEFAULT_MATCH_THRESHOLD) -> None:
        """Initialize the scorer.

        Args:
            threshold: Minimum similarity for a match.
        """
        _check_threshold(threshold)
        self._threshold = threshold

    @property
    def threshold(self) -> float:
        return self._threshold

    def compute(self, a: str, b: str) -> SimilarityResult:
        """Compute similarity between two labels."""
        return score_labels(a, b)

    def passes(self, result: SimilarityResult) -> bool:
        """Check a result against this scorer's threshold."""
        return result.score >= self._threshold
