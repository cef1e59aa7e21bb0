"""Resolution strategies tried in order by the resolver.

Each strategy inspects one candidate against its scoped candidate pool and
either returns a verdict (which ends resolution for that candidate) or None
to hand over to the next strategy. New strategies (e.g. alias tables) slot
into the list without touching the others.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Protocol

from catalog_resolver.models.candidate import CandidateReference
from catalog_resolver.models.catalog import CatalogEntry
from catalog_resolver.models.enums import ResolutionSource
from catalog_resolver.models.verdict import ResolutionVerdict, VerdictCandidate
from catalog_resolver.resolution.similarity import SimilarityResult, SimilarityScorer

logger = logging.getLogger(__name__)


class ResolutionStrategy(Protocol):
    """One step of the resolution pipeline."""

    name: str

    def attempt(
        self,
        candidate: CandidateReference,
        pool: Sequence[CatalogEntry],
    ) -> ResolutionVerdict | None:
        """Return a verdict, or None to defer to the next strategy."""
        ...


class ExactIdentifierStrategy:
    """Step 1: link by the identifier the extractor already knew.

    Runs only when ``raw_value`` is present and not a ghost placeholder. A hit
    is final: label mismatches never override an exact identifier.
    """

    name = "exact_identifier"

    def __init__(self, *, ghost_prefix: str = "ghost-") -> None:
        self._ghost_prefix = ghost_prefix

    def is_lookup_value(self, raw_value: str | None) -> bool:
        """Check whether a raw value is a real identifier worth looking up."""
        if raw_value is None or not raw_value.strip():
            return False
        if self._ghost_prefix and raw_value.startswith(self._ghost_prefix):
            return False
        return True

    def attempt(
        self,
        candidate: CandidateReference,
        pool: Sequence[CatalogEntry],
    ) -> ResolutionVerdict | None:
        raw_value = candidate.raw_value
        if not self.is_lookup_value(raw_value):
            return None

        for entry in pool:
            if entry.has_id(raw_value):
                logger.debug(
                    "Exact id match: %s %r -> %s",
                    candidate.kind.value,
                    raw_value,
                    entry.id,
                )
                return ResolutionVerdict.resolved(
                    candidate.kind,
                    entry.id,
                    source=ResolutionSource.EXACT,
                    confidence=1.0,
                )

        logger.debug(
            "raw_value %r not found among %d scoped %s entries",
            raw_value,
            len(pool),
            candidate.kind.value,
        )
        return None


class FuzzyLabelStrategy:
    """Steps 2 and 3: label similarity against every scoped entry.

    - One entry above threshold: resolved with a flat confidence
    - Several: ambiguous, best first, ties in catalog order
    - None: defer (the resolver reports missing)
    """

    name = "fuzzy_label"

    def __init__(
        self,
        *,
        scorer: SimilarityScorer | None = None,
        confidence: float = 0.85,
    ) -> None:
        """Initialize the strategy.

        Args:
            scorer: Similarity scorer carrying the match threshold.
            confidence: Confidence reported for a single fuzzy match.
        """
        if not 0.0 <= confidence <= 1.0:
            msg = f"Fuzzy confidence must be within [0, 1], got {confidence}"
            raise ValueError(msg)
        self._scorer = scorer or SimilarityScorer()
        self._confidence = confidence

    def attempt(
        self,
        candidate: CandidateReference,
        pool: Sequence[CatalogEntry],
    ) -> ResolutionVerdict | None:
        matches: list[tuple[CatalogEntry, SimilarityResult]] = []
        for entry in pool:
            result = self._scorer.compute(candidate.label, entry.label)
            if self._scorer.passes(result):
                matches.append((entry, result))

        if not matches:
            return None

        # Stable sort keeps catalog order among equal scores
        matches.sort(key=lambda m: m[1].score, reverse=True)

        if len(matches) == 1:
            entry, result = matches[0]
            logger.debug(
                "Fuzzy match: %s %r -> %s (score=%.4f rule=%s)",
                candidate.kind.value,
                candidate.label,
                entry.id,
                result.score,
                result.rule.value,
            )
            return ResolutionVerdict.resolved(
                candidate.kind,
                entry.id,
                source=ResolutionSource.FUZZY,
                confidence=self._confidence,
            )

        logger.debug(
            "Ambiguous: %s %r matched %d entries (best=%.4f)",
            candidate.kind.value,
            candidate.label,
            len(matches),
            matches[0][1].score,
        )
        return ResolutionVerdict.ambiguous(
            candidate.kind,
            [
                VerdictCandidate(id=entry.id, label=entry.label, entity_type=entry.entity_type)
                for entry, _ in matches
            ],
            confidence=matches[0][1].score,
        )
