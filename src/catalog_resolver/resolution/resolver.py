"""Main resolution pipeline.

Algorithm overview, per candidate (first decision wins):
1. Exact identifier: raw_value matches a scoped catalog id -> resolved/exact
2. Fuzzy label: exactly one scoped entry above threshold -> resolved/fuzzy
3. Ambiguous: two or more above threshold -> ambiguous, best first
4. Missing: nothing above threshold -> missing

The pipeline is a pure function of (candidate, snapshot): no randomness, no
clock, no I/O. Re-resolving after a catalog change can only differ because
the catalog changed.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable, Sequence

from catalog_resolver.config import settings
from catalog_resolver.errors import ResolutionContractError
from catalog_resolver.models.candidate import CandidateReference, is_candidate
from catalog_resolver.models.catalog import CatalogSnapshot
from catalog_resolver.models.verdict import ResolutionVerdict
from catalog_resolver.resolution.similarity import SimilarityScorer
from catalog_resolver.resolution.strategies import (
    ExactIdentifierStrategy,
    FuzzyLabelStrategy,
    ResolutionStrategy,
)

logger = logging.getLogger(__name__)


class EntityResolver:
    """Resolves candidate references against a catalog snapshot.

    Usage:
        resolver = EntityResolver()
        verdict = resolver.resolve(candidate, snapshot)
        verdicts = resolver.resolve_batch(candidates, snapshot)
    """

    def __init__(
        self,
        *,
        fuzzy_threshold: float | None = None,
        fuzzy_confidence: float | None = None,
        ghost_prefix: str | None = None,
        strategies: Sequence[ResolutionStrategy] | None = None,
    ) -> None:
        """Initialize the resolver.

        Args:
            fuzzy_threshold: Minimum label similarity (default from config).
            fuzzy_confidence: Confidence for a single fuzzy match (default from config).
            ghost_prefix: Placeholder id prefix skipped by exact lookup (default from config).
            strategies: Custom ordered strategy list. Replaces the default
                exact-then-fuzzy pair, so the threshold/confidence/prefix
                arguments are ignored when given.
        """
        if fuzzy_threshold is None:
            fuzzy_threshold = settings.resolution_fuzzy_threshold
        if fuzzy_confidence is None:
            fuzzy_confidence = settings.resolution_fuzzy_confidence
        if ghost_prefix is None:
            ghost_prefix = settings.resolution_ghost_prefix

        if strategies is None:
            strategies = (
                ExactIdentifierStrategy(ghost_prefix=ghost_prefix),
                FuzzyLabelStrategy(
                    scorer=SimilarityScorer(threshold=fuzzy_threshold),
                    confidence=fuzzy_confidence,
                ),
            )
        self._strategies: tuple[ResolutionStrategy, ...] = tuple(strategies)

    @property
    def strategies(self) -> tuple[ResolutionStrategy, ...]:
        return self._strategies

    def resolve(
        self,
        candidate: CandidateReference,
        snapshot: CatalogSnapshot,
    ) -> ResolutionVerdict:
        """Resolve one candidate reference.

        Args:
            candidate: A validated candidate (see ``parse_candidate``).
            snapshot: Catalog snapshot for the candidate's organization.

        Returns:
            The verdict from the first strategy that decides, else missing.

        Raises:
            ResolutionContractError: candidate or snapshot is malformed.
        """
        self._check_inputs(candidate, snapshot)

        pool = snapshot.find_candidates(candidate.kind, candidate.context)

        for strategy in self._strategies:
            verdict = strategy.attempt(candidate, pool)
            if verdict is not None:
                return verdict

        logger.debug(
            "Missing: %s %r (no match among %d scoped entries)",
            candidate.kind.value,
            candidate.label,
            len(pool),
        )
        return ResolutionVerdict.missing(candidate.kind)

    def resolve_batch(
        self,
        candidates: Iterable[CandidateReference],
        snapshot: CatalogSnapshot,
    ) -> list[ResolutionVerdict]:
        """Resolve many candidates against the same snapshot.

        Candidates are independent; verdicts come back in input order.
        """
        if not isinstance(snapshot, CatalogSnapshot):
            raise ResolutionContractError("A catalog snapshot is required")

        verdicts = [self.resolve(candidate, snapshot) for candidate in candidates]

        counts = Counter(v.status.value for v in verdicts)
        logger.info(
            "Resolved batch of %d candidates for org %s: %s",
            len(verdicts),
            snapshot.organization_id,
            dict(sorted(counts.items())),
        )
        return verdicts

    def _check_inputs(self, candidate: object, snapshot: object) -> None:
        if not isinstance(snapshot, CatalogSnapshot):
            raise ResolutionContractError("A catalog snapshot is required")
        if not is_candidate(candidate):
            msg = (
                f"Expected a validated candidate reference, got {type(candidate).__name__}; "
                "use parse_candidate() at the boundary"
            )
            raise ResolutionContractError(msg)


def resolve(candidate: CandidateReference, snapshot: CatalogSnapshot) -> ResolutionVerdict:
    """Resolve one candidate with the configured defaults."""
    return EntityResolver().resolve(candidate, snapshot)
