"""Verdict classification into UI-facing suggestion states.

Mapping:
- resolved                          -> FACT (auto-applied, removable, never blocks)
- ambiguous/missing, blocking type  -> ACTION (must be settled before saving,
                                       never persisted as metadata)
- ambiguous/missing, non-blocking   -> SUGGESTION (may be ignored)

Rendering is the caller's concern; this module only fixes the contract.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from catalog_resolver.config import settings
from catalog_resolver.models.enums import EntityType, SuggestionState, VerdictStatus
from catalog_resolver.models.verdict import ResolutionVerdict, VerdictCandidate


@dataclass(frozen=True)
class Suggestion:
    """A classified verdict."""

    state: SuggestionState
    verdict: ResolutionVerdict

    @property
    def blocks_submission(self) -> bool:
        return self.state == SuggestionState.ACTION

    @property
    def persistable(self) -> bool:
        """Only resolved facts may be saved as links."""
        return self.state == SuggestionState.FACT

    @property
    def requires_choice(self) -> bool:
        """The user has to pick among candidates."""
        return self.verdict.status == VerdictStatus.AMBIGUOUS

    @property
    def requires_creation(self) -> bool:
        """The user has to create the entity (or drop the mention)."""
        return self.verdict.status == VerdictStatus.MISSING

    @property
    def choices(self) -> tuple[VerdictCandidate, ...]:
        return self.verdict.candidates


def classify_verdict(verdict: ResolutionVerdict, blocking_required: bool) -> Suggestion:
    """Classify one verdict.

    Args:
        verdict: Output of the resolver.
        blocking_required: Whether an unresolved entity of this type must
            halt submission of the surrounding record.

    Returns:
        Suggestion with its UI state.
    """
    if verdict.status == VerdictStatus.RESOLVED:
        return Suggestion(state=SuggestionState.FACT, verdict=verdict)
    if blocking_required:
        return Suggestion(state=SuggestionState.ACTION, verdict=verdict)
    return Suggestion(state=SuggestionState.SUGGESTION, verdict=verdict)


@dataclass(frozen=True)
class BlockingPolicy:
    """Which entity types block submission while unresolved."""

    blocking_types: frozenset[EntityType]

    @classmethod
    def from_settings(cls) -> BlockingPolicy:
        return cls(blocking_types=frozenset(settings.resolution_blocking_entity_types))

    def is_blocking(self, entity_type: EntityType) -> bool:
        return EntityType(entity_type) in self.blocking_types


class VerdictClassifier:
    """Classifies verdicts using a per-entity-type blocking policy.

    Usage:
        classifier = VerdictClassifier()
        suggestions = classifier.classify_all(verdicts)
        if not can_submit(suggestions):
            ...
    """

    def __init__(self, policy: BlockingPolicy | None = None) -> None:
        self._policy = policy or BlockingPolicy.from_settings()

    @property
    def policy(self) -> BlockingPolicy:
        return self._policy

    def classify(self, verdict: ResolutionVerdict) -> Suggestion:
        return classify_verdict(verdict, self._policy.is_blocking(verdict.entity_type))

    def classify_all(self, verdicts: Iterable[ResolutionVerdict]) -> list[Suggestion]:
        return [self.classify(v) for v in verdicts]


def can_submit(suggestions: Iterable[Suggestion]) -> bool:
    """Check that no suggestion blocks submission."""
    return not any(s.blocks_submission for s in suggestions)


def persistable_links(verdicts: Iterable[ResolutionVerdict]) -> list[tuple[EntityType, str]]:
    """Get ``(entity_type, entity_id)`` pairs safe to store as links.

    Ambiguous and missing verdicts never yield a link.
    """
    links: list[tuple[EntityType, str]] = []
    for verdict in verdicts:
        if verdict.status == VerdictStatus.RESOLVED and verdict.entity_id is not None:
            links.append((verdict.entity_type, verdict.entity_id))
    return links
