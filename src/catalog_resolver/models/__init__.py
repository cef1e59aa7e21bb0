"""Data model for catalog resolution."""

from catalog_resolver.models.candidate import (
    AssetReference,
    CandidateReference,
    CategoryReference,
    PersonReference,
    PropertyReference,
    SpaceReference,
    TeamReference,
    parse_candidate,
)
from catalog_resolver.models.catalog import CatalogEntry, CatalogSnapshot, ResolutionContext
from catalog_resolver.models.enums import (
    EntityType,
    MatchRule,
    ResolutionSource,
    SuggestionState,
    VerdictStatus,
)
from catalog_resolver.models.verdict import ResolutionVerdict, VerdictCandidate

__all__ = [
    "AssetReference",
    "CandidateReference",
    "CatalogEntry",
    "CatalogSnapshot",
    "CategoryReference",
    "EntityType",
    "MatchRule",
    "PersonReference",
    "PropertyReference",
    "ResolutionContext",
    "ResolutionSource",
    "ResolutionVerdict",
    "SpaceReference",
    "SuggestionState",
    "TeamReference",
    "VerdictCandidate",
    "VerdictStatus",
    "parse_candidate",
]
