"""Intake of extraction output into validated candidate references.

The extraction step (remote model or rule-based fallback) groups its
proposals by kind. This module is the boundary where those loose dicts are
checked and turned into candidates; anything malformed fails here, before
the resolver sees it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from catalog_resolver.errors import ResolutionContractError
from catalog_resolver.models.candidate import CandidateReference, parse_candidate
from catalog_resolver.models.enums import EntityType

logger = logging.getLogger(__name__)

# Extraction group name -> entity type. Themes are categories in the catalog.
GROUP_ENTITY_TYPES: dict[str, EntityType] = {
    "spaces": EntityType.SPACE,
    "people": EntityType.PERSON,
    "teams": EntityType.TEAM,
    "assets": EntityType.ASSET,
    "categories": EntityType.CATEGORY,
    "themes": EntityType.CATEGORY,
    "properties": EntityType.PROPERTY,
}


def candidates_from_extraction(
    grouped: Mapping[str, Iterable[Mapping[str, Any]]],
    *,
    property_id: str | None = None,
    space_id: str | None = None,
) -> list[CandidateReference]:
    """Build candidates from grouped extraction output.

    Args:
        grouped: ``{"spaces": [{"label": "Kitchen", "raw_value": None}], ...}``.
        property_id: Context applied to every candidate that doesn't set its own.
        space_id: Context applied to every candidate that doesn't set its own.

    Returns:
        Candidates in group order, then item order.

    Raises:
        ResolutionContractError: Unknown group name or malformed item.
    """
    candidates: list[CandidateReference] = []

    for group, items in grouped.items():
        entity_type = GROUP_ENTITY_TYPES.get(group)
        if entity_type is None:
            msg = f"Unknown extraction group {group!r}; expected one of {sorted(GROUP_ENTITY_TYPES)}"
            raise ResolutionContractError(msg)

        for item in items:
            if not isinstance(item, Mapping):
                msg = f"Extraction item in {group!r} must be a mapping, got {type(item).__name__}"
                raise ResolutionContractError(msg)

            data = dict(item)
            data["entity_type"] = entity_type.value
            data.setdefault("property_id", property_id)
            data.setdefault("space_id", space_id)
            candidates.append(parse_candidate(data))

    logger.debug("Extraction intake produced %d candidates", len(candidates))
    return candidates


def parse_candidates(payload: Any) -> list[CandidateReference]:
    """Parse either a flat list of candidate dicts or grouped extraction output."""
    if isinstance(payload, Mapping):
        return candidates_from_extraction(payload)
    if isinstance(payload, list):
        return [parse_candidate(item) for item in payload]
    msg = f"Expected a list of candidates or grouped extraction output, got {type(payload).__name__}"
    raise ResolutionContractError(msg)
