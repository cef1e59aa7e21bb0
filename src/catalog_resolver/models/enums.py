"""Enumerations for the resolution data model."""

from enum import Enum


class EntityType(str, Enum):
    """Kinds of catalog records a mention can refer to.

    Type is known before resolution starts; a label is never disambiguated
    across types.
    """

    SPACE = "space"
    PERSON = "person"
    TEAM = "team"
    ASSET = "asset"
    CATEGORY = "category"
    PROPERTY = "property"


class VerdictStatus(str, Enum):
    """Outcome of resolving one candidate reference."""

    RESOLVED = "resolved"  # Linked to exactly one catalog record
    AMBIGUOUS = "ambiguous"  # Several plausible records, caller must ask
    MISSING = "missing"  # No plausible record, caller must offer creation


class ResolutionSource(str, Enum):
    """How a resolved verdict was reached."""

    EXACT = "exact"  # raw_value matched a catalog id
    FUZZY = "fuzzy"  # single label match above threshold


class MatchRule(str, Enum):
    """Which similarity heuristic decided a comparison.

    Rules are evaluated in declaration order; the first that applies wins.
    """

    EXACT = "exact"  # equal after normalization
    CONTAINMENT = "containment"  # one normalized label contains the other
    PLURAL = "plural"  # differ only by a trailing "s"
    EDIT_DISTANCE = "edit_distance"  # Levenshtein ratio


class SuggestionState(str, Enum):
    """UI-facing state of a classified verdict."""

    FACT = "fact"  # auto-applied, removable, never blocks submission
    SUGGESTION = "suggestion"  # optional, the user may ignore it
    ACTION = "action"  # must be settled before the record can be saved
