"""Catalog snapshot: the read-only view of an organization's known entities.

The storage layer owns and mutates the catalog. The resolver only ever sees
an immutable snapshot taken before a batch starts, so every candidate in the
batch observes the same catalog state.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from catalog_resolver.models.enums import EntityType


class CatalogEntry(BaseModel):
    """One known entity belonging to an organization."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    entity_type: EntityType
    label: str
    property_id: str | None = None
    """Property the entry belongs to. None means not property-scoped."""

    space_id: str | None = None
    """Space the entry sits in. None means not space-scoped."""

    alternate_ids: tuple[str, ...] = ()
    """Other identifiers that name the same record (e.g. a membership id)."""

    def has_id(self, value: str) -> bool:
        """Check whether ``value`` is this entry's id or one of its alternates."""
        return value == self.id or value in self.alternate_ids


class ResolutionContext(BaseModel):
    """Scoping attributes that narrow which catalog entries are eligible."""

    model_config = ConfigDict(frozen=True)

    property_id: str | None = None
    space_id: str | None = None


def _in_scope(entry: CatalogEntry, context: ResolutionContext) -> bool:
    """Check an entry against the context.

    A context attribute that is absent does not filter. An entry that carries
    no value for an attribute is unscoped along it and always passes.
    """
    if context.property_id is not None and entry.property_id is not None:
        if entry.property_id != context.property_id:
            return False
    if context.space_id is not None and entry.space_id is not None:
        if entry.space_id != context.space_id:
            return False
    return True


@dataclass(frozen=True)
class CatalogSnapshot:
    """Immutable per-organization catalog, grouped by entity type.

    Entries keep catalog (insertion) order; resolution tie-breaks depend on it.

    Usage:
        snapshot = CatalogSnapshot.from_entries("org-1", entries)
        pool = snapshot.find_candidates(EntityType.SPACE, ResolutionContext(property_id="p1"))
    """

    organization_id: str | None
    entries: tuple[CatalogEntry, ...]
    _by_type: dict[EntityType, tuple[CatalogEntry, ...]] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", tuple(self.entries))

        grouped: dict[EntityType, list[CatalogEntry]] = {}
        seen: set[tuple[EntityType, str]] = set()

        for entry in self.entries:
            key = (entry.entity_type, entry.id)
            if key in seen:
                msg = f"Duplicate {entry.entity_type.value} id in catalog: {entry.id}"
                raise ValueError(msg)
            seen.add(key)
            grouped.setdefault(entry.entity_type, []).append(entry)

        object.__setattr__(
            self,
            "_by_type",
            {entity_type: tuple(items) for entity_type, items in grouped.items()},
        )

    def __len__(self) -> int:
        return len(self.entries)

    @classmethod
    def from_entries(
        cls,
        organization_id: str | None,
        entries: Iterable[CatalogEntry | Mapping[str, Any]],
    ) -> CatalogSnapshot:
        """Build a snapshot from entries or entry-shaped dicts."""
        return cls(
            organization_id=organization_id,
            entries=tuple(
                entry if isinstance(entry, CatalogEntry) else CatalogEntry.model_validate(entry)
                for entry in entries
            ),
        )

    @classmethod
    def from_collections(
        cls,
        organization_id: str | None,
        *,
        spaces: Iterable[Mapping[str, Any]] = (),
        members: Iterable[Mapping[str, Any]] = (),
        teams: Iterable[Mapping[str, Any]] = (),
        assets: Iterable[Mapping[str, Any]] = (),
        categories: Iterable[Mapping[str, Any]] = (),
        properties: Iterable[Mapping[str, Any]] = (),
    ) -> CatalogSnapshot:
        """Build a snapshot from the row shapes the storage layer returns.

        Row shapes:
            spaces:     {id, name, property_id}
            members:    {id, user_id, display_name}
            teams:      {id, name}
            assets:     {id, name, property_id, space_id?}
            categories: {id, name}
            properties: {id, nickname?, address}

        Members resolve to their user id; the membership row id is kept as an
        alternate id so an extractor echoing either still matches exactly.
        Properties are labelled by nickname, falling back to the address.
        """
        entries: list[CatalogEntry] = []

        for row in spaces:
            entries.append(CatalogEntry(
                id=row["id"],
                entity_type=EntityType.SPACE,
                label=row["name"],
                property_id=row.get("property_id"),
            ))

        for row in members:
            user_id = row.get("user_id") or row["id"]
            alternates = (row["id"],) if row["id"] != user_id else ()
            entries.append(CatalogEntry(
                id=user_id,
                entity_type=EntityType.PERSON,
                label=row["display_name"],
                alternate_ids=alternates,
            ))

        for row in teams:
            entries.append(CatalogEntry(
                id=row["id"],
                entity_type=EntityType.TEAM,
                label=row["name"],
            ))

        for row in assets:
            entries.append(CatalogEntry(
                id=row["id"],
                entity_type=EntityType.ASSET,
                label=row["name"],
                property_id=row.get("property_id"),
                space_id=row.get("space_id"),
            ))

        for row in categories:
            entries.append(CatalogEntry(
                id=row["id"],
                entity_type=EntityType.CATEGORY,
                label=row["name"],
            ))

        for row in properties:
            entries.append(CatalogEntry(
                id=row["id"],
                entity_type=EntityType.PROPERTY,
                label=row.get("nickname") or row["address"],
            ))

        return cls(organization_id=organization_id, entries=tuple(entries))

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> CatalogSnapshot:
        """Build a snapshot from a decoded JSON payload.

        Accepts either ``{"organization_id": ..., "entries": [...]}`` or the
        grouped collections understood by :meth:`from_collections`.
        """
        if not isinstance(payload, Mapping):
            msg = f"Catalog payload must be an object, got {type(payload).__name__}"
            raise ValueError(msg)

        organization_id = payload.get("organization_id")
        if "entries" in payload:
            return cls.from_entries(organization_id, payload["entries"])

        return cls.from_collections(
            organization_id,
            spaces=payload.get("spaces", ()),
            members=payload.get("members", ()),
            teams=payload.get("teams", ()),
            assets=payload.get("assets", ()),
            categories=payload.get("categories", ()),
            properties=payload.get("properties", ()),
        )

    def find_candidates(
        self,
        entity_type: EntityType,
        context: ResolutionContext | None = None,
    ) -> list[CatalogEntry]:
        """Get entries of one type that are eligible in the given context.

        Pure filter: no fuzzy logic, catalog order preserved.
        """
        entries = self._by_type.get(EntityType(entity_type), ())
        if context is None:
            return list(entries)
        return [entry for entry in entries if _in_scope(entry, context)]

    def get(self, entity_type: EntityType, entity_id: str) -> CatalogEntry | None:
        """Get an entry by its canonical id."""
        for entry in self._by_type.get(EntityType(entity_type), ()):
            if entry.id == entity_id:
                return entry
        return None
