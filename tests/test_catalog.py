"""Tests for the catalog snapshot and its candidate accessor."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from catalog_resolver.models import CatalogEntry, CatalogSnapshot, EntityType, ResolutionContext


def _ids(entries: list[CatalogEntry]) -> list[str]:
    return [e.id for e in entries]


class TestFindCandidates:
    """Tests for CatalogSnapshot.find_candidates."""

    def test_filters_by_type_in_catalog_order(self, org_snapshot: CatalogSnapshot) -> None:
        spaces = org_snapshot.find_candidates(EntityType.SPACE)
        assert _ids(spaces) == ["s1", "s2", "s3", "s4"]

    def test_accepts_plain_string_type(self, org_snapshot: CatalogSnapshot) -> None:
        assert _ids(org_snapshot.find_candidates("team")) == ["t1", "t2"]

    def test_property_scope(self, org_snapshot: CatalogSnapshot) -> None:
        context = ResolutionContext(property_id="p2")
        assert _ids(org_snapshot.find_candidates(EntityType.SPACE, context)) == ["s4"]

    def test_absent_context_attribute_does_not_filter(self, org_snapshot: CatalogSnapshot) -> None:
        context = ResolutionContext()
        assert _ids(org_snapshot.find_candidates(EntityType.SPACE, context)) == [
            "s1", "s2", "s3", "s4",
        ]

    def test_unscoped_entries_pass_property_filter(self, org_snapshot: CatalogSnapshot) -> None:
        """People carry no property, so a property context keeps them all."""
        context = ResolutionContext(property_id="p1")
        assert _ids(org_snapshot.find_candidates(EntityType.PERSON, context)) == ["u1", "u2"]

    def test_space_scope_keeps_assets_without_space(self, org_snapshot: CatalogSnapshot) -> None:
        context = ResolutionContext(property_id="p1", space_id="s1")
        assert _ids(org_snapshot.find_candidates(EntityType.ASSET, context)) == ["a2", "a3"]

    def test_unknown_property_scopes_out_everything_scoped(
        self, org_snapshot: CatalogSnapshot
    ) -> None:
        context = ResolutionContext(property_id="nope")
        assert org_snapshot.find_candidates(EntityType.SPACE, context) == []

    def test_type_with_no_entries(self) -> None:
        snapshot = CatalogSnapshot.from_entries("org", [])
        assert snapshot.find_candidates(EntityType.ASSET) == []


class TestSnapshotConstruction:
    """Tests for snapshot builders and invariants."""

    def test_duplicate_id_within_type_rejected(self) -> None:
        with pytest.raises(ValueError, match="Duplicate space id"):
            CatalogSnapshot.from_entries(
                "org",
                [
                    {"id": "x", "entity_type": "space", "label": "Kitchen"},
                    {"id": "x", "entity_type": "space", "label": "Hall"},
                ],
            )

    def test_same_id_across_types_allowed(self) -> None:
        snapshot = CatalogSnapshot.from_entries(
            "org",
            [
                {"id": "x", "entity_type": "space", "label": "Kitchen"},
                {"id": "x", "entity_type": "team", "label": "Kitchen Crew"},
            ],
        )
        assert len(snapshot) == 2

    def test_duplicate_labels_allowed(self, org_snapshot: CatalogSnapshot) -> None:
        kitchens = [e for e in org_snapshot.entries if e.label == "Kitchen"]
        assert _ids(kitchens) == ["s1", "s4"]

    def test_members_use_user_id_with_membership_alternate(
        self, org_snapshot: CatalogSnapshot
    ) -> None:
        frank = org_snapshot.get(EntityType.PERSON, "u1")
        assert frank is not None
        assert frank.label == "Frank Miller"
        assert frank.alternate_ids == ("m1",)
        assert frank.has_id("m1") and frank.has_id("u1")

    def test_property_label_prefers_nickname(self, org_snapshot: CatalogSnapshot) -> None:
        assert org_snapshot.get(EntityType.PROPERTY, "p1").label == "Main House"
        assert org_snapshot.get(EntityType.PROPERTY, "p3").label == "3 Mill Lane"

    def test_get_missing(self, org_snapshot: CatalogSnapshot) -> None:
        assert org_snapshot.get(EntityType.SPACE, "nope") is None

    def test_from_payload_entries(self) -> None:
        snapshot = CatalogSnapshot.from_payload({
            "organization_id": "org-9",
            "entries": [{"id": "c1", "entity_type": "category", "label": "Plumbing"}],
        })
        assert snapshot.organization_id == "org-9"
        assert _ids(snapshot.find_candidates(EntityType.CATEGORY)) == ["c1"]

    def test_from_payload_collections(self) -> None:
        snapshot = CatalogSnapshot.from_payload({
            "teams": [{"id": "t1", "name": "Maintenance"}],
        })
        assert snapshot.organization_id is None
        assert _ids(snapshot.find_candidates(EntityType.TEAM)) == ["t1"]

    def test_from_payload_rejects_non_object(self) -> None:
        with pytest.raises(ValueError, match="must be an object"):
            CatalogSnapshot.from_payload([])  # type: ignore[arg-type]

    def test_entry_rejects_unknown_type(self) -> None:
        with pytest.raises(ValidationError):
            CatalogEntry(id="x", entity_type="vendor", label="Acme")

    def test_direct_construction_freezes_entries(self) -> None:
        """A list passed straight to the constructor is copied into a tuple."""
        source = [CatalogEntry(id="s1", entity_type=EntityType.SPACE, label="Kitchen")]
        snapshot = CatalogSnapshot(organization_id="org", entries=source)  # type: ignore[arg-type]

        source.append(CatalogEntry(id="s2", entity_type=EntityType.SPACE, label="Hall"))

        assert isinstance(snapshot.entries, tuple)
        assert len(snapshot) == 1
        assert _ids(snapshot.find_candidates(EntityType.SPACE)) == ["s1"]
        assert hash(snapshot) == hash(CatalogSnapshot.from_entries("org", source[:1]))

    def test_snapshot_is_immutable(self, org_snapshot: CatalogSnapshot) -> None:
        with pytest.raises(AttributeError):
            org_snapshot.entries = ()  # type: ignore[misc]
        with pytest.raises(ValidationError):
            org_snapshot.entries[0].label = "Changed"  # type: ignore[misc]
