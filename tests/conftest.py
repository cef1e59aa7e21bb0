"""Shared pytest fixtures for catalog resolver tests."""

from __future__ import annotations

import pytest

from catalog_resolver.models import CatalogSnapshot
from catalog_resolver.resolution import EntityResolver


@pytest.fixture
def org_snapshot() -> CatalogSnapshot:
    """A small organization catalog built from storage-shaped rows.

    Two properties, each with a Kitchen, so property scoping matters.
    """
    return CatalogSnapshot.from_collections(
        "org-1",
        spaces=[
            {"id": "s1", "name": "Kitchen", "property_id": "p1"},
            {"id": "s2", "name": "Boiler Room", "property_id": "p1"},
            {"id": "s3", "name": "Utility Room", "property_id": "p1"},
            {"id": "s4", "name": "Kitchen", "property_id": "p2"},
        ],
        members=[
            {"id": "m1", "user_id": "u1", "display_name": "Frank Miller"},
            {"id": "m2", "user_id": "u2", "display_name": "Alex Smith"},
        ],
        teams=[
            {"id": "t1", "name": "Maintenance"},
            {"id": "t2", "name": "Cleaning"},
        ],
        assets=[
            {"id": "a1", "name": "Boiler", "property_id": "p1", "space_id": "s2"},
            {"id": "a2", "name": "Dishwasher", "property_id": "p1", "space_id": "s1"},
            {"id": "a3", "name": "Smoke Alarm", "property_id": "p1"},
        ],
        categories=[
            {"id": "c1", "name": "Plumbing"},
            {"id": "c2", "name": "Electrical"},
        ],
        properties=[
            {"id": "p1", "nickname": "Main House", "address": "1 High Street"},
            {"id": "p2", "nickname": "Main Residence", "address": "2 Low Road"},
            {"id": "p3", "address": "3 Mill Lane"},
        ],
    )


@pytest.fixture
def resolver() -> EntityResolver:
    """Resolver with explicit default thresholds, independent of the environment."""
    return EntityResolver(fuzzy_threshold=0.8, fuzzy_confidence=0.85, ghost_prefix="ghost-")
