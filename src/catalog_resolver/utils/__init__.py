"""Utility functions for the catalog resolver."""

from catalog_resolver.utils.normalize import normalize

__all__ = ["normalize"]
