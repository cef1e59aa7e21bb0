"""Catalog resolver: map extracted entity mentions onto catalog records."""

__version__ = "0.1.0"
