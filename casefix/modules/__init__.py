"""Rename logic modules."""
