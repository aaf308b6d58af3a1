"""Filesystem traversal helpers."""
