"""Metadata cache implementations."""
