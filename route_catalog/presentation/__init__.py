"""Presentation layer: HTTP views and request/session helpers."""
