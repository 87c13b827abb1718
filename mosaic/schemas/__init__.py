"""Bundled JSON Schema documents."""
