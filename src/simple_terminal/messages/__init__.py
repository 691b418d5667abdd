"""Bundled message catalogs (one JSON file per language)."""
