"""Catalog API package."""
