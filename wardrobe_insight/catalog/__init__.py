"""Garment vocabularies and attribute extraction."""
