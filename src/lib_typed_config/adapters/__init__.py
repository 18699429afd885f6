"""Adapters turning external sources into field mappings."""
