"""File format readers (TOML, INI-style, JSON)."""
