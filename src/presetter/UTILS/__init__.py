"""Shared helpers: YAML ordering, key normalization, terminal I/O."""
