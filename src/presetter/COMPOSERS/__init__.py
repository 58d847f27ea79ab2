"""Builders for generated orchestration documents."""
