"""Filesystem and preset initialization managers."""
