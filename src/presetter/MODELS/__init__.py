"""Pydantic models for presets and service templates."""
