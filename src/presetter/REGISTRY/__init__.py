"""Read-only catalogs of presets and service templates."""
