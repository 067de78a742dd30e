"""Grid backend: field type handlers for grid cells."""
