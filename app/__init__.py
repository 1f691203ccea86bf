"""Places API application package."""
