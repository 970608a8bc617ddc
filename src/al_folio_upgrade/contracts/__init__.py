"""JSON-schema contracts for machine-readable upgrade artifacts."""
