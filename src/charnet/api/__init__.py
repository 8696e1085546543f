"""HTTP API and viewer."""
