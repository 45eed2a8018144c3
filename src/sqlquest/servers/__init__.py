"""HTTP server integrations."""
