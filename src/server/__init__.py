"""HTTP API for the category selection engine."""
