"""HTTP API for the solar board."""
