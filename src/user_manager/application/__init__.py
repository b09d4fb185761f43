"""Application Layer - use cases and their wiring."""
