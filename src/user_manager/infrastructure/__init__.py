"""Infrastructure Layer - HTTP access to the user service."""
