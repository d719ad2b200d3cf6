"""Infrastructure layer for identity management."""
