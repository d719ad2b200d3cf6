"""Domain layer for identity."""
