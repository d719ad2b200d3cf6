"""Infrastructure adapters for farmbook."""
