"""Domain layer shared across farmbook packages."""
