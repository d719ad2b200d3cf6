"""Persistence adapters for identity management."""
