"""Mindfulness platform backend: users, scheduled sessions and courses."""

__version__ = "0.1.0"
