"""Interactive editor application."""
