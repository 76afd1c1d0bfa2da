"""Helpers shared by the spritegen components."""
