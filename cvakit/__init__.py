"""Compose CSS class lists for components from their props."""

__version__ = "0.1.0"
__all__ = ["core", "helpers", "variant"]