"""Isometric wireframe projection, line drawing, pixel images and XPM reading."""

__version__ = "0.1.0"

__all__ = ["colors", "draw", "hextoi", "image", "projection", "text", "xpm"]