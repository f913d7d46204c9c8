"""Tile-based renderer drawing 8x8 tiles into an RGB565 framebuffer."""

__version__ = "0.1.0"
__all__ = ["tiles", "renderer"]