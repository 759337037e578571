"""Galton board simulation on a monochrome SSD1306-style framebuffer."""

__version__ = "0.1.0"
__all__ = ["display", "font", "framebuffer", "galton", "simulation", "ssd1306"]