"""Textured ray-casting maze explorer, with an XPM reader, X11 colour names and a pygame front end."""

__version__ = "0.1.0"