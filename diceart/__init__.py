"""Build dice mosaics from images: face and preset types, mosaic building and an interactive command."""

__version__ = "0.1.0"
__all__ = ["__version__"]