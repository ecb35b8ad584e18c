"""Read, edit and write MIF raster images: colour filtering, structure detection and metadata."""

__version__ = "0.1.0"