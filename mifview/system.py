"""The application state: one current image and the operations on it."""

from __future__ import annotations

from os import PathLike

from . import mif
from .image import Image
from .metadata import parse_display_text
from .pixel import Pixel
from .processors import ColorFilter, StructureDetector


class System:
    """Holds the current image and applies loading, saving and processing to it."""

    def __init__(self, image: Image | None = None) -> None:
        self.image = image if image is not None else Image()

    def load_image(self, path: str | PathLike[str]) -> None:
        """Replace the current image with one read from a MIF file."""
        self.image = mif.load(path)

    def save_image(self, path: str | PathLike[str]) -> None:
        """Write the current image to a MIF file."""
        mif.save(path, self.image)

    def apply_filter(self, pixel: Pixel) -> None:
        """Gray out every pixel that does not match ``pixel``."""
        ColorFilter(pixel).process(self.image)

    def detect(self, x: int, y: int, pixel: Pixel) -> None:
        """Highlight the region matching ``pixel`` that contains (x, y)."""
        StructureDetector(x, y, pixel).process(self.image)

    def pixel_size_text(self) -> str:
        """Return the pixel dimensions as a display line."""
        return f"Pixeles: {self.image.width}x{self.image.height}\n"

    def physical_size_text(self) -> str:
        """Return the physical dimensions and unit as a display line."""
        return (
            f"Tamaño: {self.image.physical_width:g}x"
            f"{self.image.physical_height:g} {self.image.unit}\n"
        )

    def metadata_text(self) -> str:
        """Return the metadata as editable ``key: value`` lines."""
        return self.image.metadata.display()

    def update_metadata_text(self, text: str) -> None:
        """Replace the metadata with the entries in edited ``key: value`` text."""
        self.image.metadata = parse_display_text(text)