"""Operations that transform an image in place."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from .image import Image
from .pixel import Pixel

MARK = Pixel(0.0, 1.0, 0.0)
"""Colour given to pixels of a detected structure."""

BACKGROUND = Pixel()
"""Colour given to everything outside a detected structure."""


class Processor(ABC):
    """An operation applied to an image in place."""

    @abstractmethod
    def process(self, image: Image) -> None:
        """Transform ``image`` in place."""


@dataclass
class ColorFilter(Processor):
    """Keep pixels matching a reference colour and turn the rest grey."""

    reference: Pixel

    def process(self, image: Image) -> None:
        """Replace every pixel that does not match the reference with its grey level."""
        for x, y, pixel in list(image.iter_pixels()):
            if not pixel.matches(self.reference):
                image.set_pixel(x, y, pixel.grayscale())


@dataclass
class StructureDetector(Processor):
    """Highlight the 8-connected region of matching pixels around a start point."""

    x: int
    y: int
    reference: Pixel

    def process(self, image: Image) -> None:
        """Paint the detected region green and everything else black."""
        region = self._region(image)
        for x, y, _ in list(image.iter_pixels()):
            image.set_pixel(x, y, MARK if (x, y) in region else BACKGROUND)

    def _region(self, image: Image) -> set[tuple[int, int]]:
        region: set[tuple[int, int]] = set()
        pending = [(self.x, self.y)]
        while pending:
            x, y = pending.pop()
            if (x, y) in region or not image.contains(x, y):
                continue
            if not image.get_pixel(x, y).matches(self.reference):
                continue
            region.add((x, y))
            # The region is marked at the origin but never grows from it.
            if (x, y) == (0, 0):
                continue
            pending.extend(
                (x + dx, y + dy) for dy in (-1, 0, 1) for dx in (-1, 0, 1)
            )
        return region