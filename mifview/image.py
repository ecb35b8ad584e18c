"""Raster images: a grid of pixels plus physical size, unit and metadata."""

from __future__ import annotations

from collections.abc import Iterator

from .metadata import Metadata
from .pixel import Pixel

DEFAULT_UNIT = "n/s"


class Image:
    """A width-by-height grid of pixels, black until set."""

    def __init__(
        self,
        width: int = 0,
        height: int = 0,
        physical_width: float = 0.0,
        physical_height: float = 0.0,
        unit: str = DEFAULT_UNIT,
        metadata: Metadata | None = None,
    ) -> None:
        self._width = 0
        self._height = 0
        self._rows: list[list[Pixel]] = []
        self.physical_width = physical_width
        self.physical_height = physical_height
        self.unit = unit
        self.metadata = metadata if metadata is not None else Metadata()
        self.resize(width, height)

    @property
    def width(self) -> int:
        """Width in pixels."""
        return self._width

    @property
    def height(self) -> int:
        """Height in pixels."""
        return self._height

    def resize(self, width: int, height: int) -> None:
        """Change the pixel size, keeping pixels in the overlap and filling new ones with black."""
        if width < 0 or height < 0:
            raise ValueError(f"image size must not be negative: {width}x{height}")
        del self._rows[height:]
        self._rows.extend([] for _ in range(height - len(self._rows)))
        for row in self._rows:
            del row[width:]
            row.extend(Pixel() for _ in range(width - len(row)))
        self._width = width
        self._height = height

    def contains(self, x: int, y: int) -> bool:
        """Return True if (x, y) lies inside the image."""
        return 0 <= x < self._width and 0 <= y < self._height

    def _check(self, x: int, y: int) -> None:
        if not self.contains(x, y):
            raise IndexError(
                f"pixel ({x}, {y}) outside image of size {self._width}x{self._height}"
            )

    def get_pixel(self, x: int, y: int) -> Pixel:
        """Return the pixel at column x, row y."""
        self._check(x, y)
        return self._rows[y][x]

    def set_pixel(self, x: int, y: int, pixel: Pixel) -> None:
        """Replace the pixel at column x, row y."""
        self._check(x, y)
        self._rows[y][x] = pixel

    def iter_pixels(self) -> Iterator[tuple[int, int, Pixel]]:
        """Yield (x, y, pixel) row by row, top to bottom."""
        for y, row in enumerate(self._rows):
            for x, pixel in enumerate(row):
                yield x, y, pixel

    def copy(self) -> Image:
        """Return an independent copy of the image."""
        duplicate = Image(
            physical_width=self.physical_width,
            physical_height=self.physical_height,
            unit=self.unit,
            metadata=self.metadata.copy(),
        )
        duplicate._rows = [list(row) for row in self._rows]
        duplicate._width = self._width
        duplicate._height = self._height
        return duplicate

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Image):
            return NotImplemented
        return (
            self._rows == other._rows
            and self._width == other._width
            and self._height == other._height
            and self.physical_width == other.physical_width
            and self.physical_height == other.physical_height
            and self.unit == other.unit
            and self.metadata == other.metadata
        )

    def __repr__(self) -> str:
        return (
            f"Image({self._width}x{self._height}, "
            f"{self.physical_width}x{self.physical_height} {self.unit})"
        )