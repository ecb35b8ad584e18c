"""RGB pixels with channels in the range 0.0 to 1.0."""

from __future__ import annotations

from dataclasses import dataclass

TOLERANCE = 0.05
"""Largest per-channel difference at which two pixels still match."""


@dataclass(frozen=True)
class Pixel:
    """An immutable colour with red, green and blue channels."""

    red: float = 0.0
    green: float = 0.0
    blue: float = 0.0

    def brightness(self) -> float:
        """Return the mean of the three channels."""
        return (self.red + self.green + self.blue) / 3.0

    def matches(self, other: Pixel) -> bool:
        """Return True if every channel of ``other`` lies within the tolerance of this one."""
        return all(
            mine - TOLERANCE <= theirs <= mine + TOLERANCE
            for mine, theirs in (
                (self.red, other.red),
                (self.green, other.green),
                (self.blue, other.blue),
            )
        )

    def grayscale(self) -> Pixel:
        """Return a grey pixel of the same brightness."""
        level = self.brightness()
        return Pixel(level, level, level)