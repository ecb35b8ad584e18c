"""Reading and writing MIF image files.

A MIF file starts with two text lines. The first holds
``width;height;physical_width;physical_height;unit``. The second holds the
metadata as ``key:value`` pairs joined by semicolons. Raw pixel data
follows, row by row from the top, three little-endian unsigned 16-bit
channels (red, green, blue) per pixel.
"""

from __future__ import annotations

import math
import struct
from os import PathLike
from pathlib import Path

from .image import Image
from .metadata import parse_serialized
from .pixel import Pixel

MAX_CHANNEL = 65535
"""Stored value of a channel at full intensity."""

_PIXEL = struct.Struct("<HHH")
_ROUNDING_SLACK = 1e-6


class MifError(ValueError):
    """Raised when data is not a well-formed MIF image."""


def _format_number(value: float) -> str:
    return f"{value:g}"


def _to_channel(value: float) -> int:
    scaled = math.floor(value * MAX_CHANNEL + _ROUNDING_SLACK)
    return min(max(scaled, 0), MAX_CHANNEL)


def encode(image: Image) -> bytes:
    """Return the MIF representation of ``image``."""
    header = (
        f"{image.width};{image.height};"
        f"{_format_number(image.physical_width)};"
        f"{_format_number(image.physical_height)};"
        f"{image.unit}\n"
        f"{image.metadata.serialize()}\n"
    )
    body = b"".join(
        _PIXEL.pack(_to_channel(p.red), _to_channel(p.green), _to_channel(p.blue))
        for _, _, p in image.iter_pixels()
    )
    return header.encode("utf-8") + body


def decode(data: bytes) -> Image:
    """Build an image from MIF data; raise MifError if it is malformed."""
    parts = data.split(b"\n", 2)
    if len(parts) < 3:
        raise MifError("missing header or metadata line")
    header_line, metadata_line, body = parts
    try:
        header = header_line.decode("utf-8")
        metadata_text = metadata_line.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise MifError(f"text lines are not valid UTF-8: {exc}") from exc

    fields = header.split(";", 4)
    if len(fields) != 5:
        raise MifError(f"header needs five fields: {header!r}")
    try:
        width = int(fields[0])
        height = int(fields[1])
        physical_width = float(fields[2])
        physical_height = float(fields[3])
    except ValueError as exc:
        raise MifError(f"malformed header: {header!r}") from exc
    if width < 0 or height < 0:
        raise MifError(f"negative image size: {width}x{height}")

    needed = width * height * _PIXEL.size
    if len(body) < needed:
        raise MifError(
            f"pixel data too short: {len(body)} bytes for a {width}x{height} image"
        )

    image = Image(
        width,
        height,
        physical_width,
        physical_height,
        unit=fields[4],
        metadata=parse_serialized(metadata_text),
    )
    positions = ((x, y) for y in range(height) for x in range(width))
    for (x, y), channels in zip(positions, _PIXEL.iter_unpack(body[:needed])):
        image.set_pixel(x, y, Pixel(*(c / MAX_CHANNEL for c in channels)))
    return image


def load(path: str | PathLike[str]) -> Image:
    """Read an image from a MIF file."""
    return decode(Path(path).read_bytes())


def save(path: str | PathLike[str], image: Image) -> None:
    """Write ``image`` to a MIF file, replacing any existing file."""
    Path(path).write_bytes(encode(image))