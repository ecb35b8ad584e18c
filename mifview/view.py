"""Geometry of an image drawn to fit a widget while keeping its aspect ratio."""

from __future__ import annotations


def widget_to_image(
    x: float,
    y: float,
    widget_width: float,
    widget_height: float,
    image_width: int,
    image_height: int,
) -> tuple[int, int]:
    """Map a point in widget coordinates to the image column and row under it.

    The image is scaled uniformly to fit and centred along the axis with
    spare room. The result is truncated toward zero and may lie outside the
    image.
    """
    if image_width <= 0 or image_height <= 0:
        raise ValueError(f"image has no pixels: {image_width}x{image_height}")
    if widget_width <= 0 or widget_height <= 0:
        raise ValueError(f"widget has no area: {widget_width}x{widget_height}")
    scale_x = widget_width / image_width
    scale_y = widget_height / image_height
    if scale_x > scale_y:
        offset = (widget_width - image_width * scale_y) / 2.0
        column = (x - offset) / scale_y
        row = y / scale_y
    else:
        offset = (widget_height - image_height * scale_x) / 2.0
        column = x / scale_x
        row = (y - offset) / scale_x
    return int(column), int(row)