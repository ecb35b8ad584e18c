"""Command line interface: inspect MIF images, filter them, detect structures, edit metadata."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from .system import System
from .view import widget_to_image


def _parse_size(text: str) -> tuple[int, int]:
    width, sep, height = text.partition("x")
    try:
        size = (int(width), int(height))
    except ValueError:
        size = (0, 0)
    if not sep or size[0] <= 0 or size[1] <= 0:
        raise argparse.ArgumentTypeError(f"expected WIDTHxHEIGHT, got {text!r}")
    return size


def _locate(system: System, args: argparse.Namespace, action: str) -> tuple[int, int] | None:
    x, y = args.x, args.y
    if args.view is not None:
        view_width, view_height = args.view
        x, y = widget_to_image(
            x, y, view_width, view_height, system.image.width, system.image.height
        )
    if not system.image.contains(x, y):
        print(
            f"error: cannot apply {action}: point ({x}, {y}) is outside the image",
            file=sys.stderr,
        )
        return None
    return x, y


def _info(system: System, args: argparse.Namespace) -> int:
    print(system.pixel_size_text(), end="")
    print(system.physical_size_text(), end="")
    print(system.metadata_text())
    return 0


def _filter(system: System, args: argparse.Namespace) -> int:
    point = _locate(system, args, "filter")
    if point is None:
        return 1
    system.apply_filter(system.image.get_pixel(*point))
    system.save_image(args.output)
    return 0


def _detect(system: System, args: argparse.Namespace) -> int:
    point = _locate(system, args, "detector")
    if point is None:
        return 1
    system.detect(*point, system.image.get_pixel(*point))
    system.save_image(args.output)
    return 0


def _metadata(system: System, args: argparse.Namespace) -> int:
    system.update_metadata_text("\n".join(args.entries))
    system.save_image(args.output)
    return 0


def _add_point_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("path", help="MIF image to read")
    parser.add_argument("x", type=int, help="column of the reference point")
    parser.add_argument("y", type=int, help="row of the reference point")
    parser.add_argument("output", help="MIF file to write")
    parser.add_argument(
        "--view",
        type=_parse_size,
        metavar="WIDTHxHEIGHT",
        help="treat x and y as a point in a view of this size showing the image",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mifview", description=__doc__)
    commands = parser.add_subparsers(dest="command", required=True)

    info = commands.add_parser("info", help="show size, unit and metadata")
    info.add_argument("path", help="MIF image to read")
    info.set_defaults(handler=_info)

    color = commands.add_parser(
        "filter", help="keep the colour at a point and gray out the rest"
    )
    _add_point_arguments(color)
    color.set_defaults(handler=_filter)

    detect = commands.add_parser(
        "detect", help="highlight the region of the colour around a point"
    )
    _add_point_arguments(detect)
    detect.set_defaults(handler=_detect)

    metadata = commands.add_parser(
        "metadata", help="replace the metadata with 'key: value' entries"
    )
    metadata.add_argument("path", help="MIF image to read")
    metadata.add_argument("output", help="MIF file to write")
    metadata.add_argument("entries", nargs="+", help="entries of the form 'key: value'")
    metadata.set_defaults(handler=_metadata)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line tool and return its exit status."""
    args = _build_parser().parse_args(argv)
    system = System()
    try:
        system.load_image(args.path)
        return args.handler(system, args)
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())