"""Command line: compress a PPM image to a quadtree file and recover it."""

from __future__ import annotations

import argparse
import sys
from typing import NamedTuple

from .codec import decode, encode
from .image import Image, export_image, image_size, import_image
from .quadtree import construct_quadtree, deconstruct_tree


class OutputPaths(NamedTuple):
    source: str
    compressed: str
    recovered: str


def output_paths(name: str) -> OutputPaths:
    """Derive the input and output file names from a base name."""
    return OutputPaths(f"{name}.ppm", f"{name}_compressed.bin", f"{name}_recovered.ppm")


def run(name: str) -> Image:
    """Compress ``name``.ppm, decode it again and write the recovered image."""
    paths = output_paths(name)
    image = import_image(paths.source)
    print("Image successfully imported.")

    width, height = image_size(paths.source)
    print(f"Compressing image. Resolution: {width}x{height}")

    tree = construct_quadtree(image)
    print("Tree successfully built.")

    encode(paths.compressed, tree)
    print("Image successfully encoded.")

    decoded = decode(paths.compressed)
    print("Image successfully decoded.")

    recovered = deconstruct_tree(decoded)
    export_image(paths.recovered, recovered)
    print("Image successfully recovered.")
    return recovered


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="quadpress",
        description="Compress a binary PPM image with a quadtree and recover it.",
    )
    parser.add_argument(
        "name", nargs="?", default="", help="image path without the .ppm extension"
    )
    args = parser.parse_args(argv)
    try:
        run(args.name)
    except OSError as exc:
        print(f"Error opening file: {exc}", file=sys.stderr)
        return 1
    except (ValueError, OverflowError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())