"""Reading and writing binary PPM (P6) images."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import BinaryIO, NamedTuple

_HEADER_OFFSET = 3  # skips the "P6" tag and the character after it
_NUM_FIELD_LIMIT = 8
_MAXVAL = 255
_NUMBER = re.compile(rb"\s*([+-]?\d+)")


class Pixel(NamedTuple):
    """An RGB colour with 8-bit channels."""

    r: int
    g: int
    b: int


@dataclass
class Image:
    """A rectangular grid of pixels stored row by row, top row first."""

    pixels: list[list[Pixel]] = field(default_factory=list)

    @property
    def width(self) -> int:
        return len(self.pixels[0]) if self.pixels else 0

    @property
    def height(self) -> int:
        return len(self.pixels)


def read_num(stream: BinaryIO) -> int:
    """Read one header number terminated by a space or newline.

    At most eight characters are consumed; the last one read is always
    discarded as the terminator. The value is wrapped to 16 bits.
    """
    chars: list[bytes] = []
    while len(chars) < _NUM_FIELD_LIMIT:
        ch = stream.read(1)
        chars.append(ch)
        if ch in (b"\n", b" ", b""):
            break
    match = _NUMBER.match(b"".join(chars[:-1]))
    value = int(match.group(1)) if match else 0
    return value & 0xFFFF


def _read_header(stream: BinaryIO) -> tuple[int, int, int]:
    stream.seek(_HEADER_OFFSET)
    width = read_num(stream)
    height = read_num(stream)
    maxval = read_num(stream)
    return width, height, maxval


def image_size(path) -> tuple[int, int]:
    """Return the (width, height) stored in a PPM file's header."""
    with open(path, "rb") as stream:
        width, height, _ = _read_header(stream)
    return width, height


def _row(chunk: bytes) -> list[Pixel]:
    channels = iter(chunk)
    return [Pixel(*rgb) for rgb in zip(channels, channels, channels)]


def import_image(path) -> Image:
    """Load a binary PPM file."""
    with open(path, "rb") as stream:
        width, height, _ = _read_header(stream)
        row_bytes = width * 3
        data = stream.read(row_bytes * height)
    if len(data) < row_bytes * height:
        raise ValueError(f"{path}: pixel data is truncated")
    return Image(
        [_row(data[y * row_bytes:(y + 1) * row_bytes]) for y in range(height)]
    )


def export_image(path, image: Image) -> None:
    """Write an image as a binary PPM file with a maximum value of 255."""
    header = f"P6\n{image.width} {image.height}\n{_MAXVAL}\n".encode("ascii")
    body = bytes(channel for row in image.pixels for pixel in row for channel in pixel)
    with open(path, "wb") as stream:
        stream.write(header)
        stream.write(body)