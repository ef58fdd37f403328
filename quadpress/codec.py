"""Binary serialisation of quadtrees.

Each node is a little-endian 32-bit word whose top bit flags a branch and
whose other bits hold the id, followed by nx, px, ny, py as 16-bit values.
Leaves then carry three colour bytes; branches are followed by their four
children in order.
"""

from __future__ import annotations

import io
import struct
from typing import BinaryIO

from .image import Pixel
from .quadtree import QuadtreeNode

_HEADER = struct.Struct("<I4H")
_COLOR = struct.Struct("<3B")
_BRANCH_FLAG = 1 << 31


class CodecError(ValueError):
    """Raised when a tree cannot be encoded or data cannot be decoded."""


def _pack(node: QuadtreeNode) -> bytes:
    if not 0 <= node.id < _BRANCH_FLAG:
        raise CodecError(f"node id {node.id} does not fit in 31 bits")
    try:
        if node.is_leaf:
            if node.pixel is None:
                raise CodecError(f"leaf {node.id} has no colour")
            # The leaf mask clears the whole word, so leaves are stored without ids.
            return _HEADER.pack(0, node.nx, node.px, node.ny, node.py) + _COLOR.pack(*node.pixel)
        return _HEADER.pack(node.id | _BRANCH_FLAG, node.nx, node.px, node.ny, node.py)
    except struct.error as exc:
        raise CodecError(f"node {node.id} cannot be encoded: {exc}") from exc


def encode_node(stream: BinaryIO, node: QuadtreeNode) -> None:
    """Write a node and all of its descendants to a binary stream."""
    for current in node.iter_nodes():
        stream.write(_pack(current))


def encode(path, tree: QuadtreeNode) -> None:
    with open(path, "wb") as stream:
        encode_node(stream, tree)


def encode_bytes(tree: QuadtreeNode) -> bytes:
    stream = io.BytesIO()
    encode_node(stream, tree)
    return stream.getvalue()


def _read(stream: BinaryIO, size: int) -> bytes:
    data = stream.read(size)
    if len(data) < size:
        raise CodecError("unexpected end of data")
    return data


def decode_node(stream: BinaryIO) -> QuadtreeNode:
    """Read one node, with its descendants, from a binary stream."""
    word, nx, px, ny, py = _HEADER.unpack(_read(stream, _HEADER.size))
    node_id = word & (_BRANCH_FLAG - 1)
    if word & _BRANCH_FLAG:
        children = tuple(decode_node(stream) for _ in range(4))
        return QuadtreeNode(node_id, nx, px, ny, py, children=children)
    pixel = Pixel(*_COLOR.unpack(_read(stream, _COLOR.size)))
    return QuadtreeNode(node_id, nx, px, ny, py, pixel=pixel)


def decode(path) -> QuadtreeNode:
    with open(path, "rb") as stream:
        return decode_node(stream)


def decode_bytes(data: bytes) -> QuadtreeNode:
    return decode_node(io.BytesIO(data))