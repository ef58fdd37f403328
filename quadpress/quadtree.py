"""Building a quadtree from an image and rendering it back."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterator

from .image import Image, Pixel

COLOR_DIFF_THRESHOLD = 24
MAX_NODE_ID = 2**31 - 1
MAX_DIMENSION = 0xFFFF


class TreeState(enum.IntEnum):
    LEAF = 0
    BRANCH = 1


@dataclass
class QuadtreeNode:
    """A rectangular region from (nx, py) at the top left to (px, ny).

    Children are ordered top-left, top-right, bottom-right, bottom-left.
    """

    id: int
    nx: int
    px: int
    ny: int
    py: int
    pixel: Pixel | None = None
    children: tuple[QuadtreeNode, ...] = ()

    @property
    def state(self) -> TreeState:
        return TreeState.BRANCH if self.children else TreeState.LEAF

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def width(self) -> int:
        return self.px + 1 - self.nx

    @property
    def height(self) -> int:
        return self.ny + 1 - self.py

    def iter_nodes(self) -> Iterator[QuadtreeNode]:
        """Yield this node and its descendants in depth-first pre-order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))


class QuadtreeBuilder:
    """Splits an image into regions whose colours stay near their mean."""

    def __init__(self, image: Image, threshold: int = COLOR_DIFF_THRESHOLD):
        self.image = image
        self.threshold = threshold
        self._next_id = 0

    def _region(self, nx: int, px: int, ny: int, py: int) -> Iterator[Pixel]:
        for row in self.image.pixels[py:ny + 1]:
            yield from row[nx:px + 1]

    def init_node(self, nx: int, px: int, ny: int, py: int) -> QuadtreeNode:
        """Create a leaf for the region, coloured with its floored mean."""
        node_id = self._next_id
        self._next_id += 1
        if self._next_id > MAX_NODE_ID:
            raise OverflowError("ran out of node ids")
        region = list(self._region(nx, px, ny, py))
        count = len(region)
        mean = Pixel(*(sum(channel) // count for channel in zip(*region)))
        return QuadtreeNode(node_id, nx, px, ny, py, pixel=mean)

    def split(self, node: QuadtreeNode) -> bool:
        """Divide a node into four quadrants if it is at least 2x2."""
        if not (node.nx < node.px and node.py < node.ny):
            return False
        mid_x = (node.nx + node.px) // 2
        mid_y = (node.ny + node.py) // 2
        node.children = (
            self.init_node(node.nx, mid_x, mid_y, node.py),
            self.init_node(mid_x + 1, node.px, mid_y, node.py),
            self.init_node(mid_x + 1, node.px, node.ny, mid_y + 1),
            self.init_node(node.nx, mid_x, node.ny, mid_y + 1),
        )
        return True

    def is_similar_color(self, node: QuadtreeNode) -> bool:
        """Whether every pixel lies within the threshold of the node's colour."""
        mean = node.pixel
        return all(
            abs(mean.r - p.r) + abs(mean.g - p.g) + abs(mean.b - p.b) <= self.threshold
            for p in self._region(node.nx, node.px, node.ny, node.py)
        )

    def refine(self, node: QuadtreeNode) -> None:
        if not self.is_similar_color(node) and self.split(node):
            for child in node.children:
                self.refine(child)

    def build(self) -> QuadtreeNode:
        width, height = self.image.width, self.image.height
        if width == 0 or height == 0:
            raise ValueError("cannot build a quadtree of an empty image")
        if width > MAX_DIMENSION or height > MAX_DIMENSION:
            raise ValueError(f"image dimensions exceed {MAX_DIMENSION}")
        root = self.init_node(0, width - 1, height - 1, 0)
        self.refine(root)
        return root


def construct_quadtree(image: Image, threshold: int = COLOR_DIFF_THRESHOLD) -> QuadtreeNode:
    """Build the quadtree of an image."""
    return QuadtreeBuilder(image, threshold).build()


def deconstruct_tree(tree: QuadtreeNode) -> Image:
    """Render a quadtree into an image filled with its leaf colours."""
    width, height = tree.px + 1, tree.ny + 1
    pixels = [[Pixel(0, 0, 0)] * width for _ in range(height)]
    for node in tree.iter_nodes():
        if not node.is_leaf:
            continue
        if node.pixel is None:
            raise ValueError(f"leaf {node.id} has no colour")
        if not (0 <= node.nx <= node.px < width and 0 <= node.py <= node.ny < height):
            raise ValueError(f"leaf {node.id} lies outside the image")
        for row in pixels[node.py:node.ny + 1]:
            row[node.nx:node.px + 1] = [node.pixel] * node.width
    return Image(pixels)