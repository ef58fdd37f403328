import random

import pytest

from quadpress.codec import CodecError, decode, decode_bytes, encode, encode_bytes
from quadpress.image import Image, Pixel
from quadpress.quadtree import QuadtreeNode, construct_quadtree, deconstruct_tree


def make_image(rows):
    return Image([[Pixel(*c) for c in row] for row in rows])


def random_image(width, height, seed):
    rng = random.Random(seed)
    return Image(
        [
            [Pixel(rng.randrange(256), rng.randrange(256), rng.randrange(256)) for _ in range(width)]
            for _ in range(height)
        ]
    )


FOUR_COLOURS = make_image(
    [[(0, 0, 0), (255, 0, 0)], [(0, 0, 255), (0, 255, 0)]]
)


def geometry(tree):
    return [(n.nx, n.px, n.ny, n.py, n.is_leaf) for n in tree.iter_nodes()]


def test_single_leaf_bytes():
    tree = construct_quadtree(make_image([[(1, 2, 3)]]))
    assert encode_bytes(tree) == bytes(12) + b"\x01\x02\x03"


def test_branch_header_bytes():
    data = encode_bytes(construct_quadtree(FOUR_COLOURS))
    assert data[:4] == b"\x00\x00\x00\x80"
    assert data[4:12] == b"\x00\x00\x01\x00\x01\x00\x00\x00"
    assert data[12:16] == bytes(4)


def test_round_trip_preserves_geometry_and_colours():
    tree = construct_quadtree(random_image(4, 4, seed=1), 0)
    decoded = decode_bytes(encode_bytes(tree))
    assert geometry(decoded) == geometry(tree)
    assert deconstruct_tree(decoded) == deconstruct_tree(tree)


def test_branch_ids_kept_and_leaf_ids_cleared():
    tree = construct_quadtree(random_image(8, 8, seed=2), 0)
    decoded = decode_bytes(encode_bytes(tree))
    assert [n.id for n in decoded.iter_nodes() if not n.is_leaf] == [
        n.id for n in tree.iter_nodes() if not n.is_leaf
    ]
    assert {n.id for n in decoded.iter_nodes() if n.is_leaf} == {0}


def test_file_round_trip(tmp_path):
    image = random_image(7, 5, seed=3)
    tree = construct_quadtree(image)
    path = tmp_path / "tree.bin"
    encode(path, tree)
    assert path.read_bytes() == encode_bytes(tree)
    assert deconstruct_tree(decode(path)) == deconstruct_tree(tree)


def test_truncated_data_raises():
    data = encode_bytes(construct_quadtree(FOUR_COLOURS))
    with pytest.raises(CodecError):
        decode_bytes(data[:-1])
    with pytest.raises(CodecError):
        decode_bytes(b"")


def test_oversized_id_raises():
    leaves = tuple(QuadtreeNode(0, 0, 0, 0, 0, pixel=Pixel(0, 0, 0)) for _ in range(4))
    tree = QuadtreeNode(2**31, 0, 1, 1, 0, children=leaves)
    with pytest.raises(CodecError):
        encode_bytes(tree)


def test_leaf_without_colour_raises():
    with pytest.raises(CodecError):
        encode_bytes(QuadtreeNode(0, 0, 0, 0, 0))


def test_oversized_coordinate_raises():
    with pytest.raises(CodecError):
        encode_bytes(QuadtreeNode(0, 0, 70000, 0, 0, pixel=Pixel(0, 0, 0)))