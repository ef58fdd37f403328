# quadpress

quadpress compresses binary PPM (`P6`) images with a quadtree. The image is
split recursively into four quadrants until every region is close enough to
its mean colour; each such region is then stored as a single colour. The
resulting tree is written to a compact binary file, which can be decoded back
into a (lossy) PPM image.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
quadpress photo
```

The argument is a file name without its extension (it defaults to the empty
string, giving `.ppm`). The command:

1. reads `photo.ppm`,
2. builds the quadtree with the default threshold of 24 and writes it to
   `photo_compressed.bin`,
3. reads the tree back from `photo_compressed.bin`,
4. writes the reconstructed image to `photo_recovered.ppm`.

Progress is reported on standard output as each step finishes. If a file
cannot be opened, or the image or encoded data is invalid, a message is
printed on standard error and the command exits with status 1.

## Library use

```python
from quadpress.image import import_image, export_image
from quadpress.quadtree import construct_quadtree, deconstruct_tree
from quadpress.codec import encode, decode

image = import_image("photo.ppm")
tree = construct_quadtree(image, 24)   # colour-difference threshold
encode("photo_compressed.bin", tree)

restored = deconstruct_tree(decode("photo_compressed.bin"))
export_image("photo_recovered.ppm", restored)
```

- `quadpress.image` provides `Pixel` (an `r, g, b` named tuple), `Image`
  (rows of pixels with `width` and `height` properties), `import_image`,
  `export_image`, `image_size` (the width and height from a file's header)
  and `read_num`.
- `quadpress.quadtree` provides `QuadtreeNode`, `TreeState`,
  `QuadtreeBuilder`, `construct_quadtree` and `deconstruct_tree`.
  `QuadtreeNode.iter_nodes()` yields a node and its descendants depth first.
- `quadpress.codec` provides `encode`/`decode` for files, `encode_bytes`/
  `decode_bytes` for in-memory data, `encode_node`/`decode_node` for open
  binary streams, and `CodecError`, raised for trees that cannot be encoded
  and for truncated data.
- `quadpress.cli` provides `output_paths`, which gives the three file names
  the command uses for a base name, and `run`, which performs the whole
  round trip and returns the recovered `Image`.

## PPM handling

The reader skips the first three bytes (the `P6` tag and the character after
it), then reads width, height and maximum value, each ended by a single space
or newline. Header comments are not supported and the maximum value is
ignored: one byte per channel is assumed. Truncated pixel data raises
`ValueError`. Written files always use a maximum value of 255.

## How similarity is judged

A region is kept whole when, for every pixel in it, the sum of the absolute
differences of its red, green and blue channels from the region's mean colour
(floored per channel) does not exceed the threshold. Otherwise the region is
split at its midpoint into four children, ordered top-left, top-right,
bottom-right, bottom-left. Regions one pixel wide or one pixel tall are not
split further. Empty images and images wider or taller than 65535 pixels are
rejected with `ValueError`.

## Encoded format

Nodes are written depth first. Each node starts with a 32-bit little-endian
word. For a branch the top bit is set and the lower 31 bits hold the node id;
for a leaf the whole word is zero, so leaf ids are not kept and decode as 0.
Four unsigned 16-bit little-endian bounds follow, in the order left, right,
bottom, top. A leaf then carries three bytes of colour (R, G, B); a branch is
followed by its four children.

## What it does not do

The command always performs the full round trip; there is no option to only
compress or only decompress, and the threshold cannot be changed from the
command line (use `construct_quadtree` for that). Only binary `P6` files are
read and written.