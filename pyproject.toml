[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quadpress"
version = "0.1.0"
description = "Lossy quadtree compression for binary PPM (P6) images"
requires-python = ">=3.10"
dependencies = []
keywords = ["quadtree", "image", "compression", "ppm", "netpbm"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
    "Topic :: System :: Archiving :: Compression",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
quadpress = "quadpress.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["quadpress"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
