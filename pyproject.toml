[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "jpegtune"
version = "0.1.0"
description = "Building blocks for perceptually guided JPEG re-encoding: quantization search, scoring, chroma preprocessing and bit packing"
requires-python = ">=3.10"
dependencies = []
keywords = ["jpeg", "quantization", "image compression", "chroma subsampling", "butteraugli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["jpegtune*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
