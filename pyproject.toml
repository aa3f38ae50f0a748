[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "thzimage"
version = "1.0.0"
description = "BGRA/HSVA pixels, image views, transformer chains and BMP reading and writing"
requires-python = ">=3.10"
dependencies = []
keywords = ["image", "pixel", "bmp", "bitmap", "border", "transformer"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["thzimage*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
