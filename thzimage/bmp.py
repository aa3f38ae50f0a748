"""Reading and writing uncompressed 24 and 32 bit BitMap files."""

from __future__ import annotations

import struct
from collections.abc import Sequence
from dataclasses import astuple, dataclass
from os import PathLike
from typing import BinaryIO, Optional, Union

from thzimage.interfaces import ImageReader, ImageWriter
from thzimage.pixel import BGRAPixel
from thzimage.view import Rectangle

__all__ = ["BmpError", "BmpHeader", "BmpReader", "BmpWriter"]

_HEADER_FORMAT = struct.Struct("<HIIIIiiHHIIiiII")
HEADER_SIZE = _HEADER_FORMAT.size
MAGIC = 0x4D42
_INFO_HEADER_SIZE = 40
_SUPPORTED_BIT_COUNTS = (24, 32)

PathType = Union[str, "PathLike[str]"]


class BmpError(Exception):
    """Raised when a BMP file cannot be read or written."""


@dataclass
class BmpHeader:
    """The combined file and info header of a BMP file."""

    magic: int = MAGIC
    file_size: int = 0
    reserved: int = 0
    off_bits: int = HEADER_SIZE
    info_size: int = _INFO_HEADER_SIZE
    width: int = 0
    height: int = 0
    planes: int = 1
    bit_count: int = 24
    compression: int = 0
    size_image: int = 0
    x_pels_per_meter: int = 0
    y_pels_per_meter: int = 0
    clr_used: int = 0
    clr_important: int = 0

    @classmethod
    def for_image(cls, width: int, height: int, bit_count: int) -> BmpHeader:
        """Header for an image of the given size; every line is padded to four bytes."""
        size_image = ((bit_count * width // 8 + 3) & ~3) * height
        return cls(
            width=width,
            height=height,
            bit_count=bit_count,
            size_image=size_image,
            file_size=HEADER_SIZE + size_image,
        )

    def pack(self) -> bytes:
        """The header as the 54 bytes that start a BMP file."""
        return _HEADER_FORMAT.pack(*astuple(self))

    @classmethod
    def unpack(cls, data: bytes) -> BmpHeader:
        """Parse the header from the start of the given bytes."""
        if len(data) < HEADER_SIZE:
            raise BmpError("File too small for header structure")
        return cls(*_HEADER_FORMAT.unpack_from(data))


class BmpReader(ImageReader):
    """Reads an image from a BMP file."""

    def __init__(self, filepath: PathType) -> None:
        self._stream: Optional[BinaryIO]
        try:
            self._stream = open(filepath, "rb")
        except OSError:
            self._stream = None
        self._dimensions = Rectangle()
        self._bit_count = 0
        self._bottom_up = True

    def file_type_fits(self) -> bool:
        """True if the file starts with a BMP header."""
        if self._stream is None:
            return False
        data = self._stream.read(HEADER_SIZE)
        self._stream.seek(0)
        if len(data) < HEADER_SIZE:
            return False
        return BmpHeader.unpack(data).magic == MAGIC

    def image_present(self) -> bool:
        return self._stream is not None

    def init(self) -> None:
        if self._stream is None:
            raise BmpError("File could not be opened")
        header = BmpHeader.unpack(self._stream.read(HEADER_SIZE))
        if header.magic != MAGIC:
            raise BmpError("Given file is not a BMP file")
        if header.bit_count not in _SUPPORTED_BIT_COUNTS:
            raise BmpError("Unsupported bit count")
        if header.compression != 0:
            raise BmpError("Unsupported compression")
        if header.width == 0:
            raise BmpError("Width is zero")
        if header.width < 0:
            raise BmpError("Width is negative")
        if header.height == 0:
            raise BmpError("Height is zero")
        if header.off_bits != HEADER_SIZE:
            raise BmpError("Unsupported number of offBits")
        height = header.height
        self._bottom_up = height > 0
        height = abs(height)
        expected = BmpHeader.for_image(header.width, height, header.bit_count)
        if header.size_image != expected.size_image:
            raise BmpError("Size of the image data does not match dimensions and bitcount")
        self._bit_count = header.bit_count
        self._dimensions = Rectangle(0, 0, header.width, height)

    def dimensions(self) -> Rectangle:
        return self._dimensions

    def read(self) -> list[BGRAPixel]:
        if self._stream is None:
            raise BmpError("File is not open")
        width = self._dimensions.width
        bytes_per_pixel = self._bit_count // 8
        bytes_used = bytes_per_pixel * width
        line_length = bytes_used if bytes_per_pixel == 4 else (bytes_used + 3) & ~3
        rows = []
        for _ in range(self._dimensions.height):
            line = self._stream.read(line_length)
            if len(line) < line_length:
                raise BmpError("Unexpected end of image data")
            if bytes_per_pixel == 4:
                rows.append([BGRAPixel(*values) for values in struct.iter_unpack("4B", line)])
            else:
                rows.append([BGRAPixel(*values) for values in struct.iter_unpack("3B", line[:bytes_used])])
        if self._bottom_up:
            rows.reverse()
        return [pixel for row in rows for pixel in row]

    def deinit(self) -> None:
        if self._stream is not None:
            self._stream.close()
            self._stream = None


class BmpWriter(ImageWriter):
    """Writes an image to a BMP file, with or without an alpha channel."""

    def __init__(self, filepath: PathType, transparency: bool = True) -> None:
        self._filepath = filepath
        self._bit_count = 32 if transparency else 24
        self.in_session = False

    def init(self) -> None:
        """Mark the start of a writing session."""
        self.in_session = True

    def write(self, dimensions: Rectangle, buffer: Sequence[BGRAPixel]) -> None:
        if dimensions.area() != len(buffer):
            raise BmpError("Image dimensions do not match the given buffer size")
        width, height = dimensions.width, dimensions.height
        header = BmpHeader.for_image(width, height, self._bit_count)
        rows = [buffer[start : start + width] for start in range(0, len(buffer), width)] if width else []
        if self._bit_count == 32:
            encode = lambda p: bytes((p.blue, p.green, p.red, p.alpha))  # noqa: E731
            padding = b""
        else:
            encode = lambda p: bytes((p.blue, p.green, p.red))  # noqa: E731
            bytes_used = 3 * width
            padding = bytes(((bytes_used + 3) & ~3) - bytes_used)
        # Positive height means the bottom line is stored first.
        data = b"".join(b"".join(encode(p) for p in row) + padding for row in reversed(rows))
        try:
            with open(self._filepath, "wb") as stream:
                stream.write(header.pack())
                stream.write(data)
        except OSError as error:
            raise BmpError("Could not open the file to write") from error

    def deinit(self) -> None:
        """Mark the end of a writing session."""
        self.in_session = False