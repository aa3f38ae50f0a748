"""Geometry types, the transformer interface and views into pixel buffers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator, MutableSequence
from dataclasses import dataclass, replace
from typing import Any, Optional

__all__ = ["Point", "Rectangle", "ImageTransformer", "ImageView"]


@dataclass(frozen=True)
class Point:
    """A position in an image."""

    x: int = 0
    y: int = 0


@dataclass(frozen=True)
class Rectangle:
    """An axis-aligned rectangle given by its upper left corner and its size."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("width and height must not be negative")

    @property
    def upper_left_point(self) -> Point:
        return Point(self.x, self.y)

    def area(self) -> int:
        """Number of pixels covered by the rectangle."""
        return self.width * self.height

    def intersection(self, other: Rectangle) -> Rectangle:
        """The overlap of both rectangles, or an empty rectangle if they do not overlap."""
        left = max(self.x, other.x)
        top = max(self.y, other.y)
        right = min(self.x + self.width, other.x + other.width)
        bottom = min(self.y + self.height, other.y + other.height)
        if right <= left or bottom <= top:
            return Rectangle()
        return Rectangle(left, top, right - left, bottom - top)

    def range(self) -> range:
        """Indices of all pixels of a buffer with these dimensions."""
        return range(self.area())


class ImageTransformer(ABC):
    """A stage of a pixel-producing chain.

    ``transform`` returns the next pixel, or ``None`` once no pixel is left.
    """

    @abstractmethod
    def dimensions(self) -> Rectangle:
        """Dimensions of the image this stage produces."""

    @abstractmethod
    def transform(self) -> Optional[Any]:
        """Produce the next pixel, or None if there is none."""

    @abstractmethod
    def skip(self) -> bool:
        """Skip the next pixel; False if there was none."""

    @abstractmethod
    def reset(self) -> bool:
        """Start over at the first pixel; False if that is not possible."""

    @abstractmethod
    def next_image(self) -> bool:
        """Move on to the next image; False if there is none."""


class ImageView(ImageTransformer):
    """A view onto a rectangular region of a row-major pixel buffer.

    The view walks its region row by row and doubles as the start of a
    transformer chain.
    """

    def __init__(
        self,
        buffer: MutableSequence,
        image_dimensions: Rectangle,
        region: Optional[Rectangle] = None,
    ) -> None:
        self.image_dimensions = replace(image_dimensions, x=0, y=0)
        if len(buffer) < self.image_dimensions.area():
            raise ValueError("buffer is smaller than the image dimensions")
        self.buffer = buffer
        if region is None:
            self.region = self.image_dimensions
        else:
            self.region = self.image_dimensions.intersection(region)
        self._offset = 0

    def _buffer_index(self, offset: int) -> int:
        row, column = divmod(offset, self.region.width)
        return (self.region.y + row) * self.image_dimensions.width + self.region.x + column

    @property
    def current_position(self) -> Point:
        """Position in the image of the pixel the view currently points at."""
        if self.region.width == 0:
            return self.region.upper_left_point
        row, column = divmod(self._offset, self.region.width)
        return Point(self.region.x + column, self.region.y + row)

    def reset(self) -> bool:
        self._offset = 0
        return True

    def dimensions(self) -> Rectangle:
        return Rectangle(0, 0, self.region.width, self.region.height)

    def transform(self) -> Optional[Any]:
        if self._offset >= self.region.area():
            return None
        pixel = self.buffer[self._buffer_index(self._offset)]
        self._offset += 1
        return pixel

    def skip(self) -> bool:
        if self._offset >= self.region.area():
            return False
        self._offset += 1
        return True

    def next_image(self) -> bool:
        return False

    def sub_view(self, sub_region: Rectangle) -> ImageView:
        """A view onto the part of this view's region that lies inside sub_region."""
        return ImageView(self.buffer, self.image_dimensions, self.region.intersection(sub_region))

    def __iter__(self) -> Iterator:
        """Yield the pixels from the current position to the end of the region."""
        for offset in range(self._offset, self.region.area()):
            yield self.buffer[self._buffer_index(offset)]