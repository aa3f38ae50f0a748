"""Transformers that sit in a pixel chain: a null stage, borders and per-pixel mappings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

from thzimage.pixel import BGRAPixel
from thzimage.view import ImageTransformer, Rectangle

__all__ = [
    "NullTransformer",
    "Borders",
    "BorderTransformer",
    "PixelTransformer",
    "create_pixel_transformer",
]

_BORDER_MAX = 0xFF
_STOP_RUN = 0x7FFF


class NullTransformer(ImageTransformer):
    """A stage that produces nothing; stands in where no real stage is wrapped."""

    def dimensions(self) -> Rectangle:
        return Rectangle()

    def transform(self) -> Optional[Any]:
        return None

    def skip(self) -> bool:
        return False

    def reset(self) -> bool:
        return False

    def next_image(self) -> bool:
        return False


@dataclass(frozen=True)
class Borders:
    """Number of pixels to add on each side of an image, each in 0..255."""

    top: int = 0
    right: int = 0
    bottom: int = 0
    left: int = 0

    def __post_init__(self) -> None:
        for name in ("top", "right", "bottom", "left"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value <= _BORDER_MAX:
                raise ValueError(f"{name} must be an integer in 0..255, got {value!r}")


class BorderTransformer(ImageTransformer):
    """Surrounds the image of the wrapped stage with a border of one colour."""

    def __init__(
        self,
        wrapped: Optional[ImageTransformer] = None,
        borders: Optional[Borders] = None,
        color: Any = None,
    ) -> None:
        self._wrapped: ImageTransformer = NullTransformer() if wrapped is None else wrapped
        self._borders = Borders() if borders is None else borders
        self._color = BGRAPixel() if color is None else color
        self._wrapped_dimensions = Rectangle()
        self._dimensions = Rectangle()
        # Positive: pixels to take from the wrapped stage; negative: border pixels to emit.
        self._next_flip = 0
        self._stage = 0
        self._y = 0
        if wrapped is not None:
            self._setup()

    def dimensions(self) -> Rectangle:
        return self._dimensions

    def transform(self) -> Optional[Any]:
        while True:
            if self._next_flip > 0:
                self._next_flip -= 1
                return self._wrapped.transform()
            if self._next_flip < 0:
                self._next_flip += 1
                return self._color
            self._flip()

    def skip(self) -> bool:
        while True:
            if self._next_flip > 0:
                self._next_flip -= 1
                return self._wrapped.skip()
            if self._next_flip < 0:
                self._next_flip += 1
                return True
            self._flip()

    def reset(self) -> bool:
        if not self._wrapped.reset():
            return False
        self._setup()
        return True

    def next_image(self) -> bool:
        if not self._wrapped.next_image():
            return False
        self._setup()
        return True

    def _setup(self) -> None:
        self._wrapped_dimensions = self._wrapped.dimensions()
        b = self._borders
        self._dimensions = Rectangle(
            0,
            0,
            self._wrapped_dimensions.width + b.left + b.right,
            self._wrapped_dimensions.height + b.top + b.bottom,
        )
        self._stage = 0
        self._y = 0
        self._flip()

    def _flip(self) -> None:
        b = self._borders
        if self._stage == 0:
            self._next_flip = -(self._dimensions.width * b.top + b.left)
            self._stage = 1
        elif self._stage == 1:
            self._next_flip = self._wrapped_dimensions.width
            self._stage = 2
        elif self._stage == 2:
            self._y += 1
            if self._y < self._wrapped_dimensions.height:
                self._next_flip = -(b.left + b.right)
                self._stage = 1
            else:
                self._next_flip = -(self._dimensions.width * b.bottom + b.right)
                self._stage = 3
        else:
            self._next_flip = _STOP_RUN


class PixelTransformer(ImageTransformer):
    """Applies a pixel-to-pixel function to every pixel of the wrapped stage."""

    def __init__(self, wrapped: ImageTransformer, transformation: Callable[[Any], Any]) -> None:
        self._wrapped = wrapped
        self._transformation = transformation

    def dimensions(self) -> Rectangle:
        return self._wrapped.dimensions()

    def transform(self) -> Optional[Any]:
        pixel = self._wrapped.transform()
        if pixel is None:
            return None
        return self._transformation(pixel)

    def skip(self) -> bool:
        return self._wrapped.skip()

    def reset(self) -> bool:
        return self._wrapped.reset()

    def next_image(self) -> bool:
        return self._wrapped.next_image()


def create_pixel_transformer(wrapped: ImageTransformer, transformation: Any) -> PixelTransformer:
    """Wrap a stage with a pixel mapping.

    A class given as transformation is instantiated with no arguments first.
    """
    if isinstance(transformation, type):
        transformation = transformation()
    return PixelTransformer(wrapped, transformation)