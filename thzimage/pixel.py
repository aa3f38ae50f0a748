"""Pixel types and interpolation between pixels."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass

__all__ = ["BGRAPixel", "HSVAPixel", "lerp"]

_CHANNEL_MAX = 0xFF
_GREY = 0x80


def _f32(value: float) -> float:
    """Round a float to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


def _check_channel(name: str, value: object) -> None:
    if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value <= _CHANNEL_MAX:
        raise ValueError(f"{name} must be an integer in 0..255, got {value!r}")


def _wrap(value: int) -> int:
    return value & _CHANNEL_MAX


def _lerp_channel(start: int, end: int, t: float) -> int:
    delta = _f32(t * (end - start))
    # Truncate toward zero, then wrap as an unsigned byte.
    return _wrap(start + _wrap(int(delta)))


@dataclass(frozen=True, slots=True)
class BGRAPixel:
    """A pixel with blue, green, red and alpha channels of one byte each."""

    blue: int = 0
    green: int = 0
    red: int = 0
    alpha: int = _CHANNEL_MAX

    def __post_init__(self) -> None:
        for name in ("blue", "green", "red", "alpha"):
            _check_channel(name, getattr(self, name))

    def distance_squared(self, other: BGRAPixel) -> int:
        """Squared euclidean distance of the colour channels, ignoring alpha."""
        return (
            (self.blue - other.blue) ** 2
            + (self.green - other.green) ** 2
            + (self.red - other.red) ** 2
        )

    def diff_abs(self, other: BGRAPixel) -> BGRAPixel:
        """Per-channel absolute difference, alpha included."""
        return BGRAPixel(
            abs(self.blue - other.blue),
            abs(self.green - other.green),
            abs(self.red - other.red),
            abs(self.alpha - other.alpha),
        )

    def __add__(self, other: BGRAPixel) -> BGRAPixel:
        """Reverse a subtraction: both operands are offset by neutral grey."""
        if not isinstance(other, BGRAPixel):
            return NotImplemented
        return BGRAPixel(
            _wrap(_GREY + self.blue + other.blue),
            _wrap(_GREY + self.green + other.green),
            _wrap(_GREY + self.red + other.red),
            self.alpha,
        )

    def __sub__(self, other: BGRAPixel) -> BGRAPixel:
        """Difference centred on neutral grey, wrapping at byte boundaries."""
        if not isinstance(other, BGRAPixel):
            return NotImplemented
        return BGRAPixel(
            _wrap(_GREY + self.blue - other.blue),
            _wrap(_GREY + self.green - other.green),
            _wrap(_GREY + self.red - other.red),
            self.alpha,
        )


@dataclass(frozen=True, slots=True)
class HSVAPixel:
    """A pixel given as hue (radians), saturation, value and alpha."""

    hue: float = 0.0
    saturation: int = 0
    value: int = 0
    alpha: int = _CHANNEL_MAX

    def __post_init__(self) -> None:
        for name in ("saturation", "value", "alpha"):
            _check_channel(name, getattr(self, name))


def _lerp_hsva(a: HSVAPixel, b: HSVAPixel, t: float) -> HSVAPixel:
    ax = _f32(math.cos(_f32(a.hue)))
    ay = _f32(math.sin(_f32(a.hue)))
    bx = _f32(math.cos(_f32(b.hue)))
    by = _f32(math.sin(_f32(b.hue)))
    rx = _f32(ax + _f32(t * _f32(bx - ax)))
    ry = _f32(ay + _f32(t * _f32(by - ay)))
    return HSVAPixel(
        _f32(math.atan2(ry, rx)),
        _lerp_channel(a.saturation, b.saturation, t),
        _lerp_channel(a.value, b.value, t),
        _lerp_channel(a.alpha, b.alpha, t),
    )


def lerp(a, b, t: float):
    """Linearly interpolate between two pixels of the same type.

    Hue is interpolated on the unit circle; byte channels wrap like unsigned bytes.
    """
    t = _f32(t)
    if isinstance(a, BGRAPixel) and isinstance(b, BGRAPixel):
        return BGRAPixel(
            _lerp_channel(a.blue, b.blue, t),
            _lerp_channel(a.green, b.green, t),
            _lerp_channel(a.red, b.red, t),
            _lerp_channel(a.alpha, b.alpha, t),
        )
    if isinstance(a, HSVAPixel) and isinstance(b, HSVAPixel):
        return _lerp_hsva(a, b, t)
    raise TypeError("lerp needs two pixels of the same type")