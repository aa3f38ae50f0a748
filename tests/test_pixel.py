import pytest

from thzimage.pixel import BGRAPixel, HSVAPixel, lerp


def test_bgra_default_construction():
    pixel = BGRAPixel()
    assert (pixel.blue, pixel.green, pixel.red, pixel.alpha) == (0, 0, 0, 0xFF)


def test_bgra_construction():
    bgr = BGRAPixel(1, 2, 3)
    assert (bgr.blue, bgr.green, bgr.red, bgr.alpha) == (1, 2, 3, 0xFF)
    bgra = BGRAPixel(2, 3, 4, 5)
    assert (bgra.blue, bgra.green, bgra.red, bgra.alpha) == (2, 3, 4, 5)


@pytest.mark.parametrize("channels", [(256, 0, 0), (0, -1, 0), (0, 0, 0, 300)])
def test_bgra_rejects_out_of_range(channels):
    with pytest.raises(ValueError):
        BGRAPixel(*channels)


def test_hsva_default_construction():
    pixel = HSVAPixel()
    assert (pixel.hue, pixel.saturation, pixel.value, pixel.alpha) == (0.0, 0, 0, 0xFF)


def test_hsva_construction():
    hsv = HSVAPixel(1.4, 2, 3)
    assert (hsv.hue, hsv.saturation, hsv.value, hsv.alpha) == (1.4, 2, 3, 0xFF)
    hsva = HSVAPixel(2.4, 3, 4, 5)
    assert (hsva.hue, hsva.saturation, hsva.value, hsva.alpha) == (2.4, 3, 4, 5)


def test_bgra_comparison():
    base = BGRAPixel(12, 14, 56, 128)
    assert base == base
    for i in range(15):
        diff = BGRAPixel(
            base.blue if i & 0x1 else 123,
            base.green if i & 0x2 else 123,
            base.red if i & 0x4 else 123,
            base.alpha if i & 0x8 else 123,
        )
        assert base != diff


def test_hsva_comparison():
    base = HSVAPixel(2.31, 14, 56, 128)
    assert base == base
    for i in range(15):
        diff = HSVAPixel(
            base.hue if i & 0x1 else 1.23,
            base.saturation if i & 0x2 else 123,
            base.value if i & 0x4 else 123,
            base.alpha if i & 0x8 else 123,
        )
        assert base != diff


@pytest.mark.parametrize("value, expected", [(0, 4009), (42, 1321)])
def test_bgra_distance_squared(value, expected):
    pivot = BGRAPixel(12, 27, 56)
    target = BGRAPixel(value, value, value)
    assert pivot.distance_squared(pivot) == 0
    assert pivot.distance_squared(target) == expected
    assert target.distance_squared(pivot) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, BGRAPixel(168, 160, 173, 192)),
        (42, BGRAPixel(126, 118, 131, 192)),
        (210, BGRAPixel(214, 206, 219, 192)),
    ],
)
def test_bgra_subtraction(value, expected):
    base = BGRAPixel(40, 32, 45, 192)
    assert base - BGRAPixel(value, value, value, value) == expected


def test_bgra_addition_reverses_subtraction():
    base = BGRAPixel(40, 32, 45, 192)
    for i in range(0, 240, 42):
        diff = BGRAPixel(i, i, i, i)
        assert (base - diff) + diff == base


def test_bgra_lerp():
    a = BGRAPixel(23, 34, 55, 192)
    b = BGRAPixel(240, 134, 0, 64)
    assert lerp(a, b, 0.0) == a
    assert lerp(a, b, 1.0) == b
    assert lerp(a, b, 0.5) == BGRAPixel(131, 84, 28, 128)


def test_hsva_lerp():
    a = HSVAPixel(-0.14, 34, 55, 192)
    b = HSVAPixel(0.23, 134, 0, 64)
    start = lerp(a, b, 0.0)
    assert start.hue == pytest.approx(-0.14, abs=1e-6)
    assert (start.saturation, start.value, start.alpha) == (34, 55, 192)
    end = lerp(a, b, 1.0)
    assert end.hue == pytest.approx(0.23, abs=1e-6)
    assert (end.saturation, end.value, end.alpha) == (134, 0, 64)


def test_hsva_lerp_hue_stays_between_endpoints():
    a = HSVAPixel(-0.14, 34, 55, 192)
    b = HSVAPixel(0.23, 134, 0, 64)
    for step in range(1, 10):
        hue = lerp(a, b, step / 10).hue
        assert -0.14 < hue < 0.23


def test_lerp_mixed_types_rejected():
    with pytest.raises(TypeError):
        lerp(BGRAPixel(), HSVAPixel(), 0.5)


@pytest.mark.parametrize(
    "value, expected",
    [(0, BGRAPixel(128, 100, 156, 123)), (200, BGRAPixel(72, 100, 44, 77))],
)
def test_bgra_diff_abs(value, expected):
    fixed = BGRAPixel(128, 100, 156, 123)
    moving = BGRAPixel(value, value, value, value)
    assert fixed.diff_abs(moving) == expected
    assert moving.diff_abs(fixed) == expected


def test_bgra_diff_abs_with_itself_is_zero():
    fixed = BGRAPixel(128, 100, 156, 123)
    assert fixed.diff_abs(fixed) == BGRAPixel(0, 0, 0, 0)