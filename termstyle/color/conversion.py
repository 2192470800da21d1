"""Conversion between RGB and its cylindrical representations"""
import math

from .spec import clamp_percent, HslColor, HsvColor, normalize_hue, Rgb


def round_half_up(value: float) -> int:
    """
    Round the number to the nearest integer, with halves rounding up. Unlike
    the builtin :func:`round`, this function does not round halves to even
    and hence never maps 0.5 and 1.5 to different sides.
    """
    return math.floor(value + 0.5)


def clamp_channel(value: float) -> int:
    """Round the channel value and clamp it to the interval from 0 to 255."""
    return max(0, min(255, round_half_up(value)))


def _hue(r: float, g: float, b: float, max_value: float, delta: float) -> float:
    # Assumes delta > 0
    if max_value == r:
        h = (g - b) / delta + (6 if g < b else 0)
    elif max_value == g:
        h = (b - r) / delta + 2
    else:
        h = (r - g) / delta + 4
    return h * 60


# --------------------------------------------------------------------------------------
# HSL


def rgb_to_hsl(r: int, g: int, b: int, *, rounded: bool = True) -> HslColor:
    """
    Convert the color from RGB to HSL. Achromatic colors have zero hue and zero
    saturation.

    By default, the resulting coordinates are rounded to integers, which may
    shift a color by several units per channel when converting back to RGB.
    With ``rounded=False``, the coordinates are floating point numbers and
    :func:`hsl_to_rgb` recovers the original color to within one unit per
    channel.
    """
    rr, gg, bb = r / 255, g / 255, b / 255
    max_value = max(rr, gg, bb)
    min_value = min(rr, gg, bb)
    l = (max_value + min_value) / 2

    if max_value == min_value:
        return HslColor(0, 0, round_half_up(l * 100) if rounded else l * 100)

    delta = max_value - min_value
    if l > 0.5:
        s = delta / (2 - max_value - min_value)
    else:
        s = delta / (max_value + min_value)
    h = _hue(rr, gg, bb, max_value, delta)

    if not rounded:
        return HslColor(h % 360, s * 100, l * 100)
    return HslColor(
        round_half_up(h) % 360, round_half_up(s * 100), round_half_up(l * 100)
    )


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1/6:
        return p + (q - p) * 6 * t
    if t < 1/2:
        return q
    if t < 2/3:
        return p + (q - p) * (2/3 - t) * 6
    return p


def hsl_to_rgb(hsl: HslColor) -> Rgb:
    """
    Convert the color from HSL to RGB. This function first normalizes the hue
    and clamps saturation and lightness, so it accepts any finite coordinates.
    """
    h = normalize_hue(hsl.h) / 360
    s = clamp_percent(hsl.s) / 100
    l = clamp_percent(hsl.l) / 100

    if s == 0:
        v = clamp_channel(l * 255)
        return v, v, v

    q = l * (1 + s) if l < 0.5 else l + s - l * s
    p = 2 * l - q
    return (
        clamp_channel(_hue_to_channel(p, q, h + 1/3) * 255),
        clamp_channel(_hue_to_channel(p, q, h) * 255),
        clamp_channel(_hue_to_channel(p, q, h - 1/3) * 255),
    )


# --------------------------------------------------------------------------------------
# HSV


def rgb_to_hsv(r: int, g: int, b: int) -> HsvColor:
    """Convert the color from RGB to HSV. The coordinates are not rounded."""
    rr, gg, bb = r / 255, g / 255, b / 255
    max_value = max(rr, gg, bb)
    min_value = min(rr, gg, bb)
    delta = max_value - min_value

    h = 0.0 if delta == 0 else _hue(rr, gg, bb, max_value, delta)
    s = 0.0 if max_value == 0 else delta / max_value
    return HsvColor(h, s * 100, max_value * 100)


def hsv_to_rgb(hsv: HsvColor) -> Rgb:
    """Convert the color from HSV to RGB, rounding and clamping the channels."""
    h = normalize_hue(hsv.h) / 60
    s = clamp_percent(hsv.s) / 100
    v = clamp_percent(hsv.v) / 100

    sector = math.floor(h) % 6
    f = h - math.floor(h)
    p = v * (1 - s)
    q = v * (1 - f * s)
    t = v * (1 - (1 - f) * s)

    r, g, b = (
        (v, t, p),
        (q, v, p),
        (p, v, t),
        (p, q, v),
        (t, p, v),
        (v, p, q),
    )[sector]

    return clamp_channel(r * 255), clamp_channel(g * 255), clamp_channel(b * 255)
