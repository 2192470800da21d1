"""
Derived HSL colors and palettes. All functions are pure and return new HSL
colors. Hues are normalized and percentages are clamped.
"""
import dataclasses

from .contrast import is_accessible
from .conversion import hsl_to_rgb, rgb_to_hsl, round_half_up
from .spec import clamp_percent, HslColor, normalize_hue


def lighten(hsl: HslColor, amount: float) -> HslColor:
    """Increase the lightness by the given percentage points."""
    return dataclasses.replace(hsl, l=clamp_percent(hsl.l + amount))


def darken(hsl: HslColor, amount: float) -> HslColor:
    """Decrease the lightness by the given percentage points."""
    return dataclasses.replace(hsl, l=clamp_percent(hsl.l - amount))


def saturate(hsl: HslColor, amount: float) -> HslColor:
    """Increase the saturation by the given percentage points."""
    return dataclasses.replace(hsl, s=clamp_percent(hsl.s + amount))


def desaturate(hsl: HslColor, amount: float) -> HslColor:
    """Decrease the saturation by the given percentage points."""
    return dataclasses.replace(hsl, s=clamp_percent(hsl.s - amount))


def adjust_hue(hsl: HslColor, degrees: float) -> HslColor:
    """Rotate the hue by the given number of degrees."""
    return dataclasses.replace(hsl, h=normalize_hue(hsl.h + degrees))


def complement(hsl: HslColor) -> HslColor:
    return adjust_hue(hsl, 180)


def triadic(hsl: HslColor) -> tuple[HslColor, HslColor, HslColor]:
    """Create three colors evenly spaced around the color wheel."""
    return hsl, adjust_hue(hsl, 120), adjust_hue(hsl, 240)


def analogous(
    hsl: HslColor, angle: float = 30
) -> tuple[HslColor, HslColor, HslColor]:
    """Create the color flanked by its neighbors on the color wheel."""
    return adjust_hue(hsl, -angle), hsl, adjust_hue(hsl, angle)


def split_complementary(
    hsl: HslColor, angle: float = 30
) -> tuple[HslColor, HslColor, HslColor]:
    """Create the color and the two neighbors of its complement."""
    opposite = complement(hsl)
    return hsl, adjust_hue(opposite, -angle), adjust_hue(opposite, angle)


def monochromatic(hsl: HslColor, count: int = 5) -> list[HslColor]:
    """
    Create colors with the same hue and saturation but evenly spaced lightness
    from 0 to 100.

    For a count of one, this function returns a list with the original color
    unchanged. For counts of zero or less, it returns an empty list.
    """
    if count <= 0:
        return []
    if count == 1:
        return [hsl]

    step = 100 / (count - 1)
    return [
        HslColor(hsl.h, hsl.s, clamp_percent(index * step))
        for index in range(count)
    ]


def blend(hsl1: HslColor, hsl2: HslColor, ratio: float = 0.5) -> HslColor:
    """
    Blend the two colors in RGB. A ratio of 0 yields the first color and a
    ratio of 1 the second one. The ratio is clamped to that interval.
    """
    ratio = max(0.0, min(1.0, ratio))
    rgb1 = hsl_to_rgb(hsl1)
    rgb2 = hsl_to_rgb(hsl2)
    r, g, b = (
        round_half_up(c1 * (1 - ratio) + c2 * ratio) for c1, c2 in zip(rgb1, rgb2)
    )
    return rgb_to_hsl(r, g, b)


def similar(hsl1: HslColor, hsl2: HslColor, tolerance: float = 10) -> bool:
    """
    Determine whether the two colors differ by at most the tolerance in each
    coordinate. Hue differences are measured along the shorter arc.
    """
    delta = abs(hsl1.h - hsl2.h) % 360
    hue_delta = min(delta, 360 - delta)
    return (
        hue_delta <= tolerance
        and abs(hsl1.s - hsl2.s) <= tolerance
        and abs(hsl1.l - hsl2.l) <= tolerance
    )


def accessible_palette(base: HslColor, count: int = 5) -> list[HslColor]:
    """
    Create a palette of colors with evenly spaced hues, starting with the base
    color. Each candidate that does not meet WCAG AA contrast with the base is
    lightened, and if still inaccessible darkened instead, by 30 points. The
    palette is a best effort, since neither adjustment may suffice.
    """
    if count <= 0:
        return []

    colors = [base]
    for index in range(1, count):
        candidate = adjust_hue(base, 360 / count * index)
        if not is_accessible(base, candidate):
            lighter = lighten(candidate, 30)
            candidate = (
                lighter if is_accessible(base, lighter) else darken(candidate, 30)
            )
        colors.append(candidate)
    return colors
