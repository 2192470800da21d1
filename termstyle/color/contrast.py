"""
Support for computing color contrast. This module implements the `WCAG 2.x
contrast ratio <https://www.w3.org/TR/WCAG21/#dfn-contrast-ratio>`_, which
compares the relative luminance of two colors. Unlike perceptual contrast
metrics, the ratio is symmetric, i.e., the order of the two colors does not
matter.
"""
from typing import Literal

from .conversion import hsl_to_rgb
from .spec import HslColor, Rgb


AA = 4.5
"""The minimum contrast ratio for normal text at WCAG level AA."""

AAA = 7.0
"""The minimum contrast ratio for normal text at WCAG level AAA."""

_THRESHOLD = 0.03928
_EXPONENT = 2.4
_COEFFICIENTS = (0.2126, 0.7152, 0.0722)


def _linearize(channel: int) -> float:
    value = channel / 255
    if value <= _THRESHOLD:
        return value / 12.92
    return ((value + 0.055) / 1.055) ** _EXPONENT


def relative_luminance(rgb: Rgb) -> float:
    """Determine the relative luminance of the RGB color, between 0 and 1."""
    return sum(c * _linearize(v) for c, v in zip(_COEFFICIENTS, rgb))


def luminance_ratio(l1: float, l2: float) -> float:
    """
    Compute the contrast ratio of two relative luminance values. The result is
    between 1 and 21, inclusive.
    """
    lighter = max(l1, l2)
    darker = min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def contrast_ratio(hsl1: HslColor, hsl2: HslColor) -> float:
    """Compute the contrast ratio of two HSL colors."""
    return luminance_ratio(
        relative_luminance(hsl_to_rgb(hsl1)),
        relative_luminance(hsl_to_rgb(hsl2)),
    )


def is_accessible(
    hsl1: HslColor, hsl2: HslColor, level: Literal['AA', 'AAA'] = 'AA'
) -> bool:
    """
    Determine whether the two HSL colors have enough contrast for normal text
    at the given WCAG conformance level.
    """
    if level not in ('AA', 'AAA'):
        raise ValueError(f'WCAG level {level} is neither "AA" nor "AAA"')
    return contrast_ratio(hsl1, hsl2) >= (AAA if level == 'AAA' else AA)
