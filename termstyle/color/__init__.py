"""
Colors for terminals: canonicalization of color inputs to RGB, conversion
between RGB, HSL, HSV, and the 8-bit palette, derived palettes, and WCAG
contrast.
"""
from .canonical import (
    canonicalize,
    color_names,
    is_valid_color,
    is_valid_hex,
    parse_color,
    validate,
    Validation,
)
from .contrast import contrast_ratio, is_accessible, relative_luminance
from .conversion import hsl_to_rgb, hsv_to_rgb, rgb_to_hsl, rgb_to_hsv
from .lores import ansi256_to_rgb, closest_ansi256, rgb_to_ansi256, rgb_to_basic
from .palette import (
    accessible_palette,
    adjust_hue,
    analogous,
    blend,
    complement,
    darken,
    desaturate,
    lighten,
    monochromatic,
    saturate,
    similar,
    split_complementary,
    triadic,
)
from .serde import format_hsl, hex_to_rgb, rgb_to_hex
from .spec import (
    ColorError, ColorInput, Failure, FailureKind, HslColor, HsvColor, Rgb
)

__all__ = [
    'accessible_palette',
    'adjust_hue',
    'analogous',
    'blend',
    'complement',
    'darken',
    'desaturate',
    'lighten',
    'monochromatic',
    'saturate',
    'similar',
    'split_complementary',
    'triadic',
    'ansi256_to_rgb',
    'canonicalize',
    'closest_ansi256',
    'color_names',
    'ColorError',
    'ColorInput',
    'contrast_ratio',
    'Failure',
    'FailureKind',
    'format_hsl',
    'hex_to_rgb',
    'hsl_to_rgb',
    'HslColor',
    'hsv_to_rgb',
    'HsvColor',
    'is_accessible',
    'is_valid_color',
    'is_valid_hex',
    'parse_color',
    'relative_luminance',
    'Rgb',
    'rgb_to_ansi256',
    'rgb_to_basic',
    'rgb_to_hex',
    'rgb_to_hsl',
    'rgb_to_hsv',
    'validate',
    'Validation',
]
