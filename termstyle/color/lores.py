"""
Support for low-resolution terminal colors, i.e., the 256-color palette with
its 16 extended ANSI colors, 6x6x6 RGB cube, and 24-step gray ramp as well as
the 8 basic ANSI colors.
"""
from .conversion import round_half_up
from .spec import Rgb


_ANSI_TO_RGB256: tuple[Rgb, ...] = (
    (0, 0, 0),
    (170, 0, 0),
    (0, 170, 0),
    (170, 85, 0),
    (0, 0, 170),
    (170, 0, 170),
    (0, 170, 170),
    (170, 170, 170),
    (85, 85, 85),
    (255, 85, 85),
    (85, 255, 85),
    (255, 255, 85),
    (85, 85, 255),
    (255, 85, 255),
    (85, 255, 255),
    (255, 255, 255),
)

_RGB6_TO_RGB256 = (0, 0x5F, 0x87, 0xAF, 0xD7, 0xFF)


def is_ansi(color: int) -> bool:
    """Determine whether the 8-bit color is one of the 16 extended ANSI colors."""
    return 0 <= color <= 15


def is_cube(color: int) -> bool:
    """Determine whether the 8-bit color is part of the 6x6x6 RGB cube."""
    return 16 <= color <= 231


def is_gray(color: int) -> bool:
    """Determine whether the 8-bit color is part of the 24-step gray ramp."""
    return 232 <= color <= 255


def ansi256_to_rgb(color: int) -> Rgb:
    """
    Convert the 8-bit terminal color to RGB. The 16 extended ANSI colors use
    the VGA palette, since their actual values depend on the terminal's theme.
    """
    if is_ansi(color):
        return _ANSI_TO_RGB256[color]
    if is_cube(color):
        b = color - 16
        r = b // 36
        b -= 36 * r
        g = b // 6
        b -= 6 * g
        return _RGB6_TO_RGB256[r], _RGB6_TO_RGB256[g], _RGB6_TO_RGB256[b]
    if is_gray(color):
        level = 8 + 10 * (color - 232)
        return level, level, level

    raise ValueError(f'8-bit color {color} is not between 0 and 255')


_EIGHT_BIT_COLORS: tuple[Rgb, ...] = tuple(ansi256_to_rgb(c) for c in range(256))

# Later entries win, so exact matches prefer the theme-independent colors.
_RGB256_TO_EIGHT_BIT = {rgb: index for index, rgb in enumerate(_EIGHT_BIT_COLORS)}


# --------------------------------------------------------------------------------------


def rgb_to_ansi256(r: int, g: int, b: int) -> int:
    """
    Convert the RGB color to an 8-bit terminal color with direct arithmetic.

    Exact grays map onto the gray ramp, with near-black mapping to 16 and
    near-white mapping to 231, i.e., the black and white corners of the RGB
    cube. The ramp index is clamped, so that the result is never 256. All other
    colors map onto the RGB cube by scaling each channel to six levels.
    """
    if r == g == b:
        if r < 8:
            return 16
        if r > 248:
            return 231
        return 232 + min(23, round_half_up((r - 8) / 10))

    return (
        16
        + 36 * round_half_up(r / 255 * 5)
        + 6 * round_half_up(g / 255 * 5)
        + round_half_up(b / 255 * 5)
    )


def _distance(c1: Rgb, c2: Rgb) -> float:
    # Weighted Euclidean distance, squared
    r_mean = (c1[0] + c2[0]) / 2
    dr = c1[0] - c2[0]
    dg = c1[1] - c2[1]
    db = c1[2] - c2[2]
    return (
        (2 + r_mean / 256) * dr * dr
        + 4 * dg * dg
        + (2 + (255 - r_mean) / 256) * db * db
    )


def closest_ansi256(r: int, g: int, b: int) -> int:
    """
    :bdg-warning:`Lossy conversion` Find the 8-bit terminal color closest to
    the RGB color. This function searches all 256 colors with a weighted
    Euclidean distance that approximates perceptual differences and is more
    accurate, but also much slower than :func:`rgb_to_ansi256`.
    """
    rgb = r, g, b
    exact = _RGB256_TO_EIGHT_BIT.get(rgb)
    if exact is not None:
        return exact

    return min(range(256), key=lambda index: _distance(rgb, _EIGHT_BIT_COLORS[index]))


def rgb_to_basic(r: int, g: int, b: int) -> int:
    """
    :bdg-warning:`Lossy conversion` Approximate the RGB color with one of the
    eight basic ANSI colors, returning its SGR foreground parameter between 30
    and 37, inclusive.
    """
    if (r + g + b) / 3 < 64:
        return 30
    if r > g and r > b:
        return 31
    if g > r and g > b:
        return 32
    if r > 128 and g > 128 and b < 64:
        return 33
    if b > r and b > g:
        return 34
    if r > 128 and b > 128 and g < 64:
        return 35
    if g > 128 and b > 128 and r < 64:
        return 36
    return 37
