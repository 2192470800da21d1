"""Support for parsing and formatting color strings"""
import re
from typing import Literal, NoReturn, overload

from .spec import ColorError, Failure, FailureKind, HslColor, Rgb


@overload
def _check(
    is_valid: Literal[False], entity: str, value: object, deficiency: str = ...
) -> NoReturn:
    ...
@overload
def _check(
    is_valid: bool, entity: str, value: object, deficiency: str = ...
) -> None | NoReturn:
    ...
def _check(
    is_valid: bool, entity: str, value: object, deficiency: str = 'is malformed'
) -> None | NoReturn:
    if not is_valid:
        raise ColorError(
            Failure(FailureKind.SYNTAX, f'{entity} "{value}" {deficiency}', value)
        )
    return


_HEX_DIGITS = frozenset('0123456789abcdefABCDEF')


def parse_hex(color: str) -> Rgb:
    """
    Parse the string specifying a color in hexadecimal format. The leading
    hash is optional. Three-digit colors are expanded by doubling each digit.
    """
    entity = 'hex color'

    digits = color[1:] if color.startswith('#') else color
    _check(len(digits) in (3, 6), entity, color, 'does not have 3 or 6 digits')
    _check(
        all(d in _HEX_DIGITS for d in digits),
        entity, color, 'contains non-hexadecimal characters'
    )
    if len(digits) == 3:
        digits = ''.join(f'{d}{d}' for d in digits)
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def is_hex(color: object) -> bool:
    """Determine whether the value is a well-formed hexadecimal color."""
    if not isinstance(color, str):
        return False
    digits = color[1:] if color.startswith('#') else color
    return len(digits) in (3, 6) and all(d in _HEX_DIGITS for d in digits)


def hex_to_rgb(color: object) -> Rgb:
    """
    Convert the hexadecimal color to RGB. Unlike :func:`parse_hex`, this
    function never fails. It returns black for any malformed input, including
    the empty string, ``None``, and values that are not strings.
    """
    if not is_hex(color):
        return 0, 0, 0
    return parse_hex(color)  # type: ignore[arg-type]


# --------------------------------------------------------------------------------------


_RGB_FUNCTION = re.compile(
    r'rgba?\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*(?:,\s*([0-9.]+)\s*)?\)'
)

_HSL_FUNCTION = re.compile(
    r'hsla?\(\s*(-?[0-9.]+)\s*,\s*([0-9.]+)%?\s*,\s*([0-9.]+)%?'
    r'\s*(?:,\s*([0-9.]+)\s*)?\)'
)


def is_function(color: str) -> bool:
    """Determine whether the string starts like an ``rgb()`` or ``hsl()`` function."""
    return color.startswith(('rgb(', 'rgba(', 'hsl(', 'hsla('))


def parse_rgb_function(color: str) -> tuple[Rgb, tuple[str, ...]]:
    """
    Parse the string specifying a color as ``rgb(r, g, b)`` or ``rgba(r, g, b,
    a)``. Channels are unsigned integers; channels above 255 are clamped. The
    alpha channel is accepted and ignored.

    Returns:
        the RGB triple and a tuple of warnings, one per clamped channel
    """
    entity = 'rgb() color'

    match = _RGB_FUNCTION.fullmatch(color)
    _check(match is not None, entity, color)
    assert match is not None

    warnings: list[str] = []
    channels = []
    for name, digits in zip('rgb', match.group(1, 2, 3)):
        value = int(digits)
        if value > 255:
            warnings.append(f'{entity} "{color}" has {name} channel {value} > 255')
            value = 255
        channels.append(value)

    return (channels[0], channels[1], channels[2]), tuple(warnings)


def parse_hsl_function(color: str) -> HslColor:
    """
    Parse the string specifying a color as ``hsl(h, s%, l%)`` or ``hsla(h, s%,
    l%, a)``. All coordinates may have a fractional part. The hue is normalized
    and saturation and lightness are clamped.
    """
    entity = 'hsl() color'

    match = _HSL_FUNCTION.fullmatch(color)
    _check(match is not None, entity, color)
    assert match is not None

    try:
        h, s, l = (float(c) for c in match.group(1, 2, 3))
    except ValueError:
        _check(False, entity, color, 'has malformed number')
    return HslColor.of(h, s, l)


# --------------------------------------------------------------------------------------


def rgb_to_hex(rgb: Rgb) -> str:
    """Format the RGB triple as a hashed hexadecimal color."""
    r, g, b = rgb
    return f'#{r:02x}{g:02x}{b:02x}'


def _number(value: float) -> str:
    return f'{value:.1f}'.rstrip('0').rstrip('.')


def format_hsl(hsl: HslColor) -> str:
    """Format the HSL color in CSS function notation."""
    return f'hsl({_number(hsl.h)}, {_number(hsl.s)}%, {_number(hsl.l)}%)'
