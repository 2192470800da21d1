"""
Canonicalization of color inputs to RGB.

:func:`validate` is the workhorse. It converts any supported input to an RGB
triple or, if the input is invalid, to a :class:`Failure` with a
machine-readable kind and human-readable reason. It never logs and never
raises. :func:`canonicalize` adds caching and logging on top of that and is
the entry point for styles and gradients, which must degrade gracefully.
:func:`parse_color` is the strict alternative that raises a
:class:`ColorError` instead.
"""
from collections.abc import Hashable, Sequence
import dataclasses
import logging
import math
from numbers import Real
from typing import Any, TYPE_CHECKING

from .conversion import hsl_to_rgb, round_half_up
from .lores import ansi256_to_rgb
from .names import basic_code, NAMED_COLORS, normalize_name
from .serde import (
    is_function, is_hex, parse_hex, parse_hsl_function, parse_rgb_function
)
from .spec import ColorError, Failure, FailureKind, HslColor, Rgb

if TYPE_CHECKING:
    from ..cache import CacheSet, LRUCache


logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True, slots=True)
class Validation:
    """
    The result of validating a color input. Exactly one of ``rgb`` and
    ``failure`` is ``None``. Warnings describe adjustments made to otherwise
    valid inputs, such as clamped channels.
    """
    rgb: None | Rgb
    failure: None | Failure = None
    warnings: tuple[str, ...] = ()

    def __bool__(self) -> bool:
        return self.rgb is not None


def _fail(kind: FailureKind, reason: str, value: object) -> Validation:
    return Validation(None, Failure(kind, reason, value))


# --------------------------------------------------------------------------------------


def _validate_name(name: str) -> None | Rgb:
    key = normalize_name(name)
    if key in NAMED_COLORS:
        return parse_hex(NAMED_COLORS[key])

    code = basic_code(key)
    if code is not None:
        return ansi256_to_rgb(code - 30 if code < 90 else code - 90 + 8)
    return None


def _validate_string(value: str) -> Validation:
    text = value.strip()
    if not text:
        return _fail(FailureKind.EMPTY, 'color string is empty', value)

    rgb = _validate_name(text)
    if rgb is not None:
        return Validation(rgb)

    lower = text.lower()
    try:
        if lower.startswith(('rgb(', 'rgba(')):
            rgb, warnings = parse_rgb_function(lower)
            return Validation(rgb, warnings=warnings)
        if is_function(lower):
            return Validation(hsl_to_rgb(parse_hsl_function(lower)))
        if lower.startswith('#') or is_hex(lower):
            return Validation(parse_hex(lower))
    except ColorError as x:
        return Validation(None, x.failure)

    if normalize_name(lower).isalpha():
        return _fail(FailureKind.UNKNOWN_NAME, f'unknown color name "{text}"', value)
    return _fail(FailureKind.SYNTAX, f'malformed color "{text}"', value)


def _validate_number(value: int | float) -> Validation:
    if isinstance(value, float):
        if not math.isfinite(value):
            return _fail(
                FailureKind.NOT_FINITE, f'color number {value} is not finite', value
            )
        value = math.floor(value)

    packed = value & 0xFFFFFF
    return Validation(((packed >> 16) & 0xFF, (packed >> 8) & 0xFF, packed & 0xFF))


def _validate_channels(value: Sequence[object]) -> Validation:
    if len(value) != 3:
        return _fail(
            FailureKind.ARITY,
            f'color sequence has {len(value)} instead of 3 channels',
            value,
        )

    channels: list[int] = []
    warnings: list[str] = []
    for name, channel in zip('rgb', value):
        if isinstance(channel, bool) or not isinstance(channel, Real):
            return _fail(
                FailureKind.TYPE, f'{name} channel {channel!r} is not a number', value
            )
        if not math.isfinite(channel):
            return _fail(
                FailureKind.NOT_FINITE, f'{name} channel {channel} is not finite', value
            )
        if not 0 <= channel <= 255:
            warnings.append(f'{name} channel {channel} clamped to [0, 255]')
        channels.append(max(0, min(255, round_half_up(float(channel)))))

    return Validation((channels[0], channels[1], channels[2]), warnings=tuple(warnings))


def _validate_hsl(value: HslColor) -> Validation:
    for name in ('h', 's', 'l'):
        coordinate = getattr(value, name)
        if isinstance(coordinate, bool) or not isinstance(coordinate, Real):
            return _fail(
                FailureKind.TYPE, f'HSL {name} {coordinate!r} is not a number', value
            )
        if not math.isfinite(coordinate):
            return _fail(
                FailureKind.NOT_FINITE, f'HSL {name} {coordinate} is not finite', value
            )
    return Validation(hsl_to_rgb(value))


def validate(value: object) -> Validation:
    """Validate the color input and convert it to RGB."""
    if value is None:
        return _fail(FailureKind.MISSING, 'color is missing', value)
    if isinstance(value, bool):
        return _fail(FailureKind.TYPE, 'color must not be a boolean', value)
    if isinstance(value, str):
        return _validate_string(value)
    if isinstance(value, (int, float)):
        return _validate_number(value)
    if isinstance(value, HslColor):
        return _validate_hsl(value)
    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        return _validate_channels(value)

    return _fail(
        FailureKind.TYPE, f'color of type {type(value).__name__} is not supported', value
    )


# --------------------------------------------------------------------------------------


def _cache_slot(
    value: object, cache: 'CacheSet'
) -> 'tuple[None | LRUCache[Any, Rgb], Hashable]':
    if isinstance(value, str):
        lower = value.strip().lower()
        if is_hex(lower):
            return cache.hex, lower
        if lower.startswith(('hsl(', 'hsla(')):
            return cache.hsl, lower
        return cache.color, lower
    if isinstance(value, HslColor):
        return cache.hsl, value
    if isinstance(value, bool):
        return None, None
    if isinstance(value, (int, float)):
        return cache.color, value
    if isinstance(value, (list, tuple)):
        # True == 1, so booleans would alias valid channels
        if any(isinstance(channel, bool) for channel in value):
            return None, None
        try:
            key = ('channels', *value)
            hash(key)
        except TypeError:
            return None, None
        return cache.color, key
    return None, None


def canonicalize(value: object, cache: 'None | CacheSet' = None) -> Rgb | Failure:
    """
    Canonicalize the color input to RGB.

    Args:
        value: the color input
        cache: the optional cache set, whose color, hex, and HSL caches memoize
            successful conversions
    Returns:
        the RGB triple or, if the input is invalid, the failure

    This function never raises an exception for invalid inputs. It logs
    rejected inputs at level ``DEBUG`` and clamped inputs at level ``WARNING``.
    Since failures are falsy, callers can simply test the result.
    """
    store, key = (None, None) if cache is None else _cache_slot(value, cache)
    if store is not None:
        cached = store.get(key)
        if cached is not None:
            return cached

    result = validate(value)
    for warning in result.warnings:
        logger.warning('color %r: %s', value, warning)
    if result.failure is not None:
        logger.debug('rejected color %r: %s', value, result.failure)
        return result.failure

    assert result.rgb is not None
    if store is not None and not result.warnings:
        store.set(key, result.rgb)
    return result.rgb


def parse_color(value: object) -> Rgb:
    """
    Parse the color input to RGB.

    Raises:
        ColorError: if the input is invalid
    """
    result = validate(value)
    if result.failure is not None:
        raise ColorError(result.failure)
    assert result.rgb is not None
    return result.rgb


def is_valid_color(value: object) -> bool:
    """Determine whether the value is a valid color input."""
    return validate(value).failure is None


def is_valid_hex(value: object) -> bool:
    """Determine whether the value is a hexadecimal color with 3 or 6 digits."""
    return is_hex(value)


def color_names() -> list[str]:
    """Get the sorted names of all named colors."""
    return sorted(NAMED_COLORS)
