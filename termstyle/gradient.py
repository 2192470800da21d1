"""
Per-character color gradients.

A gradient interpolates between two or more color stops across the
non-whitespace characters of a text, either linearly in RGB or along the hue
circle in HSV. The first and last non-whitespace characters always have the
colors of the first and last stops. Whitespace is never colored.

Rendered gradients are memoized in the gradient cache of the context's cache
set, keyed by the resolved stops, the text's length and FNV-1a hash, the
interpolation options, and the capability level.
"""
from collections.abc import Sequence
import dataclasses
import enum
import logging
from typing import Self, TypeVar

from .ansi import eight_bit_parameters, sgr, Sgr, truecolor_parameters
from .cache import fnv1a
from .color.canonical import canonicalize
from .color.conversion import hsv_to_rgb, rgb_to_hsv, round_half_up
from .color.lores import rgb_to_ansi256, rgb_to_basic
from .color.spec import ColorError, ColorInput, Failure, HsvColor, Rgb
from .fidelity import Context, Level
from .style import Style


logger = logging.getLogger(__name__)

E = TypeVar('E', bound=enum.Enum)


class Interpolation(enum.Enum):
    """
    The color space for interpolating between stops.

    Attributes:
        LINEAR: interpolates the RGB channels
        HSV: interpolates hue along the color wheel and saturation and value
            linearly
    """
    LINEAR = 'linear'
    HSV = 'hsv'


class Spin(enum.Enum):
    """
    The direction of hue interpolation in HSV.

    Attributes:
        SHORT: takes the shorter arc around the color wheel
        LONG: takes the longer arc around the color wheel
    """
    SHORT = 'short'
    LONG = 'long'


RAINBOW: tuple[str, ...] = (
    '#e81416',
    '#ffa500',
    '#faeb36',
    '#79c314',
    '#487de7',
    '#4b369d',
    '#70369d',
)
"""The seven colors of the rainbow, from red to violet."""


_WHITESPACE = frozenset(' \t\n\r')

_DEFAULT_FOREGROUND = sgr(Sgr.DEFAULT_FOREGROUND.value)


# --------------------------------------------------------------------------------------
# Interpolation


def _lerp(start: float, end: float, fraction: float) -> float:
    return start + (end - start) * fraction


def interpolate_rgb(start: Rgb, end: Rgb, fraction: float) -> Rgb:
    """Interpolate between the two RGB colors channel by channel."""
    r, g, b = (round_half_up(_lerp(s, e, fraction)) for s, e in zip(start, end))
    return r, g, b


def hue_delta(start: float, end: float, spin: Spin) -> float:
    """
    Determine the signed difference between two hues along the short or long
    arc. For hues exactly 180 degrees apart, both arcs have the same length.
    """
    delta = end - start
    if spin is Spin.SHORT:
        if delta > 180:
            delta -= 360
        elif delta < -180:
            delta += 360
    elif 0 < delta < 180:
        delta -= 360
    elif -180 < delta < 0:
        delta += 360
    return delta


def interpolate_hsv(start: Rgb, end: Rgb, fraction: float, spin: Spin) -> Rgb:
    """
    Interpolate between the two RGB colors in HSV. Coordinates stay floating
    point numbers until the result is converted back to RGB.
    """
    hsv1 = rgb_to_hsv(*start)
    hsv2 = rgb_to_hsv(*end)
    return hsv_to_rgb(HsvColor(
        hsv1.h + hue_delta(hsv1.h, hsv2.h, spin) * fraction,
        _lerp(hsv1.s, hsv2.s, fraction),
        _lerp(hsv1.v, hsv2.v, fraction),
    ))


def positions(count: int, segments: int) -> list[tuple[int, float]]:
    """
    Distribute ``count`` positions across ``segments`` segments using integer
    arithmetic. This function returns the segment index and the fractional
    progress within that segment for each position. The first position has
    progress 0 in the first segment and the last position has progress 1 in the
    last segment.
    """
    if count <= 0:
        return []
    if count == 1:
        return [(0, 0.0)]

    span = count - 1
    result = []
    for index in range(count):
        segment = min(index * segments // span, segments - 1)
        start = segment * span // segments
        end = (segment + 1) * span // segments
        length = end - start
        result.append((segment, 0.0 if length == 0 else (index - start) / length))
    return result


def ramp(
    stops: Sequence[Rgb],
    count: int,
    interpolation: Interpolation = Interpolation.LINEAR,
    spin: Spin = Spin.SHORT,
) -> list[Rgb]:
    """Interpolate ``count`` colors across the RGB stops."""
    if not stops:
        return []
    if len(stops) == 1:
        return [stops[0]] * max(count, 0)

    colors = []
    for segment, fraction in positions(count, len(stops) - 1):
        start, end = stops[segment], stops[segment + 1]
        if interpolation is Interpolation.HSV:
            colors.append(interpolate_hsv(start, end, fraction, spin))
        else:
            colors.append(interpolate_rgb(start, end, fraction))
    return colors


# --------------------------------------------------------------------------------------
# Rendering


def _color_sequence(rgb: Rgb, context: Context) -> str:
    if context.is_truecolor:
        return sgr(truecolor_parameters(Sgr.EXTENDED_FOREGROUND, *rgb))
    if context.level == Level.EIGHT_BIT:
        return sgr(eight_bit_parameters(Sgr.EXTENDED_FOREGROUND, rgb_to_ansi256(*rgb)))
    return sgr(rgb_to_basic(*rgb))


def _option(kind: type[E], value: E | str, fallback: E) -> E:
    try:
        return kind(value)
    except ValueError:
        logger.debug('unknown gradient option %r, using %s', value, fallback.value)
        return fallback


def _resolve(stops: Sequence[ColorInput], context: Context) -> None | tuple[Rgb, ...]:
    resolved = []
    for stop in stops:
        rgb = canonicalize(stop, context.cache)
        if isinstance(rgb, Failure):
            logger.debug('gradient stop %r is invalid: %s', stop, rgb)
            return None
        resolved.append(rgb)
    return tuple(resolved)


def render(
    text: str,
    stops: Sequence[ColorInput],
    interpolation: Interpolation | str = Interpolation.LINEAR,
    spin: Spin | str = Spin.SHORT,
    context: None | Context = None,
) -> str:
    """
    Render the text with a gradient across the color stops.

    Args:
        text: is the text to color
        stops: are the color stops
        interpolation: selects RGB or HSV interpolation
        spin: selects the arc for HSV interpolation
        context: is the capability context, which defaults to truecolor
            without caching
    Returns:
        the text with escape sequences before and after every non-whitespace
        character

    Empty text, a context without color support, and missing or invalid stops
    all leave the text unchanged. A single stop colors the text like a style
    with that foreground color. Unknown interpolation or spin names fall back
    to linear interpolation along the short arc.
    """
    context = Context() if context is None else context
    interpolation = _option(Interpolation, interpolation, Interpolation.LINEAR)
    spin = _option(Spin, spin, Spin.SHORT)

    if not text or not context.supports_color:
        return text
    if isinstance(stops, str) or not stops:
        logger.debug('gradient without color stops %r', stops)
        return text
    if len(stops) == 1:
        return Style(context=context).fg(stops[0]).apply(text)

    resolved = _resolve(stops, context)
    if resolved is None:
        return text

    cache = None if context.cache is None else context.cache.gradient
    key = (
        resolved,
        len(text),
        fnv1a(text),
        interpolation.value,
        spin.value,
        context.level,
        context.force,
    )
    if cache is not None:
        cached = cache.get(key)
        if cached is not None:
            return cached

    colorable = sum(1 for c in text if c not in _WHITESPACE)
    colors = iter(ramp(resolved, colorable, interpolation, spin))

    fragments = []
    for character in text:
        if character in _WHITESPACE:
            fragments.append(character)
        else:
            fragments.append(_color_sequence(next(colors), context))
            fragments.append(character)
            fragments.append(_DEFAULT_FOREGROUND)
    result = ''.join(fragments)

    if cache is not None:
        cache.set(key, result)
    return result


@dataclasses.dataclass(frozen=True, slots=True)
class Gradient:
    """
    A reusable gradient.

    Attributes:
        stops: are the color stops, at least one
        interpolation: selects RGB or HSV interpolation
        spin: selects the arc for HSV interpolation
    """
    stops: tuple[ColorInput, ...]
    interpolation: Interpolation = Interpolation.LINEAR
    spin: Spin = Spin.SHORT

    def __post_init__(self) -> None:
        if not self.stops:
            raise ValueError('gradient has no color stops')

    @classmethod
    def of(cls, *stops: ColorInput) -> Self:
        return cls(stops)

    @property
    def hsv(self) -> Self:
        """Interpolate this gradient in HSV."""
        return dataclasses.replace(self, interpolation=Interpolation.HSV)

    @property
    def long(self) -> Self:
        """Interpolate hues along the longer arc."""
        return dataclasses.replace(self, spin=Spin.LONG)

    def colors(self, count: int) -> list[Rgb]:
        """
        Compute the RGB colors for ``count`` evenly spaced positions.

        Raises:
            ColorError: if a stop is not a valid color
        """
        resolved = []
        for stop in self.stops:
            rgb = canonicalize(stop)
            if isinstance(rgb, Failure):
                raise ColorError(rgb)
            resolved.append(rgb)
        return ramp(resolved, count, self.interpolation, self.spin)

    def render(self, text: str, context: None | Context = None) -> str:
        return render(text, self.stops, self.interpolation, self.spin, context)

    def __call__(self, text: str, context: None | Context = None) -> str:
        return self.render(text, context)


def linear(
    text: str, start: ColorInput, end: ColorInput, context: None | Context = None
) -> str:
    """Render the text with a linear gradient between two colors."""
    return render(text, (start, end), context=context)


def rainbow(
    text: str,
    interpolation: Interpolation | str = Interpolation.LINEAR,
    context: None | Context = None,
) -> str:
    """Render the text with a gradient across the colors of the rainbow."""
    return render(text, RAINBOW, interpolation, context=context)
