"""
Basic type declarations for colors:

  * ``Rgb`` is a triple of integers between 0 and 255, inclusive
  * ``HslColor`` and ``HsvColor`` are immutable dataclasses for the two
    cylindrical representations of RGB
  * ``ColorInput`` is the union of all values accepted as a color
  * ``Failure`` describes a rejected color input

All container types are immutable.
"""
from collections.abc import Sequence
import dataclasses
import enum
from typing import Self, TypeAlias


Rgb: TypeAlias = tuple[int, int, int]


def normalize_hue(hue: float) -> float:
    """Wrap the hue into the half-open interval from 0 to 360."""
    return ((hue % 360) + 360) % 360


def clamp_percent(value: float) -> float:
    """Clamp the value to the interval from 0 to 100, inclusive."""
    return max(0, min(100, value))


@dataclasses.dataclass(frozen=True, slots=True)
class HslColor:
    """
    A color in HSL notation.

    Attributes:
        h: is the hue in degrees, which is circular, i.e., 360 is 0
        s: is the saturation in percent
        l: is the lightness in percent

    The constructor stores the given values as is. Use :meth:`of` to normalize
    the hue and clamp saturation and lightness.

    Instances of this class are immutable.
    """
    h: float
    s: float
    l: float

    @classmethod
    def of(cls, h: float, s: float, l: float) -> Self:
        """Create a new HSL color with normalized hue and clamped percentages."""
        return cls(normalize_hue(h), clamp_percent(s), clamp_percent(l))


@dataclasses.dataclass(frozen=True, slots=True)
class HsvColor:
    """
    A color in HSV notation.

    Attributes:
        h: is the hue in degrees
        s: is the saturation in percent
        v: is the value in percent
    """
    h: float
    s: float
    v: float


ColorInput: TypeAlias = str | int | Sequence[float] | HslColor
"""
The type of all color inputs. Strings are color names, hashed hexadecimal
colors with three or six digits, or ``rgb()``, ``rgba()``, ``hsl()``, and
``hsla()`` functions. Integers are 24-bit packed RGB values. Sequences are RGB
triples. HSL colors are literal HSL values.
"""


# --------------------------------------------------------------------------------------
# Failures


class FailureKind(enum.Enum):
    """
    The reason why a color input was rejected.

    Attributes:
        MISSING: for ``None``
        TYPE: for values of an unsupported type, including booleans
        EMPTY: for empty or all-whitespace strings
        SYNTAX: for malformed hexadecimal colors and color functions
        UNKNOWN_NAME: for well-formed names that are not in the table
        ARITY: for sequences without exactly three channels
        NOT_FINITE: for infinite and not-a-number channels
    """
    MISSING = 'missing'
    TYPE = 'type'
    EMPTY = 'empty'
    SYNTAX = 'syntax'
    UNKNOWN_NAME = 'unknown name'
    ARITY = 'arity'
    NOT_FINITE = 'not finite'


@dataclasses.dataclass(frozen=True, slots=True)
class Failure:
    """
    A rejected color input. Failures are falsy, which lets callers test the
    result of canonicalization without caring about its type.
    """
    kind: FailureKind
    reason: str
    value: object = None

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return f'{self.kind.value}: {self.reason}'


class ColorError(ValueError):
    """An error carrying the failure for an invalid color."""

    def __init__(self, failure: Failure) -> None:
        super().__init__(str(failure))
        self.failure = failure
