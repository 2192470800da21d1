"""
High-level support for terminal styles.

A terminal style is an ordered sequence of SGR parameters, each paired with the
parameter that undoes it. Styles are immutable and assembled through a fluent
interface of properties and methods, each of which returns a new style:

.. code-block:: python

    warning = Style().bold.yellow.bg_hex('#202020')
    print(warning('Careful!'))

Styles resolve conflicts as they are assembled. A style has at most one
foreground and one background color, with later colors replacing earlier
ones. Text attributes accumulate.

Styles also are bound to a capability :class:`.Context`. Colors are recorded at
full fidelity and downgraded when the style is rendered, i.e., 24-bit colors
become 8-bit colors on terminals that support only 256 colors and are dropped
altogether on terminals that support only the basic ANSI colors. As a result,
styles defined once in a central module can be rebound to the detected context
with :meth:`Style.with_context`.
"""
import dataclasses
import enum
import logging
from typing import Self

from .ansi import (
    ATTRIBUTE_RESETS, eight_bit_parameters, sgr, Sgr, truecolor_parameters
)
from .color.canonical import canonicalize
from .color.lores import rgb_to_ansi256
from .color.names import basic_code
from .color.spec import ColorInput
from .fidelity import Context, Level


logger = logging.getLogger(__name__)


class Category(enum.Enum):
    """
    The category of an SGR parameter. A style has at most one parameter in
    each of the two color categories.
    """
    FOREGROUND = 'foreground'
    BACKGROUND = 'background'
    ATTRIBUTE = 'attribute'


def classify(code: str) -> Category:
    """
    Classify the SGR parameters. Parameters 30–37, 90–97, and extended colors
    starting with ``38;`` are foreground colors. Parameters 40–47, 100–107, and
    extended colors starting with ``48;`` are background colors. Everything
    else, including the default color parameters 39 and 49, is an attribute.
    """
    if code.startswith('38;'):
        return Category.FOREGROUND
    if code.startswith('48;'):
        return Category.BACKGROUND

    try:
        number = int(code)
    except ValueError:
        return Category.ATTRIBUTE

    if 30 <= number <= 37 or 90 <= number <= 97:
        return Category.FOREGROUND
    if 40 <= number <= 47 or 100 <= number <= 107:
        return Category.BACKGROUND
    return Category.ATTRIBUTE


def default_reset(code: str, category: Category) -> str:
    """Determine the SGR parameter that undoes the given parameter."""
    if category is Category.FOREGROUND:
        return str(Sgr.DEFAULT_FOREGROUND.value)
    if category is Category.BACKGROUND:
        return str(Sgr.DEFAULT_BACKGROUND.value)

    try:
        reset = ATTRIBUTE_RESETS.get(Sgr(int(code)))
    except ValueError:
        reset = None
    return str((Sgr.RESET if reset is None else reset).value)


@dataclasses.dataclass(frozen=True, slots=True)
class StyleCode:
    """
    An SGR parameter and the parameter undoing it.

    Attributes:
        code: is the parameter, e.g., ``1`` or ``38;2;255;0;0``
        reset: is the parameter undoing ``code``
        category: is the category of ``code``
    """
    code: str
    reset: str
    category: Category

    @classmethod
    def of(cls, code: int | str, reset: None | int | str = None) -> Self:
        """
        Create a new style code. If the reset parameter is omitted, it is
        derived from the parameter's category.
        """
        code = str(code)
        category = classify(code)
        if reset is None:
            reset = default_reset(code, category)
        return cls(code, str(reset), category)

    def prepare(self, context: Context) -> None | Self:
        """
        Prepare this style code for rendering in the given context. This method
        returns the style code unchanged if the context supports it, a
        downgraded style code, or ``None`` if the context cannot render it.
        """
        if self.category is Category.ATTRIBUTE or context.is_truecolor:
            return self

        parameters = self.code.split(';')
        layer = (
            Sgr.EXTENDED_FOREGROUND
            if self.category is Category.FOREGROUND
            else Sgr.EXTENDED_BACKGROUND
        )

        if len(parameters) == 5 and parameters[1] == '2':
            if context.level < Level.EIGHT_BIT:
                return None
            try:
                r, g, b = (int(p) for p in parameters[2:])
            except ValueError:
                return self
            return dataclasses.replace(
                self, code=eight_bit_parameters(layer, rgb_to_ansi256(r, g, b))
            )

        if len(parameters) == 3 and parameters[1] == '5':
            return self if context.level >= Level.EIGHT_BIT else None

        return self


# --------------------------------------------------------------------------------------


@dataclasses.dataclass(frozen=True, slots=True)
class Style:
    """
    A terminal style.

    Attributes:
        codes: are the style's SGR parameters in the order they are opened
        context: is the capability context for rendering the style

    The parameters undoing a style are the resets of its codes in reverse
    order. Instances of this class are immutable.
    """
    codes: tuple[StyleCode, ...] = ()
    context: Context = dataclasses.field(default_factory=Context)

    @property
    def plain(self) -> bool:
        """The flag for a style without codes."""
        return not self.codes

    @property
    def resets(self) -> tuple[str, ...]:
        """The parameters undoing this style, in the order they are applied."""
        return tuple(code.reset for code in reversed(self.codes))

    def with_context(self, context: Context) -> Self:
        """Rebind this style to the given capability context."""
        return dataclasses.replace(self, context=context)

    def add(self, code: int | str, reset: None | int | str = None) -> Self:
        """
        Add the SGR parameter to this style. If the parameter is a foreground
        or background color, this method first removes any previous color of
        the same category.
        """
        if isinstance(code, bool) or not isinstance(code, (int, str)) or code == '':
            logger.debug('ignoring invalid SGR parameter %r', code)
            return self

        style_code = StyleCode.of(code, reset)
        codes = self.codes
        if style_code.category is not Category.ATTRIBUTE:
            codes = tuple(c for c in codes if c.category is not style_code.category)
        return dataclasses.replace(self, codes=(*codes, style_code))

    # ----------------------------------------------------------------------------------
    # Text attributes

    @property
    def bold(self) -> Self:
        return self.add(Sgr.BOLD.value)

    @property
    def dim(self) -> Self:
        return self.add(Sgr.DIM.value)

    @property
    def italic(self) -> Self:
        return self.add(Sgr.ITALIC.value)

    @property
    def underline(self) -> Self:
        return self.add(Sgr.UNDERLINE.value)

    @property
    def blink(self) -> Self:
        return self.add(Sgr.BLINK.value)

    @property
    def inverse(self) -> Self:
        """Update style with foreground and background colors reversed."""
        return self.add(Sgr.INVERSE.value)

    @property
    def hidden(self) -> Self:
        return self.add(Sgr.HIDDEN.value)

    @property
    def strikethrough(self) -> Self:
        return self.add(Sgr.STRIKETHROUGH.value)

    # ----------------------------------------------------------------------------------
    # Colors

    def _color(self, color: object, background: bool) -> Self:
        if isinstance(color, str):
            code = basic_code(color)
            if code is not None:
                return self.add(code + 10 if background else code)

        if self.context.level == Level.ANSI and not self.context.force:
            logger.debug('dropping color %r, which requires more than ANSI colors', color)
            return self

        rgb = canonicalize(color, self.context.cache)
        if not rgb:
            return self

        layer = Sgr.EXTENDED_BACKGROUND if background else Sgr.EXTENDED_FOREGROUND
        return self.add(truecolor_parameters(layer, *rgb))

    def fg(self, color: ColorInput) -> Self:
        """
        Update style with the foreground color. The names of the basic ANSI
        colors, such as ``red`` or ``bright_blue``, always map to their basic
        SGR parameters. Invalid colors leave the style unchanged.
        """
        return self._color(color, False)

    def bg(self, color: ColorInput) -> Self:
        """Update style with the background color."""
        return self._color(color, True)

    def rgb(self, r: float, g: float, b: float) -> Self:
        return self._color((r, g, b), False)

    def bg_rgb(self, r: float, g: float, b: float) -> Self:
        return self._color((r, g, b), True)

    def hex(self, color: str) -> Self:
        return self._color(color, False)

    def bg_hex(self, color: str) -> Self:
        return self._color(color, True)

    def _eight_bit(self, color: object, background: bool) -> Self:
        if isinstance(color, bool) or not isinstance(color, int) or not 0 <= color <= 255:
            logger.debug('rejected 8-bit color %r', color)
            return self
        if self.context.level == Level.ANSI and not self.context.force:
            logger.debug('dropping 8-bit color %d, which requires more than ANSI colors', color)
            return self

        layer = Sgr.EXTENDED_BACKGROUND if background else Sgr.EXTENDED_FOREGROUND
        return self.add(eight_bit_parameters(layer, color))

    def ansi256(self, color: int) -> Self:
        """Update style with the 8-bit foreground color."""
        return self._eight_bit(color, False)

    def bg_ansi256(self, color: int) -> Self:
        """Update style with the 8-bit background color."""
        return self._eight_bit(color, True)

    @property
    def black(self) -> Self:
        return self.add(30)

    @property
    def red(self) -> Self:
        return self.add(31)

    @property
    def green(self) -> Self:
        return self.add(32)

    @property
    def yellow(self) -> Self:
        return self.add(33)

    @property
    def blue(self) -> Self:
        return self.add(34)

    @property
    def magenta(self) -> Self:
        return self.add(35)

    @property
    def cyan(self) -> Self:
        return self.add(36)

    @property
    def white(self) -> Self:
        return self.add(37)

    @property
    def gray(self) -> Self:
        """Update style with bright black, which is a gray."""
        return self.add(90)

    @property
    def grey(self) -> Self:
        return self.gray

    @property
    def bright_black(self) -> Self:
        return self.add(90)

    @property
    def bright_red(self) -> Self:
        return self.add(91)

    @property
    def bright_green(self) -> Self:
        return self.add(92)

    @property
    def bright_yellow(self) -> Self:
        return self.add(93)

    @property
    def bright_blue(self) -> Self:
        return self.add(94)

    @property
    def bright_magenta(self) -> Self:
        return self.add(95)

    @property
    def bright_cyan(self) -> Self:
        return self.add(96)

    @property
    def bright_white(self) -> Self:
        return self.add(97)

    @property
    def bg_black(self) -> Self:
        return self.add(40)

    @property
    def bg_red(self) -> Self:
        return self.add(41)

    @property
    def bg_green(self) -> Self:
        return self.add(42)

    @property
    def bg_yellow(self) -> Self:
        return self.add(43)

    @property
    def bg_blue(self) -> Self:
        return self.add(44)

    @property
    def bg_magenta(self) -> Self:
        return self.add(45)

    @property
    def bg_cyan(self) -> Self:
        return self.add(46)

    @property
    def bg_white(self) -> Self:
        return self.add(47)

    @property
    def bg_gray(self) -> Self:
        return self.add(100)

    @property
    def bg_grey(self) -> Self:
        return self.bg_gray

    @property
    def bg_bright_black(self) -> Self:
        return self.add(100)

    @property
    def bg_bright_red(self) -> Self:
        return self.add(101)

    @property
    def bg_bright_green(self) -> Self:
        return self.add(102)

    @property
    def bg_bright_yellow(self) -> Self:
        return self.add(103)

    @property
    def bg_bright_blue(self) -> Self:
        return self.add(104)

    @property
    def bg_bright_magenta(self) -> Self:
        return self.add(105)

    @property
    def bg_bright_cyan(self) -> Self:
        return self.add(106)

    @property
    def bg_bright_white(self) -> Self:
        return self.add(107)

    # ----------------------------------------------------------------------------------
    # Rendering

    def prepare(self) -> tuple[StyleCode, ...]:
        """
        Prepare this style's codes for rendering in its context. If the context
        does not support colors, the result is empty.
        """
        if not self.context.supports_color:
            return ()

        prepared = []
        for code in self.codes:
            ready = code.prepare(self.context)
            if ready is not None:
                prepared.append(ready)
        return tuple(prepared)

    def sgr(self) -> str:
        """Render the escape sequences opening this style."""
        return ''.join(sgr(code.code) for code in self.prepare())

    def apply(self, text: object) -> str:
        """
        Apply this style to the text. The text is wrapped in the escape
        sequences opening and undoing this style. If the context does not
        support colors or the style has no codes, the text is returned as is.
        ``None`` becomes the empty string and other non-string values are
        converted with :func:`str`.
        """
        if text is None:
            return ''
        if not isinstance(text, str):
            text = str(text)

        codes = self.prepare()
        if not codes:
            return text

        return ''.join((
            *(sgr(code.code) for code in codes),
            text,
            *(sgr(code.reset) for code in reversed(codes)),
        ))

    def __call__(self, text: object) -> str:
        return self.apply(text)

    def __str__(self) -> str:
        return self.sgr()
