"""Low-level support for assembling and removing ANSI escape sequences"""
import enum
import re


class Ansi(enum.StrEnum):
    """
    An enumeration of ANSI escape sequence components.

    Attributes:
        ESC: is the escape character by itself
        CSI: starts control sequences; it is defined with the two-character C0
            sequence and not the one-character C1 sequence, since the latter
            conflicts with UTF-8

    All enumeration constants are strings and hence can be directly used when
    assembling ANSI escape sequences. For example:

    .. code-block:: python

        print(f"{Ansi.CSI}1m" "Parrot!" f"{Ansi.CSI}22m")

    The example prints a bold excited parrot to the terminal. Since the
    parameters of most escape sequences are integers separated by semicolons,
    :meth:`fuse` assembles the pieces. The following statement prints the same
    parrot, now in green:

    .. code-block:: python

        print(Ansi.fuse(Ansi.CSI, 32, 1, 'm'), 'Parrot!', Ansi.fuse(Ansi.CSI, 39, 22, 'm'))
    """
    ESC = '\x1b'
    CSI = '\x1b['

    @staticmethod
    def fuse(*fragments: None | int | str) -> str:
        """
        Fuse the ANSI escape sequence fragments into a single string. This
        method treats ``None`` as a default parameter and replaces it with an
        empty string. It also inserts semicolons between parameters, i.e., when
        two successive arguments are either ``None`` or an integer.
        """
        processed: list[str] = []
        previous_was_parameter = False

        for fragment in fragments:
            current_is_parameter = fragment is None or isinstance(fragment, int)
            if previous_was_parameter and current_is_parameter:
                processed.append(';')
            processed.append('' if fragment is None else str(fragment))
            previous_was_parameter = current_is_parameter

        return ''.join(processed)


class Sgr(enum.IntEnum):
    """
    The parameters of the select graphic rendition (SGR) escape sequence that
    are used by styles.
    """
    RESET = 0
    BOLD = 1
    DIM = 2
    ITALIC = 3
    UNDERLINE = 4
    BLINK = 5
    INVERSE = 7
    HIDDEN = 8
    STRIKETHROUGH = 9
    NOT_BOLD_NOR_DIM = 22
    NOT_ITALIC = 23
    NOT_UNDERLINE = 24
    NOT_BLINKING = 25
    NOT_INVERSE = 27
    NOT_HIDDEN = 28
    NOT_STRIKETHROUGH = 29
    EXTENDED_FOREGROUND = 38
    DEFAULT_FOREGROUND = 39
    EXTENDED_BACKGROUND = 48
    DEFAULT_BACKGROUND = 49


ATTRIBUTE_RESETS: dict[Sgr, Sgr] = {
    Sgr.BOLD: Sgr.NOT_BOLD_NOR_DIM,
    Sgr.DIM: Sgr.NOT_BOLD_NOR_DIM,
    Sgr.ITALIC: Sgr.NOT_ITALIC,
    Sgr.UNDERLINE: Sgr.NOT_UNDERLINE,
    Sgr.BLINK: Sgr.NOT_BLINKING,
    Sgr.INVERSE: Sgr.NOT_INVERSE,
    Sgr.HIDDEN: Sgr.NOT_HIDDEN,
    Sgr.STRIKETHROUGH: Sgr.NOT_STRIKETHROUGH,
}
"""The mapping from text attributes to the parameters that reset them."""


def sgr(parameters: int | str) -> str:
    """Create the complete SGR escape sequence for the parameters."""
    return f'{Ansi.CSI}{parameters}m'


def truecolor_parameters(layer: Sgr, r: int, g: int, b: int) -> str:
    """Format the parameters for a 24-bit color in the extended layer."""
    return Ansi.fuse(int(layer), 2, r, g, b)


def eight_bit_parameters(layer: Sgr, color: int) -> str:
    """Format the parameters for an 8-bit color in the extended layer."""
    return Ansi.fuse(int(layer), 5, color)


# --------------------------------------------------------------------------------------


_CONTROL_SEQUENCE = re.compile(r'\x1b\[[0-?]*[ -/]*[@-~]')


def strip_ansi(text: str) -> str:
    """Remove all control sequences, including SGR sequences, from the text."""
    return _CONTROL_SEQUENCE.sub('', text)
