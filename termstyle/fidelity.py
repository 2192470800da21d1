"""
Support for the terminal's color capability.

A :class:`Context` bundles the capability level, the flag for forcing
truecolor output, and the cache set used for color conversions and gradients.
:func:`environment_level` determines the level from environment variables and
:func:`detect_context` resolves a complete context for an output stream. Both
run once, when the application starts up. Styles and gradients never query the
environment themselves.
"""
import dataclasses
import enum
import logging
import os
import sys
from typing import TextIO

from .cache import CacheSet


logger = logging.getLogger(__name__)


class Level(enum.IntEnum):
    """
    The color capability of a terminal.

    Attributes:
        PLAIN: for no colors and no attributes at all
        ANSI: for the 8 basic ANSI colors and their bright variants
        EIGHT_BIT: for the 256 colors of the 8-bit palette
        TRUECOLOR: for 24-bit RGB colors
    """
    PLAIN = 0
    ANSI = 1
    EIGHT_BIT = 2
    TRUECOLOR = 3


@dataclasses.dataclass(frozen=True, slots=True)
class Context:
    """
    The capability context for rendering styles and gradients.

    Attributes:
        level: is the color level between 0 and 3, inclusive
        force: forces 24-bit colors, independent of level
        cache: is the cache set for color conversions and gradients, or
            ``None`` to disable caching

    The cache does not participate in equality.
    """
    level: int = Level.TRUECOLOR
    force: bool = False
    cache: None | CacheSet = dataclasses.field(default=None, compare=False)

    def __post_init__(self) -> None:
        if not 0 <= self.level <= 3:
            raise ValueError(f'color level {self.level} is not between 0 and 3')

    @property
    def supports_color(self) -> bool:
        return self.force or self.level > 0

    @property
    def is_truecolor(self) -> bool:
        """Determine whether colors are rendered as 24-bit RGB."""
        return self.force or self.level == Level.TRUECOLOR


# --------------------------------------------------------------------------------------


def _defined(*variables: str) -> bool:
    return any(variable in os.environ for variable in variables)


def environment_level(is_tty: bool) -> Level:
    """
    Determine the current terminal's color level based on the environment
    variables for this process. This function incorporates logic from the
    `supports-color <https://github.com/chalk/supports-color/blob/main/index.js>`_
    package and also honors the `NO_COLOR <https://no-color.org>`_ convention.
    The ``is_tty`` argument indicates whether the terminal's output is a TTY.
    """
    if _defined('NO_COLOR', 'NODE_DISABLE_COLORS'):
        return Level.PLAIN

    force = os.environ.get('FORCE_COLOR')
    if force is not None:
        if force in ('0', 'false'):
            return Level.PLAIN
        if force in ('', '1', 'true'):
            return Level.ANSI
        if force == '2':
            return Level.EIGHT_BIT
        if force == '3':
            return Level.TRUECOLOR

    if _defined('TF_BUILD', 'AGENT_NAME'):
        # Azure DevOps
        return Level.ANSI

    if not is_tty:
        return Level.PLAIN

    TERM = os.environ.get('TERM')

    if TERM == 'dumb':
        return Level.PLAIN

    if _defined('CI'):
        if _defined('GITHUB_ACTIONS', 'GITEA_ACTIONS'):
            return Level.TRUECOLOR

        if _defined(
            'TRAVIS', 'CIRCLECI', 'APPVEYOR', 'GITLAB_CI', 'BUILDKITE', 'DRONE'
        ) or os.environ.get('CI_NAME') == 'codeship':
            return Level.ANSI

        return Level.PLAIN

    if os.environ.get('COLORTERM') in ('truecolor', '24bit'):
        return Level.TRUECOLOR

    if TERM == 'xterm-kitty' or os.environ.get('TERM_PROGRAM') == 'iTerm.app':
        return Level.TRUECOLOR

    if TERM and (TERM.endswith('256') or TERM.endswith('256color')):
        return Level.EIGHT_BIT

    # Even the Windows CMD shell does the basic colors
    return Level.ANSI


def _is_tty(stream: TextIO) -> bool:
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        # Not a file or already closed
        return False


def detect_context(
    stream: None | TextIO = None, cache: None | CacheSet = None
) -> Context:
    """
    Resolve the capability context for the output stream, which defaults to
    standard output. If no cache set is given, the context gets a fresh one.
    """
    stream = sys.stdout if stream is None else stream
    level = environment_level(_is_tty(stream))
    logger.debug('detected color level %s', level.name)
    return Context(level, False, CacheSet() if cache is None else cache)
