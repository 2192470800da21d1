"""
termstyle: colors, styles, and gradients for terminal output.

The package logs through the standard ``logging`` module under the
``termstyle`` logger, which has a null handler. Applications configure
handlers and levels as they see fit.
"""
import logging

from .ansi import strip_ansi
from .cache import CacheSet, CacheStats, LRUCache
from .fidelity import Context, detect_context, environment_level, Level
from .gradient import Gradient, Interpolation, linear, rainbow, render, Spin
from .style import Category, Style, StyleCode

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'CacheSet',
    'CacheStats',
    'Category',
    'Context',
    'detect_context',
    'environment_level',
    'Gradient',
    'Interpolation',
    'Level',
    'linear',
    'LRUCache',
    'rainbow',
    'render',
    'Spin',
    'strip_ansi',
    'Style',
    'StyleCode',
]
