from .test_cache import TestCacheSet, TestHashing, TestLRUCache, TestMemoize
from .test_canonical import TestCanonical
from .test_conversion import TestConversion, TestLores
from .test_fidelity import TestContext, TestEnvironment, TestLogging
from .test_gradient import TestGradient, TestPositions
from .test_palette import TestContrast, TestPalette
from .test_style import TestStyle, TestStyleCode

__all__ = [
    'TestCacheSet',
    'TestCanonical',
    'TestContext',
    'TestContrast',
    'TestConversion',
    'TestEnvironment',
    'TestGradient',
    'TestHashing',
    'TestLogging',
    'TestLores',
    'TestLRUCache',
    'TestMemoize',
    'TestPalette',
    'TestPositions',
    'TestStyle',
    'TestStyleCode',
]
