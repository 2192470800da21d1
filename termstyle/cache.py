"""
Bounded least-recently-used caches.

:class:`LRUCache` is a single bounded cache with hit and miss counters.
:class:`CacheSet` bundles one such cache for each concern, i.e., color
conversions, hexadecimal colors, HSL colors, and rendered gradients, so that
churn in one concern cannot evict the hot entries of another. Caches are plain
objects without locks. Each thread must use its own cache set.
"""
from collections import OrderedDict
from collections.abc import Callable, Hashable, Iterator
import dataclasses
import functools
from typing import Generic, ParamSpec, TypeVar


K = TypeVar('K', bound=Hashable)
V = TypeVar('V')
P = ParamSpec('P')
R = TypeVar('R')


@dataclasses.dataclass(frozen=True, slots=True)
class CacheStats:
    """A snapshot of a cache's counters."""
    hits: int
    misses: int
    size: int
    capacity: int

    @property
    def hit_rate(self) -> float:
        """The fraction of lookups that were hits, or zero without lookups."""
        lookups = self.hits + self.misses
        return 0.0 if lookups == 0 else self.hits / lookups


class LRUCache(Generic[K, V]):
    """
    A cache with bounded capacity that evicts the least recently used entry.

    Both :meth:`get` and :meth:`set` make the entry the most recently used one.
    :meth:`peek` and membership tests do not, and they also do not count as
    lookups.
    """

    __slots__ = ('_capacity', '_entries', '_hits', '_misses')

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError(f'cache capacity {capacity} is not positive')
        self._capacity = capacity
        self._entries: OrderedDict[K, V] = OrderedDict()
        self._hits = 0
        self._misses = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    def get(self, key: K, default: None | V = None) -> None | V:
        """Look up the key, promoting the entry on a hit."""
        try:
            value = self._entries[key]
        except KeyError:
            self._misses += 1
            return default

        self._entries.move_to_end(key)
        self._hits += 1
        return value

    def peek(self, key: K, default: None | V = None) -> None | V:
        """Look up the key without promoting the entry or counting the lookup."""
        return self._entries.get(key, default)

    def set(self, key: K, value: V) -> None:
        """
        Add or update the entry. When adding an entry to a full cache, this
        method first evicts exactly one entry, the least recently used one.
        """
        if key in self._entries:
            self._entries[key] = value
            self._entries.move_to_end(key)
            return

        if len(self._entries) >= self._capacity:
            self._entries.popitem(last=False)
        self._entries[key] = value

    def delete(self, key: K) -> bool:
        """Remove the entry, returning whether the cache had an entry."""
        try:
            del self._entries[key]
        except KeyError:
            return False
        return True

    def keys(self) -> list[K]:
        """Get the keys, from most to least recently used."""
        return list(reversed(self._entries))

    def clear(self) -> None:
        """Remove all entries and reset the hit and miss counters."""
        self._entries.clear()
        self._hits = 0
        self._misses = 0

    def stats(self) -> CacheStats:
        return CacheStats(self._hits, self._misses, len(self._entries), self._capacity)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[K]:
        return iter(self.keys())

    def __repr__(self) -> str:
        return f'LRUCache({len(self._entries)}/{self._capacity})'


class CacheSet:
    """
    The caches for all concerns.

    Attributes:
        color: maps color inputs to RGB
        hex: maps hexadecimal color strings to RGB
        hsl: maps HSL colors to RGB
        gradient: maps gradient parameters to rendered strings
    """

    def __init__(
        self,
        color: int = 1000,
        hex: int = 500,
        hsl: int = 500,
        gradient: int = 100,
    ) -> None:
        self.color: LRUCache[Hashable, tuple[int, int, int]] = LRUCache(color)
        self.hex: LRUCache[str, tuple[int, int, int]] = LRUCache(hex)
        self.hsl: LRUCache[Hashable, tuple[int, int, int]] = LRUCache(hsl)
        self.gradient: LRUCache[Hashable, str] = LRUCache(gradient)

    def stats(self) -> dict[str, CacheStats]:
        """Get the counters for each concern."""
        return {
            'color': self.color.stats(),
            'hex': self.hex.stats(),
            'hsl': self.hsl.stats(),
            'gradient': self.gradient.stats(),
        }

    def clear(self) -> None:
        """Clear all caches."""
        self.color.clear()
        self.hex.clear()
        self.hsl.clear()
        self.gradient.clear()


# --------------------------------------------------------------------------------------


_FNV_OFFSET_BASIS = 2166136261
_FNV_PRIME = 16777619


def fnv1a(text: str) -> int:
    """
    Hash the text with the 32-bit FNV-1a function over its UTF-16 code units.
    The result is an unsigned 32-bit integer.
    """
    hash = _FNV_OFFSET_BASIS
    data = text.encode('utf-16-le', 'surrogatepass')
    for index in range(0, len(data), 2):
        hash ^= data[index] | (data[index + 1] << 8)
        hash = (hash * _FNV_PRIME) & 0xFFFFFFFF
    return hash


def _default_key(*args: object, **kwargs: object) -> Hashable:
    return args, tuple(sorted(kwargs.items()))


_MISSING = object()


def memoize(
    capacity: int = 100,
    key: None | Callable[..., Hashable] = None,
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """
    Memoize the decorated function with a bounded LRU cache. By default, the
    cache key combines the positional and keyword arguments, which hence must
    be hashable. The decorated function exposes its cache as ``cache``.
    """
    make_key = key or _default_key

    def decorator(fn: Callable[P, R]) -> Callable[P, R]:
        cache: LRUCache[Hashable, object] = LRUCache(capacity)

        @functools.wraps(fn)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            cache_key = make_key(*args, **kwargs)
            result = cache.get(cache_key, _MISSING)
            if result is _MISSING:
                result = fn(*args, **kwargs)
                cache.set(cache_key, result)
            return result  # type: ignore[return-value]

        wrapper.cache = cache  # type: ignore[attr-defined]
        return wrapper

    return decorator
