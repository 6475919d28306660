"""Functional programming helpers.

Composition, arity reshaping, memoization, rate limiting and small list
utilities. The ``safe_*`` accessors and ``throttle`` return Options.
"""

import json
import logging
import os
import threading
import time
from collections.abc import Mapping
from dataclasses import asdict, dataclass
from functools import partial as _partial
from functools import reduce, wraps
from typing import (
    Any,
    Callable,
    Dict,
    Hashable,
    Iterable,
    List,
    MutableMapping,
    Optional,
    Sequence,
    Tuple,
    TypeVar,
)

try:
    import diskcache

    DISKCACHE_AVAILABLE = True
except ImportError:
    DISKCACHE_AVAILABLE = False

from .exceptions import InvalidArgumentError
from .option import Option, Some, none

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")
W = TypeVar("W")
K = TypeVar("K", bound=Hashable)

logger = logging.getLogger(__name__)


def _name(func: Callable) -> str:
    return getattr(func, "__name__", repr(func))


# Composition


def pipe(value: Any, *funcs: Callable[[Any], Any]) -> Any:
    """Thread value through funcs from left to right."""
    return reduce(lambda acc, func: func(acc), funcs, value)


def compose(*funcs: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Return a function applying funcs from right to left."""

    def composed(value: Any) -> Any:
        return reduce(lambda acc, func: func(acc), reversed(funcs), value)

    return composed


def curry2(func: Callable[[T, U], V]) -> Callable[[T], Callable[[U], V]]:
    return lambda a: lambda b: func(a, b)


def curry3(
    func: Callable[[T, U, V], W]
) -> Callable[[T], Callable[[U], Callable[[V], W]]]:
    return lambda a: lambda b: lambda c: func(a, b, c)


def partial(func: Callable[..., T], *args: Any, **kwargs: Any) -> Callable[..., T]:
    """Fix the leading positional (and any keyword) arguments of func."""
    return _partial(func, *args, **kwargs)


def identity(value: T) -> T:
    return value


def constant(value: T) -> Callable[..., T]:
    return lambda *args, **kwargs: value


def flip(func: Callable[[T, U], V]) -> Callable[[U, T], V]:
    """Swap the two arguments of a binary function."""
    return lambda b, a: func(a, b)


# Memoization


@dataclass
class MemoizeStats:
    """Memoization statistics."""

    hits: int = 0
    misses: int = 0

    @property
    def hit_rate(self) -> float:
        """Calculate cache hit rate."""
        total = self.hits + self.misses
        return (self.hits / total * 100) if total > 0 else 0.0

    def to_dict(self) -> Dict:
        """Convert to dictionary."""
        return {
            **asdict(self),
            "hit_rate": self.hit_rate,
        }


def _default_key(*args: Any, **kwargs: Any) -> str:
    """Structural key: JSON of the arguments, repr() for anything not JSON-able.

    Dicts whose keys cannot be sorted or serialised (mixed or tuple keys) fall
    back to a repr() of the arguments.
    """
    try:
        return json.dumps([list(args), kwargs], sort_keys=True, default=repr)
    except TypeError:
        return repr((args, sorted(kwargs.items())))


def memoize(
    func: Callable[..., T],
    key_func: Optional[Callable[..., str]] = None,
    cache: Optional[MutableMapping[str, Any]] = None,
    clear: Optional[Callable[[], None]] = None,
) -> Callable[..., T]:
    """
    Cache the results of func by a string key derived from its arguments.

    Args:
        func: Function to memoize
        key_func: Builds the cache key from the call arguments. Defaults to a
                  JSON serialisation of positional and keyword arguments.
        cache: Mapping used as storage. Defaults to a plain dict that grows
               without bound; pass a bounded or persistent mapping (for
               example a diskcache.Cache) to change that.
        clear: Replaces clearing the whole cache in cache_clear(). Used when
               several memoized functions share one cache.

    Returns:
        Wrapped function exposing ``cache``, ``stats`` and ``cache_clear()``
    """
    key_func = key_func or _default_key
    store: MutableMapping[str, Any] = {} if cache is None else cache
    stats = MemoizeStats()

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> T:
        key = key_func(*args, **kwargs)
        if key in store:
            stats.hits += 1
            logger.debug(f"memoize hit: {_name(func)} {key[:32]}")
            return store[key]

        stats.misses += 1
        logger.debug(f"memoize miss: {_name(func)} {key[:32]}")
        result = func(*args, **kwargs)
        store[key] = result
        return result

    def cache_clear() -> None:
        if clear is not None:
            clear()
        else:
            store.clear()
        stats.hits = 0
        stats.misses = 0

    wrapper.cache = store
    wrapper.stats = stats
    wrapper.cache_clear = cache_clear
    return wrapper


def disk_memoize(
    directory: str = "~/.rusty_utils_cache",
    key_func: Optional[Callable[..., str]] = None,
) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """
    Decorator memoizing into a persistent diskcache.Cache.

    Args:
        directory: Cache directory (``~`` is expanded)
        key_func: Same as for memoize

    Raises:
        ImportError: If diskcache is not installed
    """
    if not DISKCACHE_AVAILABLE:
        raise ImportError(
            "diskcache not available. Install with: pip install 'rusty-utils[cache]'"
        )

    directory = os.path.expanduser(directory)
    disk = diskcache.Cache(directory)
    logger.debug(f"Disk memoize cache at {directory}")

    base_key = key_func or _default_key

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        # functions sharing a directory must not share keys
        prefix = f"{func.__module__}.{func.__qualname__}"

        def prefixed_key(*args: Any, **kwargs: Any) -> str:
            return f"{prefix}|{base_key(*args, **kwargs)}"

        def clear_own_keys() -> None:
            own = [key for key in disk if str(key).startswith(f"{prefix}|")]
            for key in own:
                disk.delete(key)
            logger.debug(f"Cleared {len(own)} disk memoize entries for {prefix}")

        return memoize(func, key_func=prefixed_key, cache=disk, clear=clear_own_keys)

    return decorator


# Rate limiting


class Debounced:
    """Callable that delays func until wait seconds pass without a new call."""

    def __init__(self, func: Callable[..., Any], wait: float):
        if wait < 0:
            raise InvalidArgumentError("wait must not be negative", wait=wait)
        self.func = func
        self.wait = wait
        self._timer: Optional[threading.Timer] = None
        self._pending: Optional[Tuple[tuple, dict]] = None
        # bumped per call; a timer only fires the call it was started for
        self._generation = 0
        self._lock = threading.Lock()

    def __call__(self, *args: Any, **kwargs: Any) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                logger.debug(f"debounce rescheduled: {_name(self.func)}")
            self._generation += 1
            self._pending = (args, kwargs)
            self._timer = threading.Timer(
                self.wait, self._fire, args=(self._generation,)
            )
            self._timer.daemon = True
            self._timer.start()

    def _take_pending(
        self, generation: Optional[int] = None
    ) -> Optional[Tuple[tuple, dict]]:
        with self._lock:
            if generation is not None and generation != self._generation:
                return None
            pending = self._pending
            self._pending = None
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
            return pending

    def _fire(self, generation: Optional[int] = None) -> None:
        pending = self._take_pending(generation)
        if pending is not None:
            args, kwargs = pending
            self.func(*args, **kwargs)

    @property
    def pending(self) -> bool:
        """True while a call is scheduled."""
        return self._pending is not None

    def cancel(self) -> None:
        """Drop the scheduled call, if any."""
        self._take_pending()

    def flush(self) -> None:
        """Run the scheduled call now instead of waiting."""
        self._fire()


def debounce(func: Callable[..., Any], wait: float) -> Debounced:
    """Delay func until wait seconds have passed since the last call."""
    return Debounced(func, wait)


def throttle(func: Callable[..., T], interval: float) -> Callable[..., Option[T]]:
    """
    Run func at most once per interval seconds.

    Returns:
        Wrapper returning Some(result) when func ran and none when the call
        was dropped
    """
    if interval < 0:
        raise InvalidArgumentError("interval must not be negative", interval=interval)

    last_call: List[Optional[float]] = [None]
    lock = threading.Lock()

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Option[T]:
        now = time.monotonic()
        with lock:
            if last_call[0] is not None and now - last_call[0] < interval:
                logger.debug(f"throttle dropped call: {_name(func)}")
                return none
            last_call[0] = now
        return Some(func(*args, **kwargs))

    return wrapper


# Collection builders


def create_filter(predicate: Callable[[T], bool]) -> Callable[[Iterable[T]], List[T]]:
    return lambda items: [item for item in items if predicate(item)]


def create_mapper(transform: Callable[[T], U]) -> Callable[[Iterable[T]], List[U]]:
    return lambda items: [transform(item) for item in items]


def create_reducer(
    reducer: Callable[[U, T], U], initial: U
) -> Callable[[Iterable[T]], U]:
    return lambda items: reduce(reducer, items, initial)


# Safe access


def safe_get(items: Sequence[T], index: int) -> Option[T]:
    """Some(items[index]) for 0 <= index < len(items), otherwise none.

    Negative indices count as out of bounds.
    """
    if 0 <= index < len(items):
        return Some(items[index])
    return none


_MISSING = object()


def safe_prop(obj: Any, key: str) -> Option[Any]:
    """Look up key in a mapping, or as an attribute of any other object.

    A missing key or attribute gives none; a present one gives Some, even if
    its value is None. A lookup that raises (for example a failing property)
    also gives none.
    """
    try:
        if isinstance(obj, Mapping):
            return Some(obj[key]) if key in obj else none
        value = getattr(obj, key, _MISSING)
    except Exception as e:
        logger.debug(f"safe_prop({key!r}) failed: {type(e).__name__}: {e}")
        return none
    return none if value is _MISSING else Some(value)


def safe_json_parse(text: str) -> Option[Any]:
    """Some(parsed value), or none if text is not valid JSON."""
    try:
        return Some(json.loads(text))
    except (TypeError, ValueError) as e:
        logger.debug(f"safe_json_parse failed: {e}")
        return none


# List utilities


def range_of(start: float, end: Optional[float] = None, step: float = 1) -> List[float]:
    """
    Build a list of numbers from start (inclusive) to end (exclusive).

    With a single argument counts from 0 to start. Unlike the builtin range,
    float bounds and steps are accepted. Negative steps count down.

    Raises:
        InvalidArgumentError: If step is zero
    """
    if step == 0:
        raise InvalidArgumentError("step must not be zero", step=step)
    if end is None:
        start, end = 0, start

    values = []
    current = start
    while (current < end) if step > 0 else (current > end):
        values.append(current)
        current += step
    return values


def chunk(items: Sequence[T], size: int) -> List[List[T]]:
    """Split items into lists of size (the last may be shorter). size <= 0 gives []."""
    if size <= 0:
        return []
    return [list(items[i : i + size]) for i in range(0, len(items), size)]


def group_by(items: Iterable[T], key_func: Callable[[T], K]) -> Dict[K, List[T]]:
    """Group items by key_func; keys keep first-seen order."""
    groups: Dict[K, List[T]] = {}
    for item in items:
        groups.setdefault(key_func(item), []).append(item)
    return groups


def unique(items: Iterable[T]) -> List[T]:
    """Drop duplicates, keeping the first occurrence of each item.

    Unhashable items (lists, dicts) are compared by equality.
    """
    seen = set()
    seen_unhashable: List[T] = []
    result: List[T] = []
    for item in items:
        try:
            if item in seen:
                continue
            seen.add(item)
        except TypeError:
            if item in seen_unhashable:
                continue
            seen_unhashable.append(item)
        result.append(item)
    return result


def unique_by(items: Iterable[T], key_func: Callable[[T], Hashable]) -> List[T]:
    seen = set()
    result = []
    for item in items:
        key = key_func(item)
        if key in seen:
            continue
        seen.add(key)
        result.append(item)
    return result


def zip_pairs(first: Iterable[T], second: Iterable[U]) -> List[Tuple[T, U]]:
    """Pair items up, stopping at the end of the shorter input."""
    return list(zip(first, second))


def partition(
    items: Iterable[T], predicate: Callable[[T], bool]
) -> Tuple[List[T], List[T]]:
    """Split items into (passing, failing) lists."""
    truthy: List[T] = []
    falsy: List[T] = []
    for item in items:
        (truthy if predicate(item) else falsy).append(item)
    return truthy, falsy
