"""Option type for values that may be absent.

An Option is either ``Some(value)`` or the single ``none`` instance of
``Nothing``. Unlike a bare ``None`` return, an Option can be chained without
null checks::

    >>> from rusty_utils import option as O
    >>> O.map(O.from_nullable({"a": 1}.get("a")), lambda v: v + 1)
    Some(value=2)
    >>> O.map(O.from_nullable({}.get("a")), lambda v: v + 1)
    Nothing
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import (
    Any,
    Awaitable,
    Callable,
    Generic,
    Iterable,
    List,
    Optional as Nullable,
    TypeVar,
    Union,
)

from ._shared import check_branches, resolve
from .exceptions import ExpectError, UnwrapError

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")
W = TypeVar("W")
R = TypeVar("R")

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Some(Generic[T]):
    """Represents a present value."""

    value: T

    def is_some(self) -> bool:
        return True

    def is_none(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def expect(self, message: str) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def unwrap_or_else(self, func: Callable[[], T]) -> T:
        return self.value

    def map(self, func: Callable[[T], U]) -> "Option[U]":
        return Some(func(self.value))

    def and_then(self, func: Callable[[T], "Option[U]"]) -> "Option[U]":
        return func(self.value)

    def or_else(self, func: Callable[[], "Option[T]"]) -> "Option[T]":
        return self

    def filter(self, predicate: Callable[[T], bool]) -> "Option[T]":
        return self if predicate(self.value) else none

    def match(self, *, some: Callable[[T], R], none: Callable[[], R]) -> R:
        check_branches(some=some, none=none)
        return some(self.value)


class Nothing:
    """Represents an absent value.

    Nothing carries no data, so ``Nothing()`` always returns the same shared
    instance (also available as ``none``).
    """

    __slots__ = ()
    _instance: "Nullable[Nothing]" = None

    def __new__(cls) -> "Nothing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Nothing"

    def __reduce__(self):
        return (Nothing, ())

    def __copy__(self) -> "Nothing":
        return self

    def __deepcopy__(self, memo) -> "Nothing":
        return self

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Nothing is immutable")

    def is_some(self) -> bool:
        return False

    def is_none(self) -> bool:
        return True

    def unwrap(self):
        logger.debug("unwrap() called on Nothing")
        raise UnwrapError("Called unwrap() on a Nothing value")

    def expect(self, message: str):
        logger.debug(f"expect() called on Nothing: {message}")
        raise ExpectError(message)

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_or_else(self, func: Callable[[], T]) -> T:
        return func()

    def map(self, func: Callable[[Any], U]) -> "Option[U]":
        return self

    def and_then(self, func: Callable[[Any], "Option[U]"]) -> "Option[U]":
        return self

    def or_else(self, func: Callable[[], "Option[T]"]) -> "Option[T]":
        return func()

    def filter(self, predicate: Callable[[Any], bool]) -> "Option[Any]":
        return self

    def match(self, *, some: Callable[[Any], R], none: Callable[[], R]) -> R:
        check_branches(some=some, none=none)
        return none()


none = Nothing()

Option = Union[Some[T], Nothing]
AsyncOption = Awaitable[Option[T]]


def some(value: T) -> Some[T]:
    """Create an Option containing value."""
    return Some(value)


def is_some(option: Option[T]) -> bool:
    return isinstance(option, Some)


def is_none(option: Option[T]) -> bool:
    return isinstance(option, Nothing)


def from_nullable(value: Nullable[T]) -> Option[T]:
    """Some(value) unless value is None.

    Falsy values such as 0, "" and False are present and become Some.
    """
    return none if value is None else Some(value)


def to_nullable(option: Option[T]) -> Nullable[T]:
    """Return the value of Some, or None."""
    return option.value if isinstance(option, Some) else None


# Python has one empty sentinel, so both conversions return None.
to_undefined = to_nullable


def map(option: Option[T], func: Callable[[T], U]) -> Option[U]:
    """Apply func to the value of Some. none is returned and func is not called."""
    return option.map(func)


def and_then(option: Option[T], func: Callable[[T], Option[U]]) -> Option[U]:
    """Chain an Option-returning function, short-circuiting on none."""
    return option.and_then(func)


def or_else(option: Option[T], func: Callable[[], Option[T]]) -> Option[T]:
    """Supply an alternative Option when option is none."""
    return option.or_else(func)


def unwrap_or(option: Option[T], default: T) -> T:
    return option.unwrap_or(default)


def unwrap_or_else(option: Option[T], func: Callable[[], T]) -> T:
    return option.unwrap_or_else(func)


def unwrap(option: Option[T]) -> T:
    """Return the value of Some or raise UnwrapError.

    Prefer unwrap_or, unwrap_or_else or match.
    """
    return option.unwrap()


def expect(option: Option[T], message: str) -> T:
    """Return the value of Some or raise ExpectError carrying message."""
    return option.expect(message)


def match(option: Option[T], *, some: Callable[[T], R], none: Callable[[], R]) -> R:
    """Exhaustive case analysis: exactly one of the two branches is called."""
    return option.match(some=some, none=none)


def filter(option: Option[T], predicate: Callable[[T], bool]) -> Option[T]:
    """Keep Some only if its value passes predicate."""
    return option.filter(predicate)


def map2(
    option1: Option[T], option2: Option[U], func: Callable[[T, U], V]
) -> Option[V]:
    """Apply func to both values if both Options are Some, otherwise none."""
    if isinstance(option1, Some) and isinstance(option2, Some):
        return Some(func(option1.value, option2.value))
    return none


def map3(
    option1: Option[T],
    option2: Option[U],
    option3: Option[V],
    func: Callable[[T, U, V], W],
) -> Option[W]:
    """Apply func to all three values if every Option is Some, otherwise none."""
    if (
        isinstance(option1, Some)
        and isinstance(option2, Some)
        and isinstance(option3, Some)
    ):
        return Some(func(option1.value, option2.value, option3.value))
    return none


def combine(options: Iterable[Option[T]]) -> Option[List[T]]:
    """
    Combine Options into an Option of a list.

    Returns none as soon as a none is found (remaining items are not
    consumed), otherwise Some with every value in input order.
    """
    values: List[T] = []
    for item in options:
        if isinstance(item, Nothing):
            return none
        values.append(item.value)
    return Some(values)


def find_some(options: Iterable[Option[T]]) -> Option[T]:
    """Return the first Some, or none if there is none."""
    for item in options:
        if isinstance(item, Some):
            return item
    return none


def collect_some(options: Iterable[Option[T]]) -> List[T]:
    """Return the values of every Some in order, skipping none. Never fails."""
    return [item.value for item in options if isinstance(item, Some)]


async def map_async(
    option: AsyncOption[T], func: Callable[[T], Union[U, Awaitable[U]]]
) -> Option[U]:
    """Await option, then map it. func may be a coroutine function."""
    resolved = await option
    if isinstance(resolved, Some):
        mapped = await resolve(func(resolved.value))
        return Some(mapped)
    return none


async def and_then_async(
    option: AsyncOption[T],
    func: Callable[[T], Union[Option[U], AsyncOption[U]]],
) -> Option[U]:
    """Await option, then chain func on Some. func may return an awaitable Option."""
    resolved = await option
    if isinstance(resolved, Some):
        return await resolve(func(resolved.value))
    return none


async def combine_async(options: Iterable[AsyncOption[T]]) -> Option[List[T]]:
    """Await all options concurrently, then combine them in input order."""
    resolved = await asyncio.gather(*options)
    return combine(resolved)
