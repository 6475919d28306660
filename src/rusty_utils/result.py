"""Result type for explicit error handling.

Provides a Result[T, E] type similar to Rust's Result enum. A Result is either
``Ok(value)`` or ``Err(error)``; both are frozen, so every combinator returns a
new instance instead of mutating its input.

The module-level functions take the Result as their first argument::

    >>> from rusty_utils import result as R
    >>> R.and_then(R.ok(4), lambda x: R.ok(x / 2) if x else R.err("zero"))
    Ok(value=2.0)

The same operations are also available as methods (``Ok(4).map(f)``).
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
    Optional,
    TypeVar,
    Union,
)

from ._shared import check_branches, resolve
from .exceptions import ExpectError, UnwrapError

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")
R = TypeVar("R")

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Represents a successful result."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def expect(self, message: str) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def unwrap_or_else(self, func: Callable[[Any], T]) -> T:
        return self.value

    def map(self, func: Callable[[T], U]) -> "Result[U, Any]":
        return Ok(func(self.value))

    def map_err(self, func: Callable[[Any], F]) -> "Result[T, F]":
        return self

    def and_then(self, func: Callable[[T], "Result[U, E]"]) -> "Result[U, E]":
        return func(self.value)

    def or_else(self, func: Callable[[Any], "Result[T, F]"]) -> "Result[T, F]":
        return self

    def filter(
        self, predicate: Callable[[T], bool], error_func: Callable[[T], E]
    ) -> "Result[T, E]":
        if predicate(self.value):
            return self
        return Err(error_func(self.value))

    def match(self, *, ok: Callable[[T], R], err: Callable[[Any], R]) -> R:
        check_branches(ok=ok, err=err)
        return ok(self.value)


@dataclass(frozen=True)
class Err(Generic[E]):
    """Represents an error result."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self):
        """Raise the error payload.

        Exception payloads are re-raised as-is. Anything else is wrapped in an
        UnwrapError whose message contains the payload.
        """
        logger.debug(f"unwrap() called on Err: {self.error!r}")
        if isinstance(self.error, BaseException):
            raise self.error
        raise UnwrapError(f"Called unwrap() on Err: {self.error}", payload=self.error)

    def expect(self, message: str):
        logger.debug(f"expect() called on Err: {message}")
        raise ExpectError(message)

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_or_else(self, func: Callable[[E], T]) -> T:
        return func(self.error)

    def map(self, func: Callable[[Any], U]) -> "Result[U, E]":
        return self

    def map_err(self, func: Callable[[E], F]) -> "Result[Any, F]":
        return Err(func(self.error))

    def and_then(self, func: Callable[[Any], "Result[U, E]"]) -> "Result[U, E]":
        return self

    def or_else(self, func: Callable[[E], "Result[T, F]"]) -> "Result[T, F]":
        return func(self.error)

    def filter(
        self, predicate: Callable[[Any], bool], error_func: Callable[[Any], E]
    ) -> "Result[Any, E]":
        return self

    def match(self, *, ok: Callable[[Any], R], err: Callable[[E], R]) -> R:
        check_branches(ok=ok, err=err)
        return err(self.error)


Result = Union[Ok[T], Err[E]]
AsyncResult = Awaitable[Result[T, E]]
MaybeAsyncResult = Union[Result[T, E], AsyncResult[T, E]]


def ok(value: T) -> Ok[T]:
    """Create a successful Result."""
    return Ok(value)


def err(error: E) -> Err[E]:
    """Create a failed Result."""
    return Err(error)


def is_ok(result: Result[T, E]) -> bool:
    return isinstance(result, Ok)


def is_err(result: Result[T, E]) -> bool:
    return isinstance(result, Err)


def map(result: Result[T, E], func: Callable[[T], U]) -> Result[U, E]:
    """Apply func to the Ok value. Err is returned unchanged and func is not called."""
    return result.map(func)


def map_err(result: Result[T, E], func: Callable[[E], F]) -> Result[T, F]:
    """Apply func to the Err payload. Ok is returned unchanged."""
    return result.map_err(func)


def and_then(result: Result[T, E], func: Callable[[T], Result[U, E]]) -> Result[U, E]:
    """Chain a Result-returning function, short-circuiting on Err."""
    return result.and_then(func)


def or_else(result: Result[T, E], func: Callable[[E], Result[T, F]]) -> Result[T, F]:
    """Recover from Err with a Result-returning function, short-circuiting on Ok."""
    return result.or_else(func)


def unwrap_or(result: Result[T, E], default: T) -> T:
    return result.unwrap_or(default)


def unwrap_or_else(result: Result[T, E], func: Callable[[E], T]) -> T:
    return result.unwrap_or_else(func)


def unwrap(result: Result[T, E]) -> T:
    """Return the Ok value or raise.

    Prefer unwrap_or, unwrap_or_else or match: this raises the Err payload if
    it is an exception and an UnwrapError otherwise.
    """
    return result.unwrap()


def expect(result: Result[T, E], message: str) -> T:
    """Return the Ok value or raise ExpectError carrying message.

    The Err payload is discarded; use unwrap_or_else or match to keep it.
    """
    return result.expect(message)


def match(
    result: Result[T, E], *, ok: Callable[[T], R], err: Callable[[E], R]
) -> R:
    """Exhaustive case analysis: exactly one of the two branches is called."""
    return result.match(ok=ok, err=err)


def filter(
    result: Result[T, E],
    predicate: Callable[[T], bool],
    error_func: Callable[[T], E],
) -> Result[T, E]:
    """Turn Ok into Err(error_func(value)) when its value fails predicate."""
    return result.filter(predicate, error_func)


def combine(results: Iterable[Result[T, E]]) -> Result[List[T], E]:
    """
    Combine Results into a Result of a list.

    Scans left to right and returns the first Err found without looking at
    the remaining items. If every item is Ok, returns Ok with the values in
    input order.

    Args:
        results: Any iterable of Results (consumed lazily)

    Returns:
        Ok(list of values) or the first Err
    """
    values: List[T] = []
    for item in results:
        if isinstance(item, Err):
            return item
        values.append(item.value)
    return Ok(values)


async def map_async(
    result: AsyncResult[T, E], func: Callable[[T], Union[U, Awaitable[U]]]
) -> Result[U, E]:
    """Await result, then map it. func may be a coroutine function."""
    resolved = await result
    if isinstance(resolved, Ok):
        mapped = await resolve(func(resolved.value))
        return Ok(mapped)
    return resolved


async def and_then_async(
    result: AsyncResult[T, E], func: Callable[[T], MaybeAsyncResult[U, E]]
) -> Result[U, E]:
    """Await result, then chain func on Ok. func may return an awaitable Result."""
    resolved = await result
    if isinstance(resolved, Ok):
        return await resolve(func(resolved.value))
    return resolved


async def combine_async(results: Iterable[AsyncResult[T, E]]) -> Result[List[T], E]:
    """
    Await all results concurrently, then combine them.

    The awaitables may complete in any order; the combined values always
    follow input order.
    """
    resolved = await asyncio.gather(*results)
    return combine(resolved)


def try_catch(
    func: Callable[[], T], error_mapper: Optional[Callable[[Exception], E]] = None
) -> Result[T, E]:
    """
    Call func and capture a raised exception as Err.

    Args:
        func: Zero-argument callable
        error_mapper: Optional function converting the exception into the
                      Err payload. Without it the exception itself is used.

    Returns:
        Ok(return value) or Err(mapped exception)
    """
    try:
        return Ok(func())
    except Exception as e:
        logger.debug(f"try_catch captured {type(e).__name__}: {e}")
        return Err(error_mapper(e) if error_mapper is not None else e)


async def try_catch_async(
    func: Callable[[], Awaitable[T]],
    error_mapper: Optional[Callable[[Exception], E]] = None,
) -> Result[T, E]:
    """
    Async version of try_catch.

    Captures exceptions raised while calling func as well as those raised by
    the awaitable it returns. Cancellation is not captured.
    """
    try:
        value = await resolve(func())
        return Ok(value)
    except Exception as e:
        logger.debug(f"try_catch_async captured {type(e).__name__}: {e}")
        return Err(error_mapper(e) if error_mapper is not None else e)
