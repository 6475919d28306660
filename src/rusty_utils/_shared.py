"""Helpers shared by the Result and Option modules."""

import inspect
from typing import Any, Awaitable, TypeVar, Union

from .exceptions import PatternError

T = TypeVar("T")


async def resolve(value: Union[T, Awaitable[T]]) -> T:
    """Await value if it is awaitable, otherwise return it unchanged."""
    if inspect.isawaitable(value):
        return await value
    return value


def check_branches(**branches: Any) -> None:
    """Raise PatternError for the first match() branch that is not callable."""
    for name, func in branches.items():
        if not callable(func):
            raise PatternError(name, func)
