"""Result values: ``Ok`` on success, ``Err`` carrying the exception otherwise.

Event store operations return these instead of raising, so callers can
branch on the failure kind with ``match``::

    match store.load(invoice):
        case Ok():
            ...
        case Err(error=EventRetrievalFailedError() as error):
            log.warning("replay_failed", event_type=error.event_type)
"""

from __future__ import annotations

import dataclasses
from typing import Callable, Generic, NoReturn, TypeVar

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E", bound=Exception)


@dataclasses.dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        return self.value

    def unwrap_err(self) -> NoReturn:
        raise ValueError(f"called unwrap_err() on {self!r}")

    def map(self, func: Callable[[T], U]) -> Ok[U]:
        return Ok(func(self.value))


@dataclasses.dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """``unwrap()`` raises the carried error itself."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise self.error

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_err(self) -> E:
        return self.error

    def map(self, func: Callable[[T], U]) -> Err[E]:  # noqa: ARG002
        return self


type Result[T, E] = Ok[T] | Err[E]

__all__ = ["Err", "Ok", "Result"]
