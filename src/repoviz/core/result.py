"""
Result values for collaborator seams.

Fetching a listing or a file can fail for reasons outside the graph core
(network, auth, missing files). Sources return `Ok`/`Err` instead of raising
so a failed enrichment is an ordinary value the caller inspects, and the
session is only touched on success.
"""

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """A successful fetch carrying its payload."""
    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err(Generic[E]):
    """A failed fetch carrying a human-readable reason."""
    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self):
        raise ValueError(f"Called unwrap on Err: {self.error}")


Result = Union[Ok[T], Err[E]]


def map_ok(result: Result[T, E], func: Callable[[T], U]) -> Result[U, E]:
    """Run `func` on a fetched payload; an Err is returned as is."""
    if result.is_err():
        return result
    return Ok(func(result.unwrap()))
