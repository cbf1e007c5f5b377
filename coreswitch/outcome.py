"""
Tagged results for operations that degrade instead of raising.

Helpers raise ``CoreSwitchError`` subclasses; the public operations wrap them
with ``capture`` so callers always receive an ``Outcome`` and can inspect
why something failed.
"""
import dataclasses
from typing import Any, Callable, Generic, Optional, TypeVar

from coreswitch import errors

__all__ = ("Outcome", "capture", "first_success")

T = TypeVar("T")


@dataclasses.dataclass(frozen=True)
class Outcome(Generic[T]):
    value: Optional[T] = None
    error: Optional[errors.CoreSwitchError] = None
    reasons: tuple[errors.CoreSwitchError, ...] = ()

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T, *, reasons=()) -> "Outcome[T]":
        return cls(value=value, reasons=tuple(reasons))

    @classmethod
    def failure(cls, error: errors.CoreSwitchError, *, reasons=()) -> "Outcome[T]":
        return cls(error=error, reasons=tuple(reasons) or (error,))

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error

        return self.value


def capture(fn: Callable[..., T], *args: Any, **kwargs: Any) -> Outcome[T]:
    try:
        value = fn(*args, **kwargs)
    except errors.CoreSwitchError as error:
        return Outcome.failure(error)
    else:
        return Outcome.success(value)


def first_success(*attempts: Callable[[], Outcome[T]]) -> Outcome[T]:
    """
    Run each attempt in order and return the first that succeeds.

    Failed attempts before it are kept in ``reasons``. When every attempt
    fails, the last error is the outcome's error and ``reasons`` holds all of
    them in the order they happened.
    """
    failures: list[errors.CoreSwitchError] = []

    for attempt in attempts:
        result = attempt()

        if result.ok:
            return Outcome.success(result.value, reasons=failures)

        failures.extend(result.reasons)

    if not failures:
        raise ValueError("first_success() needs at least one attempt")

    return Outcome.failure(failures[-1], reasons=failures)
