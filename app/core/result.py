# app/core/result.py
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")

_MISSING: Any = object()


@dataclass(frozen=True)
class Result(Generic[T, E]):
    """
    Outcome of an operation that can fail in an expected way.

    Exactly one of ``value`` or ``error`` is set. Callers branch on
    ``is_ok`` / ``is_err`` instead of catching exceptions; unexpected
    failures are still raised.
    """

    _value: Any = _MISSING
    _error: Any = _MISSING

    @classmethod
    def ok(cls, value: T) -> "Result[T, E]":
        return cls(_value=value)

    @classmethod
    def err(cls, error: E) -> "Result[T, E]":
        return cls(_error=error)

    @property
    def is_ok(self) -> bool:
        return self._error is _MISSING

    @property
    def is_err(self) -> bool:
        return not self.is_ok

    @property
    def value(self) -> T:
        if self.is_err:
            raise ValueError(f"Called value on Result.err: {self._error!r}")
        return self._value

    @property
    def error(self) -> E:
        if self.is_ok:
            raise ValueError("Called error on Result.ok")
        return self._error
