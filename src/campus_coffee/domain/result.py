"""
campus_coffee.domain.result

Tagged result type returned by domain-facing operations.

Responsibilities:
- Carry either a value (`Ok`) or a recoverable domain error (`Err`).
- Let callers branch with `match` instead of catching exceptions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    error: E

    @property
    def ok(self) -> bool:
        return False


Result: TypeAlias = Ok[T] | Err[E]


# --- Module Notes -----------------------------------------------------------
# Storage failures that are not domain conditions are still raised; only
# recoverable outcomes travel through `Err`.
