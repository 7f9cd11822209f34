"""
campus_coffee.domain.errors

Domain error variants for POS persistence.

Responsibilities:
- Describe the recoverable failures of the POS data port.
- Carry the lookup key or conflicting name for callers and API responses.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True, slots=True)
class PosNotFound:
    """No POS matched the given id or name."""

    key: int | str

    @property
    def message(self) -> str:
        if isinstance(self.key, int):
            return f"POS with ID {self.key} does not exist."
        return f"POS with name '{self.key}' does not exist."


@dataclass(frozen=True, slots=True)
class DuplicatePosName:
    """Persisting the POS would give two records the same name."""

    name: str

    @property
    def message(self) -> str:
        return f"POS with name '{self.name}' already exists."


PosError: TypeAlias = PosNotFound | DuplicatePosName


# --- Module Notes -----------------------------------------------------------
# These are plain values, not exceptions; see `domain.result` for how they are returned.
