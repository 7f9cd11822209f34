"""
campus_coffee.domain.models

Domain model for points of sale.

Responsibilities:
- Define the immutable `Pos` value object passed across layers.
- Define the enumerations describing a POS's kind and campus.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import datetime


class PosType(enum.StrEnum):
    # Enum values are stored in DB; treat as stable API contract.
    cafe = "CAFE"
    vending_machine = "VENDING_MACHINE"
    bakery = "BAKERY"
    cafeteria = "CAFETERIA"


class CampusType(enum.StrEnum):
    altstadt = "ALTSTADT"
    bergheim = "BERGHEIM"
    inf = "INF"


@dataclass(frozen=True, slots=True)
class Pos:
    """
    A point of sale.

    `id` is None until the record has been persisted. `created_at` and
    `updated_at` are assigned by the storage layer and ignored on input.
    """

    name: str
    description: str
    type: PosType
    campus: CampusType
    street: str
    house_number: str
    postal_code: int
    city: str

    id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


# --- Module Notes -----------------------------------------------------------
# `name` must be unique among persisted POS; the store enforces it via the
# database constraint, not by checking here.
