"""Product entity for the catalog read/write example.

Products are added once and then only read back; nothing mutates them.
"""

from __future__ import annotations

from dataclasses import dataclass

from ims.domain.model.value_objects import Money


@dataclass(frozen=True)
class Product:
    """A catalog entry. Price validation lives in ``Money``."""

    id: int
    name: str
    price: Money
