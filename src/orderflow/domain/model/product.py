"""Product aggregate.

Products live independently of orders. The only state that changes while
an order is processed is the stock count (``available``) and, for back
orders, the ``lead_time``.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from orderflow.domain.exceptions import ValidationError


class ProductType(Enum):
    NORMAL = "NORMAL"
    SEASONAL = "SEASONAL"
    EXPIRABLE = "EXPIRABLE"


@dataclass
class Product:
    """A stocked product.

    Use the ``Product.create()`` factory for new products — it enforces the
    per-type field rules.  The ``__init__`` accepts any stored state so the
    repository can reconstitute records (including ones carrying a ``type``
    this version does not know, kept as the raw string).

    Invariants:
    - ``available`` is never negative
    - ``type`` never changes after creation
    """

    id: int | None
    type: ProductType | str
    name: str
    available: int = 0
    lead_time: int = 0  # days until restock
    expiry_date: datetime | None = None
    season_start_date: datetime | None = None
    season_end_date: datetime | None = None

    # --- Factory (used for NEW products only) ---------------------------------

    @staticmethod
    def create(
        type: ProductType,
        name: str,
        available: int = 0,
        lead_time: int = 0,
        expiry_date: datetime | None = None,
        season_start_date: datetime | None = None,
        season_end_date: datetime | None = None,
    ) -> Product:
        """Create a new product, enforcing all invariants."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        if available < 0:
            raise ValidationError("Available stock cannot be negative")
        if lead_time < 0:
            raise ValidationError("Lead time cannot be negative")

        has_season = season_start_date is not None or season_end_date is not None

        if type == ProductType.EXPIRABLE:
            if expiry_date is None:
                raise ValidationError("Expirable products require an expiry date")
            if has_season:
                raise ValidationError("Expirable products cannot have a season")
        elif type == ProductType.SEASONAL:
            if season_start_date is None or season_end_date is None:
                raise ValidationError(
                    "Seasonal products require both a season start and end date"
                )
            if season_start_date >= season_end_date:
                raise ValidationError("Season must start before it ends")
            if expiry_date is not None:
                raise ValidationError("Seasonal products cannot have an expiry date")
        elif expiry_date is not None or has_season:
            raise ValidationError("Normal products cannot have expiry or season dates")

        return Product(
            id=None,
            type=type,
            name=name.strip(),
            available=available,
            lead_time=lead_time,
            expiry_date=expiry_date,
            season_start_date=season_start_date,
            season_end_date=season_end_date,
        )

    # --- Stock mutations ------------------------------------------------------

    def take_one(self) -> None:
        """Take a single unit out of stock."""
        if self.available <= 0:
            raise ValidationError(f"No stock left for {self.name}")
        self.available -= 1

    def mark_unavailable(self) -> None:
        self.available = 0

    @property
    def type_name(self) -> str:
        return self.type.value if isinstance(self.type, ProductType) else str(self.type)
