"""Order aggregate.

An order is nothing more than a set of product references.  Each entry in
``product_ids`` stands for demand of exactly one unit; the same product may
appear more than once, and an order may reference no products at all.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class Order:
    """Aggregate root for orders.

    Use the ``Order.create()`` factory for new orders.  The ``__init__`` is
    intentionally simple so the repository can reconstitute persisted
    orders as stored (an order may legitimately reference a product that
    has since disappeared).
    """

    id: int | None
    product_ids: list[int]
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(product_ids: list[int]) -> Order:
        """Create a new, not yet persisted order."""
        return Order(id=None, product_ids=list(product_ids))
