"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from orderflow.domain.model.order import Order
from orderflow.domain.model.product import Product


@dataclass(frozen=True)
class ProductDTO:
    """Output: a product as displayed to the user."""

    id: int
    type: str
    name: str
    available: int
    lead_time: int
    expiry_date: str | None  # ISO 8601
    season_start_date: str | None
    season_end_date: str | None


@dataclass(frozen=True)
class OrderDTO:
    """Output: an order and the products it references."""

    id: int
    product_ids: list[int]
    created_at: str


@dataclass(frozen=True)
class ProductResolutionDTO:
    """Output: what happened to one product of a processed order."""

    product_id: int | None
    status: str
    reason: str


@dataclass(frozen=True)
class ProcessedOrderDTO:
    """Output: acknowledgment of a processed order."""

    order_id: int
    resolutions: list[ProductResolutionDTO]

    def to_json_dict(self, verbose: bool = False) -> dict:
        body: dict = {"orderId": self.order_id}
        if verbose:
            body["resolutions"] = [
                {"productId": r.product_id, "status": r.status, "reason": r.reason}
                for r in self.resolutions
            ]
        return body


# ---------------------------------------------------------------------------
# Mapping
# ---------------------------------------------------------------------------


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


def product_to_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,  # type: ignore[arg-type]
        type=product.type_name,
        name=product.name,
        available=product.available,
        lead_time=product.lead_time,
        expiry_date=_iso(product.expiry_date),
        season_start_date=_iso(product.season_start_date),
        season_end_date=_iso(product.season_end_date),
    )


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        product_ids=list(order.product_ids),
        created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
    )
