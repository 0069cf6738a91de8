"""Domain service: Order Fulfillment.

Walks the products of one order and resolves a single unit of demand for
each.  The common case (there is stock and nothing stops us from selling
it) is handled inline: one unit is taken and the product persisted,
without notifying anyone.  Anything else is handed to the
ProductResolutionService.

Products are processed one after another, each write completing before
the next product is looked at.  There is no transaction spanning the
order: if a write or a notification fails, the products already handled
stay handled and the rest are left untouched.
"""

from __future__ import annotations

from datetime import datetime
from typing import Iterable

import structlog

from orderflow.domain.clock import Clock, utc_now
from orderflow.domain.model.availability import (
    expirable_in_stock,
    normal_in_stock,
    seasonal_in_stock,
)
from orderflow.domain.model.product import Product, ProductType
from orderflow.domain.model.resolution import (
    ProductResolution,
    ResolutionReason,
    ResolutionStatus,
)
from orderflow.domain.repository.product_repository import ProductRepository
from orderflow.domain.service.product_resolution_service import (
    ProductResolutionService,
)

logger = structlog.get_logger(__name__)


class OrderFulfillmentProcessor:

    def __init__(
        self,
        product_repo: ProductRepository,
        resolution_service: ProductResolutionService,
        clock: Clock = utc_now,
    ) -> None:
        self._product_repo = product_repo
        self._resolution_service = resolution_service
        self._clock = clock
        self._handlers = {
            ProductType.NORMAL: self._handle_normal,
            ProductType.SEASONAL: self._handle_seasonal,
            ProductType.EXPIRABLE: self._handle_expirable,
        }

    def process(self, products: Iterable[Product | None]) -> list[ProductResolution]:
        """Resolve one unit for every product, in the given order.

        ``None`` entries (an order row whose product no longer exists) and
        products of an unknown type are skipped without side effects.
        """
        now = self._clock()
        resolutions: list[ProductResolution] = []

        for product in products:
            resolution = self._process_one(product, now)
            log = logger.info if resolution.status == ResolutionStatus.DEFERRED else logger.debug
            log(
                "Product resolved",
                product_id=resolution.product_id,
                status=resolution.status.value,
                reason=resolution.reason.value,
            )
            resolutions.append(resolution)

        return resolutions

    def _process_one(self, product: Product | None, now: datetime) -> ProductResolution:
        if product is None:
            return ProductResolution.skipped(None, ResolutionReason.MISSING_PRODUCT)

        handler = self._handlers.get(product.type)  # type: ignore[call-overload]
        if handler is None:
            return ProductResolution.skipped(product.id, ResolutionReason.UNKNOWN_TYPE)
        return handler(product, now)

    # --- Per-type handling ----------------------------------------------------

    def _handle_normal(self, product: Product, now: datetime) -> ProductResolution:
        if normal_in_stock(product):
            return self._take_one(product)
        if product.lead_time > 0:
            return self._resolution_service.notify_delay(product.lead_time, product)
        # TODO: confirm with the product owner whether an unstocked product
        # with no lead time should raise an out-of-stock notification.
        return ProductResolution.skipped(product.id, ResolutionReason.NO_LEAD_TIME)

    def _handle_seasonal(self, product: Product, now: datetime) -> ProductResolution:
        if seasonal_in_stock(product, now):
            return self._take_one(product)
        return self._resolution_service.handle_seasonal_product(product)

    def _handle_expirable(self, product: Product, now: datetime) -> ProductResolution:
        if expirable_in_stock(product, now):
            return self._take_one(product)
        return self._resolution_service.handle_expired_product(product)

    def _take_one(self, product: Product) -> ProductResolution:
        expected = product.available
        product.take_one()
        self._product_repo.update(product, expected_available=expected)
        return ProductResolution.fulfilled(product.id)
