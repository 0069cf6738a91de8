"""Domain service: Product Resolution.

Decides what happens to a product whose stock could not simply be taken:
back-order it (delay notification), give up on it for the season
(out-of-stock notification, stock zeroed) or write it off as expired
(expiration notification, stock zeroed).

Every procedure persists the whole product record through the optimistic
``ProductRepository.update`` and notifies as a side effect.  Nothing here
catches persistence or notification errors — they abort the caller.
"""

from __future__ import annotations

import structlog

from orderflow.domain.clock import Clock, utc_now
from orderflow.domain.model.availability import (
    is_expired,
    lead_time_exceeds_season,
    season_not_started,
)
from orderflow.domain.model.product import Product
from orderflow.domain.model.resolution import ProductResolution, ResolutionReason
from orderflow.domain.notification.notification_port import NotificationPort
from orderflow.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class ProductResolutionService:

    def __init__(
        self,
        product_repo: ProductRepository,
        notifier: NotificationPort,
        clock: Clock = utc_now,
    ) -> None:
        self._product_repo = product_repo
        self._notifier = notifier
        self._clock = clock

    def notify_delay(self, lead_time: int, product: Product) -> ProductResolution:
        """Back-order a product: record its lead time and announce the delay.

        ``lead_time`` is written even when it equals the stored value.
        """
        expected = product.available
        product.lead_time = lead_time
        self._product_repo.update(product, expected_available=expected)

        logger.info(
            "Product back-ordered",
            product_id=product.id,
            product_name=product.name,
            lead_time=lead_time,
        )
        self._notifier.send_delay_notification(lead_time, product.name)
        return ProductResolution.deferred(product.id, ResolutionReason.BACK_ORDERED)

    def handle_seasonal_product(self, product: Product) -> ProductResolution:
        """Resolve a seasonal product that failed the in-season stock check.

        - No season on record: out of stock, nothing persisted.
        - Season not started yet, or restocking would finish after the
          season ends: out of stock, stock zeroed and persisted.
        - Otherwise: back-ordered with the product's current lead time.
        """
        if product.season_start_date is None or product.season_end_date is None:
            logger.info(
                "Seasonal product has no season on record",
                product_id=product.id,
                product_name=product.name,
            )
            self._notifier.send_out_of_stock_notification(product.name)
            return ProductResolution.deferred(
                product.id, ResolutionReason.SEASON_DATES_MISSING
            )

        now = self._clock()
        not_started = season_not_started(product, now)
        exceeded = lead_time_exceeds_season(product, now)

        if not (not_started or exceeded):
            return self.notify_delay(product.lead_time, product)

        reason = (
            ResolutionReason.SEASON_NOT_STARTED
            if not_started
            else ResolutionReason.LEAD_TIME_EXCEEDS_SEASON
        )
        logger.info(
            "Seasonal product out of stock",
            product_id=product.id,
            product_name=product.name,
            reason=reason.value,
        )
        self._notifier.send_out_of_stock_notification(product.name)

        expected = product.available
        product.mark_unavailable()
        self._product_repo.update(product, expected_available=expected)
        return ProductResolution.deferred(product.id, reason)

    def handle_expired_product(self, product: Product) -> ProductResolution:
        """Resolve an expirable product that failed the fresh stock check.

        A product without an expiry date is left untouched.  Otherwise a
        unit is taken if there is stock and it has not expired; if not,
        the stock is written off.  Either way the record is persisted.
        """
        if product.expiry_date is None:
            logger.debug(
                "Expirable product has no expiry date, ignoring",
                product_id=product.id,
            )
            return ProductResolution.skipped(
                product.id, ResolutionReason.EXPIRY_DATE_MISSING
            )

        expected = product.available
        if product.available > 0 and not is_expired(product, self._clock()):
            product.take_one()
            resolution = ProductResolution.fulfilled(product.id)
        else:
            logger.info(
                "Expirable product written off",
                product_id=product.id,
                product_name=product.name,
                expiry_date=product.expiry_date.isoformat(),
            )
            self._notifier.send_expiration_notification(
                product.name, product.expiry_date
            )
            product.mark_unavailable()
            resolution = ProductResolution.deferred(
                product.id, ResolutionReason.EXPIRED
            )

        self._product_repo.update(product, expected_available=expected)
        return resolution
