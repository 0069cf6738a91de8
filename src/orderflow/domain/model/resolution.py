"""Outcome of resolving one unit of demand for a product.

Every path through the processor ends in exactly one of these, including
the paths that do nothing at all, so callers can assert on what was
decided instead of on the absence of side effects.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ResolutionStatus(Enum):
    FULFILLED = "FULFILLED"
    DEFERRED = "DEFERRED"
    SKIPPED = "SKIPPED"


class ResolutionReason(Enum):
    # FULFILLED
    IN_STOCK = "IN_STOCK"
    # DEFERRED
    BACK_ORDERED = "BACK_ORDERED"
    SEASON_DATES_MISSING = "SEASON_DATES_MISSING"
    SEASON_NOT_STARTED = "SEASON_NOT_STARTED"
    LEAD_TIME_EXCEEDS_SEASON = "LEAD_TIME_EXCEEDS_SEASON"
    EXPIRED = "EXPIRED"
    # SKIPPED
    MISSING_PRODUCT = "MISSING_PRODUCT"
    UNKNOWN_TYPE = "UNKNOWN_TYPE"
    NO_LEAD_TIME = "NO_LEAD_TIME"
    EXPIRY_DATE_MISSING = "EXPIRY_DATE_MISSING"


@dataclass(frozen=True)
class ProductResolution:

    product_id: int | None
    status: ResolutionStatus
    reason: ResolutionReason

    @staticmethod
    def fulfilled(product_id: int | None) -> ProductResolution:
        return ProductResolution(
            product_id, ResolutionStatus.FULFILLED, ResolutionReason.IN_STOCK
        )

    @staticmethod
    def deferred(product_id: int | None, reason: ResolutionReason) -> ProductResolution:
        return ProductResolution(product_id, ResolutionStatus.DEFERRED, reason)

    @staticmethod
    def skipped(product_id: int | None, reason: ResolutionReason) -> ProductResolution:
        return ProductResolution(product_id, ResolutionStatus.SKIPPED, reason)
