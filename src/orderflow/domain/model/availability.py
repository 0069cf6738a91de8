"""Availability rules, in two layers.

The fast-path checks are what the processor evaluates inline before doing
anything expensive.  The resolution checks are what the resolution service
evaluates once the fast path has failed.  The two layers deliberately use
different boundaries:

- the fast path needs ``start < now < end`` for a season, the resolution
  layer only looks at ``start > now`` and at whether the lead time runs
  past ``end``;
- the fast path needs ``expiry_date > now``, the resolution layer treats
  ``expiry_date <= now`` as expired.

Keep them separate so any change to either boundary is a visible decision.
"""

from __future__ import annotations

from datetime import datetime

from orderflow.domain.model.product import Product

SECONDS_PER_DAY = 24 * 60 * 60

# ---------------------------------------------------------------------------
# Fast path
# ---------------------------------------------------------------------------


def normal_in_stock(product: Product) -> bool:
    return product.available > 0


def seasonal_in_stock(product: Product, now: datetime) -> bool:
    return (
        product.season_start_date is not None
        and product.season_end_date is not None
        and product.season_start_date < now < product.season_end_date
        and product.available > 0
    )


def expirable_in_stock(product: Product, now: datetime) -> bool:
    return (
        product.available > 0
        and product.expiry_date is not None
        and product.expiry_date > now
    )


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------


def season_not_started(product: Product, now: datetime) -> bool:
    """True if the season starts in the future.

    The product must carry a season start date.
    """
    return product.season_start_date > now  # type: ignore[operator]


def lead_time_exceeds_season(product: Product, now: datetime) -> bool:
    """True if restocking would only complete after the season has ended.

    Also true for a season that is already over.  Compared in seconds so an
    arbitrarily long lead time cannot overflow the calendar.  The product
    must carry a season end date.
    """
    remaining = product.season_end_date - now  # type: ignore[operator]
    return remaining.total_seconds() < product.lead_time * SECONDS_PER_DAY


def is_expired(product: Product, now: datetime) -> bool:
    return product.expiry_date <= now  # type: ignore[operator]
