"""Unit tests for the ProductResolutionService domain service."""

from datetime import datetime, timedelta, timezone

import pytest

from orderflow.domain.exceptions import ConcurrentUpdateError, EntityNotFoundError
from orderflow.domain.model.product import Product, ProductType
from orderflow.domain.model.resolution import (
    ProductResolution,
    ResolutionReason,
    ResolutionStatus,
)
from orderflow.domain.service.product_resolution_service import (
    ProductResolutionService,
)
from tests.fakes import FakeProductRepository, RecordingNotifier

NOW = datetime(2026, 6, 1, 12, 0, tzinfo=timezone.utc)
DAY = timedelta(days=1)


def _product(**overrides) -> Product:
    fields = dict(
        id=1, type=ProductType.NORMAL, name="Test Product",
        available=5, lead_time=10,
    )
    fields.update(overrides)
    return Product(**fields)


def _setup(product: Product):
    repo = FakeProductRepository([product])
    notifier = RecordingNotifier()
    svc = ProductResolutionService(repo, notifier, clock=lambda: NOW)
    return svc, repo, notifier


class TestNotifyDelay:

    def test_persists_lead_time_and_notifies(self):
        product = _product(available=0, lead_time=15)
        svc, repo, notifier = _setup(product)

        result = svc.notify_delay(product.lead_time, product)

        assert result == ProductResolution.deferred(1, ResolutionReason.BACK_ORDERED)
        assert notifier.sent == [("delay", 15, "Test Product")]
        assert repo.get_by_id(1) == product
        assert repo.update_calls == 1

    def test_overwrites_lead_time(self):
        product = _product(available=0, lead_time=15)
        svc, repo, notifier = _setup(product)

        svc.notify_delay(3, product)

        assert repo.get_by_id(1).lead_time == 3
        assert notifier.sent == [("delay", 3, "Test Product")]

    def test_persistence_happens_before_notification(self):
        product = _product(available=0)
        svc, repo, notifier = _setup(product)
        repo.remove(1)

        with pytest.raises(EntityNotFoundError):
            svc.notify_delay(10, product)
        assert notifier.sent == []


class TestHandleSeasonalProduct:

    def _seasonal(self, **overrides) -> Product:
        fields = dict(
            type=ProductType.SEASONAL, available=0, lead_time=5,
            season_start_date=NOW - 5 * DAY, season_end_date=NOW + 10 * DAY,
        )
        fields.update(overrides)
        return _product(**fields)

    def test_in_season_within_lead_time_is_back_ordered(self):
        product = self._seasonal()
        svc, repo, notifier = _setup(product)

        result = svc.handle_seasonal_product(product)

        assert result.reason == ResolutionReason.BACK_ORDERED
        assert notifier.sent == [("delay", 5, "Test Product")]

    def test_season_not_started(self):
        product = self._seasonal(
            available=4,
            season_start_date=NOW + 30 * DAY, season_end_date=NOW + 60 * DAY,
        )
        svc, repo, notifier = _setup(product)

        result = svc.handle_seasonal_product(product)

        assert result == ProductResolution.deferred(1, ResolutionReason.SEASON_NOT_STARTED)
        assert notifier.sent == [("out_of_stock", "Test Product")]
        assert repo.get_by_id(1).available == 0

    def test_lead_time_beyond_season_end(self):
        product = self._seasonal(lead_time=20)
        svc, repo, notifier = _setup(product)

        result = svc.handle_seasonal_product(product)

        assert result.reason == ResolutionReason.LEAD_TIME_EXCEEDS_SEASON
        assert notifier.sent == [("out_of_stock", "Test Product")]
        assert repo.get_by_id(1).available == 0

    def test_season_over(self):
        product = self._seasonal(
            available=3, lead_time=0,
            season_start_date=NOW - 60 * DAY, season_end_date=NOW - DAY,
        )
        svc, repo, notifier = _setup(product)

        result = svc.handle_seasonal_product(product)

        assert result.reason == ResolutionReason.LEAD_TIME_EXCEEDS_SEASON
        assert repo.get_by_id(1).available == 0

    def test_not_started_wins_over_lead_time(self):
        product = self._seasonal(
            lead_time=100,
            season_start_date=NOW + DAY, season_end_date=NOW + 2 * DAY,
        )
        svc, _, _ = _setup(product)

        assert svc.handle_seasonal_product(product).reason == ResolutionReason.SEASON_NOT_STARTED

    @pytest.mark.parametrize("missing", ["season_start_date", "season_end_date"])
    def test_missing_season_date(self, missing):
        product = self._seasonal(available=7, **{missing: None})
        svc, repo, notifier = _setup(product)

        result = svc.handle_seasonal_product(product)

        assert result == ProductResolution.deferred(1, ResolutionReason.SEASON_DATES_MISSING)
        assert notifier.sent == [("out_of_stock", "Test Product")]
        assert repo.get_by_id(1).available == 7
        assert repo.update_calls == 0


class TestHandleExpiredProduct:

    def _expirable(self, **overrides) -> Product:
        fields = dict(type=ProductType.EXPIRABLE, available=5, expiry_date=NOW - DAY)
        fields.update(overrides)
        return _product(**fields)

    def test_expired_product_written_off(self):
        product = self._expirable()
        svc, repo, notifier = _setup(product)

        result = svc.handle_expired_product(product)

        assert result == ProductResolution.deferred(1, ResolutionReason.EXPIRED)
        assert notifier.sent == [("expiration", "Test Product", NOW - DAY)]
        assert repo.get_by_id(1).available == 0

    def test_expiring_exactly_now_counts_as_expired(self):
        product = self._expirable(expiry_date=NOW)
        svc, repo, notifier = _setup(product)

        assert svc.handle_expired_product(product).reason == ResolutionReason.EXPIRED
        assert repo.get_by_id(1).available == 0

    def test_fresh_with_stock_takes_one(self):
        product = self._expirable(expiry_date=NOW + DAY)
        svc, repo, notifier = _setup(product)

        result = svc.handle_expired_product(product)

        assert result.status == ResolutionStatus.FULFILLED
        assert notifier.sent == []
        assert repo.get_by_id(1).available == 4

    def test_fresh_without_stock_is_written_off(self):
        product = self._expirable(available=0, expiry_date=NOW + DAY)
        svc, repo, notifier = _setup(product)

        result = svc.handle_expired_product(product)

        assert result.reason == ResolutionReason.EXPIRED
        assert notifier.sent == [("expiration", "Test Product", NOW + DAY)]
        assert repo.get_by_id(1).available == 0

    def test_missing_expiry_date_is_ignored(self):
        product = self._expirable(expiry_date=None)
        svc, repo, notifier = _setup(product)

        result = svc.handle_expired_product(product)

        assert result == ProductResolution.skipped(1, ResolutionReason.EXPIRY_DATE_MISSING)
        assert notifier.sent == []
        assert repo.update_calls == 0
        assert repo.get_by_id(1).available == 5


class TestOptimisticUpdate:

    def test_stale_product_is_not_written(self):
        product = _product(type=ProductType.EXPIRABLE, available=5, expiry_date=NOW + DAY)
        svc, repo, _ = _setup(product)

        # Another writer takes a unit after we read the product.
        other = repo.get_by_id(1)
        other.take_one()
        repo.update(other, expected_available=5)

        with pytest.raises(ConcurrentUpdateError):
            svc.handle_expired_product(product)
        assert repo.get_by_id(1).available == 4
