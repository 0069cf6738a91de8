"""Abstract notification channel.

The domain only ever tells the outside world about three things; how the
message travels (email, queue, log line) is an infrastructure concern.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime


class NotificationPort(ABC):

    @abstractmethod
    def send_delay_notification(self, lead_time_days: int, product_name: str) -> None:
        """A product is back-ordered and expected in ``lead_time_days``."""

    @abstractmethod
    def send_out_of_stock_notification(self, product_name: str) -> None:
        """A product cannot be supplied."""

    @abstractmethod
    def send_expiration_notification(
        self, product_name: str, expiry_date: datetime
    ) -> None:
        """A product's stock has expired."""
