"""NotificationPort that publishes notifications as structured log events.

Stands in for a real delivery channel (email, message queue); downstream
tooling can pick the events up from the log stream by name.
"""

from __future__ import annotations

from datetime import datetime

import structlog

from orderflow.domain.notification.notification_port import NotificationPort

logger = structlog.get_logger(__name__)


class LoggingNotifier(NotificationPort):

    def send_delay_notification(self, lead_time_days: int, product_name: str) -> None:
        logger.warning(
            "delay_notification",
            product_name=product_name,
            lead_time_days=lead_time_days,
        )

    def send_out_of_stock_notification(self, product_name: str) -> None:
        logger.warning("out_of_stock_notification", product_name=product_name)

    def send_expiration_notification(
        self, product_name: str, expiry_date: datetime
    ) -> None:
        logger.warning(
            "expiration_notification",
            product_name=product_name,
            expiry_date=expiry_date.isoformat(),
        )
