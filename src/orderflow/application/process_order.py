"""Application service: Process Order use case.

Loads an order, looks up each product it references (in the order they
were associated; a reference to a vanished product becomes ``None``) and
hands them to the OrderFulfillmentProcessor.

Deciding the response (status codes, JSON body) is left to the caller.
"""

from __future__ import annotations

from orderflow.application.dto import ProcessedOrderDTO, ProductResolutionDTO
from orderflow.domain.clock import Clock, utc_now
from orderflow.domain.exceptions import EntityNotFoundError
from orderflow.domain.notification.notification_port import NotificationPort
from orderflow.domain.repository.order_repository import OrderRepository
from orderflow.domain.repository.product_repository import ProductRepository
from orderflow.domain.service.order_fulfillment_processor import (
    OrderFulfillmentProcessor,
)
from orderflow.domain.service.product_resolution_service import (
    ProductResolutionService,
)


class ProcessOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
        notifier: NotificationPort,
        clock: Clock = utc_now,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo
        self._notifier = notifier
        self._clock = clock

    def handle(self, order_id: int) -> ProcessedOrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        # Lazy, so a product listed twice is re-read after its first write.
        products = (self._product_repo.get_by_id(pid) for pid in order.product_ids)

        svc = ProductResolutionService(self._product_repo, self._notifier, self._clock)
        processor = OrderFulfillmentProcessor(self._product_repo, svc, self._clock)
        resolutions = processor.process(products)

        return ProcessedOrderDTO(
            order_id=order.id,  # type: ignore[arg-type]
            resolutions=[
                ProductResolutionDTO(
                    product_id=r.product_id,
                    status=r.status.value,
                    reason=r.reason.value,
                )
                for r in resolutions
            ],
        )
