"""Application service: Create Order use case.

Every referenced product must exist when the order is created; it may
disappear later, which the order processor tolerates.
"""

from __future__ import annotations

from orderflow.application.dto import OrderDTO, order_to_dto
from orderflow.domain.exceptions import EntityNotFoundError
from orderflow.domain.model.order import Order
from orderflow.domain.repository.order_repository import OrderRepository
from orderflow.domain.repository.product_repository import ProductRepository


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo

    def handle(self, product_ids: list[int]) -> OrderDTO:
        for product_id in product_ids:
            if self._product_repo.get_by_id(product_id) is None:
                raise EntityNotFoundError(f"Product #{product_id} not found")

        order = Order.create(product_ids)
        self._order_repo.save(order)
        return order_to_dto(order)
