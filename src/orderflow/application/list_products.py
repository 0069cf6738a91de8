"""Application service: List Products use case (query)."""

from __future__ import annotations

from orderflow.application.dto import ProductDTO, product_to_dto
from orderflow.domain.repository.product_repository import ProductRepository


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> list[ProductDTO]:
        products = sorted(self._product_repo.list_all(), key=lambda p: p.id or 0)
        return [product_to_dto(p) for p in products]
