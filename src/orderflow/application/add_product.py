"""Application service: Add Product use case."""

from __future__ import annotations

from datetime import datetime

from orderflow.application.dto import ProductDTO, product_to_dto
from orderflow.domain.exceptions import ValidationError
from orderflow.domain.model.product import Product, ProductType
from orderflow.domain.repository.product_repository import ProductRepository


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        type_name: str,
        name: str,
        available: int = 0,
        lead_time: int = 0,
        expiry_date: datetime | None = None,
        season_start_date: datetime | None = None,
        season_end_date: datetime | None = None,
    ) -> ProductDTO:
        """Add a new product."""
        try:
            product_type = ProductType(type_name.upper())
        except ValueError as exc:
            raise ValidationError(f"Unknown product type: {type_name!r}") from exc

        product = Product.create(
            type=product_type,
            name=name,
            available=available,
            lead_time=lead_time,
            expiry_date=expiry_date,
            season_start_date=season_start_date,
            season_end_date=season_end_date,
        )
        product = self._product_repo.add(product)
        return product_to_dto(product)
