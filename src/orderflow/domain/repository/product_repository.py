"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, SQL, in-memory)
live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from orderflow.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product."""

    @abstractmethod
    def add(self, product: Product) -> Product:
        """Persist a new product, assigning it the next free ID."""

    @abstractmethod
    def update(self, product: Product, expected_available: int) -> None:
        """Overwrite the stored record of an existing product.

        The write only happens if the stored ``available`` still equals
        ``expected_available``; otherwise ConcurrentUpdateError is raised
        and nothing is written.  Raises EntityNotFoundError for an unknown
        product.
        """
