"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import json
import threading
from datetime import datetime, timezone
from pathlib import Path

from orderflow.domain.exceptions import ConcurrentUpdateError, EntityNotFoundError
from orderflow.domain.model.product import Product, ProductType
from orderflow.domain.repository.product_repository import ProductRepository


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        # Makes the compare and the write in ``update`` atomic per process.
        self._lock = threading.Lock()
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: int) -> Product | None:
        for raw in self._load_raw():
            if raw["id"] == product_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Product]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def add(self, product: Product) -> Product:
        with self._lock:
            products = self._load_raw()
            product.id = max((p["id"] for p in products), default=0) + 1
            products.append(self._to_raw(product))
            self._persist_raw(products)
        return product

    def update(self, product: Product, expected_available: int) -> None:
        with self._lock:
            products = self._load_raw()
            for i, raw in enumerate(products):
                if raw["id"] != product.id:
                    continue
                if raw["available"] != expected_available:
                    raise ConcurrentUpdateError(
                        f"Product #{product.id} changed since it was read "
                        f"(expected {expected_available} available, "
                        f"found {raw['available']})"
                    )
                products[i] = self._to_raw(product)
                self._persist_raw(products)
                return
        raise EntityNotFoundError(f"Product #{product.id} not found")

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        def iso(value: datetime | None) -> str | None:
            return value.isoformat() if value is not None else None

        return {
            "id": product.id,
            "type": product.type_name,
            "name": product.name,
            "available": product.available,
            "lead_time": product.lead_time,
            "expiry_date": iso(product.expiry_date),
            "season_start_date": iso(product.season_start_date),
            "season_end_date": iso(product.season_end_date),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        def parse(value: str | None) -> datetime | None:
            if value is None:
                return None
            parsed = datetime.fromisoformat(value)
            if parsed.tzinfo is None:
                parsed = parsed.replace(tzinfo=timezone.utc)
            return parsed

        try:
            product_type: ProductType | str = ProductType(raw["type"])
        except ValueError:
            product_type = raw["type"]

        return Product(
            id=raw["id"],
            type=product_type,
            name=raw["name"],
            available=raw["available"],
            lead_time=raw.get("lead_time", 0),
            expiry_date=parse(raw.get("expiry_date")),
            season_start_date=parse(raw.get("season_start_date")),
            season_end_date=parse(raw.get("season_end_date")),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, products: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(products, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
