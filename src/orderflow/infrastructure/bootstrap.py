"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import os
from pathlib import Path

from orderflow.infrastructure.notification.logging_notifier import LoggingNotifier
from orderflow.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from orderflow.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)

DATA_DIR_ENV = "ORDERFLOW_DATA_DIR"

# Default data directory, relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_dir() -> Path:
    override = os.environ.get(DATA_DIR_ENV)
    return Path(override) if override else _DEFAULT_DATA_DIR


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(data_dir() / "products.json")


def order_repository() -> JsonOrderRepository:
    return JsonOrderRepository(data_dir() / "orders.json")


def notifier() -> LoggingNotifier:
    return LoggingNotifier()
