"""CLI commands for the Order aggregate."""

from __future__ import annotations

import json

import click

from orderflow.application.create_order import CreateOrderHandler
from orderflow.application.process_order import ProcessOrderHandler
from orderflow.application.show_order import ShowOrderHandler
from orderflow.domain.exceptions import DomainException
from orderflow.infrastructure.bootstrap import (
    notifier,
    order_repository,
    product_repository,
)


def _parse_product_ids(raw: str) -> list[int]:
    """Parse '1,2,2,5' into a list of product IDs ('' means no products)."""
    ids: list[int] = []
    for part in raw.split(","):
        part = part.strip()
        if not part:
            continue
        try:
            ids.append(int(part))
        except ValueError:
            raise click.BadParameter(f"Invalid product ID '{part}'.")
    return ids


@click.command("create")
@click.option("--products", required=True, help="Product IDs as '1,2,3'.")
def order_create(products: str) -> None:
    """Create a new order (one unit per listed product)."""
    product_ids = _parse_product_ids(products)

    handler = CreateOrderHandler(
        order_repo=order_repository(),
        product_repo=product_repository(),
    )

    try:
        dto = handler.handle(product_ids)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.id} created with {len(dto.product_ids)} product(s)")


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
def order_show(order_id: int) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.id}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo(f"Products: {', '.join(str(pid) for pid in dto.product_ids)}")


@click.command("process")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to process.")
@click.option("--verbose", is_flag=True, default=False, help="Include per-product outcomes.")
def order_process(order_id: int, verbose: bool) -> None:
    """Resolve stock for every product of an order.

    Prints a JSON acknowledgment.
    """
    handler = ProcessOrderHandler(
        order_repo=order_repository(),
        product_repo=product_repository(),
        notifier=notifier(),
    )

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(json.dumps(dto.to_json_dict(verbose=verbose)))
