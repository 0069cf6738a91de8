"""CLI commands for the Product aggregate."""

from __future__ import annotations

from datetime import datetime, timezone

import click

from orderflow.application.add_product import AddProductHandler
from orderflow.application.list_products import ListProductsHandler
from orderflow.domain.exceptions import DomainException
from orderflow.domain.model.product import ProductType
from orderflow.infrastructure.bootstrap import product_repository


def _as_utc(value: datetime | None) -> datetime | None:
    """click.DateTime yields naive datetimes; dates on the CLI are UTC."""
    if value is None:
        return None
    return value.replace(tzinfo=timezone.utc)


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option(
    "--type",
    "type_name",
    required=True,
    type=click.Choice([t.value for t in ProductType], case_sensitive=False),
    help="Product type.",
)
@click.option("--available", default=0, type=int, help="Units in stock.")
@click.option("--lead-time", default=0, type=int, help="Days until restock.")
@click.option("--expiry-date", type=click.DateTime(), help="EXPIRABLE only (UTC).")
@click.option("--season-start", type=click.DateTime(), help="SEASONAL only (UTC).")
@click.option("--season-end", type=click.DateTime(), help="SEASONAL only (UTC).")
def product_add(
    name: str,
    type_name: str,
    available: int,
    lead_time: int,
    expiry_date: datetime | None,
    season_start: datetime | None,
    season_end: datetime | None,
) -> None:
    """Add a new product."""
    handler = AddProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(
            type_name=type_name,
            name=name,
            available=available,
            lead_time=lead_time,
            expiry_date=_as_utc(expiry_date),
            season_start_date=_as_utc(season_start),
            season_end_date=_as_utc(season_end),
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Product #{product.id} '{product.name}' added "
        f"({product.type}, {product.available} available)"
    )


@click.command("list")
def product_list() -> None:
    """List all products."""
    products = ListProductsHandler(product_repo=product_repository()).handle()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Type':<10} {'Available':>10} {'Lead time':>10}")
    click.echo("-" * 60)
    for p in products:
        click.echo(
            f"{p.id:<6} {p.name:<20} {p.type:<10} {p.available:>10} {p.lead_time:>10}"
        )
