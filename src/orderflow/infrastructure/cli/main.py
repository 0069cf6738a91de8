import click

from orderflow.infrastructure.cli.order_commands import (
    order_create,
    order_process,
    order_show,
)
from orderflow.infrastructure.cli.product_commands import product_add, product_list
from orderflow.infrastructure.logging_config import configure_logging


@click.group()
@click.option(
    "--log-level",
    default="WARNING",
    envvar="ORDERFLOW_LOG_LEVEL",
    show_default=True,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Minimum level of log events written to stderr.",
)
def cli(log_level: str) -> None:
    """orderflow — order fulfillment"""
    configure_logging(log_level)


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def product() -> None:
    """Manage products."""


# Register subcommands
order.add_command(order_create)
order.add_command(order_process)
order.add_command(order_show)
product.add_command(product_add)
product.add_command(product_list)
