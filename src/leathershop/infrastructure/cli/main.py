import click

from leathershop.infrastructure.bootstrap import settings
from leathershop.infrastructure.cli.order_commands import (
    order_list,
    order_place,
    order_show,
    order_status,
)
from leathershop.infrastructure.cli.price_commands import price_history, price_set, price_show
from leathershop.infrastructure.cli.product_commands import product_add, product_list
from leathershop.infrastructure.cli.sequence_commands import sequence_next
from leathershop.infrastructure.cli.stock_commands import (
    stock_adjust,
    stock_create,
    stock_deactivate,
    stock_low,
    stock_set,
    stock_show,
    stock_update,
)
from leathershop.logging_config import configure_logging


@click.group()
def cli() -> None:
    """Leathershop: catalog, prices, stock and orders"""
    configure_logging(settings().log_level)


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def stock() -> None:
    """Manage stock."""


@cli.group()
def price() -> None:
    """Manage prices."""


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def sequence() -> None:
    """Mint ids."""


# Register subcommands
order.add_command(order_list)
order.add_command(order_place)
order.add_command(order_show)
order.add_command(order_status)
stock.add_command(stock_adjust)
stock.add_command(stock_create)
stock.add_command(stock_deactivate)
stock.add_command(stock_low)
stock.add_command(stock_set)
stock.add_command(stock_show)
stock.add_command(stock_update)
price.add_command(price_history)
price.add_command(price_set)
price.add_command(price_show)
product.add_command(product_add)
product.add_command(product_list)
sequence.add_command(sequence_next)
