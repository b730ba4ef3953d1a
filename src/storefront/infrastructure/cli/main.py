import click

from storefront.infrastructure.bootstrap import settings
from storefront.infrastructure.cli.cart_commands import cart_add, cart_show
from storefront.infrastructure.cli.gift_card_commands import (
    giftcard_activate,
    giftcard_applied,
    giftcard_apply,
    giftcard_deactivate,
    giftcard_issue,
    giftcard_remove,
)
from storefront.infrastructure.cli.product_commands import product_add, product_list
from storefront.infrastructure.logging_setup import configure_logging


@click.group()
def cli() -> None:
    """Storefront: carts, recurring products and gift cards"""
    configure_logging(settings())


@cli.group()
def product() -> None:
    """Manage the product catalog."""


@cli.group()
def cart() -> None:
    """Manage shopping carts."""


@cli.group()
def giftcard() -> None:
    """Manage gift cards."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_list)
cart.add_command(cart_add)
cart.add_command(cart_show)
giftcard.add_command(giftcard_issue)
giftcard.add_command(giftcard_activate)
giftcard.add_command(giftcard_deactivate)
giftcard.add_command(giftcard_apply)
giftcard.add_command(giftcard_applied)
giftcard.add_command(giftcard_remove)
