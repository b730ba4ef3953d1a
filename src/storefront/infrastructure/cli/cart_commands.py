"""CLI commands for shopping carts."""

from __future__ import annotations

import click

from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.show_cart import ShowCartHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import (
    cart_repository,
    customer_repository,
    localization_service,
    product_repository,
)


@click.command("add")
@click.option("--customer", required=True, help="Customer ID.")
@click.option("--product", required=True, help="Product name.")
@click.option("--quantity", default=1, show_default=True, type=int, help="Quantity to add.")
def cart_add(customer: str, product: str, quantity: int) -> None:
    """Add a product to a customer's cart."""
    handler = AddToCartHandler(
        cart_repo=cart_repository(),
        product_repo=product_repository(),
        customer_repo=customer_repository(),
    )

    try:
        item = handler.handle(customer_id=customer, product_name=product, quantity=quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Added {item.quantity} x '{product}' to cart of {item.customer.id}")


@click.command("show")
@click.option("--customer", required=True, help="Customer ID.")
def cart_show(customer: str) -> None:
    """Show a customer's cart with shipping and recurring information."""
    handler = ShowCartHandler(
        cart_repo=cart_repository(),
        localization=localization_service(),
    )

    try:
        dto = handler.handle(customer)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not dto.lines:
        click.echo(f"Cart of {dto.customer_id} is empty.")
        return

    click.echo(f"Cart of {dto.customer_id}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5}  {'Ship':<5} {'Recurring':<9}")
    click.echo(f"  {'-'*42}")
    for line in dto.lines:
        click.echo(
            f"  {line.product_name:<20} {line.quantity:>5}  "
            f"{'yes' if line.shipping_enabled else 'no':<5} "
            f"{'yes' if line.recurring else 'no':<9}"
        )
    click.echo(f"  {'-'*42}")
    click.echo(f"  Total quantity:    {dto.total_quantity}")
    click.echo(f"  Shipping required: {'yes' if dto.shipping_required else 'no'}")

    if dto.schedule is not None:
        click.echo(
            f"  Recurring every {dto.schedule.cycle_length} "
            f"{dto.schedule.cycle_period.lower()}, {dto.schedule.total_cycles} cycles"
        )
    if dto.schedule_error:
        click.echo(f"  Warning: {dto.schedule_error}")
