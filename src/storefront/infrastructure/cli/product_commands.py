"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from storefront.application.add_product import AddProductHandler
from storefront.application.dto import RecurringScheduleSpec
from storefront.domain.exceptions import DomainException
from storefront.domain.model.product import RecurringCyclePeriod
from storefront.infrastructure.bootstrap import product_repository


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--no-shipping", is_flag=True, default=False, help="Product is not shipped (e.g. downloads).")
@click.option("--cycle-length", type=int, default=None, help="Make recurring: cycle length.")
@click.option(
    "--cycle-period",
    type=click.Choice([p.name for p in RecurringCyclePeriod], case_sensitive=False),
    default="DAYS",
    show_default=True,
    help="Recurring cycle period.",
)
@click.option("--total-cycles", type=int, default=10, show_default=True, help="Recurring total cycles.")
def product_add(
    name: str,
    price: str,
    no_shipping: bool,
    cycle_length: int | None,
    cycle_period: str,
    total_cycles: int,
) -> None:
    """Add a new product to the catalog.

    Passing --cycle-length makes the product recurring.
    """
    recurring = None
    if cycle_length is not None:
        recurring = RecurringScheduleSpec(
            cycle_length=cycle_length,
            cycle_period=cycle_period,
            total_cycles=total_cycles,
        )

    handler = AddProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(
            name=name, price=price, ship_enabled=not no_shipping, recurring=recurring
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' added at {product.price}")


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    repo = product_repository()
    products = repo.list_all()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>10}  {'Ship':<5} {'Recurring':<16}")
    click.echo("-" * 62)
    for p in products:
        schedule = (
            f"{p.recurring_cycle_length} {p.recurring_cycle_period.value} x{p.recurring_total_cycles}"
            if p.is_recurring
            else "-"
        )
        ship = "yes" if p.is_ship_enabled else "no"
        click.echo(f"{p.id:<6} {p.name:<20} {str(p.price):>10}  {ship:<5} {schedule:<16}")
