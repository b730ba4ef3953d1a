"""CLI commands for gift cards."""

from __future__ import annotations

import click

from storefront.application.dto import GiftCardDTO
from storefront.application.gift_cards import (
    ActivateGiftCardHandler,
    ApplyGiftCardHandler,
    IssueGiftCardHandler,
    ListAppliedGiftCardsHandler,
    RemoveGiftCardHandler,
)
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import customer_repository, gift_card_repository


def _display_card(dto: GiftCardDTO) -> None:
    status = "active" if dto.is_activated else "inactive"
    click.echo(f"{dto.code:<15} {dto.amount:>10}  {status:<8} {dto.created_at}")


@click.command("issue")
@click.option("--amount", required=True, help="Gift card value (e.g. 25.00).")
def giftcard_issue(amount: str) -> None:
    """Issue a new (inactive) gift card."""
    handler = IssueGiftCardHandler(gift_card_repo=gift_card_repository())

    try:
        dto = handler.handle(amount)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Gift card {dto.code} issued for {dto.amount}")


def _set_activation(code: str, activate: bool) -> GiftCardDTO:
    handler = ActivateGiftCardHandler(gift_card_repo=gift_card_repository())
    try:
        return handler.handle(code, activate=activate)
    except DomainException as exc:
        raise click.ClickException(str(exc))


@click.command("activate")
@click.option("--code", required=True, help="Gift card code.")
def giftcard_activate(code: str) -> None:
    """Activate a gift card."""
    dto = _set_activation(code, activate=True)
    click.echo(f"Gift card {dto.code} activated.")


@click.command("deactivate")
@click.option("--code", required=True, help="Gift card code.")
def giftcard_deactivate(code: str) -> None:
    """Deactivate a gift card."""
    dto = _set_activation(code, activate=False)
    click.echo(f"Gift card {dto.code} deactivated.")


@click.command("apply")
@click.option("--customer", required=True, help="Customer ID.")
@click.option("--code", required=True, help="Gift card code.")
def giftcard_apply(customer: str, code: str) -> None:
    """Apply a gift card code for a customer."""
    handler = ApplyGiftCardHandler(
        customer_repo=customer_repository(),
        gift_card_repo=gift_card_repository(),
    )

    try:
        handler.handle(customer_id=customer, code=code)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Gift card {code} applied for {customer}.")


@click.command("remove")
@click.option("--customer", required=True, help="Customer ID.")
@click.option("--code", required=True, help="Gift card code.")
def giftcard_remove(customer: str, code: str) -> None:
    """Remove a gift card code a customer applied."""
    handler = RemoveGiftCardHandler(customer_repo=customer_repository())

    try:
        handler.handle(customer_id=customer, code=code)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Gift card {code} removed for {customer}.")


@click.command("applied")
@click.option("--customer", required=True, help="Customer ID.")
def giftcard_applied(customer: str) -> None:
    """List the active gift cards a customer has applied."""
    handler = ListAppliedGiftCardsHandler(
        customer_repo=customer_repository(),
        gift_card_repo=gift_card_repository(),
    )
    cards = handler.handle(customer)

    if not cards:
        click.echo("No active gift cards applied.")
        return

    for dto in cards:
        _display_card(dto)
